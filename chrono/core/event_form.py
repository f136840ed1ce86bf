import datetime # datetime é utilizado para manipular datas e horas.
from typing import Optional # typing é utilizado para definir tipos de dados.
from pydantic import BaseModel # pydantic é utilizado para definir modelos de dados.
from .calendar_event import CalendarEvent, EventColor
from .exceptions import EventFormError
from ..utils.timeutils import calendar_timezone, to_local

DEFAULT_START = "09:00"
DEFAULT_END = "10:00"


class EventForm(BaseModel):
    """Campos do formulário de criação/edição de evento (data e horários locais em texto)."""

    title: str = ""
    description: str = ""
    date: str
    start: str = DEFAULT_START
    end: str = DEFAULT_END
    color: EventColor = EventColor.BLUE

    @classmethod
    def for_new_event(cls, day: datetime.date) -> "EventForm":
        return cls(date=day.isoformat())

    @classmethod
    def from_event(cls, event: CalendarEvent) -> "EventForm":
        """Preenche o formulário a partir de um evento existente."""
        start = to_local(event.start_time)
        end = to_local(event.end_time)
        return cls(
            title=event.title,
            description=event.description or "",
            date=start.date().isoformat(),
            start=start.strftime("%H:%M"),
            end=end.strftime("%H:%M"),
            color=event.color,
        )

    def _combine(self, day: datetime.date, value: str) -> datetime.datetime:
        try:
            time = datetime.datetime.strptime(value, "%H:%M").time()
        except ValueError:
            raise EventFormError(f"Horário inválido: {value!r}")
        return calendar_timezone().localize(datetime.datetime.combine(day, time))

    def to_event(self, existing: Optional[CalendarEvent] = None) -> CalendarEvent:
        """
        Monta o evento a partir do formulário.

        Ao editar, o identificador (e o local) do evento existente são mantidos.
        """
        try:
            day = datetime.date.fromisoformat(self.date)
        except ValueError:
            raise EventFormError(f"Data inválida: {self.date!r}")

        if not self.title.strip():
            raise EventFormError("O título é obrigatório")

        fields = dict(
            title=self.title,
            description=self.description or None,
            start_time=self._combine(day, self.start),
            end_time=self._combine(day, self.end),
            color=self.color,
        )
        if existing is not None:
            fields.update(id=existing.id, location=existing.location)
        return CalendarEvent(**fields)
