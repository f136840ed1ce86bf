import datetime # datetime é utilizado para manipular datas e horas.
from typing import List, Optional # typing é utilizado para definir tipos de dados.
from .calendar_event import CalendarEvent, new_event_id
from ..utils.timeutils import to_local
from ..utils.logger import logger


class EventStore:
    """
    Coleção ordenada de eventos em memória.

    A persistência é explícita: EventStore.load() lê a coleção uma vez e cada
    alteração grava a coleção inteira através do storage (quando existir).
    Se a gravação falhar, o erro é propagado e a coleção em memória não muda.
    """

    def __init__(self, events: Optional[List[CalendarEvent]] = None, storage=None):
        self._events: List[CalendarEvent] = list(events or [])
        self.storage = storage

    @classmethod
    def load(cls, storage) -> "EventStore":
        """Cria o store a partir dos eventos persistidos."""
        return cls(storage.load(), storage)

    def save(self):
        """Grava a coleção inteira no storage."""
        if self.storage is not None:
            self.storage.save(self._events)

    def _commit(self, events: List[CalendarEvent]):
        # Grava antes de trocar a lista em memória: se a gravação falhar, nada muda.
        if self.storage is not None:
            self.storage.save(events)
        self._events = events

    @property
    def events(self) -> List[CalendarEvent]:
        return list(self._events)

    def __len__(self):
        return len(self._events)

    def get_event(self, event_id: str) -> Optional[CalendarEvent]:
        for event in self._events:
            if event.id == event_id:
                return event
        return None

    def add_event(self, event: CalendarEvent) -> CalendarEvent:
        """Adiciona um evento ao final da coleção; identificadores repetidos são substituídos por um novo."""
        if self.get_event(event.id) is not None:
            logger.warning(f"Identificador já existente ({event.id}), gerando um novo")
            event = event.model_copy(update={"id": new_event_id()})

        self._commit(self._events + [event])
        logger.info(f"Evento criado: {event.title} (ID: {event.id})")
        return event

    def update_event(self, event: CalendarEvent) -> bool:
        """Substitui o registro com o mesmo identificador. Identificador desconhecido não altera nada."""
        for index, current in enumerate(self._events):
            if current.id == event.id:
                self._commit(self._events[:index] + [event] + self._events[index + 1:])
                logger.info(f"Evento atualizado: {event.title} (ID: {event.id})")
                return True

        logger.warning(f"Evento para atualizar não encontrado: {event.id}")
        return False

    def delete_event(self, event_id: str) -> bool:
        """Remove o evento com o identificador informado. Identificador desconhecido não altera nada."""
        for index, current in enumerate(self._events):
            if current.id == event_id:
                self._commit(self._events[:index] + self._events[index + 1:])
                logger.info(f"Evento excluído: {event_id}")
                return True

        logger.debug(f"Evento para excluir não encontrado: {event_id}")
        return False

    def events_for_day(self, day: datetime.date) -> List[CalendarEvent]:
        """Eventos que começam no dia informado (no fuso do calendário), em ordem de início."""
        matches = [event for event in self._events if to_local(event.start_time).date() == day]
        return sorted(matches, key=lambda event: event.start_time)
