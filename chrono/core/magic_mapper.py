import datetime # datetime é utilizado para manipular datas e horas.
from typing import Optional, Set # typing é utilizado para definir tipos de dados.
from pydantic import ValidationError
from .calendar_event import AIMagicResponse, CalendarEvent, EventColor
from .exceptions import OracleError
from ..config.settings import config
from ..utils.timeutils import localize
from ..utils.logger import logger


class MagicEventMapper:
    """
    Converte texto livre em um evento do calendário usando um oráculo externo.

    O mapper não interpreta datas: ele apenas valida a resposta do oráculo,
    aplica os valores padrão (cor e duração) e converte para CalendarEvent.
    """

    def __init__(self, oracle, default_duration_minutes: Optional[int] = None):
        self.oracle = oracle
        self.default_duration = datetime.timedelta(
            minutes=default_duration_minutes or config.calendar.default_event_duration_minutes
        )
        self._pending: Set[str] = set()

    def is_pending(self, text: str) -> bool:
        return text.strip() in self._pending

    async def interpret(self, text: str, reference_time: datetime.datetime) -> Optional[AIMagicResponse]:
        """Consulta o oráculo; retorna None se a interpretação falhar por qualquer motivo."""
        if not text or not text.strip():
            return None

        try:
            raw = await self.oracle.interpret(text, reference_time)
        except OracleError as e:
            logger.error(f"Oráculo indisponível: {e}")
            return None

        try:
            return AIMagicResponse.model_validate_json(raw)
        except ValidationError as e:
            logger.warning(f"Resposta do oráculo não reconhecida: {e}")
            return None

    def to_event(self, response: AIMagicResponse) -> CalendarEvent:
        """Converte a resposta do oráculo em um novo evento."""
        start_time = localize(response.start_time)
        end_time = localize(response.end_time)
        if end_time <= start_time:
            logger.warning(f"Horário de término inválido para '{response.title}', usando a duração padrão")
            end_time = start_time + self.default_duration

        return CalendarEvent(
            title=response.title,
            description=response.description,
            start_time=start_time,
            end_time=end_time,
            color=EventColor.from_suggestion(response.color_suggestion),
            location=response.location,
        )

    async def create_event(self, text: str, reference_time: datetime.datetime) -> Optional[CalendarEvent]:
        """
        Interpreta o texto e monta o evento.

        Enquanto uma consulta para o mesmo texto estiver pendente, novas
        submissões são recusadas (retornam None).
        """
        key = text.strip()
        if key in self._pending:
            logger.warning(f"Consulta já em andamento para: {key!r}")
            return None

        self._pending.add(key)
        try:
            response = await self.interpret(text, reference_time)
        finally:
            self._pending.discard(key)

        if response is None:
            logger.info(f"Não foi possível criar um evento a partir de: {key!r}")
            return None

        event = self.to_event(response)
        logger.info(f"Evento interpretado: {event.title} em {event.start_time.isoformat()}")
        return event
