"""
Oráculo de linguagem natural baseado na API da OpenAI.

O oráculo recebe o texto do usuário e a data de referência e devolve o JSON
bruto do evento; toda a interpretação de datas fica a cargo do modelo.
"""

import datetime # datetime é utilizado para manipular datas e horas.
from typing import Optional, Protocol # Protocol define a interface do oráculo.
import pytz # pytz é utilizado para converter a data de referência para UTC.
from openai import AsyncOpenAI, OpenAIError # cliente assíncrono da OpenAI.
from ..core.exceptions import OracleError
from ..config.settings import config
from ..utils.logger import logger

COLOR_TOKENS = ["BLUE", "RED", "GREEN", "PURPLE", "ORANGE", "GRAY"]

SYSTEM_INSTRUCTION = (
    "You are a helpful calendar assistant. You extract event details from natural language. "
    "Always return valid JSON conforming to the schema. "
    "If the user does not specify a duration, default to 1 hour. "
    "If the user does not specify a date, assume the next future occurrence of that time/day "
    "relative to Current Date. "
    "Color suggestions should match the nature of the event and must be one of "
    f"{', '.join(COLOR_TOKENS)} (e.g., RED for urgent/work, GREEN for leisure, PURPLE for parties)."
)

RESPONSE_SCHEMA = {
    "type": "object",
    "properties": {
        "title": {"type": "string"},
        "description": {"type": "string"},
        "startTime": {"type": "string", "description": "ISO 8601 format"},
        "endTime": {"type": "string", "description": "ISO 8601 format"},
        "location": {"type": "string"},
        "colorSuggestion": {"type": "string", "enum": COLOR_TOKENS},
    },
    "required": ["title", "startTime", "endTime"],
}


class EventOracle(Protocol):
    """Interface do oráculo: texto + data de referência -> JSON bruto do evento."""

    async def interpret(self, text: str, reference_time: datetime.datetime) -> str:
        ...


def build_user_prompt(text: str, reference_time: datetime.datetime) -> str:
    """Monta a mensagem do usuário com a data de referência em UTC."""
    if reference_time.tzinfo is None:
        reference_time = pytz.UTC.localize(reference_time)
    now = reference_time.astimezone(pytz.UTC).isoformat().replace("+00:00", "Z")
    return f'Current Date/Time: {now}. User Request: "{text}". Create a calendar event JSON.'


class OpenAIOracle:
    """Implementação do oráculo usando chat completions com resposta em JSON schema."""

    def __init__(self, client: Optional[AsyncOpenAI] = None, model: Optional[str] = None):
        self.model = model or config.oracle.model
        self.client = client or AsyncOpenAI(
            api_key=config.oracle.api_key or None,
            base_url=config.oracle.base_url,
        )

    async def interpret(self, text: str, reference_time: datetime.datetime) -> str:
        messages = [
            {"role": "system", "content": SYSTEM_INSTRUCTION},
            {"role": "user", "content": build_user_prompt(text, reference_time)},
        ]
        logger.debug(f"Consultando o oráculo ({self.model}): {text!r}")

        try:
            response = await self.client.chat.completions.create(
                model=self.model,
                messages=messages,
                response_format={
                    "type": "json_schema",
                    "json_schema": {"name": "calendar_event", "schema": RESPONSE_SCHEMA},
                },
            )
        except OpenAIError as e:
            raise OracleError(f"Falha ao consultar o oráculo: {e}") from e

        if not response.choices or not response.choices[0].message.content:
            raise OracleError("O oráculo retornou uma resposta vazia")

        return response.choices[0].message.content
