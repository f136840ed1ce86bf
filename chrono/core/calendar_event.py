import datetime # datatime é utilizado para manipular datas e horas.
import uuid # uuid é utilizado para gerar identificadores únicos.
from enum import Enum # Enum é utilizado para definir a paleta fechada de cores.
from typing import Optional # typing é utilizado para definir tipos de dados.
from pydantic import BaseModel, ConfigDict, Field, field_validator # pydantic é utilizado para definir modelos de dados.

from ..utils.timeutils import localize


class EventColor(str, Enum):
    """Paleta fechada de cores de evento."""

    BLUE = "BLUE"
    RED = "RED"
    GREEN = "GREEN"
    PURPLE = "PURPLE"
    ORANGE = "ORANGE"
    GRAY = "GRAY"

    @property
    def css_classes(self) -> str:
        return _CSS_CLASSES[self]

    @classmethod
    def from_suggestion(cls, token: Optional[str]) -> "EventColor":
        """Converte a sugestão do oráculo em cor; tokens desconhecidos caem na cor padrão (BLUE)."""
        if isinstance(token, str) and token.strip().upper() in cls.__members__:
            return cls[token.strip().upper()]
        return cls.BLUE


_CSS_CLASSES = {
    EventColor.BLUE: "bg-blue-100 text-blue-700 border-blue-200",
    EventColor.RED: "bg-red-100 text-red-700 border-red-200",
    EventColor.GREEN: "bg-green-100 text-green-700 border-green-200",
    EventColor.PURPLE: "bg-purple-100 text-purple-700 border-purple-200",
    EventColor.ORANGE: "bg-orange-100 text-orange-700 border-orange-200",
    EventColor.GRAY: "bg-gray-100 text-gray-700 border-gray-200",
}


def new_event_id() -> str:
    return str(uuid.uuid4())


class CalendarEvent(BaseModel):
    """
    Modelo para representar um evento do calendário.

    No JSON persistido os horários usam os nomes startTime/endTime.
    """

    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    id: str = Field(default_factory=new_event_id)
    title: str = Field(min_length=1)
    description: Optional[str] = None
    start_time: datetime.datetime = Field(alias="startTime")
    end_time: datetime.datetime = Field(alias="endTime")
    color: EventColor = EventColor.BLUE
    location: Optional[str] = None

    @field_validator("start_time", "end_time")
    @classmethod
    def _localize(cls, value: datetime.datetime) -> datetime.datetime:
        return localize(value)

    @field_validator("color", mode="before")
    @classmethod
    def _legacy_color(cls, value):
        # Dados antigos guardam a cor como a string de classes CSS.
        for color, classes in _CSS_CLASSES.items():
            if value == classes:
                return color
        return value


class DateGridItem(BaseModel):
    """Uma célula da grade mensal."""

    date: datetime.date
    is_current_month: bool
    is_today: bool


class AIMagicResponse(BaseModel):
    """Resposta bruta do oráculo para a entrada em linguagem natural."""

    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    title: str = Field(min_length=1)
    description: Optional[str] = None
    start_time: datetime.datetime = Field(alias="startTime")
    end_time: datetime.datetime = Field(alias="endTime")
    location: Optional[str] = None
    color_suggestion: Optional[str] = Field(default=None, alias="colorSuggestion")
