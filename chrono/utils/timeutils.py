import datetime # datetime é utilizado para manipular datas e horas.
import pytz # pytz é uma biblioteca que fornece suporte para fusos horários.

from ..config.settings import config


def calendar_timezone():
    """Retorna o fuso horário configurado para o calendário."""
    return pytz.timezone(config.calendar.timezone)


def localize(dt: datetime.datetime) -> datetime.datetime:
    """Garante um datetime com fuso: horários sem fuso são tratados como horário local do calendário."""
    if dt.tzinfo is None:
        return calendar_timezone().localize(dt)
    return dt


def to_local(dt: datetime.datetime) -> datetime.datetime:
    """Converte um datetime para o fuso horário do calendário."""
    return localize(dt).astimezone(calendar_timezone())


def local_now() -> datetime.datetime:
    return datetime.datetime.now(calendar_timezone())


def local_today() -> datetime.date:
    return local_now().date()
