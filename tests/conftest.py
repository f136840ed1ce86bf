import datetime
import os

# Antes de importar o pacote: sem arquivo de log e fuso fixo nos testes.
os.environ["LOG_FILE"] = ""
os.environ["CALENDAR_TIMEZONE"] = "UTC"

import pytest
import pytz

from chrono.core.calendar_event import CalendarEvent
from chrono.utils.logger import logger


def make_event(title, start, minutes=60, **fields):
    """Cria um evento começando em `start` (datetime com fuso)."""
    return CalendarEvent(
        title=title,
        start_time=start,
        end_time=start + datetime.timedelta(minutes=minutes),
        **fields,
    )


def utc(*args):
    return datetime.datetime(*args, tzinfo=pytz.UTC)


@pytest.fixture
def log_messages():
    messages = []
    handler_id = logger.add(lambda message: messages.append(message.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)
