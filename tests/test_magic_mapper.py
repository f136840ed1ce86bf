import asyncio
import datetime
import json

from chrono.core.calendar_event import EventColor
from chrono.core.exceptions import OracleError
from chrono.core.magic_mapper import MagicEventMapper
from conftest import utc

REFERENCE = utc(2024, 3, 4, 0, 0)


class ScriptedOracle:
    """Oráculo de teste que devolve respostas pré-definidas."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []

    async def interpret(self, text, reference_time):
        self.calls.append((text, reference_time))
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        if isinstance(response, dict):
            return json.dumps(response)
        return response


class BlockingOracle:
    def __init__(self, response):
        self.response = response
        self.release = asyncio.Event()
        self.calls = 0

    async def interpret(self, text, reference_time):
        self.calls += 1
        await self.release.wait()
        return json.dumps(self.response)


LUNCH = {
    "title": "Lunch",
    "startTime": "2024-03-05T13:00:00",
    "endTime": "2024-03-05T14:00:00",
    "colorSuggestion": "GREEN",
}


def test_lunch_tomorrow_at_one():
    oracle = ScriptedOracle(LUNCH)
    event = asyncio.run(MagicEventMapper(oracle).create_event("lunch tomorrow at 1pm", REFERENCE))

    assert oracle.calls == [("lunch tomorrow at 1pm", REFERENCE)]
    assert event.title == "Lunch"
    assert event.start_time.date() == datetime.date(2024, 3, 5)
    assert (event.start_time.hour, event.end_time.hour) == (13, 14)
    assert event.end_time - event.start_time == datetime.timedelta(hours=1)
    assert event.color is EventColor.GREEN
    assert event.id


def test_unknown_color_falls_back_to_blue():
    oracle = ScriptedOracle(dict(LUNCH, colorSuggestion="MAGENTA"))
    event = asyncio.run(MagicEventMapper(oracle).create_event("lunch", REFERENCE))
    assert event.color is EventColor.BLUE


def test_missing_color_and_optional_fields():
    oracle = ScriptedOracle({k: v for k, v in LUNCH.items() if k != "colorSuggestion"})
    event = asyncio.run(MagicEventMapper(oracle).create_event("lunch", REFERENCE))
    assert event.color is EventColor.BLUE
    assert event.description is None
    assert event.location is None


def test_description_and_location_are_carried_over():
    oracle = ScriptedOracle(dict(LUNCH, description="With Ana", location="Bistro"))
    event = asyncio.run(MagicEventMapper(oracle).create_event("lunch with Ana at the bistro", REFERENCE))
    assert event.description == "With Ana"
    assert event.location == "Bistro"


def test_end_before_start_uses_default_duration():
    oracle = ScriptedOracle(dict(LUNCH, endTime="2024-03-05T12:00:00"))
    event = asyncio.run(MagicEventMapper(oracle, default_duration_minutes=30).create_event("lunch", REFERENCE))
    assert event.end_time - event.start_time == datetime.timedelta(minutes=30)


def test_transport_failure_produces_no_event(log_messages):
    oracle = ScriptedOracle(OracleError("connection refused"))
    assert asyncio.run(MagicEventMapper(oracle).create_event("lunch", REFERENCE)) is None
    assert any("connection refused" in message for message in log_messages)


def test_unparseable_response_produces_no_event():
    mapper = MagicEventMapper(ScriptedOracle("not json", {"title": "No times"}, dict(LUNCH, title="")))
    for _ in range(3):
        assert asyncio.run(mapper.create_event("lunch", REFERENCE)) is None


def test_blank_input_does_not_call_the_oracle():
    oracle = ScriptedOracle()
    mapper = MagicEventMapper(oracle)
    assert asyncio.run(mapper.create_event("   ", REFERENCE)) is None
    assert oracle.calls == []


def test_interpret_returns_the_raw_response():
    response = asyncio.run(MagicEventMapper(ScriptedOracle(LUNCH)).interpret("lunch", REFERENCE))
    assert response.title == "Lunch"
    assert response.color_suggestion == "GREEN"


def test_duplicate_submission_is_refused_while_pending():
    async def scenario():
        oracle = BlockingOracle(LUNCH)
        mapper = MagicEventMapper(oracle)
        first = asyncio.create_task(mapper.create_event("lunch", REFERENCE))
        await asyncio.sleep(0)
        assert mapper.is_pending("lunch")

        duplicate = await mapper.create_event(" lunch ", REFERENCE)
        oracle.release.set()
        return oracle, mapper, await first, duplicate

    oracle, mapper, first, duplicate = asyncio.run(scenario())
    assert duplicate is None
    assert first is not None
    assert oracle.calls == 1
    assert not mapper.is_pending("lunch")


def test_pending_flag_clears_after_failure():
    mapper = MagicEventMapper(ScriptedOracle(OracleError("down"), LUNCH))
    assert asyncio.run(mapper.create_event("lunch", REFERENCE)) is None
    assert not mapper.is_pending("lunch")
    assert asyncio.run(mapper.create_event("lunch", REFERENCE)) is not None
