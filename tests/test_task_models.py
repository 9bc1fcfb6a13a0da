# tests/test_task_models.py

from __future__ import annotations

from datetime import datetime

import pytest

from taskling.errors import DateFormatError, ValidationError
from taskling.tasks.task_models import (
    Deadline,
    Event,
    TaskKind,
    Todo,
    kind_of,
    parse_datetime,
    parse_record,
)


def test_parse_datetime_with_and_without_time() -> None:
    assert parse_datetime("2024-03-01 18:00") == datetime(2024, 3, 1, 18, 0)
    assert parse_datetime("2024-03-01") == datetime(2024, 3, 1, 0, 0)
    assert parse_datetime("  2024-03-01  ") == datetime(2024, 3, 1)


@pytest.mark.parametrize(
    "raw",
    ["", "tomorrow", "2024/03/01", "01-03-2024", "2024-3-1", "2024-03-01 6pm", "2024-02-30", "2024-03-01 25:00"],
)
def test_parse_datetime_rejects_other_shapes(raw: str) -> None:
    with pytest.raises(DateFormatError) as exc:
        parse_datetime(raw)
    assert "please enter a valid date time format" in str(exc.value)


def test_empty_description_is_rejected() -> None:
    with pytest.raises(ValidationError):
        Todo("   ")
    with pytest.raises(ValidationError):
        Deadline.create("", "2024-03-01")


def test_bad_date_is_rejected_at_construction() -> None:
    with pytest.raises(DateFormatError):
        Event.create("trip", "2024-03-01", "next week")


def test_mark_done_and_undone_are_idempotent() -> None:
    t = Todo("buy milk")
    assert t.done is False
    t.mark_done()
    t.mark_done()
    assert t.done is True
    t.mark_undone()
    t.mark_undone()
    assert t.done is False


def test_display_strings() -> None:
    todo = Todo("buy milk")
    dl = Deadline.create("submit report", "2024-03-01 18:00")
    ev = Event.create("trip", "2024-03-01", "2024-03-05")
    dl.mark_done()

    assert str(todo) == "[T][ ] buy milk"
    assert dl.to_display_string() == "[D][X] submit report (by: Fri 01 Mar 2024 06:00PM)"
    assert ev.to_display_string() == (
        "[E][ ] trip (from: Fri 01 Mar 2024 12:00AM to: Tue 05 Mar 2024 12:00AM)"
    )


def test_record_lines() -> None:
    assert Todo("buy milk").to_record_line() == "T,false,buy milk"
    assert (
        Deadline.create("report", "2024-03-01 18:00", done=True).to_record_line()
        == "D,true,report,2024-03-01 18:00"
    )
    assert (
        Event.create("trip", "2024-03-01", "2024-03-05 09:30").to_record_line()
        == "E,false,trip,2024-03-01 00:00/2024-03-05 09:30"
    )


def test_record_round_trip_preserves_state() -> None:
    tasks = [
        Todo("buy milk"),
        Todo("call mum, then dad", done=True),
        Deadline.create("report", "2024-03-01 18:00"),
        Event.create("conference, day one", "2024-03-01 09:00", "2024-03-01 17:00", done=True),
    ]
    for t in tasks:
        back = parse_record(t.to_record_line())
        assert back == t
        assert kind_of(back) == kind_of(t)


def test_parse_record_tolerates_legacy_spacing_and_missing_time() -> None:
    t = parse_record("D, TRUE, report, 2024-03-01")
    assert t == Deadline("report", datetime(2024, 3, 1), done=True)


def test_parse_record_unknown_kind_returns_none() -> None:
    assert parse_record("X,false,something") is None
    assert parse_record("") is None


def test_parse_record_known_kind_with_bad_fields_raises() -> None:
    with pytest.raises(ValidationError):
        parse_record("D,false,report")
    with pytest.raises(DateFormatError):
        parse_record("E,false,trip,2024-03-01")


def test_kind_tags() -> None:
    assert kind_of(Todo("a")) is TaskKind.TODO
    assert kind_of(Deadline.create("a", "2024-01-01")) is TaskKind.DEADLINE
    assert kind_of(Event.create("a", "2024-01-01", "2024-01-02")) is TaskKind.EVENT


def test_years_below_1000_are_zero_padded_in_records() -> None:
    dl = Deadline.create("x", "0999-01-01 10:00")
    assert dl.to_record_line() == "D,false,x,0999-01-01 10:00"
    assert parse_record(dl.to_record_line()) == dl

    ev = Event.create("y", "0042-02-03", "0999-12-31 23:59")
    assert ev.to_record_line() == "E,false,y,0042-02-03 00:00/0999-12-31 23:59"
    assert parse_record(ev.to_record_line()) == ev


def test_event_may_end_before_it_starts() -> None:
    ev = Event.create("backwards", "2024-03-05", "2024-03-01")
    assert ev.start > ev.end
    assert parse_record(ev.to_record_line()) == ev


def test_multiline_description_is_rejected() -> None:
    with pytest.raises(ValidationError):
        Todo("first\nsecond")
