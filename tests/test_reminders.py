from datetime import datetime, timedelta, timezone

import pytest

from deadline_engine.aggregate import aggregate
from deadline_engine.reminders import (
    InvalidReminderOffset,
    ReminderOffsetSelector,
    options,
    parse_offset,
    reminder_due,
    reminder_fire_at,
    tasks_in_reminder_window,
)
from deadline_engine.schema import ReminderOffset

NOW = datetime(2024, 12, 20, tzinfo=timezone.utc)


def test_default_is_three_days():
    assert ReminderOffsetSelector().current() is ReminderOffset.D3


def test_select_replaces_and_rejects_invalid():
    selector = ReminderOffsetSelector()
    selector.select("6시간 전")
    assert selector.current() is ReminderOffset.H6
    with pytest.raises(InvalidReminderOffset):
        selector.select("5h")
    with pytest.raises(ValueError):
        selector.select("2 days before")
    assert selector.current() is ReminderOffset.H6
    selector.select(ReminderOffset.H12)
    assert selector.current() is ReminderOffset.H12


def test_parse_offset_accepts_codes_and_labels():
    assert parse_offset("1d") is ReminderOffset.D1
    assert parse_offset("3 hours before") is ReminderOffset.H3
    with pytest.raises(InvalidReminderOffset):
        parse_offset(None)


def test_options_in_display_order():
    assert [label for _, label in options("ko")] == ["3시간 전", "6시간 전", "12시간 전", "1일 전", "3일 전"]


def test_offset_durations():
    assert ReminderOffset.H3.delta == timedelta(hours=3)
    assert ReminderOffset.D1.milliseconds == 86_400_000


def test_reminder_window():
    tasks = aggregate(
        [[{"courseName": "CS", "lecture_title": "soon", "deadline": "2024-12-20 05:00:00"}]],
        [
            {"courseName": "CS", "title": "later", "deadline": "2024-12-22 00:00:00"},
            {"courseName": "CS", "title": "past", "deadline": "2024-12-19 00:00:00"},
            {"courseName": "CS", "title": "broken", "deadline": "??"},
        ],
        NOW,
    )
    by_title = {task.title: task for task in tasks}
    assert reminder_due(by_title["soon"], ReminderOffset.H6)
    assert not reminder_due(by_title["soon"], ReminderOffset.H3)
    assert not reminder_due(by_title["past"], ReminderOffset.D3)
    assert not reminder_due(by_title["broken"], ReminderOffset.D3)
    assert [task.title for task in tasks_in_reminder_window(tasks, ReminderOffset.D3)] == ["soon", "later"]

    assert reminder_fire_at(by_title["later"], ReminderOffset.D1) == datetime(2024, 12, 21, tzinfo=timezone.utc)
    assert reminder_fire_at(by_title["broken"], ReminderOffset.D1) is None
