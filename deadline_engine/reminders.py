"""Reminder lead-time selection and its mapping onto the ranked timeline."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional, Union

from deadline_engine.messages import DEFAULT_LOCALE, LOCALES, offset_label
from deadline_engine.schema import DEFAULT_REMINDER_OFFSET, INVALID, AnnotatedTask, ReminderOffset

logger = logging.getLogger(__name__)


class InvalidReminderOffset(ValueError):
    """Raised when a reminder offset outside the fixed set is selected."""


def _lookup() -> dict[str, ReminderOffset]:
    table = {offset.value: offset for offset in ReminderOffset}
    for locale in LOCALES:
        for offset in ReminderOffset:
            table[offset_label(offset, locale)] = offset
    return table


_BY_NAME = _lookup()


def parse_offset(value: Union[ReminderOffset, str]) -> ReminderOffset:
    """Resolve a member, its code ('6h') or an exact label ('6시간 전')."""

    if isinstance(value, ReminderOffset):
        return value
    if isinstance(value, str) and value in _BY_NAME:
        return _BY_NAME[value]
    raise InvalidReminderOffset(f"Unknown reminder offset {value!r}, expected one of {[o.value for o in ReminderOffset]}")


def options(locale: str = DEFAULT_LOCALE) -> list[tuple[ReminderOffset, str]]:
    """Radio-group choices in display order."""

    return [(offset, offset_label(offset, locale)) for offset in ReminderOffset]


class ReminderOffsetSelector:
    """Single-slot store for the reminder offset chosen by the user."""

    def __init__(self, initial: ReminderOffset = DEFAULT_REMINDER_OFFSET) -> None:
        self._current = parse_offset(initial)

    def select(self, offset: Union[ReminderOffset, str]) -> None:
        resolved = parse_offset(offset)
        logger.debug("Reminder offset %s -> %s", self._current.value, resolved.value)
        self._current = resolved

    def current(self) -> ReminderOffset:
        return self._current


def reminder_fire_at(task: AnnotatedTask, offset: ReminderOffset) -> Optional[datetime]:
    """Instant at which the reminder for ``task`` should fire."""

    if task.deadline_at is INVALID:
        return None
    return task.deadline_at - offset.delta


def reminder_due(task: AnnotatedTask, offset: ReminderOffset) -> bool:
    """True once the reminder window has opened and the deadline is still ahead."""

    return 0 < task.time_remaining_ms <= offset.milliseconds


def tasks_in_reminder_window(tasks: list[AnnotatedTask], offset: ReminderOffset) -> list[AnnotatedTask]:
    return [task for task in tasks if reminder_due(task, offset)]
