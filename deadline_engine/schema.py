"""Core data schema for lectures, assignments and the ranked feed."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from enum import Enum
from typing import Any, Mapping, Optional, Union


class TaskType(str, Enum):
    LECTURE = "lecture"
    ASSIGNMENT = "assignment"


class Invalid(Enum):
    """Marker for a deadline that could not be parsed."""

    DEADLINE = "invalid"

    def __repr__(self) -> str:
        return "INVALID"


INVALID = Invalid.DEADLINE

NormalizedDeadline = Union[datetime, Invalid]

_LECTURE_KEYS = {"courseName", "lecture_title", "deadline", "type"}
_ASSIGNMENT_KEYS = {"courseName", "title", "deadline", "type"}


def _extra_fields(record: Mapping[str, Any], known: set[str]) -> dict[str, Any]:
    return {key: value for key, value in record.items() if key not in known}


@dataclass(frozen=True)
class Lecture:
    """A lecture that has to be watched before its deadline."""

    course_name: str
    deadline: Optional[str]
    lecture_title: str
    extra: dict[str, Any] = field(default_factory=dict, compare=False)

    @property
    def type(self) -> TaskType:
        return TaskType.LECTURE

    @property
    def display_title(self) -> str:
        return self.lecture_title

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "Lecture":
        return cls(
            course_name=str(record.get("courseName") or ""),
            deadline=record.get("deadline"),
            lecture_title=str(record.get("lecture_title") or ""),
            extra=_extra_fields(record, _LECTURE_KEYS),
        )


@dataclass(frozen=True)
class Assignment:
    """An assignment that has to be submitted before its deadline."""

    course_name: str
    deadline: Optional[str]
    title: str
    extra: dict[str, Any] = field(default_factory=dict, compare=False)

    @property
    def type(self) -> TaskType:
        return TaskType.ASSIGNMENT

    @property
    def display_title(self) -> str:
        return self.title

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "Assignment":
        return cls(
            course_name=str(record.get("courseName") or ""),
            deadline=record.get("deadline"),
            title=str(record.get("title") or ""),
            extra=_extra_fields(record, _ASSIGNMENT_KEYS),
        )


Task = Union[Lecture, Assignment]


@dataclass(frozen=True)
class AnnotatedTask:
    """A task with its normalized deadline and countdown for one aggregation pass."""

    task: Task
    deadline_at: NormalizedDeadline
    time_remaining_ms: int

    @property
    def type(self) -> TaskType:
        return self.task.type

    @property
    def course_name(self) -> str:
        return self.task.course_name

    @property
    def title(self) -> str:
        return self.task.display_title

    @property
    def is_invalid(self) -> bool:
        return self.deadline_at is INVALID


class ReminderOffset(str, Enum):
    """Lead time before a deadline at which a reminder should fire."""

    H3 = "3h"
    H6 = "6h"
    H12 = "12h"
    D1 = "1d"
    D3 = "3d"

    @property
    def delta(self) -> timedelta:
        return _OFFSET_DELTAS[self]

    @property
    def milliseconds(self) -> int:
        return self.delta // timedelta(milliseconds=1)


_OFFSET_DELTAS = {
    ReminderOffset.H3: timedelta(hours=3),
    ReminderOffset.H6: timedelta(hours=6),
    ReminderOffset.H12: timedelta(hours=12),
    ReminderOffset.D1: timedelta(days=1),
    ReminderOffset.D3: timedelta(days=3),
}

DEFAULT_REMINDER_OFFSET = ReminderOffset.D3


@dataclass
class Snapshot:
    """Already-fetched task collections as handed over by the data layer."""

    lecture_groups: list[list[Any]]
    assignments: list[Any]
