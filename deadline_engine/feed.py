"""Notification feed rendering for the presentation layer."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Iterable, Optional

from deadline_engine.aggregate import aggregate
from deadline_engine.config import utc_now
from deadline_engine.countdown import format_remaining
from deadline_engine.messages import DEFAULT_LOCALE, phrases
from deadline_engine.metrics import summarize
from deadline_engine.reminders import reminder_due
from deadline_engine.schema import AnnotatedTask, ReminderOffset


@dataclass(frozen=True)
class FeedEntry:
    key: str
    title: str
    details: str
    remaining_text: str
    reminder_due: bool
    task: AnnotatedTask


@dataclass
class Feed:
    entries: list[FeedEntry]
    offset: ReminderOffset
    generated_at: datetime
    summary: dict = field(default_factory=dict)
    empty_message: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "generated_at": self.generated_at.isoformat(),
            "offset": self.offset.value,
            "entries": [
                {
                    "key": entry.key,
                    "type": entry.task.type.value,
                    "course_name": entry.task.course_name,
                    "title": entry.title,
                    "details": entry.details,
                    "time_remaining_ms": entry.task.time_remaining_ms,
                    "reminder_due": entry.reminder_due,
                }
                for entry in self.entries
            ],
            "summary": self.summary,
            "empty_message": self.empty_message,
        }


def render_entry(task: AnnotatedTask, index: int, offset: ReminderOffset, locale: str = DEFAULT_LOCALE) -> FeedEntry:
    table = phrases(locale)
    remaining_text = format_remaining(task.time_remaining_ms, locale)
    return FeedEntry(
        key=f"{task.type.value}-{index}",
        title=table["title"][task.type].format(course=task.course_name),
        details=table["details"][task.type].format(title=task.title, remaining=remaining_text),
        remaining_text=remaining_text,
        reminder_due=reminder_due(task, offset),
        task=task,
    )


def build_feed(
    lecture_groups: Iterable[Iterable[Any]],
    assignments: Iterable[Any],
    offset: ReminderOffset,
    now: Optional[datetime] = None,
    locale: str = DEFAULT_LOCALE,
) -> Feed:
    """Aggregate raw collections and render them as notification cards."""

    if now is None:
        now = utc_now()
    tasks = aggregate(lecture_groups, assignments, now)
    entries = [render_entry(task, index, offset, locale) for index, task in enumerate(tasks)]
    return Feed(
        entries=entries,
        offset=offset,
        generated_at=now,
        summary=summarize(tasks, offset),
        empty_message=None if entries else phrases(locale)["empty"],
    )
