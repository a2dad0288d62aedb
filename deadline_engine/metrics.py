"""Notification feed summary metrics."""

from __future__ import annotations

import numpy as np

from deadline_engine.countdown import MS_PER_DAY, MS_PER_HOUR
from deadline_engine.reminders import reminder_due
from deadline_engine.schema import AnnotatedTask, ReminderOffset, TaskType

_LEAD_TIME_EDGES_MS = np.array([3 * MS_PER_HOUR, 6 * MS_PER_HOUR, 12 * MS_PER_HOUR, MS_PER_DAY, 3 * MS_PER_DAY])
_LEAD_TIME_LABELS = ("<3h", "3-6h", "6-12h", "12-24h", "1-3d", ">3d")


def lead_time_histogram(tasks: list[AnnotatedTask]) -> dict[str, int]:
    """Count upcoming tasks per lead-time bucket."""

    upcoming = np.asarray([task.time_remaining_ms for task in tasks if task.time_remaining_ms > 0], dtype=np.int64)
    # edges are right-inclusive: exactly 3h out counts as "<3h"
    buckets = np.digitize(upcoming, _LEAD_TIME_EDGES_MS, right=True)
    counts = np.bincount(buckets, minlength=len(_LEAD_TIME_LABELS))
    return {label: int(count) for label, count in zip(_LEAD_TIME_LABELS, counts)}


def summarize(tasks: list[AnnotatedTask], offset: ReminderOffset) -> dict:
    """Compute task counts, overdue and reminder-window metrics."""

    if not tasks:
        return {
            "total_tasks": 0,
            "lectures": 0,
            "assignments": 0,
            "overdue": 0,
            "unknown_deadline": 0,
            "due_within_offset": 0,
            "lead_time_histogram": {label: 0 for label in _LEAD_TIME_LABELS},
        }

    remaining = np.asarray([task.time_remaining_ms for task in tasks], dtype=np.int64)
    return {
        "total_tasks": len(tasks),
        "lectures": sum(1 for task in tasks if task.type is TaskType.LECTURE),
        "assignments": sum(1 for task in tasks if task.type is TaskType.ASSIGNMENT),
        "overdue": int(np.count_nonzero(remaining < 0)),
        "unknown_deadline": sum(1 for task in tasks if task.is_invalid),
        "due_within_offset": sum(1 for task in tasks if reminder_due(task, offset)),
        "lead_time_histogram": lead_time_histogram(tasks),
    }
