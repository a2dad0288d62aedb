"""Merge lectures and assignments into one deadline-ranked timeline."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from datetime import datetime
from typing import Any

from deadline_engine.countdown import as_utc, remaining
from deadline_engine.normalize import normalize
from deadline_engine.schema import AnnotatedTask, Assignment, Lecture, Task

logger = logging.getLogger(__name__)


def as_lecture(item: Any) -> Lecture:
    if isinstance(item, Lecture):
        return item
    if isinstance(item, Assignment):
        return Lecture(item.course_name, item.deadline, item.title, dict(item.extra))
    if isinstance(item, Mapping):
        return Lecture.from_record(item)
    raise TypeError(f"Expected a lecture record, got {type(item).__name__}")


def as_assignment(item: Any) -> Assignment:
    if isinstance(item, Assignment):
        return item
    if isinstance(item, Lecture):
        return Assignment(item.course_name, item.deadline, item.lecture_title, dict(item.extra))
    if isinstance(item, Mapping):
        return Assignment.from_record(item)
    raise TypeError(f"Expected an assignment record, got {type(item).__name__}")


def flatten(lecture_groups: Iterable[Iterable[Any]]) -> list[Any]:
    """Flatten exactly one level of lecture grouping."""

    return [lecture for group in lecture_groups for lecture in group]


def count_tasks(lecture_groups: Sequence[Sequence[Any]], assignments: Sequence[Any]) -> int:
    """Total task count; sized collections only, so nothing is consumed."""

    if not isinstance(lecture_groups, Sequence) or not isinstance(assignments, Sequence):
        raise TypeError("count_tasks expects sequences, not one-shot iterables")
    return sum(len(group) for group in lecture_groups) + len(assignments)


def annotate(task: Task, now: datetime) -> AnnotatedTask:
    deadline_at = normalize(task.deadline, year=now.year)
    return AnnotatedTask(task=task, deadline_at=deadline_at, time_remaining_ms=remaining(deadline_at, now))


def aggregate(
    lecture_groups: Iterable[Iterable[Any]],
    assignments: Iterable[Any],
    now: datetime,
) -> list[AnnotatedTask]:
    """Rank every lecture and assignment by time remaining, soonest first.

    All tasks are measured against the same ``now``; ties keep input order
    (lectures before assignments).
    """

    now = as_utc(now)
    tasks: list[Task] = [as_lecture(item) for item in flatten(lecture_groups)]
    tasks.extend(as_assignment(item) for item in assignments)

    annotated = [annotate(task, now) for task in tasks]
    logger.debug("Aggregated %d tasks at %s", len(annotated), now.isoformat())
    return sorted(annotated, key=lambda item: item.time_remaining_ms)
