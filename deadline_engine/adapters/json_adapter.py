"""JSON adapter for task snapshots."""

from __future__ import annotations

import json

from deadline_engine.schema import Snapshot

_LECTURE_FIELDS = ("courseName", "lecture_title", "deadline")
_ASSIGNMENT_FIELDS = ("courseName", "title", "deadline")


def _check_record(item: object, required: tuple[str, ...], label: str) -> dict:
    if not isinstance(item, dict):
        raise ValueError(f"{label}: expected an object")
    missing = [name for name in required if name not in item]
    if missing:
        raise ValueError(f"{label}: missing required fields {missing}")
    return item


def parse_payload(payload: object) -> Snapshot:
    """Validate a decoded snapshot payload."""

    if not isinstance(payload, dict):
        raise ValueError("JSON payload must be an object with 'lectures' and 'assignments'")

    lectures = payload.get("lectures", [])
    assignments = payload.get("assignments", [])
    if not isinstance(lectures, list) or not all(isinstance(group, list) for group in lectures):
        raise ValueError("'lectures' must be a list of lists")
    if not isinstance(assignments, list):
        raise ValueError("'assignments' must be a list")

    lecture_groups = [
        [_check_record(item, _LECTURE_FIELDS, f"Lecture {g}.{i}") for i, item in enumerate(group, start=1)]
        for g, group in enumerate(lectures, start=1)
    ]
    checked = [_check_record(item, _ASSIGNMENT_FIELDS, f"Assignment {i}") for i, item in enumerate(assignments, start=1)]
    return Snapshot(lecture_groups=lecture_groups, assignments=checked)


def parse(file_path: str) -> Snapshot:
    """Parse JSON file into a task snapshot."""

    with open(file_path, encoding="utf-8") as handle:
        try:
            payload = json.load(handle)
        except json.JSONDecodeError as exc:
            raise ValueError(f"Malformed JSON: {exc}") from exc

    return parse_payload(payload)
