"""CSV adapter for task snapshots."""

from __future__ import annotations

import csv

from deadline_engine.schema import Snapshot

_REQUIRED_FIELDS = ("kind", "courseName", "title", "deadline")
_VALID_KINDS = {"lecture", "assignment"}


def parse(file_path: str) -> Snapshot:
    """Parse CSV file into a task snapshot.

    Lecture rows are grouped by their ``group`` column in first-seen order.
    """

    with open(file_path, newline="", encoding="utf-8") as handle:
        reader = csv.DictReader(handle)
        if not reader.fieldnames:
            return Snapshot(lecture_groups=[], assignments=[])

        missing_columns = [name for name in _REQUIRED_FIELDS if name not in reader.fieldnames]
        if missing_columns:
            raise ValueError(f"Missing required columns {missing_columns}")

        groups: dict[str, list[dict]] = {}
        assignments: list[dict] = []
        for row_number, row in enumerate(reader, start=2):
            kind = (row.get("kind") or "").strip()
            if kind not in _VALID_KINDS:
                raise ValueError(f"Row {row_number}: invalid kind '{kind}'")

            course_name = (row.get("courseName") or "").strip()
            if not course_name:
                raise ValueError(f"Row {row_number}: missing courseName")

            title = (row.get("title") or "").strip()
            deadline = row.get("deadline") or None
            if kind == "lecture":
                group = (row.get("group") or "").strip()
                groups.setdefault(group, []).append(
                    {"courseName": course_name, "lecture_title": title, "deadline": deadline}
                )
            else:
                assignments.append({"courseName": course_name, "title": title, "deadline": deadline})

        return Snapshot(lecture_groups=list(groups.values()), assignments=assignments)
