"""Deadline string repair and parsing.

Raw deadlines arrive in a few shapes: ``YYYY-MM-DD HH:mm:ss``, the year-less
``MM-DD HH:mm:ss`` and, occasionally, already strict ISO-8601 strings. Each
repair rule is a named stage so it can be exercised on its own; a stage only
touches text it recognises, which keeps ``normalize`` idempotent.
"""

from __future__ import annotations

import re
from datetime import datetime, timezone
from typing import Any, Callable, Optional

from deadline_engine.schema import INVALID, NormalizedDeadline

_YEARLESS_RE = re.compile(r"^\d{2}-\d{2}")

Stage = Callable[[str, int], str]


def inject_missing_year(text: str, year: int) -> str:
    """'MM-DD HH:mm:ss' -> 'YYYY-MM-DD HH:mm:ss'."""

    if _YEARLESS_RE.match(text):
        return f"{year}-{text}"
    return text


def force_utc_designator(text: str, year: int) -> str:
    """'YYYY-MM-DD HH:mm:ss' -> 'YYYY-MM-DDTHH:mm:ssZ'."""

    if " " in text:
        return text.replace(" ", "T", 1) + "Z"
    return text


NORMALIZATION_STAGES: tuple[Stage, ...] = (inject_missing_year, force_utc_designator)


def parse_instant(text: str) -> NormalizedDeadline:
    """Parse an ISO-8601 string into an aware UTC datetime, or INVALID."""

    try:
        parsed = datetime.fromisoformat(text)
        if parsed.tzinfo is None:
            return parsed.replace(tzinfo=timezone.utc)
        return parsed.astimezone(timezone.utc)
    except (ValueError, OverflowError):
        return INVALID


def repair(raw: str, year: int) -> str:
    """Run all repair stages and return the text that will be parsed."""

    text = raw
    for stage in NORMALIZATION_STAGES:
        text = stage(text, year)
    return text


def normalize(raw: Any, year: Optional[int] = None) -> NormalizedDeadline:
    """Turn a raw deadline into an absolute UTC instant.

    ``year`` is the calendar year injected into year-less deadlines; it
    defaults to the current UTC year. Anything that cannot be parsed comes
    back as ``INVALID`` instead of raising.
    """

    if not isinstance(raw, str) or not raw:
        return INVALID
    if year is None:
        year = datetime.now(timezone.utc).year
    return parse_instant(repair(raw, year))


def to_canonical(instant: datetime) -> str:
    """Render an instant as 'YYYY-MM-DDTHH:MM:SS[.ffffff]Z'."""

    return instant.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")
