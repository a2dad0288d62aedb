"""Remaining-time computation and display phrases."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone

from deadline_engine.messages import DEFAULT_LOCALE, phrases
from deadline_engine.schema import INVALID, NormalizedDeadline

logger = logging.getLogger(__name__)

MS_PER_DAY = 86_400_000
MS_PER_HOUR = 3_600_000
MS_PER_MINUTE = 60_000

_ONE_MS = timedelta(milliseconds=1)


def as_utc(moment: datetime) -> datetime:
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)


def remaining(deadline: NormalizedDeadline, now: datetime) -> int:
    """Signed milliseconds from ``now`` until ``deadline``.

    An INVALID deadline counts as due now (0) so the task still shows up in
    the feed.
    """

    if deadline is INVALID:
        logger.warning("Invalid deadline, treating as due now")
        return 0
    return (as_utc(deadline) - as_utc(now)) // _ONE_MS


def decompose(remaining_ms: int) -> tuple[int, int, int]:
    """Split milliseconds into whole (days, hours, minutes)."""

    if remaining_ms <= 0:
        return 0, 0, 0
    days = remaining_ms // MS_PER_DAY
    hours = (remaining_ms % MS_PER_DAY) // MS_PER_HOUR
    minutes = (remaining_ms % MS_PER_HOUR) // MS_PER_MINUTE
    return days, hours, minutes


def format_remaining(remaining_ms: int, locale: str = DEFAULT_LOCALE) -> str:
    """Human-readable countdown, e.g. '5 days 10 hours 0 minutes remaining'."""

    table = phrases(locale)
    if remaining_ms <= 0:
        return table["passed"]
    days, hours, minutes = decompose(remaining_ms)
    if days > 0:
        return table["with_days"].format(days=days, hours=hours, minutes=minutes)
    return table["without_days"].format(hours=hours, minutes=minutes)
