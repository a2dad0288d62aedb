"""User-facing phrase tables."""

from __future__ import annotations

from deadline_engine.schema import ReminderOffset, TaskType

DEFAULT_LOCALE = "en"

_PHRASES = {
    "en": {
        "passed": "deadline passed",
        "with_days": "{days} days {hours} hours {minutes} minutes remaining",
        "without_days": "{hours} hours {minutes} minutes remaining",
        "empty": "No notifications right now.",
        "title": {
            TaskType.LECTURE: "Lecture - {course}",
            TaskType.ASSIGNMENT: "Assignment - {course}",
        },
        "details": {
            TaskType.LECTURE: "{title} viewing: {remaining}",
            TaskType.ASSIGNMENT: "{title} submission: {remaining}",
        },
        "offsets": {
            ReminderOffset.H3: "3 hours before",
            ReminderOffset.H6: "6 hours before",
            ReminderOffset.H12: "12 hours before",
            ReminderOffset.D1: "1 day before",
            ReminderOffset.D3: "3 days before",
        },
    },
    "ko": {
        "passed": "기한이 지났습니다.",
        "with_days": "{days}일 {hours}시간 {minutes}분 남았습니다.",
        "without_days": "{hours}시간 {minutes}분 남았습니다.",
        "empty": "현재 알림이 없습니다.",
        "title": {
            TaskType.LECTURE: "강의 - {course}",
            TaskType.ASSIGNMENT: "과제 - {course}",
        },
        "details": {
            TaskType.LECTURE: "{title} 시청까지 {remaining}",
            TaskType.ASSIGNMENT: "{title} 제출까지 {remaining}",
        },
        "offsets": {
            ReminderOffset.H3: "3시간 전",
            ReminderOffset.H6: "6시간 전",
            ReminderOffset.H12: "12시간 전",
            ReminderOffset.D1: "1일 전",
            ReminderOffset.D3: "3일 전",
        },
    },
}

LOCALES = tuple(_PHRASES)


def phrases(locale: str) -> dict:
    try:
        return _PHRASES[locale]
    except KeyError:
        raise ValueError(f"Unsupported locale '{locale}', expected one of {list(LOCALES)}") from None


def offset_label(offset: ReminderOffset, locale: str = DEFAULT_LOCALE) -> str:
    return phrases(locale)["offsets"][offset]
