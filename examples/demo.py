"""Demo script for deadline-engine."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from deadline_engine.adapters.json_adapter import parse
from deadline_engine.feed import build_feed
from deadline_engine.reminders import ReminderOffsetSelector


def main() -> None:
    snapshot = parse(str(Path(__file__).with_name("sample_snapshot.json")))
    selector = ReminderOffsetSelector()
    selector.select("1d")

    feed = build_feed(snapshot.lecture_groups, snapshot.assignments, offset=selector.current())
    if feed.empty_message:
        print(feed.empty_message)
    for entry in feed.entries:
        marker = "*" if entry.reminder_due else " "
        print(f"{marker} {entry.title}: {entry.details}")
    print("Summary:", feed.summary)


if __name__ == "__main__":
    main()
