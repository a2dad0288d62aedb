"""Render the ranked notification feed from a CSV/JSON task snapshot."""

from __future__ import annotations

import argparse
import json
import sys
from datetime import datetime
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from deadline_engine.adapters import csv_adapter, json_adapter
from deadline_engine.config import configure_logging, load_config
from deadline_engine.feed import build_feed
from deadline_engine.messages import LOCALES
from deadline_engine.reminders import parse_offset
from deadline_engine.schema import ReminderOffset


def _load_snapshot(path: Path):
    suffix = path.suffix.lower()
    if suffix == ".csv":
        return csv_adapter.parse(str(path))
    if suffix == ".json":
        return json_adapter.parse(str(path))
    raise ValueError("Unsupported input format, expected .csv or .json")


def main() -> None:
    config = load_config()
    parser = argparse.ArgumentParser(description="Render the deadline notification feed")
    parser.add_argument("--data", required=True, help="Path to CSV/JSON task snapshot")
    parser.add_argument(
        "--offset",
        default=config.default_offset.value,
        choices=[offset.value for offset in ReminderOffset],
        help="Reminder lead time",
    )
    parser.add_argument("--locale", default=config.locale, choices=list(LOCALES))
    parser.add_argument("--now", help="ISO-8601 instant to measure against (default: current time)")
    args = parser.parse_args()

    configure_logging(config.log_level)

    snapshot = _load_snapshot(Path(args.data))
    now = datetime.fromisoformat(args.now) if args.now else None
    feed = build_feed(
        snapshot.lecture_groups,
        snapshot.assignments,
        offset=parse_offset(args.offset),
        now=now,
        locale=args.locale,
    )
    print(json.dumps(feed.to_dict(), indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
