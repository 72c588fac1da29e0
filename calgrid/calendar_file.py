# calgrid/calendar_file.py
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Union

from .errors import CalendarFileError, CalendarValidationError
from .model import Certainty, Event
from .util.days import parse_date_yyyy_mm_dd
from .validate import assert_valid_calendar

JsonPath = Union[str, Path]


def decode_event(obj: Dict[str, Any]) -> Event:
    # Expects an object that already passed validate_event.
    return Event(
        title=obj["title"],
        start=parse_date_yyyy_mm_dd(obj["start"]),
        end=parse_date_yyyy_mm_dd(obj["end"]),
        certainty=Certainty(obj["certainty"]),
    )


def decode_calendar(obj: Any) -> List[Event]:
    """Turn decoded calendar JSON into events, in file order.

    Raises CalendarValidationError describing the first problem found.
    """
    assert_valid_calendar(obj)
    return [decode_event(ev) for ev in obj]


def load_calendar_text(text: str) -> List[Event]:
    try:
        obj = json.loads(text)
    except (json.JSONDecodeError, RecursionError) as e:
        raise CalendarValidationError(f"not valid JSON: {e}") from e
    return decode_calendar(obj)


def load_calendar(path: JsonPath) -> List[Event]:
    p = Path(path)
    try:
        text = p.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise CalendarFileError(f"cannot read {p}: {e}") from e
    return load_calendar_text(text)


def dump_calendar(events: List[Event]) -> str:
    return json.dumps([e.to_dict() for e in events], ensure_ascii=False, indent=2) + "\n"


__all__ = [
    "decode_calendar",
    "decode_event",
    "dump_calendar",
    "load_calendar",
    "load_calendar_text",
]
