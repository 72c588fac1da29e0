"""Calendar validation helpers (library-facing)."""

from __future__ import annotations

from typing import Any, List

from .errors import CalendarValidationError
from .model import Certainty
from .util.days import parse_date_yyyy_mm_dd

REQUIRED_FIELDS = ("title", "start", "end", "certainty")
CERTAINTY_VALUES = tuple(c.value for c in Certainty)


def _require(cond: bool, msg: str, errs: List[str]) -> None:
    if not cond:
        errs.append(msg)


def _is_date(v: Any) -> bool:
    if not isinstance(v, str):
        return False
    try:
        parse_date_yyyy_mm_dd(v)
    except ValueError:
        return False
    return True


def _is_utf8(s: str) -> bool:
    # json.loads accepts lone surrogate escapes such as "\ud800".
    try:
        s.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def validate_event(obj: Any, *, label: str) -> List[str]:
    if not isinstance(obj, dict):
        return [f"{label} must be an object"]

    errs: List[str] = []
    for k in REQUIRED_FIELDS:
        _require(k in obj, f"{label} missing field: {k}", errs)
    if errs:
        return errs

    title = obj["title"]
    _require(isinstance(title, str), f"{label}.title must be string", errs)
    _require(not isinstance(title, str) or _is_utf8(title), f"{label}.title must be valid UTF-8", errs)
    for k in ("start", "end"):
        _require(_is_date(obj[k]), f"{label}.{k} must be YYYY-MM-DD, got {obj[k]!r}", errs)
    _require(
        obj["certainty"] in CERTAINTY_VALUES,
        f"{label}.certainty must be one of {', '.join(CERTAINTY_VALUES)}, got {obj['certainty']!r}",
        errs,
    )
    return errs


def validate_calendar(obj: Any, *, label: str = "calendar") -> List[str]:
    """Return every problem found in decoded calendar JSON (empty list when valid)."""
    if not isinstance(obj, list):
        return [f"{label} must be a JSON array of events, got {type(obj).__name__}"]
    errs: List[str] = []
    for i, ev in enumerate(obj):
        errs.extend(validate_event(ev, label=f"{label}[{i}]"))
    return errs


def assert_valid_calendar(obj: Any) -> None:
    errs = validate_calendar(obj)
    if errs:
        raise CalendarValidationError(errs[0])


__all__ = [
    "CERTAINTY_VALUES",
    "REQUIRED_FIELDS",
    "assert_valid_calendar",
    "validate_calendar",
    "validate_event",
]
