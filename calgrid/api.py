"""calgrid.api

Stable *library* entrypoint for calgrid.

Policy:
  - Only names listed in __all__ are considered public API.
  - Everything else is internal and may change without notice.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Sequence, Union

from calgrid.calendar_file import decode_calendar, load_calendar, load_calendar_text
from calgrid.errors import CalendarFileError, CalendarValidationError, CalgridError
from calgrid.layout import Grid, build_grid, grid_to_dict, num_rows, rows_by_day
from calgrid.model import Certainty, DayRow, Event, RowEntry
from calgrid.palette import DEFAULT_PALETTE, color_for_index
from calgrid.render.inline import build_html
from calgrid.validate import assert_valid_calendar, validate_calendar

JsonPath = Union[str, Path]


def render_calendar_file(
    path: JsonPath,
    *,
    palette: Sequence[str] = DEFAULT_PALETTE,
    title: Optional[str] = None,
) -> str:
    """Load a calendar JSON file, lay it out and return the HTML page."""
    events: List[Event] = load_calendar(path)
    grid = build_grid(events, palette=palette)
    return build_html(grid, title=title or "Calendar")


__all__ = [
    "Certainty",
    "Event",
    "RowEntry",
    "DayRow",
    "Grid",
    "DEFAULT_PALETTE",
    "CalgridError",
    "CalendarFileError",
    "CalendarValidationError",
    "assert_valid_calendar",
    "build_grid",
    "build_html",
    "color_for_index",
    "decode_calendar",
    "grid_to_dict",
    "load_calendar",
    "load_calendar_text",
    "num_rows",
    "render_calendar_file",
    "rows_by_day",
    "validate_calendar",
]
