# calgrid/layout.py
from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Sequence, Tuple

from .model import DayRow, Event, RowEntry
from .palette import DEFAULT_PALETTE, color_for_index
from .util.console import eprint, obs_enabled
from .util.days import iter_days

Row = Mapping[dt.date, RowEntry]


@dataclass(frozen=True)
class Grid:
    """Rows of non-overlapping events plus the last covered day.

    Built by `build_grid`; rows are read-only mappings ordered by date.
    """

    rows: Tuple[Row, ...]
    last_day: Optional[dt.date]

    def num_rows(self) -> int:
        return len(self.rows)

    def first_day(self) -> Optional[dt.date]:
        # Row 0 is filled first, so its earliest key is the earliest day overall.
        if not self.rows:
            return None
        return next(iter(self.rows[0]), None)

    def rows_by_day(self) -> Iterator[DayRow]:
        """Yield (day, active_count, cells) for each day from the first occupied day to last_day.

        Every call returns a fresh generator over the same days.
        """
        first = self.first_day()
        last = self.last_day
        if first is None or last is None:
            return
        for day in iter_days(first, last):
            cells = tuple(row.get(day) for row in self.rows)
            active = sum(1 for c in cells if c is not None)
            yield DayRow(day, active, cells)


class _GridBuilder:
    def __init__(self) -> None:
        self.rows: List[Dict[dt.date, RowEntry]] = []
        self.last_day: Optional[dt.date] = None

    def find_free_row(self, day: dt.date) -> Dict[dt.date, RowEntry]:
        # First-fit: only the start day is checked.
        for row in self.rows:
            if day not in row:
                return row
        new_row: Dict[dt.date, RowEntry] = {}
        self.rows.append(new_row)
        return new_row

    def insert_event_chronological(self, event: Event, color: str) -> int:
        row = self.find_free_row(event.start)
        placed = 0
        for day in iter_days(event.start, event.end):
            row[day] = RowEntry(is_first_day=(day == event.start), color=color, event=event)
            placed += 1

        if self.last_day is None or event.end > self.last_day:
            self.last_day = event.end
        return placed

    def freeze(self) -> Grid:
        rows = tuple(MappingProxyType(dict(sorted(r.items()))) for r in self.rows)
        return Grid(rows=rows, last_day=self.last_day)


def build_grid(events: Iterable[Event], *, palette: Sequence[str] = DEFAULT_PALETTE) -> Grid:
    """Lay out `events` into rows so that no row holds two events on the same day.

    Events are processed by start date (stable for ties); the i-th processed
    event is colored `palette[i % len(palette)]` and placed in the first row
    that is free on its start day, a new row being appended when none is.
    Events whose end precedes their start occupy no days but still count
    towards `last_day`.
    """
    if not palette:
        raise ValueError("palette must contain at least one color")

    ordered = sorted(events, key=lambda e: e.start)
    builder = _GridBuilder()
    obs = obs_enabled()

    for i, event in enumerate(ordered):
        placed = builder.insert_event_chronological(event, color_for_index(i, palette))
        if obs and placed == 0:
            eprint(
                f"[calgrid.layout] WARN: event dropped (end before start) "
                f"title={event.title!r} start={event.start.isoformat()} end={event.end.isoformat()}"
            )

    grid = builder.freeze()
    if obs:
        eprint(f"[calgrid.layout] INFO: placed {len(ordered)} events into {grid.num_rows()} rows")
    return grid


def num_rows(grid: Grid) -> int:
    return grid.num_rows()


def rows_by_day(grid: Grid) -> Iterator[DayRow]:
    return grid.rows_by_day()


def grid_to_dict(grid: Grid) -> Dict[str, Any]:
    """JSON-ready form of a grid (dates as YYYY-MM-DD strings)."""
    return {
        "rows": [
            {day.isoformat(): entry.to_dict() for day, entry in row.items()}
            for row in grid.rows
        ],
        "last_day": grid.last_day.isoformat() if grid.last_day is not None else None,
    }


__all__ = [
    "Grid",
    "Row",
    "build_grid",
    "grid_to_dict",
    "num_rows",
    "rows_by_day",
]
