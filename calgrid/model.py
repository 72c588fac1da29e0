# calgrid/model.py
from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, NamedTuple, Optional, Tuple


class Certainty(Enum):
    SURE = "Sure"
    POSSIBLE = "Possible"


@dataclass(frozen=True)
class Event:
    title: str
    start: dt.date
    end: dt.date
    certainty: Certainty = Certainty.SURE

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "start": self.start.isoformat(),
            "end": self.end.isoformat(),
            "certainty": self.certainty.value,
        }


@dataclass(frozen=True)
class RowEntry:
    is_first_day: bool
    color: str
    event: Event

    def to_dict(self) -> Dict[str, Any]:
        return {
            "is_first_day": self.is_first_day,
            "color": self.color,
            "event": self.event.to_dict(),
        }


class DayRow(NamedTuple):
    day: dt.date
    active_count: int
    cells: Tuple[Optional[RowEntry], ...]


__all__ = [
    "Certainty",
    "Event",
    "RowEntry",
    "DayRow",
]
