# calgrid/palette.py
from __future__ import annotations

import re
from typing import Sequence, Tuple

DEFAULT_PALETTE: Tuple[str, ...] = (
    "#AAE9E5",
    "#87C7F1",
    "#FEB7D3",
    "#FFEDA9",
    "#EACFFF",
    "#DEE6C8",
    "#A8D0C6",
)

_HEX_RE = re.compile(r"^#[0-9A-Fa-f]{6}$")


def color_for_index(index: int, palette: Sequence[str] = DEFAULT_PALETTE) -> str:
    """Color of the `index`-th processed event (palette cycles)."""
    if not palette:
        raise ValueError("palette must contain at least one color")
    return palette[index % len(palette)]


def parse_palette(s: str) -> Tuple[str, ...]:
    """Parse a comma-separated list of #RRGGBB colors.

    Blank items are skipped; anything else that is not a hex color raises ValueError.
    """
    colors = []
    for part in s.split(","):
        item = part.strip()
        if not item:
            continue
        if not _HEX_RE.match(item):
            raise ValueError(f"Invalid color: {item!r} (expected #RRGGBB)")
        colors.append(item.upper())
    return tuple(colors)
