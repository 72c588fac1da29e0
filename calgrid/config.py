# calgrid/config.py
from __future__ import annotations

import os
from typing import Optional, Tuple

from .palette import DEFAULT_PALETTE, parse_palette
from .util.console import eprint, obs_enabled

DEFAULT_TITLE = "Calendar"


def palette_from_env(raw: Optional[str] = None) -> Tuple[str, ...]:
    """Palette from CALGRID_PALETTE (comma-separated #RRGGBB), else the default.

    Raises ValueError for malformed colors.
    """
    if raw is None:
        raw = os.getenv("CALGRID_PALETTE")
    if raw is None:
        return DEFAULT_PALETTE
    colors = parse_palette(raw)
    if not colors:
        if obs_enabled():
            eprint("[calgrid.config] WARN: CALGRID_PALETTE is set but empty; using default palette")
        return DEFAULT_PALETTE
    return colors


def title_from_env() -> str:
    s = (os.getenv("CALGRID_TITLE", "") or "").strip()
    return s or DEFAULT_TITLE
