"""calgrid Python package.

Public API:
  - import from `calgrid.api` (preferred) or `import calgrid` (re-export)
"""

from __future__ import annotations

from .api import *  # noqa: F401,F403
from . import api as _api

__all__ = list(_api.__all__)

from .api import (
    Event,
    Grid,
    build_grid,
    build_html,
    load_calendar,
    num_rows,
    rows_by_day,
)
