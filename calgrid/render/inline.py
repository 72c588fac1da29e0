# calgrid/render/inline.py
from __future__ import annotations

import html
import json
import re

from ..layout import Grid, grid_to_dict
from .markup import build_body_markup
from .template import HTML_TEMPLATE, MARKERS

try:
    import orjson  # type: ignore
except Exception:  # pragma: no cover
    orjson = None  # type: ignore

_MARKER_RE = re.compile("|".join(re.escape(m) for m in MARKERS))


def _data_json(grid: Grid) -> str:
    data = grid_to_dict(grid)
    if orjson is not None:
        data_json = orjson.dumps(data).decode("utf-8")
    else:
        data_json = json.dumps(data, ensure_ascii=False, separators=(",", ":"))
    return data_json.replace("</", r"<\/")  # script-safe injection


def build_html(grid: Grid, *, title: str = "Calendar") -> str:
    # Hardening:
    #   - Template must contain each marker exactly once.
    #   - Markers are substituted in one pass, so marker text inside event titles stays literal.
    if not isinstance(grid, Grid):
        raise TypeError(f"grid must be Grid, got {type(grid).__name__}")

    for marker in MARKERS:
        n = HTML_TEMPLATE.count(marker)
        if n != 1:
            raise RuntimeError(f"HTML_TEMPLATE must contain {marker} exactly once (found {n})")

    values = {
        "__TITLE__": html.escape(title),
        "__BODY_MARKUP__": build_body_markup(grid, title=title),
        "__DATA_JSON__": _data_json(grid),
    }
    return _MARKER_RE.sub(lambda m: values[m.group(0)], HTML_TEMPLATE)
