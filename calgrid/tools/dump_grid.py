#!/usr/bin/env python3
from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import List

from calgrid.calendar_file import load_calendar
from calgrid.config import palette_from_env
from calgrid.errors import CalgridError
from calgrid.layout import build_grid, grid_to_dict


def _die(msg: str, rc: int = 2) -> int:
    print(f"[calgrid-dump-grid] ERROR: {msg}", file=sys.stderr)
    return rc


def main(argv: List[str] | None = None) -> int:
    ap = argparse.ArgumentParser(
        prog="calgrid-dump-grid",
        description="Lay out a calendar JSON file and write the resulting grid as JSON.",
    )
    ap.add_argument("--in", dest="in_json", required=True, help="Input calendar JSON path")
    ap.add_argument("--out", default=None, help="Output JSON path (default: stdout)")
    ns = ap.parse_args(argv)

    try:
        palette = palette_from_env()
    except ValueError as e:
        return _die(f"Invalid CALGRID_PALETTE value: {e}")

    try:
        events = load_calendar(ns.in_json)
    except CalgridError as e:
        return _die(f"Failed to load calendar: {ns.in_json} ({e})")

    grid = build_grid(events, palette=palette)
    text = json.dumps(grid_to_dict(grid), ensure_ascii=False, indent=2, sort_keys=True) + "\n"

    if ns.out:
        out = Path(ns.out).expanduser()
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(text, encoding="utf-8", newline="\n")
        print(f"[calgrid-dump-grid] OK: {out}")
    else:
        sys.stdout.write(text)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
