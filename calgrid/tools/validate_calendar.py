#!/usr/bin/env python3
from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import List

from calgrid.validate import validate_calendar


def _die(msg: str, rc: int = 2) -> int:
    print(f"[calgrid-validate] ERROR: {msg}", file=sys.stderr)
    return rc


def main(argv: List[str] | None = None) -> int:
    ap = argparse.ArgumentParser(
        prog="calgrid-validate",
        description="Check that a calendar JSON file lists events with title, start, end and certainty.",
    )
    ap.add_argument("--in", dest="in_json", required=True, help="Input calendar JSON path")
    ns = ap.parse_args(argv)

    p = Path(ns.in_json)
    if not p.exists():
        return _die(f"Missing JSON file: {p}")
    try:
        obj = json.loads(p.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError, RecursionError) as e:
        return _die(f"Failed to load JSON: {p} ({e})")

    errs = validate_calendar(obj)
    if errs:
        print("[calgrid-validate] FAIL", file=sys.stderr)
        for e in errs:
            print(f"  - {e}", file=sys.stderr)
        return 3

    print(f"[calgrid-validate] OK: {len(obj)} events")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
