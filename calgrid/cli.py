from __future__ import annotations

import argparse
import sys

from .calendar_file import load_calendar
from .config import palette_from_env, title_from_env
from .errors import CalendarFileError, CalendarValidationError
from .layout import build_grid
from .render.inline import build_html


def main(argv: list[str] | None = None) -> None:
    ap = argparse.ArgumentParser(
        prog="calgrid",
        description="Lay out a JSON list of dated events as a calendar grid and print it as HTML.",
    )
    ap.add_argument("cal_file", help="Calendar JSON file (array of {title, start, end, certainty})")
    args = ap.parse_args(argv)

    try:
        palette = palette_from_env()
    except ValueError as e:
        raise SystemExit(f"Invalid CALGRID_PALETTE value: {e}")

    try:
        events = load_calendar(args.cal_file)
    except CalendarFileError as e:
        raise SystemExit(f"Couldn't open calendar file: {e}")
    except CalendarValidationError as e:
        raise SystemExit(f"Invalid calendar file: {e}")

    grid = build_grid(events, palette=palette)
    sys.stdout.write(build_html(grid, title=title_from_env()))


if __name__ == "__main__":
    main()
