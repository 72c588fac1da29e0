# calgrid/render/markup.py
from __future__ import annotations

import html
from typing import List, Optional

from ..layout import Grid
from ..model import Certainty, DayRow, RowEntry


def _cell(entry: Optional[RowEntry], day) -> str:
    if entry is None:
        return "<td></td>"

    ev = entry.event
    classes = ["ev", "first" if entry.is_first_day else "cont"]
    if day == ev.end:
        classes.append("last")
    if ev.certainty is Certainty.POSSIBLE:
        classes.append("possible")

    tip = html.escape(f"{ev.title} ({ev.start.isoformat()} .. {ev.end.isoformat()})", quote=True)
    # Title only on the first day; later days are a continuation band.
    label = html.escape(ev.title) if entry.is_first_day else ""
    return (
        f'<td class="{" ".join(classes)}" style="background-color:{entry.color}" title="{tip}">'
        f"{label}</td>"
    )


def _day_row(row: DayRow) -> str:
    classes = []
    if row.active_count == 0:
        classes.append("idle")
    if row.day.weekday() == 0:
        classes.append("week-start")
    cls = f' class="{" ".join(classes)}"' if classes else ""

    head = (
        f'<th class="day" scope="row"><span class="dow">{row.day.strftime("%a")}</span>'
        f"{row.day.isoformat()}</th>"
    )
    cells = "".join(_cell(c, row.day) for c in row.cells)
    return f'<tr{cls} data-active="{row.active_count}">{head}{cells}</tr>'


def build_body_markup(grid: Grid, *, title: str) -> str:
    parts: List[str] = [f"<h1>{html.escape(title)}</h1>"]

    day_rows = [_day_row(r) for r in grid.rows_by_day()]
    if not day_rows:
        parts.append('<p class="empty">No events.</p>')
        return "\n".join(parts)

    cols = "".join(f'<th scope="col">{i + 1}</th>' for i in range(grid.num_rows()))
    parts.append('<table class="cal">')
    parts.append(f"<thead><tr><th></th>{cols}</tr></thead>")
    parts.append("<tbody>")
    parts.extend(day_rows)
    parts.append("</tbody>")
    parts.append("</table>")
    return "\n".join(parts)
