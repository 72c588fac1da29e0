# calgrid/render/css.py
from __future__ import annotations

CSS_BLOCK = r'''  :root {
    --line: #d8dde3;
    --muted: #6b7480;
    --surface: #ffffff;
    --idle: #f6f7f9;
    --cell-h: 22px;
  }

  body {
    margin: 16px;
    font: 13px/1.35 system-ui, -apple-system, "Segoe UI", sans-serif;
    color: #1d232b;
    background: var(--surface);
  }

  h1 { font-size: 18px; margin: 0 0 12px; }

  table.cal {
    border-collapse: collapse;
    table-layout: fixed;
  }
  table.cal th,
  table.cal td {
    border-bottom: 1px solid var(--line);
    height: var(--cell-h);
    padding: 0 6px;
    white-space: nowrap;
    overflow: hidden;
    text-overflow: ellipsis;
  }
  table.cal th.day {
    text-align: right;
    font-weight: normal;
    color: var(--muted);
    font-variant-numeric: tabular-nums;
  }
  table.cal th.day .dow { display: inline-block; width: 2.5em; text-align: left; }
  table.cal thead th { color: var(--muted); font-weight: 600; }
  table.cal td { min-width: 120px; max-width: 220px; }

  tr.idle td, tr.idle th { background: var(--idle); }
  tr.week-start th, tr.week-start td { border-top: 2px solid var(--line); }

  td.ev { border-bottom-color: transparent; }
  td.ev.first { border-top-left-radius: 6px; border-top-right-radius: 6px; font-weight: 600; }
  td.ev.last { border-bottom-left-radius: 6px; border-bottom-right-radius: 6px; }
  td.ev.possible {
    background-image: repeating-linear-gradient(
      135deg, rgba(255,255,255,0.55) 0 6px, rgba(255,255,255,0) 6px 12px
    );
    font-style: italic;
  }

  p.empty { color: var(--muted); }
'''
