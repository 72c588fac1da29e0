# calgrid/render/template.py
from __future__ import annotations

from .css import CSS_BLOCK
from .html_shell import HTML_SHELL

MARKERS = ("__TITLE__", "__BODY_MARKUP__", "__DATA_JSON__")

# Static part of the page; per-grid markers are filled by build_html
HTML_TEMPLATE = HTML_SHELL.replace("__CSS_BLOCK__", CSS_BLOCK)
