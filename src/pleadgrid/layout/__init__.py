"""Pleading grid layout: geometry, wrapping and pagination.

All functions here are pure and keep no state between calls.
"""

from .geometry import PageGeometry
from .paginate import Page, layout_body, paginate
from .wrap import Measure, body_to_render_lines, hard_split, wrap_line

__all__ = [
    "Measure",
    "Page",
    "PageGeometry",
    "body_to_render_lines",
    "hard_split",
    "layout_body",
    "paginate",
    "wrap_line",
]
