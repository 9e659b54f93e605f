"""Deterministic pleading-paper layout and narrative overflow handling.

The package wraps and paginates free text onto a ruled legal pleading grid
and decides whether a narrative fits a small form field or must be summarized
inline with the full text moved to a pleading-paper attachment.  Rendering to
PDF lives in :mod:`pleadgrid.io.pdf_writer`; the command line interface in
:mod:`pleadgrid.cli`.
"""

from .layout import PageGeometry, body_to_render_lines, paginate, wrap_line
from .overflow import NarrativePayload, compute_overflow
from .preprocess.normalizer import normalize

__version__ = "0.1.0"

__all__ = [
    "NarrativePayload",
    "PageGeometry",
    "body_to_render_lines",
    "compute_overflow",
    "normalize",
    "paginate",
    "wrap_line",
]
