"""Split a render-line stream into pleading pages.

Page 1 carries the caption and title, so its body starts lower and holds
``geometry.lines_per_page_first`` lines; every later page holds
``geometry.lines_per_page_other``.  :func:`paginate` never returns an empty
list: a body without render lines still produces one (blank) first page.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

from pleadgrid.layout.geometry import PageGeometry
from pleadgrid.layout.wrap import Measure, body_to_render_lines
from pleadgrid.preprocess.normalizer import normalize
from pleadgrid.utils.logging import get_logger

log = get_logger(__name__)


@dataclass(slots=True, frozen=True)
class Page:
    """One page of body text.

    ``number`` is 1-based; ``first`` is ``True`` only for the page carrying the
    caption and title block.
    """

    lines: tuple[str, ...]
    first: bool
    number: int

    def start_offset(self, geometry: PageGeometry) -> float:
        if self.first:
            return geometry.body_start_offset_first
        return geometry.body_start_offset_other

    def baselines(self, geometry: PageGeometry) -> List[tuple[float, str]]:
        """Return ``(y, text)`` for every body line on this page."""

        start = self.start_offset(geometry)
        return [
            (geometry.y_for_line_offset(start + i), text) for i, text in enumerate(self.lines)
        ]


def paginate(render_lines: Sequence[str], geometry: PageGeometry) -> List[Page]:
    """Partition ``render_lines`` into pages using the grid capacities."""

    first_cap = geometry.lines_per_page_first
    other_cap = geometry.lines_per_page_other

    pages = [Page(tuple(render_lines[:first_cap]), first=True, number=1)]
    pos = first_cap
    while pos < len(render_lines):
        chunk = tuple(render_lines[pos : pos + other_cap])
        pages.append(Page(chunk, first=False, number=len(pages) + 1))
        pos += other_cap
    log.debug(
        "paginated %d render lines into %d page(s) (capacity %d/%d)",
        len(render_lines),
        len(pages),
        first_cap,
        other_cap,
    )
    return pages


def layout_body(body: str | None, geometry: PageGeometry, measure: Measure) -> List[Page]:
    """Normalize, wrap and paginate a pleading body in one step."""

    render_lines = body_to_render_lines(normalize(body), geometry.max_text_width, measure)
    return paginate(render_lines, geometry)


__all__ = ["Page", "paginate", "layout_body"]
