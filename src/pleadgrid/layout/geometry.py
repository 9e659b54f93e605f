"""Pleading grid geometry.

A :class:`PageGeometry` captures the fixed page/margin constants of a ruled
pleading page and derives every vertical coordinate from a single
``line_height``.  Placement is expressed in *line offsets* (line slots counted
down from the top margin, possibly fractional) and converted with
:meth:`PageGeometry.y_for_line_offset`; capacity questions are answered by
:meth:`PageGeometry.lines_fit_from_y`.  No other module computes coordinates.

Coordinates follow the PDF convention: the origin is the bottom-left corner
and ``y`` grows upwards, in points.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, fields

from pleadgrid.utils.errors import ConfigurationError

LETTER_WIDTH = 612.0
LETTER_HEIGHT = 792.0
PLEADING_LINE_COUNT = 28


@dataclass(slots=True, frozen=True)
class PageGeometry:
    """Immutable page layout for a ruled pleading grid.

    Attributes
    ----------
    page_width, page_height:
        Page size in points.
    top_margin, bottom_margin:
        Vertical margins bounding the ruled grid.
    left_text_x:
        X coordinate where caption, title and body text start.
    right_margin:
        Space kept free on the right edge.
    line_count:
        Number of ruled lines per page.
    left_num_x:
        X coordinate of the grid line numbers.
    caption_start_offset, title_offset:
        Line offsets of the first caption line and the title on page 1.
    body_start_offset_first, body_start_offset_other:
        Line offsets of the first body line on page 1 and on later pages.
    line_number_shift:
        Grid line ``i`` is numbered at offset ``i - line_number_shift``.
    footer_gap:
        Distance of the footer baseline below ``bottom_margin``.
    """

    page_width: float = LETTER_WIDTH
    page_height: float = LETTER_HEIGHT
    top_margin: float = 54.0
    bottom_margin: float = 54.0
    left_text_x: float = 72.0
    right_margin: float = 54.0
    line_count: int = PLEADING_LINE_COUNT
    left_num_x: float = 24.0
    caption_start_offset: float = 1.35
    title_offset: float = 13.0
    body_start_offset_first: float = 15.0
    body_start_offset_other: float = 1.35
    line_number_shift: float = 0.85
    footer_gap: float = 18.0

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if not math.isfinite(value):
                raise ConfigurationError(f"{f.name} must be a finite number, got {value}")
        if self.line_count <= 0:
            raise ConfigurationError(f"line_count must be positive, got {self.line_count}")
        if self.line_height <= 0:
            raise ConfigurationError(
                "vertical margins leave no room for the grid "
                f"(page_height={self.page_height}, top_margin={self.top_margin}, "
                f"bottom_margin={self.bottom_margin})"
            )
        if self.max_text_width <= 0:
            raise ConfigurationError(
                "horizontal margins leave no room for text "
                f"(page_width={self.page_width}, left_text_x={self.left_text_x}, "
                f"right_margin={self.right_margin})"
            )
        if self.body_start_offset_first < self.body_start_offset_other:
            raise ConfigurationError(
                "page 1 body cannot start above the body of later pages "
                f"({self.body_start_offset_first} < {self.body_start_offset_other})"
            )
        if self.lines_per_page_other < 1:
            raise ConfigurationError(
                f"no body line fits below offset {self.body_start_offset_other} on later pages"
            )

    # ------------------------------------------------------------------
    # Derived constants
    # ------------------------------------------------------------------

    @property
    def line_height(self) -> float:
        return (self.page_height - self.top_margin - self.bottom_margin) / self.line_count

    @property
    def max_text_width(self) -> float:
        return self.page_width - self.left_text_x - self.right_margin

    # ------------------------------------------------------------------
    # Placement arithmetic
    # ------------------------------------------------------------------

    def y_for_line_offset(self, offset: float) -> float:
        """Return the baseline ``y`` of line slot ``offset``."""

        return self.page_height - self.top_margin - offset * self.line_height

    def lines_fit_from_y(self, start_y: float) -> int:
        """Return how many baselines fit from ``start_y`` down to the bottom margin."""

        if start_y < self.bottom_margin:
            return 0
        return math.floor((start_y - self.bottom_margin) / self.line_height) + 1

    @property
    def body_start_y_first(self) -> float:
        return self.y_for_line_offset(self.body_start_offset_first)

    @property
    def body_start_y_other(self) -> float:
        return self.y_for_line_offset(self.body_start_offset_other)

    @property
    def lines_per_page_first(self) -> int:
        """Body capacity of page 1, below the caption and title."""

        return self.lines_fit_from_y(self.body_start_y_first)

    @property
    def lines_per_page_other(self) -> int:
        """Body capacity of every page after the first."""

        return self.lines_fit_from_y(self.body_start_y_other)

    def line_number_y(self, number: int) -> float:
        """Return the baseline of grid line number ``number`` (1-based)."""

        return self.y_for_line_offset(number - self.line_number_shift)

    @property
    def footer_y(self) -> float:
        return self.bottom_margin - self.footer_gap


__all__ = ["LETTER_WIDTH", "LETTER_HEIGHT", "PLEADING_LINE_COUNT", "PageGeometry"]
