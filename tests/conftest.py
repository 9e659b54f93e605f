"""Shared fixtures for the pleadgrid test-suite."""

from __future__ import annotations

import pytest

from pleadgrid.layout.geometry import PageGeometry


def mono(text: str) -> float:
    """Monospace measure: every character is one unit wide."""

    return float(len(text))


@pytest.fixture
def geometry() -> PageGeometry:
    """Grid with a 10pt line height: 7 body lines on page 1, 10 afterwards."""

    return PageGeometry(
        page_width=200,
        page_height=120,
        top_margin=10,
        bottom_margin=10,
        left_text_x=20,
        right_margin=20,
        line_count=10,
        caption_start_offset=1,
        title_offset=3,
        body_start_offset_first=4,
        body_start_offset_other=1,
    )
