"""PDF rendering backend built on reportlab.

Purpose:
    Draw paginated pleading pages (grid line numbers, caption, title, body,
    footer) into a PDF document.

Key responsibilities:
    - Provide the measurement collaborator used by the line wrapper
      (:func:`font_measure`).
    - Place text only at coordinates supplied by
      :class:`~pleadgrid.layout.geometry.PageGeometry` and
      :meth:`~pleadgrid.layout.paginate.Page.baselines`.
    - Report any backend failure as :class:`~pleadgrid.utils.errors.RenderError`.

Notes/Edge cases:
    - Only the standard PDF fonts are supported; an unknown font name is a
      configuration error, detected before any drawing happens.
    - Caption lines are wrapped to the text width; rows that would fall below
      the bottom margin are dropped.
"""

from __future__ import annotations

import io
import os
from dataclasses import dataclass
from typing import Sequence

from reportlab.pdfbase import pdfmetrics
from reportlab.pdfgen import canvas

from pleadgrid.config.schema import ConfigModel, FontSettings
from pleadgrid.io.text import write_bytes
from pleadgrid.layout.geometry import PageGeometry
from pleadgrid.layout.paginate import Page, layout_body
from pleadgrid.layout.wrap import Measure
from pleadgrid.overflow.attachment import AttachmentPayload
from pleadgrid.render.caption import Caption
from pleadgrid.render.request import PleadingRequest
from pleadgrid.utils.errors import ConfigurationError, RenderError
from pleadgrid.utils.logging import get_logger

log = get_logger(__name__)


@dataclass(slots=True, frozen=True)
class RenderedDocument:
    pdf: bytes
    pages: tuple[Page, ...]

    @property
    def page_count(self) -> int:
        return len(self.pages)


def _check_font(name: str) -> None:
    try:
        pdfmetrics.getFont(name)
    except (KeyError, ValueError) as exc:
        raise ConfigurationError(f"unknown PDF font: {name!r}") from exc


def font_measure(font_name: str, size: float) -> Measure:
    """Return a width function for ``font_name`` at ``size`` points."""

    _check_font(font_name)

    def measure(text: str) -> float:
        return pdfmetrics.stringWidth(text, font_name, size)

    return measure


def _draw_line_numbers(c: canvas.Canvas, geometry: PageGeometry, fonts: FontSettings) -> None:
    c.setFont(fonts.body_font, fonts.line_number_size)
    for number in range(1, geometry.line_count + 1):
        c.drawString(geometry.left_num_x, geometry.line_number_y(number), str(number))


def _draw_caption(
    c: canvas.Canvas, caption: Caption, geometry: PageGeometry, fonts: FontSettings
) -> None:
    rows = caption.rows(
        geometry.max_text_width,
        font_measure(fonts.body_font, fonts.caption_size),
        font_measure(fonts.bold_font, fonts.caption_size),
    )
    for i, (line, bold) in enumerate(rows):
        y = geometry.y_for_line_offset(geometry.caption_start_offset + i)
        if y < geometry.bottom_margin:
            break
        if not line:
            continue
        font = fonts.bold_font if bold else fonts.body_font
        c.setFont(font, fonts.caption_size)
        c.drawString(geometry.left_text_x, y, line)

    if caption.title:
        width = pdfmetrics.stringWidth(caption.title, fonts.bold_font, fonts.title_size)
        x = max(geometry.left_text_x, (geometry.page_width - width) / 2)
        c.setFont(fonts.bold_font, fonts.title_size)
        c.drawString(x, geometry.y_for_line_offset(geometry.title_offset), caption.title)


def _draw_body(c: canvas.Canvas, page: Page, geometry: PageGeometry, fonts: FontSettings) -> None:
    c.setFont(fonts.body_font, fonts.body_size)
    for y, text in page.baselines(geometry):
        if y < geometry.bottom_margin:
            break
        if text:
            c.drawString(geometry.left_text_x, y, text)


def render_pdf(
    pages: Sequence[Page],
    caption: Caption,
    geometry: PageGeometry,
    fonts: FontSettings,
    *,
    footer_text: str = "",
    author: str = "pleadgrid",
) -> bytes:
    """Draw ``pages`` and return the PDF bytes.

    Raises
    ------
    ConfigurationError
        If a configured font is not a known PDF font.
    RenderError
        If reportlab fails while drawing or serializing.
    """

    for name in (fonts.body_font, fonts.bold_font):
        _check_font(name)

    buf = io.BytesIO()
    try:
        c = canvas.Canvas(buf, pagesize=(geometry.page_width, geometry.page_height))
        c.setAuthor(author)
        c.setTitle(caption.title)
        for page in pages:
            _draw_line_numbers(c, geometry, fonts)
            if page.first:
                _draw_caption(c, caption, geometry, fonts)
            _draw_body(c, page, geometry, fonts)
            if footer_text:
                c.setFont(fonts.body_font, fonts.footer_size)
                c.drawString(geometry.left_text_x, geometry.footer_y, footer_text)
            c.showPage()
        c.save()
    except Exception as exc:
        raise RenderError(f"PDF render failed: {exc}") from exc
    return buf.getvalue()


def _render(body: str, caption: Caption, cfg: ConfigModel) -> RenderedDocument:
    geometry = cfg.layout.to_geometry()
    measure = font_measure(cfg.fonts.body_font, cfg.fonts.body_size)
    pages = layout_body(body, geometry, measure)
    pdf = render_pdf(
        pages,
        caption,
        geometry,
        cfg.fonts,
        footer_text=cfg.render.footer_text,
        author=cfg.render.author,
    )
    log.debug("rendered %r: %d page(s), %d bytes", caption.title, len(pages), len(pdf))
    return RenderedDocument(pdf=pdf, pages=tuple(pages))


def render_pleading(request: PleadingRequest, cfg: ConfigModel) -> RenderedDocument:
    """Lay out and render a validated pleading request."""

    return _render(request.body_text, request.caption(), cfg)


def render_attachment(payload: AttachmentPayload, cfg: ConfigModel) -> RenderedDocument:
    """Render a stored attachment as a pleading-paper declaration."""

    return _render(payload.body, payload.caption(), cfg)


def write_pdf(path: str | os.PathLike[str], document: RenderedDocument) -> None:
    """Write a rendered document to ``path``."""

    write_bytes(path, document.pdf)


__all__ = [
    "RenderedDocument",
    "font_measure",
    "render_pdf",
    "render_pleading",
    "render_attachment",
    "write_pdf",
]
