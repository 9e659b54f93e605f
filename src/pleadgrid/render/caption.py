"""Caption block shown above the title on page 1."""

from __future__ import annotations

from dataclasses import dataclass

from pleadgrid.layout.wrap import Measure, wrap_line


@dataclass(slots=True, frozen=True)
class Caption:
    """Page 1 header content.

    ``lines`` is the caption block drawn one grid slot apart starting at the
    caption offset; the entry equal to ``court_line`` is drawn in bold.
    ``title`` is centered on its own grid slot.
    """

    title: str
    court_line: str
    lines: tuple[str, ...]

    def is_bold(self, line: str) -> bool:
        return bool(line) and line == self.court_line

    def rows(
        self, max_width: float, measure: Measure, bold_measure: Measure
    ) -> list[tuple[str, bool]]:
        """Return ``(text, bold)`` rows with every line wrapped to ``max_width``."""

        out: list[tuple[str, bool]] = []
        for line in self.lines:
            bold = self.is_bold(line)
            for part in wrap_line(line, max_width, bold_measure if bold else measure):
                out.append((part, bold))
        return out


__all__ = ["Caption"]
