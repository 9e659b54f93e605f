"""Width-driven line wrapping.

:func:`wrap_line` fits one logical line into render lines that each measure at
most ``max_width`` according to a caller supplied ``measure`` function (usually
the rendering backend's font metrics).  Wrapping is greedy and deterministic:

* Runs of whitespace collapse to a single space and the line is trimmed.  A
  line with no visible characters yields exactly one empty render line.
* Words are appended to the current line while the candidate still fits.
* A word that is wider than ``max_width`` on its own is *hard split* into the
  longest fitting prefixes, found by binary search.  No hyphen is inserted.

:func:`body_to_render_lines` applies this to every line of a normalized body,
keeping each explicit blank line as one empty render line.

``measure`` must be non-decreasing in prefix length.  This is assumed, not
checked; if it does not hold the hard split still terminates but may cut
tokens at arbitrary points.
"""

from __future__ import annotations

from typing import Callable, List

Measure = Callable[[str], float]


def hard_split(token: str, max_width: float, measure: Measure) -> List[str]:
    """Split ``token`` into pieces that each measure at most ``max_width``.

    Each step keeps the longest prefix that fits.  At least one character is
    consumed per step, so a single glyph wider than ``max_width`` is emitted on
    its own instead of looping forever.
    """

    pieces: List[str] = []
    rest = token
    while rest:
        lo, hi = 1, len(rest)
        best = 1
        while lo <= hi:
            mid = (lo + hi) // 2
            if measure(rest[:mid]) <= max_width:
                best = mid
                lo = mid + 1
            else:
                hi = mid - 1
        pieces.append(rest[:best])
        rest = rest[best:]
    return pieces


def wrap_line(line: str | None, max_width: float, measure: Measure) -> List[str]:
    """Wrap a single logical line.

    Returns a non-empty list; ``[""]`` for blank input.  Joining the result
    with single spaces reproduces the whitespace-collapsed input, except that
    hard-split pieces of one token are joined without a space.
    """

    cleaned = " ".join((line or "").split())
    if not cleaned:
        return [""]

    out: List[str] = []
    current = ""
    for token in cleaned.split(" "):
        if measure(token) > max_width:
            if current:
                out.append(current)
                current = ""
            out.extend(hard_split(token, max_width, measure))
            continue
        if not current:
            current = token
            continue
        candidate = f"{current} {token}"
        if measure(candidate) <= max_width:
            current = candidate
        else:
            out.append(current)
            current = token
    if current:
        out.append(current)
    return out


def body_to_render_lines(body: str | None, max_width: float, measure: Measure) -> List[str]:
    """Wrap every line of ``body`` and return the flat list of render lines.

    ``body`` is expected to be normalized already (LF line endings only).
    """

    render_lines: List[str] = []
    for logical in (body or "").split("\n"):
        if logical == "":
            render_lines.append("")
            continue
        render_lines.extend(wrap_line(logical, max_width, measure))
    return render_lines


__all__ = ["Measure", "hard_split", "wrap_line", "body_to_render_lines"]
