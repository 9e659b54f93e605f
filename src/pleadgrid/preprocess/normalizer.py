"""Deterministic text normalization for pleading bodies and narratives.

The :func:`normalize` function canonicalizes pasted text so that identical
content always lays out identically, regardless of the editor or platform it
came from.

Rules
-----
The following transforms are applied in order:

1. **Line endings** – ``\\r\\n`` and lone ``\\r`` become ``\\n``.
2. **Tabs** – every tab becomes exactly four spaces.
3. **No-break space** – ``\\u00a0`` becomes a regular space.
4. **Quote normalization** – curly single quotes become ``'`` and curly
   double quotes become ``"``.
5. **Control characters** – ASCII control characters other than ``\\n`` are
   dropped (including ``DEL``).

Runs of spaces and blank lines are kept verbatim; collapsing them is the job
of the line wrapper.  The function is total, pure and idempotent.

Example
-------

>>> normalize("\\u201cHi\\u201d\\tthere\\r\\n")
'"Hi"    there\\n'
"""

from __future__ import annotations

import re

TAB_EXPANSION = "    "

_QUOTE_MAP = {
    "\u2018": "'",  # LEFT SINGLE QUOTATION MARK
    "\u2019": "'",  # RIGHT SINGLE QUOTATION MARK
    "\u201c": '"',  # LEFT DOUBLE QUOTATION MARK
    "\u201d": '"',  # RIGHT DOUBLE QUOTATION MARK
}

_CHAR_TABLE = str.maketrans({"\t": TAB_EXPANSION, "\u00a0": " ", **_QUOTE_MAP})

# Everything below 0x20 except LF, plus DEL.  CR and TAB are already gone by
# the time this runs.
_CONTROL_RE = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]")


def normalize(text: str | None) -> str:
    """Return ``text`` in canonical form.

    ``None`` is treated as the empty string so callers can pass optional form
    fields straight through.
    """

    if not text:
        return ""
    out = text.replace("\r\n", "\n").replace("\r", "\n")
    out = out.translate(_CHAR_TABLE)
    return _CONTROL_RE.sub("", out)


__all__ = ["TAB_EXPANSION", "normalize"]
