"""UTF-8 text file helpers.

:func:`read_text` consumes a UTF-8 byte-order mark when present and keeps
newline characters exactly as stored; normalization is left to
:mod:`pleadgrid.preprocess.normalizer`.  :func:`write_text` creates parent
directories and replaces the destination atomically, so a reader never sees a
half-written file.
"""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

PathLikeStr = os.PathLike[str]


def read_text(path: str | PathLikeStr, *, encoding: str = "utf-8-sig") -> str:
    """Return the contents of ``path`` without newline translation."""

    with open(path, "r", encoding=encoding, newline="") as f:
        return f.read()


def write_text(path: str | PathLikeStr, text: str, *, encoding: str = "utf-8") -> None:
    """Write ``text`` to ``path`` through a temporary sibling file."""

    write_bytes(path, text.encode(encoding))


def write_bytes(path: str | PathLikeStr, data: bytes) -> None:
    """Atomically replace ``path`` with ``data``."""

    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{file_path.name}.", dir=file_path.parent)
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
        os.replace(tmp_name, file_path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise


__all__ = ["read_text", "write_text", "write_bytes"]
