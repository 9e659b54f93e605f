"""Key/value storage collaborators for attachment records.

The overflow decider only needs ``get`` and ``put`` under well-known keys.
Two implementations are provided:

* :class:`MemoryStore` keeps records in a dict (tests, previews, embedding in
  a larger application that persists elsewhere).
* :class:`JsonFileStore` keeps one UTF-8 JSON file per key in a directory.
  Writes go through a temporary file and :func:`os.replace`, so concurrent
  writers of the same key result in last-write-wins without torn files.
"""

from __future__ import annotations

import json
import os
import re
from pathlib import Path
from typing import Any, Protocol, runtime_checkable

from pleadgrid.io.text import read_text, write_text
from pleadgrid.utils.errors import StorageError

_KEY_RE = re.compile(r"^[A-Za-z0-9][A-Za-z0-9_.-]*$")


@runtime_checkable
class AttachmentStore(Protocol):
    """Minimal storage protocol used by the attachment writer."""

    def get(self, key: str) -> dict[str, Any] | None:
        """Return the record stored under ``key`` or ``None``."""

        ...

    def put(self, key: str, record: dict[str, Any]) -> None:
        """Store ``record`` under ``key``, replacing any previous value."""

        ...


class MemoryStore:
    """Dict-backed store; records are copied in and out."""

    def __init__(self, records: dict[str, dict[str, Any]] | None = None) -> None:
        self._records: dict[str, dict[str, Any]] = {
            k: dict(v) for k, v in (records or {}).items()
        }

    def get(self, key: str) -> dict[str, Any] | None:
        record = self._records.get(key)
        return dict(record) if record is not None else None

    def put(self, key: str, record: dict[str, Any]) -> None:
        self._records[key] = dict(record)

    def __contains__(self, key: object) -> bool:
        return key in self._records

    def __len__(self) -> int:
        return len(self._records)


class JsonFileStore:
    """Directory of ``<key>.json`` files."""

    def __init__(self, directory: str | os.PathLike[str]) -> None:
        self.directory = Path(directory)

    def path_for(self, key: str) -> Path:
        if not _KEY_RE.match(key):
            raise ValueError(f"invalid storage key: {key!r}")
        return self.directory / f"{key}.json"

    def get(self, key: str) -> dict[str, Any] | None:
        path = self.path_for(key)
        if not path.exists():
            return None
        try:
            data = json.loads(read_text(path))
        except UnicodeDecodeError as exc:
            raise StorageError(f"{path}: not valid UTF-8 ({exc.reason})") from exc
        except json.JSONDecodeError as exc:
            raise StorageError(f"{path}: not valid JSON ({exc.msg})") from exc
        if not isinstance(data, dict):
            raise StorageError(f"{path}: expected a JSON object")
        return data

    def put(self, key: str, record: dict[str, Any]) -> None:
        text = json.dumps(record, ensure_ascii=False, indent=2, sort_keys=True) + "\n"
        write_text(self.path_for(key), text)


__all__ = ["AttachmentStore", "MemoryStore", "JsonFileStore"]
