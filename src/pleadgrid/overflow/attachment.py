"""Attachment payloads and the attachment writer.

:func:`write_attachment` is the only place where the overflow workflow
mutates anything: it stores the full narrative as the body of a pleading-paper
attachment.  Caption fields already present in the stored record are kept so
that a user's edits to title, court or case details survive a rewrite; only
``body`` is always replaced.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, ValidationError

from pleadgrid.config.schema import AttachmentDefaults
from pleadgrid.overflow.store import AttachmentStore
from pleadgrid.render.caption import Caption
from pleadgrid.utils.errors import StorageError
from pleadgrid.utils.logging import get_logger

log = get_logger(__name__)

_CAPTION_FIELDS = ("title", "court_line", "case_name", "case_number")


class AttachmentPayload(BaseModel):
    """Pleading-paper attachment record as persisted by a store."""

    title: str = ""
    court_line: str = ""
    case_name: str = ""
    case_number: str = ""
    body: str = ""

    model_config = ConfigDict(extra="ignore")

    def caption(self) -> Caption:
        lines: list[str] = [self.court_line, ""]
        if self.case_name:
            lines.append(self.case_name)
        if self.case_number:
            lines.append(f"Case No.: {self.case_number}")
        return Caption(title=self.title, court_line=self.court_line, lines=tuple(lines))


@dataclass(slots=True, frozen=True)
class AttachmentReceipt:
    """Where and when an attachment was written."""

    key: str
    written_at: datetime


def build_attachment(
    long_text: str,
    existing: dict[str, object] | None,
    defaults: AttachmentDefaults,
) -> AttachmentPayload:
    """Merge ``existing`` caption fields over ``defaults`` and set the body."""

    fields: dict[str, str] = {}
    for name in _CAPTION_FIELDS:
        current = (existing or {}).get(name)
        fields[name] = current if isinstance(current, str) and current else getattr(defaults, name)
    return AttachmentPayload(body=long_text, **fields)


def write_attachment(
    long_text: str,
    store: AttachmentStore,
    *,
    key: str,
    defaults: AttachmentDefaults | None = None,
) -> AttachmentReceipt:
    """Persist ``long_text`` as the body of the attachment stored under ``key``.

    Calling this repeatedly with the same arguments stores the same record
    each time.
    """

    payload = build_attachment(long_text, store.get(key), defaults or AttachmentDefaults())
    store.put(key, payload.model_dump())
    log.info("wrote attachment %r (%d chars)", key, len(long_text))
    return AttachmentReceipt(key=key, written_at=datetime.now(timezone.utc))


def load_attachment(store: AttachmentStore, key: str) -> AttachmentPayload | None:
    """Read the record under ``key`` back as an :class:`AttachmentPayload`."""

    record = store.get(key)
    if record is None:
        return None
    try:
        return AttachmentPayload.model_validate(record)
    except ValidationError as exc:
        raise StorageError(f"attachment {key!r} is malformed: {exc.error_count()} error(s)") from exc


__all__ = [
    "AttachmentPayload",
    "AttachmentReceipt",
    "build_attachment",
    "write_attachment",
    "load_attachment",
]
