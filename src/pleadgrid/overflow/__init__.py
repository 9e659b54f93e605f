"""Narrative overflow handling: inline text or summary plus attachment."""

from .attachment import AttachmentPayload, load_attachment, write_attachment
from .decider import NarrativePayload, OverflowDecision, OverflowResult, compute_overflow
from .store import AttachmentStore, JsonFileStore, MemoryStore

__all__ = [
    "AttachmentPayload",
    "AttachmentStore",
    "JsonFileStore",
    "MemoryStore",
    "NarrativePayload",
    "OverflowDecision",
    "OverflowResult",
    "compute_overflow",
    "load_attachment",
    "write_attachment",
]
