"""Inline-or-attach decision for narrative form fields.

Judicial council forms give a declaration only a small box.  When the
composed narrative is longer than ``threshold_chars``, the box receives a short
bullet summary plus a pointer to an attached pleading-paper declaration, and
the full narrative is stored as that attachment's body.

The two outputs list the sections in different orders:

* the long form lists sections as facts, recent incidents, necessity,
  requested relief;
* the summary leads with the relief requested, then necessity, recent
  incidents and background facts.
"""

from __future__ import annotations

from dataclasses import dataclass

from pleadgrid.config.schema import OverflowSettings
from pleadgrid.overflow.attachment import write_attachment
from pleadgrid.overflow.store import AttachmentStore
from pleadgrid.preprocess.normalizer import normalize
from pleadgrid.utils.logging import get_logger

log = get_logger(__name__)

POINTER = "Please see attached pleading paper declaration for full details."
BULLET = "•"
MAX_SUMMARY_BULLETS = 4

LONG_LABELS = (
    ("facts", "FACTS:"),
    ("recent", "RECENT INCIDENTS:"),
    ("necessity", "NECESSITY:"),
    ("relief", "REQUESTED RELIEF:"),
)

SUMMARY_LABELS = (
    ("relief", "Relief requested:"),
    ("necessity", "Necessity:"),
    ("recent", "Recent incident(s):"),
    ("facts", "Background:"),
)


@dataclass(slots=True, frozen=True)
class NarrativePayload:
    """The four free-text sections of a declaration narrative."""

    facts: str | None = ""
    recent: str | None = ""
    necessity: str | None = ""
    relief: str | None = ""

    def section(self, name: str) -> str:
        """Return section ``name`` normalized and trimmed."""

        return normalize(getattr(self, name)).strip()


@dataclass(slots=True, frozen=True)
class OverflowDecision:
    triggered: bool
    threshold_chars: int
    long_chars: int
    attachment_key: str | None = None


@dataclass(slots=True, frozen=True)
class OverflowResult:
    """Text for the form field plus the decision that produced it."""

    mc030_text: str
    long_text: str
    decision: OverflowDecision

    @property
    def triggered(self) -> bool:
        return self.decision.triggered


def compose_long(payload: NarrativePayload) -> str:
    parts = []
    for name, label in LONG_LABELS:
        text = payload.section(name)
        if text:
            parts.append(f"{label}\n{text}")
    return "\n\n".join(parts).strip()


def summarize(payload: NarrativePayload) -> str:
    bullets = []
    for name, label in SUMMARY_LABELS:
        text = payload.section(name)
        if text:
            bullets.append(f"{BULLET} {label} {text}")
    return "\n".join(bullets[:MAX_SUMMARY_BULLETS]).strip()


def should_overflow(long_text: str, threshold_chars: int) -> bool:
    return len(long_text) > threshold_chars


def compute_overflow(
    payload: NarrativePayload,
    settings: OverflowSettings | None = None,
    *,
    store: AttachmentStore | None = None,
) -> OverflowResult:
    """Decide whether the narrative fits inline or needs an attachment.

    Parameters
    ----------
    payload:
        Narrative sections; empty or missing sections are left out.
    settings:
        Threshold, auto-attach flag, attachment key and caption defaults.
        Package defaults are used when omitted.
    store:
        Storage collaborator receiving the attachment.  Required only when the
        narrative overflows and ``settings.auto_attach`` is true.

    Returns
    -------
    OverflowResult
        ``decision.attachment_key`` is ``None`` when the text fits, otherwise
        the configured key, whether or not a write happened.

    Raises
    ------
    ValueError
        If an attachment must be written but no ``store`` was given.
    """

    if settings is None:
        settings = OverflowSettings()
    threshold = settings.threshold_chars
    long_text = compose_long(payload)
    long_chars = len(long_text)

    if not should_overflow(long_text, threshold):
        log.debug("narrative fits inline (%d <= %d chars)", long_chars, threshold)
        return OverflowResult(
            mc030_text=long_text,
            long_text=long_text,
            decision=OverflowDecision(False, threshold, long_chars, None),
        )

    summary = summarize(payload)
    mc030_text = f"{summary}\n\n{POINTER}" if summary else POINTER
    key = settings.attachment_key

    if settings.auto_attach:
        if store is None:
            raise ValueError("auto_attach is enabled but no attachment store was supplied")
        write_attachment(long_text, store, key=key, defaults=settings.attachment_defaults)
    log.debug(
        "narrative overflows (%d > %d chars); attachment %r%s",
        long_chars,
        threshold,
        key,
        "" if settings.auto_attach else " not written",
    )
    return OverflowResult(
        mc030_text=mc030_text.strip(),
        long_text=long_text,
        decision=OverflowDecision(True, threshold, long_chars, key),
    )


__all__ = [
    "POINTER",
    "NarrativePayload",
    "OverflowDecision",
    "OverflowResult",
    "compose_long",
    "summarize",
    "should_overflow",
    "compute_overflow",
]
