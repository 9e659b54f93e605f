"""Tests for the inline-versus-attachment decision."""

from __future__ import annotations

import pytest

from pleadgrid.config.schema import OverflowSettings
from pleadgrid.overflow.decider import (
    POINTER,
    NarrativePayload,
    compose_long,
    compute_overflow,
    should_overflow,
    summarize,
)
from pleadgrid.overflow.store import MemoryStore

KEY = "pleading_paper_v1"


def test_short_narrative_stays_inline() -> None:
    store = MemoryStore()
    payload = NarrativePayload(facts="Missed one exchange on 2024-01-01.")
    result = compute_overflow(payload, OverflowSettings(threshold_chars=900), store=store)
    assert result.mc030_text == "FACTS:\nMissed one exchange on 2024-01-01."
    assert result.mc030_text == result.long_text
    assert result.decision.triggered is False
    assert result.decision.attachment_key is None
    assert result.decision.long_chars == len(result.long_text)
    assert result.decision.threshold_chars == 900
    assert len(store) == 0


def test_long_narrative_summarized_and_attached() -> None:
    store = MemoryStore()
    payload = NarrativePayload(
        facts="Respondent missed the scheduled exchange again. " * 30,
        relief="Award sole legal custody.",
    )
    result = compute_overflow(payload, OverflowSettings(threshold_chars=900), store=store)
    assert result.triggered is True
    assert result.mc030_text.startswith("• Relief requested: Award sole legal custody.")
    assert result.mc030_text.endswith(POINTER)
    assert result.decision.attachment_key == KEY
    record = store.get(KEY)
    assert record is not None
    assert record["body"] == result.long_text == compose_long(payload)
    assert record["body"]


def test_threshold_boundary() -> None:
    # "FACTS:\n" is 7 characters.
    at_limit = NarrativePayload(facts="x" * 893)
    over = NarrativePayload(facts="x" * 894)
    store = MemoryStore()

    res = compute_overflow(at_limit, store=store)
    assert res.decision.long_chars == 900
    assert res.triggered is False
    assert len(store) == 0

    res = compute_overflow(over, store=store)
    assert res.decision.long_chars == 901
    assert res.triggered is True
    assert store.get(KEY)["body"] == res.long_text  # type: ignore[index]


def test_compose_order_labels_and_empty_sections() -> None:
    payload = NarrativePayload(
        facts="  Fact one.  ",
        recent="",
        necessity="Urgent.",
        relief="Order X.",
    )
    assert compose_long(payload) == (
        "FACTS:\nFact one.\n\nNECESSITY:\nUrgent.\n\nREQUESTED RELIEF:\nOrder X."
    )
    full = NarrativePayload(facts="F", recent="R", necessity="N", relief="X")
    assert compose_long(full) == (
        "FACTS:\nF\n\nRECENT INCIDENTS:\nR\n\nNECESSITY:\nN\n\nREQUESTED RELIEF:\nX"
    )


def test_summary_priority_order() -> None:
    payload = NarrativePayload(facts="F", recent="R", necessity="N", relief="X")
    assert summarize(payload).split("\n") == [
        "• Relief requested: X",
        "• Necessity: N",
        "• Recent incident(s): R",
        "• Background: F",
    ]


def test_sections_normalized() -> None:
    payload = NarrativePayload(facts="He said “no”.\r\nThen left.", recent=None)
    assert compose_long(payload) == 'FACTS:\nHe said "no".\nThen left.'


def test_all_sections_empty() -> None:
    result = compute_overflow(NarrativePayload(), store=MemoryStore())
    assert result.mc030_text == ""
    assert result.triggered is False


def test_zero_threshold_summarizes_any_text() -> None:
    settings = OverflowSettings(threshold_chars=0, auto_attach=False)
    result = compute_overflow(NarrativePayload(facts="x"), settings)
    assert result.mc030_text == "• Background: x\n\n" + POINTER


def test_preview_without_attach_returns_key() -> None:
    store = MemoryStore()
    settings = OverflowSettings(threshold_chars=10, auto_attach=False)
    result = compute_overflow(NarrativePayload(facts="a" * 50), settings, store=store)
    assert result.triggered is True
    assert result.decision.attachment_key == KEY
    assert len(store) == 0


def test_auto_attach_requires_store_only_when_triggered() -> None:
    settings = OverflowSettings(threshold_chars=10)
    assert compute_overflow(NarrativePayload(facts="ok"), settings).triggered is False
    with pytest.raises(ValueError):
        compute_overflow(NarrativePayload(facts="a" * 50), settings)


def test_existing_caption_fields_reused() -> None:
    store = MemoryStore(
        {KEY: {"title": "MY DECLARATION", "case_number": "24FL000123", "body": "old"}}
    )
    settings = OverflowSettings(threshold_chars=10)
    result = compute_overflow(NarrativePayload(facts="a" * 50), settings, store=store)
    record = store.get(KEY)
    assert record == {
        "title": "MY DECLARATION",
        "court_line": settings.attachment_defaults.court_line,
        "case_name": "",
        "case_number": "24FL000123",
        "body": result.long_text,
    }


def test_defaults_used_for_new_attachment() -> None:
    store = MemoryStore()
    settings = OverflowSettings(threshold_chars=10)
    compute_overflow(NarrativePayload(facts="a" * 50), settings, store=store)
    record = store.get(KEY)
    assert record is not None
    assert record["title"] == "DECLARATION (ATTACHMENT)"
    assert record["court_line"] == "SUPERIOR COURT OF CALIFORNIA, COUNTY OF ORANGE"


def test_repeated_calls_idempotent() -> None:
    store = MemoryStore()
    settings = OverflowSettings(threshold_chars=10, attachment_key="custom_key")
    payload = NarrativePayload(facts="a" * 50, relief="b")
    first = compute_overflow(payload, settings, store=store)
    snapshot = store.get("custom_key")
    second = compute_overflow(payload, settings, store=store)
    assert first == second
    assert store.get("custom_key") == snapshot
    assert len(store) == 1


@pytest.mark.parametrize("threshold", [0, 5, 24, 25, 26, 900])
def test_triggered_is_length_over_threshold(threshold: int) -> None:
    payload = NarrativePayload(relief="Award sole custody.")
    settings = OverflowSettings(threshold_chars=threshold, auto_attach=False)
    result = compute_overflow(payload, settings)
    assert result.triggered is (result.decision.long_chars > threshold)
    assert result.triggered is should_overflow(result.long_text, threshold)
