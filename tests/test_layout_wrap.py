"""Tests for width-driven line wrapping."""

from __future__ import annotations

import math

from conftest import mono

from pleadgrid.layout.wrap import body_to_render_lines, hard_split, wrap_line


def test_line_that_fits_is_unchanged() -> None:
    assert wrap_line("a b c", 10, mono) == ["a b c"]


def test_greedy_fill() -> None:
    assert wrap_line("aaa bbb ccc", 7, mono) == ["aaa bbb", "ccc"]
    assert wrap_line("aaa bbb ccc", 11, mono) == ["aaa bbb ccc"]
    assert wrap_line("aaa bbb ccc", 3, mono) == ["aaa", "bbb", "ccc"]


def test_whitespace_collapsed_and_trimmed() -> None:
    assert wrap_line("  a \t  b   c  ", 20, mono) == ["a b c"]


def test_blank_line_yields_one_empty_render_line() -> None:
    assert wrap_line("", 10, mono) == [""]
    assert wrap_line("     ", 10, mono) == [""]
    assert wrap_line(None, 10, mono) == [""]


def test_hard_split_one_over() -> None:
    token = "abcdefghijk"
    pieces = wrap_line(token, 10, mono)
    assert pieces == ["abcdefghij", "k"]
    assert all(mono(p) <= 10 for p in pieces)
    assert "".join(pieces) == token


def test_hard_split_flushes_accumulator() -> None:
    lines = wrap_line("hi abcdefghijkl there", 5, mono)
    assert lines == ["hi", "abcde", "fghij", "kl", "there"]


def test_hard_split_remainder_not_merged_with_next_word() -> None:
    assert wrap_line("abcdefg h", 5, mono) == ["abcde", "fg", "h"]


def test_degenerate_glyph_wider_than_line_terminates() -> None:
    def wide(text: str) -> float:
        return 10.0 * len(text)

    assert hard_split("abc", 5, wide) == ["a", "b", "c"]
    assert wrap_line("ab c", 5, wide) == ["a", "b", "c"]


def test_hard_split_measurement_calls_are_logarithmic() -> None:
    calls = 0

    def counting(text: str) -> float:
        nonlocal calls
        calls += 1
        return float(len(text))

    token = "x" * 1000
    pieces = hard_split(token, 100, counting)
    assert pieces == ["x" * 100] * 10
    per_split = math.floor(math.log2(1000)) + 1
    assert calls <= len(pieces) * per_split


def test_width_bound_with_proportional_measure() -> None:
    def proportional(text: str) -> float:
        return sum(1.5 if ch.isupper() else 1.0 for ch in text)

    line = "The RESPONDENT failed to appear at the SCHEDULED exchange ABCDEFGHIJKLMNOP"
    lines = wrap_line(line, 12, proportional)
    assert all(proportional(part) <= 12 for part in lines)
    assert "".join(lines).replace(" ", "") == line.replace(" ", "")


def test_rejoin_reproduces_collapsed_input() -> None:
    line = "The   quick brown\tfox jumps over the lazy dog"
    lines = wrap_line(line, 12, mono)
    assert " ".join(lines) == "The quick brown fox jumps over the lazy dog"


def test_deterministic() -> None:
    line = "Petitioner requests that the court modify the existing custody order."
    assert wrap_line(line, 17, mono) == wrap_line(line, 17, mono)


def test_body_blank_lines_preserved() -> None:
    body = "aaa bbb\n\nccc ddd"
    assert body_to_render_lines(body, 3, mono) == ["aaa", "bbb", "", "ccc", "ddd"]


def test_body_consecutive_and_trailing_blank_lines() -> None:
    assert body_to_render_lines("a\n\n\nb", 10, mono) == ["a", "", "", "b"]
    assert body_to_render_lines("a\n", 10, mono) == ["a", ""]
    assert body_to_render_lines("", 10, mono) == [""]


def test_body_whitespace_only_line_is_one_blank() -> None:
    assert body_to_render_lines("a\n   \nb", 10, mono) == ["a", "", "b"]
