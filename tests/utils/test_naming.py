"""Tests for filesystem-safe name sanitizing."""

from __future__ import annotations

import pytest

from cue2mp3.utils.naming import sanitize_filename


def test_sanitize_reserved_characters() -> None:
    assert sanitize_filename('My/Album: "Best" *Hits*?') == "My-Album- -Best- -Hits-"


def test_sanitize_absent_is_unknown() -> None:
    assert sanitize_filename(None) == "Unknown"


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("Café", "Caf-"),
        ("日本", "--"),
        ("back\\slash", "back-slash"),
        ("Why?", "Why"),
        ("Ends with dots...", "Ends with dots"),
        ("Trailing . . ", "Trailing"),
        ("Vol. 2", "Vol. 2"),
        ("", ""),
    ],
)
def test_sanitize(value: str, expected: str) -> None:
    assert sanitize_filename(value) == expected


@pytest.mark.parametrize(
    "value",
    ['My/Album: "Best" *Hits*?', "Ünïcödé ...", "a?.", "  spaced  ", "x \\\" y"],
)
def test_sanitize_is_idempotent(value: str) -> None:
    once = sanitize_filename(value)
    assert sanitize_filename(once) == once
