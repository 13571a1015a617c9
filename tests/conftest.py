"""Shared fixtures: sample CUE sheets written to tmp_path."""

from __future__ import annotations

import textwrap
from collections.abc import Callable
from pathlib import Path

import pytest

from cue2mp3.config import ConverterConfig
from cue2mp3.core.cue_parser import parse_cue_lines
from cue2mp3.core.models import DiscSheet

SAMPLE_CUE = textwrap.dedent(
    """\
    REM GENRE "Rock"
    REM DATE 1999
    REM DISCNUMBER 2
    REM TOTALDISCS 2
    PERFORMER "The Band"
    TITLE "Greatest Hits"
    FILE "disc.wav" WAVE
      TRACK 01 AUDIO
        TITLE "Opening"
        INDEX 01 00:00:00
      TRACK 02 AUDIO
        TITLE "Second"
        PERFORMER "Guest Star"
        INDEX 00 03:58:00
        INDEX 01 04:00:00
      TRACK 03 AUDIO
        TITLE "Closer"
        REM END 09:30:00
        INDEX 01 06:15:37
    FILE "bonus.wav" WAVE
      TRACK 04 AUDIO
        TITLE "Bonus?"
        REM SKIP true
        INDEX 01 00:00:00
      TRACK 05 AUDIO
        TITLE "Hidden"
        INDEX 01 01:00:00
    """
)


@pytest.fixture
def sample_sheet() -> DiscSheet:
    """The sample sheet parsed from CRLF-terminated lines, as rippers on Windows write them."""
    return parse_cue_lines(line + "\r\n" for line in SAMPLE_CUE.splitlines())


@pytest.fixture
def write_cue(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing CUE text into tmp_path and returning its path."""

    def _write(text: str = SAMPLE_CUE, name: str = "album.cue", encoding: str = "utf-8") -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        _ = path.write_bytes(text.encode(encoding))
        return path

    return _write


@pytest.fixture
def dry_config(tmp_path: Path) -> ConverterConfig:
    """Dry-run configuration writing into tmp_path."""
    return ConverterConfig(
        destination=str(tmp_path / "out"),
        log_dir=str(tmp_path / "logs"),
        dry_run=True,
    )


@pytest.fixture
def live_config(tmp_path: Path) -> ConverterConfig:
    """Non-dry-run configuration writing into tmp_path."""
    return ConverterConfig(
        destination=str(tmp_path / "out"),
        log_dir=str(tmp_path / "logs"),
    )
