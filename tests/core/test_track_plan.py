"""Tests for track labels, tag sets and resolved track plans."""

from __future__ import annotations

import os

from cue2mp3.core.cue_parser import parse_cue_lines
from cue2mp3.core.models import DiscSheet, TimeWindow
from cue2mp3.core.track_plan import (
    album_directory,
    build_tags,
    build_track_plans,
    track_label,
)


def plans_for(sheet: DiscSheet, sheet_dir: str = "/rips/album"):
    return list(build_track_plans(sheet, sheet_dir, "cue2mp3 1.0.0", "lame -V2"))


def test_track_label_multi_disc() -> None:
    sheet = DiscSheet(fields={"DISCNUMBER": "2", "TOTALDISCS": "2"}, total_tracks=12)
    assert track_label(sheet, 7) == "2-07"


def test_track_label_single_disc_set_has_no_prefix() -> None:
    sheet = DiscSheet(fields={"DISCNUMBER": "1", "TOTALDISCS": "1"}, total_tracks=12)
    assert track_label(sheet, 7) == "07"


def test_track_label_without_disc_fields() -> None:
    assert track_label(DiscSheet(total_tracks=9), 7) == "07"
    assert track_label(DiscSheet(fields={"DISCNUMBER": "3"}, total_tracks=9), 7) == "07"


def test_track_label_ignores_non_numeric_total_discs() -> None:
    sheet = DiscSheet(fields={"DISCNUMBER": "2", "TOTALDISCS": "two"}, total_tracks=9)
    assert track_label(sheet, 7) == "07"


def test_track_label_widens_past_99_tracks() -> None:
    sheet = DiscSheet(total_tracks=120)
    assert track_label(sheet, 7) == "007"
    assert track_label(sheet, 120) == "120"


def test_album_directory_sanitizes_components(sample_sheet: DiscSheet) -> None:
    assert album_directory(sample_sheet) == os.path.join("The Band", "Greatest Hits")
    assert album_directory(DiscSheet()) == os.path.join("Unknown", "Unknown")


def test_tags_are_ordered_and_omit_absent_fields(sample_sheet: DiscSheet) -> None:
    tags = build_tags(sample_sheet, 0, 1, "cue2mp3 1.0.0", "lame -V2")
    assert list(tags.items()) == [
        ("TSSE", "lame -V2"),
        ("TENC", "cue2mp3 1.0.0"),
        ("TRCK", "2/5"),
        ("TPOS", "2/2"),
        ("TALB", "Greatest Hits"),
        ("TPE2", "The Band"),
        ("TIT2", "Second"),
        ("TPE1", "Guest Star"),
        ("TCON", "Rock"),
        ("TYER", "1999"),
    ]


def test_tags_compilation_and_writer() -> None:
    sheet = parse_cue_lines(
        [
            "REM COMPILATION TRUE",
            "REM DISCNUMBER 1",
            'FILE "a.wav" WAVE',
            "TRACK 01 AUDIO",
            'SONGWRITER "Composer"',
            'REM COMMENT "Live"',
            "TRACK 02 AUDIO",
            "REM COMPILATION no",
        ]
    )
    first = build_tags(sheet, 0, 0, "enc", "settings")
    assert first["TCMP"] == "1"
    assert first["TPOS"] == "1"
    assert first["TCOM"] == "Composer"
    assert first["COMM"] == "Live"
    assert "TALB" not in first
    assert "TIT2" not in first
    assert build_tags(sheet, 0, 1, "enc", "settings")["TCMP"] == "0"


def test_plans_follow_sheet_order(sample_sheet: DiscSheet) -> None:
    plans = plans_for(sample_sheet)
    assert [(p.file_index, p.track_index, p.number) for p in plans] == [
        (0, 0, 1), (0, 1, 2), (0, 2, 3), (1, 0, 4), (1, 1, 5),
    ]
    assert [p.source for p in plans] == ["disc.wav"] * 3 + ["bonus.wav"] * 2


def test_plan_names_windows_and_skip(sample_sheet: DiscSheet) -> None:
    plans = plans_for(sample_sheet)
    assert plans[0].label == "2-01"
    assert plans[0].output_name == "2-01 Opening.mp3"
    assert plans[0].window == TimeWindow(start=0.0, duration=240.0)
    assert plans[3].output_name == "2-04 Bonus.mp3"
    assert plans[3].skip is True
    assert not any(p.skip for p in plans[:3] + plans[4:])
    assert plans[4].window.duration is None


def test_plan_untitled_track_is_unknown() -> None:
    sheet = parse_cue_lines(['FILE "a.wav" WAVE', "TRACK 01 AUDIO", "INDEX 01 00:00:00"])
    assert plans_for(sheet)[0].output_name == "01 Unknown.mp3"


def test_plan_artwork_is_relative_to_sheet_dir() -> None:
    sheet = parse_cue_lines(
        [
            'REM ARTWORK "cover.jpg"',
            'FILE "a.wav" WAVE',
            "TRACK 01 AUDIO",
            "TRACK 02 AUDIO",
            'REM ARTWORK "scans/t2.png"',
        ]
    )
    plans = plans_for(sheet, "/rips/album")
    assert plans[0].artwork == os.path.join("/rips/album", "cover.jpg")
    assert plans[1].artwork == os.path.join("/rips/album", "scans/t2.png")


def test_plan_without_artwork(sample_sheet: DiscSheet) -> None:
    assert plans_for(sample_sheet)[0].artwork is None


def test_skip_requires_true_case_insensitively() -> None:
    sheet = parse_cue_lines(
        ['FILE "a.wav" WAVE', "TRACK 01 AUDIO", "REM SKIP TrUe", "TRACK 02 AUDIO", "REM SKIP yes"]
    )
    assert [p.skip for p in plans_for(sheet)] == [True, False]


def test_plan_output_name_sanitizes_label() -> None:
    sheet = parse_cue_lines(
        [
            "REM DISCNUMBER 1/2",
            "REM TOTALDISCS 2",
            'FILE "a.wav" WAVE',
            "TRACK 01 AUDIO",
            'TITLE "Song"',
        ]
    )
    plan = plans_for(sheet)[0]
    assert plan.label == "1/2-01"
    assert plan.output_name == "1-2-01 Song.mp3"
    assert "/" not in plan.output_name
