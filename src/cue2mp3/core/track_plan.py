"""Per-track encode plans resolved from a parsed sheet"""
import os
from collections import OrderedDict
from dataclasses import dataclass
from typing import Optional

from ..utils.naming import sanitize_filename
from .metadata import resolve
from .models import TimeWindow
from .timing import track_window

TRUE_VALUES = ("TRUE", "1", "YES")

# ID3v2 frame id -> field name, resolved per track
TRACK_TAG_FIELDS = (
    ("TIT2", "TITLE"),
    ("TPE1", "PERFORMER"),
    ("TCON", "GENRE"),
    ("TYER", "DATE"),
    ("COMM", "COMMENT"),
    ("TCOM", "SONGWRITER"),
)


@dataclass(frozen=True)
class TrackPlan:
    """Everything an encoder run needs for one output track."""

    file_index: int
    track_index: int
    number: int
    label: str
    output_name: str
    source: str
    window: TimeWindow
    tags: "OrderedDict[str, str]"
    artwork: Optional[str] = None
    skip: bool = False


def _is_true(value):
    return value is not None and value.upper() in TRUE_VALUES


def track_label(sheet, number):
    """
    Zero-padded track number, prefixed with the disc number on multi-disc sets.

    The padding is two digits, or wider when the sheet has more than 99 tracks.
    """
    width = max(2, len(str(sheet.total_tracks)))
    prefix = ""
    disc = sheet.fields.get("DISCNUMBER")
    total_discs = sheet.fields.get("TOTALDISCS")
    if disc is not None and total_discs is not None:
        try:
            multi_disc = int(total_discs) > 1
        except ValueError:
            multi_disc = False
        if multi_disc:
            prefix = f"{disc}-"
    return f"{prefix}{number:0{width}d}"


def album_directory(sheet):
    """Relative output directory: `<album performer>/<album title>`."""
    return os.path.join(
        sanitize_filename(sheet.fields.get("PERFORMER")),
        sanitize_filename(sheet.fields.get("TITLE")),
    )


def build_tags(sheet, file_index, track_index, encoded_by, encoder_settings):
    """Ordered ID3 frames for one track; frames whose field is absent are left out."""
    track = sheet.track(file_index, track_index)
    tags = OrderedDict()
    tags["TSSE"] = encoder_settings
    tags["TENC"] = encoded_by
    tags["TRCK"] = f"{track.number}/{sheet.total_tracks}"

    disc = sheet.fields.get("DISCNUMBER")
    if disc is not None:
        total_discs = sheet.fields.get("TOTALDISCS")
        tags["TPOS"] = disc if total_discs is None else f"{disc}/{total_discs}"

    compilation = resolve(sheet, "COMPILATION", file_index, track_index)
    if compilation is not None:
        tags["TCMP"] = "1" if _is_true(compilation) else "0"

    if "TITLE" in sheet.fields:
        tags["TALB"] = sheet.fields["TITLE"]
    if "PERFORMER" in sheet.fields:
        tags["TPE2"] = sheet.fields["PERFORMER"]

    for frame, name in TRACK_TAG_FIELDS:
        value = resolve(sheet, name, file_index, track_index)
        if value is not None:
            tags[frame] = value
    return tags


def build_track_plan(sheet, file_index, track_index, sheet_dir, encoded_by, encoder_settings):
    """Resolve label, output name, window, tags, artwork and skip flag for one track."""
    track = sheet.track(file_index, track_index)
    label = track_label(sheet, track.number)
    title = resolve(sheet, "TITLE", file_index, track_index)

    artwork = resolve(sheet, "ARTWORK", file_index, track_index)
    if artwork is not None:
        artwork = os.path.join(sheet_dir, artwork)

    return TrackPlan(
        file_index=file_index,
        track_index=track_index,
        number=track.number,
        label=label,
        output_name=f"{sanitize_filename(label)} {sanitize_filename(title)}.mp3",
        source=sheet.files[file_index].name,
        window=track_window(sheet, file_index, track_index),
        tags=build_tags(sheet, file_index, track_index, encoded_by, encoder_settings),
        artwork=artwork,
        skip=(resolve(sheet, "SKIP", file_index, track_index) or "").upper() == "TRUE",
    )


def build_track_plans(sheet, sheet_dir, encoded_by, encoder_settings):
    """
    Yield a TrackPlan for every track, files in sheet order, tracks in declared order.

    Args:
        sheet: Parsed DiscSheet
        sheet_dir: Directory of the CUE file; ARTWORK paths are relative to it
        encoded_by: Value of the TENC frame
        encoder_settings: Value of the TSSE frame
    """
    for file_index, track_index, _ in sheet.iter_tracks():
        yield build_track_plan(
            sheet, file_index, track_index, sheet_dir, encoded_by, encoder_settings
        )
