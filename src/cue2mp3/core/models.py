"""Disc model built from a CUE sheet"""
from dataclasses import dataclass, field
from typing import Dict, List, Optional


class CueSheetError(Exception):
    """Base exception for CUE sheet handling."""


class MalformedCueSheetError(CueSheetError):
    """Raised when a sheet's FILE/TRACK/INDEX structure cannot be followed."""

    def __init__(self, message, line_number=None):
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
        self.line_number = line_number


@dataclass
class TrackEntry:
    """One audio track inside a FILE section."""

    number: int
    fields: Dict[str, str] = field(default_factory=dict)
    indexes: Dict[int, str] = field(default_factory=dict)

    @property
    def end(self) -> Optional[str]:
        """Explicit END disc time, if the sheet gives one."""
        return self.fields.get("END")


@dataclass
class FileSection:
    """One source audio file and the tracks cut from it."""

    name: str
    tracks: List[TrackEntry] = field(default_factory=list)


@dataclass
class DiscSheet:
    """Album-level fields plus the ordered FILE sections of a sheet."""

    fields: Dict[str, str] = field(default_factory=dict)
    files: List[FileSection] = field(default_factory=list)
    total_tracks: int = 0

    def track(self, file_index, track_index) -> Optional[TrackEntry]:
        """Return the addressed track, or None when either index is out of range."""
        if not 0 <= file_index < len(self.files):
            return None
        tracks = self.files[file_index].tracks
        if not 0 <= track_index < len(tracks):
            return None
        return tracks[track_index]

    def iter_tracks(self):
        """Yield (file_index, track_index, track) in sheet order."""
        for file_index, section in enumerate(self.files):
            for track_index, track in enumerate(section.tracks):
                yield file_index, track_index, track


@dataclass(frozen=True)
class TimeWindow:
    """Start and duration in seconds; None leaves that bound unconstrained."""

    start: Optional[float] = None
    duration: Optional[float] = None
