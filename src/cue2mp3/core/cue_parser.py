"""CUE sheet parsing into the disc model"""
import re

from ..utils.encoding import read_cue_lines
from .models import DiscSheet, FileSection, TrackEntry, MalformedCueSheetError

FILE_PATTERN = re.compile(r'^\s*FILE\s+"(.*)"\s+\w+')
TRACK_PATTERN = re.compile(r'^\s*TRACK\s+(\d+)\s+AUDIO')
INDEX_PATTERN = re.compile(r'^\s*INDEX\s+(\d+)\s+(.*)$')

_LEADING_JUNK = re.compile(r'^[^A-Za-z0-9]+')
_QUOTED_PAIR = re.compile(r'^(\S+)\s+"(.*?)"')
_BARE_PAIR = re.compile(r'^(\w+)\s+(.*)$')


def normalize_line(line):
    """Remove carriage returns and line feeds from a raw line."""
    return line.replace('\r', '').replace('\n', '')


def escape_quotes(value):
    return value.replace('"', '\\"')


def tokenize_line(line):
    """
    Extract a (key, value) pair from a free-form metadata line.

    REM prefixes are dropped so that `REM GENRE "Rock"` reads as GENRE.
    A quoted value wins over the bare `KEY rest of line` form.

    Returns:
        (key, value) tuple, or None when the line carries no pair
    """
    rest = _LEADING_JUNK.sub('', line).lstrip()
    if rest.startswith('REM '):
        rest = rest[4:]

    match = _QUOTED_PAIR.match(rest) or _BARE_PAIR.match(rest)
    if match is None:
        return None
    return match.group(1), escape_quotes(match.group(2))


class _SheetBuilder:
    """Running state of one parse: file cursor, track cursor and max track number."""

    def __init__(self):
        self.sheet = DiscSheet()
        self.file_index = -1
        self.track_index = -1
        self.max_track = 0
        self.line_number = 0

    @property
    def current_file(self):
        if self.file_index < 0:
            return None
        return self.sheet.files[self.file_index]

    @property
    def current_track(self):
        if self.current_file is None or self.track_index < 0:
            return None
        return self.current_file.tracks[self.track_index]

    def on_file(self, match):
        self.sheet.files.append(FileSection(name=match.group(1)))
        self.file_index = len(self.sheet.files) - 1
        self.track_index = -1

    def on_track(self, match):
        section = self.current_file
        if section is None:
            raise MalformedCueSheetError("TRACK before any FILE", self.line_number)
        number = int(match.group(1))
        section.tracks.append(TrackEntry(number=number))
        self.track_index = len(section.tracks) - 1
        self.max_track = max(self.max_track, number)

    def on_index(self, match):
        track = self.current_track
        if track is None:
            raise MalformedCueSheetError("INDEX outside of a TRACK", self.line_number)
        track.indexes[int(match.group(1))] = match.group(2)

    def on_metadata(self, line):
        pair = tokenize_line(line)
        if pair is None:
            return
        key, value = pair
        track = self.current_track
        if track is not None:
            track.fields[key] = value
        else:
            self.sheet.fields[key] = value

    def feed(self, line):
        self.line_number += 1
        for pattern, handler in self.handlers:
            match = pattern.match(line)
            if match:
                handler(self, match)
                return
        self.on_metadata(line)

    def finish(self):
        self.sheet.total_tracks = self.max_track
        self.sheet.fields["TOTAL_TRACKS"] = str(self.max_track)
        return self.sheet

    handlers = (
        (FILE_PATTERN, on_file),
        (TRACK_PATTERN, on_track),
        (INDEX_PATTERN, on_index),
    )


def parse_cue_lines(lines):
    """
    Build a DiscSheet from the lines of a CUE sheet.

    Lines that match nothing are skipped.

    Raises:
        MalformedCueSheetError: TRACK before any FILE, or INDEX before any TRACK
    """
    builder = _SheetBuilder()
    for raw in lines:
        builder.feed(normalize_line(raw))
    return builder.finish()


def load_cue_sheet(cue_path):
    """
    Read and parse a CUE file.

    Returns:
        DiscSheet, or None if the file cannot be read
    """
    try:
        lines = read_cue_lines(cue_path)
    except OSError:
        return None
    return parse_cue_lines(lines)
