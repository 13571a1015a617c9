"""Core functionality modules"""

from .models import (
    DiscSheet,
    FileSection,
    TrackEntry,
    TimeWindow,
    CueSheetError,
    MalformedCueSheetError,
)
from .cue_parser import normalize_line, tokenize_line, parse_cue_lines, load_cue_sheet
from .metadata import resolve
from .timing import convert_time, time_at_index, track_window
from .track_plan import TrackPlan, track_label, build_track_plans
from .job_orchestrator import convert_all

__all__ = [
    "DiscSheet",
    "FileSection",
    "TrackEntry",
    "TimeWindow",
    "CueSheetError",
    "MalformedCueSheetError",
    "normalize_line",
    "tokenize_line",
    "parse_cue_lines",
    "load_cue_sheet",
    "resolve",
    "convert_time",
    "time_at_index",
    "track_window",
    "TrackPlan",
    "track_label",
    "build_track_plans",
    "convert_all",
]
