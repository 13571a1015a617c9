"""Utility functions and helpers"""

from .helpers import safe_print, run_command, run_pipeline, CommandResult
from .encoding import read_cue_lines
from .naming import sanitize_filename

__all__ = [
    "safe_print",
    "run_command",
    "run_pipeline",
    "CommandResult",
    "read_cue_lines",
    "sanitize_filename",
]
