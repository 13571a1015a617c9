"""
cue2mp3 - Convert a lossless disc image plus its CUE sheet into tagged MP3 tracks

This package provides functionality to:
- Parse CUE sheets into a disc model (files, tracks, indexes, album/track fields)
- Resolve per-track metadata, time windows, numbering and output names
- Drive an external decoder, MP3 encoder and gain tool for every track
- Convert many sheets in one run, skipping those that fail
"""

__version__ = "1.0.0"
__author__ = "cue2mp3 Project"
