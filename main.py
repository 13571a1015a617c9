#!/usr/bin/env python3
"""
cue2mp3 - Main Entry Point

Converts a lossless disc image plus its CUE sheet into per-track MP3 files.
Features:
- CUE sheet parsing with track-over-album metadata fallback
- Per-track time windows from INDEX 01 and explicit END markers
- Disc-prefixed track numbering and filesystem-safe output names
- ID3v2 tagging, cover art embedding and album gain normalization
"""
import os
import sys

# Add src directory to Python path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), 'src'))

from cue2mp3.cli import main


if __name__ == "__main__":
    sys.exit(main())
