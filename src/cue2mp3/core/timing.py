"""Disc time conversion and per-track time windows"""
from .models import TimeWindow

FRAMES_PER_SECOND = 75


def convert_time(disc_time):
    """
    Convert `minutes:seconds:frames` to seconds.

    Returns:
        Seconds as a float, or None if the string is not a disc time
    """
    if disc_time is None:
        return None
    parts = disc_time.strip().split(':')
    if len(parts) != 3:
        return None
    try:
        minutes, seconds, frames = (int(p) for p in parts)
    except ValueError:
        return None
    return minutes * 60 + seconds + frames / FRAMES_PER_SECOND


def time_at_index(sheet, file_index, track_index, index_number):
    """Seconds at the given INDEX of a track, or None if the track or index is missing."""
    track = sheet.track(file_index, track_index)
    if track is None:
        return None
    return convert_time(track.indexes.get(index_number))


def track_window(sheet, file_index, track_index):
    """
    Compute where a track starts and how long it runs.

    INDEX 01 is the start; INDEX 00 (pre-gap) is ignored. The duration comes
    from an explicit END, else from the next track's INDEX 01 in the same
    file. The last track of a file without END runs to the end of the file.
    """
    start = time_at_index(sheet, file_index, track_index, 1)
    if start is None:
        return TimeWindow()

    track = sheet.track(file_index, track_index)
    if track.end is not None:
        end = convert_time(track.end)
    else:
        end = time_at_index(sheet, file_index, track_index + 1, 1)

    if end is None:
        return TimeWindow(start=start)
    return TimeWindow(start=start, duration=end - start)
