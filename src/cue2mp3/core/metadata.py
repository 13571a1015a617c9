"""Field lookup with track-over-album fallback"""


def resolve(sheet, field, file_index=None, track_index=None):
    """
    Look up a metadata field for a track, falling back to the album.

    Args:
        sheet: Parsed DiscSheet
        field: Field name, case-sensitive (e.g. "TITLE")
        file_index: Index of the FILE section, or None for an album-level lookup
        track_index: Index of the track within that section

    Returns:
        The field value, or None when neither the track nor the album sets it
    """
    if file_index is not None and track_index is not None:
        track = sheet.track(file_index, track_index)
        if track is not None and field in track.fields:
            return track.fields[field]
    return sheet.fields.get(field)
