"""Encoding detection for CUE sheet text"""
import chardet


def detect_encoding(raw_data):
    """
    Guess the text encoding of raw CUE sheet bytes.

    Args:
        raw_data: Bytes read from the CUE file

    Returns:
        Codec name usable with bytes.decode()
    """
    if raw_data.startswith(b'\xef\xbb\xbf'):
        return 'utf-8-sig'

    result = chardet.detect(raw_data)
    detected_encoding = result.get('encoding') if result else None
    if not detected_encoding:
        return 'utf-8'

    # ASCII is a subset of UTF-8; prefer the wider codec
    if detected_encoding.upper() in ('UTF-8', 'ASCII'):
        return 'utf-8'
    return detected_encoding


def read_cue_lines(cue_path):
    """
    Read a CUE file as a list of raw lines, line endings included.

    Args:
        cue_path: Path to the CUE file

    Returns:
        List of lines

    Raises:
        OSError: If the file cannot be opened or read
    """
    with open(cue_path, 'rb') as f:
        raw_data = f.read()

    encoding = detect_encoding(raw_data)
    try:
        content = raw_data.decode(encoding)
    except (LookupError, UnicodeDecodeError):
        content = raw_data.decode('utf-8', errors='replace')
    return content.splitlines(keepends=True)
