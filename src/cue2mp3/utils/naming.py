"""Filesystem-safe names from metadata strings"""
import re

UNKNOWN = "Unknown"

_NON_ASCII = re.compile(r'[^\x00-\x7f]')
_RESERVED = re.compile(r'[/\\":*]')
_TRAILING = re.compile(r'[.\s]+$')


def sanitize_filename(value):
    """
    Map an optional metadata string to a name safe to use as a path component.

    None becomes "Unknown". Non-ASCII characters and / \\ " : * become "-",
    "?" is dropped, and trailing dots and whitespace are removed. Distinct
    inputs may collide; callers writing files handle that themselves.
    """
    if value is None:
        return UNKNOWN
    value = _NON_ASCII.sub('-', value)
    value = _RESERVED.sub('-', value)
    value = value.replace('?', '')
    return _TRAILING.sub('', value)
