"""Lenient numeric parsing for attribute text.

Profile files are edited by hand and produced by older releases, so numeric
attributes never abort loading. Unparsable text is replaced by a default.
"""

from __future__ import annotations

from controlmap.core.utils.math import clamp

UINT8_MAX = 255


def parse_int(text: str | None, default: int = 0) -> int:
    """Parse a base-10 integer, substituting ``default`` on failure.

    Surrounding whitespace is ignored.

    Example:
        >>> parse_int(" 12 ")
        12
        >>> parse_int("fast")
        0
    """
    if text is None:
        return default
    try:
        return int(text.strip(), 10)
    except ValueError:
        return default


def parse_uint8(text: str | None, default: int = 0) -> int:
    """Parse an unsigned 8-bit value.

    Negative or unparsable text yields ``default``; values above 255 clamp to 255.

    Example:
        >>> parse_uint8("300")
        255
        >>> parse_uint8("-4")
        0
    """
    value = parse_int(text, default=-1)
    if value < 0:
        return default
    return clamp(value, 0, UINT8_MAX)
