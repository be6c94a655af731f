"""Shared utilities for controlmap."""

from controlmap.core.utils.math import clamp
from controlmap.core.utils.parsing import parse_int, parse_uint8

__all__ = [
    "clamp",
    "parse_int",
    "parse_uint8",
]
