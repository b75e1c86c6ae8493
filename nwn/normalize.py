"""Trailing whitespace normalization."""

from __future__ import annotations

from .constants import TRAILING_WHITESPACE


def strip_trailing_whitespace(data: bytes) -> bytes:
    """Remove spaces and tabs that sit right before each line feed.

    Bytes after the last line feed are left alone, so a final line without
    a newline keeps its trailing whitespace.
    """
    return TRAILING_WHITESPACE.sub(b"\n", data)

