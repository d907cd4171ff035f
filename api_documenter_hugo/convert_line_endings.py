"""Utility for normalizing line endings before a page is written."""

import re

LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


def convert_line_endings(text: str, newline: str) -> str:
    """Replace every kind of line break in ``text`` with ``newline``."""
    return LINE_BREAK_RE.sub(newline, text)
