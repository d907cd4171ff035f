"""Utility for making display names safe for use as path segments."""

import re

# Letters, digits and dashes pass through; "_" is the escape character.
SAFE_CHAR_RE = re.compile(r"[A-Za-z0-9-]")


def safe_filename(name: str) -> str:
    """Make a reversible path segment out of any display name.

    ``_`` is doubled and every other character outside ``[A-Za-z0-9-]`` becomes
    ``_<hex code point>_``, so distinct names never share a segment. The empty
    name maps to a lone ``_``, which no other name produces.
    """
    if not name:
        return "_"
    out = []
    for char in name:
        if char == "_":
            out.append("__")
        elif SAFE_CHAR_RE.fullmatch(char):
            out.append(char)
        else:
            out.append(f"_{ord(char):x}_")
    return "".join(out)
