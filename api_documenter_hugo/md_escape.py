"""Utilities for escaping text written into Markdown."""

import re

SPECIAL_CHARS_RE = re.compile(r"([*#\[\]_|`~])")


def md_escape(text: str) -> str:
    """Escape text so that Markdown renders it literally."""
    text = text.replace("\\", "\\\\")
    text = SPECIAL_CHARS_RE.sub(r"\\\1", text)
    text = text.replace("---", "-\\-\\-")
    return text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


def md_escape_code(code: str, *, in_table: bool = False) -> str:
    """Wrap ``code`` in a code span, choosing a delimiter it does not contain."""
    if in_table:
        code = code.replace("|", "\\|")
    code = code.replace("\r", "").replace("\n", " ")
    runs = [len(m) for m in re.findall(r"`+", code)]
    delimiter = "`" * (max(runs, default=0) + 1)
    if code.startswith("`") or code.endswith("`"):
        code = f" {code} "
    return f"{delimiter}{code}{delimiter}"
