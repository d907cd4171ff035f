"""Utility for generating Markdown code blocks."""

import re

BACKTICK_RUN_RE = re.compile(r"`{3,}")


def md_codeblock(lang: str, code: str) -> str:
    """Generate a fenced Markdown code block.

    The fence is made longer than any backtick run inside ``code``.
    """
    longest = max((len(m) for m in BACKTICK_RUN_RE.findall(code)), default=2)
    fence = "`" * (longest + 1)
    return f"""{fence}{lang}
{code.rstrip()}
{fence}"""
