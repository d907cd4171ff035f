"""Utility for generating Markdown tables."""


def md_table(headers: list[str], rows: list[list[str]]) -> str:
    """Generate a Markdown table from already-rendered cell text.

    Rows may have differing cell counts; the table is as wide as its widest
    row and shorter rows are padded with empty cells.
    """
    if not rows:
        return ""
    width = max(len(headers), *(len(r) for r in rows))

    def line(cells: list[str]) -> str:
        padded = list(cells) + [""] * (width - len(cells))
        return "| " + " | ".join(padded) + " |"

    out = [line(headers), "| " + " | ".join(["---"] * width) + " |"]
    out.extend(line(r) for r in rows)
    return "\n".join(out)
