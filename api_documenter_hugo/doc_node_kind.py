"""Kind tags for document nodes.

Kinds are plain strings so that extensions can register new ones next to the
built-in set without touching this module.
"""


class DocNodeKind:
    """Built-in general kinds provided by every document configuration."""

    SECTION = "Section"
    PARAGRAPH = "Paragraph"
    PLAIN_TEXT = "PlainText"
    SOFT_BREAK = "SoftBreak"
    LINK_TAG = "LinkTag"
    CODE_SPAN = "CodeSpan"
    FENCED_CODE = "FencedCode"


class CustomDocNodeKind:
    """Kinds added by the page-rendering extension."""

    EMPHASIS_SPAN = "EmphasisSpan"
    HEADING = "Heading"
    NOTE_BOX = "NoteBox"
    TABLE = "Table"
    TABLE_CELL = "TableCell"
    TABLE_ROW = "TableRow"
