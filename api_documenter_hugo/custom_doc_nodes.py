"""Page-structure nodes layered on top of the general document nodes.

``build_custom_configuration`` returns a configuration in which headings,
note boxes, tables and emphasis spans are registered and the legality
relation of sections and paragraphs is widened to accept them.
"""

from __future__ import annotations

from collections.abc import Iterable

from api_documenter_hugo.doc_node_kind import CustomDocNodeKind, DocNodeKind
from api_documenter_hugo.doc_nodes import (
    DocConfiguration,
    DocNode,
    DocNodeContainer,
    DocPlainText,
    DocSection,
    ensure_allowed_child,
)

CUSTOM_PACKAGE_NAME = "api-documenter-hugo/pages"


class DocEmphasisSpan(DocNodeContainer):
    """Bold and/or italic inline text."""

    kind = CustomDocNodeKind.EMPHASIS_SPAN

    def __init__(
        self,
        configuration: DocConfiguration,
        child_nodes: Iterable[DocNode] | None = None,
        *,
        bold: bool = False,
        italic: bool = False,
    ) -> None:
        """Create the span."""
        super().__init__(configuration, child_nodes)
        self.bold = bold
        self.italic = italic


class DocHeading(DocNode):
    """A section heading, similar to an HTML ``<h2>`` element."""

    kind = CustomDocNodeKind.HEADING

    def __init__(
        self,
        configuration: DocConfiguration,
        title: str = "",
        level: int = 2,
    ) -> None:
        """Create the heading; ``level`` must be between 1 and 5."""
        super().__init__(configuration)
        if level < 1 or level > 5:
            msg = "Heading level must be between 1 and 5"
            raise ValueError(msg)
        self.title = title
        self.level = level


class DocNoteBox(DocNode):
    """A highlighted call-out box, e.g. for warnings."""

    kind = CustomDocNodeKind.NOTE_BOX

    def __init__(
        self,
        configuration: DocConfiguration,
        section_child_nodes: Iterable[DocNode] | None = None,
    ) -> None:
        """Create the box; its content is a section."""
        super().__init__(configuration)
        self.content = DocSection(configuration, section_child_nodes)

    def get_child_nodes(self) -> list[DocNode]:
        """Return the content section."""
        return [self.content]


class DocTableCell(DocNode):
    """A table cell, similar to an HTML ``<td>`` element."""

    kind = CustomDocNodeKind.TABLE_CELL

    def __init__(
        self,
        configuration: DocConfiguration,
        section_child_nodes: Iterable[DocNode] | None = None,
    ) -> None:
        """Create the cell; its content is a section."""
        super().__init__(configuration)
        self.content = DocSection(configuration, section_child_nodes)

    def get_child_nodes(self) -> list[DocNode]:
        """Return the content section."""
        return [self.content]


class DocTableRow(DocNode):
    """A table row, similar to an HTML ``<tr>`` element."""

    kind = CustomDocNodeKind.TABLE_ROW

    def __init__(
        self,
        configuration: DocConfiguration,
        cells: Iterable[DocTableCell] | None = None,
    ) -> None:
        """Create the row."""
        super().__init__(configuration)
        self._cells: list[DocTableCell] = []
        for cell in cells or ():
            self.add_cell(cell)

    @property
    def cells(self) -> tuple[DocTableCell, ...]:
        """The row's cells, read-only."""
        return tuple(self._cells)

    def add_cell(self, cell: DocTableCell) -> None:
        """Append a cell."""
        ensure_allowed_child(self, cell)
        self._cells.append(cell)

    def create_and_add_cell(self) -> DocTableCell:
        """Append an empty cell and return it."""
        cell = DocTableCell(self.configuration)
        self.add_cell(cell)
        return cell

    def add_plain_text_cell(self, text: str) -> DocTableCell:
        """Append a cell holding a single paragraph of plain text."""
        cell = self.create_and_add_cell()
        cell.content.append_node_in_paragraph(
            DocPlainText(self.configuration, text=text),
        )
        return cell

    def get_child_nodes(self) -> list[DocNode]:
        """Return the cells."""
        return list(self._cells)


class DocTable(DocNode):
    """A table with a header row, similar to an HTML ``<table>`` element."""

    kind = CustomDocNodeKind.TABLE

    def __init__(
        self,
        configuration: DocConfiguration,
        header_titles: Iterable[str] | None = None,
        header_cells: Iterable[DocTableCell] | None = None,
        rows: Iterable[DocTableRow] | None = None,
    ) -> None:
        """Create the table from header titles or header cells."""
        super().__init__(configuration)
        self.header = DocTableRow(configuration)
        self._rows: list[DocTableRow] = []

        if header_titles is not None:
            if header_cells is not None:
                msg = "header_titles and header_cells cannot both be specified"
                raise ValueError(msg)
            for title in header_titles:
                self.header.add_plain_text_cell(title)
        elif header_cells is not None:
            for cell in header_cells:
                self.header.add_cell(cell)

        for row in rows or ():
            self.add_row(row)

    @property
    def rows(self) -> tuple[DocTableRow, ...]:
        """The body rows, read-only."""
        return tuple(self._rows)

    def add_row(self, row: DocTableRow) -> None:
        """Append a body row."""
        ensure_allowed_child(self, row)
        self._rows.append(row)

    def create_and_add_row(self) -> DocTableRow:
        """Append an empty body row and return it."""
        row = DocTableRow(self.configuration)
        self.add_row(row)
        return row

    def get_child_nodes(self) -> list[DocNode]:
        """Return the header row followed by the body rows."""
        return [self.header, *self._rows]


def build_custom_configuration() -> DocConfiguration:
    """Create a configuration with the page-structure kinds registered."""
    configuration = DocConfiguration()
    manager = configuration.doc_node_manager

    manager.register_doc_nodes(
        CUSTOM_PACKAGE_NAME,
        [
            (CustomDocNodeKind.EMPHASIS_SPAN, DocEmphasisSpan),
            (CustomDocNodeKind.HEADING, DocHeading),
            (CustomDocNodeKind.NOTE_BOX, DocNoteBox),
            (CustomDocNodeKind.TABLE, DocTable),
            (CustomDocNodeKind.TABLE_CELL, DocTableCell),
            (CustomDocNodeKind.TABLE_ROW, DocTableRow),
        ],
    )

    manager.register_allowable_children(
        CustomDocNodeKind.EMPHASIS_SPAN,
        [DocNodeKind.PLAIN_TEXT, DocNodeKind.SOFT_BREAK],
    )
    manager.register_allowable_children(
        DocNodeKind.SECTION,
        [
            CustomDocNodeKind.HEADING,
            CustomDocNodeKind.NOTE_BOX,
            CustomDocNodeKind.TABLE,
        ],
    )
    manager.register_allowable_children(
        DocNodeKind.PARAGRAPH,
        [CustomDocNodeKind.EMPHASIS_SPAN],
    )
    manager.register_allowable_children(
        CustomDocNodeKind.TABLE,
        [CustomDocNodeKind.TABLE_ROW],
    )
    manager.register_allowable_children(
        CustomDocNodeKind.TABLE_ROW,
        [CustomDocNodeKind.TABLE_CELL],
    )

    return configuration

