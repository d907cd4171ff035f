"""Render page bodies, including the page-structure nodes, as Hugo Markdown."""

from dataclasses import replace
from typing import Any

import yaml

from api_documenter_hugo.api_item import ApiItem
from api_documenter_hugo.custom_doc_nodes import (
    DocEmphasisSpan,
    DocHeading,
    DocNoteBox,
    DocTable,
    DocTableCell,
)
from api_documenter_hugo.doc_node_kind import CustomDocNodeKind
from api_documenter_hugo.doc_nodes import DocNode
from api_documenter_hugo.markdown_emitter import EmitContext, MarkdownEmitter
from api_documenter_hugo.md_escape import md_escape
from api_documenter_hugo.md_table import md_table


class HugoMarkdownEmitter(MarkdownEmitter):
    """Adds headings, note boxes, tables, emphasis and YAML front matter."""

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Register the page-structure kinds next to the general ones."""
        super().__init__(*args, **kwargs)
        self.block_emitters.update(
            {
                CustomDocNodeKind.HEADING: self.emit_heading,
                CustomDocNodeKind.NOTE_BOX: self.emit_note_box,
                CustomDocNodeKind.TABLE: self.emit_table,
            }
        )
        self.inline_emitters[CustomDocNodeKind.EMPHASIS_SPAN] = (
            self.write_emphasis_span
        )

    def emit_with_front_matter(
        self,
        body: DocNode,
        front_matter: dict[str, Any],
        context_item: ApiItem | None = None,
    ) -> str:
        """Render a whole page: the YAML preamble, then the body."""
        text = self.emit(body, context_item)
        page = render_front_matter(front_matter)
        if text:
            page += "\n" + text + "\n"
        return page

    def emit_heading(self, node: DocHeading, context: EmitContext) -> str:
        """An ATX heading; line breaks in the title become spaces."""
        title = " ".join(node.title.split())
        return "#" * node.level + " " + md_escape(title)

    def emit_note_box(self, node: DocNoteBox, context: EmitContext) -> str:
        """The content as a blockquote."""
        content = self.emit_block(node.content, context)
        return "\n".join(f"> {line}" if line else ">" for line in content.split("\n"))

    def emit_table(self, node: DocTable, context: EmitContext) -> str:
        """A pipe table; empty tables render as nothing."""
        cell_context = replace(context, in_table=True)
        headers = [self._cell_text(cell, cell_context) for cell in node.header.cells]
        rows = [
            [self._cell_text(cell, cell_context) for cell in row.cells]
            for row in node.rows
        ]
        return md_table(headers, rows)

    def _cell_text(self, cell: DocTableCell, context: EmitContext) -> str:
        return self.emit_block(cell.content, context)

    def write_emphasis_span(
        self,
        node: DocEmphasisSpan,
        context: EmitContext,
        out: list[str],
    ) -> None:
        """Children rendered with bold and/or italic markers."""
        span_context = replace(context, bold=node.bold, italic=node.italic)
        self.write_inlines(node.get_child_nodes(), span_context, out)


def render_front_matter(front_matter: dict[str, Any]) -> str:
    """Serialize front matter as a YAML block, ``title`` first and the rest sorted."""
    ordered: dict[str, Any] = {}
    if "title" in front_matter:
        ordered["title"] = front_matter["title"]
    for key in sorted(k for k in front_matter if k != "title"):
        ordered[key] = front_matter[key]
    dumped = yaml.safe_dump(
        ordered,
        sort_keys=False,
        default_flow_style=False,
        allow_unicode=True,
    )
    return f"---\n{dumped}---\n"
