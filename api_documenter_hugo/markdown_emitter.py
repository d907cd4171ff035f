"""Render general document nodes to Markdown text."""

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from api_documenter_hugo.api_item import ApiItem
from api_documenter_hugo.api_model import ApiModel
from api_documenter_hugo.doc_node_kind import DocNodeKind
from api_documenter_hugo.doc_nodes import (
    DocCodeSpan,
    DocFencedCode,
    DocLinkTag,
    DocNode,
    DocPlainText,
)
from api_documenter_hugo.errors import UnsupportedKindError
from api_documenter_hugo.md_codeblock import md_codeblock
from api_documenter_hugo.md_escape import md_escape, md_escape_code

logger = logging.getLogger(__name__)

WHITESPACE_RE = re.compile(r"\s+")
SURROUNDING_SPACE_RE = re.compile(r"^(\s*)(.*?)(\s*)$", re.DOTALL)

# Characters after which an emphasis marker can be written directly.
MARKER_SAFE_PREVIOUS = ("", "\n", " ", "[", ">")


@dataclass(frozen=True)
class EmitContext:
    """Where in the tree the emitter currently is."""

    context_item: ApiItem | None = None
    in_table: bool = False
    bold: bool = False
    italic: bool = False


BlockEmitter = Callable[[Any, EmitContext], str]
InlineEmitter = Callable[[Any, EmitContext, list[str]], None]


class MarkdownEmitter:
    """Turns a document-node tree into Markdown.

    Block nodes render to strings that are joined with blank lines; inline
    nodes append fragments to the paragraph being written. Links to items are
    resolved through ``link_for`` when they are emitted.
    """

    def __init__(
        self,
        api_model: ApiModel,
        link_for: Callable[[ApiItem], str],
    ) -> None:
        """Bind the emitter to the model used to resolve item references."""
        self.api_model = api_model
        self.link_for = link_for
        self.block_emitters: dict[str, BlockEmitter] = {
            DocNodeKind.SECTION: self.emit_section,
            DocNodeKind.PARAGRAPH: self.emit_paragraph,
            DocNodeKind.FENCED_CODE: self.emit_fenced_code,
        }
        self.inline_emitters: dict[str, InlineEmitter] = {
            DocNodeKind.PLAIN_TEXT: self.write_plain_text,
            DocNodeKind.SOFT_BREAK: self.write_soft_break,
            DocNodeKind.CODE_SPAN: self.write_code_span,
            DocNodeKind.LINK_TAG: self.write_link_tag,
        }

    def emit(self, node: DocNode, context_item: ApiItem | None = None) -> str:
        """Render ``node`` and everything below it."""
        return self.emit_block(node, EmitContext(context_item=context_item))

    def emit_block(self, node: DocNode, context: EmitContext) -> str:
        """Render a block-level node; inline nodes become their own paragraph."""
        emitter = self.block_emitters.get(node.kind)
        if emitter is not None:
            return emitter(node, context)
        out: list[str] = []
        self.write_inline(node, context, out)
        return "".join(out)

    def write_inline(
        self,
        node: DocNode,
        context: EmitContext,
        out: list[str],
    ) -> None:
        """Append the rendering of an inline node to ``out``."""
        emitter = self.inline_emitters.get(node.kind)
        if emitter is None:
            raise UnsupportedKindError(node.kind)
        emitter(node, context, out)

    def write_inlines(
        self,
        nodes: list[DocNode],
        context: EmitContext,
        out: list[str],
    ) -> None:
        """Append several inline nodes."""
        for node in nodes:
            self.write_inline(node, context, out)

    def emit_section(self, node: DocNode, context: EmitContext) -> str:
        """Blocks separated by blank lines (``<br/>`` inside a table cell)."""
        blocks = [self.emit_block(child, context) for child in node.get_child_nodes()]
        separator = "<br/>" if context.in_table else "\n\n"
        return separator.join(block for block in blocks if block)

    def emit_paragraph(self, node: DocNode, context: EmitContext) -> str:
        """The paragraph's inline content, with surrounding spaces trimmed."""
        out: list[str] = []
        self.write_inlines(node.get_child_nodes(), context, out)
        return "".join(out).strip(" ")

    def emit_fenced_code(self, node: DocFencedCode, context: EmitContext) -> str:
        """A fenced block; inside a table, a code span."""
        if context.in_table:
            return md_escape_code(node.code.strip(), in_table=True)
        return md_codeblock(node.language, node.code)

    def write_plain_text(
        self,
        node: DocPlainText,
        context: EmitContext,
        out: list[str],
    ) -> None:
        """Escaped text, wrapped in emphasis markers when requested."""
        text = WHITESPACE_RE.sub(" ", node.text)
        leading, middle, trailing = SURROUNDING_SPACE_RE.match(text).groups()
        out.append(leading)
        if middle:
            if context.bold or context.italic:
                if _last_character(out) not in MARKER_SAFE_PREVIOUS:
                    # Keeps "**a**" and "_b_" apart when they touch.
                    out.append("<!-- -->")
            if context.bold:
                out.append("**")
            if context.italic:
                out.append("_")
            out.append(md_escape(middle))
            if context.italic:
                out.append("_")
            if context.bold:
                out.append("**")
        out.append(trailing)

    def write_soft_break(
        self,
        node: DocNode,
        context: EmitContext,
        out: list[str],
    ) -> None:
        """A newline, or a space where Markdown cannot break lines."""
        if context.in_table:
            if _last_character(out) not in ("", " "):
                out.append(" ")
        else:
            out.append("\n")

    def write_code_span(
        self,
        node: DocCodeSpan,
        context: EmitContext,
        out: list[str],
    ) -> None:
        """Inline code."""
        out.append(md_escape_code(node.code, in_table=context.in_table))

    def write_link_tag(
        self,
        node: DocLinkTag,
        context: EmitContext,
        out: list[str],
    ) -> None:
        """A Markdown link; unresolvable item references become plain text."""
        if node.url_destination is not None:
            text = node.link_text or node.url_destination
            out.append(f"[{md_escape(text)}]({node.url_destination})")
            return

        destination = node.code_destination or ""
        text = node.link_text or destination
        target = self.api_model.resolve_declaration_reference(
            destination, context.context_item
        )
        if target is None:
            logger.warning(
                "Unable to resolve reference %r from %s",
                destination,
                context.context_item,
            )
            plain = DocPlainText(node.configuration, text=text)
            self.write_plain_text(plain, context, out)
            return
        out.append(f"[{md_escape(text)}]({self.link_for(target)})")


def _last_character(out: list[str]) -> str:
    for fragment in reversed(out):
        if fragment:
            return fragment[-1]
    return ""
