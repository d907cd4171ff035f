"""Building blocks shared by page bodies and member tables."""

import re

from api_documenter_hugo.api_item import ApiItem
from api_documenter_hugo.api_item_kind import OPTIONAL_KINDS, PROPERTY_KINDS
from api_documenter_hugo.api_model import ApiModel
from api_documenter_hugo.custom_doc_nodes import DocEmphasisSpan, DocTableCell
from api_documenter_hugo.doc_node_kind import DocNodeKind
from api_documenter_hugo.doc_nodes import (
    DocCodeSpan,
    DocConfiguration,
    DocLinkTag,
    DocNode,
    DocNodeContainer,
    DocParagraph,
    DocPlainText,
    DocSection,
)
from api_documenter_hugo.excerpt import Excerpt, ExcerptToken, ExcerptTokenKind
from api_documenter_hugo.link_for_item import link_for_item
from api_documenter_hugo.release_tag import ReleaseTag

NEWLINES_RE = re.compile(r"[\r\n]+")


class TableCells:
    """Creates cells, links and excerpt paragraphs for one documentation run."""

    def __init__(
        self,
        configuration: DocConfiguration,
        api_model: ApiModel,
        base_url: str,
    ) -> None:
        """Bind the factory to the node configuration, model and site URL."""
        self.configuration = configuration
        self.api_model = api_model
        self.base_url = base_url

    def link_for(self, item: ApiItem) -> str:
        """URL of the page written for ``item``."""
        return link_for_item(item, self.base_url)

    def link_tag(self, item: ApiItem, text: str) -> DocLinkTag:
        """A link node pointing at ``item``'s page."""
        return DocLinkTag(
            self.configuration,
            link_text=text,
            url_destination=self.link_for(item),
        )

    def plain(self, text: str) -> DocPlainText:
        """A plain-text node."""
        return DocPlainText(self.configuration, text=text)

    def paragraph(self, nodes: list[DocNode] | None = None) -> DocParagraph:
        """A paragraph holding ``nodes``."""
        return DocParagraph(self.configuration, nodes)

    def emphasis(
        self,
        text: str,
        *,
        bold: bool = False,
        italic: bool = False,
    ) -> DocEmphasisSpan:
        """Emphasized plain text."""
        return DocEmphasisSpan(
            self.configuration,
            [self.plain(text)],
            bold=bold,
            italic=italic,
        )

    def bold_paragraph(self, text: str) -> DocParagraph:
        """A paragraph holding one bold label, e.g. ``Returns:``."""
        return self.paragraph([self.emphasis(text, bold=True)])

    def cell(self, nodes: list[DocNode] | None = None) -> DocTableCell:
        """A table cell holding block nodes."""
        return DocTableCell(self.configuration, nodes)

    def text_cell(self, text: str) -> DocTableCell:
        """A cell holding one paragraph of plain text."""
        return self.cell([self.paragraph([self.plain(text)])])

    def title_cell(self, item: ApiItem) -> DocTableCell:
        """A cell linking to the item, labelled with its concise signature."""
        link_text = item.get_concise_signature()
        if item.kind in OPTIONAL_KINDS and item.is_optional:
            link_text += "?"
        return self.cell([self.paragraph([self.link_tag(item, link_text)])])

    def description_cell(
        self,
        item: ApiItem,
        *,
        is_inherited: bool = False,
    ) -> DocTableCell:
        """A cell with the release badge, optional marker, summary and origin."""
        section = DocSection(self.configuration)

        if item.release_tag in (ReleaseTag.ALPHA, ReleaseTag.BETA):
            badge = "ALPHA" if item.release_tag == ReleaseTag.ALPHA else "BETA"
            section.append_nodes_in_paragraph(
                [
                    self.emphasis(f"({badge})", bold=True, italic=True),
                    self.plain(" "),
                ]
            )

        if item.kind in OPTIONAL_KINDS and item.is_optional:
            section.append_nodes_in_paragraph(
                [self.emphasis("(Optional)", italic=True), self.plain(" ")]
            )

        if item.doc_comment is not None:
            self.append_and_merge_section(section, item.doc_comment.summary_section)

        if is_inherited and item.parent is not None:
            section.append_node(
                self.paragraph(
                    [
                        self.plain("(Inherited from "),
                        self.link_tag(item.parent, item.parent.display_name),
                        self.plain(")"),
                    ]
                )
            )

        return self.cell(list(section.nodes))

    def modifiers_cell(self, item: ApiItem) -> DocTableCell:
        """A cell listing modifiers in declaration order."""
        flags = (
            ("protected", item.is_protected),
            ("static", item.is_static),
            ("abstract", item.is_abstract),
            ("readonly", item.is_readonly),
        )
        return self.cell(
            [
                self.paragraph([DocCodeSpan(self.configuration, code=name)])
                for name, present in flags
                if present
            ]
        )

    def property_type_cell(self, item: ApiItem) -> DocTableCell:
        """A cell with the property's type, cross-linked."""
        if item.kind not in PROPERTY_KINDS:
            return self.cell()
        return self.cell([self.type_paragraph(item.property_type_excerpt)])

    def initializer_cell(self, item: ApiItem) -> DocTableCell:
        """A cell with the declared initializer as code."""
        section = DocSection(self.configuration)
        initializer = item.initializer_excerpt
        if initializer is not None:
            section.append_node_in_paragraph(
                DocCodeSpan(self.configuration, code=initializer.text)
            )
        return self.cell(list(section.nodes))

    def type_paragraph(self, excerpt: Excerpt) -> DocParagraph:
        """A paragraph rendering a type, or ``(not declared)``."""
        paragraph = self.paragraph()
        if not excerpt.text.strip():
            paragraph.append_node(self.plain("(not declared)"))
        else:
            self.append_excerpt(paragraph, excerpt)
        return paragraph

    def append_excerpt(self, container: DocNodeContainer, excerpt: Excerpt) -> None:
        """Append every token of ``excerpt``, linking resolvable references."""
        for token in excerpt.spanned_tokens:
            self.append_token(container, token)

    def append_token(self, container: DocNodeContainer, token: ExcerptToken) -> None:
        """Append one token as a link when it references a described item."""
        # Links cannot live inside code spans, so type text is plain and unwrapped.
        text = NEWLINES_RE.sub(" ", token.text)
        if token.kind == ExcerptTokenKind.REFERENCE and token.canonical_reference:
            target = self.api_model.resolve_declaration_reference(
                token.canonical_reference
            )
            if target is not None:
                container.append_node(self.link_tag(target, text))
                return
        container.append_node(self.plain(text))

    @staticmethod
    def append_section(output: DocSection, section: DocSection) -> None:
        """Append the nodes of ``section`` as they are."""
        output.append_nodes(section.nodes)

    @staticmethod
    def append_and_merge_section(output: DocSection, section: DocSection) -> None:
        """Append ``section``, merging its first paragraph into the trailing one."""
        for index, node in enumerate(section.nodes):
            if index == 0 and node.kind == DocNodeKind.PARAGRAPH:
                output.append_nodes_in_paragraph(node.get_child_nodes())
            else:
                output.append_node(node)
