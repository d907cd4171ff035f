"""Assemble the document-node body and front matter of each item's page."""

import logging
from collections.abc import Callable

from api_documenter_hugo.api_item import ApiItem
from api_documenter_hugo.api_item_kind import DECLARED_KINDS, ApiItemKind, is_page_kind
from api_documenter_hugo.api_model import ApiModel
from api_documenter_hugo.custom_doc_nodes import (
    DocHeading,
    DocNoteBox,
    build_custom_configuration,
)
from api_documenter_hugo.doc_comment import DocBlock, StandardTags
from api_documenter_hugo.doc_nodes import DocConfiguration, DocFencedCode, DocSection
from api_documenter_hugo.documenter_config import DocumenterConfig
from api_documenter_hugo.errors import UnsupportedKindError
from api_documenter_hugo.excerpt import ExcerptTokenKind
from api_documenter_hugo.find_members_with_inheritance import (
    find_members_with_inheritance,
)
from api_documenter_hugo.member_tables import MemberTables
from api_documenter_hugo.page import Diagnostic, Page
from api_documenter_hugo.page_title import page_front_matter
from api_documenter_hugo.release_tag import ReleaseTag
from api_documenter_hugo.table_cells import TableCells

logger = logging.getLogger(__name__)

ALPHA_WARNING = (
    "This API is provided as an alpha preview for developers and may change"
    " based on feedback that we receive.  Do not use this API in a production"
    " environment."
)
BETA_WARNING = (
    "This API is provided as a beta preview for developers and may change"
    " based on feedback that we receive.  Do not use this API in a production"
    " environment."
)
DEPRECATED_PREFIX = "Warning: This API is now obsolete. "
INCOMPLETE_INHERITANCE_NOTE = (
    "(Some inherited members may not be shown because they are not represented"
    " in the documentation.)"
)

# Kinds whose remarks and examples come before the member tables.
REMARKS_FIRST_KINDS = frozenset(
    {
        ApiItemKind.CLASS,
        ApiItemKind.INTERFACE,
        ApiItemKind.NAMESPACE,
        ApiItemKind.PACKAGE,
        ApiItemKind.MODEL,
    }
)

TableWriter = Callable[[DocSection, ApiItem], list[ApiItem]]


class PageBuilder:
    """Builds one ``Page`` per page-owning item.

    Non-fatal problems (an inheritance query that may have missed members) are
    logged and collected in ``diagnostics``.
    """

    def __init__(
        self,
        api_model: ApiModel,
        config: DocumenterConfig | None = None,
        configuration: DocConfiguration | None = None,
    ) -> None:
        """Prepare the builder for one run over ``api_model``."""
        self.api_model = api_model
        self.config = config or DocumenterConfig()
        self.configuration = configuration or build_custom_configuration()
        self.cells = TableCells(self.configuration, api_model, self.config.base_url)
        self.tables = MemberTables(self.cells)
        self.diagnostics: list[Diagnostic] = []
        self._table_writers: dict[str, TableWriter] = {
            ApiItemKind.MODEL: self.tables.write_model_table,
            ApiItemKind.PACKAGE: self.tables.write_package_tables,
            ApiItemKind.ENTRY_POINT: self.tables.write_entry_point_tables,
            ApiItemKind.NAMESPACE: self.tables.write_namespace_tables,
            ApiItemKind.CLASS: self._write_class_tables,
            ApiItemKind.INTERFACE: self._write_interface_tables,
            ApiItemKind.ENUM: self.tables.write_enum_tables,
            ApiItemKind.CONSTRUCTOR: self.tables.write_parameter_tables,
            ApiItemKind.CONSTRUCT_SIGNATURE: self.tables.write_parameter_tables,
            ApiItemKind.METHOD: self.tables.write_parameter_tables,
            ApiItemKind.METHOD_SIGNATURE: self.tables.write_parameter_tables,
            ApiItemKind.FUNCTION: self.tables.write_parameter_tables,
            ApiItemKind.PROPERTY: _no_tables,
            ApiItemKind.PROPERTY_SIGNATURE: _no_tables,
            ApiItemKind.TYPE_ALIAS: _no_tables,
            ApiItemKind.VARIABLE: _no_tables,
        }

    def build_page(self, item: ApiItem) -> Page | None:
        """Build the page of ``item``; ``None`` for the package's main entry point.

        The main entry point shares its page with the package, which is
        written from the package itself.
        """
        if item.kind == ApiItemKind.ENTRY_POINT and not item.import_path:
            return None
        table_writer = self._table_writers.get(item.kind)
        if table_writer is None or not is_page_kind(item.kind):
            raise UnsupportedKindError(item.kind, str(item))

        front_matter = page_front_matter(item, self.config.model_front_matter)
        if item.kind == ApiItemKind.PACKAGE:
            logger.info("Writing %s package", item.display_name)

        output = DocSection(self.configuration)
        self._write_release_warning(output, item)

        decorator_blocks: list[DocBlock] = []
        comment = item.doc_comment
        if comment is not None:
            decorator_blocks = comment.blocks_with_tag(StandardTags.DECORATOR)
            if comment.deprecated_block is not None:
                note = DocNoteBox(
                    self.configuration,
                    [self.cells.paragraph([self.cells.plain(DEPRECATED_PREFIX)])],
                )
                note.content.append_nodes(comment.deprecated_block.content.nodes)
                output.append_node(note)
            self.cells.append_section(output, comment.summary_section)

        if item.kind in DECLARED_KINDS:
            self._write_signature(output, item)
            self._write_heritage_types(output, item)

        if decorator_blocks:
            output.append_node(self.cells.bold_paragraph("Decorators:"))
            for block in decorator_blocks:
                self.cells.append_section(output, block.content)

        remarks_first = item.kind in REMARKS_FIRST_KINDS
        if remarks_first:
            self._write_remarks_section(output, item)

        child_items = table_writer(output, item)

        if not remarks_first:
            self._write_remarks_section(output, item)

        return Page(item, front_matter, output, child_items)

    def _write_release_warning(self, output: DocSection, item: ApiItem) -> None:
        if item.release_tag == ReleaseTag.ALPHA:
            warning = ALPHA_WARNING
        elif item.release_tag == ReleaseTag.BETA:
            warning = BETA_WARNING
        else:
            return
        output.append_node(
            DocNoteBox(
                self.configuration,
                [self.cells.paragraph([self.cells.plain(warning)])],
            )
        )

    def _write_signature(self, output: DocSection, item: ApiItem) -> None:
        if not item.excerpt.text:
            return
        output.append_node(self.cells.bold_paragraph("Signature:"))
        output.append_node(
            DocFencedCode(
                self.configuration,
                code=item.get_excerpt_with_modifiers(),
                language="typescript",
            )
        )

    def _write_heritage_types(self, output: DocSection, item: ApiItem) -> None:
        if item.kind == ApiItemKind.CLASS:
            if item.extends_types:
                paragraph = self.cells.bold_paragraph("Extends: ")
                self.cells.append_excerpt(paragraph, item.extends_types[0])
                output.append_node(paragraph)
            if item.implements_types:
                paragraph = self.cells.bold_paragraph("Implements: ")
                for index, excerpt in enumerate(item.implements_types):
                    if index:
                        paragraph.append_node(self.cells.plain(", "))
                    self.cells.append_excerpt(paragraph, excerpt)
                output.append_node(paragraph)

        elif item.kind == ApiItemKind.INTERFACE and item.extends_types:
            paragraph = self.cells.bold_paragraph("Extends: ")
            for index, excerpt in enumerate(item.extends_types):
                if index:
                    paragraph.append_node(self.cells.plain(", "))
                self.cells.append_excerpt(paragraph, excerpt)
            output.append_node(paragraph)

        elif item.kind == ApiItemKind.TYPE_ALIAS:
            references = [
                token
                for token in item.excerpt_tokens
                if token.kind == ExcerptTokenKind.REFERENCE
                and token.canonical_reference
                and self.api_model.resolve_declaration_reference(
                    token.canonical_reference
                )
                is not None
            ]
            if not references:
                return
            paragraph = self.cells.bold_paragraph("References: ")
            seen: set[str] = set()
            for token in references:
                if token.text in seen:
                    continue
                if seen:
                    paragraph.append_node(self.cells.plain(", "))
                seen.add(token.text)
                self.cells.append_token(paragraph, token)
            output.append_node(paragraph)

    def _write_remarks_section(self, output: DocSection, item: ApiItem) -> None:
        comment = item.doc_comment
        if comment is None:
            return
        if comment.remarks_block is not None:
            output.append_node(DocHeading(self.configuration, title="Remarks"))
            self.cells.append_section(output, comment.remarks_block.content)

        examples = comment.blocks_with_tag(StandardTags.EXAMPLE)
        for number, block in enumerate(examples, start=1):
            title = f"Example {number}" if len(examples) > 1 else "Example"
            output.append_node(DocHeading(self.configuration, title=title))
            self.cells.append_section(output, block.content)

    def _write_class_tables(self, output: DocSection, item: ApiItem) -> list[ApiItem]:
        members = self._members_with_incomplete_warning(output, item)
        return self.tables.write_class_tables(output, item, members)

    def _write_interface_tables(
        self,
        output: DocSection,
        item: ApiItem,
    ) -> list[ApiItem]:
        members = self._members_with_incomplete_warning(output, item)
        return self.tables.write_interface_tables(output, item, members)

    def _members_with_incomplete_warning(
        self,
        output: DocSection,
        item: ApiItem,
    ) -> list[ApiItem]:
        if not self.config.show_inherited_members:
            return list(item.members)

        result = find_members_with_inheritance(item)
        if result.maybe_incomplete:
            output.insert_node(
                0,
                self.cells.paragraph(
                    [self.cells.emphasis(INCOMPLETE_INHERITANCE_NOTE, italic=True)]
                ),
            )
        for message in result.messages:
            logger.warning(
                "Diagnostic message for find_members_with_inheritance: %s",
                message.text,
            )
            self.diagnostics.append(Diagnostic(item, message.message_id, message.text))
        return result.items


def _no_tables(output: DocSection, item: ApiItem) -> list[ApiItem]:
    return []
