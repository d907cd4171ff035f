"""General-purpose document nodes and the configuration that registers them.

Page content is assembled as a tree of these nodes before it is rendered to
Markdown. Every node is bound to a ``DocConfiguration``; container nodes
consult the configuration's ``DocNodeManager`` on every append, so an illegal
parent/child combination fails while the tree is being built.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, ClassVar

from api_documenter_hugo.doc_node_kind import DocNodeKind
from api_documenter_hugo.doc_node_manager import DocNodeManager
from api_documenter_hugo.errors import StructureError

CORE_PACKAGE_NAME = "api-documenter-hugo/core"


class DocNode:
    """Base class for every document node."""

    kind: ClassVar[str] = ""

    def __init__(self, configuration: DocConfiguration) -> None:
        """Bind the node to a configuration that knows its kind."""
        configuration.doc_node_manager.throw_if_not_registered_kind(self.kind)
        self.configuration = configuration

    def get_child_nodes(self) -> list[DocNode]:
        """Return the node's children, in order."""
        return []


class DocNodeContainer(DocNode):
    """A node holding an ordered sequence of child nodes."""

    def __init__(
        self,
        configuration: DocConfiguration,
        child_nodes: Iterable[DocNode] | None = None,
    ) -> None:
        """Create the container, appending any initial children."""
        super().__init__(configuration)
        self._nodes: list[DocNode] = []
        if child_nodes:
            self.append_nodes(child_nodes)

    @property
    def nodes(self) -> tuple[DocNode, ...]:
        """The children, read-only."""
        return tuple(self._nodes)

    def get_child_nodes(self) -> list[DocNode]:
        """Return the node's children, in order."""
        return list(self._nodes)

    def append_node(self, node: DocNode) -> None:
        """Append a child, enforcing the legality relation."""
        self._check_child(node)
        self._nodes.append(node)

    def append_nodes(self, nodes: Iterable[DocNode]) -> None:
        """Append several children."""
        for node in nodes:
            self.append_node(node)

    def insert_node(self, index: int, node: DocNode) -> None:
        """Insert a child at ``index``, enforcing the legality relation."""
        self._check_child(node)
        self._nodes.insert(index, node)

    def _check_child(self, node: DocNode) -> None:
        ensure_allowed_child(self, node)


def ensure_allowed_child(parent: DocNode, child: DocNode) -> None:
    """Raise ``StructureError`` unless ``child`` may appear under ``parent``."""
    manager = parent.configuration.doc_node_manager
    if not manager.is_allowed_child(parent.kind, child.kind):
        msg = f"The {parent.kind} node cannot contain a {child.kind} node"
        raise StructureError(msg)


class DocSection(DocNodeContainer):
    """A sequence of block-level nodes."""

    kind = DocNodeKind.SECTION

    def append_node_in_paragraph(self, node: DocNode) -> None:
        """Append to the trailing paragraph, starting one if needed."""
        last = self._nodes[-1] if self._nodes else None
        if isinstance(last, DocParagraph):
            paragraph = last
        else:
            paragraph = DocParagraph(self.configuration)
            self.append_node(paragraph)
        paragraph.append_node(node)

    def append_nodes_in_paragraph(self, nodes: Iterable[DocNode]) -> None:
        """Append several inline nodes to the trailing paragraph."""
        for node in nodes:
            self.append_node_in_paragraph(node)


class DocParagraph(DocNodeContainer):
    """A run of inline nodes rendered as one paragraph."""

    kind = DocNodeKind.PARAGRAPH


class DocPlainText(DocNode):
    """Literal text."""

    kind = DocNodeKind.PLAIN_TEXT

    def __init__(self, configuration: DocConfiguration, text: str = "") -> None:
        """Create the node."""
        super().__init__(configuration)
        self.text = text


class DocSoftBreak(DocNode):
    """A line break that renderers may turn into whitespace."""

    kind = DocNodeKind.SOFT_BREAK


class DocCodeSpan(DocNode):
    """Inline code."""

    kind = DocNodeKind.CODE_SPAN

    def __init__(self, configuration: DocConfiguration, code: str = "") -> None:
        """Create the node."""
        super().__init__(configuration)
        self.code = code


class DocFencedCode(DocNode):
    """A code block with an optional language tag."""

    kind = DocNodeKind.FENCED_CODE

    def __init__(
        self,
        configuration: DocConfiguration,
        code: str = "",
        language: str = "",
    ) -> None:
        """Create the node."""
        super().__init__(configuration)
        self.code = code
        self.language = language


class DocLinkTag(DocNode):
    """A hyperlink to either a URL or a declaration reference.

    ``code_destination`` is resolved against the item model when the page is
    emitted; an unresolvable reference renders as plain text.
    """

    kind = DocNodeKind.LINK_TAG

    def __init__(
        self,
        configuration: DocConfiguration,
        link_text: str | None = None,
        url_destination: str | None = None,
        code_destination: str | None = None,
    ) -> None:
        """Create the node; exactly one destination must be given."""
        super().__init__(configuration)
        if (url_destination is None) == (code_destination is None):
            msg = "A link needs exactly one of url_destination or code_destination"
            raise ValueError(msg)
        self.link_text = link_text
        self.url_destination = url_destination
        self.code_destination = code_destination


class DocConfiguration:
    """Owns the node registry; built-in general kinds are pre-registered."""

    def __init__(self) -> None:
        """Register the general kinds and their default legality relation."""
        self.doc_node_manager = DocNodeManager()
        self.doc_node_manager.register_doc_nodes(
            CORE_PACKAGE_NAME,
            [
                (DocNodeKind.SECTION, DocSection),
                (DocNodeKind.PARAGRAPH, DocParagraph),
                (DocNodeKind.PLAIN_TEXT, DocPlainText),
                (DocNodeKind.SOFT_BREAK, DocSoftBreak),
                (DocNodeKind.LINK_TAG, DocLinkTag),
                (DocNodeKind.CODE_SPAN, DocCodeSpan),
                (DocNodeKind.FENCED_CODE, DocFencedCode),
            ],
        )
        self.doc_node_manager.register_allowable_children(
            DocNodeKind.SECTION,
            [DocNodeKind.PARAGRAPH, DocNodeKind.FENCED_CODE],
        )
        self.doc_node_manager.register_allowable_children(
            DocNodeKind.PARAGRAPH,
            [
                DocNodeKind.PLAIN_TEXT,
                DocNodeKind.SOFT_BREAK,
                DocNodeKind.CODE_SPAN,
                DocNodeKind.LINK_TAG,
            ],
        )

    def create_node(self, kind: str, **params: Any) -> DocNode:
        """Build an instance of a registered kind."""
        definition = self.doc_node_manager.get_definition(kind)
        return definition.constructor(self, **params)
