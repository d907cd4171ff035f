"""Tests for parsing documentation comments."""

from api_documenter_hugo.doc_comment import StandardTags
from api_documenter_hugo.doc_node_kind import DocNodeKind
from api_documenter_hugo.doc_nodes import (
    DocConfiguration,
    DocFencedCode,
    DocLinkTag,
    DocNode,
    DocPlainText,
)
from api_documenter_hugo.tsdoc_parser import parse_doc_comment, parse_inline


def _text(node: DocNode) -> str:
    if isinstance(node, DocPlainText):
        return node.text
    return "".join(_text(child) for child in node.get_child_nodes())


def test_summary_and_blocks(configuration: DocConfiguration) -> None:
    """Verify that block tags split the comment into sections."""
    comment = parse_doc_comment(
        "/**\n"
        " * Draws the widget.\n"
        " *\n"
        " * @remarks\n"
        " * Only visible widgets are drawn.\n"
        " *\n"
        " * @param target - Where to draw.\n"
        " * @typeParam T - The target type.\n"
        " * @returns Whether anything was drawn.\n"
        " * @deprecated Use paint() instead.\n"
        " * @throws An error when detached.\n"
        " */",
        configuration,
    )
    assert _text(comment.summary_section) == "Draws the widget."
    assert comment.remarks_block is not None
    assert _text(comment.remarks_block.content) == "Only visible widgets are drawn."
    assert [p.parameter_name for p in comment.params] == ["target"]
    assert _text(comment.params[0].content) == "Where to draw."
    assert [p.parameter_name for p in comment.type_params] == ["T"]
    assert comment.returns_block is not None
    assert comment.deprecated_block is not None
    assert len(comment.blocks_with_tag(StandardTags.THROWS)) == 1


def test_modifier_tags(configuration: DocConfiguration) -> None:
    """Verify that modifier tags are recorded and not rendered."""
    comment = parse_doc_comment(
        "/**\n * Fired on resize.\n *\n * @eventProperty @beta\n */", configuration
    )
    assert comment.has_modifier(StandardTags.EVENT_PROPERTY)
    assert comment.has_modifier(StandardTags.BETA)
    assert _text(comment.summary_section) == "Fired on resize."


def test_examples_keep_order_and_fences(configuration: DocConfiguration) -> None:
    """Verify that each ``@example`` becomes its own block with its code."""
    comment = parse_doc_comment(
        "/**\n"
        " * Summary.\n"
        " * @example\n"
        " * First:\n"
        " * ```ts\n"
        " *   run(1);\n"
        " * ```\n"
        " * @example\n"
        " * ```ts\n"
        " * run(2);\n"
        " * ```\n"
        " */",
        configuration,
    )
    examples = comment.blocks_with_tag(StandardTags.EXAMPLE)
    assert len(examples) == 2  # two examples, in comment order
    first_nodes = examples[0].content.nodes
    assert [n.kind for n in first_nodes] == [
        DocNodeKind.PARAGRAPH,
        DocNodeKind.FENCED_CODE,
    ]
    fenced = first_nodes[1]
    assert isinstance(fenced, DocFencedCode)
    assert fenced.language == "ts"
    assert fenced.code == "run(1);\n"
    second = examples[1].content.nodes[0]
    assert isinstance(second, DocFencedCode)
    assert second.code == "run(2);\n"


def test_tag_inside_fence_is_code(configuration: DocConfiguration) -> None:
    """Verify that ``@`` lines inside fenced code are not tags."""
    comment = parse_doc_comment(
        "/**\n * ```ts\n * @decorator\n * class A {}\n * ```\n */", configuration
    )
    assert not comment.custom_blocks
    fenced = comment.summary_section.nodes[0]
    assert isinstance(fenced, DocFencedCode)
    assert "@decorator" in fenced.code


def test_paragraphs_and_soft_breaks(configuration: DocConfiguration) -> None:
    """Verify that blank lines split paragraphs and line breaks become soft breaks."""
    comment = parse_doc_comment(
        "/**\n * One\n * two.\n *\n * Three.\n */", configuration
    )
    paragraphs = comment.summary_section.nodes
    assert len(paragraphs) == 2  # blank line separates them
    kinds = [n.kind for n in paragraphs[0].get_child_nodes()]
    assert kinds == [
        DocNodeKind.PLAIN_TEXT,
        DocNodeKind.SOFT_BREAK,
        DocNodeKind.PLAIN_TEXT,
    ]


def test_inline_links_and_code(configuration: DocConfiguration) -> None:
    """Verify inline code spans and both kinds of link destination."""
    nodes = parse_inline(
        "Use `draw()` or {@link Widget.render | render} and"
        " {@link https://example.com/docs}.",
        configuration,
    )
    kinds = [n.kind for n in nodes]
    assert kinds == [
        DocNodeKind.PLAIN_TEXT,
        DocNodeKind.CODE_SPAN,
        DocNodeKind.PLAIN_TEXT,
        DocNodeKind.LINK_TAG,
        DocNodeKind.PLAIN_TEXT,
        DocNodeKind.LINK_TAG,
        DocNodeKind.PLAIN_TEXT,
    ]
    code_link = nodes[3]
    url_link = nodes[5]
    assert isinstance(code_link, DocLinkTag)
    assert code_link.code_destination == "Widget.render"
    assert code_link.link_text == "render"
    assert isinstance(url_link, DocLinkTag)
    assert url_link.url_destination == "https://example.com/docs"
    assert url_link.link_text is None


def test_inherit_doc_reference(configuration: DocConfiguration) -> None:
    """Verify that ``{@inheritDoc}`` is recorded and dropped from the text."""
    comment = parse_doc_comment(
        "/**\n * {@inheritDoc Base.dispose}\n */", configuration
    )
    assert comment.inherit_doc_reference == "Base.dispose"
    assert _text(comment.summary_section).strip() == ""
