"""Parse ``/** ... */`` documentation comments into document nodes.

Only the subset of TSDoc that api-extractor writes into ``*.api.json`` files
is understood: block tags and modifier tags at the start of a line, fenced
code, inline code, ``{@link}`` and ``{@inheritDoc}``.
"""

from __future__ import annotations

import re

from api_documenter_hugo.doc_comment import (
    MODIFIER_TAGS,
    DocBlock,
    DocComment,
    DocParamBlock,
    StandardTags,
)
from api_documenter_hugo.doc_nodes import (
    DocCodeSpan,
    DocConfiguration,
    DocFencedCode,
    DocLinkTag,
    DocNode,
    DocParagraph,
    DocPlainText,
    DocSection,
    DocSoftBreak,
)

_TAG_RE = re.compile(r"^(@[A-Za-z][A-Za-z0-9]*)(?=\s|$)")
_FENCE_RE = re.compile(r"^\s*```")
_INLINE_RE = re.compile(
    r"`(?P<code>[^`]+)`"
    r"|\{@link(?:code|plain)?\s+(?P<target>[^}|]+?)\s*(?:\|\s*(?P<text>[^}]*?)\s*)?\}"
    r"|\{@inheritDoc(?:\s+(?P<inherit>[^}]*?))?\s*\}"
    r"|\{@[A-Za-z]+\s*(?P<other>[^}]*)\}"
)
_INHERIT_DOC_RE = re.compile(r"\{@inheritDoc(?:\s+([^}]*?))?\s*\}")
_PARAM_NAME_RE = re.compile(r"^\s*([\w$.\[\]]+)\s*(?:-\s*)?")
_URL_RE = re.compile(r"^[a-z][a-z0-9+.-]*://", re.IGNORECASE)


def parse_doc_comment(text: str, configuration: DocConfiguration) -> DocComment:
    """Parse the raw comment text of one item."""
    lines = _strip_delimiters(text)
    comment = DocComment(summary_section=DocSection(configuration))

    inherit = _INHERIT_DOC_RE.search("\n".join(lines))
    if inherit:
        comment.inherit_doc_reference = (inherit.group(1) or "").strip()

    tag: str | None = None
    body: list[str] = []
    in_fence = False

    for line in lines:
        stripped = line.strip()
        if _FENCE_RE.match(line):
            in_fence = not in_fence
        elif not in_fence:
            match = _TAG_RE.match(stripped)
            if match and match.group(1).lower() in MODIFIER_TAGS:
                rest = _consume_modifiers(stripped, comment)
                if not rest:
                    continue
                line = rest
            elif match:
                _close_block(comment, tag, body, configuration)
                tag = match.group(1)
                body = [stripped[match.end() :].strip()]
                continue
        body.append(line)

    _close_block(comment, tag, body, configuration)
    return comment


def parse_section(lines: list[str], configuration: DocConfiguration) -> DocSection:
    """Turn block text into paragraphs and fenced code blocks."""
    section = DocSection(configuration)
    paragraph: list[str] = []
    fence: list[str] | None = None
    language = ""

    for line in lines:
        if fence is not None:
            if _FENCE_RE.match(line):
                section.append_node(
                    DocFencedCode(
                        configuration,
                        code="\n".join(_dedent(fence)) + "\n",
                        language=language,
                    )
                )
                fence = None
            else:
                fence.append(line)
            continue

        if _FENCE_RE.match(line):
            _flush_paragraph(section, paragraph, configuration)
            paragraph = []
            language = line.strip()[3:].strip()
            fence = []
        elif not line.strip():
            _flush_paragraph(section, paragraph, configuration)
            paragraph = []
        else:
            paragraph.append(line.strip())

    if fence is not None:
        # An unterminated fence keeps its text as code.
        section.append_node(
            DocFencedCode(
                configuration,
                code="\n".join(fence) + "\n",
                language=language,
            )
        )
    _flush_paragraph(section, paragraph, configuration)
    return section


def parse_inline(text: str, configuration: DocConfiguration) -> list[DocNode]:
    """Split one line of text into plain text, code spans and links."""
    nodes: list[DocNode] = []
    position = 0
    for match in _INLINE_RE.finditer(text):
        if match.start() > position:
            before = text[position : match.start()]
            nodes.append(DocPlainText(configuration, text=before))
        position = match.end()

        if match.group("code") is not None:
            nodes.append(DocCodeSpan(configuration, code=match.group("code")))
        elif match.group("target") is not None:
            link = _link(match.group("target"), match.group("text"), configuration)
            nodes.append(link)
        elif match.group("other"):
            nodes.append(DocPlainText(configuration, text=match.group("other")))
    if position < len(text):
        nodes.append(DocPlainText(configuration, text=text[position:]))
    return nodes


def _strip_delimiters(text: str) -> list[str]:
    text = text.strip()
    if text.startswith("/**"):
        text = text[3:]
    if text.endswith("*/"):
        text = text[:-2]

    lines = []
    for raw in text.splitlines():
        line = raw.strip()
        if line.startswith("*"):
            line = line[1:]
            if line.startswith(" "):
                line = line[1:]
        lines.append(line.rstrip())
    return lines


def _consume_modifiers(line: str, comment: DocComment) -> str:
    rest = line
    while True:
        match = _TAG_RE.match(rest)
        if not match or match.group(1).lower() not in MODIFIER_TAGS:
            return rest
        comment.modifier_tags.add(match.group(1).lower())
        rest = rest[match.end() :].strip()


def _close_block(
    comment: DocComment,
    tag: str | None,
    body: list[str],
    configuration: DocConfiguration,
) -> None:
    if tag is None:
        comment.summary_section = parse_section(body, configuration)
        return

    key = tag.lower()
    if key in (StandardTags.PARAM.lower(), StandardTags.TYPE_PARAM.lower()):
        first = body[0] if body else ""
        match = _PARAM_NAME_RE.match(first)
        name = match.group(1) if match else ""
        if match:
            body = [first[match.end() :], *body[1:]]
        block = DocParamBlock(tag, parse_section(body, configuration), name)
        if key == StandardTags.PARAM.lower():
            comment.params.append(block)
        else:
            comment.type_params.append(block)
        return

    block = DocBlock(tag, parse_section(body, configuration))
    if key == StandardTags.REMARKS.lower():
        comment.remarks_block = block
    elif key == StandardTags.RETURNS.lower():
        comment.returns_block = block
    elif key == StandardTags.DEPRECATED.lower():
        comment.deprecated_block = block
    else:
        comment.custom_blocks.append(block)


def _flush_paragraph(
    section: DocSection,
    lines: list[str],
    configuration: DocConfiguration,
) -> None:
    paragraph = DocParagraph(configuration)
    for index, line in enumerate(lines):
        if index:
            paragraph.append_node(DocSoftBreak(configuration))
        paragraph.append_nodes(parse_inline(line, configuration))
    if paragraph.nodes:
        section.append_node(paragraph)


def _link(target: str, text: str | None, configuration: DocConfiguration) -> DocLinkTag:
    target = target.strip()
    link_text = text or None
    if _URL_RE.match(target):
        return DocLinkTag(configuration, link_text=link_text, url_destination=target)
    return DocLinkTag(configuration, link_text=link_text, code_destination=target)


def _dedent(lines: list[str]) -> list[str]:
    indents = [len(line) - len(line.lstrip()) for line in lines if line.strip()]
    margin = min(indents, default=0)
    return [line[margin:] for line in lines]
