"""Parsed documentation comments."""

from dataclasses import dataclass, field

from api_documenter_hugo.doc_nodes import DocSection


class StandardTags:
    """Tag names with special handling when pages are built."""

    ALPHA = "@alpha"
    BETA = "@beta"
    DECORATOR = "@decorator"
    DEFAULT_VALUE = "@defaultValue"
    DEPRECATED = "@deprecated"
    EVENT_PROPERTY = "@eventProperty"
    EXAMPLE = "@example"
    INHERIT_DOC = "@inheritDoc"
    INTERNAL = "@internal"
    OVERRIDE = "@override"
    PACKAGE_DOCUMENTATION = "@packageDocumentation"
    PARAM = "@param"
    PUBLIC = "@public"
    READONLY = "@readonly"
    REMARKS = "@remarks"
    RETURNS = "@returns"
    SEALED = "@sealed"
    SEE = "@see"
    THROWS = "@throws"
    TYPE_PARAM = "@typeParam"
    VIRTUAL = "@virtual"


MODIFIER_TAGS = frozenset(
    tag.lower()
    for tag in (
        StandardTags.ALPHA,
        StandardTags.BETA,
        StandardTags.EVENT_PROPERTY,
        StandardTags.INTERNAL,
        StandardTags.OVERRIDE,
        StandardTags.PACKAGE_DOCUMENTATION,
        StandardTags.PUBLIC,
        StandardTags.READONLY,
        StandardTags.SEALED,
        StandardTags.VIRTUAL,
    )
)


@dataclass
class DocBlock:
    """A block tag and the content that follows it."""

    tag_name: str
    content: DocSection

    def has_tag(self, tag_name: str) -> bool:
        """Compare tag names case-insensitively."""
        return self.tag_name.lower() == tag_name.lower()


@dataclass
class DocParamBlock(DocBlock):
    """An ``@param`` or ``@typeParam`` block."""

    parameter_name: str = ""


@dataclass
class DocComment:
    """The sections of one documentation comment."""

    summary_section: DocSection
    remarks_block: DocBlock | None = None
    deprecated_block: DocBlock | None = None
    returns_block: DocBlock | None = None
    params: list[DocParamBlock] = field(default_factory=list)
    type_params: list[DocParamBlock] = field(default_factory=list)
    custom_blocks: list[DocBlock] = field(default_factory=list)
    modifier_tags: set[str] = field(default_factory=set)
    inherit_doc_reference: str | None = None

    def blocks_with_tag(self, tag_name: str) -> list[DocBlock]:
        """Return the custom blocks carrying ``tag_name``, in comment order."""
        return [block for block in self.custom_blocks if block.has_tag(tag_name)]

    def has_modifier(self, tag_name: str) -> bool:
        """Check for a modifier tag such as ``@eventProperty``."""
        return tag_name.lower() in self.modifier_tags

    def param_block(self, name: str) -> DocParamBlock | None:
        """Find the ``@param`` block documenting ``name``."""
        for block in self.params:
            if block.parameter_name == name:
                return block
        return None
