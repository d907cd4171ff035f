"""The describable item tree: packages, classes, members and so on."""

from __future__ import annotations

from dataclasses import dataclass, field

from api_documenter_hugo.api_item_kind import (
    PROPERTY_KINDS,
    ApiItemKind,
    has_parameter_list,
)
from api_documenter_hugo.doc_comment import DocComment, DocParamBlock, StandardTags
from api_documenter_hugo.excerpt import Excerpt, ExcerptToken, TokenRange
from api_documenter_hugo.release_tag import ReleaseTag

_FIXED_DISPLAY_NAMES = {
    ApiItemKind.CONSTRUCTOR: "constructor",
    ApiItemKind.CONSTRUCT_SIGNATURE: "new",
    ApiItemKind.CALL_SIGNATURE: "(call)",
    ApiItemKind.INDEX_SIGNATURE: "(indexer)",
    ApiItemKind.MODEL: "",
}

# Kinds that sit above the package-relative scope of a name.
_UNSCOPED_KINDS = frozenset(
    {ApiItemKind.MODEL, ApiItemKind.PACKAGE, ApiItemKind.ENTRY_POINT}
)


@dataclass(eq=False)
class Parameter:
    """One declared parameter of a function-like item."""

    name: str
    type_excerpt: Excerpt
    is_optional: bool = False
    parent: ApiItem | None = field(default=None, repr=False)

    @property
    def tsdoc_param_block(self) -> DocParamBlock | None:
        """The owning item's ``@param`` block for this parameter."""
        if self.parent is None or self.parent.doc_comment is None:
            return None
        return self.parent.doc_comment.param_block(self.name)


@dataclass(eq=False)
class ApiItem:
    """A node in the item tree.

    Items compare by identity; two overloads with the same name are distinct
    items told apart by ``overload_index``.
    """

    kind: str
    name: str = ""
    canonical_reference: str = ""
    doc_comment: DocComment | None = None
    excerpt_tokens: list[ExcerptToken] = field(default_factory=list)
    release_tag: ReleaseTag = ReleaseTag.NONE
    is_optional: bool = False
    is_static: bool = False
    is_protected: bool = False
    is_readonly: bool = False
    is_abstract: bool = False
    overload_index: int = 0
    parameters: list[Parameter] = field(default_factory=list)
    return_type_token_range: TokenRange | None = None
    property_type_token_range: TokenRange | None = None
    initializer_token_range: TokenRange | None = None
    type_token_range: TokenRange | None = None
    extends_token_ranges: list[TokenRange] = field(default_factory=list)
    implements_token_ranges: list[TokenRange] = field(default_factory=list)
    members: list[ApiItem] = field(default_factory=list, repr=False)
    parent: ApiItem | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        """Adopt any members and parameters passed to the constructor."""
        for member in self.members:
            member.parent = self
        for parameter in self.parameters:
            parameter.parent = self

    @property
    def display_name(self) -> str:
        """Name shown in titles, tables and paths."""
        return _FIXED_DISPLAY_NAMES.get(self.kind, self.name)

    @property
    def import_path(self) -> str:
        """Sub-path of an entry point; empty for the package's main entry point."""
        return self.name if self.kind == ApiItemKind.ENTRY_POINT else ""

    def add_member(self, member: ApiItem) -> ApiItem:
        """Append a child item and make this item its parent."""
        member.parent = self
        self.members.append(member)
        return member

    def add_parameter(self, parameter: Parameter) -> None:
        """Append a parameter and make this item its owner."""
        parameter.parent = self
        self.parameters.append(parameter)

    def get_hierarchy(self) -> list[ApiItem]:
        """Return the ancestor chain from the root down to this item."""
        chain: list[ApiItem] = []
        current: ApiItem | None = self
        while current is not None:
            chain.append(current)
            current = current.parent
        chain.reverse()
        return chain

    def get_associated_package(self) -> ApiItem | None:
        """Return the package containing this item (or the item itself)."""
        for item in self.get_hierarchy():
            if item.kind == ApiItemKind.PACKAGE:
                return item
        return None

    def get_scoped_name_within_package(self) -> str:
        """Dotted display names below the entry point, e.g. ``Widget.render``."""
        return ".".join(
            item.display_name
            for item in self.get_hierarchy()
            if item.kind not in _UNSCOPED_KINDS
        )

    def get_concise_signature(self) -> str:
        """Display name, with the parameter names for function-like items."""
        if has_parameter_list(self.kind):
            names = ", ".join(parameter.name for parameter in self.parameters)
            return f"{self.display_name}({names})"
        return self.display_name

    @property
    def excerpt(self) -> Excerpt:
        """The full declaration excerpt."""
        return Excerpt(self.excerpt_tokens)

    def get_excerpt_with_modifiers(self) -> str:
        """The declaration text with an access modifier the excerpt omits."""
        text = self.excerpt.text
        if self.is_protected and not text.startswith("protected"):
            return f"protected {text}"
        return text

    def _excerpt_for(self, token_range: TokenRange | None) -> Excerpt:
        return Excerpt(self.excerpt_tokens, token_range or TokenRange(0, 0))

    @property
    def return_type_excerpt(self) -> Excerpt:
        """Return type of a function-like item."""
        return self._excerpt_for(self.return_type_token_range)

    @property
    def property_type_excerpt(self) -> Excerpt:
        """Declared type of a property."""
        return self._excerpt_for(self.property_type_token_range)

    @property
    def type_excerpt(self) -> Excerpt:
        """Aliased type of a type alias, or declared type of a variable."""
        return self._excerpt_for(self.type_token_range)

    @property
    def initializer_excerpt(self) -> Excerpt | None:
        """Initializer of an enum member or variable, when one is declared."""
        if self.initializer_token_range is None:
            return None
        return self._excerpt_for(self.initializer_token_range)

    @property
    def extends_types(self) -> list[Excerpt]:
        """Base types; a class has at most one."""
        return [self._excerpt_for(r) for r in self.extends_token_ranges]

    @property
    def implements_types(self) -> list[Excerpt]:
        """Interfaces implemented by a class."""
        return [self._excerpt_for(r) for r in self.implements_token_ranges]

    @property
    def is_event_property(self) -> bool:
        """True for a property tagged ``@eventProperty``."""
        return (
            self.kind in PROPERTY_KINDS
            and self.doc_comment is not None
            and self.doc_comment.has_modifier(StandardTags.EVENT_PROPERTY)
        )

    def __str__(self) -> str:
        """Name the item for error messages."""
        return self.canonical_reference or f"{self.kind} {self.display_name}"
