"""Registry of document node kinds and of which kinds may contain which."""

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

from api_documenter_hugo.errors import ConfigurationError


@dataclass(frozen=True)
class DocNodeDefinition:
    """Associates a node kind with the callable that builds an instance of it."""

    kind: str
    constructor: Callable[..., Any]
    package_name: str


class DocNodeManager:
    """Tracks registered node kinds and the parent/child legality relation."""

    def __init__(self) -> None:
        """Start with no kinds and an empty legality relation."""
        self._definitions: dict[str, DocNodeDefinition] = {}
        self._allowable_children: dict[str, set[str]] = {}

    def register_doc_node(
        self,
        kind: str,
        constructor: Callable[..., Any],
        package_name: str = "",
    ) -> None:
        """Register a kind; registering the same tag twice is an error."""
        existing = self._definitions.get(kind)
        if existing is not None:
            msg = (
                f'The DocNode kind "{kind}" was already registered'
                f' by "{existing.package_name}"'
            )
            raise ConfigurationError(msg)
        self._definitions[kind] = DocNodeDefinition(kind, constructor, package_name)

    def register_doc_nodes(
        self,
        package_name: str,
        definitions: Iterable[tuple[str, Callable[..., Any]]],
    ) -> None:
        """Register several kinds on behalf of one package."""
        for kind, constructor in definitions:
            self.register_doc_node(kind, constructor, package_name)

    def get_definition(self, kind: str) -> DocNodeDefinition:
        """Return the definition of a registered kind."""
        self.throw_if_not_registered_kind(kind)
        return self._definitions[kind]

    def throw_if_not_registered_kind(self, kind: str) -> None:
        """Raise ``ConfigurationError`` for a kind nobody registered."""
        if kind not in self._definitions:
            msg = (
                f'The DocNode kind "{kind}" was not registered'
                " with this configuration"
            )
            raise ConfigurationError(msg)

    def register_allowable_children(
        self,
        parent_kind: str,
        child_kinds: Iterable[str],
    ) -> None:
        """Declare child kinds legal under ``parent_kind``.

        Repeated calls widen the relation; earlier declarations are kept.
        """
        self.throw_if_not_registered_kind(parent_kind)
        allowed = self._allowable_children.setdefault(parent_kind, set())
        for child_kind in child_kinds:
            self.throw_if_not_registered_kind(child_kind)
            allowed.add(child_kind)

    def is_allowed_child(self, parent_kind: str, child_kind: str) -> bool:
        """Check the legality relation for one parent/child pair."""
        return child_kind in self._allowable_children.get(parent_kind, ())

    def allowable_children(self, parent_kind: str) -> frozenset[str]:
        """Return every child kind currently legal under ``parent_kind``."""
        return frozenset(self._allowable_children.get(parent_kind, ()))
