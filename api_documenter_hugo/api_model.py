"""The root of the item tree and declaration-reference lookup."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator

from api_documenter_hugo.api_item import ApiItem
from api_documenter_hugo.api_item_kind import ApiItemKind

_COMPONENT_RE = re.compile(
    r"^\(?(?P<name>[^:()]+?)\)?"
    r"(?::(?P<selector>[A-Za-z]+))?"
    r"(?:\((?P<overload>\d+)\))?\)?$"
)

_SELECTOR_KINDS = {
    "class": {ApiItemKind.CLASS},
    "interface": {ApiItemKind.INTERFACE},
    "enum": {ApiItemKind.ENUM},
    "namespace": {ApiItemKind.NAMESPACE},
    "function": {ApiItemKind.FUNCTION},
    "var": {ApiItemKind.VARIABLE},
    "variable": {ApiItemKind.VARIABLE},
    "type": {ApiItemKind.TYPE_ALIAS},
    "constructor": {ApiItemKind.CONSTRUCTOR, ApiItemKind.CONSTRUCT_SIGNATURE},
    "call": {ApiItemKind.CALL_SIGNATURE},
    "index": {ApiItemKind.INDEX_SIGNATURE},
}


class ApiModel(ApiItem):
    """The whole described library set: one package per input file."""

    def __init__(self, packages: Iterable[ApiItem] | None = None) -> None:
        """Create the model, adopting any packages given."""
        super().__init__(kind=ApiItemKind.MODEL)
        self._index: dict[str, ApiItem] = {}
        for package in packages or ():
            self.add_member(package)

    @property
    def packages(self) -> list[ApiItem]:
        """Packages in load order."""
        return list(self.members)

    def add_member(self, member: ApiItem) -> ApiItem:
        """Add a package and index every item beneath it."""
        super().add_member(member)
        for item in _walk(member):
            if item.canonical_reference:
                self._index.setdefault(item.canonical_reference, item)
        return member

    def try_get_package_by_name(self, name: str) -> ApiItem | None:
        """Return the package called ``name``, if loaded."""
        for package in self.members:
            if package.name == name:
                return package
        return None

    def item_by_canonical_reference(self, reference: str) -> ApiItem | None:
        """Exact lookup by canonical reference."""
        return self._index.get(reference)

    def resolve_declaration_reference(
        self,
        reference: str,
        context_item: ApiItem | None = None,
    ) -> ApiItem | None:
        """Find the item a reference points at; ``None`` when it is not described.

        Accepts canonical references (``@scope/pkg!Widget#render:member(1)``)
        and TSDoc references (``@scope/pkg#Widget.render``, ``Widget.render``).
        Without a package part the context item's package is searched, then
        every package.
        """
        reference = reference.strip()
        if not reference or reference.startswith(("!", "#")):
            # Global declarations such as `!Promise:interface` are never described.
            return None
        exact = self._index.get(reference)
        if exact is not None:
            return exact

        package_name, path = _split_package(reference)
        package = self.try_get_package_by_name(package_name) if package_name else None
        if package is None and package_name and "!" not in reference:
            # `Widget#render` names an instance member, not a package.
            package_name, path = "", reference
        components = _split_components(path)
        if not components:
            return None

        if package_name:
            scopes = [package] if package is not None else []
        else:
            scopes = []
            context_package = (
                context_item.get_associated_package() if context_item else None
            )
            if context_package is not None:
                scopes.append(context_package)
            scopes.extend(p for p in self.members if p is not context_package)

        for package in scopes:
            found = _resolve_in_package(package, components)
            if found is not None:
                return found
        return None


def _walk(item: ApiItem) -> Iterator[ApiItem]:
    yield item
    for member in item.members:
        yield from _walk(member)


def _split_package(reference: str) -> tuple[str, str]:
    for separator in ("!", "#"):
        if separator in reference:
            package_name, _, path = reference.partition(separator)
            return package_name, path
    return "", reference


def _split_components(path: str) -> list[str]:
    components: list[str] = []
    depth = 0
    current = ""
    for char in path:
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
        if depth == 0 and char in ".#~":
            if current:
                components.append(current)
            current = ""
            continue
        current += char
    if current:
        components.append(current)
    return components


def _resolve_in_package(package: ApiItem, components: list[str]) -> ApiItem | None:
    candidates = [m for entry_point in package.members for m in entry_point.members]
    found: ApiItem | None = None
    for component in components:
        match = _COMPONENT_RE.match(component.strip())
        if match is None:
            return None
        name = match.group("name").strip()
        selector = match.group("selector")
        if selector and selector.lower() == "constructor":
            owner = _pick(candidates, name, None, None)
            if owner is None:
                return None
            candidates = owner.members
            name = "constructor"
        found = _pick(candidates, name, selector, match.group("overload"))
        if found is None:
            return None
        candidates = found.members
    return found


def _pick(
    candidates: list[ApiItem],
    name: str,
    selector: str | None,
    overload: str | None,
) -> ApiItem | None:
    matches = [c for c in candidates if name in (c.name, c.display_name)]
    if selector:
        selector = selector.lower()
        if selector in _SELECTOR_KINDS:
            matches = [c for c in matches if c.kind in _SELECTOR_KINDS[selector]]
        elif selector == "static":
            matches = [c for c in matches if c.is_static]
        elif selector == "instance":
            matches = [c for c in matches if not c.is_static]
    if overload:
        matches = [c for c in matches if c.overload_index == int(overload)]
    return matches[0] if matches else None
