"""Collect a class's or interface's members together with inherited ones."""

from __future__ import annotations

from dataclasses import dataclass, field

from api_documenter_hugo.api_item import ApiItem
from api_documenter_hugo.api_item_kind import ApiItemKind
from api_documenter_hugo.api_model import ApiModel
from api_documenter_hugo.excerpt import Excerpt, ExcerptTokenKind


class FindApiItemsMessageId:
    """Why an inheritance query may have missed members."""

    DECLARATION_RESOLUTION_FAILED = "declaration-resolution-failed"
    EXTENDS_CLAUSE_MISSING_REFERENCE = "extends-clause-missing-reference"
    NO_ASSOCIATED_API_MODEL = "no-associated-api-model"
    UNSUPPORTED_KIND = "unsupported-kind"


@dataclass(frozen=True)
class FindApiItemsMessage:
    """A diagnostic produced by the query."""

    message_id: str
    text: str


@dataclass
class FindApiItemsResult:
    """Members found, and whether some base types could not be followed."""

    items: list[ApiItem] = field(default_factory=list)
    maybe_incomplete: bool = False
    messages: list[FindApiItemsMessage] = field(default_factory=list)


def find_members_with_inheritance(item: ApiItem) -> FindApiItemsResult:
    """Return own members, then inherited members that are not shadowed.

    A member is shadowed when a more-derived type already declares a member
    of the same kind and name. Base types are followed through the first
    reference token of each ``extends`` clause; clauses that do not lead to
    a described class or interface are reported and mark the result
    incomplete.
    """
    result = FindApiItemsResult()
    if item.kind not in (ApiItemKind.CLASS, ApiItemKind.INTERFACE):
        result.maybe_incomplete = True
        result.messages.append(
            FindApiItemsMessage(
                FindApiItemsMessageId.UNSUPPORTED_KIND,
                f"Unable to analyze references of API item {item.display_name}"
                f" because it is of unsupported kind {item.kind}",
            )
        )
        return result

    model = item.get_hierarchy()[0]
    shadowed: set[tuple[str, str]] = set()
    visited: set[int] = set()
    pending = [item]

    while pending:
        current = pending.pop(0)
        if id(current) in visited:
            continue
        visited.add(id(current))

        declared: set[tuple[str, str]] = set()
        for member in current.members:
            key = (member.kind, member.display_name)
            if key in shadowed:
                continue
            declared.add(key)
            result.items.append(member)
        shadowed |= declared

        for base in _base_types(current, model, result):
            pending.append(base)

    return result


def _base_types(
    item: ApiItem,
    model: ApiItem,
    result: FindApiItemsResult,
) -> list[ApiItem]:
    bases: list[ApiItem] = []
    if not item.extends_types:
        return bases

    if not isinstance(model, ApiModel):
        result.maybe_incomplete = True
        result.messages.append(
            FindApiItemsMessage(
                FindApiItemsMessageId.NO_ASSOCIATED_API_MODEL,
                f"Unable to analyze references of API item {item.display_name}"
                " because it is not associated with an ApiModel",
            )
        )
        return bases

    for excerpt in item.extends_types:
        reference = _first_reference(excerpt)
        if reference is None:
            result.maybe_incomplete = True
            result.messages.append(
                FindApiItemsMessage(
                    FindApiItemsMessageId.EXTENDS_CLAUSE_MISSING_REFERENCE,
                    f"Unable to analyze extends clause {excerpt.text} of API item"
                    f" {item.display_name} because no canonical reference was found",
                )
            )
            continue

        base = model.resolve_declaration_reference(reference, item)
        if base is None:
            result.maybe_incomplete = True
            result.messages.append(
                FindApiItemsMessage(
                    FindApiItemsMessageId.DECLARATION_RESOLUTION_FAILED,
                    f"Unable to resolve declaration reference within API item"
                    f" {item.display_name}: {reference}",
                )
            )
            continue

        if base.kind not in (ApiItemKind.CLASS, ApiItemKind.INTERFACE):
            result.maybe_incomplete = True
            result.messages.append(
                FindApiItemsMessage(
                    FindApiItemsMessageId.UNSUPPORTED_KIND,
                    f"Unable to analyze references of API item {base.display_name}"
                    f" because it is of unsupported kind {base.kind}",
                )
            )
            continue

        bases.append(base)
    return bases


def _first_reference(excerpt: Excerpt) -> str | None:
    for token in excerpt.spanned_tokens:
        if token.kind == ExcerptTokenKind.REFERENCE and token.canonical_reference:
            return token.canonical_reference
    return None
