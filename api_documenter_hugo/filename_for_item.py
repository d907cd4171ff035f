"""Utility for determining the output page path of an item."""

from api_documenter_hugo.api_item import ApiItem
from api_documenter_hugo.api_item_kind import (
    PAGE_KINDS,
    ApiItemKind,
    has_parameter_list,
)
from api_documenter_hugo.safe_filename import safe_filename
from api_documenter_hugo.unscoped_name import unscoped_name

INDEX_NAME = "_index"
ROOT_ENTRY_POINT = "_root"

# Kinds that add no path segment; members of these land on the owner's page.
NO_SEGMENT_KINDS = frozenset(
    {
        ApiItemKind.MODEL,
        ApiItemKind.ENUM_MEMBER,
        ApiItemKind.CALL_SIGNATURE,
        ApiItemKind.INDEX_SIGNATURE,
    }
)


def filename_for_item(item: ApiItem) -> str:
    """Return the page path of ``item`` relative to the output root, without extension.

    e.g. ``widgets/_root/_index`` for a package, ``widgets/Widget/_index`` for a
    class and ``widgets/Widget/constructor_1/_index`` for a second overload.
    """
    if item.kind == ApiItemKind.MODEL:
        return INDEX_NAME

    segments: list[str] = []
    for ancestor in item.get_hierarchy():
        is_target = ancestor is item
        if ancestor.kind in NO_SEGMENT_KINDS:
            continue
        if ancestor.kind == ApiItemKind.PACKAGE:
            segments = [safe_filename(unscoped_name(ancestor.display_name))]
            if is_target:
                # A package links to the page of its default entry point.
                segments.append(ROOT_ENTRY_POINT)
        elif ancestor.kind == ApiItemKind.ENTRY_POINT:
            if ancestor.import_path:
                package = ancestor.parent
                package_name = unscoped_name(package.display_name) if package else ""
                segments.append(
                    safe_filename(f"{package_name}/{ancestor.import_path}")
                )
            elif is_target:
                segments.append(ROOT_ENTRY_POINT)
        else:
            segments.append(_member_segment(ancestor))

    segments.append(INDEX_NAME)
    return "/".join(segments)


def _member_segment(item: ApiItem) -> str:
    segment = _base_segment(item)
    if _merges_with_earlier_sibling(item):
        # A merged declaration, e.g. a namespace named after a function.
        segment += f"_{item.kind.lower()}"
    return segment


def _base_segment(item: ApiItem) -> str:
    segment = safe_filename(item.display_name)
    if has_parameter_list(item.kind) and item.overload_index > 1:
        # Numbering starts at _1 for the second overload.
        segment += f"_{item.overload_index - 1}"
    if item.kind == ApiItemKind.VARIABLE:
        segment = f"var_{segment}"
    return segment


def _merges_with_earlier_sibling(item: ApiItem) -> bool:
    if item.parent is None:
        return False
    segment = _base_segment(item)
    for sibling in item.parent.members:
        if sibling is item:
            return False
        if (
            sibling.kind in PAGE_KINDS
            and sibling.kind != item.kind
            and _base_segment(sibling) == segment
        ):
            return True
    return False
