"""Utility for determining the front matter of an item's page."""

from typing import Any

from api_documenter_hugo.api_item import ApiItem
from api_documenter_hugo.api_item_kind import ApiItemKind
from api_documenter_hugo.deep_merge import deep_merge
from api_documenter_hugo.errors import UnsupportedKindError
from api_documenter_hugo.unscoped_name import unscoped_name

MODEL_TITLE = "API Reference"

# Suffix appended to the scoped name; an empty suffix means the bare name.
TITLE_SUFFIXES = {
    ApiItemKind.CLASS: "class",
    ApiItemKind.ENUM: "enum",
    ApiItemKind.INTERFACE: "interface",
    ApiItemKind.CONSTRUCTOR: "",
    ApiItemKind.CONSTRUCT_SIGNATURE: "",
    ApiItemKind.METHOD: "method",
    ApiItemKind.METHOD_SIGNATURE: "method",
    ApiItemKind.FUNCTION: "function",
    ApiItemKind.NAMESPACE: "namespace",
    ApiItemKind.PROPERTY: "property",
    ApiItemKind.PROPERTY_SIGNATURE: "property",
    ApiItemKind.TYPE_ALIAS: "type",
    ApiItemKind.VARIABLE: "variable",
}


def page_title(item: ApiItem) -> str:
    """Return the page title, e.g. ``Widget.render method``."""
    if item.kind == ApiItemKind.MODEL:
        return MODEL_TITLE
    if item.kind == ApiItemKind.PACKAGE:
        return f"{unscoped_name(item.display_name)} package"
    if item.kind == ApiItemKind.ENTRY_POINT:
        package_name = unscoped_name(item.parent.display_name) if item.parent else ""
        return f"{package_name}/{item.display_name} entrypoint"

    suffix = TITLE_SUFFIXES.get(item.kind)
    if suffix is None:
        raise UnsupportedKindError(item.kind, str(item))
    scoped_name = item.get_scoped_name_within_package()
    return f"{scoped_name} {suffix}" if suffix else scoped_name


def page_front_matter(
    item: ApiItem,
    model_front_matter: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Return the front matter of the page; the model page gets extra fields."""
    front_matter: dict[str, Any] = {"title": page_title(item)}
    if item.kind == ApiItemKind.MODEL and model_front_matter:
        front_matter = deep_merge(front_matter, model_front_matter)
    return front_matter
