"""Data models for built pages and build diagnostics."""

from dataclasses import dataclass, field
from typing import Any

from api_documenter_hugo.api_item import ApiItem
from api_documenter_hugo.doc_nodes import DocSection


@dataclass
class Page:
    """The content of one item's page, before it is rendered to Markdown."""

    item: ApiItem
    front_matter: dict[str, Any]
    body: DocSection
    child_items: list[ApiItem] = field(default_factory=list)  # pages to write first


@dataclass(frozen=True)
class Diagnostic:
    """A non-fatal problem noticed while building a page."""

    item: ApiItem
    message_id: str
    text: str
