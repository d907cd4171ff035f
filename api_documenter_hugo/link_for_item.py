"""Utility for determining the site URL of an item's page."""

from api_documenter_hugo.api_item import ApiItem
from api_documenter_hugo.filename_for_item import filename_for_item

PAGE_EXTENSION = ".md"


def link_for_item(item: ApiItem, base_url: str) -> str:
    """Return the URL of the page written for ``item``."""
    return f"{base_url.rstrip('/')}/{filename_for_item(item)}{PAGE_EXTENSION}"
