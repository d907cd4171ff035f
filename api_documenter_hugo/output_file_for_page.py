"""Utility for determining the output file path for a page."""

from pathlib import Path

from api_documenter_hugo.link_for_item import PAGE_EXTENSION


def output_file_for_page(out_root: Path, page_path: str) -> Path:
    """Determine the output file for a page path, creating its folder."""
    # widgets/Widget/_index -> out_root/widgets/Widget/_index.md
    p = out_root / (page_path.lstrip("/") + PAGE_EXTENSION)
    p.parent.mkdir(parents=True, exist_ok=True)
    return p
