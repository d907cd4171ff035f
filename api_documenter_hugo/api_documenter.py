"""Generate Hugo-compatible Markdown reference pages from API report files.

Reads the ``*.api.json`` files written by API Extractor and writes one page
per documented item, with YAML front matter, into a Hugo content folder.
"""

import argparse
import logging
from pathlib import Path

from api_documenter_hugo.run_generation import run_generation


def main(argv: list[str] | None = None) -> int:
    """Run the documenter."""
    ap = argparse.ArgumentParser(
        prog="api-documenter-hugo",
        description="Generate Hugo Markdown API reference pages.",
    )
    ap.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug output",
    )
    subcommands = ap.add_subparsers(dest="command", required=True)

    hugo = subcommands.add_parser(
        "hugo",
        help="Generate documentation as Hugo Markdown files (*.md)",
    )
    hugo.add_argument(
        "-i",
        "--input-folder",
        type=Path,
        default=Path("./input"),
        help="Folder containing the *.api.json files (default: ./input)",
    )
    hugo.add_argument(
        "-o",
        "--output-folder",
        type=Path,
        default=Path("./hugo"),
        help="Output folder; its contents are deleted first (default: ./hugo)",
    )
    hugo.add_argument(
        "--config",
        help="Path to a YAML configuration file",
    )
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return run_generation(args)


if __name__ == "__main__":
    raise SystemExit(main())
