"""Orchestration logic for turning API report files into a Hugo content tree."""

import argparse
import logging

from api_documenter_hugo.build_api_model import build_api_model
from api_documenter_hugo.errors import ApiDocumenterError
from api_documenter_hugo.hugo_documenter import HugoDocumenter
from api_documenter_hugo.load_config import load_config

logger = logging.getLogger(__name__)

API_JSON_PATTERN = "*.api.json"


def run_generation(args: argparse.Namespace) -> int:
    """Execute the full generation pipeline."""
    input_folder = args.input_folder
    if not input_folder.is_dir():
        msg = f"The input folder does not exist: {input_folder}"
        raise SystemExit(msg)
    api_json_files = sorted(input_folder.glob(API_JSON_PATTERN))
    if not api_json_files:
        msg = f"No {API_JSON_PATTERN} files found under: {input_folder}"
        raise SystemExit(msg)

    try:
        config = load_config(args.config)
        api_model = build_api_model(api_json_files)
        out_root = args.output_folder.resolve()
        documenter = HugoDocumenter(api_model, config, out_root)
        written = documenter.generate_files()
    except ApiDocumenterError as e:
        logger.debug("Generation failed", exc_info=True)
        raise SystemExit(str(e)) from e

    if documenter.diagnostics:
        print(f"{len(documenter.diagnostics)} diagnostic message(s) were reported")
    print(f"Generated {len(written)} Markdown pages into: {out_root}")
    return 0
