"""Main orchestration script for generating API reports and Hugo documentation."""

import argparse
import subprocess
import sys
from collections.abc import Sequence
from pathlib import Path


def run_command(cmd_list: Sequence[str | Path], cwd: Path | str | None = None) -> None:
    """Run a command and exit if it fails."""
    cmd_str = " ".join(str(x) for x in cmd_list)
    print(f"Running: {cmd_str}")
    try:
        subprocess.run(cmd_list, check=True, cwd=cwd)
    except subprocess.CalledProcessError as e:
        print(f"Error executing command: {cmd_str}")
        sys.exit(e.returncode)


def main() -> None:
    """Run the full documentation generation pipeline."""
    parser = argparse.ArgumentParser(
        description="Generate API Extractor reports and Hugo documentation."
    )
    parser.add_argument(
        "--dev",
        action="store_true",
        help="Run development checks (linting, tests) before generating documentation",
    )
    parser.add_argument(
        "--skip-extractor",
        action="store_true",
        help="Reuse the *.api.json files already in the input folder",
    )
    parser.add_argument(
        "--input-folder",
        default="input",
        help="Folder holding the *.api.json files (default: input)",
    )
    parser.add_argument(
        "--output-folder",
        default="content/docs",
        help="Hugo content folder to write into (default: content/docs)",
    )
    parser.add_argument(
        "--config",
        help="Path to configuration file",
    )
    args = parser.parse_args()

    root_dir = Path(__file__).parent

    if args.dev:
        print("--- Running Development Checks ---")
        run_command([sys.executable, str(root_dir / "dev.py"), "--ci"])
        print(
            "\n✅ Development checks passed. Proceeding with documentation generation.\n"
        )

    # 1. Generate the *.api.json reports
    if not args.skip_extractor:
        print("--- Step 1: Running API Extractor ---")
        # Looks for api-extractor.json in the current directory by default
        run_command(["npx", "api-extractor", "run", "--local"])

    # 2. Convert the reports to Hugo Markdown
    print("\n--- Step 2: Writing Hugo Markdown ---")
    cmd = [
        sys.executable,
        "-m",
        "api_documenter_hugo.api_documenter",
        "hugo",
        "--input-folder",
        args.input_folder,
        "--output-folder",
        args.output_folder,
    ]
    if args.config:
        cmd.extend(["--config", args.config])

    run_command(cmd)

    print(f"\nSUCCESS: Documentation generated in {args.output_folder}")


if __name__ == "__main__":
    main()
