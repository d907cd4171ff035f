"""Utility for resetting an output folder."""

import shutil
from pathlib import Path


def ensure_empty_folder(folder: Path) -> None:
    """Create ``folder`` if needed and delete everything inside it."""
    folder.mkdir(parents=True, exist_ok=True)
    for child in folder.iterdir():
        if child.is_dir() and not child.is_symlink():
            shutil.rmtree(child)
        else:
            child.unlink()
