"""Logic for loading and merging configuration files."""

from pathlib import Path
from typing import Any

import yaml

from api_documenter_hugo.deep_merge import deep_merge
from api_documenter_hugo.documenter_config import DocumenterConfig
from api_documenter_hugo.errors import ConfigurationError

DEFAULT_CONFIG: dict[str, Any] = {
    "base_url": "/docs",
    "newline_kind": "crlf",
    "show_inherited_members": False,
    "model_front_matter": {
        "menu": {
            "main": {
                "weight": 20,
            },
        },
    },
    "plugins": [],
}


def load_config_dict(path: str | Path | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = deep_merge({}, DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if p.exists():
            try:
                user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            except yaml.YAMLError as e:
                msg = f"Cannot parse configuration file {p}: {e}"
                raise ConfigurationError(msg) from e
            if not isinstance(user_config, dict):
                msg = f"Configuration file {p} must contain a mapping"
                raise ConfigurationError(msg)
            config = deep_merge(config, user_config)
    return config


def load_config(path: str | Path | None = None) -> DocumenterConfig:
    """Load and validate the configuration; a missing file yields the defaults."""
    return DocumenterConfig.from_dict(load_config_dict(path))
