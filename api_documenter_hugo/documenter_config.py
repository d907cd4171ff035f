"""Validated, immutable settings for one documentation run."""

import os
from dataclasses import dataclass, field
from typing import Any

from api_documenter_hugo.errors import ConfigurationError


class NewlineKind:
    """Line ending written to the output files."""

    CRLF = "crlf"
    LF = "lf"
    OS = "os"

    ALL = (CRLF, LF, OS)


NEWLINES = {NewlineKind.CRLF: "\r\n", NewlineKind.LF: "\n", NewlineKind.OS: os.linesep}


@dataclass(frozen=True)
class PluginConfig:
    """One plugin package and the features to enable from it."""

    package_name: str
    enabled_feature_names: tuple[str, ...] = ()


@dataclass(frozen=True)
class DocumenterConfig:
    """Settings threaded through the builder, emitter and documenter."""

    base_url: str = "/docs"
    newline_kind: str = NewlineKind.CRLF
    show_inherited_members: bool = False
    model_front_matter: dict[str, Any] = field(
        default_factory=lambda: {"menu": {"main": {"weight": 20}}}
    )
    plugins: tuple[PluginConfig, ...] = ()

    @property
    def newline(self) -> str:
        """The newline sequence for ``newline_kind``."""
        return NEWLINES[self.newline_kind]

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "DocumenterConfig":
        """Validate a merged configuration mapping."""
        newline_kind = str(data.get("newline_kind", NewlineKind.CRLF)).lower()
        if newline_kind not in NewlineKind.ALL:
            msg = (
                f"Unknown newline_kind {newline_kind!r};"
                f" expected one of {', '.join(NewlineKind.ALL)}"
            )
            raise ConfigurationError(msg)

        base_url = data.get("base_url", "/docs")
        if not isinstance(base_url, str):
            msg = "base_url must be a string"
            raise ConfigurationError(msg)

        front_matter = data.get("model_front_matter") or {}
        if not isinstance(front_matter, dict):
            msg = "model_front_matter must be a mapping"
            raise ConfigurationError(msg)

        return cls(
            base_url=base_url,
            newline_kind=newline_kind,
            show_inherited_members=bool(data.get("show_inherited_members", False)),
            model_front_matter=front_matter,
            plugins=tuple(_plugin(entry) for entry in data.get("plugins") or []),
        )


def _plugin(entry: Any) -> PluginConfig:
    if not isinstance(entry, dict) or not entry.get("package_name"):
        msg = f"Each plugin needs a package_name: {entry!r}"
        raise ConfigurationError(msg)
    names = entry.get("enabled_feature_names") or []
    if not isinstance(names, list) or not all(isinstance(n, str) for n in names):
        msg = f"enabled_feature_names of {entry['package_name']} must be a list"
        raise ConfigurationError(msg)
    return PluginConfig(str(entry["package_name"]), tuple(names))
