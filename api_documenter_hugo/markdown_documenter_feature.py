"""Base classes and event payloads for documenter plugins."""

from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from api_documenter_hugo.api_item import ApiItem
from api_documenter_hugo.api_model import ApiModel

MANIFEST_VERSION = 1000
MANIFEST_EXPORT_NAME = "api_documenter_plugin_manifest"
MARKDOWN_DOCUMENTER_FEATURE = "MarkdownDocumenterFeature"


class MarkdownDocumenterAccessor:
    """The part of the documenter a plugin may call."""

    def __init__(self, get_link_for_api_item: Callable[[ApiItem], str]) -> None:
        """Wrap the documenter's link resolver."""
        self._get_link_for_api_item = get_link_for_api_item

    def get_link_for_api_item(self, api_item: ApiItem) -> str:
        """Return the site URL of ``api_item``'s page."""
        return self._get_link_for_api_item(api_item)


@dataclass
class MarkdownDocumenterFeatureContext:
    """What a Markdown feature gets to see of the run."""

    api_model: ApiModel
    output_folder: Path
    documenter: MarkdownDocumenterAccessor


@dataclass
class MarkdownDocumenterFeatureOnBeforeWritePageArgs:
    """Passed to ``on_before_write_page``; ``page_content`` may be replaced."""

    api_item: ApiItem
    output_filename: Path
    page_content: str


@dataclass
class PluginFeatureInitialization:
    """Constructor argument of every plugin feature."""

    context: Any = None


class PluginFeature:
    """Base class of all plugin features."""

    def __init__(self, initialization: PluginFeatureInitialization) -> None:
        """Keep the initialization object for subclasses."""
        self._initialization = initialization

    def on_initialized(self) -> None:
        """Called once, after the feature is constructed."""


class MarkdownDocumenterFeature(PluginFeature):
    """Hooks into page writing; subclass and override the ``on_*`` methods."""

    @property
    def context(self) -> MarkdownDocumenterFeatureContext:
        """The run this feature belongs to."""
        return self._initialization.context

    def on_before_write_page(
        self,
        event_args: MarkdownDocumenterFeatureOnBeforeWritePageArgs,
    ) -> None:
        """Called before each page is written."""

    def on_finished(self, event_args: dict[str, Any]) -> None:
        """Called after every page has been written."""


@dataclass(frozen=True)
class FeatureDefinition:
    """One feature offered by a plugin package."""

    feature_name: str
    kind: str
    subclass: type[PluginFeature]


@dataclass(frozen=True)
class PluginManifest:
    """The ``api_documenter_plugin_manifest`` export of a plugin package."""

    manifest_version: int
    features: list[FeatureDefinition] = field(default_factory=list)
