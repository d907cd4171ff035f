"""Import configured plugin packages and instantiate their enabled features."""

import importlib
import logging
from collections.abc import Callable
from typing import Any

from api_documenter_hugo.documenter_config import DocumenterConfig, PluginConfig
from api_documenter_hugo.errors import ConfigurationError
from api_documenter_hugo.markdown_documenter_feature import (
    MANIFEST_EXPORT_NAME,
    MANIFEST_VERSION,
    MARKDOWN_DOCUMENTER_FEATURE,
    FeatureDefinition,
    MarkdownDocumenterFeature,
    MarkdownDocumenterFeatureContext,
    PluginFeatureInitialization,
    PluginManifest,
)

logger = logging.getLogger(__name__)


class PluginLoader:
    """Holds the one Markdown feature a run may have enabled."""

    def __init__(self) -> None:
        """Start with no feature loaded."""
        self.markdown_documenter_feature: MarkdownDocumenterFeature | None = None

    def load(
        self,
        config: DocumenterConfig,
        create_context: Callable[[], MarkdownDocumenterFeatureContext],
    ) -> None:
        """Load every configured plugin; any problem raises ``ConfigurationError``."""
        for plugin in config.plugins:
            try:
                self._load_plugin(plugin, create_context)
            except ConfigurationError as e:
                msg = f"Error loading plugin {plugin.package_name}: {e}"
                raise ConfigurationError(msg) from e

    def _load_plugin(
        self,
        plugin: PluginConfig,
        create_context: Callable[[], MarkdownDocumenterFeatureContext],
    ) -> None:
        try:
            module = importlib.import_module(plugin.package_name)
        except ImportError as e:
            msg = f"Cannot import {plugin.package_name}: {e}"
            raise ConfigurationError(msg) from e

        raw_manifest = getattr(module, MANIFEST_EXPORT_NAME, None)
        if raw_manifest is None:
            msg = (
                "The package is not an API documenter plugin;"
                f' the "{MANIFEST_EXPORT_NAME}" export was not found'
            )
            raise ConfigurationError(msg)
        manifest = _coerce_manifest(raw_manifest)
        if manifest.manifest_version != MANIFEST_VERSION:
            msg = (
                "The plugin is not compatible with this version of the documenter;"
                f" unsupported manifest_version {manifest.manifest_version}"
            )
            raise ConfigurationError(msg)

        definitions = {d.feature_name: d for d in manifest.features}
        for feature_name in plugin.enabled_feature_names:
            definition = definitions.get(feature_name)
            if definition is None:
                msg = (
                    f"The plugin {plugin.package_name} does not have a feature"
                    f' with name "{feature_name}"'
                )
                raise ConfigurationError(msg)
            if definition.kind != MARKDOWN_DOCUMENTER_FEATURE:
                msg = f'Unknown feature definition kind: "{definition.kind}"'
                raise ConfigurationError(msg)
            self._load_markdown_feature(definition, create_context)
            logger.info("Loaded feature %s from %s", feature_name, plugin.package_name)

    def _load_markdown_feature(
        self,
        definition: FeatureDefinition,
        create_context: Callable[[], MarkdownDocumenterFeatureContext],
    ) -> None:
        if self.markdown_documenter_feature is not None:
            msg = "A MarkdownDocumenterFeature is already loaded"
            raise ConfigurationError(msg)

        initialization = PluginFeatureInitialization(context=create_context())
        try:
            feature = definition.subclass(initialization)
        except Exception as e:
            msg = f"Failed to construct feature subclass: {e}"
            raise ConfigurationError(msg) from e
        if not isinstance(feature, MarkdownDocumenterFeature):
            msg = (
                "The constructed subclass was not an instance of"
                " MarkdownDocumenterFeature"
            )
            raise ConfigurationError(msg)
        try:
            feature.on_initialized()
        except Exception as e:
            msg = f"Error occurred during the on_initialized() event: {e}"
            raise ConfigurationError(msg) from e
        self.markdown_documenter_feature = feature


def _coerce_manifest(raw: Any) -> PluginManifest:
    if isinstance(raw, PluginManifest):
        return raw
    if isinstance(raw, dict):
        try:
            return PluginManifest(
                manifest_version=int(raw["manifest_version"]),
                features=[
                    f
                    if isinstance(f, FeatureDefinition)
                    else FeatureDefinition(f["feature_name"], f["kind"], f["subclass"])
                    for f in raw.get("features", [])
                ],
            )
        except (KeyError, TypeError, ValueError) as e:
            msg = f"Malformed plugin manifest: {e}"
            raise ConfigurationError(msg) from e
    msg = f"Malformed plugin manifest of type {type(raw).__name__}"
    raise ConfigurationError(msg)
