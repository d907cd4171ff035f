"""Tests for loading documenter plugins."""

import sys
import types
from pathlib import Path

import pytest

from api_documenter_hugo.api_model import ApiModel
from api_documenter_hugo.documenter_config import DocumenterConfig, PluginConfig
from api_documenter_hugo.errors import ConfigurationError
from api_documenter_hugo.markdown_documenter_feature import (
    MANIFEST_EXPORT_NAME,
    MANIFEST_VERSION,
    MARKDOWN_DOCUMENTER_FEATURE,
    FeatureDefinition,
    MarkdownDocumenterAccessor,
    MarkdownDocumenterFeature,
    MarkdownDocumenterFeatureContext,
    PluginFeature,
    PluginManifest,
)
from api_documenter_hugo.plugin_loader import PluginLoader
from conftest import PKG, find


class FooterFeature(MarkdownDocumenterFeature):
    """Appends a footer to every page."""

    def on_initialized(self) -> None:
        """Record that the hook ran."""
        self.initialized = True


class PlainFeature(PluginFeature):
    """A feature that does not document Markdown."""


class BrokenFeature(MarkdownDocumenterFeature):
    """Fails while initializing."""

    def on_initialized(self) -> None:
        """Always fail."""
        raise RuntimeError("boom")


def _install(
    monkeypatch: pytest.MonkeyPatch,
    manifest: object,
    name: str = "footer_plugin",
) -> None:
    module = types.ModuleType(name)
    if manifest is not None:
        setattr(module, MANIFEST_EXPORT_NAME, manifest)
    monkeypatch.setitem(sys.modules, name, module)


def _manifest(*definitions: FeatureDefinition) -> PluginManifest:
    return PluginManifest(MANIFEST_VERSION, list(definitions))


def _config(*names: str, package_name: str = "footer_plugin") -> DocumenterConfig:
    return DocumenterConfig(plugins=(PluginConfig(package_name, names),))


def _context() -> MarkdownDocumenterFeatureContext:
    return MarkdownDocumenterFeatureContext(
        api_model=ApiModel(),
        output_folder=Path("out"),
        documenter=MarkdownDocumenterAccessor(lambda item: f"/docs/{item.name}"),
    )


FOOTER = FeatureDefinition("footer", MARKDOWN_DOCUMENTER_FEATURE, FooterFeature)


def test_no_plugins() -> None:
    """Verify that nothing is loaded without configured plugins."""
    loader = PluginLoader()
    loader.load(DocumenterConfig(), _context)
    assert loader.markdown_documenter_feature is None


def test_loads_enabled_feature(monkeypatch: pytest.MonkeyPatch) -> None:
    """Verify that an enabled feature is constructed and initialized."""
    _install(monkeypatch, _manifest(FOOTER))
    loader = PluginLoader()
    loader.load(_config("footer"), _context)
    feature = loader.markdown_documenter_feature
    assert isinstance(feature, FooterFeature)
    assert feature.initialized
    assert feature.context.output_folder == Path("out")


def test_features_must_be_enabled(monkeypatch: pytest.MonkeyPatch) -> None:
    """Verify that a listed but not enabled feature stays unloaded."""
    _install(monkeypatch, _manifest(FOOTER))
    loader = PluginLoader()
    loader.load(_config(), _context)
    assert loader.markdown_documenter_feature is None


def test_dict_manifest(monkeypatch: pytest.MonkeyPatch) -> None:
    """Verify that a plain mapping is accepted as a manifest."""
    manifest = {
        "manifest_version": MANIFEST_VERSION,
        "features": [
            {
                "feature_name": "footer",
                "kind": MARKDOWN_DOCUMENTER_FEATURE,
                "subclass": FooterFeature,
            }
        ],
    }
    _install(monkeypatch, manifest)
    loader = PluginLoader()
    loader.load(_config("footer"), _context)
    assert isinstance(loader.markdown_documenter_feature, FooterFeature)


def test_context_links_items(
    monkeypatch: pytest.MonkeyPatch,
    api_model: ApiModel,
) -> None:
    """Verify that features can ask for the link of an item."""
    _install(monkeypatch, _manifest(FOOTER))
    loader = PluginLoader()
    loader.load(_config("footer"), _context)
    widget = find(api_model, f"{PKG}!Widget:class")
    documenter = loader.markdown_documenter_feature.context.documenter
    assert documenter.get_link_for_api_item(widget) == "/docs/Widget"


@pytest.mark.parametrize(
    ("manifest", "names", "message"),
    [
        (None, ("footer",), 'the "api_documenter_plugin_manifest" export'),
        (
            PluginManifest(999, [FOOTER]),
            ("footer",),
            "unsupported manifest_version 999",
        ),
        (_manifest(FOOTER), ("header",), 'does not have a feature with name "header"'),
        (
            _manifest(FeatureDefinition("footer", "HtmlFeature", FooterFeature)),
            ("footer",),
            'Unknown feature definition kind: "HtmlFeature"',
        ),
        (
            _manifest(FOOTER, FeatureDefinition("again", FOOTER.kind, FooterFeature)),
            ("footer", "again"),
            "A MarkdownDocumenterFeature is already loaded",
        ),
        (
            _manifest(FeatureDefinition("plain", FOOTER.kind, PlainFeature)),
            ("plain",),
            "was not an instance of MarkdownDocumenterFeature",
        ),
        (
            _manifest(FeatureDefinition("broken", FOOTER.kind, BrokenFeature)),
            ("broken",),
            r"during the on_initialized\(\) event: boom",
        ),
        ({"features": []}, ("footer",), "Malformed plugin manifest"),
        ("manifest", ("footer",), "Malformed plugin manifest of type str"),
    ],
)
def test_plugin_errors(
    monkeypatch: pytest.MonkeyPatch,
    manifest: object,
    names: tuple[str, ...],
    message: str,
) -> None:
    """Verify that every plugin problem names the plugin and the cause."""
    _install(monkeypatch, manifest)
    with pytest.raises(ConfigurationError, match="Error loading plugin footer_plugin"):
        PluginLoader().load(_config(*names), _context)
    with pytest.raises(ConfigurationError, match=message):
        PluginLoader().load(_config(*names), _context)


def test_missing_plugin_package() -> None:
    """Verify that an unimportable package is reported."""
    config = _config("footer", package_name="no_such_plugin_package")
    with pytest.raises(ConfigurationError, match="Cannot import no_such_plugin"):
        PluginLoader().load(config, _context)
