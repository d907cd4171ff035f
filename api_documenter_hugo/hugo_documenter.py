"""Drive a documentation run: build, render and write one page per item."""

import logging
from pathlib import Path

from api_documenter_hugo.api_item import ApiItem
from api_documenter_hugo.api_model import ApiModel
from api_documenter_hugo.convert_line_endings import convert_line_endings
from api_documenter_hugo.custom_doc_nodes import build_custom_configuration
from api_documenter_hugo.documenter_config import DocumenterConfig
from api_documenter_hugo.ensure_empty_folder import ensure_empty_folder
from api_documenter_hugo.filename_for_item import filename_for_item
from api_documenter_hugo.hugo_markdown_emitter import HugoMarkdownEmitter
from api_documenter_hugo.link_for_item import link_for_item
from api_documenter_hugo.markdown_documenter_feature import (
    MarkdownDocumenterAccessor,
    MarkdownDocumenterFeatureContext,
    MarkdownDocumenterFeatureOnBeforeWritePageArgs,
)
from api_documenter_hugo.output_file_for_page import output_file_for_page
from api_documenter_hugo.page import Diagnostic
from api_documenter_hugo.page_builder import PageBuilder
from api_documenter_hugo.plugin_loader import PluginLoader

logger = logging.getLogger(__name__)


class HugoDocumenter:
    """Writes a Hugo content tree for an ``ApiModel``.

    Pages are written children first, so a page is on disk before the page
    that links to it. The output folder is emptied at the start of every run.
    """

    def __init__(
        self,
        api_model: ApiModel,
        config: DocumenterConfig | None,
        output_folder: str | Path,
        plugin_loader: PluginLoader | None = None,
    ) -> None:
        """Prepare a run; nothing is touched on disk until ``generate_files``."""
        self.api_model = api_model
        self.config = config or DocumenterConfig()
        self.output_folder = Path(output_folder)
        self.plugin_loader = plugin_loader or PluginLoader()
        self.configuration = build_custom_configuration()
        self.page_builder = PageBuilder(api_model, self.config, self.configuration)
        self.emitter = HugoMarkdownEmitter(api_model, self.link_for)
        self.written_files: list[Path] = []
        self._plugins_loaded = False

    @property
    def diagnostics(self) -> list[Diagnostic]:
        """Non-fatal problems noticed while building pages."""
        return self.page_builder.diagnostics

    def link_for(self, item: ApiItem) -> str:
        """Return the site URL of ``item``'s page."""
        return link_for_item(item, self.config.base_url)

    def generate_files(self) -> list[Path]:
        """Write every page and return the files written."""
        if not self._plugins_loaded:
            self.plugin_loader.load(self.config, self._create_feature_context)
            self._plugins_loaded = True

        logger.info("Deleting old output from %s", self.output_folder)
        ensure_empty_folder(self.output_folder)
        self.written_files = []

        self._write_item_page(self.api_model)

        feature = self.plugin_loader.markdown_documenter_feature
        if feature is not None:
            feature.on_finished({})
        return self.written_files

    def _create_feature_context(self) -> MarkdownDocumenterFeatureContext:
        return MarkdownDocumenterFeatureContext(
            api_model=self.api_model,
            output_folder=self.output_folder,
            documenter=MarkdownDocumenterAccessor(self.link_for),
        )

    def _write_item_page(self, item: ApiItem) -> None:
        page = self.page_builder.build_page(item)
        if page is None:
            return
        for child in page.child_items:
            self._write_item_page(child)

        content = self.emitter.emit_with_front_matter(
            page.body, page.front_matter, item
        )
        output_file = output_file_for_page(self.output_folder, filename_for_item(item))

        feature = self.plugin_loader.markdown_documenter_feature
        if feature is not None:
            event_args = MarkdownDocumenterFeatureOnBeforeWritePageArgs(
                api_item=item,
                output_filename=output_file,
                page_content=content,
            )
            feature.on_before_write_page(event_args)
            content = event_args.page_content

        output_file.write_text(
            convert_line_endings(content, self.config.newline),
            encoding="utf-8",
            newline="",
        )
        logger.debug("Wrote %s", output_file)
        self.written_files.append(output_file)
