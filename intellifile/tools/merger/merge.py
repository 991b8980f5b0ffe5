"""Plugin combining several PDFs into one document."""

from __future__ import annotations

from typing import Sequence

from ...adapters import document as documents
from ...core.settings import MergePdfSettings, ToolId
from ...core.utils import get_logger
from ..common.interfaces import BaseTool
from ..common.pipeline import register_tool

LOGGER = get_logger("intellifile.tools.merge")


@register_tool(ToolId.MERGE_PDF)
class MergeTool(BaseTool):
    """Append every page of every input, in input order, to a new document.

    The metadata of the first input is carried over to the merged file.
    """

    name = ToolId.MERGE_PDF
    settings_type = MergePdfSettings

    def process(self) -> Sequence[bytes]:
        settings: MergePdfSettings = self.settings
        merged = documents.create_empty(name=f"{settings.output_filename}.pdf")
        first_metadata: dict[str, str] | None = None

        for item in self.track(self.files):
            LOGGER.debug("Processing input PDF %s", item.name)
            source = self.load_document(item)
            for page in merged.copy_pages(source, range(source.page_count)):
                merged.append_page(page)
            if first_metadata is None:
                first_metadata = source.metadata

        if first_metadata:
            LOGGER.debug("Setting metadata on merged PDF: %s", first_metadata)
            merged.set_metadata(first_metadata)

        LOGGER.info("Merged %d PDFs into %d page(s)", len(self.files), merged.page_count)
        return [merged.serialize()]
