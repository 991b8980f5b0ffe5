"""Plugin splitting a single PDF into several documents."""

from __future__ import annotations

from typing import Sequence

from ...adapters import document as documents
from ...core.ranges import parse_ranges
from ...core.settings import SplitPdfSettings, ToolId
from ...core.utils import get_logger
from ..common.interfaces import BaseTool
from ..common.pipeline import register_tool

LOGGER = get_logger("intellifile.tools.split")


def _build_document(source: documents.Document, indices: Sequence[int]) -> bytes:
    target = documents.create_empty(name=source.name)
    for page in target.copy_pages(source, indices):
        target.append_page(page)
    target.set_metadata(source.metadata)
    return target.serialize()


@register_tool(ToolId.SPLIT_PDF)
class SplitTool(BaseTool):
    """Split one PDF by page.

    ``all`` writes one document per page, ``range`` writes a single
    document holding the selected pages and ``extract`` writes one document
    per selected page. A selection that matches no page yields no output.
    """

    name = ToolId.SPLIT_PDF
    settings_type = SplitPdfSettings
    single_input = True

    def process(self) -> Sequence[bytes]:
        settings: SplitPdfSettings = self.settings
        item = self.files[0]
        source = self.load_document(item)
        total_pages = source.page_count

        if settings.split_method == "range":
            selected = parse_ranges(settings.page_range, total_pages)
            if not selected:
                LOGGER.warning("Range %r selects no pages of %s", settings.page_range, item.name)
                return []
            LOGGER.debug("Writing pages %s of %s to one document", selected, item.name)
            return [_build_document(source, selected)]

        if settings.split_method == "extract":
            pages = parse_ranges(settings.extract_pages, total_pages)
            if not pages:
                LOGGER.warning("Selection %r extracts no pages of %s", settings.extract_pages, item.name)
                return []
        else:
            pages = list(range(total_pages))

        results: list[bytes] = []
        for index in self.track(pages):
            LOGGER.debug("Writing page %s of %s", index + 1, item.name)
            results.append(_build_document(source, [index]))
        LOGGER.info("Split %s into %d document(s)", item.name, len(results))
        return results
