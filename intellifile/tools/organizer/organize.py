"""Plugin reordering and deleting the pages of a single PDF."""

from __future__ import annotations

from typing import Sequence

from ...adapters import document as documents
from ...core.settings import OrganizePdfSettings, ToolId
from ...core.utils import get_logger
from ..common.interfaces import BaseTool
from ..common.pipeline import register_tool

LOGGER = get_logger("intellifile.tools.organize")


def final_order(page_count: int, page_order: Sequence[int], deleted_pages: Sequence[int]) -> list[int]:
    """Return the zero-based page indices the organised document consists of.

    An empty ``page_order`` keeps the natural order. Deleted pages are
    removed from the order and indices outside the document are skipped.
    Indices repeated in ``page_order`` produce repeated pages.
    """

    order = list(page_order) if page_order else list(range(page_count))
    deleted = set(deleted_pages)
    return [index for index in order if index not in deleted and 0 <= index < page_count]


@register_tool(ToolId.ORGANIZE_PDF)
class OrganizeTool(BaseTool):
    name = ToolId.ORGANIZE_PDF
    settings_type = OrganizePdfSettings
    single_input = True

    def process(self) -> Sequence[bytes]:
        settings: OrganizePdfSettings = self.settings
        item = self.files[0]
        source = self.load_document(item)

        order = final_order(source.page_count, settings.page_order, settings.deleted_pages)
        skipped = [index for index in settings.page_order if not 0 <= index < source.page_count]
        if skipped:
            LOGGER.warning("Ignoring page indices %s outside %s", skipped, item.name)

        target = documents.create_empty(name=item.name)
        for index in self.track(order):
            for page in target.copy_pages(source, [index]):
                target.append_page(page)
        target.set_metadata(source.metadata)

        LOGGER.info("Organised %s into %d page(s)", item.name, target.page_count)
        return [target.serialize()]
