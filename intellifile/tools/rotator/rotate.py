"""Plugin rotating the pages of a single PDF."""

from __future__ import annotations

from typing import Sequence

from ...core.ranges import parse_ranges
from ...core.settings import RotatePdfSettings, ToolId
from ...core.utils import get_logger
from ..common.interfaces import BaseTool
from ..common.pipeline import register_tool

LOGGER = get_logger("intellifile.tools.rotate")


@register_tool(ToolId.ROTATE_PDF)
class RotateTool(BaseTool):
    """Add ``rotation`` degrees to every page or to the selected pages only."""

    name = ToolId.ROTATE_PDF
    settings_type = RotatePdfSettings
    single_input = True

    def process(self) -> Sequence[bytes]:
        settings: RotatePdfSettings = self.settings
        item = self.files[0]
        document = self.load_document(item)

        if settings.apply_to == "selected":
            targets = parse_ranges(settings.selected_pages, document.page_count)
            if not targets:
                LOGGER.warning("Selection %r matches no pages of %s", settings.selected_pages, item.name)
        else:
            targets = list(range(document.page_count))

        for index in self.track(targets):
            angle = document.page(index).rotate(settings.rotation)
            LOGGER.debug("Rotated page %s of %s to %s degrees", index + 1, item.name, angle)

        LOGGER.info("Rotated %d page(s) of %s by %s degrees", len(targets), item.name, settings.rotation)
        return [document.serialize()]
