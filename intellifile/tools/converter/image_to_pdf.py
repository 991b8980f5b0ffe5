"""Plugin assembling images into a PDF, one page per image."""

from __future__ import annotations

from typing import Sequence

from ...adapters import document as documents
from ...core.layout import compute_layout
from ...core.settings import JpgToPdfSettings, ToolId
from ...core.utils import get_logger
from ..common.interfaces import BaseTool
from ..common.pipeline import register_tool

LOGGER = get_logger("intellifile.tools.image_to_pdf")


@register_tool(ToolId.JPG_TO_PDF)
class ImageToPdfTool(BaseTool):
    """Place every input image, in order, on its own page of a new PDF.

    Each image is scaled to fit the page minus the margin and centred.
    """

    name = ToolId.JPG_TO_PDF
    settings_type = JpgToPdfSettings

    def process(self) -> Sequence[bytes]:
        settings: JpgToPdfSettings = self.settings
        target = documents.create_empty(name="images.pdf")

        for item in self.track(self.files):
            handle = target.embed_image(
                item.data,
                name=item.name,
                media_type=item.media_type,
                quality=settings.encoder_quality,
            )
            layout = compute_layout(
                handle.natural_width,
                handle.natural_height,
                settings.page_size,
                settings.orientation,
                settings.margin,
            )
            page = target.new_page(layout.page_width, layout.page_height)
            page.draw_image(handle, layout.x, layout.y, layout.width, layout.height)
            LOGGER.debug(
                "Placed %s at (%.1f, %.1f) size %.1fx%.1f on a %.0fx%.0f page",
                item.name,
                layout.x,
                layout.y,
                layout.width,
                layout.height,
                layout.page_width,
                layout.page_height,
            )

        LOGGER.info("Assembled %d image(s) into one PDF", target.page_count)
        return [target.serialize()]
