"""Plugin turning every PDF page into a JPEG image.

Pages are not rasterised: each image is a placeholder sized like the page
at the requested resolution, carrying the file name, the page number and
the chosen quality and resolution.
"""

from __future__ import annotations

from typing import Sequence

from PIL import Image, ImageDraw, ImageFont

from ...adapters import raster
from ...adapters.document import Page
from ...core.settings import PdfToJpgSettings, ToolId
from ...core.utils import get_logger
from ..common.interfaces import BaseTool
from ..common.pipeline import register_tool

LOGGER = get_logger("intellifile.tools.pdf_to_image")

OUTPUT_MEDIA_TYPE = "image/jpeg"
_BACKGROUND = "#ffffff"
_INK = "#333333"


def render_page(page: Page, *, name: str, number: int, total: int, settings: PdfToJpgSettings) -> bytes:
    """Return the JPEG standing in for *page*, sized ``page points x dpi / 72``."""

    scale = settings.scale
    size = (max(1, round(page.width * scale)), max(1, round(page.height * scale)))
    canvas = Image.new("RGB", size, _BACKGROUND)
    draw = ImageDraw.Draw(canvas)
    title_font = ImageFont.load_default(size=24 * scale)
    body_font = ImageFont.load_default(size=16 * scale)

    left = 50 * scale
    draw.text((left, 76 * scale), f"PDF: {name}", fill=_INK, font=title_font)
    draw.text((left, 124 * scale), f"Page {number} of {total}", fill=_INK, font=body_font)
    draw.text((left, 148 * scale), f"Quality: {settings.quality}, DPI: {settings.dpi}", fill=_INK, font=body_font)

    with raster.RasterHandle(canvas, name=f"{name} page {number}") as handle:
        return raster.encode(handle, OUTPUT_MEDIA_TYPE, settings.encoder_quality)


@register_tool(ToolId.PDF_TO_JPG)
class PdfToImageTool(BaseTool):
    name = ToolId.PDF_TO_JPG
    settings_type = PdfToJpgSettings
    output_media_type = OUTPUT_MEDIA_TYPE

    def process(self) -> Sequence[bytes]:
        settings: PdfToJpgSettings = self.settings
        images: list[bytes] = []
        for item in self.track(self.files):
            document = self.load_document(item)
            total = document.page_count
            for number, page in enumerate(document.pages, start=1):
                LOGGER.debug("Rendering page %s of %s at %s dpi", number, item.name, settings.dpi)
                images.append(render_page(page, name=item.name, number=number, total=total, settings=settings))
            LOGGER.info("Rendered %d page(s) of %s", total, item.name)
        return images
