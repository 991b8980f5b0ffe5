"""Plugin shrinking PDFs with pypdf's lossless and lossy optimisations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from ...adapters import document as documents
from ...core.settings import CompressPdfSettings, ToolId
from ...core.utils import get_logger
from ..common.interfaces import BaseTool
from ..common.pipeline import register_tool

LOGGER = get_logger("intellifile.tools.compress")


@dataclass(frozen=True)
class CompressionLevel:
    """Knobs applied for one ``compression_level`` value."""

    name: str
    stream_level: int | None
    image_quality: int | None


LEVELS: dict[str, CompressionLevel] = {
    "low": CompressionLevel("low", stream_level=None, image_quality=None),
    "medium": CompressionLevel("medium", stream_level=6, image_quality=None),
    "high": CompressionLevel("high", stream_level=9, image_quality=65),
}


def _recompress_images(document: documents.Document, quality: int) -> int:
    replaced = 0
    for number, page in enumerate(document.pages, start=1):
        for image in page.pdf_page.images:
            try:
                picture = image.image
                if picture is None:
                    continue
                if picture.mode not in ("RGB", "L"):
                    picture = picture.convert("RGB")
                image.replace(picture, quality=quality)
            except Exception as exc:  # dependency exceptions vary
                LOGGER.warning("Keeping image %s on page %s of %s: %s", image.name, number, document.name, exc)
                continue
            replaced += 1
    return replaced


@register_tool(ToolId.COMPRESS_PDF)
class CompressTool(BaseTool):
    """Compress each input PDF independently.

    Every level merges identical objects and drops unreachable ones.
    ``medium`` and ``high`` also deflate page content streams, and ``high``
    re-encodes embedded raster images as JPEG.
    """

    name = ToolId.COMPRESS_PDF
    settings_type = CompressPdfSettings

    def process(self) -> Sequence[bytes]:
        settings: CompressPdfSettings = self.settings
        level = LEVELS[settings.compression_level]

        results: list[bytes] = []
        for item in self.track(self.files):
            LOGGER.debug("Compressing %s with level %s", item.name, level.name)
            document = self.load_document(item)
            if level.image_quality is not None:
                count = _recompress_images(document, level.image_quality)
                LOGGER.debug("Re-encoded %d image(s) in %s", count, item.name)
            payload = document.serialize(compact=True, level=level.stream_level)
            LOGGER.info("Compressed %s from %d to %d bytes", item.name, item.size, len(payload))
            results.append(payload)
        return results
