"""Plugin re-encoding images into another format."""

from __future__ import annotations

from typing import Sequence

from ...adapters import raster
from ...core.settings import FormatConverterSettings, ToolId
from ...core.utils import get_logger
from ..common.interfaces import BaseTool
from ..common.pipeline import register_tool

LOGGER = get_logger("intellifile.tools.convert")


@register_tool(ToolId.FORMAT_CONVERTER)
class FormatConverterTool(BaseTool):
    """Re-encode every image to ``output_format`` at its natural size.

    Targets without an alpha channel get transparent pixels composited onto
    ``background_color``; quality only affects JPEG and WebP.
    """

    name = ToolId.FORMAT_CONVERTER
    settings_type = FormatConverterSettings
    output_media_type = "image/png"

    def process(self) -> Sequence[bytes]:
        settings: FormatConverterSettings = self.settings
        media_type = settings.media_type
        self.output_media_type = media_type

        results: list[bytes] = []
        for item in self.track(self.files):
            with raster.decode(item.data, item.name) as handle:
                LOGGER.debug("Converting %s from %s to %s", item.name, handle.media_type, media_type)
                payload = raster.encode(
                    handle,
                    media_type,
                    settings.quality / 100,
                    background=settings.background_color,
                )
            results.append(payload)
        LOGGER.info("Converted %d image(s) to %s", len(results), settings.output_format)
        return results
