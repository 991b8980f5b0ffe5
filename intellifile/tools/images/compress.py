"""Plugin resampling and re-encoding images to shrink them."""

from __future__ import annotations

from typing import Sequence

from ...adapters import raster
from ...core.model import InputFile
from ...core.settings import CompressImageSettings, ToolId
from ...core.utils import get_logger, guess_media_type
from ..common.interfaces import BaseTool
from ..common.pipeline import register_tool

LOGGER = get_logger("intellifile.tools.compress_image")

KEPT_MEDIA_TYPES = ("image/jpeg", "image/png", "image/webp")
FALLBACK_MEDIA_TYPE = "image/jpeg"
LOSSLESS_QUALITY = 100


def target_media_type(item: InputFile) -> str:
    """Return the format *item* is re-encoded to: its own when JPEG, PNG or WebP, else JPEG."""

    declared = (item.media_type or guess_media_type(item.name)).lower()
    if declared == "image/jpg":
        declared = "image/jpeg"
    return declared if declared in KEPT_MEDIA_TYPES else FALLBACK_MEDIA_TYPE


@register_tool(ToolId.COMPRESS_IMAGE)
class CompressImageTool(BaseTool):
    """Shrink each image into the ``max_width`` x ``max_height`` box and re-encode it.

    Every output of a run shares one format, the one chosen for the first
    input. Inputs of another format are converted to it so the result set
    stays uniform.
    """

    name = ToolId.COMPRESS_IMAGE
    settings_type = CompressImageSettings
    output_media_type = FALLBACK_MEDIA_TYPE

    def process(self) -> Sequence[bytes]:
        settings: CompressImageSettings = self.settings
        media_type = target_media_type(self.files[0])
        self.output_media_type = media_type
        lossless = media_type == "image/webp" and settings.quality >= LOSSLESS_QUALITY

        results: list[bytes] = []
        for item in self.track(self.files):
            own_type = target_media_type(item)
            if own_type != media_type:
                LOGGER.warning("Converting %s from %s to %s to match the batch", item.name, own_type, media_type)
            with raster.decode(item.data, item.name) as handle:
                resized = raster.resample(
                    handle,
                    settings.max_width,
                    settings.max_height,
                    settings.maintain_aspect_ratio,
                )
                width, height = resized.size
                try:
                    payload = raster.encode(resized, media_type, settings.quality / 100, lossless=lossless)
                finally:
                    if resized is not handle:
                        resized.close()
            LOGGER.info(
                "Compressed %s (%dx%d) from %d to %d bytes",
                item.name,
                width,
                height,
                item.size,
                len(payload),
            )
            results.append(payload)
        return results
