"""Raster image decoding, resampling and encoding backed by Pillow."""

from __future__ import annotations

from contextlib import contextmanager
from io import BytesIO
from typing import Iterator

from PIL import Image, ImageColor, UnidentifiedImageError

from ..core.exceptions import EncodeError, ImageDecodeError
from ..core.utils import get_logger

LOGGER = get_logger("intellifile.adapters.raster")

PIL_FORMATS = {
    "image/jpeg": "JPEG",
    "image/png": "PNG",
    "image/webp": "WEBP",
    "image/gif": "GIF",
    "image/bmp": "BMP",
}
MEDIA_TYPES = {pil_format: media_type for media_type, pil_format in PIL_FORMATS.items()}
LOSSLESS_TYPES = frozenset({"image/png", "image/gif", "image/bmp"})
OPAQUE_TYPES = frozenset({"image/jpeg", "image/bmp"})
DEFAULT_BACKGROUND = "#ffffff"


class RasterHandle:
    """A decoded pixel surface.

    Handles own a Pillow image and must be closed once the caller is done
    with them; :func:`decode` yields one inside a ``with`` block.
    """

    def __init__(self, image: Image.Image, *, name: str = "image", source_format: str | None = None) -> None:
        self.image = image
        self.name = name
        self.source_format = source_format

    @property
    def width(self) -> int:
        return self.image.width

    @property
    def height(self) -> int:
        return self.image.height

    @property
    def size(self) -> tuple[int, int]:
        return self.image.size

    @property
    def media_type(self) -> str | None:
        if self.source_format is None:
            return None
        return MEDIA_TYPES.get(self.source_format)

    @property
    def has_alpha(self) -> bool:
        return self.image.mode in ("RGBA", "LA", "PA") or (
            self.image.mode == "P" and "transparency" in self.image.info
        )

    def close(self) -> None:
        self.image.close()

    def __enter__(self) -> "RasterHandle":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def open_image(data: bytes, name: str = "image") -> RasterHandle:
    """Decode *data* and return a handle the caller must close.

    Raises:
        ImageDecodeError: If Pillow cannot decode the payload.
    """

    try:
        image = Image.open(BytesIO(data))
        image.load()
    except (UnidentifiedImageError, OSError, SyntaxError, ValueError) as exc:
        LOGGER.error("Failed to decode image %s: %s", name, exc)
        raise ImageDecodeError(filename=name) from exc
    LOGGER.debug("Decoded %s as %s %sx%s", name, image.format, image.width, image.height)
    return RasterHandle(image, name=name, source_format=image.format)


@contextmanager
def decode(data: bytes, name: str = "image") -> Iterator[RasterHandle]:
    """Decode *data* for the duration of a ``with`` block."""

    handle = open_image(data, name)
    try:
        yield handle
    finally:
        handle.close()


def fit_dimensions(
    width: int,
    height: int,
    max_width: int,
    max_height: int,
    preserve_aspect: bool = True,
) -> tuple[int, int]:
    """Return the size an image of ``width`` x ``height`` is resampled to.

    With ``preserve_aspect`` an image exceeding the box is scaled by the
    smaller of the two ratios and rounded to whole pixels; otherwise each
    side is clamped to its maximum on its own.
    """

    if preserve_aspect:
        if width > max_width or height > max_height:
            ratio = min(max_width / width, max_height / height)
            return max(1, round(width * ratio)), max(1, round(height * ratio))
        return width, height
    return min(width, max_width), min(height, max_height)


def resample(handle: RasterHandle, max_width: int, max_height: int, preserve_aspect: bool = True) -> RasterHandle:
    """Return a handle resized to fit ``max_width`` x ``max_height``.

    When the image already fits the original handle is returned as is.
    """

    target = fit_dimensions(handle.width, handle.height, max_width, max_height, preserve_aspect)
    if target == handle.size:
        return handle
    LOGGER.debug("Resampling %s from %sx%s to %sx%s", handle.name, handle.width, handle.height, *target)
    resized = handle.image.resize(target, Image.Resampling.LANCZOS)
    return RasterHandle(resized, name=handle.name, source_format=handle.source_format)


def flatten(image: Image.Image, background: str | tuple[int, int, int] = DEFAULT_BACKGROUND) -> Image.Image:
    """Composite *image* onto an opaque *background* and return a new RGB image."""

    color = ImageColor.getrgb(background) if isinstance(background, str) else background
    rgba = image.convert("RGBA")
    try:
        canvas = Image.new("RGB", rgba.size, color[:3])
        canvas.paste(rgba, mask=rgba.getchannel("A"))
    finally:
        if rgba is not image:
            rgba.close()
    return canvas


def _prepare(handle: RasterHandle, media_type: str, background: str) -> Image.Image:
    image = handle.image
    if media_type in OPAQUE_TYPES:
        if handle.has_alpha or image.mode not in ("RGB", "L"):
            return flatten(image, background)
        return image
    if media_type == "image/png" and image.mode == "CMYK":
        return image.convert("RGB")
    if media_type == "image/webp" and image.mode not in ("RGB", "RGBA"):
        return image.convert("RGBA" if handle.has_alpha else "RGB")
    return image


def encode(
    handle: RasterHandle,
    media_type: str,
    quality: float | None = None,
    *,
    background: str = DEFAULT_BACKGROUND,
    lossless: bool = False,
) -> bytes:
    """Encode *handle* to *media_type* and return the bytes.

    ``quality`` is a fraction in ``[0, 1]`` and only affects JPEG and WebP.
    Transparent pixels are composited onto ``background`` for formats
    without an alpha channel.

    Raises:
        EncodeError: If the format is unsupported or the encoder fails.
    """

    pil_format = PIL_FORMATS.get(media_type)
    if pil_format is None:
        raise EncodeError(f"Unsupported output format: {media_type}", filename=handle.name)

    options: dict[str, object] = {}
    if media_type not in LOSSLESS_TYPES:
        if media_type == "image/webp" and lossless:
            options["lossless"] = True
        elif quality is not None:
            options["quality"] = max(1, min(100, round(quality * 100)))
    if media_type in ("image/jpeg", "image/png"):
        options["optimize"] = True

    try:
        prepared = _prepare(handle, media_type, background)
    except ValueError as exc:
        LOGGER.error("Invalid background colour %r for %s: %s", background, handle.name, exc)
        raise EncodeError(f"Invalid background colour: {background}", filename=handle.name) from exc

    output = BytesIO()
    try:
        prepared.save(output, pil_format, **options)
    except (OSError, ValueError, KeyError) as exc:
        LOGGER.error("Failed to encode %s as %s: %s", handle.name, media_type, exc)
        raise EncodeError(filename=handle.name) from exc
    finally:
        if prepared is not handle.image:
            prepared.close()

    LOGGER.debug("Encoded %s as %s (%d bytes)", handle.name, media_type, output.tell())
    return output.getvalue()


__all__ = [
    "RasterHandle",
    "PIL_FORMATS",
    "LOSSLESS_TYPES",
    "OPAQUE_TYPES",
    "open_image",
    "decode",
    "fit_dimensions",
    "resample",
    "flatten",
    "encode",
]
