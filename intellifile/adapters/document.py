"""Page-addressable PDF documents backed by :mod:`pypdf`.

Every :class:`Document` wraps a :class:`pypdf.PdfWriter`, so loaded files
can be mutated in place (rotation) and serialised again, while new
documents start empty. Pages copied from one document into another are
cloned on copy, so later changes to the source never leak into the copy.
"""

from __future__ import annotations

from dataclasses import dataclass
from io import BytesIO
from typing import Iterable, Mapping, Sequence

from PIL import Image, UnidentifiedImageError
from pypdf import PageObject, PdfReader, PdfWriter, Transformation

from ..core.exceptions import DocumentLoadError, EncodeError, PageIndexError, UnsupportedFormatError
from ..core.utils import file_extension, get_logger
from .raster import flatten

LOGGER = get_logger("intellifile.adapters.document")

_PAGE_CLONE_EXCLUDED = ("/Parent", "/StructParents")
_JPEG_TYPES = {"image/jpeg", "image/jpg"}
_JPEG_EXTENSIONS = {".jpg", ".jpeg"}


class Page:
    """Handle on a single page owned by a :class:`Document`."""

    def __init__(self, page: PageObject) -> None:
        self._page = page

    @property
    def pdf_page(self) -> PageObject:
        return self._page

    @property
    def rotation(self) -> int:
        return int(self._page.rotation) % 360

    @property
    def media_width(self) -> float:
        return float(self._page.mediabox.width)

    @property
    def media_height(self) -> float:
        return float(self._page.mediabox.height)

    @property
    def width(self) -> float:
        """Displayed width in points, taking the rotation into account."""

        return self.media_height if self.rotation in (90, 270) else self.media_width

    @property
    def height(self) -> float:
        return self.media_width if self.rotation in (90, 270) else self.media_height

    def rotate(self, delta: int) -> int:
        """Rotate the page by *delta* degrees relative to its current angle.

        Returns the new angle, normalised to ``[0, 360)``.
        """

        if delta % 90 != 0:
            raise ValueError(f"Rotation must be a multiple of 90 degrees, got {delta}")
        angle = (self.rotation + delta) % 360
        self._page.rotation = angle
        return angle

    def draw_image(self, image: "ImageHandle", x: float, y: float, width: float, height: float) -> None:
        """Draw *image* scaled to ``width`` x ``height`` with its lower-left corner at ``(x, y)``."""

        transform = (
            Transformation()
            .scale(width / image.natural_width, height / image.natural_height)
            .translate(x, y)
        )
        self._page.merge_transformed_page(image.page, transform)


@dataclass(frozen=True)
class ImageHandle:
    """An image embedded for drawing, sized in points at 72 dpi."""

    page: PageObject
    natural_width: int
    natural_height: int


class Document:
    """An ordered sequence of pages that can be serialised to PDF bytes."""

    def __init__(self, writer: PdfWriter | None = None, *, name: str = "document.pdf") -> None:
        self._writer = writer if writer is not None else PdfWriter()
        self.name = name

    @property
    def writer(self) -> PdfWriter:
        return self._writer

    @property
    def page_count(self) -> int:
        return len(self._writer.pages)

    @property
    def pages(self) -> list[Page]:
        return [Page(page) for page in self._writer.pages]

    def page(self, index: int) -> Page:
        if not 0 <= index < self.page_count:
            raise PageIndexError(index, self.page_count)
        return Page(self._writer.pages[index])

    @property
    def metadata(self) -> dict[str, str]:
        info = self._writer.metadata or {}
        return {str(key): str(value) for key, value in info.items() if value is not None}

    def set_metadata(self, metadata: Mapping[str, str]) -> None:
        if metadata:
            self._writer.add_metadata(dict(metadata))

    def copy_pages(self, source: "Document", indices: Iterable[int]) -> list[Page]:
        """Clone the pages of *source* at *indices* into this document.

        The clones are owned by this document but not yet part of its page
        sequence; pass them to :meth:`append_page` in the desired order.

        Raises:
            PageIndexError: If any index is outside ``[0, source.page_count)``.
        """

        if source is self:
            raise ValueError("Pages can only be copied from another document")

        wanted = list(indices)
        total = source.page_count
        for index in wanted:
            if not 0 <= index < total:
                raise PageIndexError(index, total)

        copies: list[Page] = []
        for index in wanted:
            copies.append(Page(self._clone_page(source.writer.pages[index])))
            LOGGER.debug("Copied page %s from %s into %s", index, source.name, self.name)
        return copies

    def _clone_page(self, original: PageObject) -> PageObject:
        # pypdf caches clones per source object; a page copied twice must become two pages,
        # so forget the cached page dictionary the same way PdfWriter._add_page does.
        # _id_translated is private; checked against pypdf 4.3 through 5.x.
        reference = original.indirect_reference
        if reference is not None:
            self._writer._id_translated.get(id(reference.pdf), {}).pop(reference.idnum, None)
        clone = original.clone(self._writer, False, _PAGE_CLONE_EXCLUDED)
        return clone

    def append_page(self, page: Page) -> Page:
        added = self._writer.add_page(page.pdf_page)
        return Page(added)

    def new_page(self, width: float, height: float) -> Page:
        return Page(self._writer.add_blank_page(width=width, height=height))

    def embed_image(
        self,
        data: bytes,
        *,
        name: str = "image",
        media_type: str | None = None,
        quality: float = 0.92,
    ) -> ImageHandle:
        """Prepare an image payload for drawing onto pages of this document.

        The decoder is chosen from the declared media type or the file
        extension; when neither says JPEG or PNG, JPEG is tried first and
        PNG second.

        Raises:
            UnsupportedFormatError: If no candidate decoder accepts *data*.
            EncodeError: If the decoded image cannot be written as a PDF page.
        """

        image = _open_image(data, name, media_type)
        try:
            if image.mode not in ("RGB", "L"):
                flattened = flatten(image)
                image.close()
                image = flattened
            buffer = BytesIO()
            try:
                image.save(buffer, "PDF", resolution=72.0, quality=round(quality * 100))
            except (OSError, ValueError) as exc:
                LOGGER.error("Failed to embed image %s: %s", name, exc)
                raise EncodeError(filename=name) from exc
            width, height = image.size
        finally:
            image.close()

        page = PdfReader(BytesIO(buffer.getvalue())).pages[0]
        LOGGER.debug("Embedded %s (%sx%s)", name, width, height)
        return ImageHandle(page=page, natural_width=width, natural_height=height)

    def serialize(self, *, compact: bool = False, level: int | None = None) -> bytes:
        """Return the document as PDF bytes.

        ``compact`` merges identical objects and drops unreachable ones;
        ``level`` additionally deflates every page content stream with the
        given zlib level.
        """

        if level is not None:
            for page in self._writer.pages:
                page.compress_content_streams(level=level)
        if compact:
            self._writer.compress_identical_objects()

        output = BytesIO()
        self._writer.write(output)
        return output.getvalue()


def _decoder_candidates(name: str, media_type: str | None) -> Sequence[str]:
    declared = (media_type or "").lower()
    extension = file_extension(name)
    if declared == "image/png" or extension == ".png":
        return ("PNG",)
    if declared in _JPEG_TYPES or extension in _JPEG_EXTENSIONS:
        return ("JPEG",)
    return ("JPEG", "PNG")


def _open_image(data: bytes, name: str, media_type: str | None) -> Image.Image:
    for decoder in _decoder_candidates(name, media_type):
        try:
            image = Image.open(BytesIO(data), formats=[decoder])
            image.load()
        except (UnidentifiedImageError, OSError, SyntaxError) as exc:
            LOGGER.debug("Decoder %s rejected %s: %s", decoder, name, exc)
            continue
        return image
    LOGGER.error("No decoder accepted image %s", name)
    raise UnsupportedFormatError(filename=name)


def load(data: bytes, name: str = "document.pdf") -> Document:
    """Load PDF bytes into a mutable :class:`Document`.

    Encrypted files are opened with an empty password.

    Raises:
        DocumentLoadError: If *data* is not a readable PDF.
    """

    try:
        reader = PdfReader(BytesIO(data))
        if reader.is_encrypted:
            LOGGER.debug("Attempting to decrypt encrypted PDF %s", name)
            reader.decrypt("")
        writer = PdfWriter(clone_from=reader)
    except Exception as exc:  # dependency exceptions vary
        LOGGER.error("Failed to read PDF %s: %s", name, exc)
        raise DocumentLoadError(filename=name) from exc

    LOGGER.debug("Loaded %s with %d page(s)", name, len(writer.pages))
    return Document(writer, name=name)


def create_empty(name: str = "document.pdf") -> Document:
    return Document(name=name)


__all__ = ["Document", "Page", "ImageHandle", "load", "create_empty"]
