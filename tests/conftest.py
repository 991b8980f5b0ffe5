from __future__ import annotations

from pathlib import Path
from typing import Callable
import sys

import pytest
from PIL import Image

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from intellifile.core.model import InputFile  # noqa: E402
from tests.helpers import build_pdf, encode_image  # noqa: E402

PdfFactory = Callable[..., InputFile]
ImageFactory = Callable[..., InputFile]


@pytest.fixture()
def pdf_factory() -> PdfFactory:
    """Build in-memory PDFs whose page widths identify the pages."""

    def _create(
        name: str = "sample.pdf",
        pages: int = 5,
        *,
        first_width: float = 100,
        title: str | None = None,
    ) -> InputFile:
        widths = [first_width + 10 * index for index in range(pages)]
        return InputFile(data=build_pdf(widths, title=title), name=name)

    return _create


@pytest.fixture()
def sample_pdf(pdf_factory: PdfFactory) -> InputFile:
    return pdf_factory("sample.pdf", 5, title="Sample")


@pytest.fixture()
def sample_pdfs(pdf_factory: PdfFactory) -> list[InputFile]:
    return [
        pdf_factory("one.pdf", 2, first_width=100, title="Document One"),
        pdf_factory("two.pdf", 3, first_width=300, title="Document Two"),
    ]


@pytest.fixture()
def image_factory() -> ImageFactory:
    """Build in-memory images in any Pillow-writable format."""

    def _create(
        name: str = "image.png",
        size: tuple[int, int] = (64, 32),
        *,
        mode: str = "RGB",
        color: object = (200, 30, 30),
        image_format: str | None = None,
        media_type: str | None = None,
    ) -> InputFile:
        image = Image.new(mode, size, color)
        fmt = image_format or Path(name).suffix.lstrip(".").upper().replace("JPG", "JPEG")
        return InputFile(data=encode_image(image, fmt), name=name, media_type=media_type)

    return _create


@pytest.fixture()
def not_a_pdf() -> InputFile:
    return InputFile(data=b"this is not a pdf", name="broken.pdf")
