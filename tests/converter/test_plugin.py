from __future__ import annotations

import pytest

from intellifile.core.exceptions import DocumentLoadError, UnsupportedFormatError
from intellifile.core.model import InputFile
from intellifile.core.settings import JpgToPdfSettings, PdfToJpgSettings, ToolId
from intellifile.tools import load_builtin_plugins
from intellifile.tools.common.interfaces import ToolContext
from intellifile.tools.common.pipeline import process_files, registry
from tests.helpers import open_image, read_pdf


def setup_module(module):
    load_builtin_plugins()


def test_pdf_to_jpg_renders_every_page(sample_pdfs: list[InputFile]) -> None:
    context = ToolContext(files=sample_pdfs, settings=PdfToJpgSettings(dpi=72))
    result = registry.create(ToolId.PDF_TO_JPG, context).run()

    assert result.media_type == "image/jpeg"
    assert result.extension == "jpg"
    assert len(result) == 5
    sizes = [open_image(payload).size for payload in result]
    assert sizes == [(100, 200), (110, 200), (300, 200), (310, 200), (320, 200)]


def test_pdf_to_jpg_scales_with_dpi(pdf_factory) -> None:
    item = pdf_factory("one.pdf", 1, first_width=72)
    result = process_files(ToolId.PDF_TO_JPG, [item], {"dpi": 300, "quality": "low"})

    image = open_image(result[0])
    assert image.format == "JPEG"
    assert image.size == (300, round(200 * 300 / 72))


def test_pdf_to_jpg_honours_page_rotation(pdf_factory) -> None:
    rotated = process_files(ToolId.ROTATE_PDF, [pdf_factory("one.pdf", 1)], {"rotation": 90})
    item = InputFile(data=rotated[0], name="rotated.pdf")

    result = process_files(ToolId.PDF_TO_JPG, [item], {"dpi": 72})
    assert open_image(result[0]).size == (200, 100)


def test_pdf_to_jpg_rejects_invalid_pdf(not_a_pdf: InputFile) -> None:
    with pytest.raises(DocumentLoadError, match="broken.pdf"):
        process_files(ToolId.PDF_TO_JPG, [not_a_pdf])


def test_jpg_to_pdf_places_one_image_per_page(image_factory) -> None:
    files = [
        image_factory("wide.png", (64, 32)),
        image_factory("tall.jpg", (32, 64)),
    ]
    result = process_files(ToolId.JPG_TO_PDF, files, JpgToPdfSettings())

    assert result.media_type == "application/pdf"
    reader = read_pdf(result[0])
    sizes = [(float(page.mediabox.width), float(page.mediabox.height)) for page in reader.pages]
    assert sizes == [(842, 595), (595, 842)]
    assert [len(page.images) for page in reader.pages] == [1, 1]


def test_jpg_to_pdf_original_page_size(image_factory) -> None:
    files = [image_factory("photo.png", (200, 100))]
    result = process_files(ToolId.JPG_TO_PDF, files, {"pageSize": "original", "margin": "medium"})

    page = read_pdf(result[0]).pages[0]
    assert (float(page.mediabox.width), float(page.mediabox.height)) == (344, 244)


def test_jpg_to_pdf_detects_format_without_hints(image_factory) -> None:
    item = image_factory("scan", (20, 20), image_format="PNG")
    result = process_files(ToolId.JPG_TO_PDF, [item])
    assert len(read_pdf(result[0]).pages) == 1


def test_jpg_to_pdf_aborts_on_unsupported_image(image_factory) -> None:
    files = [image_factory("good.png"), image_factory("bad.webp", image_format="WEBP")]
    with pytest.raises(UnsupportedFormatError, match="bad.webp"):
        process_files(ToolId.JPG_TO_PDF, files)


def test_jpg_to_pdf_aborts_on_corrupt_image() -> None:
    with pytest.raises(UnsupportedFormatError, match="junk.jpg"):
        process_files(ToolId.JPG_TO_PDF, [InputFile(data=b"junk", name="junk.jpg")])
