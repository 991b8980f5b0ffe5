from __future__ import annotations

import pytest
from PIL import Image

from intellifile.core.exceptions import DocumentLoadError
from intellifile.core.model import InputFile
from intellifile.core.settings import CompressPdfSettings, ToolId
from intellifile.tools import load_builtin_plugins
from intellifile.tools.common.pipeline import process_files
from intellifile.tools.compressor.compress import LEVELS
from tests.helpers import encode_image, page_widths, read_pdf


def setup_module(module):
    load_builtin_plugins()


def _photo_pdf() -> InputFile:
    noise = Image.effect_noise((160, 120), 60).convert("RGB")
    photo = InputFile(data=encode_image(noise, "JPEG"), name="photo.jpg")
    result = process_files(ToolId.JPG_TO_PDF, [photo], {"imageQuality": "high"})
    return InputFile(data=result[0], name="photo.pdf")


def test_levels_cover_every_setting() -> None:
    assert set(LEVELS) == set(CompressPdfSettings.LEVELS)


@pytest.mark.parametrize("level", CompressPdfSettings.LEVELS)
def test_compress_keeps_pages(sample_pdf: InputFile, level: str) -> None:
    result = process_files(ToolId.COMPRESS_PDF, [sample_pdf], CompressPdfSettings(compression_level=level))

    assert len(result) == 1
    assert page_widths(result[0]) == [100, 110, 120, 130, 140]


def test_compress_each_input_independently(sample_pdfs: list[InputFile]) -> None:
    result = process_files(ToolId.COMPRESS_PDF, sample_pdfs)
    assert [len(read_pdf(payload).pages) for payload in result] == [2, 3]


def test_high_compression_reencodes_images() -> None:
    source = _photo_pdf()
    result = process_files(ToolId.COMPRESS_PDF, [source], {"compressionLevel": "high"})

    images = read_pdf(result[0]).pages[0].images
    assert len(images) == 1
    assert images[0].image.size == (160, 120)


def test_compress_reports_progress(sample_pdfs: list[InputFile]) -> None:
    values: list[float] = []
    process_files(ToolId.COMPRESS_PDF, sample_pdfs, {"compressionLevel": "low"}, values.append)
    assert values == [10, 55, 100]


def test_compress_rejects_invalid_pdf(not_a_pdf: InputFile) -> None:
    with pytest.raises(DocumentLoadError, match="broken.pdf"):
        process_files(ToolId.COMPRESS_PDF, [not_a_pdf])
