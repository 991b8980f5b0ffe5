from __future__ import annotations

import pytest

from intellifile.core.exceptions import ImageDecodeError
from intellifile.core.model import InputFile
from intellifile.core.settings import CompressImageSettings, FormatConverterSettings, ToolId
from intellifile.tools import load_builtin_plugins
from intellifile.tools.common.pipeline import process_files
from intellifile.tools.images.compress import target_media_type
from tests.helpers import open_image


def setup_module(module):
    load_builtin_plugins()


def test_compress_image_fits_the_box(image_factory) -> None:
    item = image_factory("large.png", (400, 200))
    settings = CompressImageSettings(max_width=100, max_height=100)
    result = process_files(ToolId.COMPRESS_IMAGE, [item], settings)

    image = open_image(result[0])
    assert image.size == (100, 50)
    assert image.format == "PNG"
    assert result.media_type == "image/png"


def test_compress_image_without_aspect_clamps_each_side(image_factory) -> None:
    item = image_factory("large.jpg", (400, 60))
    settings = CompressImageSettings(max_width=100, max_height=100, maintain_aspect_ratio=False)
    result = process_files(ToolId.COMPRESS_IMAGE, [item], settings)

    assert open_image(result[0]).size == (100, 60)


def test_compress_image_keeps_small_images_at_natural_size(image_factory) -> None:
    result = process_files(ToolId.COMPRESS_IMAGE, [image_factory("small.jpg", (40, 30))])
    image = open_image(result[0])
    assert image.size == (40, 30)
    assert image.format == "JPEG"


def test_compress_image_is_idempotent_on_dimensions(image_factory) -> None:
    settings = CompressImageSettings(max_width=50, max_height=50)
    once = process_files(ToolId.COMPRESS_IMAGE, [image_factory("a.png", (300, 120))], settings)
    twice = process_files(ToolId.COMPRESS_IMAGE, [InputFile(data=once[0], name="a.png")], settings)
    assert open_image(once[0]).size == open_image(twice[0]).size == (50, 20)


@pytest.mark.parametrize(
    "name, expected",
    [("a.jpg", "image/jpeg"), ("a.png", "image/png"), ("a.webp", "image/webp"), ("a.gif", "image/jpeg"), ("a.bmp", "image/jpeg")],
)
def test_target_media_type(name: str, expected: str) -> None:
    assert target_media_type(InputFile(data=b"", name=name)) == expected


def test_gif_is_reencoded_as_jpeg(image_factory) -> None:
    result = process_files(ToolId.COMPRESS_IMAGE, [image_factory("anim.gif", (20, 20), mode="P", color=1)])
    assert result.media_type == "image/jpeg"
    assert open_image(result[0]).format == "JPEG"


def test_quality_hundred_makes_webp_lossless(image_factory) -> None:
    item = image_factory("pic.webp", (16, 16), color=(10, 20, 30))
    result = process_files(ToolId.COMPRESS_IMAGE, [item], {"quality": 100})

    source = open_image(item.data).convert("RGB")
    image = open_image(result[0])
    assert image.format == "WEBP"
    assert list(image.convert("RGB").getdata()) == list(source.getdata())


def test_mixed_batch_shares_the_first_format(image_factory) -> None:
    files = [image_factory("first.png"), image_factory("second.jpg")]
    result = process_files(ToolId.COMPRESS_IMAGE, files)

    assert result.media_type == "image/png"
    assert [open_image(payload).format for payload in result] == ["PNG", "PNG"]


def test_compress_image_names_undecodable_file(image_factory) -> None:
    files = [image_factory("ok.png"), InputFile(data=b"nope", name="bad.png")]
    with pytest.raises(ImageDecodeError, match="bad.png"):
        process_files(ToolId.COMPRESS_IMAGE, files)


def test_convert_to_jpeg_fills_background(image_factory) -> None:
    item = image_factory("clear.png", (10, 10), mode="RGBA", color=(0, 0, 0, 0))
    settings = FormatConverterSettings(output_format="jpg", background_color="#0000ff")
    result = process_files(ToolId.FORMAT_CONVERTER, [item], settings)

    assert result.media_type == "image/jpeg"
    assert result.extension == "jpg"
    red, green, blue = open_image(result[0]).convert("RGB").getpixel((5, 5))
    assert blue > 240 and red < 20 and green < 20


@pytest.mark.parametrize("output_format, pil_format", [("png", "PNG"), ("webp", "WEBP"), ("gif", "GIF"), ("bmp", "BMP")])
def test_convert_to_each_format(image_factory, output_format: str, pil_format: str) -> None:
    files = [image_factory("a.jpg", (12, 8)), image_factory("b.png", (8, 12))]
    result = process_files(ToolId.FORMAT_CONVERTER, files, {"outputFormat": output_format})

    assert len(result) == 2
    assert [open_image(payload).format for payload in result] == [pil_format, pil_format]
    assert open_image(result[1]).size == (8, 12)


def test_convert_png_keeps_transparency(image_factory) -> None:
    item = image_factory("clear.png", (4, 4), mode="RGBA", color=(0, 0, 0, 0))
    result = process_files(ToolId.FORMAT_CONVERTER, [item], {"outputFormat": "webp"})
    assert open_image(result[0]).mode == "RGBA"


def test_convert_reports_progress(image_factory) -> None:
    values: list[float] = []
    files = [image_factory(f"{index}.png") for index in range(3)]
    process_files(ToolId.FORMAT_CONVERTER, files, None, values.append)
    assert values == [10, 40, 70, 100]
