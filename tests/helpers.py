from __future__ import annotations

from io import BytesIO
from typing import Sequence

from PIL import Image
from pypdf import PdfReader, PdfWriter


def build_pdf(widths: Sequence[float], height: float = 200, title: str | None = None) -> bytes:
    writer = PdfWriter()
    for width in widths:
        writer.add_blank_page(width=width, height=height)
    if title is not None:
        writer.add_metadata({"/Title": title})
    buffer = BytesIO()
    writer.write(buffer)
    return buffer.getvalue()


def read_pdf(payload: bytes) -> PdfReader:
    return PdfReader(BytesIO(payload))


def page_widths(payload: bytes) -> list[float]:
    return [float(page.mediabox.width) for page in read_pdf(payload).pages]


def open_image(payload: bytes) -> Image.Image:
    image = Image.open(BytesIO(payload))
    image.load()
    return image


def encode_image(image: Image.Image, image_format: str) -> bytes:
    buffer = BytesIO()
    image.save(buffer, image_format)
    return buffer.getvalue()
