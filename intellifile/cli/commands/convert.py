"""CLI helpers for conversions between PDFs and images."""

from __future__ import annotations

from argparse import ArgumentParser, _SubParsersAction

from ...core.settings import JpgToPdfSettings, PdfToJpgSettings, ToolId
from . import register_tool_command


def configure_parser(subparsers: _SubParsersAction[ArgumentParser]) -> None:
    register_tool_command(
        subparsers,
        ToolId.PDF_TO_JPG,
        help="Convert PDF pages to JPEG images",
        help_inputs="Input PDF files",
        options={
            "quality": (("--quality",), {"choices": tuple(PdfToJpgSettings.QUALITIES)}),
            "dpi": (("--dpi",), {"type": int, "choices": PdfToJpgSettings.DPI_CHOICES}),
        },
    )
    register_tool_command(
        subparsers,
        ToolId.JPG_TO_PDF,
        help="Assemble JPEG or PNG images into a PDF",
        help_inputs="Input images, in page order",
        options={
            "page_size": (("--page-size",), {"choices": JpgToPdfSettings.PAGE_SIZES}),
            "orientation": (("--orientation",), {"choices": JpgToPdfSettings.ORIENTATIONS}),
            "margin": (("--margin",), {"choices": JpgToPdfSettings.MARGINS}),
            "image_quality": (("--quality",), {"choices": tuple(JpgToPdfSettings.IMAGE_QUALITIES)}),
        },
    )
