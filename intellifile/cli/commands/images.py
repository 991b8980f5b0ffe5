"""CLI helpers for the raster image commands."""

from __future__ import annotations

from argparse import ArgumentParser, _SubParsersAction

from ...core.settings import FormatConverterSettings, ToolId
from . import register_tool_command


def configure_parser(subparsers: _SubParsersAction[ArgumentParser]) -> None:
    register_tool_command(
        subparsers,
        ToolId.COMPRESS_IMAGE,
        help="Resize and re-encode images",
        help_inputs="Input images",
        options={
            "quality": (("--quality",), {"type": int, "help": "Encoder quality from 1 to 100"}),
            "max_width": (("--max-width",), {"type": int}),
            "max_height": (("--max-height",), {"type": int}),
            "maintain_aspect_ratio": (
                ("--stretch",),
                {"action": "store_false", "help": "Clamp each side on its own instead of keeping the aspect ratio"},
            ),
        },
    )
    register_tool_command(
        subparsers,
        ToolId.FORMAT_CONVERTER,
        help="Convert images to another format",
        help_inputs="Input images",
        options={
            "output_format": (("--to",), {"choices": tuple(FormatConverterSettings.MEDIA_TYPES)}),
            "quality": (("--quality",), {"type": int, "help": "Encoder quality from 1 to 100"}),
            "background_color": (("--background",), {"help": "Fill colour for transparent pixels, e.g. #ffffff"}),
        },
    )
