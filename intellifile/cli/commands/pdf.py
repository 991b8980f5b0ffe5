"""CLI helpers for the page-level PDF commands."""

from __future__ import annotations

from argparse import ArgumentParser, _SubParsersAction

from ...core.settings import CompressPdfSettings, RotatePdfSettings, SplitPdfSettings, ToolId
from . import register_tool_command


def configure_parser(subparsers: _SubParsersAction[ArgumentParser]) -> None:
    register_tool_command(
        subparsers,
        ToolId.MERGE_PDF,
        help="Merge multiple PDFs into one",
        help_inputs="Input PDF files, in merge order",
        options={
            "output_filename": (("--output-filename",), {"help": "Base name of the merged file"}),
        },
    )
    register_tool_command(
        subparsers,
        ToolId.SPLIT_PDF,
        help="Split a PDF into multiple files",
        help_inputs="Input PDF file",
        options={
            "split_method": (("--method",), {"choices": SplitPdfSettings.METHODS, "help": "How to split"}),
            "page_range": (("--range",), {"help": "Pages kept together, e.g. 1-3,5"}),
            "extract_pages": (("--pages",), {"help": "Pages written one per file, e.g. 1,3,5"}),
        },
    )
    register_tool_command(
        subparsers,
        ToolId.ROTATE_PDF,
        help="Rotate PDF pages",
        help_inputs="Input PDF file",
        options={
            "rotation": (("--rotation",), {"type": int, "choices": RotatePdfSettings.ROTATIONS}),
            "apply_to": (("--apply-to",), {"choices": RotatePdfSettings.TARGETS}),
            "selected_pages": (("--pages",), {"help": "Pages rotated with --apply-to selected"}),
        },
    )
    register_tool_command(
        subparsers,
        ToolId.ORGANIZE_PDF,
        help="Reorder or delete PDF pages",
        help_inputs="Input PDF file",
        options={
            "page_order": (("--order",), {"type": int, "nargs": "+", "help": "Zero-based page order"}),
            "deleted_pages": (("--delete",), {"type": int, "nargs": "+", "help": "Zero-based pages to drop"}),
        },
    )
    register_tool_command(
        subparsers,
        ToolId.COMPRESS_PDF,
        help="Compress PDF files",
        help_inputs="Input PDF files",
        options={
            "compression_level": (("--level",), {"choices": CompressPdfSettings.LEVELS}),
        },
    )
