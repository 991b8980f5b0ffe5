"""Command line interface for the IntelliFile toolkit."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from ..core.exceptions import IntelliFileError
from ..core.model import ResultSet
from ..core.settings import MergePdfSettings, ToolId
from ..core.utils import get_logger, set_log_level
from ..delivery import bundle_zip, deliver, output_names
from ..tools import load_builtin_plugins
from ..tools.common.interfaces import ToolContext
from ..tools.common.pipeline import registry
from .commands import catalog, convert, images, pdf

COMMAND_MODULES = [pdf, convert, images, catalog]

LOGGER = get_logger("intellifile.cli")

_NAME_SUFFIXES = {
    ToolId.SPLIT_PDF: "split",
    ToolId.ROTATE_PDF: "rotated",
    ToolId.ORGANIZE_PDF: "organized",
    ToolId.COMPRESS_PDF: "compressed",
    ToolId.PDF_TO_JPG: "page",
    ToolId.JPG_TO_PDF: "images",
    ToolId.COMPRESS_IMAGE: "compressed",
    ToolId.FORMAT_CONVERTER: "converted",
}


def _create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="intellifile", description="IntelliFile CLI")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every processing step")
    subparsers = parser.add_subparsers(dest="command")
    subparsers.required = True
    for module in COMMAND_MODULES:
        module.configure_parser(subparsers)
    return parser


def _base_name(args: argparse.Namespace, context: ToolContext) -> str:
    if args.name:
        return args.name
    settings = context.settings
    if isinstance(settings, MergePdfSettings):
        return settings.output_filename
    stem = context.files[0].stem
    return f"{stem}_{_NAME_SUFFIXES[ToolId(args.tool_name)]}"


def _write(result: ResultSet, base_name: str, output_dir: str, bundle: bool) -> list[Path]:
    if bundle and len(result) > 1:
        destination = Path(output_dir).expanduser().resolve()
        destination.mkdir(parents=True, exist_ok=True)
        archive = destination / output_names(1, base_name, "zip")[0]
        archive.write_bytes(bundle_zip(result, base_name))
        return [archive]
    return deliver(result, base_name, output_dir=output_dir)


def main(argv: Sequence[str] | None = None) -> int:
    load_builtin_plugins()
    parser = _create_parser()
    args = parser.parse_args(argv)
    if args.verbose:
        set_log_level(logging.DEBUG)

    handler = getattr(args, "handler", None)
    if handler is not None:
        return handler(args)

    try:
        context: ToolContext = args.build_context(args)
    except argparse.ArgumentTypeError as exc:
        parser.error(str(exc))
    except OSError as exc:
        parser.error(f"Cannot read input: {exc}")

    try:
        tool = registry.create(args.tool_name, context)
        result = tool.run()
        written = _write(result, _base_name(args, context), args.output_dir, args.zip)
    except IntelliFileError as exc:
        LOGGER.error("%s failed: %s", args.tool_name, exc)
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if not written:
        print("No output produced.")
    for path in written:
        print(path)
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
