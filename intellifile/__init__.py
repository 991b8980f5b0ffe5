"""Local file-transformation engine for PDFs and raster images."""

from __future__ import annotations

from typing import Any, Mapping, Sequence

from .core.catalog import TOOLS, ToolDescriptor, get_tool, search_tools
from .core.exceptions import (
    DocumentLoadError,
    EncodeError,
    ImageDecodeError,
    IntelliFileError,
    InvalidInputError,
    InvalidTransitionError,
    PageIndexError,
    SettingsMismatchError,
    UnknownToolError,
    UnsupportedFormatError,
)
from .core.layout import PageLayout, compute_layout
from .core.model import FileStatus, InputFile, ResultSet
from .core.progress import ProgressCallback
from .core.ranges import parse_ranges
from .core.settings import ToolId, ToolSettings, default_settings
from .delivery import bundle_zip, deliver, output_names
from .tools import load_builtin_plugins
from .tools.common.interfaces import ToolContext
from .tools.common.pipeline import ToolRegistry, process_files, register_tool, registry

load_builtin_plugins()


def run_tool(
    tool_id: ToolId | str,
    files: Sequence[InputFile],
    settings: ToolSettings | Mapping[str, Any] | None = None,
    on_progress: ProgressCallback | None = None,
) -> ResultSet:
    """Run a tool and keep the status of every input in step with it.

    All inputs move to ``processing`` and follow the run's progress. On
    success each one completes with the shared result; on failure each one
    records the error message before the exception propagates.
    """

    blocked = [item.name for item in files if not item.can_start]
    if blocked:
        raise InvalidTransitionError(f"Cannot start {', '.join(blocked)}: already processed or processing")
    for item in files:
        item.start()

    def _track(value: float) -> None:
        for item in files:
            item.update_progress(value)
        if on_progress is not None:
            on_progress(value)

    try:
        result = process_files(tool_id, files, settings, _track)
    except Exception as exc:
        for item in files:
            item.fail(str(exc))
        raise

    for item in files:
        item.complete(result)
    return result


def merge_documents(files: Sequence[InputFile], **settings: Any) -> ResultSet:
    """Convenience wrapper around the merge plugin."""

    return process_files(ToolId.MERGE_PDF, files, settings)


def split_document(file: InputFile, **settings: Any) -> ResultSet:
    """Convenience wrapper around the split plugin."""

    return process_files(ToolId.SPLIT_PDF, [file], settings)


def rotate_document(file: InputFile, **settings: Any) -> ResultSet:
    """Convenience wrapper around the rotate plugin."""

    return process_files(ToolId.ROTATE_PDF, [file], settings)


def organize_document(file: InputFile, **settings: Any) -> ResultSet:
    """Convenience wrapper around the organize plugin."""

    return process_files(ToolId.ORGANIZE_PDF, [file], settings)


def compress_documents(files: Sequence[InputFile], **settings: Any) -> ResultSet:
    """Convenience wrapper around the PDF compression plugin."""

    return process_files(ToolId.COMPRESS_PDF, files, settings)


def images_to_pdf(files: Sequence[InputFile], **settings: Any) -> ResultSet:
    """Convenience wrapper around the image to PDF plugin."""

    return process_files(ToolId.JPG_TO_PDF, files, settings)


def pdf_to_images(files: Sequence[InputFile], **settings: Any) -> ResultSet:
    """Convenience wrapper around the PDF to JPEG plugin."""

    return process_files(ToolId.PDF_TO_JPG, files, settings)


def compress_images(files: Sequence[InputFile], **settings: Any) -> ResultSet:
    """Convenience wrapper around the image compression plugin."""

    return process_files(ToolId.COMPRESS_IMAGE, files, settings)


def convert_images(files: Sequence[InputFile], **settings: Any) -> ResultSet:
    """Convenience wrapper around the format converter plugin."""

    return process_files(ToolId.FORMAT_CONVERTER, files, settings)


__all__ = [
    "TOOLS",
    "ToolDescriptor",
    "get_tool",
    "search_tools",
    "IntelliFileError",
    "DocumentLoadError",
    "ImageDecodeError",
    "UnsupportedFormatError",
    "EncodeError",
    "UnknownToolError",
    "SettingsMismatchError",
    "InvalidInputError",
    "PageIndexError",
    "InvalidTransitionError",
    "PageLayout",
    "compute_layout",
    "FileStatus",
    "InputFile",
    "ResultSet",
    "parse_ranges",
    "ToolId",
    "ToolSettings",
    "default_settings",
    "output_names",
    "deliver",
    "bundle_zip",
    "load_builtin_plugins",
    "ToolContext",
    "ToolRegistry",
    "registry",
    "register_tool",
    "process_files",
    "run_tool",
    "merge_documents",
    "split_document",
    "rotate_document",
    "organize_document",
    "compress_documents",
    "images_to_pdf",
    "pdf_to_images",
    "compress_images",
    "convert_images",
]
