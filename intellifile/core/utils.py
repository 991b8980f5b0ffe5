"""Utilities shared by IntelliFile tools."""

from __future__ import annotations

import logging
import mimetypes
from pathlib import Path

DEFAULT_MEDIA_TYPE = "application/octet-stream"

_EXTENSION_MEDIA_TYPES = {
    ".pdf": "application/pdf",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".png": "image/png",
    ".webp": "image/webp",
    ".gif": "image/gif",
    ".bmp": "image/bmp",
    ".svg": "image/svg+xml",
}

_MEDIA_TYPE_EXTENSIONS = {
    "application/pdf": "pdf",
    "image/jpeg": "jpg",
    "image/png": "png",
    "image/webp": "webp",
    "image/gif": "gif",
    "image/bmp": "bmp",
    "application/zip": "zip",
}


def get_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.propagate = False
    return logger


def set_log_level(level: int) -> None:
    """Apply *level* to every logger created below the ``intellifile`` namespace."""

    for name in list(logging.root.manager.loggerDict):
        if name == "intellifile" or name.startswith("intellifile."):
            logging.getLogger(name).setLevel(level)


def resolve_path(path: str | Path | None) -> Path:
    if path is None:
        raise ValueError("Path must not be None")
    resolved = Path(path).expanduser().resolve()
    return resolved


def file_extension(name: str) -> str:
    """Return the lower-cased extension of *name* including the dot, or ``""``."""

    return Path(name).suffix.lower()


def guess_media_type(name: str) -> str:
    extension = file_extension(name)
    if extension in _EXTENSION_MEDIA_TYPES:
        return _EXTENSION_MEDIA_TYPES[extension]
    guessed, _ = mimetypes.guess_type(name)
    return guessed or DEFAULT_MEDIA_TYPE


def extension_for(media_type: str) -> str:
    """Return the canonical file extension (without dot) for *media_type*."""

    return _MEDIA_TYPE_EXTENSIONS.get(media_type.lower(), "bin")


def format_file_size(size_bytes: int) -> str:
    """Format *size_bytes* the way file lists display it (``"1.5 MB"``)."""

    if size_bytes < 1024:
        return f"{size_bytes} B"
    if size_bytes < 1024 * 1024:
        return f"{size_bytes / 1024:.1f} KB"
    return f"{size_bytes / (1024 * 1024):.1f} MB"


__all__ = [
    "DEFAULT_MEDIA_TYPE",
    "get_logger",
    "set_log_level",
    "resolve_path",
    "file_extension",
    "guess_media_type",
    "extension_for",
    "format_file_size",
]
