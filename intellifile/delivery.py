"""Naming and writing of tool results."""

from __future__ import annotations

from io import BytesIO
from pathlib import Path
from typing import List
from zipfile import ZIP_DEFLATED, ZipFile

from .core.model import ResultSet
from .core.utils import get_logger, resolve_path

LOGGER = get_logger("intellifile.delivery")

DEFAULT_BASE_NAME = "output"


def output_names(count: int, base_name: str, extension: str) -> List[str]:
    """Return the file names for *count* results.

    A single result is called ``base.ext``; several are numbered from one
    as ``base_1.ext``, ``base_2.ext`` and so on.
    """

    base = base_name.strip() or DEFAULT_BASE_NAME
    suffix = extension.lstrip(".")
    if count <= 0:
        return []
    if count == 1:
        return [f"{base}.{suffix}"]
    return [f"{base}_{index}.{suffix}" for index in range(1, count + 1)]


def deliver(
    results: ResultSet,
    base_name: str,
    extension: str | None = None,
    output_dir: str | Path = ".",
) -> List[Path]:
    """Write every payload of *results* into *output_dir* and return the paths."""

    directory = resolve_path(output_dir)
    names = output_names(len(results), base_name, extension or results.extension)
    if not names:
        LOGGER.warning("Nothing to write for %s: the result set is empty", base_name)
        return []

    directory.mkdir(parents=True, exist_ok=True)
    written: List[Path] = []
    for name, payload in zip(names, results):
        destination = directory / name
        with destination.open("wb") as handle:
            handle.write(payload)
        LOGGER.debug("Wrote %d bytes to %s", len(payload), destination)
        written.append(destination)
    LOGGER.info("Delivered %d file(s) to %s", len(written), directory)
    return written


def bundle_zip(results: ResultSet, base_name: str, extension: str | None = None) -> bytes:
    """Pack every payload of *results* into one zip archive, named as :func:`deliver` names them."""

    names = output_names(len(results), base_name, extension or results.extension)
    buffer = BytesIO()
    with ZipFile(buffer, "w", compression=ZIP_DEFLATED) as archive:
        for name, payload in zip(names, results):
            archive.writestr(name, payload)
    LOGGER.debug("Bundled %d file(s) into a zip archive", len(names))
    return buffer.getvalue()


__all__ = ["output_names", "deliver", "bundle_zip"]
