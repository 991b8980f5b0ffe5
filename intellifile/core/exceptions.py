"""Custom exceptions raised by the IntelliFile engine.

Every error that can be attributed to a single input carries the offending
``filename`` so callers can surface it next to the file in question.
"""

from __future__ import annotations


class IntelliFileError(Exception):
    """Base exception for all IntelliFile errors."""

    def __init__(self, message: str = "", *, filename: str | None = None) -> None:
        self.filename = filename
        self.message = message or self.default_message
        super().__init__(self.message)

    @property
    def default_message(self) -> str:
        if self.filename:
            return f"Failed to process {self.filename}."
        return "An unknown IntelliFile error occurred."


class DocumentLoadError(IntelliFileError):
    """Raised when a payload is not a readable PDF document."""

    @property
    def default_message(self) -> str:
        name = self.filename or "document"
        return f"Failed to process {name}. Make sure it's a valid PDF."


class ImageDecodeError(IntelliFileError):
    """Raised when an image payload cannot be decoded."""

    @property
    def default_message(self) -> str:
        name = self.filename or "image"
        return f"Failed to load image: {name}"


class UnsupportedFormatError(IntelliFileError):
    """Raised when no candidate decoder accepts an image payload."""

    @property
    def default_message(self) -> str:
        name = self.filename or "image"
        return f"Failed to process {name}. Make sure it's a valid image."


class EncodeError(IntelliFileError):
    """Raised when encoding to the target format fails."""

    @property
    def default_message(self) -> str:
        if self.filename:
            return f"Failed to encode {self.filename}."
        return "Failed to encode output."


class UnknownToolError(IntelliFileError):
    """Raised when dispatching to a tool identifier nobody registered."""

    def __init__(self, tool_id: object) -> None:
        self.tool_id = tool_id
        super().__init__(f"Unknown tool: {tool_id}")


class SettingsMismatchError(IntelliFileError):
    """Raised when a settings variant is paired with another tool."""


class InvalidInputError(IntelliFileError):
    """Raised when a tool receives the wrong number of inputs."""

    @property
    def default_message(self) -> str:
        return "No input files provided."


class PageIndexError(IntelliFileError, IndexError):
    """Raised when a page index lies outside the document."""

    def __init__(self, index: int, page_count: int) -> None:
        self.index = index
        self.page_count = page_count
        super().__init__(f"Page index {index} is out of range for a document with {page_count} page(s)")


class InvalidTransitionError(IntelliFileError):
    """Raised when an input file is moved through an illegal status change."""


__all__ = [
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
]
