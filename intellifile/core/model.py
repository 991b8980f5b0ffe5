"""Shared domain models used across IntelliFile tools."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Iterator, Sequence

from .exceptions import InvalidTransitionError
from .utils import extension_for, guess_media_type, resolve_path


class FileStatus(str, Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"
    ERROR = "error"


_TRANSITIONS: dict[FileStatus, frozenset[FileStatus]] = {
    FileStatus.PENDING: frozenset({FileStatus.PROCESSING}),
    FileStatus.PROCESSING: frozenset({FileStatus.COMPLETED, FileStatus.ERROR}),
    FileStatus.COMPLETED: frozenset(),
    FileStatus.ERROR: frozenset(),
}


@dataclass(frozen=True, slots=True)
class ResultSet:
    """Ordered output payloads sharing one media type.

    An empty result set means the tool ran and selected nothing; it is
    distinct from an :class:`InputFile` whose ``result`` is still ``None``.
    """

    payloads: tuple[bytes, ...]
    media_type: str

    def __init__(self, payloads: Sequence[bytes], media_type: str) -> None:
        object.__setattr__(self, "payloads", tuple(payloads))
        object.__setattr__(self, "media_type", media_type)

    @property
    def extension(self) -> str:
        return extension_for(self.media_type)

    @property
    def is_empty(self) -> bool:
        return not self.payloads

    def __len__(self) -> int:
        return len(self.payloads)

    def __iter__(self) -> Iterator[bytes]:
        return iter(self.payloads)

    def __getitem__(self, index: int) -> bytes:
        return self.payloads[index]


@dataclass(slots=True)
class InputFile:
    """A user-selected file together with its processing state."""

    data: bytes
    name: str
    size: int | None = None
    media_type: str | None = None
    id: str = field(default_factory=lambda: uuid.uuid4().hex)
    status: FileStatus = FileStatus.PENDING
    progress: float = 0.0
    error: str | None = None
    result: ResultSet | None = None

    def __post_init__(self) -> None:
        if self.size is None:
            self.size = len(self.data)
        if not self.media_type:
            self.media_type = guess_media_type(self.name)

    @classmethod
    def from_path(cls, path: str | Path, *, media_type: str | None = None) -> "InputFile":
        resolved = resolve_path(path)
        return cls(data=resolved.read_bytes(), name=resolved.name, media_type=media_type)

    @property
    def stem(self) -> str:
        return Path(self.name).stem or "file"

    def _move_to(self, status: FileStatus) -> None:
        if status not in _TRANSITIONS[self.status]:
            raise InvalidTransitionError(
                f"Cannot move {self.name} from {self.status.value} to {status.value}",
                filename=self.name,
            )
        self.status = status

    @property
    def can_start(self) -> bool:
        return FileStatus.PROCESSING in _TRANSITIONS[self.status]

    def start(self) -> None:
        self._move_to(FileStatus.PROCESSING)
        self.progress = 0.0
        self.error = None

    def update_progress(self, value: float) -> None:
        if self.status is not FileStatus.PROCESSING:
            raise InvalidTransitionError(
                f"Cannot report progress for {self.name} while {self.status.value}",
                filename=self.name,
            )
        self.progress = max(self.progress, min(max(value, 0.0), 100.0))

    def complete(self, result: ResultSet) -> None:
        self._move_to(FileStatus.COMPLETED)
        self.progress = 100.0
        self.result = result

    def fail(self, message: str) -> None:
        self._move_to(FileStatus.ERROR)
        self.error = message

    def reset(self) -> None:
        self.status = FileStatus.PENDING
        self.progress = 0.0
        self.error = None
        self.result = None


__all__ = ["FileStatus", "InputFile", "ResultSet"]
