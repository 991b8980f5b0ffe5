"""Core interfaces and context objects shared by IntelliFile tools."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, ClassVar, Iterator, Sequence

from ...adapters import document as documents
from ...core.exceptions import InvalidInputError
from ...core.model import InputFile, ResultSet
from ...core.progress import ProgressReporter
from ...core.settings import ToolId, ToolSettings
from ...core.utils import get_logger

LOGGER = get_logger("intellifile.tools")


@dataclass
class ToolContext:
    """Holds shared execution state for a tool invocation."""

    files: Sequence[InputFile]
    settings: ToolSettings
    progress: ProgressReporter = field(default_factory=ProgressReporter)
    resources: dict[str, Any] = field(default_factory=dict)


class BaseTool:
    """Base class for all pluggable IntelliFile tools.

    Subclasses set ``name`` and ``settings_type`` and implement
    :meth:`process`; :meth:`run` wraps it with the shared progress contract.
    """

    name: ClassVar[ToolId]
    settings_type: ClassVar[type]
    output_media_type: ClassVar[str] = "application/pdf"
    single_input: ClassVar[bool] = False

    def __init__(self, context: ToolContext) -> None:
        self.context = context

    @property
    def settings(self) -> Any:
        return self.context.settings

    @property
    def files(self) -> Sequence[InputFile]:
        return self.context.files

    def run(self) -> ResultSet:
        files = self.files
        if not files:
            raise InvalidInputError()
        if self.single_input and len(files) > 1:
            raise InvalidInputError(f"{self.name.value} accepts exactly one file, got {len(files)}")

        self.context.progress.start()
        payloads = list(self.process())
        result = ResultSet(payloads, self.output_media_type)
        self.context.progress.finish()
        self.context.resources["result"] = result
        return result

    def process(self) -> Sequence[bytes]:  # pragma: no cover - to be implemented by subclasses
        raise NotImplementedError

    def advance(self, done: int, total: int) -> None:
        self.context.progress.advance(done, total)

    def load_document(self, item: InputFile) -> documents.Document:
        return documents.load(item.data, item.name)

    def track(self, items: Sequence[Any]) -> Iterator[Any]:
        """Yield *items*, reporting progress after each one has been handled."""

        total = len(items)
        for index, item in enumerate(items):
            yield item
            self.advance(index + 1, total)


ToolFactory = Callable[[ToolContext], BaseTool]
