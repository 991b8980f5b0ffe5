"""Plugin registry and dispatch for IntelliFile tools."""

from __future__ import annotations

from typing import Any, Dict, Iterable, Mapping, Sequence

from ...core.exceptions import SettingsMismatchError, UnknownToolError
from ...core.model import InputFile, ResultSet
from ...core.progress import ProgressCallback, ProgressReporter
from ...core.settings import SETTINGS_TYPES, ToolId, ToolSettings
from ...core.utils import get_logger
from .interfaces import BaseTool, ToolContext, ToolFactory

LOGGER = get_logger("intellifile.tools.pipeline")


class ToolRegistry:
    """Registry storing available IntelliFile tools."""

    def __init__(self) -> None:
        self._tools: Dict[ToolId, type[BaseTool]] = {}

    def register(self, name: ToolId | str, tool_class: type[BaseTool]) -> None:
        key = ToolId(name)
        if key in self._tools:
            raise ValueError(f"Tool '{key.value}' is already registered")
        if getattr(tool_class, "settings_type", None) is not SETTINGS_TYPES[key]:
            raise ValueError(f"Tool '{key.value}' must declare {SETTINGS_TYPES[key].__name__} as its settings")
        self._tools[key] = tool_class

    def resolve(self, name: ToolId | str) -> type[BaseTool]:
        try:
            return self._tools[ToolId(name)]
        except (KeyError, ValueError) as exc:
            raise UnknownToolError(getattr(name, "value", name)) from exc

    def create(self, name: ToolId | str, context: ToolContext) -> BaseTool:
        return self.resolve(name)(context)

    def names(self) -> Iterable[str]:
        return sorted(tool_id.value for tool_id in self._tools)

    def get(self, name: ToolId | str) -> type[BaseTool] | None:
        try:
            return self._tools.get(ToolId(name))
        except ValueError:
            return None

    def missing(self) -> list[ToolId]:
        return [tool_id for tool_id in ToolId if tool_id not in self._tools]

    def verify_complete(self) -> None:
        """Raise ``RuntimeError`` unless every :class:`ToolId` has a registered tool."""

        missing = self.missing()
        if missing:
            names = ", ".join(tool_id.value for tool_id in missing)
            raise RuntimeError(f"No tool registered for: {names}")


registry = ToolRegistry()


def register_tool(name: ToolId | str):
    def decorator(cls: type[BaseTool]) -> type[BaseTool]:
        registry.register(name, cls)
        return cls

    return decorator


def resolve_settings(tool_class: type[BaseTool], settings: ToolSettings | Mapping[str, Any] | None) -> ToolSettings:
    """Return the settings variant *tool_class* expects.

    ``None`` selects the defaults. Mappings and typed variants alike are
    coerced leniently, so missing or out-of-range fields fall back to their
    defaults. A settings object belonging to another tool is rejected.
    """

    expected = tool_class.settings_type
    if settings is None:
        return expected()
    if isinstance(settings, expected):
        return expected.from_mapping(settings.to_dict())
    if isinstance(settings, Mapping):
        return expected.from_mapping(settings)
    raise SettingsMismatchError(
        f"{type(settings).__name__} cannot configure tool '{tool_class.name.value}'; expected {expected.__name__}"
    )


def process_files(
    tool_id: ToolId | str,
    files: Sequence[InputFile],
    settings: ToolSettings | Mapping[str, Any] | None = None,
    on_progress: ProgressCallback | None = None,
) -> ResultSet:
    """Run the tool registered under *tool_id* over *files*.

    Args:
        tool_id: Identifier of the tool, e.g. ``"merge-pdf"``.
        files: Inputs in the order the tool should consume them.
        settings: Settings variant for the tool, a loose mapping, or ``None``.
        on_progress: Optional callback receiving values in ``[0, 100]``.

    Raises:
        UnknownToolError: If no tool is registered under *tool_id*.
        SettingsMismatchError: If *settings* belongs to another tool.
    """

    tool_class = registry.resolve(tool_id)
    context = ToolContext(
        files=list(files),
        settings=resolve_settings(tool_class, settings),
        progress=ProgressReporter(on_progress),
    )
    LOGGER.debug("Running %s on %d file(s)", tool_class.name.value, len(context.files))
    tool = tool_class(context)
    result = tool.run()
    LOGGER.info("%s produced %d output(s)", tool_class.name.value, len(result))
    return result


__all__ = [
    "ToolRegistry",
    "registry",
    "register_tool",
    "resolve_settings",
    "process_files",
    "ToolContext",
    "BaseTool",
    "ToolFactory",
]
