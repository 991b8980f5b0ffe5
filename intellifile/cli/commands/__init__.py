"""Argument helpers shared by the CLI command modules."""

from __future__ import annotations

import argparse
from argparse import ArgumentParser
from typing import Any, Iterable, Mapping

from ...core.model import InputFile
from ...core.settings import ToolId
from ...tools.common.interfaces import ToolContext
from ...tools.common.pipeline import registry, resolve_settings


def add_io_arguments(parser: ArgumentParser, *, help_inputs: str) -> None:
    parser.add_argument("inputs", nargs="+", help=help_inputs)
    parser.add_argument("-o", "--output-dir", default=".", help="Directory receiving the results")
    parser.add_argument("--name", default=None, help="Base name of the written files")
    parser.add_argument(
        "--set",
        dest="assignments",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Override a tool setting, e.g. --set pageRange=1-3",
    )
    parser.add_argument("--zip", action="store_true", help="Bundle several results into one zip archive")


def setting_option(parser: ArgumentParser, *flags: str, dest: str, **kwargs: Any) -> None:
    """Add an optional flag that only reaches the settings when given."""

    parser.add_argument(*flags, dest=dest, default=argparse.SUPPRESS, **kwargs)


def parse_assignments(assignments: Iterable[str]) -> dict[str, str]:
    values: dict[str, str] = {}
    for assignment in assignments:
        key, separator, value = assignment.partition("=")
        if not separator or not key.strip():
            raise argparse.ArgumentTypeError(f"Expected KEY=VALUE, got {assignment!r}")
        values[key.strip()] = value.strip()
    return values


def build_context(args: argparse.Namespace, setting_keys: Iterable[str]) -> ToolContext:
    config: dict[str, Any] = parse_assignments(args.assignments)
    for key in setting_keys:
        if hasattr(args, key):
            config[key] = getattr(args, key)
    tool_class = registry.resolve(args.tool_name)
    files = [InputFile.from_path(path) for path in args.inputs]
    return ToolContext(files=files, settings=resolve_settings(tool_class, config))


def register_tool_command(
    subparsers: "argparse._SubParsersAction[ArgumentParser]",
    tool_id: ToolId,
    *,
    help: str,
    help_inputs: str,
    options: Mapping[str, tuple[tuple[str, ...], dict[str, Any]]],
) -> ArgumentParser:
    """Create the sub-command running *tool_id* with one flag per entry of *options*."""

    parser = subparsers.add_parser(tool_id.value, help=help)
    add_io_arguments(parser, help_inputs=help_inputs)
    for dest, (flags, kwargs) in options.items():
        setting_option(parser, *flags, dest=dest, **kwargs)
    keys = tuple(options)
    parser.set_defaults(tool_name=tool_id.value, build_context=lambda args: build_context(args, keys))
    return parser


__all__ = [
    "add_io_arguments",
    "setting_option",
    "parse_assignments",
    "build_context",
    "register_tool_command",
]
