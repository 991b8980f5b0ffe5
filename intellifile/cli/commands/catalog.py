"""CLI helpers for browsing the tool catalog."""

from __future__ import annotations

from argparse import ArgumentParser, Namespace, _SubParsersAction

from ...core.catalog import CATEGORIES, TOOLS, ToolDescriptor, search_tools


def configure_parser(subparsers: _SubParsersAction[ArgumentParser]) -> None:
    parser = subparsers.add_parser("tools", help="List the available tools")
    parser.add_argument("--category", choices=CATEGORIES, default=None)
    parser.add_argument("--search", default=None, help="Filter by name, description or keyword")
    parser.set_defaults(handler=list_tools)


def select(category: str | None, query: str | None) -> list[ToolDescriptor]:
    tools = search_tools(query) if query else list(TOOLS)
    if category:
        tools = [tool for tool in tools if tool.category == category]
    return tools


def format_tool(tool: ToolDescriptor) -> str:
    suffix = " (requires API)" if tool.requires_api else ""
    formats = ", ".join(tool.accepted_formats)
    return f"{tool.id:<18} {tool.name} - {tool.description} [{formats}; max {tool.max_files}]{suffix}"


def list_tools(args: Namespace) -> int:
    tools = select(args.category, args.search)
    for tool in tools:
        print(format_tool(tool))
    if not tools:
        print("No tools found.")
    return 0
