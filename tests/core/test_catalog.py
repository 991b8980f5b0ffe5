from __future__ import annotations

from intellifile.core.catalog import TOOLS, accepts, get_tool, search_tools, select_files, tools_by_category
from intellifile.core.settings import ToolId
from intellifile.core.utils import format_file_size


def test_catalog_lists_every_processable_tool() -> None:
    ids = {tool.id for tool in TOOLS}
    assert {tool_id.value for tool_id in ToolId} <= ids
    assert len(TOOLS) == 11


def test_api_backed_tools_are_flagged() -> None:
    assert get_tool("pdf-to-pdfa").requires_api
    assert get_tool("word-to-pdf").requires_api
    assert not get_tool("merge-pdf").requires_api
    assert get_tool("missing") is None


def test_tools_by_category() -> None:
    assert {tool.id for tool in tools_by_category("image")} == {"compress-image", "format-converter"}


def test_search_matches_names_and_keywords() -> None:
    assert [tool.id for tool in search_tools("rotate")] == ["rotate-pdf"]
    assert "merge-pdf" in {tool.id for tool in search_tools("combine")}
    assert "merge-pdf" in {tool.id for tool in search_tools("pdfs")}
    assert search_tools("   ") == []


def test_accepts_is_case_insensitive() -> None:
    tool = get_tool("jpg-to-pdf")
    assert accepts(tool, "PHOTO.JPEG")
    assert not accepts(tool, "notes.txt")


def test_select_files_filters_and_truncates() -> None:
    tool = get_tool("split-pdf")
    assert select_files(tool, [], ["a.pdf", "b.pdf", "c.txt"]) == ["a.pdf"]
    assert select_files(tool, ["a.pdf"], ["b.pdf"]) == []

    merge = get_tool("merge-pdf")
    chosen = select_files(merge, ["x.pdf"] * 8, ["a.pdf", "b.doc", "c.pdf", "d.pdf"])
    assert chosen == ["a.pdf", "c.pdf"]


def test_format_file_size() -> None:
    assert format_file_size(512) == "512 B"
    assert format_file_size(1536) == "1.5 KB"
    assert format_file_size(5 * 1024 * 1024) == "5.0 MB"
