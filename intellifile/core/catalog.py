"""Static catalog describing the tools offered to users."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence, TypeVar

from .utils import file_extension

CATEGORIES = ("pdf", "image", "document")


@dataclass(frozen=True, slots=True)
class ToolDescriptor:
    """Immutable description of a tool as shown in the catalog."""

    id: str
    name: str
    description: str
    icon: str
    category: str
    color: str
    max_files: int
    accepted_formats: tuple[str, ...]
    requires_api: bool = False
    keywords: tuple[str, ...] = ()


TOOLS: tuple[ToolDescriptor, ...] = (
    ToolDescriptor(
        id="merge-pdf",
        name="Merge PDF",
        description="Combine multiple PDFs into one file",
        icon="📎",
        category="pdf",
        color="yellow",
        max_files=10,
        accepted_formats=(".pdf",),
        keywords=("combine", "join", "merge", "pdf", "pdfs"),
    ),
    ToolDescriptor(
        id="split-pdf",
        name="Split PDF",
        description="Split PDF into multiple files by page range",
        icon="✂️",
        category="pdf",
        color="coral",
        max_files=1,
        accepted_formats=(".pdf",),
        keywords=("split", "separate", "divide", "extract", "pdf"),
    ),
    ToolDescriptor(
        id="compress-pdf",
        name="Compress PDF",
        description="Reduce PDF file size while keeping quality",
        icon="🗜️",
        category="pdf",
        color="mint",
        max_files=10,
        accepted_formats=(".pdf",),
        keywords=("compress", "reduce", "smaller", "size", "pdf"),
    ),
    ToolDescriptor(
        id="rotate-pdf",
        name="Rotate PDF",
        description="Rotate PDF pages in any direction",
        icon="🔄",
        category="pdf",
        color="lavender",
        max_files=1,
        accepted_formats=(".pdf",),
        keywords=("rotate", "turn", "flip", "orientation", "pdf"),
    ),
    ToolDescriptor(
        id="organize-pdf",
        name="Organize PDF",
        description="Reorder, delete, or add pages to PDF",
        icon="📑",
        category="pdf",
        color="peach",
        max_files=1,
        accepted_formats=(".pdf",),
        keywords=("organize", "reorder", "arrange", "pages", "pdf"),
    ),
    ToolDescriptor(
        id="pdf-to-pdfa",
        name="PDF to PDF/A",
        description="Convert to archival PDF/A format",
        icon="🏛️",
        category="pdf",
        color="yellow",
        max_files=10,
        accepted_formats=(".pdf",),
        requires_api=True,
        keywords=("archive", "pdfa", "pdf/a", "preservation"),
    ),
    ToolDescriptor(
        id="word-to-pdf",
        name="Word to PDF",
        description="Convert DOC/DOCX to PDF format",
        icon="📝",
        category="document",
        color="coral",
        max_files=10,
        accepted_formats=(".doc", ".docx"),
        requires_api=True,
        keywords=("word", "doc", "docx", "document", "pdf", "convert"),
    ),
    ToolDescriptor(
        id="pdf-to-jpg",
        name="PDF to JPG",
        description="Convert PDF pages to JPG images",
        icon="🖼️",
        category="document",
        color="mint",
        max_files=10,
        accepted_formats=(".pdf",),
        keywords=("pdf", "jpg", "jpeg", "image", "convert", "picture"),
    ),
    ToolDescriptor(
        id="jpg-to-pdf",
        name="JPG to PDF",
        description="Convert images to PDF document",
        icon="📄",
        category="document",
        color="lavender",
        max_files=30,
        accepted_formats=(".jpg", ".jpeg", ".png", ".webp"),
        keywords=("jpg", "jpeg", "png", "image", "pdf", "convert", "picture"),
    ),
    ToolDescriptor(
        id="compress-image",
        name="Compress Image",
        description="Reduce image size while preserving quality",
        icon="📸",
        category="image",
        color="peach",
        max_files=30,
        accepted_formats=(".jpg", ".jpeg", ".png", ".webp", ".gif"),
        keywords=("compress", "image", "reduce", "smaller", "photo"),
    ),
    ToolDescriptor(
        id="format-converter",
        name="Format Converter",
        description="Convert images between any format",
        icon="🔀",
        category="image",
        color="yellow",
        max_files=30,
        accepted_formats=(".jpg", ".jpeg", ".png", ".webp", ".svg", ".gif", ".bmp"),
        keywords=("convert", "format", "jpg", "png", "webp", "gif", "image"),
    ),
)

_BY_ID = {tool.id: tool for tool in TOOLS}


def get_tool(tool_id: str) -> ToolDescriptor | None:
    return _BY_ID.get(str(tool_id))


def tools_by_category(category: str) -> list[ToolDescriptor]:
    return [tool for tool in TOOLS if tool.category == category]


def search_tools(query: str) -> list[ToolDescriptor]:
    """Return tools whose name, description, category or keywords match *query*.

    Keywords match in both directions, so ``"pdfs"`` finds tools tagged
    ``"pdf"`` and ``"jp"`` finds tools tagged ``"jpg"``.
    """

    needle = query.strip().lower()
    if not needle:
        return []

    matches: list[ToolDescriptor] = []
    for tool in TOOLS:
        if (
            needle in tool.name.lower()
            or needle in tool.description.lower()
            or needle in tool.category
            or any(keyword in needle or needle in keyword for keyword in tool.keywords)
        ):
            matches.append(tool)
    return matches


def accepts(tool: ToolDescriptor, filename: str) -> bool:
    return file_extension(filename) in tool.accepted_formats


_T = TypeVar("_T")


def select_files(
    tool: ToolDescriptor,
    existing: Sequence[_T],
    candidates: Iterable[_T],
    *,
    name_of=lambda item: getattr(item, "name", str(item)),
) -> list[_T]:
    """Return the candidates that may be added next to *existing*.

    Candidates with an extension the tool does not accept are dropped, and
    the rest are truncated to the slots left under ``max_files``.
    """

    remaining = max(tool.max_files - len(existing), 0)
    valid = [item for item in candidates if accepts(tool, name_of(item))]
    return valid[:remaining]


__all__ = [
    "CATEGORIES",
    "TOOLS",
    "ToolDescriptor",
    "get_tool",
    "tools_by_category",
    "search_tools",
    "accepts",
    "select_files",
]
