"""Typed settings for every IntelliFile tool.

Each tool owns exactly one frozen settings dataclass. The class attribute
``tool_id`` ties a variant to its tool so the dispatcher can reject a
variant paired with the wrong tool. ``from_mapping`` accepts the loosely
typed dictionaries produced by user interfaces (camelCase or snake_case
keys) and replaces anything missing or out of range with the default.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, ClassVar, Mapping, Sequence, Union


class ToolId(str, Enum):
    """Identifiers of every tool the engine can run."""

    MERGE_PDF = "merge-pdf"
    SPLIT_PDF = "split-pdf"
    COMPRESS_PDF = "compress-pdf"
    ROTATE_PDF = "rotate-pdf"
    ORGANIZE_PDF = "organize-pdf"
    PDF_TO_JPG = "pdf-to-jpg"
    JPG_TO_PDF = "jpg-to-pdf"
    COMPRESS_IMAGE = "compress-image"
    FORMAT_CONVERTER = "format-converter"


_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def _snake_case(key: str) -> str:
    return _CAMEL_BOUNDARY.sub("_", key).replace("-", "_").lower()


def _normalise_keys(data: Mapping[str, Any] | None) -> dict[str, Any]:
    if not data:
        return {}
    return {_snake_case(str(key)): value for key, value in data.items()}


def _choice(value: Any, choices: Sequence[Any], default: Any) -> Any:
    if isinstance(value, str):
        value = value.strip().lower()
    return value if value in choices else default


def _int_in_range(value: Any, low: int, high: int, default: int) -> int:
    if isinstance(value, bool):
        return default
    try:
        number = int(value)
    except (TypeError, ValueError):
        return default
    return number if low <= number <= high else default


def _text(value: Any, default: str) -> str:
    if value is None:
        return default
    return str(value)


def _flag(value: Any, default: bool) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "1", "yes", "on"}:
            return True
        if lowered in {"false", "0", "no", "off"}:
            return False
    return default


def _indices(value: Any) -> tuple[int, ...]:
    if value is None or isinstance(value, (str, bytes)):
        return ()
    result: list[int] = []
    try:
        items = list(value)
    except TypeError:
        return ()
    for item in items:
        if isinstance(item, bool):
            continue
        try:
            result.append(int(item))
        except (TypeError, ValueError):
            continue
    return tuple(result)


_HEX_COLOR = re.compile(r"^#(?:[0-9a-fA-F]{3}){1,2}$")


def _color(value: Any, default: str) -> str:
    if isinstance(value, str) and _HEX_COLOR.match(value.strip()):
        return value.strip().lower()
    return default


class _SettingsBase:
    tool_id: ClassVar[ToolId]

    def to_dict(self) -> dict[str, Any]:
        return {item.name: getattr(self, item.name) for item in fields(self)}  # type: ignore[arg-type]


@dataclass(frozen=True)
class MergePdfSettings(_SettingsBase):
    tool_id: ClassVar[ToolId] = ToolId.MERGE_PDF

    output_filename: str = "merged"

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> "MergePdfSettings":
        values = _normalise_keys(data)
        name = _text(values.get("output_filename"), cls.output_filename).strip()
        return cls(output_filename=name or cls.output_filename)


@dataclass(frozen=True)
class SplitPdfSettings(_SettingsBase):
    tool_id: ClassVar[ToolId] = ToolId.SPLIT_PDF
    METHODS: ClassVar[tuple[str, ...]] = ("all", "range", "extract")

    split_method: str = "all"
    page_range: str = ""
    extract_pages: str = ""

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> "SplitPdfSettings":
        values = _normalise_keys(data)
        return cls(
            split_method=_choice(values.get("split_method"), cls.METHODS, "all"),
            page_range=_text(values.get("page_range"), ""),
            extract_pages=_text(values.get("extract_pages"), ""),
        )


@dataclass(frozen=True)
class RotatePdfSettings(_SettingsBase):
    tool_id: ClassVar[ToolId] = ToolId.ROTATE_PDF
    ROTATIONS: ClassVar[tuple[int, ...]] = (90, 180, 270)
    TARGETS: ClassVar[tuple[str, ...]] = ("all", "selected")

    rotation: int = 90
    apply_to: str = "all"
    selected_pages: str = ""

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> "RotatePdfSettings":
        values = _normalise_keys(data)
        rotation = _int_in_range(values.get("rotation"), 0, 360, 90)
        return cls(
            rotation=rotation if rotation in cls.ROTATIONS else 90,
            apply_to=_choice(values.get("apply_to"), cls.TARGETS, "all"),
            selected_pages=_text(values.get("selected_pages"), ""),
        )


@dataclass(frozen=True)
class OrganizePdfSettings(_SettingsBase):
    tool_id: ClassVar[ToolId] = ToolId.ORGANIZE_PDF

    page_order: tuple[int, ...] = ()
    deleted_pages: tuple[int, ...] = ()

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> "OrganizePdfSettings":
        values = _normalise_keys(data)
        return cls(
            page_order=_indices(values.get("page_order")),
            deleted_pages=_indices(values.get("deleted_pages")),
        )


@dataclass(frozen=True)
class PdfToJpgSettings(_SettingsBase):
    tool_id: ClassVar[ToolId] = ToolId.PDF_TO_JPG
    QUALITIES: ClassVar[dict[str, float]] = {"high": 0.92, "medium": 0.75, "low": 0.5}
    DPI_CHOICES: ClassVar[tuple[int, ...]] = (72, 150, 300)

    quality: str = "high"
    dpi: int = 150

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> "PdfToJpgSettings":
        values = _normalise_keys(data)
        dpi = _int_in_range(values.get("dpi"), 1, 1200, 150)
        return cls(
            quality=_choice(values.get("quality"), tuple(cls.QUALITIES), "high"),
            dpi=dpi if dpi in cls.DPI_CHOICES else 150,
        )

    @property
    def encoder_quality(self) -> float:
        return self.QUALITIES[self.quality]

    @property
    def scale(self) -> float:
        return self.dpi / 72


@dataclass(frozen=True)
class JpgToPdfSettings(_SettingsBase):
    tool_id: ClassVar[ToolId] = ToolId.JPG_TO_PDF
    PAGE_SIZES: ClassVar[tuple[str, ...]] = ("a4", "letter", "original")
    ORIENTATIONS: ClassVar[tuple[str, ...]] = ("portrait", "landscape", "auto")
    MARGINS: ClassVar[tuple[str, ...]] = ("none", "small", "medium", "large")
    IMAGE_QUALITIES: ClassVar[dict[str, float]] = {"high": 0.92, "medium": 0.75, "low": 0.5}

    page_size: str = "a4"
    orientation: str = "auto"
    margin: str = "small"
    image_quality: str = "high"

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> "JpgToPdfSettings":
        values = _normalise_keys(data)
        return cls(
            page_size=_choice(values.get("page_size"), cls.PAGE_SIZES, "a4"),
            orientation=_choice(values.get("orientation"), cls.ORIENTATIONS, "auto"),
            margin=_choice(values.get("margin"), cls.MARGINS, "small"),
            image_quality=_choice(values.get("image_quality"), tuple(cls.IMAGE_QUALITIES), "high"),
        )

    @property
    def encoder_quality(self) -> float:
        return self.IMAGE_QUALITIES[self.image_quality]


@dataclass(frozen=True)
class CompressImageSettings(_SettingsBase):
    tool_id: ClassVar[ToolId] = ToolId.COMPRESS_IMAGE

    quality: int = 80
    max_width: int = 1920
    max_height: int = 1080
    maintain_aspect_ratio: bool = True

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> "CompressImageSettings":
        values = _normalise_keys(data)
        return cls(
            quality=_int_in_range(values.get("quality"), 1, 100, 80),
            max_width=_int_in_range(values.get("max_width"), 1, 100_000, 1920),
            max_height=_int_in_range(values.get("max_height"), 1, 100_000, 1080),
            maintain_aspect_ratio=_flag(values.get("maintain_aspect_ratio"), True),
        )


@dataclass(frozen=True)
class FormatConverterSettings(_SettingsBase):
    tool_id: ClassVar[ToolId] = ToolId.FORMAT_CONVERTER
    MEDIA_TYPES: ClassVar[dict[str, str]] = {
        "jpg": "image/jpeg",
        "jpeg": "image/jpeg",
        "png": "image/png",
        "webp": "image/webp",
        "gif": "image/gif",
        "bmp": "image/bmp",
    }

    output_format: str = "png"
    quality: int = 90
    background_color: str = "#ffffff"

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> "FormatConverterSettings":
        values = _normalise_keys(data)
        return cls(
            output_format=_choice(values.get("output_format"), tuple(cls.MEDIA_TYPES), "png"),
            quality=_int_in_range(values.get("quality"), 1, 100, 90),
            background_color=_color(values.get("background_color"), "#ffffff"),
        )

    @property
    def media_type(self) -> str:
        return self.MEDIA_TYPES[self.output_format]


@dataclass(frozen=True)
class CompressPdfSettings(_SettingsBase):
    tool_id: ClassVar[ToolId] = ToolId.COMPRESS_PDF
    LEVELS: ClassVar[tuple[str, ...]] = ("low", "medium", "high")

    compression_level: str = "medium"

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> "CompressPdfSettings":
        values = _normalise_keys(data)
        return cls(compression_level=_choice(values.get("compression_level"), cls.LEVELS, "medium"))


ToolSettings = Union[
    MergePdfSettings,
    SplitPdfSettings,
    RotatePdfSettings,
    OrganizePdfSettings,
    PdfToJpgSettings,
    JpgToPdfSettings,
    CompressImageSettings,
    FormatConverterSettings,
    CompressPdfSettings,
]

SETTINGS_TYPES: dict[ToolId, type] = {
    settings_type.tool_id: settings_type
    for settings_type in (
        MergePdfSettings,
        SplitPdfSettings,
        RotatePdfSettings,
        OrganizePdfSettings,
        PdfToJpgSettings,
        JpgToPdfSettings,
        CompressImageSettings,
        FormatConverterSettings,
        CompressPdfSettings,
    )
}


def default_settings(tool_id: ToolId | str) -> ToolSettings:
    """Return the default settings variant for *tool_id*."""

    return SETTINGS_TYPES[ToolId(tool_id)]()


__all__ = [
    "ToolId",
    "ToolSettings",
    "SETTINGS_TYPES",
    "default_settings",
    "MergePdfSettings",
    "SplitPdfSettings",
    "RotatePdfSettings",
    "OrganizePdfSettings",
    "PdfToJpgSettings",
    "JpgToPdfSettings",
    "CompressImageSettings",
    "FormatConverterSettings",
    "CompressPdfSettings",
]
