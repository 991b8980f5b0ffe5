from __future__ import annotations

import dataclasses

import pytest

from intellifile.core.settings import (
    SETTINGS_TYPES,
    CompressImageSettings,
    CompressPdfSettings,
    FormatConverterSettings,
    JpgToPdfSettings,
    MergePdfSettings,
    OrganizePdfSettings,
    PdfToJpgSettings,
    RotatePdfSettings,
    SplitPdfSettings,
    ToolId,
    default_settings,
)


def test_every_tool_has_exactly_one_settings_variant() -> None:
    assert set(SETTINGS_TYPES) == set(ToolId)
    for tool_id, settings_type in SETTINGS_TYPES.items():
        assert settings_type.tool_id is tool_id
        assert isinstance(default_settings(tool_id), settings_type)


def test_settings_are_immutable() -> None:
    settings = SplitPdfSettings()
    with pytest.raises(dataclasses.FrozenInstanceError):
        settings.split_method = "range"  # type: ignore[misc]


def test_camel_case_keys_are_accepted() -> None:
    settings = SplitPdfSettings.from_mapping({"splitMethod": "range", "pageRange": "1-3"})
    assert settings == SplitPdfSettings(split_method="range", page_range="1-3")


def test_snake_case_keys_are_accepted() -> None:
    settings = JpgToPdfSettings.from_mapping({"page_size": "letter", "image_quality": "low"})
    assert settings.page_size == "letter"
    assert settings.encoder_quality == 0.5


@pytest.mark.parametrize("rotation", [45, 0, 360, "sideways", None, True])
def test_invalid_rotation_defaults_to_ninety(rotation: object) -> None:
    assert RotatePdfSettings.from_mapping({"rotation": rotation}).rotation == 90


def test_rotation_accepts_numeric_strings() -> None:
    assert RotatePdfSettings.from_mapping({"rotation": "270"}).rotation == 270


def test_out_of_range_fields_fall_back_to_defaults() -> None:
    settings = CompressImageSettings.from_mapping({"quality": 500, "maxWidth": -1, "maxHeight": "wide"})
    assert settings == CompressImageSettings()


def test_unknown_choices_fall_back_to_defaults() -> None:
    assert PdfToJpgSettings.from_mapping({"quality": "ultra", "dpi": 96}) == PdfToJpgSettings()
    assert CompressPdfSettings.from_mapping({"compressionLevel": "extreme"}).compression_level == "medium"
    assert FormatConverterSettings.from_mapping({"outputFormat": "tiff"}).output_format == "png"


def test_background_colour_must_be_hex() -> None:
    assert FormatConverterSettings.from_mapping({"backgroundColor": "red"}).background_color == "#ffffff"
    assert FormatConverterSettings.from_mapping({"backgroundColor": "#00FF00"}).background_color == "#00ff00"


def test_flags_accept_strings() -> None:
    assert CompressImageSettings.from_mapping({"maintainAspectRatio": "false"}).maintain_aspect_ratio is False
    assert CompressImageSettings.from_mapping({"maintainAspectRatio": "maybe"}).maintain_aspect_ratio is True


def test_page_lists_keep_only_integers() -> None:
    settings = OrganizePdfSettings.from_mapping({"pageOrder": [2, "1", "x", 0], "deletedPages": "1"})
    assert settings.page_order == (2, 1, 0)
    assert settings.deleted_pages == ()


def test_empty_output_filename_uses_default() -> None:
    assert MergePdfSettings.from_mapping({"outputFilename": "   "}).output_filename == "merged"
    assert MergePdfSettings.from_mapping(None) == MergePdfSettings()


def test_derived_encoder_values() -> None:
    settings = PdfToJpgSettings(quality="medium", dpi=300)
    assert settings.encoder_quality == 0.75
    assert settings.scale == pytest.approx(300 / 72)
    assert FormatConverterSettings(output_format="jpg").media_type == "image/jpeg"


def test_to_dict_round_trips_through_from_mapping() -> None:
    settings = RotatePdfSettings(rotation=180, apply_to="selected", selected_pages="1,3")
    assert RotatePdfSettings.from_mapping(settings.to_dict()) == settings
