"""Page geometry used when assembling images into PDF pages.

All values are PDF points (1 inch = 72 points).
"""

from __future__ import annotations

from dataclasses import dataclass

PAGE_SIZES: dict[str, tuple[float, float]] = {
    "a4": (595.0, 842.0),
    "letter": (612.0, 792.0),
}
ORIGINAL_PAGE_SIZE = "original"
ORIENTATIONS = ("auto", "portrait", "landscape")
MARGINS: dict[str, float] = {
    "none": 0.0,
    "small": 36.0,
    "medium": 72.0,
    "large": 108.0,
}

DEFAULT_PAGE_SIZE = "a4"
DEFAULT_ORIENTATION = "auto"
DEFAULT_MARGIN = "small"


@dataclass(frozen=True, slots=True)
class PageLayout:
    """Target page size plus the rectangle the image is drawn into."""

    page_width: float
    page_height: float
    x: float
    y: float
    width: float
    height: float

    @property
    def aspect_ratio(self) -> float:
        return self.width / self.height

    def fits_within(self, margin: float, *, tolerance: float = 1e-6) -> bool:
        """Return ``True`` if the placed rectangle stays inside the page minus *margin*."""

        return (
            self.x >= margin - tolerance
            and self.y >= margin - tolerance
            and self.x + self.width <= self.page_width - margin + tolerance
            and self.y + self.height <= self.page_height - margin + tolerance
        )


def margin_points(margin: str) -> float:
    return MARGINS.get(margin, MARGINS[DEFAULT_MARGIN])


def page_dimensions(
    image_width: float,
    image_height: float,
    page_size: str,
    orientation: str,
    margin: float,
) -> tuple[float, float]:
    """Return ``(width, height)`` of the page an image will be placed on."""

    if page_size == ORIGINAL_PAGE_SIZE:
        return image_width + margin * 2, image_height + margin * 2

    width, height = PAGE_SIZES.get(page_size, PAGE_SIZES[DEFAULT_PAGE_SIZE])
    short_side, long_side = min(width, height), max(width, height)
    if orientation == "landscape":
        return long_side, short_side
    if orientation == "portrait":
        return short_side, long_side
    if image_width > image_height:
        return long_side, short_side
    return short_side, long_side


def compute_layout(
    image_width: float,
    image_height: float,
    page_size: str = DEFAULT_PAGE_SIZE,
    orientation: str = DEFAULT_ORIENTATION,
    margin: str = DEFAULT_MARGIN,
) -> PageLayout:
    """Fit an image onto a page and centre it.

    The image is scaled by ``min(available_width / image_width,
    available_height / image_height)`` where the available area is the page
    minus the margin on all four sides. The factor is always applied, so
    small images grow to fill the box just as large ones shrink into it.

    Raises:
        ValueError: If either image dimension is not positive.
    """

    if image_width <= 0 or image_height <= 0:
        raise ValueError(f"Image dimensions must be positive, got {image_width}x{image_height}")

    inset = margin_points(margin)
    page_width, page_height = page_dimensions(image_width, image_height, page_size, orientation, inset)

    available_width = max(page_width - inset * 2, 0.0)
    available_height = max(page_height - inset * 2, 0.0)
    scale = min(available_width / image_width, available_height / image_height)

    width = image_width * scale
    height = image_height * scale
    return PageLayout(
        page_width=page_width,
        page_height=page_height,
        x=(page_width - width) / 2,
        y=(page_height - height) / 2,
        width=width,
        height=height,
    )


__all__ = [
    "PAGE_SIZES",
    "MARGINS",
    "ORIENTATIONS",
    "ORIGINAL_PAGE_SIZE",
    "PageLayout",
    "compute_layout",
    "margin_points",
    "page_dimensions",
]
