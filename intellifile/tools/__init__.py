"""Namespace for pluggable IntelliFile tools."""

from __future__ import annotations

from .common.pipeline import registry


def load_builtin_plugins() -> None:
    from .merger import merge  # noqa: F401  # register merge-pdf
    from .splitter import split  # noqa: F401
    from .rotator import rotate  # noqa: F401
    from .organizer import organize  # noqa: F401
    from .compressor import compress  # noqa: F401
    from .converter import image_to_pdf, pdf_to_image  # noqa: F401
    from .images import compress as compress_image, convert  # noqa: F401

    registry.verify_complete()


__all__ = ["registry", "load_builtin_plugins"]
