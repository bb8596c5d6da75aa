# palette_swap/errors.py
from __future__ import annotations

"""
Exception types raised by palette_swap.

PaletteSwapError is the common base so callers can catch everything the
library raises on purpose while letting genuine bugs through.
"""

from pathlib import Path
from typing import Optional


class PaletteSwapError(Exception):
    """Base class for palette_swap errors."""


class ImageLoadError(PaletteSwapError):
    """An input path could not be opened or decoded as an image."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"cannot load {self.path}: {reason}")


class ImageEncodeError(PaletteSwapError):
    """The recoloured grid could not be serialised to PNG."""


class EmptyPaletteError(PaletteSwapError, ValueError):
    """A palette has no entries (the source image has no visible pixels)."""

    def __init__(self, which: str, source: Optional[Path] = None) -> None:
        self.which = which
        self.source = source
        where = f" ({source})" if source is not None else ""
        super().__init__(f"{which} palette is empty{where}: no pixels with alpha > 0")


class PaletteInvariantError(PaletteSwapError, RuntimeError):
    """A texel colour is missing from the palette extracted from the same grid."""


__all__ = [
    "PaletteSwapError",
    "ImageLoadError",
    "ImageEncodeError",
    "EmptyPaletteError",
    "PaletteInvariantError",
]
