# palette_swap/__init__.py
"""
palette_swap package.

Purpose:
  Recolour a texture with the palette of a reference image by matching each
  colour's rank in luminance order. See palette_swap.cli for the command line.

Public API:
  extract_palette : luminance-sorted, duplicate-free palette of an RGBA grid.
  find_index      : exact-match position of a colour in a palette.
  remap_palette   : recolour a grid from one palette onto another.
  gamma_blend     : gamma-correct blend of two colours.
  Palette         : palette value object.
  image_io        : Pillow decode/encode helpers.

Quick start:
  from palette_swap import extract_palette, remap_palette
  from palette_swap.image_io import load_image_rgba
"""

__version__ = "0.1.0"

# Re-export namespaces for convenience.
from . import colour_math
from . import core_types
from . import errors
from . import image_io
from . import utils

from .colour_math import gamma_blend, luminance  # noqa: E402,F401
from .core_types import Palette, find_index  # noqa: E402,F401
from .palette_extract import extract_palette  # noqa: E402,F401
from .remap import remap_palette  # noqa: E402,F401
from .errors import (  # noqa: E402,F401
    EmptyPaletteError,
    ImageEncodeError,
    ImageLoadError,
    PaletteInvariantError,
    PaletteSwapError,
)

__all__ = [
    "__version__",
    "colour_math",
    "core_types",
    "errors",
    "image_io",
    "utils",
    "gamma_blend",
    "luminance",
    "Palette",
    "find_index",
    "extract_palette",
    "remap_palette",
    "PaletteSwapError",
    "ImageLoadError",
    "ImageEncodeError",
    "EmptyPaletteError",
    "PaletteInvariantError",
]
