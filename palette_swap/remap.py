# palette_swap/remap.py
from __future__ import annotations

"""
Palette remapping: move each texel from its slot in the texture palette to the
matching slot in the reference palette.

Exports:
  index_scale(texture_len, reference_len) -> float
  target_index(i, texture_len, reference_len) -> float
  remap_colour(colour, texture_palette, reference_palette, interpolate, index_of=None) -> RGBATuple
  remap_palette(rgba, texture_palette, reference_palette, interpolate) -> U8RGBAImage

Notes:
  - Nearest mode rounds half away from zero.
  - Interpolation mode blends the two bracketing reference entries in gamma
    space and truncates. The asymmetry with nearest mode is kept on purpose.
  - Texels with alpha 0 stay (0,0,0,0). Output alpha is always the source alpha.
"""

import math
from typing import Mapping, Optional

import numpy as np

from .colour_math import gamma_blend
from .constants import NOT_FOUND
from .core_types import (
    Palette,
    RGBATuple,
    U8RGBAImage,
    assert_u8_rgba_image,
    coerce_to_rgba_tuple,
    find_index,
    rgba_to_hex,
)
from .errors import EmptyPaletteError, PaletteInvariantError


def index_scale(texture_len: int, reference_len: int) -> float:
    """
    Factor converting a texture-palette index to a reference-palette index.

    A single-entry texture palette has no span to stretch; scale is 0.0 and
    every texel lands on reference index 0.
    """
    if texture_len <= 0:
        raise EmptyPaletteError("texture")
    if reference_len <= 0:
        raise EmptyPaletteError("reference")
    if texture_len == 1:
        return 0.0
    return (reference_len - 1) / (texture_len - 1)


def target_index(i: int, texture_len: int, reference_len: int) -> float:
    """
    i * (reference_len - 1) / (texture_len - 1), clamped to the last reference index.

    One division of exact integers, so whole-number targets come out whole.
    Multiplying by index_scale() can land a hair below them.
    """
    index_scale(texture_len, reference_len)
    if texture_len == 1:
        return 0.0
    return min(i * (reference_len - 1) / (texture_len - 1), float(reference_len - 1))


def _round_half_away(value: float) -> int:
    # value is never negative here
    return int(math.floor(value + 0.5))


def remap_colour(
    colour: RGBATuple,
    texture_palette: Palette,
    reference_palette: Palette,
    interpolate: bool,
    index_of: Optional[Mapping[RGBATuple, int]] = None,
) -> RGBATuple:
    """
    Map one visible colour; the returned alpha is the colour's own.

    index_of, when given, is a prebuilt colour -> texture index lookup used
    instead of the linear find_index scan.
    """
    if index_of is None:
        i = find_index(texture_palette, colour)
    else:
        i = index_of.get(colour, NOT_FOUND)
    if i == NOT_FOUND:
        raise PaletteInvariantError(
            f"colour {rgba_to_hex(colour)} missing from its own texture palette"
        )
    target = target_index(i, len(texture_palette), len(reference_palette))

    if not interpolate:
        r, g, b, _ = reference_palette[_round_half_away(target)]
        return (r, g, b, colour[3])

    lo = int(math.floor(target))
    frac = target - lo
    if frac == 0.0:
        r, g, b, _ = reference_palette[lo]
    else:
        r, g, b, _ = gamma_blend(
            reference_palette[lo], reference_palette[lo + 1], frac
        )
    return (r, g, b, colour[3])


def remap_palette(
    rgba: U8RGBAImage,
    texture_palette: Palette,
    reference_palette: Palette,
    interpolate: bool = False,
) -> U8RGBAImage:
    """
    Recolour rgba by palette position.

    Args:
      rgba              : uint8 [H,W,4] texture, not modified
      texture_palette   : palette extracted from rgba
      reference_palette : palette to map onto
      interpolate       : blend neighbouring reference entries for fractional targets

    Returns:
      New uint8 [H,W,4] grid of the same shape.

    Raises:
      EmptyPaletteError     : either palette is empty
      PaletteInvariantError : a visible texel is not in texture_palette
    """
    rgba = assert_u8_rgba_image(rgba)
    index_scale(len(texture_palette), len(reference_palette))
    index_of = texture_palette.index_map()

    height, width, _ = rgba.shape
    out = np.zeros((height, width, 4), dtype=np.uint8)

    flat = np.ascontiguousarray(rgba).reshape(-1, 4)
    visible_flat = flat[:, 3] > 0
    if not np.any(visible_flat):
        return out

    # Resolve each distinct colour once, then scatter back.
    samples = flat[visible_flat]
    packed = samples.view(np.uint32).reshape(-1)
    uniq_packed, first_idx, inverse = np.unique(
        packed, return_index=True, return_inverse=True
    )
    mapped = np.empty((uniq_packed.shape[0], 4), dtype=np.uint8)
    for k, row in enumerate(first_idx.tolist()):
        mapped[k] = remap_colour(
            coerce_to_rgba_tuple(samples[row]),
            texture_palette,
            reference_palette,
            interpolate,
            index_of,
        )

    out_flat = out.reshape(-1, 4)
    out_flat[visible_flat] = mapped[inverse.reshape(-1)]
    return out


__all__ = ["index_scale", "target_index", "remap_colour", "remap_palette"]
