# palette_swap/palette_extract.py
from __future__ import annotations

"""
Palette extraction.

Exports:
  unique_visible_colours(rgba) -> (N,4) uint8, first-occurrence order
  extract_palette(rgba)        -> Palette

Notes:
  Colours are kept sorted by luminance with a lower-bound bisect. Distinct
  colours with exactly equal luminance keep the order in which a row-major
  scan (y outer, x inner) first meets them.
"""

from bisect import bisect_left
from typing import List

import numpy as np

from .colour_math import luminance_batch
from .core_types import (
    Palette,
    RGBATuple,
    U8Colours,
    U8RGBAImage,
    assert_u8_rgba_image,
    coerce_to_rgba_tuple,
)


def unique_visible_colours(rgba: U8RGBAImage) -> U8Colours:
    """
    Unique RGBA rows among alpha>0 pixels, ordered by first occurrence in a
    row-major scan. Later repeats of a colour cannot change the palette, so
    extraction only needs these.
    """
    rgba = assert_u8_rgba_image(rgba)
    flat = np.ascontiguousarray(rgba).reshape(-1, 4)
    visible = flat[flat[:, 3] > 0]
    if visible.shape[0] == 0:
        return np.zeros((0, 4), dtype=np.uint8)
    packed = visible.view(np.uint32).reshape(-1)
    _, first_idx = np.unique(packed, return_index=True)
    return visible[np.sort(first_idx)]


def _insert_sorted(
    colours: List[RGBATuple], lums: List[float], colour: RGBATuple, lum: float
) -> None:
    pos = bisect_left(lums, lum)
    if pos == len(lums):
        lums.append(lum)
        colours.append(colour)
        return
    # Equal luminance can belong to distinct colours; check the whole tied run
    # and place a new colour after it so earlier scans stay first.
    j = pos
    while j < len(lums) and lums[j] == lum:
        if colours[j] == colour:
            return
        j += 1
    lums.insert(j, lum)
    colours.insert(j, colour)


def extract_palette(rgba: U8RGBAImage) -> Palette:
    """
    Build the luminance-sorted, duplicate-free palette of an RGBA grid.

    Pixels with alpha 0 are skipped. An empty or fully transparent grid
    gives an empty Palette; rejecting that is up to the caller.
    """
    uniques = unique_visible_colours(rgba)
    lum_rows = luminance_batch(uniques).tolist()

    colours: List[RGBATuple] = []
    lums: List[float] = []
    for row, lum in zip(uniques, lum_rows):
        _insert_sorted(colours, lums, coerce_to_rgba_tuple(row), float(lum))

    return Palette(colours=tuple(colours), luminances=tuple(lums))


__all__ = ["unique_visible_colours", "extract_palette"]
