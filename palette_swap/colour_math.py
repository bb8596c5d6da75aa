# palette_swap/colour_math.py
from __future__ import annotations

import math
from typing import Sequence

import numpy as np

from .constants import GAMMA, INV_GAMMA, LUMA_WEIGHTS
from .core_types import Luminance, RGBATuple

"""
Gamma-space helpers operating on raw 0..255 channel values.

Exports:
- luminance(rgba)            # scalar, one colour
- luminance_batch(colours)   # vectorized, (..., 3|4) -> (...)
- gamma_blend(c1, c2, factor)

Notes:
- Channels are raised to GAMMA without normalising to 0..1, so luminance
  spans roughly 0..196,000. Only the ordering matters to callers.
"""


def luminance(rgba: Sequence[int]) -> float:
    """Weighted sum of R, G, B each raised to GAMMA. Alpha is ignored."""
    wr, wg, wb = LUMA_WEIGHTS
    return (
        wr * math.pow(float(rgba[0]), GAMMA)
        + wg * math.pow(float(rgba[1]), GAMMA)
        + wb * math.pow(float(rgba[2]), GAMMA)
    )


def luminance_batch(colours: np.ndarray) -> Luminance:
    """
    Vectorized luminance for any (..., 3) or (..., 4) array. Returns float64.
    Same formula and term order as luminance().
    """
    arr = np.asarray(colours)
    if arr.shape[-1] < 3:
        raise TypeError("expected (..., 3) or (..., 4) colour array")
    rgb = np.power(arr[..., :3].astype(np.float64), GAMMA)
    wr, wg, wb = LUMA_WEIGHTS
    return wr * rgb[..., 0] + wg * rgb[..., 1] + wb * rgb[..., 2]


def _blend_channel(a: int, b: int, factor: float) -> int:
    ga = math.pow(float(a), GAMMA)
    gb = math.pow(float(b), GAMMA)
    mixed = ga + factor * (gb - ga)
    # truncate toward zero; never round
    value = int(math.pow(max(mixed, 0.0), INV_GAMMA))
    return 0 if value < 0 else 255 if value > 255 else value


def gamma_blend(c1: Sequence[int], c2: Sequence[int], factor: float) -> RGBATuple:
    """
    Blend two colours linearly in gamma-expanded space.

    factor=0 gives c1 and factor=1 gives c2, up to truncation. Alpha of the
    result is 255; callers replace it with the source texel alpha.
    """
    return (
        _blend_channel(c1[0], c2[0], factor),
        _blend_channel(c1[1], c2[1], factor),
        _blend_channel(c1[2], c2[2], factor),
        255,
    )


__all__ = ["luminance", "luminance_batch", "gamma_blend"]
