# palette_swap/constants.py
from __future__ import annotations

"""
Numeric constants and exit codes shared across palette_swap.

Exports:
  GAMMA, INV_GAMMA        : exponent used for luminance and blending (raw 0..255 channels)
  LUMA_WEIGHTS            : Rec. 709 weights for R, G, B
  NOT_FOUND               : sentinel returned by find_index
  EXIT_OK, EXIT_INPUT_ERROR, EXIT_USAGE, EXIT_EMPTY_PALETTE
"""

from typing import Tuple

GAMMA: float = 2.2
INV_GAMMA: float = 1.0 / GAMMA

# Applied to channel**GAMMA, not to normalised 0..1 values.
LUMA_WEIGHTS: Tuple[float, float, float] = (0.2126, 0.7152, 0.0722)

NOT_FOUND: int = -1

# Process exit codes
EXIT_OK: int = 0
EXIT_INPUT_ERROR: int = 1
EXIT_USAGE: int = 2  # argparse uses 2 for bad arguments
EXIT_EMPTY_PALETTE: int = 3

INTERPOLATE_TRUE: str = "true"

__all__ = [
    "GAMMA",
    "INV_GAMMA",
    "LUMA_WEIGHTS",
    "NOT_FOUND",
    "EXIT_OK",
    "EXIT_INPUT_ERROR",
    "EXIT_USAGE",
    "EXIT_EMPTY_PALETTE",
    "INTERPOLATE_TRUE",
]
