"""
Grid builders, named colours and decoders shared by the test modules.
"""

import io
from typing import Sequence, Tuple

import numpy as np
from PIL import Image

RGBA = Tuple[int, int, int, int]

BLACK: RGBA = (0, 0, 0, 255)
GREY: RGBA = (128, 128, 128, 255)
WHITE: RGBA = (255, 255, 255, 255)
CLEAR: RGBA = (0, 0, 0, 0)


def grid(rows: Sequence[Sequence[RGBA]]) -> np.ndarray:
    """Build a uint8 (H,W,4) grid from nested rows of RGBA tuples."""
    return np.array(rows, dtype=np.uint8).reshape(len(rows), len(rows[0]), 4)


def decode_png_bytes(data: bytes) -> np.ndarray:
    """Decode PNG bytes back to a uint8 (H,W,4) grid."""
    with Image.open(io.BytesIO(data)) as im:
        return np.array(im.convert("RGBA"), dtype=np.uint8)
