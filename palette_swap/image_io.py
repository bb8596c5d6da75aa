# palette_swap/image_io.py
from __future__ import annotations

import base64
import io
from pathlib import Path

import numpy as np
from PIL import Image, UnidentifiedImageError

from .core_types import U8RGBAImage, assert_u8_rgba_image
from .errors import ImageEncodeError, ImageLoadError

"""
Image I/O helpers: decode anything Pillow reads to RGBA8, encode RGBA8 to PNG
bytes, and base64 the result for stdout.
"""


def load_image_rgba(path: Path) -> U8RGBAImage:
    """
    Decode an image file to a uint8 (H,W,4) array.

    Raises ImageLoadError when the file is missing, unreadable, or not an
    image Pillow understands.
    """
    path = Path(path)
    try:
        with Image.open(path) as im0:
            im = im0.convert("RGBA")
    except FileNotFoundError:
        raise ImageLoadError(path, "no such file") from None
    except UnidentifiedImageError as e:
        raise ImageLoadError(path, "not a recognised image format") from e
    except Image.DecompressionBombError as e:
        raise ImageLoadError(path, str(e)) from e
    except OSError as e:
        raise ImageLoadError(path, str(e) or type(e).__name__) from e
    return np.array(im, dtype=np.uint8)


def encode_png_bytes(rgba: U8RGBAImage) -> bytes:
    """Serialise a uint8 (H,W,4) array as PNG into memory."""
    rgba = assert_u8_rgba_image(rgba)
    buf = io.BytesIO()
    try:
        Image.fromarray(np.ascontiguousarray(rgba)).save(buf, format="PNG")
    except (OSError, ValueError) as e:
        raise ImageEncodeError(f"PNG encoding failed: {e}") from e
    return buf.getvalue()


def encode_base64(data: bytes) -> str:
    """Standard base64 with padding, as a single ASCII line."""
    return base64.b64encode(data).decode("ascii")


__all__ = [
    "load_image_rgba",
    "encode_png_bytes",
    "encode_base64",
]
