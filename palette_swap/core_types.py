# palette_swap/core_types.py
from __future__ import annotations

"""
Core type aliases, the Palette value object, and the index resolver.
"""

from dataclasses import dataclass
from typing import Dict, Iterator, Sequence, Tuple, Union

import numpy as np
from numpy.typing import NDArray

from .constants import NOT_FOUND

# Basic aliases

RGBATuple = Tuple[int, int, int, int]
HexStr = str

U8RGBAImage = NDArray[np.uint8]  # (H, W, 4)
U8Colours = NDArray[np.uint8]  # (N, 4)
Luminance = NDArray[np.float64]  # (N,)

# Value objects


@dataclass(frozen=True)
class Palette:
    """
    Luminance-sorted, duplicate-free colours taken from one image.

    colours and luminances are parallel; luminances never decrease and no
    entry has alpha 0. Built by palette_extract.extract_palette.
    """

    colours: Tuple[RGBATuple, ...] = ()
    luminances: Tuple[float, ...] = ()

    def __post_init__(self) -> None:
        if len(self.colours) != len(self.luminances):
            raise ValueError("colours and luminances must have the same length")

    def __len__(self) -> int:
        return len(self.colours)

    def __getitem__(self, index: int) -> RGBATuple:
        return self.colours[index]

    def __iter__(self) -> Iterator[RGBATuple]:
        return iter(self.colours)

    def as_array(self) -> U8Colours:
        """Colours as a (N,4) uint8 array."""
        if not self.colours:
            return np.zeros((0, 4), dtype=np.uint8)
        return np.array(self.colours, dtype=np.uint8)

    def index_map(self) -> Dict[RGBATuple, int]:
        """colour -> position; agrees with find_index since entries are unique."""
        return {c: i for i, c in enumerate(self.colours)}

    def hex_codes(self) -> Tuple[HexStr, ...]:
        return tuple(rgba_to_hex(c) for c in self.colours)


# Index resolver


def find_index(palette: Union[Palette, Sequence[RGBATuple]], colour: RGBATuple) -> int:
    """
    Position of the first entry equal to colour, or NOT_FOUND.

    Linear scan with exact componentwise equality.
    """
    target = coerce_to_rgba_tuple(colour)
    for i, entry in enumerate(palette):
        if entry == target:
            return i
    return NOT_FOUND


# Small helpers


def rgba_to_hex(rgba: Sequence[int]) -> HexStr:
    """RGBA to lowercase '#rrggbbaa'."""
    r, g, b, a = (int(v) for v in rgba[:4])
    return f"#{r:02x}{g:02x}{b:02x}{a:02x}"


def coerce_to_rgba_tuple(value: Union[Sequence[int], NDArray[np.generic]]) -> RGBATuple:
    """
    Coerce a 4-length sequence or array row to an (int, int, int, int) tuple.
    NumPy scalars compare equal to ints but hash and print differently.
    """
    if isinstance(value, np.ndarray):
        if value.size < 4:
            raise ValueError("array too small for RGBA")
        flat = value.reshape(-1)
        return (int(flat[0]), int(flat[1]), int(flat[2]), int(flat[3]))
    if len(value) < 4:
        raise ValueError("sequence too small for RGBA")
    return (int(value[0]), int(value[1]), int(value[2]), int(value[3]))


def assert_u8_rgba_image(image: np.ndarray) -> U8RGBAImage:
    """Validate a uint8 (H,W,4) image and return it typed as U8RGBAImage."""
    if (
        not isinstance(image, np.ndarray)
        or image.dtype != np.uint8
        or image.ndim != 3
        or image.shape[-1] != 4
    ):
        raise TypeError("expected uint8 (H,W,4) RGBA image")
    return image  # type: ignore[return-value]


__all__ = [
    # aliases / types
    "RGBATuple",
    "HexStr",
    "U8RGBAImage",
    "U8Colours",
    "Luminance",
    # value objects
    "Palette",
    # resolver
    "find_index",
    # helpers
    "rgba_to_hex",
    "coerce_to_rgba_tuple",
    "assert_u8_rgba_image",
]
