# palette_swap/cli.py
"""
palette_swap command line.

Recolour a texture with the palette of another image, matching colours by
their rank in luminance order.

Usage:
  palette-swap TEXTURE PALETTE INTERPOLATE
  python -m palette_swap TEXTURE PALETTE INTERPOLATE

Arguments:
  TEXTURE     : any Pillow-readable image to recolour. Alpha is preserved.
  PALETTE     : any Pillow-readable image whose visible colours form the reference palette.
  INTERPOLATE : "true" (any case) blends neighbouring reference colours; anything else
                uses the nearest reference colour.

Output:
  The recoloured image as base64-encoded PNG, one line on stdout.
  Progress and errors go to stderr.

Exit codes:
  0 ok, 1 unreadable input or encode failure, 2 bad arguments, 3 empty palette.
"""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path
from typing import List, Optional, Sequence

from .constants import (
    EXIT_EMPTY_PALETTE,
    EXIT_INPUT_ERROR,
    EXIT_OK,
    INTERPOLATE_TRUE,
)
from .errors import EmptyPaletteError, ImageEncodeError, ImageLoadError
from .image_io import encode_base64, encode_png_bytes, load_image_rgba
from .palette_extract import extract_palette
from .remap import remap_palette
from .utils import (
    error,
    format_seconds_compact,
    log,
    print_config_line,
    warn,
)


def parse_interpolate_flag(value: str) -> bool:
    """Case-insensitive "true" is on; every other string is off."""
    return value.strip().lower() == INTERPOLATE_TRUE


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="palette-swap",
        description="Recolour a texture with another image's palette, by luminance rank.",
    )
    parser.add_argument("texture", type=Path, help="Texture image to recolour")
    parser.add_argument("palette", type=Path, help="Reference palette image")
    parser.add_argument(
        "interpolate",
        type=parse_interpolate_flag,
        help='"true" to blend neighbouring palette colours, otherwise "false"',
    )
    return parser


def parse_cli_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """
    Parse CLI arguments.

    Returns:
      argparse.Namespace with:
        texture: Path to the texture image
        palette: Path to the reference palette image
        interpolate: bool

    Exits with status 2 and a usage message on a wrong argument count.
    """
    return build_parser().parse_args(argv)


def swap_palette_files(
    texture_path: Path,
    palette_path: Path,
    interpolate: bool,
) -> str:
    """
    Run the whole pipeline and return the base64 PNG line.

      load -> extract (reference, texture) -> check -> remap -> encode

    Raises ImageLoadError, EmptyPaletteError or ImageEncodeError.
    """
    t_start = time.perf_counter()
    texture = load_image_rgba(texture_path)
    reference_img = load_image_rgba(palette_path)

    reference_palette = extract_palette(reference_img)
    texture_palette = extract_palette(texture)

    if len(reference_palette) == 0:
        raise EmptyPaletteError("reference", Path(palette_path))
    if len(texture_palette) == 0:
        raise EmptyPaletteError("texture", Path(texture_path))
    if len(texture_palette) == 1:
        warn(
            f"texture has a single colour ({texture_palette.hex_codes()[0]}); "
            "every texel maps to the first reference colour"
        )

    height, width = texture.shape[0], texture.shape[1]
    print_config_line(
        "swap",
        [
            ("Size", f"{width}x{height}"),
            ("Texture colours", len(texture_palette)),
            ("Reference colours", len(reference_palette)),
            ("Interpolate", interpolate),
        ],
    )

    recoloured = remap_palette(texture, texture_palette, reference_palette, interpolate)
    encoded = encode_base64(encode_png_bytes(recoloured))

    elapsed = format_seconds_compact(time.perf_counter() - t_start)
    log(f"Total time {elapsed}")
    return encoded


def main(argv: Optional[List[str]] = None) -> int:
    """
    CLI entry point. Returns the process exit code.

    Invariant violations (PaletteInvariantError) are not caught; they are bugs.
    """
    args = parse_cli_args(argv)
    try:
        encoded = swap_palette_files(args.texture, args.palette, args.interpolate)
    except ImageLoadError as e:
        error(str(e))
        return EXIT_INPUT_ERROR
    except EmptyPaletteError as e:
        error(str(e))
        return EXIT_EMPTY_PALETTE
    except ImageEncodeError as e:
        error(str(e))
        return EXIT_INPUT_ERROR

    print(encoded, flush=True)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
