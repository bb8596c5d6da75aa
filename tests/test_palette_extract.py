"""
Tests for palette extraction and the index resolver.
"""

import numpy as np
import pytest

from palette_swap.colour_math import luminance_batch
from palette_swap.constants import NOT_FOUND
from palette_swap.core_types import Palette, find_index, rgba_to_hex
from palette_swap.palette_extract import extract_palette, unique_visible_colours
from tests.helpers import BLACK, CLEAR, GREY, WHITE, grid


def _assert_palette_invariants(palette: Palette) -> None:
    assert len(set(palette.colours)) == len(palette.colours)
    lums = list(palette.luminances)
    assert lums == sorted(lums)
    assert all(c[3] > 0 for c in palette.colours)


class TestExtractPalette:
    """Luminance-sorted, duplicate-free palettes"""

    def test_empty_grid(self):
        """A 0x0 grid gives an empty palette"""
        palette = extract_palette(np.zeros((0, 0, 4), dtype=np.uint8))
        assert len(palette) == 0

    def test_fully_transparent_grid(self):
        """Alpha-0 pixels never enter the palette"""
        palette = extract_palette(grid([[(255, 0, 0, 0), (0, 255, 0, 0)]]))
        assert len(palette) == 0

    def test_sorted_and_deduplicated(self):
        """Colours come out darkest first with repeats dropped"""
        rgba = grid([[WHITE, BLACK, GREY], [GREY, WHITE, BLACK]])
        palette = extract_palette(rgba)
        assert palette.colours == (BLACK, GREY, WHITE)
        _assert_palette_invariants(palette)

    def test_transparent_pixels_skipped(self):
        """A transparent pixel is skipped even when its RGB is unique"""
        palette = extract_palette(grid([[(10, 20, 30, 0), GREY]]))
        assert palette.colours == (GREY,)

    def test_alpha_distinguishes_colours(self):
        """Same RGB with different alpha gives two entries"""
        rgba = grid([[(100, 100, 100, 255), (100, 100, 100, 128)]])
        palette = extract_palette(rgba)
        assert len(palette) == 2
        assert palette.luminances[0] == palette.luminances[1]

    def test_tied_luminance_keeps_scan_order(self):
        """Of two colours with equal luminance, the first scanned stays first"""
        a = (100, 100, 100, 255)
        b = (100, 100, 100, 128)
        assert extract_palette(grid([[a, b]])).colours == (a, b)
        assert extract_palette(grid([[b, a]])).colours == (b, a)
        assert extract_palette(grid([[a], [b]])).colours == (a, b)

    def test_repeat_inside_tied_run_is_not_reinserted(self):
        """A colour seen again behind an equal-luminance neighbour stays single"""
        a = (100, 100, 100, 255)
        b = (100, 100, 100, 128)
        palette = extract_palette(grid([[a, b, b, a, BLACK, b]]))
        assert palette.colours == (BLACK, a, b)

    def test_luminances_match_colours(self):
        """Stored luminances are those of the stored colours"""
        rgba = grid([[(200, 10, 10, 255), (10, 200, 10, 255), (10, 10, 200, 255)]])
        palette = extract_palette(rgba)
        expected = luminance_batch(palette.as_array()).tolist()
        assert list(palette.luminances) == pytest.approx(expected)
        assert palette.colours == (
            (10, 10, 200, 255),
            (200, 10, 10, 255),
            (10, 200, 10, 255),
        )

    def test_random_grid_invariants(self):
        """Any grid gives a palette satisfying all invariants"""
        rng = np.random.default_rng(1234)
        rgba = rng.integers(0, 8, size=(24, 24, 4), dtype=np.uint8) * 32
        palette = extract_palette(rgba)
        _assert_palette_invariants(palette)
        visible = {tuple(int(v) for v in px) for px in rgba.reshape(-1, 4) if px[3] > 0}
        assert set(palette.colours) == visible

    def test_deterministic(self):
        """Repeated extraction gives the same palette"""
        rng = np.random.default_rng(99)
        rgba = rng.integers(0, 256, size=(16, 16, 4), dtype=np.uint8)
        assert extract_palette(rgba) == extract_palette(rgba.copy())

    def test_input_not_modified(self):
        """Extraction leaves the grid untouched"""
        rgba = grid([[WHITE, BLACK], [CLEAR, GREY]])
        before = rgba.copy()
        extract_palette(rgba)
        assert np.array_equal(rgba, before)

    def test_rejects_rgb_grid(self):
        """Only RGBA uint8 grids are accepted"""
        with pytest.raises(TypeError):
            extract_palette(np.zeros((2, 2, 3), dtype=np.uint8))


class TestUniqueVisibleColours:
    """First-occurrence unique colours"""

    def test_first_occurrence_order(self):
        """Rows follow the row-major scan, not sort order"""
        rgba = grid([[WHITE, CLEAR, BLACK], [WHITE, GREY, BLACK]])
        uniques = unique_visible_colours(rgba)
        assert [tuple(r) for r in uniques.tolist()] == [WHITE, BLACK, GREY]

    def test_no_visible_pixels(self):
        """Shape is (0, 4) when nothing is visible"""
        assert unique_visible_colours(grid([[CLEAR]])).shape == (0, 4)


class TestFindIndex:
    """Exact-match index resolver"""

    def test_found(self):
        """Returns the position of the matching entry"""
        palette = extract_palette(grid([[WHITE, BLACK, GREY]]))
        assert find_index(palette, BLACK) == 0
        assert find_index(palette, GREY) == 1
        assert find_index(palette, WHITE) == 2

    def test_not_found(self):
        """Absent colours give the NOT_FOUND sentinel"""
        palette = extract_palette(grid([[WHITE]]))
        assert find_index(palette, BLACK) == NOT_FOUND

    def test_alpha_must_match(self):
        """Equality is componentwise, alpha included"""
        palette = extract_palette(grid([[(255, 255, 255, 200)]]))
        assert find_index(palette, WHITE) == NOT_FOUND

    def test_numpy_row(self):
        """NumPy rows are accepted as colours"""
        palette = extract_palette(grid([[BLACK, WHITE]]))
        assert find_index(palette, np.array(WHITE, dtype=np.uint8)) == 1

    def test_plain_sequence(self):
        """A list of tuples works as a palette"""
        assert find_index([BLACK, GREY], GREY) == 1

    def test_index_map_agrees(self):
        """The dict lookup gives the same positions as the linear scan"""
        rng = np.random.default_rng(3)
        palette = extract_palette(rng.integers(0, 256, size=(10, 10, 4), dtype=np.uint8))
        lookup = palette.index_map()
        assert len(lookup) == len(palette)
        for colour in palette:
            assert lookup[colour] == find_index(palette, colour)


class TestPaletteValue:
    """Palette value object"""

    def test_length_mismatch(self):
        """Colours and luminances must be parallel"""
        with pytest.raises(ValueError):
            Palette(colours=(BLACK,), luminances=())

    def test_hex_codes(self):
        """Hex codes include alpha"""
        palette = extract_palette(grid([[(255, 0, 16, 128)]]))
        assert palette.hex_codes() == ("#ff001080",)
        assert rgba_to_hex(BLACK) == "#000000ff"

    def test_empty_as_array(self):
        """Empty palette converts to a (0,4) array"""
        assert Palette().as_array().shape == (0, 4)
