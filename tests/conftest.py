"""
Shared fixtures for palette_swap tests.
"""

from pathlib import Path
from typing import Callable

import numpy as np
import pytest
from PIL import Image


@pytest.fixture
def write_png(tmp_path: Path) -> Callable[[str, np.ndarray], Path]:
    """Write an RGBA grid to tmp_path/<name> as PNG and return the path."""

    def _write(name: str, rgba: np.ndarray) -> Path:
        path = tmp_path / name
        Image.fromarray(np.ascontiguousarray(rgba)).save(path, format="PNG")
        return path

    return _write
