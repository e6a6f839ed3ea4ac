"""
Pytest configuration and shared fixtures for test suite.
"""

import pytest
import tempfile
import shutil
from pathlib import Path
from PIL import Image

from imgdedup.models import Fingerprint
from imgdedup.scanner import PixelSource
from imgdedup.user_config import get_user_config

RED = (255, 0, 0)
BLACK = (0, 0, 0)


class ArraySource(PixelSource):
    """Pixel source backed by a callable of (x, y) -> 16-bit RGBA."""

    def __init__(self, width, height, pixel):
        self.width = width
        self.height = height
        self._pixel = pixel

    def rgba(self, x, y):
        return self._pixel(x, y)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    tmpdir = tempfile.mkdtemp()
    yield Path(tmpdir)
    shutil.rmtree(tmpdir, ignore_errors=True)


@pytest.fixture(autouse=True)
def isolated_config(temp_dir, monkeypatch):
    """Keep tests away from the real ~/.imgdedup and any IMGDEDUP_* settings."""
    for var in (
        'IMGDEDUP_SUBDIVISIONS',
        'IMGDEDUP_TOLERANCE',
        'IMGDEDUP_DIFFTOOL',
        'IMGDEDUP_CACHE_MAX_AGE',
    ):
        monkeypatch.delenv(var, raising=False)
    home = temp_dir / "home"
    home.mkdir()
    monkeypatch.setenv('IMGDEDUP_HOME', str(home))
    monkeypatch.setenv('IMGDEDUP_CONFIG_DIR', str(home / "config"))
    get_user_config().reload()
    yield home
    get_user_config().reload()


@pytest.fixture
def home_dir(isolated_config):
    """Home directory the fingerprint cache is created in."""
    return isolated_config


@pytest.fixture
def solid_source():
    """Factory for synthetic pixel sources of a single 16-bit color."""
    def _make(width, height, rgba=(65535, 65535, 65535, 65535)):
        return ArraySource(width, height, lambda x, y: rgba)
    return _make


@pytest.fixture
def make_fingerprint():
    """
    Factory for fingerprints.

    Every cell gets ``fill`` except the (column, row) positions listed in
    ``cells``.
    """
    def _make(subdivisions=2, fill=(0, 0, 0), cells=None, width=100, height=100, file_size=1000):
        cells = cells or {}
        grid = tuple(
            tuple(cells.get((i, j), fill) for j in range(subdivisions))
            for i in range(subdivisions)
        )
        return Fingerprint(
            grid=grid,
            subdivisions=subdivisions,
            width=width,
            height=height,
            file_size=file_size,
        )
    return _make


@pytest.fixture
def sample_images(temp_dir):
    """
    Create a set of sample images for testing.

    Returns:
        dict with paths to:
        - red.png, red_copy.png (byte-identical copies, 100x100 red)
        - red_marked.png (200x200 red with 58 black pixels in the top-left
          cell, distance 37 from red.png at 10 subdivisions)
        - black.png (unique image)
        - tiny.png (5x5, smaller than a 10 x 10 grid)
        - corrupted.png (not an image)
        - notes.txt (unsupported extension)
    """
    images = {}
    scan_dir = temp_dir / "photos"
    scan_dir.mkdir()

    img = Image.new('RGB', (100, 100), color=RED)
    path = scan_dir / "red.png"
    img.save(path, 'PNG')
    images['red'] = str(path)

    path = scan_dir / "red_copy.png"
    shutil.copyfile(images['red'], path)
    images['red_copy'] = str(path)

    # Cell (0, 0) covers x, y in [0, 20); 58 of its 400 pixels turn black,
    # so its red average is 342 * 255 // 400 = 218, i.e. 37 below red.png
    img = Image.new('RGB', (200, 200), color=RED)
    for i in range(58):
        img.putpixel((2 + i % 10, 2 + i // 10), BLACK)
    path = scan_dir / "red_marked.png"
    img.save(path, 'PNG')
    images['red_marked'] = str(path)

    img = Image.new('RGB', (100, 100), color=BLACK)
    path = scan_dir / "black.png"
    img.save(path, 'PNG')
    images['black'] = str(path)

    img = Image.new('RGB', (5, 5), color=RED)
    path = scan_dir / "tiny.png"
    img.save(path, 'PNG')
    images['tiny'] = str(path)

    path = scan_dir / "corrupted.png"
    path.write_text("not an image")
    images['corrupted'] = str(path)

    path = scan_dir / "notes.txt"
    path.write_text("not an image either")
    images['notes'] = str(path)

    images['dir'] = str(scan_dir)
    return images


@pytest.fixture
def pixel_source():
    """Factory for synthetic pixel sources: pixel_source(width, height, fn)."""
    return ArraySource
