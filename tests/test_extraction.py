"""
Unit tests for fingerprint extraction and pixel sources.
"""

import numpy as np
import pytest
from PIL import Image

from imgdedup.exceptions import InvalidDimensions
from imgdedup.scanner import compute_fingerprint, diff, PillowPixelSource, open_pixel_source

WHITE_16 = (65535, 65535, 65535, 65535)
BLACK_16 = (0, 0, 0, 65535)


class TestComputeFingerprint:
    """Test compute_fingerprint on synthetic sources."""

    @pytest.mark.parametrize("width,height,subdivisions", [
        (10, 10, 10),
        (37, 23, 4),
        (100, 60, 10),
        (7, 7, 1),
    ])
    def test_grid_is_n_by_n(self, solid_source, width, height, subdivisions):
        fp = compute_fingerprint(solid_source(width, height, BLACK_16), subdivisions)
        assert fp.subdivisions == subdivisions
        assert len(fp.grid) == subdivisions
        assert all(len(column) == subdivisions for column in fp.grid)

    def test_white_image_averages_to_255(self, solid_source):
        fp = compute_fingerprint(solid_source(40, 20, WHITE_16), 4)
        assert all(cell == (255, 255, 255) for column in fp.grid for cell in column)

    def test_records_bounds_and_file_size(self, solid_source):
        fp = compute_fingerprint(solid_source(40, 20), 4, file_size=1234)
        assert fp.bounds == (40, 20)
        assert fp.file_size == 1234

    def test_alpha_is_ignored(self, solid_source):
        opaque = compute_fingerprint(solid_source(10, 10, (65535, 0, 0, 65535)), 2)
        transparent = compute_fingerprint(solid_source(10, 10, (65535, 0, 0, 0)), 2)
        assert opaque.grid == transparent.grid

    def test_cells_indexed_by_column_then_row(self, pixel_source):
        # Only the right half (x >= 5) is white
        source = pixel_source(10, 10, lambda x, y: WHITE_16 if x >= 5 else BLACK_16)
        fp = compute_fingerprint(source, 2)
        assert fp.grid[0][0] == (0, 0, 0)
        assert fp.grid[0][1] == (0, 0, 0)
        assert fp.grid[1][0] == (255, 255, 255)
        assert fp.grid[1][1] == (255, 255, 255)

    def test_uses_uniform_divisor(self, pixel_source):
        # 25x20 at N=2: the divisor is (25 // 2) * (20 // 2) = 120 even though
        # the left column of cells holds 13 * 10 = 130 pixels.
        # A single white column puts 10 white pixels in each left cell.
        source = pixel_source(25, 20, lambda x, y: WHITE_16 if x == 0 else BLACK_16)
        fp = compute_fingerprint(source, 2)
        assert fp.grid[0][0] == (21, 21, 21)  # 10 * 255 // 120
        assert fp.grid[0][1] == (21, 21, 21)
        assert fp.grid[1][0] == (0, 0, 0)

    def test_overcounted_cells_stay_in_range(self, solid_source):
        # 15 wide at N=10 puts two columns in some cells but divides by one
        fp = compute_fingerprint(solid_source(15, 10, WHITE_16), 10)
        assert all(0 <= v <= 255 for column in fp.grid for cell in column for v in cell)

    def test_overcounted_cells_clamp_to_255(self, solid_source):
        # 19 wide at N=10 divides by 1: columns 0-8 of cells hold two pixels
        # (raw average 510) and column 9 holds one (raw average 255)
        wide = compute_fingerprint(solid_source(19, 10, WHITE_16), 10)
        assert wide.grid[0][0] == (255, 255, 255)
        assert wide.grid[8][5] == (255, 255, 255)
        assert wide.grid[9][0] == (255, 255, 255)
        square = compute_fingerprint(solid_source(10, 10, WHITE_16), 10)
        assert diff(wide, square) == 0

    def test_overcounted_cells_below_255_are_not_normalised(self, solid_source):
        # 8-bit 51 is 16-bit 13107, exactly 0.2 of full scale
        fp = compute_fingerprint(solid_source(19, 10, (13107, 13107, 13107, 65535)), 10)
        assert fp.grid[0][0] == (102, 102, 102)
        assert fp.grid[9][0] == (51, 51, 51)

    @pytest.mark.parametrize("width,height", [(9, 100), (100, 9), (3, 3)])
    def test_too_small_image_raises(self, solid_source, width, height):
        with pytest.raises(InvalidDimensions) as excinfo:
            compute_fingerprint(solid_source(width, height), 10)
        assert excinfo.value.width == width
        assert excinfo.value.height == height
        assert f"{width} x {height}" in str(excinfo.value)

    def test_zero_subdivisions_rejected(self, solid_source):
        with pytest.raises(ValueError):
            compute_fingerprint(solid_source(10, 10), 0)


class TestPillowPixelSource:
    """Test the Pillow-backed pixel source."""

    def test_samples_are_16_bit(self):
        source = PillowPixelSource(Image.new('RGB', (4, 3), color=(255, 128, 0)))
        assert (source.width, source.height) == (4, 3)
        assert source.rgba(1, 2) == (65535, 128 * 257, 0, 65535)

    def test_array_matches_per_pixel_queries(self):
        img = Image.new('RGB', (3, 2), color=(10, 20, 30))
        img.putpixel((2, 1), (200, 100, 50))
        source = PillowPixelSource(img)
        samples = source.rgba_array()
        assert samples.shape == (2, 3, 4)
        assert tuple(int(v) for v in samples[1, 2]) == source.rgba(2, 1)
        assert tuple(int(v) for v in samples[0, 0]) == source.rgba(0, 0)

    def test_grayscale_image(self):
        fp = compute_fingerprint(PillowPixelSource(Image.new('L', (20, 20), color=255)), 2)
        assert fp.grid[1][1] == (255, 255, 255)

    def test_16_bit_grayscale_keeps_full_range(self):
        img = Image.fromarray(np.full((20, 20), 32768, dtype=np.uint16))
        source = PillowPixelSource(img)
        assert source.rgba(3, 4) == (32768, 32768, 32768, 65535)
        assert tuple(int(v) for v in source.rgba_array()[4, 3]) == source.rgba(3, 4)
        fp = compute_fingerprint(source, 2)
        # 32768 / 65535 * 255 truncates to 127
        assert all(cell == (127, 127, 127) for column in fp.grid for cell in column)

    def test_16_bit_grayscale_png_file(self, temp_dir):
        samples = np.full((20, 20), 32768, dtype=np.uint16)
        samples[:10, :10] = 65535
        path = temp_dir / "gray16.png"
        Image.fromarray(samples).save(path)
        with open_pixel_source(path) as source:
            fp = compute_fingerprint(source, 2)
        assert fp.grid[0][0] == (255, 255, 255)
        assert fp.grid[1][0] == (127, 127, 127)
        assert fp.grid[1][1] == (127, 127, 127)

    def test_red_image_file(self, sample_images):
        with open_pixel_source(sample_images['red']) as source:
            fp = compute_fingerprint(source, 10)
        assert fp.bounds == (100, 100)
        assert all(cell == (255, 0, 0) for column in fp.grid for cell in column)

    def test_marked_image_file(self, sample_images):
        with open_pixel_source(sample_images['red_marked']) as source:
            fp = compute_fingerprint(source, 10)
        assert fp.grid[0][0] == (218, 0, 0)
        assert fp.grid[1][0] == (255, 0, 0)
        assert fp.grid[9][9] == (255, 0, 0)

    def test_corrupted_file_raises(self, sample_images):
        with pytest.raises(OSError):
            with open_pixel_source(sample_images['corrupted']):
                pass
