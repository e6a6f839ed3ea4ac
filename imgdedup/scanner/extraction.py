"""
Fingerprint extraction for the scanner package.

Reduces a decoded image to an N x N grid of averaged RGB samples.
"""

from __future__ import annotations

from ..exceptions import InvalidDimensions
from ..models import Fingerprint
from .dependencies import np
from .pixels import PixelSource

_CHANNEL_MAX_16 = np.float32(65535)
_CHANNEL_MAX_8 = np.float32(255)


def _cell_indices(length: int, subdivisions: int):
    """Map each coordinate 0..length-1 to its grid cell, floor(i / length * N)."""
    return (np.arange(length, dtype=np.int64) * subdivisions) // length


def compute_fingerprint(
    source: PixelSource,
    subdivisions: int,
    file_size: int = 0,
) -> Fingerprint:
    """
    Compute the fingerprint of a pixel source.

    Every pixel is added to its grid cell after rescaling each channel from
    16 to 8 bits (single precision, truncated). Cell sums are then divided
    by a uniform divisor, (width // N) * (height // N), which only
    approximates the real per-cell pixel count on images whose size is not
    a multiple of N.

    Args:
        source: Pixel source to read
        subdivisions: Grid side length N (>= 1)
        file_size: Byte size of the source file, stored for reporting

    Returns:
        Fingerprint with ``subdivisions == N``

    Raises:
        ValueError: If subdivisions < 1
        InvalidDimensions: If the image is narrower or shorter than N
    """
    if subdivisions < 1:
        raise ValueError(f"subdivisions must be >= 1, got {subdivisions}")

    width, height = source.width, source.height
    divisor = (width // subdivisions) * (height // subdivisions)
    if divisor == 0:
        raise InvalidDimensions(width, height)

    samples = source.rgba_array()[:, :, :3].astype(np.float32)
    scaled = ((samples / _CHANNEL_MAX_16) * _CHANNEL_MAX_8).astype(np.uint64)

    columns = _cell_indices(width, subdivisions)
    rows = _cell_indices(height, subdivisions)
    # Flat cell number for every pixel, laid out as column * N + row
    cells = (columns[np.newaxis, :] * subdivisions + rows[:, np.newaxis]).ravel()

    sums = np.zeros((subdivisions * subdivisions, 3), dtype=np.uint64)
    np.add.at(sums, cells, scaled.reshape(-1, 3))

    averages = np.minimum(sums // np.uint64(divisor), np.uint64(255))
    averages = averages.reshape(subdivisions, subdivisions, 3)

    grid = tuple(
        tuple(tuple(int(v) for v in cell) for cell in column)
        for column in averages
    )
    return Fingerprint(
        grid=grid,
        subdivisions=subdivisions,
        width=width,
        height=height,
        file_size=file_size,
    )


__all__ = ['compute_fingerprint']
