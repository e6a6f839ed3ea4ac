"""
Pixel sources for the fingerprint extractor.

A pixel source exposes image bounds and 16-bit (0-65535) RGBA samples.
The Pillow-backed source is what the scanner uses for files on disk; the
base class lets tests and other callers feed synthetic pixels.
"""

from __future__ import annotations

from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from .dependencies import Image, np

# 8-bit -> 16-bit sample expansion (0xAB -> 0xABAB)
_EXPAND_8_TO_16 = 257
_CHANNEL_MAX_16 = 65535

# Modes Pillow uses for 16-bit grayscale (PNG Gray16 and friends)
_WIDE_GRAY_MODES = ('I', 'I;16', 'I;16B', 'I;16L', 'I;16N')


class PixelSource:
    """
    Base class for anything the extractor can read pixels from.

    Subclasses provide ``width``, ``height`` and ``rgba()``. ``rgba_array()``
    has a generic implementation built on ``rgba()``; override it with a
    vectorised version where one is available.
    """

    width: int
    height: int

    def rgba(self, x: int, y: int) -> tuple[int, int, int, int]:
        """Return (r, g, b, a) at (x, y), each in the 0-65535 range."""
        raise NotImplementedError

    def rgba_array(self):
        """
        Return all samples as a (height, width, 4) uint32 array.

        Row y, column x holds ``rgba(x, y)``.
        """
        samples = np.zeros((self.height, self.width, 4), dtype=np.uint32)
        for y in range(self.height):
            for x in range(self.width):
                samples[y, x] = self.rgba(x, y)
        return samples


class PillowPixelSource(PixelSource):
    """
    Pixel source over a decoded Pillow image.

    16-bit grayscale images (modes ``I;16*`` and ``I``) are read as-is and
    replicated into the three color channels with opaque alpha. Every other
    mode is converted to RGBA once and its 8-bit samples are widened to the
    16-bit range the extractor expects.
    """

    def __init__(self, image: Image.Image):
        self._wide_gray = image.mode in _WIDE_GRAY_MODES
        if not self._wide_gray and image.mode != 'RGBA':
            image = image.convert('RGBA')
        self._image = image
        self.width, self.height = image.size

    def rgba(self, x: int, y: int) -> tuple[int, int, int, int]:
        if self._wide_gray:
            value = min(max(int(self._image.getpixel((x, y))), 0), _CHANNEL_MAX_16)
            return (value, value, value, _CHANNEL_MAX_16)

        r, g, b, a = self._image.getpixel((x, y))
        return (
            r * _EXPAND_8_TO_16,
            g * _EXPAND_8_TO_16,
            b * _EXPAND_8_TO_16,
            a * _EXPAND_8_TO_16,
        )

    def rgba_array(self):
        if self._wide_gray:
            gray = np.clip(np.asarray(self._image, dtype=np.int64), 0, _CHANNEL_MAX_16)
            samples = np.empty((self.height, self.width, 4), dtype=np.uint32)
            samples[:, :, :3] = gray[:, :, np.newaxis]
            samples[:, :, 3] = _CHANNEL_MAX_16
            return samples

        samples = np.asarray(self._image, dtype=np.uint32)
        return samples * _EXPAND_8_TO_16


@contextmanager
def open_pixel_source(filepath: str | Path) -> Iterator[PillowPixelSource]:
    """
    Open and fully decode an image file.

    Raises the underlying Pillow/OS error if the file cannot be decoded;
    callers decide whether that is fatal.
    """
    with Image.open(filepath) as img:
        # Force load to detect truncated/corrupt images early
        img.load()
        yield PillowPixelSource(img)


__all__ = ['PixelSource', 'PillowPixelSource', 'open_pixel_source']
