"""
Exception types raised by imgdedup.

Per-file failures (InvalidDimensions, decode errors) are caught by the
scanner and logged; only CacheDirectoryError is allowed to stop the CLI.
"""

from __future__ import annotations


class ImgDedupError(Exception):
    """Base class for all imgdedup errors."""


class InvalidDimensions(ImgDedupError):
    """Image is smaller than the fingerprint grid on at least one axis."""

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        super().__init__(f"Image dimensions {width} x {height} invalid")


class MismatchedSubdivisions(ImgDedupError):
    """Two fingerprints computed at different grid sizes were compared."""

    def __init__(self, left: int, right: int):
        self.left = left
        self.right = right
        super().__init__(
            f"Cannot compare fingerprints with different subdivisions ({left} vs {right})"
        )


class CacheDirectoryError(ImgDedupError):
    """The fingerprint scratch directory could not be created."""

    def __init__(self, path: str, cause: Exception):
        self.path = path
        self.cause = cause
        super().__init__(f"Cannot create cache directory {path}: {cause}")


__all__ = [
    'ImgDedupError',
    'InvalidDimensions',
    'MismatchedSubdivisions',
    'CacheDirectoryError',
]
