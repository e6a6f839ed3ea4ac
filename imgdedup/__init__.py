"""
imgdedup
========
Find visually similar or duplicate images.

Each image is reduced to a coarse fingerprint (an N x N grid of averaged
RGB colors) and every pair of fingerprints is compared against a
tolerance. Fingerprints are cached per user so unchanged files are only
decoded once.
"""

__version__ = "1.0.0"

from .models import Fingerprint, DuplicatePair, format_size
from .config import IMAGE_EXTENSIONS, DEFAULT_SUBDIVISIONS, DEFAULT_TOLERANCE
from .exceptions import (
    ImgDedupError,
    InvalidDimensions,
    MismatchedSubdivisions,
    CacheDirectoryError,
)
from .scanner import (
    find_files,
    compute_fingerprint,
    diff,
    is_match,
    fingerprint_file,
    build_fingerprint_map,
    find_duplicate_pairs,
)
from .cache import FingerprintCache, CacheKey, CacheStats

__all__ = [
    "Fingerprint",
    "DuplicatePair",
    "format_size",
    "IMAGE_EXTENSIONS",
    "DEFAULT_SUBDIVISIONS",
    "DEFAULT_TOLERANCE",
    "ImgDedupError",
    "InvalidDimensions",
    "MismatchedSubdivisions",
    "CacheDirectoryError",
    "find_files",
    "compute_fingerprint",
    "diff",
    "is_match",
    "fingerprint_file",
    "build_fingerprint_map",
    "find_duplicate_pairs",
    "FingerprintCache",
    "CacheKey",
    "CacheStats",
]
