"""
Scanner package for imgdedup.

Provides fingerprint extraction, comparison, per-file caching and the
pairwise duplicate search.

Public API:
- find_files: Expand paths into an ordered list of files
- PixelSource / PillowPixelSource / open_pixel_source: Pixel access
- compute_fingerprint: Reduce a pixel source to an N x N fingerprint
- diff / is_match: Fingerprint distance and tolerance test
- is_supported_image: Extension filter
- fingerprint_file: Fingerprint one file through the cache
- build_fingerprint_map: Fingerprint a list of files
- find_duplicate_pairs: Enumerate matching pairs in traversal order
"""

from __future__ import annotations

# Import public functions from submodules
from .file_discovery import find_files
from .pixels import PixelSource, PillowPixelSource, open_pixel_source
from .extraction import compute_fingerprint
from .comparison import diff, is_match
from .analysis import is_supported_image, fingerprint_file
from .deduplication import build_fingerprint_map, find_duplicate_pairs


# Public API exports
__all__ = [
    # File discovery
    'find_files',
    # Pixel access
    'PixelSource',
    'PillowPixelSource',
    'open_pixel_source',
    # Fingerprinting
    'compute_fingerprint',
    'is_supported_image',
    'fingerprint_file',
    # Comparison
    'diff',
    'is_match',
    # Duplicate detection
    'build_fingerprint_map',
    'find_duplicate_pairs',
]
