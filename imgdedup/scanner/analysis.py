"""
Per-file fingerprinting for the scanner package.

Looks a file up in the fingerprint cache and falls back to decoding and
extracting it. Problems with a single file are logged and the file is
left out; they never stop a scan.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from ..cache import FingerprintCache, CacheKey, CacheStats
from ..config import IMAGE_EXTENSIONS
from ..exceptions import InvalidDimensions
from ..models import Fingerprint
from .dependencies import Image, UnidentifiedImageError, _logger
from .extraction import compute_fingerprint
from .pixels import open_pixel_source


def is_supported_image(filepath: str | Path) -> bool:
    """Check the file extension (case-insensitive) against IMAGE_EXTENSIONS."""
    return os.path.splitext(str(filepath))[1].lower() in IMAGE_EXTENSIONS


def fingerprint_file(
    filepath: str | Path,
    subdivisions: int,
    cache: Optional[FingerprintCache] = None,
    stats: Optional[CacheStats] = None,
) -> Optional[Fingerprint]:
    """
    Get the fingerprint of an image file.

    Args:
        filepath: Path to the image file
        subdivisions: Grid side length N
        cache: Fingerprint cache to consult and fill, or None to always compute
        stats: Optional CacheStats updated with hits and misses

    Returns:
        Fingerprint, or None if the file is unsupported or could not be read
    """
    filepath = os.path.abspath(str(filepath))
    if not is_supported_image(filepath):
        return None

    try:
        key = CacheKey.for_file(filepath, subdivisions)
    except OSError as e:
        _logger.warning(f"{filepath} - {e}")
        return None

    if cache is not None:
        fingerprint = cache.lookup(key)
        if fingerprint is not None:
            if stats is not None:
                stats.cache_hits += 1
            return fingerprint
        if stats is not None:
            stats.cache_misses += 1

    try:
        with open_pixel_source(filepath) as source:
            fingerprint = compute_fingerprint(source, subdivisions, file_size=key.file_size)
    except InvalidDimensions as e:
        _logger.warning(f"{filepath} - {e}")
        return None
    except UnidentifiedImageError as e:
        _logger.warning(f"{filepath} - not a valid image file: {e}")
        return None
    except (OSError, ValueError, Image.DecompressionBombError) as e:
        _logger.warning(f"{filepath} - failed to decode image: {e}")
        return None

    if cache is not None:
        cache.store(key, fingerprint)
    return fingerprint


__all__ = ['is_supported_image', 'fingerprint_file']
