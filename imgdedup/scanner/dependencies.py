"""
Dependency initialization for the scanner package.

Handles PIL, numpy and tqdm imports with proper error handling and
configuration.
"""

from __future__ import annotations

import warnings
import logging

# Module-level logger
_logger = logging.getLogger(__name__)

# Check for required dependencies
try:
    from PIL import Image, UnidentifiedImageError
    import numpy as np
    from tqdm import tqdm
except ImportError:
    raise ImportError(
        "Required packages not found!\n"
        "Install with: pip install Pillow numpy tqdm"
    )

# Increase PIL's decompression bomb limit for large images
# Default is ~89MP (178 million pixels), we increase to 500MP for photo collections
Image.MAX_IMAGE_PIXELS = 500_000_000  # 500 megapixels

# Suppress specific PIL warnings that we handle gracefully
# - DecompressionBombWarning: We've increased the limit appropriately
warnings.filterwarnings("ignore", category=Image.DecompressionBombWarning)


__all__ = [
    'Image',
    'UnidentifiedImageError',
    'np',
    'tqdm',
    '_logger',
]
