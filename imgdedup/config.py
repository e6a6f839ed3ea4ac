"""
Configuration constants for imgdedup.

This module contains the built-in defaults:
- Supported image extensions
- Fingerprint grid size and match tolerance
- Scratch directory location for the fingerprint cache
"""

import os

# Extensions that are fingerprinted (compared case-insensitively).
# Anything else found during discovery is skipped without being decoded.
IMAGE_EXTENSIONS = {
    '.png', '.jpg', '.jpeg', '.gif', '.bmp',
    # Also decoded by Pillow without extra plugins
    '.tif', '.tiff', '.webp',
}

# Grid side length of a fingerprint (N x N cells)
DEFAULT_SUBDIVISIONS = 10

# Pairs with a distance strictly below this value are reported
# Higher = more tolerant
DEFAULT_TOLERANCE = 100

# Seconds to wait after launching the diff tool so an interactive viewer
# can open before the next pair is processed
DIFFTOOL_DELAY = 0.5

# Fingerprint cache location (one directory per user)
SCRATCH_DIR_NAME = '.imgdedup'
SCRATCH_DIR_MODE = 0o700
CACHE_FILE_SUFFIX = '.fp'

# Default age used by --prune-cache when no value is given
CACHE_MAX_AGE_DAYS = 90

# Separator printed after every reported pair
PAIR_SEPARATOR = '- - - - - - - - - -'


def default_home_dir() -> str:
    """Home directory of the invoking user."""
    return os.path.expanduser('~')
