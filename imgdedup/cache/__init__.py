"""
Fingerprint cache for imgdedup.

Persists computed fingerprints so unchanged files are not decoded again
on the next run. Entries live in a per-user scratch directory
(~/.imgdedup), one file per cache key. A key combines the file's absolute
path, the grid size, and the file's size and modification time, so any
change to the file yields a new key; old entries are simply left behind.

Public API:
- FingerprintCache: Cache service (open with FingerprintCache.open())
- CacheKey: Cache key dataclass
- CacheStats: Statistics dataclass
"""

from __future__ import annotations

from .core import FingerprintCache
from .keys import CacheKey
from .utils import CacheStats


__all__ = [
    'FingerprintCache',
    'CacheKey',
    'CacheStats',
]
