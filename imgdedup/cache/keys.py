"""
Cache keys for the fingerprint cache.

A key identifies one fingerprint computation: the file's absolute path,
the grid size, and the file's size and modification time. Touching or
rewriting a file produces a new key, so stale entries are never read.
"""

from __future__ import annotations

import hashlib
import os
from dataclasses import dataclass

from ..config import CACHE_FILE_SUFFIX
from .utils import get_file_stats


@dataclass(frozen=True)
class CacheKey:
    """Identity of a cached fingerprint."""
    path: str
    subdivisions: int
    file_size: int
    mtime_ns: int

    @classmethod
    def for_file(cls, filepath: str, subdivisions: int) -> 'CacheKey':
        """
        Build the key for a file as it currently exists on disk.

        Raises:
            OSError: If the file cannot be stat'ed
        """
        path = os.path.abspath(filepath)
        file_size, mtime_ns = get_file_stats(path)
        return cls(path, subdivisions, file_size, mtime_ns)

    @property
    def digest(self) -> str:
        """MD5 hex digest of the key fields."""
        unit = f"{self.path}|{self.subdivisions}|{self.file_size}|{self.mtime_ns}"
        return hashlib.md5(unit.encode('utf-8')).hexdigest()

    @property
    def filename(self) -> str:
        """Name of the cache file holding this key's fingerprint."""
        return self.digest + CACHE_FILE_SUFFIX


__all__ = ['CacheKey']
