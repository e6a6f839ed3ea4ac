"""
Shared utilities for cache operations.

Provides:
- CacheStats: Statistics dataclass for tracking cache performance
- get_file_stats: Size/mtime lookup used to build cache keys
"""

from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass
class CacheStats:
    """Statistics about cache usage during a scan."""
    cache_hits: int = 0
    cache_misses: int = 0
    total_files: int = 0

    @property
    def lookups(self) -> int:
        """Number of files the cache was consulted for."""
        return self.cache_hits + self.cache_misses

    @property
    def hit_rate(self) -> float:
        """Return cache hit rate as percentage of lookups."""
        if self.lookups == 0:
            return 0.0
        return (self.cache_hits / self.lookups) * 100


def get_file_stats(filepath: str) -> tuple[int, int]:
    """
    Get file size and mtime.

    Args:
        filepath: Path to the file

    Returns:
        Tuple of (size in bytes, mtime in integer nanoseconds)

    Raises:
        OSError: If the file cannot be stat'ed
    """
    stat = os.stat(filepath)
    return stat.st_size, stat.st_mtime_ns


__all__ = ['CacheStats', 'get_file_stats']
