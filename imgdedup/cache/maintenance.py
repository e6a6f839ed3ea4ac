"""
Maintenance operations for the fingerprint cache.

The cache never evicts on its own; these are only run on request.
"""

from __future__ import annotations

import logging
import time
from pathlib import Path

from ..config import CACHE_FILE_SUFFIX


logger = logging.getLogger(__name__)


class MaintenanceOperations:
    """
    Handles maintenance operations for the fingerprint cache.

    Provides age-based pruning and statistics reporting.
    """

    def __init__(self, cache_dir: Path):
        """
        Initialize maintenance operations.

        Args:
            cache_dir: Scratch directory holding the cache entries
        """
        self.cache_dir = cache_dir

    def _entries(self) -> list[Path]:
        return [
            p for p in self.cache_dir.iterdir()
            if p.is_file() and p.suffix == CACHE_FILE_SUFFIX
        ]

    def prune(self, max_age_days: float) -> int:
        """
        Remove cache entries older than the given age.

        Entries are never rewritten, so an entry's mtime is the time its
        fingerprint was computed.

        Args:
            max_age_days: Remove entries written more than this many days ago

        Returns:
            Number of entries removed
        """
        cutoff = time.time() - (max_age_days * 24 * 60 * 60)
        removed = 0
        try:
            entries = self._entries()
        except OSError as e:
            logger.warning(f"Failed to list cache directory {self.cache_dir}: {e}")
            return 0

        for entry in entries:
            try:
                if entry.stat().st_mtime < cutoff:
                    entry.unlink()
                    removed += 1
            except OSError as e:
                logger.warning(f"Failed to remove cache entry {entry}: {e}")

        logger.debug(f"Pruned {removed} cache entries older than {max_age_days} days")
        return removed

    def get_stats(self) -> dict:
        """
        Get cache statistics.

        Returns:
            Dictionary with entry count, total size and location
        """
        entries = self._entries()
        total_size = 0
        for entry in entries:
            try:
                total_size += entry.stat().st_size
            except OSError:
                # Removed between listing and stat
                continue
        return {
            'total_entries': len(entries),
            'total_size': total_size,
            'cache_dir': str(self.cache_dir),
        }


__all__ = ['MaintenanceOperations']
