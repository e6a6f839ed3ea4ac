"""
FingerprintCache facade class.

Stores one fingerprint per cache key as a file in the user's scratch
directory. The cache is an optimization only: read failures are misses
and write failures are logged and ignored.
"""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import Optional

from ..config import SCRATCH_DIR_NAME, SCRATCH_DIR_MODE, default_home_dir
from ..exceptions import CacheDirectoryError
from ..models import Fingerprint
from .keys import CacheKey
from .maintenance import MaintenanceOperations
from .serialization import encode_fingerprint, decode_fingerprint


logger = logging.getLogger(__name__)


class FingerprintCache:
    """
    File-backed cache for computed fingerprints.

    Usage:
        cache = FingerprintCache.open()

        key = CacheKey.for_file(filepath, subdivisions)
        fingerprint = cache.lookup(key)
        if fingerprint is None:
            fingerprint = compute_fingerprint(...)
            cache.store(key, fingerprint)
    """

    def __init__(self, cache_dir: str | Path):
        """
        Wrap an existing scratch directory. Use ``open()`` to create it.

        Args:
            cache_dir: Directory holding the cache entries
        """
        self.cache_dir = Path(cache_dir)
        self._maintenance = MaintenanceOperations(self.cache_dir)

    @classmethod
    def open(
        cls,
        home_dir: Optional[str | Path] = None,
        dirname: str = SCRATCH_DIR_NAME,
    ) -> 'FingerprintCache':
        """
        Open the cache under a home directory, creating it if needed.

        Args:
            home_dir: Base directory. Uses the invoking user's home if None.
            dirname: Name of the scratch directory inside home_dir

        Returns:
            FingerprintCache for <home_dir>/<dirname>

        Raises:
            CacheDirectoryError: If the directory is missing and cannot be created
        """
        cache_dir = Path(home_dir or default_home_dir()) / dirname
        try:
            cache_dir.mkdir(mode=SCRATCH_DIR_MODE)
            logger.debug(f"Created cache directory {cache_dir}")
        except FileExistsError:
            if not cache_dir.is_dir():
                raise CacheDirectoryError(
                    str(cache_dir), NotADirectoryError(str(cache_dir))
                )
        except OSError as e:
            raise CacheDirectoryError(str(cache_dir), e) from e
        return cls(cache_dir)

    def path_for(self, key: CacheKey) -> Path:
        """Location of the cache file for a key."""
        return self.cache_dir / key.filename

    def lookup(self, key: CacheKey) -> Optional[Fingerprint]:
        """
        Get the cached fingerprint for a key.

        Returns:
            The fingerprint, or None on any failure (absent, truncated, malformed)
        """
        entry = self.path_for(key)
        try:
            fingerprint = decode_fingerprint(entry.read_text(encoding='utf-8'))
        except FileNotFoundError:
            return None
        except (OSError, ValueError) as e:
            logger.debug(f"Ignoring unreadable cache entry {entry}: {e}")
            return None

        if fingerprint.subdivisions != key.subdivisions:
            logger.debug(f"Ignoring cache entry {entry}: subdivisions mismatch")
            return None
        return fingerprint

    def store(self, key: CacheKey, fingerprint: Fingerprint) -> bool:
        """
        Cache a fingerprint under a key.

        The entry is written to a temporary file and renamed into place so
        a partially written entry is never visible to ``lookup``.

        Returns:
            True if the entry was written, False otherwise
        """
        entry = self.path_for(key)
        tmp_path = None
        try:
            fd, tmp_path = tempfile.mkstemp(
                dir=self.cache_dir, prefix='.', suffix='.partial'
            )
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                f.write(encode_fingerprint(fingerprint))
            os.replace(tmp_path, entry)
            return True
        except Exception as e:
            logger.warning(f"Failed to cache fingerprint for {key.path}: {e}")
            if tmp_path is not None:
                try:
                    os.unlink(tmp_path)
                except OSError:
                    pass
            return False

    # Delegate to MaintenanceOperations
    def prune(self, max_age_days: float) -> int:
        """Remove cache entries older than max_age_days."""
        return self._maintenance.prune(max_age_days)

    def get_stats(self) -> dict:
        """Get cache statistics."""
        return self._maintenance.get_stats()


__all__ = ['FingerprintCache']
