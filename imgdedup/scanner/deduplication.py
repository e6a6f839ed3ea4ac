"""
Duplicate search for the scanner package.

Fingerprints every candidate file, then compares every unordered pair in
candidate-list order and yields the pairs that fall below the tolerance.
"""

from __future__ import annotations

from typing import Iterator, Optional

from ..cache import FingerprintCache, CacheStats
from ..models import Fingerprint, DuplicatePair
from .analysis import fingerprint_file
from .comparison import diff, is_match
from .dependencies import tqdm, _logger


def build_fingerprint_map(
    filepaths: list[str],
    subdivisions: int,
    cache: Optional[FingerprintCache] = None,
    show_progress: bool = True,
) -> tuple[dict[str, Fingerprint], CacheStats]:
    """
    Fingerprint a list of files sequentially.

    Args:
        filepaths: Candidate files in traversal order
        subdivisions: Grid side length N
        cache: Fingerprint cache, or None to compute everything fresh
        show_progress: Whether to show a tqdm progress bar on stderr

    Returns:
        Tuple of (path -> Fingerprint for every file that could be
        fingerprinted, CacheStats)
    """
    fingerprints: dict[str, Fingerprint] = {}
    stats = CacheStats(total_files=len(filepaths))

    for filepath in tqdm(
        filepaths,
        desc="Fingerprinting",
        unit="file",
        ncols=80,
        disable=not show_progress,
    ):
        fingerprint = fingerprint_file(filepath, subdivisions, cache=cache, stats=stats)
        if fingerprint is not None:
            fingerprints[filepath] = fingerprint

    _logger.debug(
        f"Fingerprinted {len(fingerprints):,} of {len(filepaths):,} files"
    )
    return fingerprints, stats


def find_duplicate_pairs(
    filepaths: list[str],
    fingerprints: dict[str, Fingerprint],
    tolerance: int,
) -> Iterator[DuplicatePair]:
    """
    Compare every unordered pair of files and yield the matches.

    Pairs are visited as (i, j) with i < j over ``filepaths`` exactly as
    given, so output order follows traversal order. Files without a
    fingerprint and pairs naming the same path are skipped.

    Args:
        filepaths: Candidate files in traversal order
        fingerprints: Result of build_fingerprint_map
        tolerance: Pairs with distance < tolerance are yielded

    Yields:
        DuplicatePair for each match

    Raises:
        MismatchedSubdivisions: If two fingerprints use different grid sizes
    """
    count = len(filepaths)
    for i in range(count):
        left = filepaths[i]
        left_fp = fingerprints.get(left)
        if left_fp is None:
            continue

        for j in range(i + 1, count):
            right = filepaths[j]
            right_fp = fingerprints.get(right)
            if right_fp is None or left == right:
                continue

            distance = diff(left_fp, right_fp)
            if is_match(distance, tolerance):
                yield DuplicatePair(
                    left=left,
                    right=right,
                    left_fingerprint=left_fp,
                    right_fingerprint=right_fp,
                    distance=distance,
                )


__all__ = ['build_fingerprint_map', 'find_duplicate_pairs']
