"""
Fingerprint comparison for the scanner package.
"""

from __future__ import annotations

from ..exceptions import MismatchedSubdivisions
from ..models import Fingerprint
from .dependencies import np


def diff(left: Fingerprint, right: Fingerprint) -> int:
    """
    Distance between two fingerprints.

    Each cell contributes ``| |dr - dg| - db |`` where dr, dg, db are the
    absolute per-channel differences. This is symmetric and diff(a, a) is 0,
    but it is not a metric: a change confined to one channel counts for
    less than the same change spread over all three.

    Raises:
        MismatchedSubdivisions: If the fingerprints use different grid sizes
    """
    if left.subdivisions != right.subdivisions:
        raise MismatchedSubdivisions(left.subdivisions, right.subdivisions)

    a = np.asarray(left.grid, dtype=np.int64)
    b = np.asarray(right.grid, dtype=np.int64)
    delta = np.abs(a - b)
    dr, dg, db = delta[..., 0], delta[..., 1], delta[..., 2]
    return int(np.abs(np.abs(dr - dg) - db).sum())


def is_match(distance: int, tolerance: int) -> bool:
    """A pair matches when its distance is strictly below the tolerance."""
    return distance < tolerance


__all__ = ['diff', 'is_match']
