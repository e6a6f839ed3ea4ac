"""
Report formatting and display for the CLI interface.

Pairs are printed as they are found, in traversal order.
"""

from __future__ import annotations

from ..config import PAIR_SEPARATOR
from ..models import DuplicatePair, Fingerprint


def _format_image(path: str, fingerprint: Fingerprint) -> str:
    """Path followed by indented dimensions and human-readable size."""
    return (
        f"{path}\n"
        f"    {fingerprint.resolution}\n"
        f"    {fingerprint.file_size_formatted}"
    )


def print_pair(pair: DuplicatePair) -> None:
    """
    Print both images of a matching pair and their distance.

    The separator line is printed separately by ``print_separator`` so a
    diff tool can be launched in between.
    """
    print(_format_image(pair.left, pair.left_fingerprint))
    print(_format_image(pair.right, pair.right_fingerprint))
    print("")
    print(f"Diff:  {pair.distance}")


def print_separator() -> None:
    """Print the line that closes a pair's report."""
    print(PAIR_SEPARATOR)


__all__ = ['print_pair', 'print_separator']
