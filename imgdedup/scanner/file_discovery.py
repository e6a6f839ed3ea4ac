"""
File discovery module for the scanner package.

Builds the ordered candidate list the duplicate search runs over. Pair
output follows this order, so it is kept stable: arguments in the order
given, directory contents in lexical order.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable

from .dependencies import _logger


def _walk_directory(root: str) -> list[str]:
    """Recursively list regular files under root in lexical order, skipping dotfiles."""
    files = []
    try:
        with os.scandir(root) as it:
            entries = sorted(it, key=lambda e: e.name)
    except OSError as e:
        _logger.warning(f"Cannot read directory {root}: {e}")
        return files

    # Files and subdirectories are interleaved by name, like a lexical walk
    for entry in entries:
        if entry.is_dir(follow_symlinks=False):
            files.extend(_walk_directory(entry.path))
        elif entry.is_file(follow_symlinks=False) and not entry.name.startswith('.'):
            files.append(os.path.abspath(entry.path))
    return files


def find_files(paths: Iterable[str | Path]) -> list[str]:
    """
    Expand files and directories into an ordered list of files.

    Args:
        paths: Files and/or directories, in the order they should be scanned

    Returns:
        List of absolute file paths as strings

    Notes:
        - Directories are walked recursively
        - Hidden files (name starting with '.') inside directories are skipped
        - No extension filtering happens here
        - Paths that do not exist are logged and skipped
    """
    files: list[str] = []
    for path in paths:
        path = str(path)
        if os.path.isdir(path):
            files.extend(_walk_directory(path))
        elif os.path.isfile(path):
            files.append(os.path.abspath(path))
        else:
            _logger.error(f"Path not found: {path}")
    return files


__all__ = ['find_files']
