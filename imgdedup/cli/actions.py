"""
External diff tool support for the CLI interface.

Launches a user-supplied command on near-duplicate pairs so they can be
reviewed side by side.
"""

from __future__ import annotations

import logging
import shlex
import subprocess
import time
from typing import Optional

from ..config import DIFFTOOL_DELAY
from ..models import DuplicatePair


logger = logging.getLogger(__name__)


def launch_difftool(
    command: str,
    left: str,
    right: str,
    delay: float = DIFFTOOL_DELAY,
) -> Optional[int]:
    """
    Run ``command left right`` and wait for it to finish.

    Diff tools use exit codes inconsistently, so the return code is only
    logged. A command that cannot be started is logged and skipped.

    Args:
        command: Command line; split with shell rules, paths are appended
        left: First image path
        right: Second image path
        delay: Seconds to pause afterwards so an interactive tool can open

    Returns:
        The command's exit code, or None if it could not be started
    """
    try:
        argv = shlex.split(command)
    except ValueError as e:
        logger.warning(f"Invalid difftool command {command!r}: {e}")
        return None
    if not argv:
        logger.warning("Empty difftool command, skipping")
        return None
    argv += [left, right]

    logger.info("Launching difftool")
    try:
        result = subprocess.run(argv, check=False)
    except OSError as e:
        logger.warning(f"Failed to launch difftool {argv[0]!r}: {e}")
        return None
    finally:
        time.sleep(delay)

    logger.debug(f"Difftool exited with status {result.returncode}")
    return result.returncode


def handle_pair(pair: DuplicatePair, difftool: Optional[str]) -> bool:
    """
    Launch the diff tool for a reported pair if it qualifies.

    Only pairs that are not pixel-identical and whose file sizes differ are
    passed on, and only when a command is configured.

    Returns:
        True if the diff tool was invoked
    """
    if not difftool or not pair.wants_difftool:
        return False
    launch_difftool(difftool, pair.left, pair.right)
    return True


__all__ = ['launch_difftool', 'handle_pair']
