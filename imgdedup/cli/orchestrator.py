"""
CLI workflow orchestration for imgdedup.

Provides the CLIOrchestrator class that coordinates the CLI run from
argument parsing through pair reporting.
"""

from __future__ import annotations

import logging
import os
from typing import Optional

from ..cache import FingerprintCache, CacheStats
from ..exceptions import CacheDirectoryError
from ..scanner import find_files, build_fingerprint_map, find_duplicate_pairs
from ..user_config import get_user_config
from .actions import handle_pair
from .arg_parser import parse_arguments
from .reporting import print_pair, print_separator


def setup_logging(verbose: bool = False) -> logging.Logger:
    """
    Configure logging for the CLI.

    Args:
        verbose: Enable verbose (DEBUG level) logging

    Returns:
        Configured logger instance
    """
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )
    return logging.getLogger(__name__)


class CLIOrchestrator:
    """
    Orchestrates the CLI workflow.

    Phases run strictly one after another: the cache is opened, files are
    gathered, every file is fingerprinted, then every pair is compared.
    """

    def __init__(self, argv=None):
        """
        Initialize the orchestrator.

        Args:
            argv: Argument list to parse instead of sys.argv
        """
        self.argv = argv
        self.logger = None
        self.args = None
        self.cache: Optional[FingerprintCache] = None
        self.files: list[str] = []
        self.fingerprints = {}
        self.cache_stats = CacheStats()
        self.pairs_reported = 0
        self.difftool_launches = 0

    def run(self) -> int:
        """
        Execute the complete CLI workflow.

        Returns:
            Exit code (0 for a completed run, 1 for a fatal error)

        Workflow phases:
        1. Setup & argument parsing
        2. Cache directory
        3. File gathering
        4. Fingerprinting
        5. Pair comparison & reporting
        """
        # Phase 1: Setup
        self._setup_phase()

        # Phase 2: Cache
        exit_code = self._cache_phase()
        if exit_code != 0:
            return exit_code

        # Phase 3: Gather files
        exit_code = self._gather_phase()
        if exit_code != 0:
            return exit_code

        # Phase 4: Fingerprints
        self._fingerprint_phase()

        # Phase 5: Compare & report
        self._compare_phase()

        return 0

    def _setup_phase(self) -> None:
        """Phase 1: Parse arguments and setup logging."""
        self.args = parse_arguments(self.argv)
        self.logger = setup_logging(self.args.verbose)

    def _cache_phase(self) -> int:
        """
        Phase 2: Open (and optionally prune) the fingerprint cache.

        Returns:
            0 for success, 1 if the cache directory cannot be established
        """
        if self.args.no_cache:
            self.logger.info("Cache disabled - fingerprinting all images fresh")
            return 0

        try:
            self.cache = FingerprintCache.open(get_user_config().home_dir)
        except CacheDirectoryError as e:
            self.logger.error(str(e))
            return 1

        if self.args.prune_cache is not None:
            removed = self.cache.prune(self.args.prune_cache)
            self.logger.info(
                f"Pruned {removed:,} cache entries older than {self.args.prune_cache:g} days"
            )
        return 0

    def _gather_phase(self) -> int:
        """
        Phase 3: Expand the path arguments into the candidate list.

        Returns:
            0 for success, 1 if none of the given paths exist
        """
        self.files = find_files(self.args.paths)
        self.logger.debug(f"Found {len(self.files):,} files")
        if not self.files and not any(os.path.exists(p) for p in self.args.paths):
            self.logger.error("None of the given paths exist")
            return 1
        return 0

    def _fingerprint_phase(self) -> None:
        """Phase 4: Fingerprint every candidate, through the cache."""
        self.fingerprints, self.cache_stats = build_fingerprint_map(
            self.files,
            self.args.subdivisions,
            cache=self.cache,
            show_progress=not self.args.no_progress,
        )

        if self.cache is not None:
            self.logger.debug(
                f"Cache: {self.cache_stats.cache_hits:,} hits, "
                f"{self.cache_stats.cache_misses:,} misses"
            )

    def _compare_phase(self) -> None:
        """Phase 5: Compare every pair, print matches, launch the diff tool."""
        for pair in find_duplicate_pairs(self.files, self.fingerprints, self.args.tolerance):
            print_pair(pair)
            if handle_pair(pair, self.args.difftool):
                self.difftool_launches += 1
            print_separator()
            self.pairs_reported += 1

        if self.cache is not None:
            cache_summary = f"{self.cache_stats.hit_rate:.1f}% cache hit rate"
        else:
            cache_summary = "cache disabled"
        self.logger.info(
            f"Reported {self.pairs_reported:,} pairs among "
            f"{len(self.fingerprints):,} fingerprinted files ({cache_summary})"
        )


__all__ = ['CLIOrchestrator', 'setup_logging']
