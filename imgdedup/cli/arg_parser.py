"""
Argument parsing for the CLI interface.

Provides functions to create and configure the argument parser for the
imgdedup command-line interface.
"""

from __future__ import annotations

import argparse

from .. import __version__
from ..user_config import get_user_config


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1, got {number}")
    return number


def _non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {number}")
    return number


def create_parser() -> argparse.ArgumentParser:
    """
    Create and configure the argument parser for the CLI.

    Defaults for --subdivisions, --tolerance and --diff come from the user
    configuration (config file or IMGDEDUP_* environment variables).

    Returns:
        Configured ArgumentParser instance
    """
    user_config = get_user_config()

    parser = argparse.ArgumentParser(
        prog='imgdedup',
        usage='%(prog)s [options] <directories/files> ...',
        description='Find visually similar or duplicate images',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s ~/Pictures
      Report near-duplicate images

  %(prog)s ~/Pictures --tolerance 50
      Stricter matching

  %(prog)s ~/Pictures --diff meld
      Open each near-duplicate pair with differing file sizes in meld

  %(prog)s ~/Pictures --subdivisions 20 --no-cache
      Finer fingerprints, computed fresh without touching the cache
        """
    )

    # Positional argument
    parser.add_argument(
        'paths',
        nargs='+',
        help='Image files and/or directories to scan'
    )

    # Matching options
    parser.add_argument(
        '-s', '--subdivisions',
        type=_positive_int,
        default=user_config.subdivisions,
        help=f'Slices per axis. Default: {user_config.subdivisions}'
    )

    parser.add_argument(
        '-t', '--tolerance',
        type=_non_negative_int,
        default=user_config.tolerance,
        help=f'Color delta tolerance, higher = more tolerant. Default: {user_config.tolerance}'
    )

    parser.add_argument(
        '-d', '--diff',
        dest='difftool',
        default=user_config.difftool,
        metavar='CMD',
        help='Command to pass near-duplicate images to, run as: CMD left right'
    )

    # Caching
    parser.add_argument(
        '--no-cache',
        action='store_true',
        help='Do not read or write the fingerprint cache'
    )

    parser.add_argument(
        '--prune-cache',
        type=float,
        nargs='?',
        const=user_config.cache_max_age_days,
        default=None,
        metavar='DAYS',
        help=(
            'Delete cache entries older than DAYS before scanning. '
            f'Default when given without a value: {user_config.cache_max_age_days:g}'
        )
    )

    # Output options
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Verbose output'
    )

    parser.add_argument(
        '--no-progress',
        action='store_true',
        help='Disable the progress bar (useful for piping output)'
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {__version__}'
    )

    return parser


def parse_arguments(argv=None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Args:
        argv: List of argument strings (default: sys.argv)

    Returns:
        Parsed arguments as Namespace object

    Examples:
        >>> args = parse_arguments(['/path/to/photos', '--tolerance', '50'])
        >>> args.paths
        ['/path/to/photos']
        >>> args.tolerance
        50
    """
    parser = create_parser()
    return parser.parse_args(argv)


__all__ = [
    'create_parser',
    'parse_arguments',
]
