"""
Allow running the package with: python -m imgdedup

Examples:
    python -m imgdedup ~/Pictures          # Scan for near-duplicates
    python -m imgdedup config              # Show configuration and cache info
    python -m imgdedup config --init       # Create example config file
"""

import sys


def show_config() -> int:
    from .cache import FingerprintCache
    from .exceptions import CacheDirectoryError
    from .models import format_size
    from .user_config import get_user_config

    config = get_user_config()

    if '--init' in sys.argv or '-i' in sys.argv:
        if config.create_example_config():
            print("Created example configuration file at:")
            print(f"  {config.config_file_path}")
            return 0
        print("Failed to create configuration file.")
        return 1

    print(f"Configuration file: {config.config_file_path}")
    if config.config_file_path.exists():
        print("Status: found")
    else:
        print("Status: not found (using defaults)")
        print("\nRun 'python -m imgdedup config --init' to create one.")

    print("\nCurrent settings:")
    print(f"  subdivisions: {config.subdivisions}")
    print(f"  tolerance: {config.tolerance}")
    print(f"  difftool: {config.difftool or '(none)'}")
    print(f"  cache_max_age_days: {config.cache_max_age_days:g}")

    try:
        stats = FingerprintCache.open(config.home_dir).get_stats()
    except (CacheDirectoryError, OSError) as e:
        print(f"\nCache unavailable: {e}")
        return 1
    print(f"\nCache: {stats['cache_dir']}")
    print(f"  entries: {stats['total_entries']:,} ({format_size(stats['total_size'])})")
    return 0


def main():
    if len(sys.argv) > 1 and sys.argv[1] == 'config':
        # Remove 'config' from argv
        sys.argv.pop(1)
        sys.exit(show_config())

    from .cli import main as cli_main
    sys.exit(cli_main())


if __name__ == '__main__':
    main()
