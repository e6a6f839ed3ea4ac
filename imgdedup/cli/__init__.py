"""
CLI package for imgdedup.

Provides the command-line interface: scan files and directories, report
near-duplicate pairs and optionally open them in an external diff tool.

Public API:
- main: Entry point for CLI execution
- CLIOrchestrator: CLI workflow orchestration class
- print_pair: Function to display one reported pair
- launch_difftool: Function to run the external diff tool
"""

from __future__ import annotations

from .orchestrator import CLIOrchestrator, setup_logging
from .arg_parser import create_parser, parse_arguments
from .actions import launch_difftool, handle_pair
from .reporting import print_pair, print_separator


def main(argv=None) -> int:
    """
    Main entry point for the CLI.

    Delegates to CLIOrchestrator to execute the complete workflow.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    orchestrator = CLIOrchestrator(argv)
    return orchestrator.run()


__all__ = [
    # Main entry point
    'main',
    # Core classes
    'CLIOrchestrator',
    # Utilities
    'setup_logging',
    'create_parser',
    'parse_arguments',
    'launch_difftool',
    'handle_pair',
    'print_pair',
    'print_separator',
]
