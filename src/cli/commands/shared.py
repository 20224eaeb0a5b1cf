"""Shared helpers re-exported for command modules."""

from src.cli.shared.console import CLIConsole, console, with_error_handling

__all__ = ["CLIConsole", "console", "with_error_handling"]
