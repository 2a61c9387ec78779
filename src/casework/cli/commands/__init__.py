"""CLI command implementations for the casework application.

This package contains subcommands for the casework CLI, including:
- validate: Check a project file for errors and advisories
"""

from casework.cli.commands.validate import display_load_error, validate_command

__all__ = ["display_load_error", "validate_command"]
