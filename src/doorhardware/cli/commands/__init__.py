"""CLI command implementations for the doorhw application.

This package contains subcommands for the doorhw CLI, including:
- validate: Validate a configuration file
"""

from doorhardware.cli.commands.validate import display_load_error, validate_command

__all__ = ["display_load_error", "validate_command"]
