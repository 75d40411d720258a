"""Typed exception hierarchy for CLI-related errors.

This module defines all custom exceptions used by the CLI.
All exceptions inherit from CLIError base class for easy catching and
include descriptive messages with context to help with debugging.
"""

from typing import Optional

from src.outline_client.errors import SyncError


class CLIError(SyncError):
    """Base exception for all CLI-related errors."""
    pass


class ConfigError(CLIError):
    """Raised when configuration is unreadable, malformed or incomplete."""

    def __init__(self, message: str, config_field: Optional[str] = None):
        if config_field:
            full_message = f"Configuration error in field '{config_field}': {message}"
        else:
            full_message = f"Configuration error: {message}"
        super().__init__(full_message)
        self.config_field = config_field


class ConfigNotFoundError(ConfigError):
    """Raised when no configuration file exists and the environment is incomplete."""

    def __init__(self, config_path: str):
        super().__init__(
            f"no configuration file at {config_path} and "
            f"OUTLINE_API_KEY/OUTLINE_URL are not set"
        )
        self.config_path = config_path


class CommandError(CLIError):
    """Raised when a command stage fails.

    The message is ``"{stage}: {cause}"``. The stage is kept as an attribute so
    callers can branch on where the command failed without parsing text.
    """

    def __init__(self, stage: str, cause: Exception):
        self.stage = stage
        self.cause = cause
        super().__init__(f"{stage}: {cause}")


class LocalIOError(CommandError):
    """Raised when reading or writing a local document file fails."""

    def __init__(self, stage: str, path: str, cause: Exception):
        super().__init__(stage, cause)
        self.path = path
