"""Command-line interface for Outline document sync.

This package provides the `outline` CLI tool that pulls Outline documents to
local Markdown files, pushes local edits back, lists documents and creates
new ones. It turns each invocation into a staged pipeline with progress
indication and stage-tagged error handling.
"""

from .document_commands import DocumentCommands
from .config import ConfigLoader
from .models import ExitCode, Stage
from .errors import (
    CLIError,
    ConfigError,
    ConfigNotFoundError,
    CommandError,
    LocalIOError,
)

__all__ = [
    'DocumentCommands',
    'ConfigLoader',
    'ExitCode',
    'Stage',
    'CLIError',
    'ConfigError',
    'ConfigNotFoundError',
    'CommandError',
    'LocalIOError',
]
