"""Data models for CLI operations.

This module defines the enums shared by the CLI module, following the
patterns established in src/outline_client/models.py.
"""

from enum import Enum, IntEnum


class ExitCode(IntEnum):
    """Exit codes for CLI operations.

    - SUCCESS (0): Operation completed successfully
    - GENERAL_ERROR (1): General error (config issues, file I/O, API errors)
    - AUTH_ERROR (3): The service rejected the API key (401/403)
    - NETWORK_ERROR (4): The service could not be reached

    Example:
        >>> exit_code = ExitCode.SUCCESS
        >>> sys.exit(exit_code)
    """
    SUCCESS = 0
    GENERAL_ERROR = 1
    AUTH_ERROR = 3
    NETWORK_ERROR = 4


class Stage(str, Enum):
    """Named phases of a command pipeline, used to tag CommandError."""
    LOAD_CONFIG = "loading config"
    FETCH_DOCUMENT = "fetching document"
    WRITE_FILE = "writing file"
    READ_FILE = "reading file"
    UPDATE_DOCUMENT = "updating document"
    LIST_DOCUMENTS = "listing documents"
    CREATE_DOCUMENT = "creating document"
    CHECK_CONNECTION = "checking connection"
    PUBLISH_DOCUMENT = "publishing document"

    def __str__(self) -> str:
        return self.value
