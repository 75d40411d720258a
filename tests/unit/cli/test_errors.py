"""Unit tests for cli.errors and cli.models modules."""

import pytest

from src.cli.errors import (
    CLIError,
    ConfigError,
    ConfigNotFoundError,
    CommandError,
    LocalIOError,
)
from src.cli.models import ExitCode, Stage
from src.outline_client.errors import OutlineError, SyncError


class TestCLIErrorHierarchy:
    """Test cases for the CLI exception hierarchy."""

    @pytest.mark.parametrize("error_class", [ConfigError, ConfigNotFoundError, CommandError, LocalIOError])
    def test_inherits_from_cli_error(self, error_class):
        assert issubclass(error_class, CLIError)
        assert issubclass(error_class, SyncError)

    def test_config_error_with_field(self):
        error = ConfigError("API key is missing", "api_key")
        assert str(error) == "Configuration error in field 'api_key': API key is missing"
        assert error.config_field == "api_key"

    def test_config_error_without_field(self):
        error = ConfigError("bad file")
        assert str(error) == "Configuration error: bad file"
        assert error.config_field is None

    def test_config_not_found_error(self):
        error = ConfigNotFoundError("/home/u/.outline-cli/config.json")
        assert isinstance(error, ConfigError)
        assert error.config_path == "/home/u/.outline-cli/config.json"
        assert "/home/u/.outline-cli/config.json" in str(error)


class TestCommandError:
    """Test cases for CommandError and LocalIOError."""

    def test_message_is_stage_and_cause(self):
        cause = OutlineError("API error")
        error = CommandError(Stage.FETCH_DOCUMENT, cause)

        assert str(error) == "fetching document: API error"
        assert error.stage == Stage.FETCH_DOCUMENT
        assert error.stage == "fetching document"
        assert error.cause is cause

    def test_local_io_error_keeps_path(self):
        cause = FileNotFoundError(2, "No such file or directory")
        error = LocalIOError(Stage.READ_FILE, "doc456.md", cause)

        assert str(error).startswith("reading file: ")
        assert error.path == "doc456.md"
        assert isinstance(error, CommandError)


class TestModels:
    """Test cases for CLI enums."""

    def test_exit_codes(self):
        assert ExitCode.SUCCESS == 0
        assert ExitCode.GENERAL_ERROR == 1
        assert ExitCode.AUTH_ERROR == 3
        assert ExitCode.NETWORK_ERROR == 4

    def test_stage_str_is_label(self):
        assert str(Stage.LOAD_CONFIG) == "loading config"
        assert f"{Stage.WRITE_FILE}" == "writing file"
