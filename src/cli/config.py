"""Configuration loading for the outline CLI.

Settings come from a config file (``~/.outline-cli/config.json`` by default)
and from the environment. Environment variables, optionally loaded from a
``.env`` file via python-dotenv, take precedence over file values.

Config file structure (JSON or YAML):
    {
      "api_key": "ol_api_...",
      "outline_url": "https://docs.example.com",
      "collection_id": "8f2de8e6-..."        # optional, default for create
    }
"""

import json
import os
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv

from src.outline_client.auth import OutlineConfig
from .errors import ConfigError, ConfigNotFoundError


class ConfigLoader:
    """Loads and validates Outline connection settings.

    Environment variables:
        OUTLINE_API_KEY: API key (overrides ``api_key``)
        OUTLINE_URL: Base URL of the Outline instance (overrides ``outline_url``)
        OUTLINE_COLLECTION_ID: Default collection for new documents

    A missing config file is only an error when the environment does not
    provide both the API key and the URL.
    """

    DEFAULT_CONFIG_PATH = os.path.join("~", ".outline-cli", "config.json")

    ENV_API_KEY = "OUTLINE_API_KEY"
    ENV_URL = "OUTLINE_URL"
    ENV_COLLECTION_ID = "OUTLINE_COLLECTION_ID"

    # File keys accepted for the base URL, in priority order
    URL_FIELDS = ("outline_url", "base_url")

    @classmethod
    def load(cls, config_path: Optional[str] = None) -> OutlineConfig:
        """Load settings from the config file and environment.

        Args:
            config_path: Path to the config file (defaults to DEFAULT_CONFIG_PATH)

        Returns:
            Validated OutlineConfig

        Raises:
            ConfigNotFoundError: If the file is missing and the environment is incomplete
            ConfigError: If the file is unreadable, malformed, or a field is invalid
        """
        load_dotenv()

        path = os.path.expanduser(config_path or cls.DEFAULT_CONFIG_PATH)
        file_values = cls._read_file(path)

        api_key = os.getenv(cls.ENV_API_KEY)
        base_url = os.getenv(cls.ENV_URL)
        collection_id = os.getenv(cls.ENV_COLLECTION_ID)

        if file_values is None:
            if not (api_key and base_url):
                raise ConfigNotFoundError(path)
            file_values = {}

        if not api_key:
            api_key = cls._string_field(file_values, "api_key")
        if not base_url:
            for field_name in cls.URL_FIELDS:
                base_url = cls._string_field(file_values, field_name)
                if base_url:
                    break
        if not collection_id:
            collection_id = cls._string_field(file_values, "collection_id")

        if not api_key:
            raise ConfigError("API key is missing", "api_key")
        if not base_url:
            raise ConfigError("Outline URL is missing", "outline_url")
        if not base_url.startswith(("http://", "https://")):
            raise ConfigError(
                f"Outline URL must start with http:// or https://, got '{base_url}'",
                "outline_url",
            )

        return OutlineConfig(
            api_key=api_key,
            base_url=base_url,
            collection_id=collection_id or None,
        )

    @classmethod
    def _read_file(cls, path: str) -> Optional[Dict[str, Any]]:
        """Read and parse the config file.

        Returns:
            The parsed mapping, or None if the file does not exist
        """
        try:
            with open(path, 'r', encoding='utf-8') as f:
                content = f.read()
        except FileNotFoundError:
            return None
        except PermissionError:
            raise ConfigError(f"cannot read {path}: Permission denied")
        except OSError as e:
            raise ConfigError(f"cannot read {path}: {e}")

        if not content.strip():
            return {}

        # Tab-indented JSON is not valid YAML, so try strict JSON first
        try:
            values = json.loads(content)
        except ValueError:
            try:
                values = yaml.safe_load(content)
            except yaml.YAMLError as e:
                raise ConfigError(f"invalid syntax in {path}: {e}")

        if values is None:
            return {}
        if not isinstance(values, dict):
            raise ConfigError(
                f"config must be a mapping, got {type(values).__name__}"
            )
        return values

    @staticmethod
    def _string_field(values: Dict[str, Any], name: str) -> Optional[str]:
        value = values.get(name)
        if value is None:
            return None
        if not isinstance(value, str):
            raise ConfigError(
                f"must be a string, got {type(value).__name__}", name
            )
        return value.strip() or None
