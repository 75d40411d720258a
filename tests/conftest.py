"""Root pytest configuration for all tests."""

import logging

import pytest

# Keep urllib3 connection chatter out of captured logs.
logging.getLogger("urllib3").setLevel(logging.WARNING)


@pytest.fixture(autouse=True)
def isolated_outline_env(monkeypatch):
    """Keep developer OUTLINE_* variables and .env files out of every test."""
    for name in ("OUTLINE_API_KEY", "OUTLINE_URL", "OUTLINE_COLLECTION_ID"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr("src.cli.config.load_dotenv", lambda *args, **kwargs: False)
