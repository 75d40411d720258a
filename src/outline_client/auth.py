"""Connection settings for the Outline API.

This module holds the immutable settings a client is bound to and the helpers
that derive request headers from them. The API key is never logged in clear;
use mask_api_key() whenever it has to be shown.
"""

from typing import Dict, NamedTuple, Optional


class OutlineConfig(NamedTuple):
    """Outline connection settings for one command invocation."""
    api_key: str
    base_url: str
    collection_id: Optional[str] = None


def mask_api_key(key: str) -> str:
    """Mask an API key for display, keeping only its first and last 4 characters.

    Example:
        >>> mask_api_key("ol_api_1234567890abcd")
        'ol_a...abcd'
    """
    if len(key) <= 8:
        return "****"
    return key[:4] + "..." + key[-4:]


def normalize_url(base_url: str) -> str:
    """Strip one trailing slash so endpoint paths can be appended safely."""
    if base_url.endswith("/"):
        return base_url[:-1]
    return base_url


def auth_headers(config: OutlineConfig) -> Dict[str, str]:
    """Headers sent with every Outline API request."""
    return {
        "Authorization": f"Bearer {config.api_key}",
        "Accept": "application/json",
        "Content-Type": "application/json",
    }
