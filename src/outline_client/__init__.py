"""Outline client library for outline-sync.

This package provides Python abstractions over the Outline document API,
enabling clean and type-safe interactions with Outline documents.
"""

from .auth import OutlineConfig, mask_api_key, normalize_url
from .client import OutlineClient
from .errors import (
    SyncError,
    OutlineError,
    StageError,
    RequestBuildError,
    TransportError,
    ResponseDecodeError,
    RemoteAPIError,
    RemoteStatusError,
)
from .interface import (
    ClientFactory,
    DocumentClient,
    ServiceClient,
    default_client_factory,
)
from .models import Document

__all__ = [
    "OutlineConfig",
    "mask_api_key",
    "normalize_url",
    "OutlineClient",
    "Document",
    "DocumentClient",
    "ServiceClient",
    "ClientFactory",
    "default_client_factory",
    "SyncError",
    "OutlineError",
    "StageError",
    "RequestBuildError",
    "TransportError",
    "ResponseDecodeError",
    "RemoteAPIError",
    "RemoteStatusError",
]
