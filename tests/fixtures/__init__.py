"""Test fixtures for outline-sync tests.

This module provides test fixtures for:
- Sample Outline configs and API payloads
- A scripted stub client for command tests
"""

from .outline_fixtures import (
    TEST_CONFIG,
    TEST_CONFIG_WITH_COLLECTION,
    StubClient,
    data_envelope,
    document_payload,
    error_envelope,
)

__all__ = [
    'TEST_CONFIG',
    'TEST_CONFIG_WITH_COLLECTION',
    'StubClient',
    'data_envelope',
    'document_payload',
    'error_envelope',
]
