"""Test helper modules for Outline client testing.

- http_helpers: in-memory responses and a patched requests.Session.send
"""

from .http_helpers import make_response, patch_send, sent_request

__all__ = [
    'make_response',
    'patch_send',
    'sent_request',
]
