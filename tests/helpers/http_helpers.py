"""HTTP test helpers for exercising OutlineClient without a network.

Tests build a real requests.Session, patch its ``send`` method, and return
real requests.Response objects whose body is served from memory. Everything
up to the socket (URL joining, header merging, JSON encoding) is real.
"""

import io
from typing import Any, Dict, Optional
from unittest.mock import Mock, patch

import requests


REASONS = {200: "OK", 400: "Bad Request", 401: "Unauthorized", 403: "Forbidden",
           404: "Not Found", 500: "Internal Server Error"}


def make_response(
    status_code: int = 200,
    body: bytes = b"",
    headers: Optional[Dict[str, str]] = None,
) -> requests.Response:
    """Build a streamed requests.Response whose raw body is an in-memory buffer."""
    response = requests.Response()
    response.status_code = status_code
    response.reason = REASONS.get(status_code, "")
    response.raw = io.BytesIO(body)
    response.headers.update(headers or {"Content-Type": "application/json; charset=utf-8"})
    response.encoding = requests.utils.get_encoding_from_headers(response.headers)
    return response


def patch_send(session: requests.Session, **kwargs: Any):
    """Patch session.send; kwargs go to Mock (return_value / side_effect)."""
    return patch.object(session, "send", Mock(**kwargs))


def sent_request(send_mock: Mock, index: int = -1) -> requests.PreparedRequest:
    """The PreparedRequest passed to the patched send on a given call."""
    return send_mock.call_args_list[index].args[0]
