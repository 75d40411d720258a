"""HTTP client for the Outline document API.

This module translates the document operations used by the CLI into
authenticated POST requests against Outline's RPC-style endpoints
(``/api/documents.info`` and friends) and normalizes the service's
heterogeneous responses into Document objects or typed exceptions.

Every request goes through the same pipeline, and each step raises its own
exception type so callers can tell where a failure happened:

    1. creating request       -> RequestBuildError
    2. executing request      -> TransportError
    3. reading response body  -> TransportError
    4. status evaluation      -> RemoteAPIError / RemoteStatusError
    5. decoding response      -> ResponseDecodeError

Nothing is retried and no timeout is applied.
"""

import json
import logging
from typing import Any, Dict, List, Optional, Tuple

import requests
from rich.console import Console

from .auth import OutlineConfig, auth_headers, mask_api_key, normalize_url
from .errors import (
    RemoteAPIError,
    RemoteStatusError,
    RequestBuildError,
    ResponseDecodeError,
    TransportError,
)
from .models import Document

logger = logging.getLogger(__name__)


class OutlineClient:
    """Authenticated client for a single Outline instance.

    The client holds one requests.Session carrying the bearer token and JSON
    headers. It keeps no other state between calls.

    Every operation accepts ``verbose``. When set, the request URL, headers
    (with the token masked), body, response status and response body are
    echoed to the diagnostic console. Echoing never changes what is sent
    or returned.

    Example:
        >>> config = OutlineConfig(api_key="...", base_url="https://docs.example.com")
        >>> client = OutlineClient(config)
        >>> doc = client.get_document("my-doc-abc123")
        >>> print(doc.title)
    """

    def __init__(
        self,
        config: OutlineConfig,
        session: Optional[requests.Session] = None,
        console: Optional[Console] = None,
    ):
        """Initialize the client.

        Args:
            config: Connection settings (API key and base URL)
            session: Optional requests session (a new one is created by default)
            console: Optional console for verbose echo (stderr by default)
        """
        self.config = config
        self._session = session or requests.Session()
        self._session.headers.update(auth_headers(config))
        self._console = console or Console(stderr=True, highlight=False)

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self._session.close()

    def __enter__(self) -> "OutlineClient":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()

    def get_document(self, doc_id: str, verbose: bool = False) -> Document:
        """Fetch a document by its ID.

        Args:
            doc_id: Opaque document identifier (url id or uuid)
            verbose: Echo the exchange to the diagnostic console

        Returns:
            The fetched Document

        Raises:
            RemoteAPIError: Service answered with an ``{error, message}`` payload
            RemoteStatusError: Service answered non-2xx without such a payload
            RequestBuildError, TransportError, ResponseDecodeError: see module docs
        """
        status, body = self._post(
            "documents.info", {"id": doc_id}, verbose, structured_errors=True
        )
        return self._decode_document(status, body)

    def update_document(self, doc_id: str, text: str, verbose: bool = False) -> None:
        """Replace a document's full text.

        The response body of a successful update is ignored.

        Raises:
            RemoteStatusError: Service answered non-2xx
        """
        self._post("documents.update", {"id": doc_id, "text": text}, verbose)

    def list_documents(self, verbose: bool = False) -> List[Document]:
        """List documents in the order the service returns them.

        A ``null`` data value is an empty listing.

        Raises:
            RemoteStatusError: Service answered non-2xx
            ResponseDecodeError: ``data`` is missing or not a list of objects
        """
        status, body = self._post("documents.list", None, verbose)
        data = self._decode_envelope(status, body)
        if data is None:
            return []
        if not isinstance(data, list):
            raise ResponseDecodeError(
                ValueError(f"expected a list under 'data', got {type(data).__name__}"),
                status_code=status,
                body=body,
            )
        try:
            return [Document.from_api(item) for item in data]
        except (TypeError, ValueError) as e:
            raise ResponseDecodeError(e, status_code=status, body=body) from e

    def create_document(
        self,
        title: str,
        text: str,
        collection_id: str,
        verbose: bool = False,
    ) -> Document:
        """Create a document in a collection.

        Returns:
            The new Document, including its server-assigned ID

        Raises:
            RemoteStatusError: Service answered non-2xx
        """
        payload = {"title": title, "text": text, "collectionId": collection_id}
        status, body = self._post("documents.create", payload, verbose)
        return self._decode_document(status, body)

    def auth_info(self, verbose: bool = False) -> Dict[str, Any]:
        """Check that the API key is accepted by the service.

        Returns:
            The ``data`` object describing the authenticated user and team
        """
        status, body = self._post("auth.info", {}, verbose, structured_errors=True)
        data = self._decode_envelope(status, body)
        return data if isinstance(data, dict) else {}

    def publish_document(self, doc_id: str, verbose: bool = False) -> None:
        """Publish a draft document."""
        self._post("documents.update", {"id": doc_id, "publish": True}, verbose)

    def _post(
        self,
        endpoint: str,
        payload: Optional[Dict[str, Any]],
        verbose: bool,
        structured_errors: bool = False,
    ) -> Tuple[int, str]:
        """Send one POST request and return its status and fully buffered body.

        Args:
            endpoint: RPC method name, e.g. ``documents.info``
            payload: JSON body, or None to send no body
            verbose: Echo the exchange to the diagnostic console
            structured_errors: Decode ``{error, message}`` payloads on failure

        Returns:
            Tuple of (status_code, body_text) for 2xx responses
        """
        url = f"{normalize_url(self.config.base_url)}/api/{endpoint}"

        try:
            request = self._session.prepare_request(
                requests.Request("POST", url, json=payload)
            )
        except (requests.RequestException, TypeError, ValueError) as e:
            raise RequestBuildError(e) from e

        if verbose:
            self._echo_request(request)
        logger.debug(f"POST {url}")

        try:
            response = self._session.send(request, stream=True)
        except requests.RequestException as e:
            logger.error(f"Request to {url} failed: {type(e).__name__}")
            raise TransportError(e) from e

        try:
            try:
                raw_body = response.content
            except (requests.RequestException, OSError) as e:
                raise TransportError(e, stage="reading response body") from e
        finally:
            response.close()

        body = _decode_body(raw_body, response.encoding)
        status = response.status_code

        if verbose:
            self._echo(f"Response status: {status} {response.reason or ''}".rstrip())
            self._echo(f"Response body: {body}")
        logger.debug(f"{endpoint} answered {status} ({len(raw_body)} bytes)")

        if not 200 <= status < 300:
            logger.error(f"{endpoint} failed with status {status}")
            if structured_errors:
                api_error = _parse_error_payload(body)
                if api_error is not None:
                    raise RemoteAPIError(status, *api_error)
            raise RemoteStatusError(status, body)

        return status, body

    def _decode_envelope(self, status: int, body: str) -> Any:
        try:
            envelope = json.loads(body)
        except ValueError as e:
            raise ResponseDecodeError(e, status_code=status, body=body) from e
        if not isinstance(envelope, dict) or "data" not in envelope:
            raise ResponseDecodeError(
                ValueError("response has no 'data' envelope"),
                status_code=status,
                body=body,
            )
        return envelope["data"]

    def _decode_document(self, status: int, body: str) -> Document:
        data = self._decode_envelope(status, body)
        try:
            return Document.from_api(data)
        except (TypeError, ValueError) as e:
            raise ResponseDecodeError(e, status_code=status, body=body) from e

    def _echo_request(self, request: requests.PreparedRequest) -> None:
        self._echo(f"Making request to: {request.url}")
        self._echo("Request headers:")
        for name, value in request.headers.items():
            if name.lower() == "authorization":
                value = f"Bearer {mask_api_key(self.config.api_key)}"
            self._echo(f"  {name}: {value}")
        body = request.body
        if isinstance(body, bytes):
            body = body.decode("utf-8", errors="replace")
        self._echo(f"Request body: {body or ''}")

    def _echo(self, line: str) -> None:
        self._console.print(line, markup=False, highlight=False, soft_wrap=True)


def _decode_body(raw_body: bytes, encoding: Optional[str]) -> str:
    """Decode a response body with its declared charset, UTF-8 if unknown."""
    try:
        return raw_body.decode(encoding or "utf-8", errors="replace")
    except LookupError:
        logger.warning(f"Unknown response charset '{encoding}', decoding as UTF-8")
        return raw_body.decode("utf-8", errors="replace")


def _parse_error_payload(body: str) -> Optional[Tuple[str, str]]:
    """Extract (error, message) from an Outline error body, if it has one."""
    try:
        payload = json.loads(body)
    except ValueError:
        return None
    if not isinstance(payload, dict):
        return None
    if "error" not in payload and "message" not in payload:
        return None
    return str(payload.get("error") or ""), str(payload.get("message") or "")
