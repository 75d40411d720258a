"""Client interface and factory for Outline document operations.

Command logic depends on the DocumentClient protocol rather than on
OutlineClient, so any object implementing the four document operations can
stand in for the real transport (e.g. a scripted stub in tests). Commands
receive a ClientFactory explicitly; there is no module-level factory to
patch or restore.
"""

from typing import Any, Callable, Dict, List, Protocol, runtime_checkable

from .auth import OutlineConfig
from .client import OutlineClient
from .models import Document


@runtime_checkable
class DocumentClient(Protocol):
    """The document operations every client must provide."""

    def get_document(self, doc_id: str, verbose: bool = False) -> Document:
        ...

    def update_document(self, doc_id: str, text: str, verbose: bool = False) -> None:
        ...

    def list_documents(self, verbose: bool = False) -> List[Document]:
        ...

    def create_document(
        self,
        title: str,
        text: str,
        collection_id: str,
        verbose: bool = False,
    ) -> Document:
        ...


@runtime_checkable
class ServiceClient(DocumentClient, Protocol):
    """A DocumentClient that also supports connection checks and publishing."""

    def auth_info(self, verbose: bool = False) -> Dict[str, Any]:
        ...

    def publish_document(self, doc_id: str, verbose: bool = False) -> None:
        ...


ClientFactory = Callable[[OutlineConfig], DocumentClient]


def default_client_factory(config: OutlineConfig) -> DocumentClient:
    """Create a real HTTP client bound to config."""
    return OutlineClient(config)
