"""Data models for the Outline client.

All models use dataclasses for clean, type-safe data structures,
following the patterns established in src/cli/models.py.
"""

from dataclasses import dataclass
from typing import Any, Dict


@dataclass
class Document:
    """A document as returned by the Outline API.

    Attributes:
        id: Service-assigned opaque identifier
        title: Document title
        text: Authoritative Markdown body
        version: Informational revision number (not used for conflict detection)
    """
    id: str
    title: str = ""
    text: str = ""
    version: int = 0

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "Document":
        """Build a Document from an API payload, ignoring unknown fields.

        Args:
            data: The decoded JSON object found under the ``data`` envelope

        Returns:
            Document with missing fields defaulted

        Raises:
            TypeError: If data is not a JSON object
        """
        if not isinstance(data, dict):
            raise TypeError(
                f"document must be a JSON object, got {type(data).__name__}"
            )
        return cls(
            id=str(data.get("id") or ""),
            title=data.get("title") or "",
            text=data.get("text") or "",
            version=int(data.get("version") or 0),
        )
