"""Unit tests for outline_client.models module."""

import pytest

from src.outline_client.models import Document


class TestDocumentFromApi:
    """Test cases for Document.from_api."""

    def test_maps_known_fields(self):
        """id, title, text and version are copied."""
        document = Document.from_api(
            {"id": "doc123", "title": "Test", "text": "# Body", "version": 4}
        )
        assert document == Document(id="doc123", title="Test", text="# Body", version=4)

    def test_ignores_unknown_fields(self):
        """Extra API fields are ignored."""
        document = Document.from_api(
            {"id": "doc123", "urlId": "abc", "collectionId": "c1", "text": "x"}
        )
        assert document.id == "doc123"
        assert document.text == "x"

    def test_defaults_missing_fields(self):
        """Missing fields default to empty values."""
        document = Document.from_api({"id": "doc123"})
        assert document.title == ""
        assert document.text == ""
        assert document.version == 0

    def test_null_fields_default(self):
        """null text or title decodes as empty string."""
        document = Document.from_api({"id": "doc123", "title": None, "text": None})
        assert document.title == ""
        assert document.text == ""

    def test_rejects_non_object(self):
        """Non-mapping data raises TypeError."""
        with pytest.raises(TypeError):
            Document.from_api(["doc123"])

    def test_rejects_non_numeric_version(self):
        """A non-numeric version raises ValueError."""
        with pytest.raises(ValueError):
            Document.from_api({"id": "doc123", "version": "latest"})
