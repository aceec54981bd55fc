"""Tests for metadata scopes."""

import pytest

from folio.core.metadata import Metadata


@pytest.fixture
def root_metadata():
    """Create a root scope."""
    return Metadata({"Title": "Home", "Layout": "page"})


class TestMetadata:
    """Tests for Metadata class."""

    def test_local_lookup(self, root_metadata):
        """Test local entries are returned."""
        assert root_metadata["Title"] == "Home"
        assert root_metadata.get("Layout") == "page"

    def test_missing_key(self, root_metadata):
        """Test missing keys report not-found."""
        assert root_metadata.get("Missing") is None
        assert root_metadata.get("Missing", 42) == 42
        assert "Missing" not in root_metadata
        with pytest.raises(KeyError):
            root_metadata["Missing"]

    def test_parent_fallback(self, root_metadata):
        """Test lookups fall back to the parent scope."""
        child = Metadata({"Draft": True}, parent=root_metadata)
        assert child["Draft"] is True
        assert child["Title"] == "Home"
        assert "Layout" in child

    def test_override_shadows_parent(self, root_metadata):
        """Test local entries shadow the parent's."""
        child = root_metadata.with_overrides({"Title": "About"})
        assert child["Title"] == "About"
        assert root_metadata["Title"] == "Home"
        assert child.parent is root_metadata

    def test_parent_can_be_plain_mapping(self):
        """Test a dictionary works as the parent scope."""
        global_metadata = {"InputPath": "/site/input"}
        scope = Metadata(parent=global_metadata)
        assert scope["InputPath"] == "/site/input"

        global_metadata["OutputPath"] = "/site/output"
        assert scope["OutputPath"] == "/site/output"

    def test_items_are_copied(self):
        """Test later changes to the source dict are not visible."""
        items = {"Title": "Home"}
        scope = Metadata(items)
        items["Title"] = "Changed"
        items["Extra"] = 1
        assert scope["Title"] == "Home"
        assert "Extra" not in scope

    def test_local_view_is_read_only(self, root_metadata):
        """Test the local entries cannot be mutated."""
        with pytest.raises(TypeError):
            root_metadata.local["Title"] = "Changed"

    def test_iteration_order(self, root_metadata):
        """Test local keys come first, then unshadowed parent keys."""
        child = Metadata({"Draft": True, "Title": "About"}, parent=root_metadata)
        assert list(child) == ["Draft", "Title", "Layout"]
        assert len(child) == 3
        assert dict(child) == {"Draft": True, "Title": "About", "Layout": "page"}

    def test_empty_scope(self):
        """Test an empty scope without parent."""
        scope = Metadata()
        assert len(scope) == 0
        assert list(scope) == []
        assert scope.parent is None

    def test_none_overrides(self, root_metadata):
        """Test None overrides behave like an empty mapping."""
        child = root_metadata.with_overrides(None)
        assert dict(child) == dict(root_metadata)
