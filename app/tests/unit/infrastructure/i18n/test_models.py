"""Tests for infrastructure.i18n.models module."""

import pytest

from infrastructure.i18n.exceptions import InvalidCatalogError, InvalidNamespaceError
from infrastructure.i18n.models import (
    MessageLeaf,
    MessageNode,
    PreferenceEntry,
    ResolutionResult,
    TranslationCatalog,
    language_of,
)
from tests.factories.i18n import make_translation_catalog


class TestLocaleTagHelpers:
    """Tests for locale tag helpers."""

    def test_language_of(self):
        """language_of() extracts the lowercased language code."""
        assert language_of("en-US") == "en"
        assert language_of("FR-fr") == "fr"
        assert language_of("id") == "id"


class TestPreferenceEntry:
    """Tests for PreferenceEntry model."""

    def test_defaults(self):
        """PreferenceEntry defaults to full quality and valid."""
        entry = PreferenceEntry(code="fr-ca")
        assert entry.quality == 1.0
        assert entry.valid is True

    def test_is_frozen(self):
        """PreferenceEntry is immutable."""
        entry = PreferenceEntry(code="en")
        with pytest.raises(AttributeError):
            entry.quality = 0.5


class TestMessageNode:
    """Tests for MessageNode model."""

    def test_children_are_read_only(self):
        """Children mapping cannot be mutated."""
        node = MessageNode({"a": MessageLeaf("x")})
        with pytest.raises(TypeError):
            node.children["b"] = MessageLeaf("y")

    def test_source_dict_changes_do_not_leak(self):
        """Mutating the source dict after construction has no effect."""
        source = {"a": MessageLeaf("x")}
        node = MessageNode(source)
        source["b"] = MessageLeaf("y")
        assert node.child("b") is None
        assert len(node) == 1


class TestTranslationCatalog:
    """Tests for TranslationCatalog model."""

    def test_from_dict_builds_tree(self):
        """from_dict() compiles nested dicts into nodes and leaves."""
        catalog = TranslationCatalog.from_dict(
            "en-US", {"global": {"welcome": "Welcome"}}
        )
        assert isinstance(catalog.root.child("global"), MessageNode)
        assert catalog.find("global.welcome") == MessageLeaf("Welcome")

    def test_from_dict_rejects_non_string_leaf(self):
        """from_dict() raises InvalidCatalogError for numeric leaves."""
        with pytest.raises(InvalidCatalogError, match="global.count"):
            TranslationCatalog.from_dict("en-US", {"global": {"count": 3}})

    def test_from_dict_rejects_list_leaf(self):
        """from_dict() raises InvalidCatalogError for list values."""
        with pytest.raises(InvalidCatalogError):
            TranslationCatalog.from_dict("en-US", {"items": ["a", "b"]})

    def test_from_dict_rejects_non_mapping(self):
        """from_dict() requires a mapping at the root."""
        with pytest.raises(InvalidCatalogError):
            TranslationCatalog.from_dict("en-US", "not a dict")

    def test_invalid_catalog_error_is_value_error(self):
        """InvalidCatalogError can be caught as ValueError."""
        with pytest.raises(ValueError):
            TranslationCatalog.from_dict("en-US", {"flag": None})

    def test_find_missing_path(self):
        """find() returns None for a missing segment."""
        catalog = make_translation_catalog()
        assert catalog.find("global.missing") is None
        assert catalog.find("missing.welcome") is None

    def test_find_through_leaf(self):
        """find() returns None when a path continues past a leaf."""
        catalog = make_translation_catalog()
        assert catalog.find("global.welcome.extra") is None

    def test_has_message_and_namespace(self):
        """has_message() is true for leaves, has_namespace() for nodes."""
        catalog = make_translation_catalog()
        assert catalog.has_message("nested.deep.message")
        assert not catalog.has_message("nested.deep")
        assert catalog.has_namespace("nested.deep")
        assert not catalog.has_namespace("global.welcome")

    def test_empty_catalog(self):
        """empty() creates a catalog without messages."""
        catalog = TranslationCatalog.empty("en-US")
        assert len(catalog) == 0
        assert catalog.find("anything") is None

    def test_message_keys(self):
        """message_keys() lists leaf paths in declaration order."""
        catalog = make_translation_catalog()
        keys = catalog.message_keys()
        assert keys[0] == "global.welcome"
        assert "nested.deep.message" in keys
        assert "nested.deep" not in keys
        assert len(keys) == 8

    def test_message_keys_relative_to_namespace(self):
        """message_keys(namespace) returns keys relative to the namespace."""
        catalog = make_translation_catalog()
        assert catalog.message_keys("errors") == [
            "not_found",
            "server_error",
            "validation_error",
        ]
        assert catalog.message_keys("nested") == ["deep.message"]

    def test_message_keys_rejects_leaf_namespace(self):
        """message_keys() raises when namespace names a message."""
        catalog = make_translation_catalog()
        with pytest.raises(InvalidNamespaceError):
            catalog.message_keys("global.welcome")

    def test_namespaces(self):
        """namespaces() lists every subtree path."""
        catalog = make_translation_catalog()
        assert catalog.namespaces() == ["global", "errors", "nested", "nested.deep"]


class TestResolutionResult:
    """Tests for ResolutionResult model."""

    def test_truthiness_follows_found(self):
        """ResolutionResult is truthy only when found."""
        assert ResolutionResult(found=True, value="x")
        assert not ResolutionResult(found=False, value="x")
