"""Feature-level fixtures for i18n system tests.

Provides catalogs, session factories and header samples for locale
negotiation and translation scenarios.
"""

import pytest

from tests.factories.i18n import (
    TEST_LOCALES,
    make_all_messages,
    make_intl_factory,
    make_translation_catalog,
)


@pytest.fixture
def test_locales():
    """Supported locales used across i18n tests, in priority order."""
    return list(TEST_LOCALES)


@pytest.fixture
def sample_messages():
    """Nested message dicts keyed by locale."""
    return make_all_messages()


@pytest.fixture
def en_catalog():
    """Compiled en-US catalog."""
    return make_translation_catalog("en-US")


@pytest.fixture
def intl_factory():
    """IntlSessionFactory over the test catalogs with en-US default."""
    return make_intl_factory()


@pytest.fixture
def accept_language_headers():
    """Collection of Accept-Language headers for testing."""
    return {
        "simple_en": "en",
        "specific_en_us": "en-US",
        "with_quality": "en-US,en;q=0.9,fr;q=0.8",
        "multiple": "fr-FR,fr;q=0.9,en-US;q=0.8,en;q=0.7",
        "wildcard": "en-US,en;q=0.9,*;q=0.8",
        "invalid_quality": "en;q=invalid,fr",
    }
