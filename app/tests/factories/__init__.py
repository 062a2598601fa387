"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    make_all_messages,
    make_intl_factory,
    make_messages,
    make_translation_catalog,
)

__all__ = [
    "make_all_messages",
    "make_intl_factory",
    "make_messages",
    "make_translation_catalog",
]
