"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    make_catalog,
    make_catalog_payload,
    make_message_key,
    make_russian_payload,
    make_translation_request,
)

__all__ = [
    "make_catalog",
    "make_catalog_payload",
    "make_message_key",
    "make_russian_payload",
    "make_translation_request",
]
