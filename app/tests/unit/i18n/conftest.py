"""Feature-level fixtures for catalog tests."""

import json

import pytest
import yaml

from gettext_catalog.i18n import CatalogStore, Translator
from tests.factories.i18n import (
    RUSSIAN_PLURAL_FORMS,
    make_catalog_payload,
    make_russian_payload,
)


@pytest.fixture
def store():
    return CatalogStore()


@pytest.fixture
def translator(json_locale_data):
    """Translator over the single-entry "messages" payload."""
    return Translator(domain="messages", locale_data=json_locale_data)


@pytest.fixture
def russian_translator():
    return Translator(locale_data=make_russian_payload())


@pytest.fixture
def temp_catalog_dir(tmp_path):
    """Create a directory with JSON and YAML catalog files.

    Returns a directory structure like:
    - app.json        (domain "app", English rule)
    - messages.json   (domain "messages")
    - shop.yml        (domain "shop", Russian rule)
    """
    app = make_catalog_payload(
        domain="app",
        entries={
            "Save": [None, "Enregistrer"],
            "%d item": ["%d items", "%d article", "%d articles"],
        },
    )
    with open(tmp_path / "app.json", "w", encoding="utf-8") as f:
        json.dump(app, f)

    messages = make_catalog_payload(entries={"test": [None, "XXtestXX"]})
    with open(tmp_path / "messages.json", "w", encoding="utf-8") as f:
        json.dump(messages, f)

    shop = {
        "shop": {
            "": {"plural-forms": RUSSIAN_PLURAL_FORMS},
            "%d coin": ["%d coins", "%d монета", "%d монеты", "%d монет"],
        }
    }
    with open(tmp_path / "shop.yml", "w", encoding="utf-8") as f:
        yaml.safe_dump(shop, f, allow_unicode=True)

    return tmp_path
