"""Shared fixtures for gettext-catalog tests."""

import pytest

from gettext_catalog.configuration import I18nSettings, Settings


@pytest.fixture
def json_locale_data():
    """Catalog payload in the po2json layout, with one translated entry."""
    return {
        "messages": {
            "": {
                "domain": "messages",
                "lang": "en",
                "plural-forms": "nplurals=2; plural=(n != 1);",
            },
            "test": [None, "XXtestXX"],
        }
    }


@pytest.fixture
def make_settings():
    """Build a Settings instance with i18n overrides (env var names)."""

    def _make(**i18n_overrides):
        return Settings(i18n=I18nSettings(**i18n_overrides))

    return _make
