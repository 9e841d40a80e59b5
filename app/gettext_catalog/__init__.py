"""gettext-catalog: gettext-style message lookup over preloaded catalogs.

Example:
    from gettext_catalog import Translator

    translator = Translator(locale_data={
        "messages": {
            "": {"plural-forms": "nplurals=2; plural=(n != 1);"},
            "%d file": ["%d files", "%d fichier", "%d fichiers"],
        }
    })
    translator.ngettext("%d file", "%d files", 3)  # "%d fichiers"
"""

from gettext_catalog.i18n import (
    CatalogFormatError,
    CatalogStore,
    GettextError,
    MissingDomainError,
    PluralRuleSyntaxError,
    Translator,
    create_translator,
)

__all__ = [
    "CatalogStore",
    "Translator",
    "create_translator",
    "GettextError",
    "PluralRuleSyntaxError",
    "MissingDomainError",
    "CatalogFormatError",
]
