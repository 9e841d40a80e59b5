"""i18n system - gettext-style message lookup over preloaded catalogs.

Main components:
- models: Catalog, MessageKey, TranslationRequest
- plural: Plural-Forms compilation into PluralClassifier
- store: CatalogStore, built by merging raw catalog payloads
- translator: Translator with the gettext/ngettext/pgettext family
- loader: CatalogLoader implementations for JSON and YAML payload files
- factory: create_translator() wiring settings and loaders
"""

from gettext_catalog.i18n.exceptions import (
    CatalogFormatError,
    GettextError,
    MissingDomainError,
    PluralRuleSyntaxError,
)
from gettext_catalog.i18n.loader import (
    CatalogLoader,
    DictCatalogLoader,
    JSONCatalogLoader,
    YAMLCatalogLoader,
)
from gettext_catalog.i18n.models import (
    CONTEXT_GLUE,
    DEFAULT_DOMAIN,
    LC_MESSAGES,
    Catalog,
    MessageKey,
    TranslationRequest,
)
from gettext_catalog.i18n.plural import (
    PluralClassifier,
    compile_plural_forms,
    default_plural_classifier,
)
from gettext_catalog.i18n.store import CatalogStore
from gettext_catalog.i18n.translator import Translator
from gettext_catalog.i18n.factory import create_translator

__all__ = [
    "CONTEXT_GLUE",
    "DEFAULT_DOMAIN",
    "LC_MESSAGES",
    "Catalog",
    "MessageKey",
    "TranslationRequest",
    "PluralClassifier",
    "compile_plural_forms",
    "default_plural_classifier",
    "CatalogStore",
    "Translator",
    "CatalogLoader",
    "DictCatalogLoader",
    "JSONCatalogLoader",
    "YAMLCatalogLoader",
    "create_translator",
    "GettextError",
    "PluralRuleSyntaxError",
    "MissingDomainError",
    "CatalogFormatError",
]
