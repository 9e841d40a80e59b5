"""Factory functions for creating translators.

Wires configuration, loaders, and the catalog store. A preloaded Translator
has finished loading before its first lookup; a lazy one keeps its loaders
for load_all().
"""

from pathlib import Path
from typing import Any, Mapping, Optional

import structlog

from gettext_catalog.configuration import Settings
from gettext_catalog.configuration import settings as default_settings
from gettext_catalog.i18n.loader import JSONCatalogLoader, YAMLCatalogLoader
from gettext_catalog.i18n.store import CatalogStore
from gettext_catalog.i18n.translator import Translator

logger = structlog.get_logger()


def create_translator(
    domain: Optional[str] = None,
    locale_data: Optional[Mapping[str, Mapping[str, Any]]] = None,
    catalog_dir: Optional[Path] = None,
    settings: Optional[Settings] = None,
    preload: bool = True,
) -> Translator:
    """Create and configure a Translator instance.

    Args:
        domain: Default domain (default: settings.i18n.DEFAULT_DOMAIN).
        locale_data: Embedded catalog payload merged at construction.
        catalog_dir: Directory of .json/.yml catalog files
            (default: settings.i18n.CATALOG_DIR, if set).
        settings: Settings instance (default: module singleton).
        preload: Whether to load catalog_dir immediately (default: True).
            When False, call translator.load_all() before the first lookup.

    Returns:
        Translator: Configured translator instance

    Raises:
        ValueError: If catalog_dir does not exist
        MissingDomainError: If locale_data lacks the default domain
        PluralRuleSyntaxError: If a catalog has an invalid Plural-Forms
            header and strict plural forms are enabled

    Usage:
        # Embedded data
        translator = create_translator(locale_data=json_locale_data)

        # Catalog files
        translator = create_translator(catalog_dir=Path("locale/fr"))
        translator.gettext("Hello")

        # Lazy loading
        translator = create_translator(catalog_dir=Path("locale/fr"), preload=False)
        translator.load_all()
    """
    settings = settings or default_settings
    i18n = settings.i18n

    if catalog_dir is None and i18n.CATALOG_DIR:
        catalog_dir = Path(i18n.CATALOG_DIR)

    loaders = []
    if catalog_dir is not None:
        loaders = [
            loader
            for loader in (JSONCatalogLoader(catalog_dir), YAMLCatalogLoader(catalog_dir))
            if loader.files()
        ]

    store = CatalogStore(strict_plural_forms=i18n.STRICT_PLURAL_FORMS)
    translator = Translator(
        domain=domain or i18n.DEFAULT_DOMAIN,
        locale_data=locale_data,
        store=store,
        search_all_domains=i18n.SEARCH_ALL_DOMAINS,
        loaders=loaders,
    )

    if catalog_dir is None:
        return translator

    if preload:
        translator.load_all()
        logger.info(
            "translator_created_with_preload",
            catalog_dir=str(catalog_dir),
            domain_count=len(translator.get_available_domains()),
        )
    else:
        logger.info("translator_created_lazy", catalog_dir=str(catalog_dir))

    return translator
