"""Translator: resolves gettext-style calls against a CatalogStore.

All twelve gettext variants build a TranslationRequest and hand it to
``translate()``. Lookups never raise; anything missing falls back to the
source-language text supplied by the caller.

Note:
    When the requested domain has no catalog, every loaded catalog is
    searched in merge order and the first match wins. A message can
    therefore resolve from a domain other than the one requested. Pass
    ``search_all_domains=False`` to restrict lookups to the requested domain.
"""

from typing import Any, Callable, List, Mapping, Optional

from gettext_catalog.i18n.exceptions import MissingDomainError
from gettext_catalog.i18n.loader import CatalogLoader
from gettext_catalog.i18n.models import (
    DEFAULT_DOMAIN,
    Catalog,
    MessageKey,
    TranslationRequest,
)
from gettext_catalog.i18n.plural import default_plural_classifier
from gettext_catalog.i18n.store import CatalogStore
from gettext_catalog.logging import get_module_logger

logger = get_module_logger()


class Translator:
    """Message lookup over a CatalogStore.

    Attributes:
        domain: Default domain for calls that do not name one.
        store: CatalogStore holding the merged catalogs.
        search_all_domains: Search every catalog when the requested domain
            is not loaded.
        loaders: Loaders merged by load_all().
    """

    def __init__(
        self,
        domain: Optional[str] = None,
        locale_data: Optional[Mapping[str, Mapping[str, Any]]] = None,
        store: Optional[CatalogStore] = None,
        search_all_domains: bool = True,
        strict_plural_forms: bool = True,
        loaders: Optional[List[CatalogLoader]] = None,
    ):
        """Initialize Translator.

        Args:
            domain: Default domain (default: "messages").
            locale_data: Catalog payload to merge immediately.
            store: Existing CatalogStore to read from.
            search_all_domains: Fall back to searching every catalog when the
                requested domain is not loaded (default: True).
            strict_plural_forms: Passed to a newly created store.
            loaders: Catalog loaders to merge later with load_all().

        Raises:
            MissingDomainError: If locale_data is given and the default domain
                is not in the store after merging it.
        """
        self.domain = domain or DEFAULT_DOMAIN
        self.store = store if store is not None else CatalogStore(strict_plural_forms)
        self.search_all_domains = search_all_domains
        self.loaders = list(loaders or [])

        if locale_data is not None:
            self.merge(locale_data)
            if self.domain not in self.store:
                logger.error(
                    "default_domain_missing",
                    domain=self.domain,
                    available_domains=self.store.domains(),
                )
                raise MissingDomainError(self.domain)

        logger.info(
            "initialized_translator",
            domain=self.domain,
            search_all_domains=search_all_domains,
        )

    @property
    def is_loaded(self) -> bool:
        """True once at least one catalog has been merged."""
        return len(self.store) > 0

    def merge(self, payload: Mapping[str, Mapping[str, Any]]) -> None:
        """Merge a catalog payload into the store."""
        self.store.merge(payload)

    def load(self, loader: CatalogLoader) -> None:
        """Merge the payload supplied by a loader."""
        self.store.merge(loader.load())
        logger.info("loaded_catalogs", domains=self.store.domains())

    def load_all(self) -> None:
        """Merge the payload of every loader given at construction, in order."""
        for loader in self.loaders:
            self.store.merge(loader.load())
        logger.info(
            "loaded_all_catalogs",
            loader_count=len(self.loaders),
            domains=self.store.domains(),
        )

    def get_catalog(self, domain: Optional[str] = None) -> Optional[Catalog]:
        return self.store.get(domain or self.domain)

    def get_available_domains(self) -> List[str]:
        return self.store.domains()

    def has_message(
        self,
        msgid: str,
        context: Optional[str] = None,
        domain: Optional[str] = None,
    ) -> bool:
        """Check if a translation exists for msgid in the lookup candidates."""
        key = str(MessageKey(msgid=msgid, context=context))
        return any(
            catalog.has_entry(key)
            for catalog in self.store.candidates(
                domain or self.domain, self.search_all_domains
            )
        )

    def translate(self, request: TranslationRequest) -> str:
        """Resolve a message.

        Args:
            request: Message id with optional domain, context, plural id and
                count. A domain of None or "" selects the translator's
                default domain; "" is never looked up as a domain name,
                just as merge() never stores a catalog under "".

        Returns:
            The translation, or the caller's msgid / msgid_plural when no
            translation exists.
        """
        if request.msgid is None:
            return ""

        key = str(request.key)
        domain = request.domain or self.domain or DEFAULT_DOMAIN

        source: List[Optional[str]] = []
        matched: Optional[Catalog] = None
        for catalog in self.store.candidates(domain, self.search_all_domains):
            translations = catalog.get_translations(key)
            if translations is not None:
                source = translations
                matched = catalog
                break

        if matched is not None and matched.domain != domain:
            logger.debug(
                "used_cross_domain_translation",
                key=key,
                requested_domain=domain,
                matched_domain=matched.domain,
            )

        if not source:
            if matched is None:
                logger.debug("translation_not_found", key=key, domain=domain)
            source = [request.msgid, request.msgid_plural]

        if not request.is_plural:
            return _first(source, request.msgid)

        if matched is not None:
            classifier = matched.plural_classifier or default_plural_classifier
            index = classifier(request.count)
            nplurals = getattr(classifier, "nplurals", len(source))
            if index < 0 or index >= nplurals or index >= len(source):
                index = 0
        else:
            index = 0 if request.count == 1 else 1

        if index < len(source) and source[index] is not None:
            return source[index]
        return _first(source, request.msgid)

    def gettext(self, msgid: str) -> str:
        return self.translate(TranslationRequest(msgid=msgid))

    def dgettext(self, domain: str, msgid: str) -> str:
        return self.translate(TranslationRequest(msgid=msgid, domain=domain))

    def dcgettext(self, domain: str, msgid: str, category: Any) -> str:
        return self.translate(
            TranslationRequest(msgid=msgid, domain=domain, category=category)
        )

    def ngettext(self, msgid: str, msgid_plural: str, count: int) -> str:
        return self.translate(
            TranslationRequest(msgid=msgid, msgid_plural=msgid_plural, count=count)
        )

    def dngettext(self, domain: str, msgid: str, msgid_plural: str, count: int) -> str:
        return self.translate(
            TranslationRequest(
                msgid=msgid, domain=domain, msgid_plural=msgid_plural, count=count
            )
        )

    def dcngettext(
        self,
        domain: str,
        msgid: str,
        msgid_plural: str,
        count: int,
        category: Any,
    ) -> str:
        return self.translate(
            TranslationRequest(
                msgid=msgid,
                domain=domain,
                msgid_plural=msgid_plural,
                count=count,
                category=category,
            )
        )

    def pgettext(self, context: str, msgid: str) -> str:
        return self.translate(TranslationRequest(msgid=msgid, context=context))

    def dpgettext(self, domain: str, context: str, msgid: str) -> str:
        return self.translate(
            TranslationRequest(msgid=msgid, domain=domain, context=context)
        )

    def dcpgettext(self, domain: str, context: str, msgid: str, category: Any) -> str:
        return self.translate(
            TranslationRequest(
                msgid=msgid, domain=domain, context=context, category=category
            )
        )

    def npgettext(self, context: str, msgid: str, msgid_plural: str, count: int) -> str:
        return self.translate(
            TranslationRequest(
                msgid=msgid, context=context, msgid_plural=msgid_plural, count=count
            )
        )

    def dnpgettext(
        self,
        domain: str,
        context: str,
        msgid: str,
        msgid_plural: str,
        count: int,
    ) -> str:
        return self.translate(
            TranslationRequest(
                msgid=msgid,
                domain=domain,
                context=context,
                msgid_plural=msgid_plural,
                count=count,
            )
        )

    def dcnpgettext(
        self,
        domain: str,
        context: str,
        msgid: str,
        msgid_plural: str,
        count: int,
        category: Any,
    ) -> str:
        return self.translate(
            TranslationRequest(
                msgid=msgid,
                domain=domain,
                context=context,
                msgid_plural=msgid_plural,
                count=count,
                category=category,
            )
        )

    def install(self) -> Callable[[str], str]:
        """Return a ``_`` shortcut bound to this translator's gettext.

        Usage:
            _ = translator.install()
            print(_("Hello"))
        """
        return self.gettext


def _first(source: List[Optional[str]], msgid: str) -> str:
    # An entry may carry None in its first translation slot
    return source[0] if source and source[0] is not None else msgid
