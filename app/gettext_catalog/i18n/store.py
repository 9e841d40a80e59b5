"""Catalog store: merges raw catalog payloads into per-domain catalogs.

Payload format (as produced by po2json-style converters)::

    {
        "domain": {
            "": {"plural-forms": "nplurals=2; plural=(n != 1);", "lang": "en"},
            "msgid": ["msgid_plural", "msgstr", "msgstr_plural"],
            "msgctxt\\x04msgid": [None, "msgstr"],
        },
    }

The store is populated before any lookup and is read-only afterwards. It
performs no synchronization; callers must not run merges concurrently.
"""

from typing import Any, Dict, Iterator, List, Mapping, Optional

from gettext_catalog.i18n.exceptions import CatalogFormatError, PluralRuleSyntaxError
from gettext_catalog.i18n.models import Catalog, normalize_domain
from gettext_catalog.i18n.plural import compile_plural_forms, default_plural_classifier
from gettext_catalog.logging import get_module_logger

logger = get_module_logger()


class CatalogStore:
    """Mapping of domain name to Catalog, built by merging payloads.

    Attributes:
        strict_plural_forms: Raise PluralRuleSyntaxError on an invalid
            Plural-Forms header. When False the default rule is installed
            for that catalog instead.
    """

    def __init__(self, strict_plural_forms: bool = True):
        self.strict_plural_forms = strict_plural_forms
        self._catalogs: Dict[str, Catalog] = {}

    def __contains__(self, domain: object) -> bool:
        return domain in self._catalogs

    def __len__(self) -> int:
        return len(self._catalogs)

    def get(self, domain: str) -> Optional[Catalog]:
        return self._catalogs.get(domain)

    def domains(self) -> List[str]:
        """Domain names in the order they were first merged."""
        return list(self._catalogs)

    def catalogs(self) -> List[Catalog]:
        return list(self._catalogs.values())

    def candidates(self, domain: str, search_all_domains: bool = True) -> Iterator[Catalog]:
        """Catalogs to search for a lookup in ``domain``.

        Only the domain's own catalog when it is loaded. Otherwise every
        catalog in merge order, unless ``search_all_domains`` is off.
        """
        catalog = self._catalogs.get(domain)
        if catalog is not None:
            yield catalog
        elif search_all_domains:
            yield from list(self._catalogs.values())

    def merge(self, payload: Mapping[str, Mapping[str, Any]]) -> None:
        """Merge a raw catalog payload into the store.

        Header fields and entries are merged key by key; later values win.
        Domains with no keys are skipped entirely. After merging, every
        catalog touched by the payload that has no plural classifier gets
        one. A catalog whose rule was rejected keeps no classifier until a
        later merge supplies a valid Plural-Forms header for it.

        Args:
            payload: Mapping of domain -> {lookup key -> variants, "" -> header}.

        Raises:
            CatalogFormatError: If the payload is not shaped like a catalog.
            PluralRuleSyntaxError: If a Plural-Forms header is invalid and
                strict_plural_forms is set.
        """
        if not isinstance(payload, Mapping):
            logger.error("invalid_catalog_payload", expected="mapping")
            raise CatalogFormatError(
                f"Catalog payload must be a mapping, got {type(payload).__name__}"
            )

        merged_domains = []
        for raw_domain, data in payload.items():
            if data is None:
                continue
            if not isinstance(data, Mapping):
                logger.error("invalid_domain_format", domain=raw_domain, expected="mapping")
                raise CatalogFormatError(
                    f"Catalog data for domain '{raw_domain}' must be a mapping"
                )
            if not data:
                continue

            domain = normalize_domain(raw_domain)
            catalog = self._catalogs.get(domain)
            if catalog is None:
                catalog = Catalog(domain=domain)
                self._catalogs[domain] = catalog

            for key, value in data.items():
                if key == "":
                    if not isinstance(value, Mapping):
                        raise CatalogFormatError(
                            f"Header for domain '{domain}' must be a mapping"
                        )
                    catalog.merge_header(value)
                else:
                    catalog.set_entry(key, _variants(domain, key, value))

            merged_domains.append(domain)

        self._install_plural_classifiers(merged_domains)

        logger.info(
            "merged_catalog_payload",
            domains=merged_domains,
            catalog_count=len(self._catalogs),
        )

    def _install_plural_classifiers(self, domains: List[str]) -> None:
        # Only catalogs touched by this merge; a rule rejected earlier does
        # not block unrelated merges
        for domain in domains:
            catalog = self._catalogs[domain]
            if catalog.plural_classifier is not None:
                continue
            plural_forms = catalog.plural_forms
            if plural_forms is None:
                catalog.plural_classifier = default_plural_classifier
                continue
            try:
                catalog.plural_classifier = compile_plural_forms(plural_forms)
            except PluralRuleSyntaxError:
                if self.strict_plural_forms:
                    raise
                logger.warning(
                    "substituted_default_plural_forms",
                    domain=catalog.domain,
                    plural_forms=plural_forms,
                )
                catalog.plural_classifier = default_plural_classifier


def _variants(domain: str, key: str, value: Any) -> List[Optional[str]]:
    # A bare string is shorthand for a singular entry
    if isinstance(value, str):
        return [None, value]
    if not isinstance(value, (list, tuple)) or not all(
        item is None or isinstance(item, str) for item in value
    ):
        logger.error("invalid_entry_format", domain=domain, key=key)
        raise CatalogFormatError(
            f"Entry '{key}' in domain '{domain}' must be a list of strings"
        )
    return list(value)
