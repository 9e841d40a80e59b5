"""Test data factories for catalog testing.

Provides deterministic test data builders for:
- Catalog payloads (the po2json-style structure merged by CatalogStore)
- Catalog
- MessageKey and TranslationRequest
"""

from typing import Dict, List, Optional

from gettext_catalog.i18n import (
    CONTEXT_GLUE,
    Catalog,
    MessageKey,
    TranslationRequest,
)

ENGLISH_PLURAL_FORMS = "nplurals=2; plural=(n != 1);"
RUSSIAN_PLURAL_FORMS = (
    "nplurals=3; plural=(n%10==1 && n%100!=11 ? 0 : "
    "n%10>=2 && n%10<=4 && (n%100<10 || n%100>=20) ? 1 : 2);"
)


def make_catalog_payload(
    domain: str = "messages",
    entries: Optional[Dict[str, List[Optional[str]]]] = None,
    plural_forms: Optional[str] = ENGLISH_PLURAL_FORMS,
    lang: str = "en",
) -> dict:
    """Create a raw catalog payload for a single domain.

    Args:
        domain: Domain name.
        entries: Lookup key -> [msgid_plural, msgstr, ...].
        plural_forms: Plural-Forms header; None omits it.
        lang: Language header value.

    Returns:
        Payload mapping suitable for CatalogStore.merge().
    """
    if entries is None:
        entries = {"test": [None, "XXtestXX"]}

    header = {"domain": domain, "lang": lang}
    if plural_forms is not None:
        header["plural-forms"] = plural_forms

    return {domain: {"": header, **entries}}


def make_russian_payload(domain: str = "messages") -> dict:
    """Payload with a three-form Russian rule and one plural entry."""
    return make_catalog_payload(
        domain=domain,
        lang="ru",
        plural_forms=RUSSIAN_PLURAL_FORMS,
        entries={
            "%d file": ["%d files", "%d файл", "%d файла", "%d файлов"],
            "menu" + CONTEXT_GLUE + "%d file": [
                "%d files",
                "%d документ",
                "%d документа",
                "%d документов",
            ],
        },
    )


def make_catalog(
    domain: str = "messages",
    header: Optional[dict] = None,
    entries: Optional[dict] = None,
) -> Catalog:
    """Create a Catalog instance."""
    if header is None:
        header = {"plural-forms": ENGLISH_PLURAL_FORMS}
    if entries is None:
        entries = {"test": [None, "XXtestXX"]}
    return Catalog(domain=domain, header=header, entries=entries)


def make_message_key(msgid: str = "Open", context: Optional[str] = None) -> MessageKey:
    return MessageKey(msgid=msgid, context=context)


def make_translation_request(
    msgid: str = "test",
    domain: Optional[str] = None,
    context: Optional[str] = None,
    msgid_plural: Optional[str] = None,
    count: Optional[int] = None,
) -> TranslationRequest:
    """Create a TranslationRequest instance."""
    return TranslationRequest(
        msgid=msgid,
        domain=domain,
        context=context,
        msgid_plural=msgid_plural,
        count=count,
    )
