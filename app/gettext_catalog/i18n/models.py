"""Catalog models for the translation lookup system.

Defines the in-memory catalog structure produced by merging payloads and the
request shape shared by every gettext-style call.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Mapping, Optional

DEFAULT_DOMAIN = "messages"

# Separates msgctxt from msgid in a lookup key; never valid in message text.
CONTEXT_GLUE = "\x04"

PLURAL_FORMS_HEADER = "plural-forms"

# Only the message category is supported; any category passed in is ignored.
LC_MESSAGES = 5


def normalize_domain(domain: Optional[str]) -> str:
    """Return the domain name, mapping an empty name to the default domain."""
    return domain or DEFAULT_DOMAIN


@dataclass(frozen=True)
class MessageKey:
    """Lookup key for a message, optionally qualified by a context.

    Frozen to ensure immutability and hashability.

    Attributes:
        msgid: Source-language message identifier.
        context: Disambiguating msgctxt, if any.
    """

    msgid: str
    context: Optional[str] = None

    def __str__(self) -> str:
        """Return the catalog lookup key.

        Returns:
            ``context + CONTEXT_GLUE + msgid`` when a context is set,
            otherwise the msgid itself.
        """
        if self.context is None:
            return self.msgid
        return f"{self.context}{CONTEXT_GLUE}{self.msgid}"

    @classmethod
    def from_string(cls, lookup_key: str) -> "MessageKey":
        """Create a MessageKey from a catalog lookup key.

        Args:
            lookup_key: Key as stored in a catalog (e.g., "menu\\x04Open").

        Returns:
            MessageKey instance.
        """
        if CONTEXT_GLUE in lookup_key:
            context, msgid = lookup_key.split(CONTEXT_GLUE, 1)
            return cls(msgid=msgid, context=context)
        return cls(msgid=lookup_key)


@dataclass(frozen=True)
class TranslationRequest:
    """A single message lookup.

    Every public gettext variant builds one of these; the variants differ
    only in which optional fields they fill in.

    Attributes:
        msgid: Singular source-language message id.
        domain: Catalog domain; None means the translator's default.
        context: Optional msgctxt.
        msgid_plural: Plural source-language id; set for plural lookups.
        count: Number used to select the plural form.
        category: Locale category. Accepted for API parity and ignored.
    """

    msgid: Optional[str]
    domain: Optional[str] = None
    context: Optional[str] = None
    msgid_plural: Optional[str] = None
    count: Optional[int] = None
    category: Optional[Any] = None

    @property
    def is_plural(self) -> bool:
        return self.msgid_plural is not None

    @property
    def key(self) -> MessageKey:
        return MessageKey(msgid=self.msgid or "", context=self.context)


@dataclass
class Catalog:
    """Translations for a single domain.

    Attributes:
        domain: Domain name this catalog is for.
        header: Metadata fields from the catalog header (e.g., "plural-forms").
        entries: Lookup key -> variant list. Slot 0 holds the msgid_plural and
            is not a translation; slots 1..N are translations by plural form.
        plural_classifier: Memoized count -> plural index function, installed
            by the store after each merge.
    """

    domain: str
    header: Dict[str, Any] = field(default_factory=dict)
    entries: Dict[str, List[Optional[str]]] = field(default_factory=dict)
    plural_classifier: Optional[Callable[[int], int]] = None

    @property
    def plural_forms(self) -> Optional[str]:
        """Plural-Forms expression from the header, if any.

        Header field names are matched case-insensitively.
        """
        for name, value in self.header.items():
            if name.lower() == PLURAL_FORMS_HEADER:
                return value
        return None

    def merge_header(self, fields: Mapping[str, Any]) -> None:
        """Merge header fields into this catalog. Later values win."""
        self.header.update(fields)

    def set_entry(self, key: str, variants: List[Optional[str]]) -> None:
        self.entries[key] = variants

    def has_entry(self, key: str) -> bool:
        return key in self.entries

    def get_translations(self, key: str) -> Optional[List[Optional[str]]]:
        """Return the translations for a lookup key.

        Args:
            key: Catalog lookup key.

        Returns:
            Copy of the variant list without the msgid_plural slot, or None
            if the key is not in this catalog.
        """
        variants = self.entries.get(key)
        if variants is None:
            return None
        return list(variants[1:])
