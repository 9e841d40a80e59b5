"""Exceptions for the translation catalog system.

Only catalog construction can fail. Message lookup never raises: a missing
translation, domain, or plural form degrades to the source-language text.
"""

from typing import Optional


class GettextError(Exception):
    """Base exception for all catalog errors.

    Example:
        try:
            store.merge(payload)
        except GettextError as e:
            logger.error("catalog_error", error=str(e))
    """

    pass


class PluralRuleSyntaxError(GettextError):
    """Raised when a Plural-Forms header fails validation.

    Example:
        >>> compile_plural_forms("nplurals=2; plural=import os")
        Traceback (most recent call last):
        ...
        PluralRuleSyntaxError: Plural-Forms header is invalid [nplurals=2; plural=import os]
    """

    def __init__(self, expression: str, reason: Optional[str] = None):
        self.expression = expression
        self.reason = reason
        message = f"Plural-Forms header is invalid [{expression}]"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class MissingDomainError(GettextError):
    """Raised when embedded catalog data lacks the declared default domain."""

    def __init__(self, domain: str):
        self.domain = domain
        super().__init__(f"Catalog data does not contain the domain '{domain}'")


class CatalogFormatError(GettextError):
    """Raised when a catalog payload does not have the expected structure.

    Expected payload shape::

        {domain: {"": {header: value}, lookup_key: [msgid_plural, msgstr, ...]}}
    """

    pass
