"""Translation catalog feature settings."""

from pydantic import Field

from gettext_catalog.configuration.base import FeatureSettings


class I18nSettings(FeatureSettings):
    """Catalog lookup configuration.

    Environment Variables:
        GETTEXT_DEFAULT_DOMAIN: Domain used when a call names none
        GETTEXT_CATALOG_DIR: Directory of JSON/YAML catalog payloads to preload
        GETTEXT_SEARCH_ALL_DOMAINS: Search every catalog when the requested
            domain is not loaded
        GETTEXT_STRICT_PLURAL_FORMS: Raise on invalid Plural-Forms headers
            instead of substituting the default rule

    Example:
        ```python
        from gettext_catalog.configuration import settings

        domain = settings.i18n.DEFAULT_DOMAIN
        if settings.i18n.CATALOG_DIR:
            ...
        ```
    """

    DEFAULT_DOMAIN: str = Field(default="messages", alias="GETTEXT_DEFAULT_DOMAIN")
    CATALOG_DIR: str | None = Field(default=None, alias="GETTEXT_CATALOG_DIR")
    SEARCH_ALL_DOMAINS: bool = Field(default=True, alias="GETTEXT_SEARCH_ALL_DOMAINS")
    STRICT_PLURAL_FORMS: bool = Field(
        default=True, alias="GETTEXT_STRICT_PLURAL_FORMS"
    )
