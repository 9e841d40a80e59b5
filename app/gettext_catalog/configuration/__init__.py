"""Configuration module - public API.

Centralized configuration for gettext-catalog using Pydantic BaseSettings.

Exports:
    settings: Singleton Settings instance
    Settings: Main settings class (for testing/overrides)
    I18nSettings: Catalog lookup settings class
"""

from gettext_catalog.configuration.features import I18nSettings
from gettext_catalog.configuration.settings import Settings, settings

__all__ = ["Settings", "I18nSettings", "settings"]
