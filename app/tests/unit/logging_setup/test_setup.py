"""Unit tests for gettext_catalog.logging.setup module.

Tests cover:
- configure_logging function
- get_module_logger context binding
- Log suppression in the test environment
"""

import logging

import pytest

from gettext_catalog.logging.setup import (
    _is_test_environment,
    configure_logging,
    get_module_logger,
)


@pytest.mark.unit
class TestIsTestEnvironment:
    """Test suite for _is_test_environment helper."""

    def test_detects_pytest_in_sys_modules(self):
        """Returns True when pytest is in sys.modules."""
        assert _is_test_environment() is True


@pytest.mark.unit
class TestConfigureLogging:
    """Test suite for configure_logging function."""

    def test_configure_logging_returns_bound_logger(self, mock_settings):
        result = configure_logging(settings=mock_settings)

        assert result is not None
        assert hasattr(result, "info")
        assert hasattr(result, "debug")
        assert hasattr(result, "warning")
        assert hasattr(result, "error")

    def test_configure_logging_with_overrides(self, mock_settings):
        """Overrides are accepted even though output is suppressed."""
        assert configure_logging(settings=mock_settings, log_level="DEBUG") is not None
        assert configure_logging(settings=mock_settings, is_production=True) is not None

    def test_logging_suppressed_in_tests(self, mock_settings):
        configure_logging(settings=mock_settings)
        assert logging.root.level > logging.CRITICAL

    def test_configure_logging_idempotent(self, mock_settings):
        assert configure_logging(settings=mock_settings) is not None
        assert configure_logging(settings=mock_settings) is not None


@pytest.mark.unit
class TestLoggerHelpers:
    """Test suite for logger helpers."""

    def test_get_module_logger(self):
        logger = get_module_logger()
        assert logger is not None
        logger.info("test_event", domain="messages")

    def test_get_module_logger_binds_calling_module(self):
        """The caller's module path and last segment are bound as context."""
        logger = get_module_logger()
        assert logger._context["module_path"] == __name__
        assert logger._context["component"] == __name__.rsplit(".", 1)[-1]
