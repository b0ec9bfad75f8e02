"""Tests for structlog configuration.

Covers:
    - Log level and logger name added to every event
    - Console rendering outside production, JSON in production
"""

import structlog

from src.api.middleware import configure_structlog
from src.config import get_settings


class TestConfigureStructlog:

    def test_level_and_logger_name_processors(self) -> None:
        get_settings.cache_clear()
        configure_structlog()
        processors = structlog.get_config()["processors"]

        assert structlog.stdlib.add_log_level in processors
        assert structlog.stdlib.add_logger_name in processors
        assert isinstance(structlog.get_config()["logger_factory"], structlog.stdlib.LoggerFactory)

    def test_console_renderer_in_development(self, monkeypatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "development")
        get_settings.cache_clear()
        configure_structlog()

        assert isinstance(structlog.get_config()["processors"][-1], structlog.dev.ConsoleRenderer)
        get_settings.cache_clear()

    def test_json_renderer_in_production(self, monkeypatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "production")
        get_settings.cache_clear()
        configure_structlog()

        assert isinstance(structlog.get_config()["processors"][-1], structlog.processors.JSONRenderer)
        get_settings.cache_clear()
        monkeypatch.undo()
        configure_structlog()
