import logging

import structlog

from theme_studio.config import Environment, Settings
from theme_studio.logging_config import (
    LogContext,
    bind_context,
    clear_context,
    configure_logging,
    get_console_processors,
    get_json_processors,
    get_logger,
)


class TestProcessors:
    def test_console_ends_with_console_renderer(self):
        assert isinstance(get_console_processors()[-1], structlog.dev.ConsoleRenderer)

    def test_json_ends_with_json_renderer(self):
        assert isinstance(get_json_processors()[-1], structlog.processors.JSONRenderer)


class TestConfigureLogging:
    def test_file_handler(self, tmp_path):
        log_file = tmp_path / "logs" / "theme-studio.log"
        settings = Settings(_env_file=None, environment=Environment.PRODUCTION, log_file=log_file)
        root = logging.getLogger()
        handlers_before = list(root.handlers)

        try:
            configure_logging(settings)
            get_logger("theme_studio.tests").warning("file_handler_check", value=1)
        finally:
            for handler in root.handlers:
                if handler not in handlers_before:
                    handler.close()
                    root.removeHandler(handler)
            structlog.reset_defaults()

        assert log_file.exists()
        assert "file_handler_check" in log_file.read_text()


class TestLogContext:
    def test_context_is_bound_and_removed(self):
        clear_context()

        with LogContext(theme_id="default"):
            assert structlog.contextvars.get_contextvars() == {"theme_id": "default"}

        assert structlog.contextvars.get_contextvars() == {}

    def test_bind_and_clear(self):
        bind_context(mode="dark")
        assert structlog.contextvars.get_contextvars()["mode"] == "dark"

        clear_context()
        assert structlog.contextvars.get_contextvars() == {}
