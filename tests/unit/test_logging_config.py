"""Unit tests for setup_logging."""

import logging

import pytest

from forcegraph.logging_config import LEVEL_ENV, TICK_LOGGER, resolve_level, setup_logging


@pytest.fixture
def package_logger():
    """The forcegraph logger, restored to library defaults afterwards."""
    logger = logging.getLogger("forcegraph")
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logging.getLogger(TICK_LOGGER).setLevel(logging.NOTSET)


class TestResolveLevel:
    """Tests for level parsing."""

    def test_number_passes_through(self):
        assert resolve_level(logging.WARNING) == logging.WARNING

    def test_name_case_insensitive(self):
        assert resolve_level("debug") == logging.DEBUG
        assert resolve_level(" Warning ") == logging.WARNING

    def test_unknown_name(self):
        with pytest.raises(ValueError):
            resolve_level("chatty")

    def test_environment_default(self, monkeypatch):
        monkeypatch.setenv(LEVEL_ENV, "error")
        assert resolve_level(None) == logging.ERROR

    def test_info_without_environment(self, monkeypatch):
        monkeypatch.delenv(LEVEL_ENV, raising=False)
        assert resolve_level(None) == logging.INFO


class TestSetupLogging:
    """Tests for handler and level configuration."""

    def test_returns_package_logger(self, package_logger):
        logger = setup_logging(logging.WARNING)
        assert logger is package_logger
        assert logger.level == logging.WARNING

    def test_repeat_calls_do_not_duplicate_handlers(self, package_logger):
        setup_logging(logging.INFO)
        setup_logging(logging.INFO)
        assert len(package_logger.handlers) == 1

    def test_debug_mutes_tick_records_by_default(self, package_logger):
        setup_logging(logging.DEBUG)
        tick_logger = logging.getLogger(TICK_LOGGER)
        assert not tick_logger.isEnabledFor(logging.DEBUG)
        assert logging.getLogger("forcegraph.core.notifier").isEnabledFor(logging.DEBUG)

    def test_trace_ticks_keeps_tick_records(self, package_logger):
        setup_logging("debug", trace_ticks=True)
        assert logging.getLogger(TICK_LOGGER).isEnabledFor(logging.DEBUG)

    def test_log_file(self, package_logger, tmp_path):
        path = tmp_path / "run.log"
        setup_logging(logging.INFO, log_file=str(path))

        logging.getLogger("forcegraph.core").info("layout settled")
        for handler in package_logger.handlers:
            handler.flush()

        assert "layout settled" in path.read_text(encoding="utf-8")
