"""Tests for presentation/cli/logging_config.py."""

import logging
from collections.abc import Iterator

import pytest

from singleton_detector.domain.exceptions import UsageError
from singleton_detector.presentation.cli.logging_config import LOG_LEVEL_ENV, configure_logging


@pytest.fixture(autouse=True)
def restore_package_logger() -> Iterator[logging.Logger]:
    package_logger = logging.getLogger("singleton_detector")
    handlers = list(package_logger.handlers)
    level = package_logger.level
    yield package_logger
    package_logger.handlers[:] = handlers
    package_logger.setLevel(level)


class TestConfigureLogging:
    """Tests for configure_logging()."""

    def test_default_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)

        assert configure_logging() == logging.WARNING
        assert logging.getLogger("singleton_detector").level == logging.WARNING

    def test_level_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(LOG_LEVEL_ENV, "debug")

        assert configure_logging() == logging.DEBUG

    def test_explicit_level_wins(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(LOG_LEVEL_ENV, "DEBUG")

        assert configure_logging("ERROR") == logging.ERROR

    def test_unknown_level(self) -> None:
        with pytest.raises(UsageError, match="unknown log level"):
            configure_logging("LOUD")

    def test_repeated_calls_do_not_duplicate_handlers(self) -> None:
        package_logger = logging.getLogger("singleton_detector")
        before = len(package_logger.handlers)

        configure_logging("INFO")
        configure_logging("INFO")

        assert len(package_logger.handlers) == before + 1
