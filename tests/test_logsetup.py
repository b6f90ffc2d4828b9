"""Tests for configure_logging()."""

import logging as _logging
import typing as _typing

import pytest as _pytest

import treekit.config as config
import treekit.logsetup as logsetup


@_pytest.fixture
def package_logger() -> _typing.Iterator[_logging.Logger]:
    """Restore the treekit logger's level and handlers after each test."""
    logger = _logging.getLogger(logsetup.PACKAGE_LOGGER)
    level = logger.level
    handlers = list(logger.handlers)
    yield logger
    logger.setLevel(level)
    logger.handlers[:] = handlers


class TestConfigureLogging:
    """Tests for configure_logging()."""

    def test_level_from_settings(self, package_logger: _logging.Logger) -> None:
        """The configured level is applied to the package logger."""
        settings = config.Settings.construct_without_dotenv(logging={"level": "debug"})

        logger = logsetup.configure_logging(settings)

        assert logger is package_logger
        assert logger.level == _logging.DEBUG

    def test_format_from_settings(self, package_logger: _logging.Logger) -> None:
        """The installed handler uses the configured format."""
        settings = config.Settings.construct_without_dotenv(
            logging={"level": "INFO", "format": "%(levelname)s|%(message)s"}
        )

        logsetup.configure_logging(settings)

        handler = package_logger.handlers[-1]
        assert handler.formatter is not None
        assert handler.formatter._fmt == "%(levelname)s|%(message)s"

    def test_idempotent(self, package_logger: _logging.Logger) -> None:
        """Repeated calls replace the handler instead of stacking them."""
        before = len(package_logger.handlers)
        settings = config.Settings.construct_without_dotenv()

        logsetup.configure_logging(settings)
        logsetup.configure_logging(settings)

        assert len(package_logger.handlers) == before + 1

    def test_env_override(
        self,
        package_logger: _logging.Logger,
        monkeypatch: _pytest.MonkeyPatch,
    ) -> None:
        """TREEKIT_LOGGING__LEVEL is honoured when settings are loaded."""
        monkeypatch.setenv("TREEKIT_LOGGING__LEVEL", "ERROR")

        logsetup.configure_logging()

        assert package_logger.level == _logging.ERROR
