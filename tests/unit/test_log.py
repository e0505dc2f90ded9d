"""
Tests for the logging helpers.

Covers:
1. NullHandler on the package logger
2. setup_logging attaches one console handler, however often it is called
3. Failure paths log at DEBUG before raising
"""

import logging

import pytest

from lars import Mat2, Vec3, get_logger, setup_logging
from lars.core import log
from lars.core.log import PACKAGE_LOGGER_NAME


@pytest.fixture
def package_logger(monkeypatch: pytest.MonkeyPatch):
    """The lars logger, restored to its handlers and level afterwards."""
    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    handlers = list(logger.handlers)
    level = logger.level
    monkeypatch.setattr(log, "_LOGGER_CONFIGURED", False)

    yield logger

    for handler in logger.handlers[:]:
        if handler not in handlers:
            logger.removeHandler(handler)
    logger.setLevel(level)


class TestPackageLogger:
    def test_has_null_handler(self) -> None:
        handlers = logging.getLogger(PACKAGE_LOGGER_NAME).handlers
        assert any(isinstance(h, logging.NullHandler) for h in handlers)

    def test_get_logger(self) -> None:
        assert get_logger("lars.matrix").name == "lars.matrix"
        assert get_logger("lars.matrix").parent is logging.getLogger(PACKAGE_LOGGER_NAME)


class TestSetupLogging:
    def test_attaches_stream_handler(self, package_logger: logging.Logger) -> None:
        before = len(package_logger.handlers)
        setup_logging(logging.WARNING)
        assert len(package_logger.handlers) == before + 1
        assert isinstance(package_logger.handlers[-1], logging.StreamHandler)
        assert package_logger.level == logging.WARNING

    def test_idempotent(self, package_logger: logging.Logger) -> None:
        setup_logging(logging.WARNING)
        count = len(package_logger.handlers)
        setup_logging(logging.DEBUG)
        assert len(package_logger.handlers) == count
        assert package_logger.level == logging.WARNING


class TestFailureLogging:
    def test_singular_inverse_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger=PACKAGE_LOGGER_NAME):
            with pytest.raises(ValueError):
                Mat2.ZERO.inverse()
        assert "inverse of singular" in caplog.text

    def test_degenerate_normalize_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger=PACKAGE_LOGGER_NAME):
            with pytest.raises(ValueError):
                Vec3.ZERO.normalize()
        assert "normalize on degenerate" in caplog.text

    def test_success_path_silent(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger=PACKAGE_LOGGER_NAME):
            Mat2.IDENTITY.inverse()
            Vec3.UNIT_X.normalize()
        assert caplog.records == []
