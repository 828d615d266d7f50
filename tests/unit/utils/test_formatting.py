"""Unit tests for console and logging helpers."""

import logging

import pytest
from pkgwhisper.utils.formatting import configure_logging
from rich.logging import RichHandler


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_default_level_is_info(self) -> None:
        configure_logging()

        root = logging.getLogger()
        assert root.level == logging.INFO
        assert any(isinstance(h, RichHandler) for h in root.handlers)

    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True)

        assert logging.getLogger().level == logging.DEBUG

    def test_quiet_shows_warnings_only(self) -> None:
        configure_logging(quiet=True)

        assert logging.getLogger().level == logging.WARNING
