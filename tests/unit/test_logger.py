import logging
from collections.abc import Generator

import pytest

from impact_analyzer.logging.logger import Log


@pytest.fixture()
def clean_logger() -> Generator[logging.Logger, None, None]:
    logger = logging.getLogger("impact_analyzer")
    saved_handlers = list(logger.handlers)
    saved_level = logger.level
    logger.handlers.clear()
    yield logger
    logger.handlers[:] = saved_handlers
    logger.setLevel(saved_level)


class TestConfigure:
    def test_sets_level_case_insensitive(self, clean_logger: logging.Logger) -> None:
        Log.configure("debug")
        assert clean_logger.level == logging.DEBUG

    def test_adds_single_handler(self, clean_logger: logging.Logger) -> None:
        Log.configure("INFO")
        Log.configure("INFO")
        assert len(clean_logger.handlers) == 1


class TestMessages:
    def test_error_is_emitted(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.ERROR, logger="impact_analyzer"):
            Log.error("upload failed")
        assert "upload failed" in caplog.text
