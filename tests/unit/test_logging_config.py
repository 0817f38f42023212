import os
from collections.abc import Generator
from unittest.mock import patch

import orjson
import pytest
import structlog

from leseliste.logging_config import (
    configure_from_settings,
    configure_logging,
    get_logger,
)


@pytest.fixture(autouse=True)
def reset_structlog() -> Generator[None]:
    yield
    structlog.reset_defaults()


class TestConfigureLogging:
    def test_json_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging("INFO")

        get_logger("test").info("Book loaded", book_id=1)

        line = capsys.readouterr().out.strip().splitlines()[-1]
        data = orjson.loads(line)
        assert data["message"] == "Book loaded"
        assert data["level"] == "info"
        assert data["book_id"] == 1
        assert "timestamp" in data

    def test_level_filters_lower_levels(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        configure_logging("WARNING")

        get_logger("test").info("Book loaded")

        assert capsys.readouterr().out == ""

    def test_console_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging("INFO", json_output=False)

        get_logger("test").info("Book loaded", book_id=1)

        out = capsys.readouterr().out
        assert "Book loaded" in out
        assert "book_id=1" in out

    def test_initial_context_is_bound(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        configure_logging("INFO")

        get_logger("test", policy="strict").info("Rejected book payload")

        data = orjson.loads(capsys.readouterr().out.strip().splitlines()[-1])
        assert data["policy"] == "strict"

    def test_configure_from_settings(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        with patch.dict(os.environ, {"LL_LOG_LEVEL": "ERROR"}, clear=True):
            configure_from_settings()

        get_logger("test").warning("Rejected book payload")

        assert capsys.readouterr().out == ""
