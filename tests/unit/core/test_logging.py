"""Unit tests for logging setup."""

import json

import pytest
import structlog

from core.config import Settings
from core.logging import setup_logging


class TestSetupLogging:
    def test_json_output_in_production(self, capsys: pytest.CaptureFixture[str]) -> None:
        setup_logging(Settings(_env_file=None, app_env="production"))  # type: ignore[call-arg]

        structlog.get_logger().info("task_added", task_id="t-1")

        line = capsys.readouterr().err.strip().splitlines()[-1]
        event = json.loads(line)
        assert event["event"] == "task_added"
        assert event["task_id"] == "t-1"
        assert event["level"] == "info"
        assert "timestamp" in event

    def test_level_filters_debug(self, capsys: pytest.CaptureFixture[str]) -> None:
        setup_logging(
            Settings(_env_file=None, log_level="WARNING", log_json=True)  # type: ignore[call-arg]
        )

        structlog.get_logger().info("quiet")
        structlog.get_logger().warning("loud")

        err = capsys.readouterr().err
        assert "quiet" not in err
        assert "loud" in err

    def test_unknown_level_falls_back_to_info(self, capsys: pytest.CaptureFixture[str]) -> None:
        setup_logging(Settings(_env_file=None, log_level="chatty", log_json=True))  # type: ignore[call-arg]

        structlog.get_logger().info("visible")

        assert "visible" in capsys.readouterr().err
