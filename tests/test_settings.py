"""Tests for Settings and logging setup."""

import logging
from pathlib import Path

import pytest

from todocli.config import Settings
from todocli.logging import setup_logging


class TestSettings:
    """Tests for Settings defaults and environment overrides."""

    def test_defaults(self):
        """Defaults point at tasks.json with logging off."""
        settings = Settings()

        assert settings.tasks_file == Path("tasks.json")
        assert settings.verbose == 0
        assert settings.log_file is None

    def test_env_overrides(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
        """TODO_* environment variables are read."""
        monkeypatch.setenv("TODO_TASKS_FILE", str(tmp_path / "mine.json"))
        monkeypatch.setenv("TODO_VERBOSE", "2")

        settings = Settings()

        assert settings.tasks_file == tmp_path / "mine.json"
        assert settings.verbose == 2

    def test_kwargs_beat_env(self, monkeypatch: pytest.MonkeyPatch):
        """Explicit values win over the environment."""
        monkeypatch.setenv("TODO_TASKS_FILE", "from-env.json")

        settings = Settings(tasks_file=Path("from-cli.json"))

        assert settings.tasks_file == Path("from-cli.json")


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_silent_by_default(self):
        """No handlers are installed without verbosity or a log file."""
        setup_logging()

        assert logging.getLogger("todocli").handlers == []

    def test_verbose_levels(self):
        """-v maps to INFO and -vv to DEBUG."""
        setup_logging(1)
        assert logging.getLogger("todocli").level == logging.INFO

        setup_logging(2)
        assert logging.getLogger("todocli").level == logging.DEBUG

    def test_startup_record(self, tmp_path: Path):
        """A startup line with the version is logged once configured."""
        log_file = tmp_path / "todo.log"

        setup_logging(0, log_file)

        assert "todocli 0.1.0 starting | level=INFO" in log_file.read_text()

    def test_log_file_only(self, tmp_path: Path):
        """A log file alone logs at INFO without a stderr handler."""
        log_file = tmp_path / "logs" / "todo.log"

        setup_logging(0, log_file)
        logging.getLogger("todocli.test").info("hello")

        logger = logging.getLogger("todocli")
        assert logger.level == logging.INFO
        assert [type(h) for h in logger.handlers] == [logging.FileHandler]
        assert "hello" in log_file.read_text()
