"""Unit tests for the logging system with platform-aware paths and rotation."""

import logging
from pathlib import Path
from unittest.mock import patch

import pytest
import yaml

from clearedtoplan.core.logging_system import (
    LoggerMixin,
    LoggingError,
    get_logger,
    get_platform_log_dir,
    initialize_logging,
    rotate_logs,
    shutdown_logging,
)

pytestmark = pytest.mark.usefixtures("isolated_logging")

PLATFORM_DIR = "clearedtoplan.core.logging_system.get_platform_log_dir"


def write_config(tmp_path: Path, **overrides) -> Path:
    config = {
        "version": 1,
        "level": "DEBUG",
        "log_dir": str(tmp_path / "logs"),
        "combined_log": {"enabled": True, "filename": "clearedtoplan.log", "backup_count": 5},
        "console": {"enabled": False},
        "components": {},
    }
    config.update(overrides)
    path = tmp_path / "logging.yaml"
    path.write_text(yaml.safe_dump(config), encoding="utf-8")
    return path


class TestPlatformLogDir:
    """Tests for get_platform_log_dir function."""

    def test_macos_log_dir(self) -> None:
        with patch("platform.system", return_value="Darwin"):
            assert get_platform_log_dir() == Path.home() / "Library" / "Logs" / "ClearedToPlan"

    def test_linux_log_dir(self) -> None:
        with patch("platform.system", return_value="Linux"):
            assert get_platform_log_dir() == Path.home() / ".clearedtoplan" / "logs"

    def test_windows_log_dir(self) -> None:
        with patch("platform.system", return_value="Windows"), patch.dict(
            "os.environ", {"APPDATA": "C:/Users/Test/AppData/Roaming"}
        ):
            log_dir = get_platform_log_dir()
            assert log_dir == Path("C:/Users/Test/AppData/Roaming") / "ClearedToPlan" / "Logs"

    def test_unknown_platform_defaults_to_linux(self) -> None:
        with patch("platform.system", return_value="FreeBSD"):
            assert get_platform_log_dir() == Path.home() / ".clearedtoplan" / "logs"


class TestLogRotation:
    """Tests for log rotation functionality."""

    def test_rotate_logs_no_existing_log(self, tmp_path) -> None:
        """Nothing to rotate, nothing created."""
        rotate_logs(tmp_path, "test.log", 5)
        assert list(tmp_path.glob("*")) == []

    def test_rotate_logs_multiple_files(self, tmp_path) -> None:
        (tmp_path / "test.log").write_text("current")
        (tmp_path / "test.log.1").write_text("previous-1")
        (tmp_path / "test.log.2").write_text("previous-2")

        rotate_logs(tmp_path, "test.log", 5)

        assert not (tmp_path / "test.log").exists()
        assert (tmp_path / "test.log.1").read_text() == "current"
        assert (tmp_path / "test.log.2").read_text() == "previous-1"
        assert (tmp_path / "test.log.3").read_text() == "previous-2"

    def test_rotate_logs_deletes_oldest(self, tmp_path) -> None:
        (tmp_path / "test.log").write_text("current")
        for i in range(1, 6):
            (tmp_path / f"test.log.{i}").write_text(f"old-{i}")

        rotate_logs(tmp_path, "test.log", keep_count=5)

        assert not (tmp_path / "test.log.6").exists()
        assert (tmp_path / "test.log.1").read_text() == "current"
        assert (tmp_path / "test.log.5").read_text() == "old-4"

    def test_rotate_logs_keep_none(self, tmp_path) -> None:
        (tmp_path / "test.log").write_text("current")
        rotate_logs(tmp_path, "test.log", keep_count=0)
        assert list(tmp_path.glob("*")) == []


class TestLoggingInitialization:
    """Tests for logging system initialization."""

    def test_initialize_with_platform_dir(self, tmp_path) -> None:
        with patch(PLATFORM_DIR, return_value=tmp_path):
            initialize_logging(use_platform_dir=True)
            get_logger("test").warning("Test message")
            shutdown_logging()

        assert (tmp_path / "clearedtoplan.log").exists()

    def test_initialize_from_config_file(self, tmp_path) -> None:
        initialize_logging(write_config(tmp_path), use_platform_dir=False)
        get_logger("clearedtoplan.test").info("From config")
        shutdown_logging()

        content = (tmp_path / "logs" / "clearedtoplan.log").read_text()
        assert "From config" in content

    def test_initialize_with_missing_config(self) -> None:
        with pytest.raises(LoggingError, match="Logging config file not found"):
            initialize_logging(config_path="/nonexistent/config.yaml")

    def test_component_level_override(self, tmp_path) -> None:
        config = write_config(tmp_path, components={"clearedtoplan.quiet": {"level": "ERROR"}})
        initialize_logging(config, use_platform_dir=False)

        assert get_logger("clearedtoplan.quiet").level == logging.ERROR

    def test_disabled_component(self, tmp_path) -> None:
        config = write_config(tmp_path, components={"clearedtoplan.muted": {"enabled": False}})
        initialize_logging(config, use_platform_dir=False)

        assert get_logger("clearedtoplan.muted").disabled is True

    def test_dedicated_component_file(self, tmp_path) -> None:
        config = write_config(
            tmp_path, components={"clearedtoplan.solo": {"dedicated_file": True}}
        )
        initialize_logging(config, use_platform_dir=False)
        log = get_logger("clearedtoplan.solo")
        log.info("Only here")
        shutdown_logging()

        assert "Only here" in (tmp_path / "logs" / "clearedtoplan.solo.log").read_text()
        # Dedicated handlers are added once, so drop them before the next test
        for handler in list(log.handlers):
            log.removeHandler(handler)


    def test_component_settings_cover_subtree(self, tmp_path) -> None:
        """An entry for a package applies to every module below it."""
        config = write_config(
            tmp_path, components={"clearedtoplan.branch": {"level": "ERROR"}}
        )
        initialize_logging(config, use_platform_dir=False)

        child = get_logger("clearedtoplan.branch.leaf")
        child.warning("Filtered out")
        child.error("Kept")
        shutdown_logging()

        content = (tmp_path / "logs" / "clearedtoplan.log").read_text()
        assert child.getEffectiveLevel() == logging.ERROR
        assert "Kept" in content
        assert "Filtered out" not in content

    def test_disabled_component_silences_children(self, tmp_path) -> None:
        config = write_config(tmp_path, components={"clearedtoplan.hushed": {"enabled": False}})
        initialize_logging(config, use_platform_dir=False)

        get_logger("clearedtoplan.hushed.child").critical("Never written")
        shutdown_logging()

        assert "Never written" not in (tmp_path / "logs" / "clearedtoplan.log").read_text()

    def test_reinitialize_clears_component_settings(self, tmp_path) -> None:
        first = write_config(tmp_path, components={"clearedtoplan.reset": {"level": "ERROR"}})
        initialize_logging(first, use_platform_dir=False)
        assert get_logger("clearedtoplan.reset").level == logging.ERROR

        initialize_logging(write_config(tmp_path), use_platform_dir=False)
        assert get_logger("clearedtoplan.reset").level == logging.NOTSET

    def test_unknown_level_raises(self, tmp_path) -> None:
        config = write_config(tmp_path, components={"clearedtoplan.bad": {"level": "LOUD"}})
        with pytest.raises(LoggingError, match="Unknown log level"):
            initialize_logging(config, use_platform_dir=False)


class TestLoggerFunctionality:
    """Tests for logger creation and usage."""

    def test_get_logger_caches_loggers(self, tmp_path) -> None:
        initialize_logging(write_config(tmp_path), use_platform_dir=False)
        assert get_logger("test") is get_logger("test")

    def test_logger_writes_to_file(self, tmp_path) -> None:
        initialize_logging(write_config(tmp_path), use_platform_dir=False)

        log = get_logger("test")
        log.info("Test log message")
        log.debug("Debug message")
        log.error("Error message")
        shutdown_logging()

        content = (tmp_path / "logs" / "clearedtoplan.log").read_text()
        assert "Test log message" in content
        assert "Debug message" in content
        assert "Error message" in content

    def test_logger_mixin(self, tmp_path) -> None:
        class Importer(LoggerMixin):
            def __init__(self) -> None:
                self.attach_logger("clearedtoplan.importer")

        initialize_logging(write_config(tmp_path), use_platform_dir=False)
        Importer().log_warning("Imported %d profiles", 3)
        shutdown_logging()

        content = (tmp_path / "logs" / "clearedtoplan.log").read_text()
        assert "Imported 3 profiles" in content

    def test_mixin_without_logger_is_silent(self) -> None:
        LoggerMixin().log_error("nothing attached")


class TestLogRotationIntegration:
    """Integration tests for log rotation on startup."""

    def test_multiple_sessions_keep_five_logs(self, tmp_path) -> None:
        with patch(PLATFORM_DIR, return_value=tmp_path):
            for i in range(7):
                initialize_logging(use_platform_dir=True)
                get_logger("test").warning("Session %d", i)
                shutdown_logging()

        log_files = list(tmp_path.glob("clearedtoplan.log*"))
        assert len(log_files) == 6
        assert "Session 1" in (tmp_path / "clearedtoplan.log.5").read_text()
        assert "Session 6" in (tmp_path / "clearedtoplan.log").read_text()
