"""Logging setup for the planner.

Logging is configured once from YAML. Every launch writes a fresh combined
log in the platform log directory and keeps the previous five as
clearedtoplan.log.1 .. clearedtoplan.log.5:
    - macOS: ~/Library/Logs/ClearedToPlan
    - Linux: ~/.clearedtoplan/logs
    - Windows: %AppData%/ClearedToPlan/Logs

The `components` section of the YAML tunes parts of the package. Entries are
keyed by logger name and apply to the whole subtree below it, so an entry for
clearedtoplan.workflow covers the state machine and the flight history alike.

Typical usage example:
    from clearedtoplan.core.logging_system import get_logger

    logger = get_logger(__name__)
    logger.info("Weight and balance computed: CG=%.1f in", cg)
"""

import logging
import logging.handlers
import os
import platform
from pathlib import Path
from typing import Any

import yaml

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
COMBINED_LOG_NAME = "clearedtoplan.log"

_logging_config: dict[str, Any] = {}
_component_handlers: list[tuple[logging.Logger, logging.Handler]] = []
_configured_components: list[logging.Logger] = []
_initialized = False


class LoggingError(Exception):
    """Raised when logging cannot be configured."""


def get_platform_log_dir() -> Path:
    """Directory the combined log goes to on this operating system."""
    system = platform.system()

    if system == "Darwin":
        return Path.home() / "Library" / "Logs" / "ClearedToPlan"
    if system == "Windows":
        appdata = Path(os.environ.get("APPDATA", Path.home() / "AppData" / "Roaming"))
        return appdata / "ClearedToPlan" / "Logs"
    return Path.home() / ".clearedtoplan" / "logs"


def rotate_logs(log_dir: Path, log_filename: str = COMBINED_LOG_NAME, keep_count: int = 5) -> None:
    """Shift the previous launch logs down one generation.

    The current log becomes <name>.1, <name>.1 becomes <name>.2 and so on.
    The generation past keep_count is deleted.
    """
    current = log_dir / log_filename
    if not current.exists():
        return
    if keep_count < 1:
        current.unlink()
        return

    generations = [log_dir / f"{log_filename}.{i}" for i in range(1, keep_count + 1)]
    generations[-1].unlink(missing_ok=True)
    for newer, older in zip(reversed(generations[:-1]), reversed(generations[1:])):
        if newer.exists():
            newer.replace(older)
    current.replace(generations[0])


def initialize_logging(config_path: str | Path | None = None, use_platform_dir: bool = True) -> None:
    """Configure logging for the process.

    Calling it again replaces the previous configuration, including any
    component settings and dedicated files.

    Args:
        config_path: Logging YAML. Built-in defaults are used when None.
        use_platform_dir: Write logs to the platform log directory instead
            of the config's log_dir.

    Raises:
        LoggingError: If the config cannot be read or holds an unknown level,
            or the log directory cannot be created.

    Examples:
        >>> initialize_logging("config/logging.yaml", use_platform_dir=False)
        >>> get_logger("clearedtoplan.workflow").info("Logging ready")
    """
    global _logging_config, _initialized

    config = _load_config(config_path) if config_path else _get_default_config()
    if use_platform_dir:
        config["log_dir"] = str(get_platform_log_dir())
    _logging_config = config

    log_dir = Path(config.get("log_dir", "logs"))
    try:
        log_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise LoggingError(f"Cannot create log directory {log_dir}: {e}") from e

    combined = config.get("combined_log", {})
    rotate_logs(
        log_dir, combined.get("filename", COMBINED_LOG_NAME), combined.get("backup_count", 5)
    )

    _configure_root_logger(log_dir)
    _configure_components(log_dir)
    _initialized = True


def _load_config(config_path: str | Path) -> dict[str, Any]:
    path = Path(config_path)
    if not path.exists():
        raise LoggingError(f"Logging config file not found: {path}")

    try:
        return yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError) as e:
        raise LoggingError(f"Failed to load logging config {path}: {e}") from e


def _get_default_config() -> dict[str, Any]:
    return {
        "version": 1,
        "level": "INFO",
        "format": DEFAULT_FORMAT,
        "date_format": DEFAULT_DATE_FORMAT,
        "log_dir": "logs",
        "combined_log": {"enabled": True, "filename": COMBINED_LOG_NAME, "backup_count": 5},
        "console": {"enabled": True, "level": "WARNING"},
        "components": {},
    }


def _level(name: Any) -> int:
    level = logging.getLevelName(str(name).upper())
    if not isinstance(level, int):
        raise LoggingError(f"Unknown log level: {name}")
    return level


def _configure_root_logger(log_dir: Path) -> None:
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()

    console = _logging_config.get("console", {})
    if console.get("enabled", True):
        handler = logging.StreamHandler()
        handler.setLevel(_level(console.get("level", "WARNING")))
        handler.setFormatter(_get_formatter())
        root.addHandler(handler)

    combined = _logging_config.get("combined_log", {})
    if combined.get("enabled", True):
        # Rotation already moved the previous launch aside
        handler = logging.FileHandler(
            log_dir / combined.get("filename", COMBINED_LOG_NAME), mode="w", encoding="utf-8"
        )
        handler.setLevel(_level(_logging_config.get("level", "DEBUG")))
        handler.setFormatter(_get_formatter())
        root.addHandler(handler)


def _configure_components(log_dir: Path) -> None:
    _reset_components()

    for name, settings in (_logging_config.get("components") or {}).items():
        logger = logging.getLogger(name)
        _configured_components.append(logger)

        if not settings.get("enabled", True):
            # Above CRITICAL so child loggers inherit the silence
            logger.disabled = True
            logger.setLevel(logging.CRITICAL + 1)
            continue

        if "level" in settings:
            logger.setLevel(_level(settings["level"]))

        if settings.get("dedicated_file", False):
            handler = logging.handlers.RotatingFileHandler(
                log_dir / f"{name}.log",
                maxBytes=settings.get("max_bytes", 10485760),
                backupCount=settings.get("backup_count", 5),
                encoding="utf-8",
            )
            handler.setLevel(logging.DEBUG)
            handler.setFormatter(_get_formatter())
            logger.addHandler(handler)
            _component_handlers.append((logger, handler))


def _reset_components() -> None:
    for logger, handler in _component_handlers:
        logger.removeHandler(handler)
        handler.close()
    _component_handlers.clear()

    for logger in _configured_components:
        logger.disabled = False
        logger.setLevel(logging.NOTSET)
    _configured_components.clear()


class MillisecondFormatter(logging.Formatter):
    """Formatter that appends milliseconds after a dot."""

    def formatTime(self, record, datefmt=None):
        stamp = super().formatTime(record, datefmt or DEFAULT_DATE_FORMAT)
        return f"{stamp}.{int(record.msecs):03d}"


def _get_formatter() -> logging.Formatter:
    return MillisecondFormatter(
        _logging_config.get("format", DEFAULT_FORMAT),
        _logging_config.get("date_format", DEFAULT_DATE_FORMAT),
    )


def get_logger(name: str) -> logging.Logger:
    """Logger for a module, configuring logging with defaults on first use.

    Args:
        name: Logger name, normally the module's __name__.

    Note:
        Use lazy formatting (%) instead of f-strings.
    """
    if not _initialized:
        initialize_logging()
    return logging.getLogger(name)


def shutdown_logging() -> None:
    """Flush and close every handler. Call at application shutdown."""
    logging.shutdown()
    _reset_components()


class LoggerMixin:
    """Mixin giving a class logging helpers once attach_logger() is called.

    Before a logger is attached the helpers do nothing.

    Examples:
        >>> class ProfileImporter(LoggerMixin):
        ...     def __init__(self):
        ...         self.attach_logger("clearedtoplan.aircraft.importer")
    """

    _log: logging.Logger | None = None

    def attach_logger(self, name: str) -> None:
        self._log = get_logger(name)

    def log_debug(self, message: str, *args: Any) -> None:
        self._emit(logging.DEBUG, message, *args)

    def log_info(self, message: str, *args: Any) -> None:
        self._emit(logging.INFO, message, *args)

    def log_warning(self, message: str, *args: Any) -> None:
        self._emit(logging.WARNING, message, *args)

    def log_error(self, message: str, *args: Any, exc_info: bool = False) -> None:
        self._emit(logging.ERROR, message, *args, exc_info=exc_info)

    def _emit(self, level: int, message: str, *args: Any, exc_info: bool = False) -> None:
        if self._log is not None:
            self._log.log(level, message, *args, exc_info=exc_info)
