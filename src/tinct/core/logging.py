"""
tinct logging infrastructure.

Provides:
- Console output for human monitoring
- Optional JSONL file output (one JSON object per line) for tooling
- Component loggers under the ``tinct`` hierarchy
- Theme-specific helpers used by the runtime theme manager

Library modules only obtain loggers; nothing is configured until
setup_logging() is called (the CLI does this).
"""

from __future__ import annotations

import json
import logging
import os
import sys
from collections.abc import Sequence
from datetime import UTC, datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from tinct.runtime.validator import ValidationWarning

# =============================================================================
# Terminal Colors (respects NO_COLOR)
# =============================================================================

_NO_COLOR = bool(os.environ.get("NO_COLOR")) or not sys.stderr.isatty()


class Colors:
    """ANSI color codes for terminal output."""

    RESET = "" if _NO_COLOR else "\033[0m"
    DIM = "" if _NO_COLOR else "\033[2m"

    DEBUG = "" if _NO_COLOR else "\033[36m"  # Cyan
    INFO = "" if _NO_COLOR else "\033[32m"  # Green
    WARNING = "" if _NO_COLOR else "\033[33m"  # Yellow
    ERROR = "" if _NO_COLOR else "\033[31m"  # Red
    CRITICAL = "" if _NO_COLOR else "\033[35m"  # Magenta

    COMPONENT = "" if _NO_COLOR else "\033[34m"  # Blue


# =============================================================================
# Formatters
# =============================================================================


class JSONLFormatter(logging.Formatter):
    """
    Formats log records as JSON Lines.

    Example output:
    {"timestamp":"2025-01-15T10:30:45.123Z","level":"WARNING","component":"Theme","message":"Missing 2 token(s) in \\"acme\\"","context":{"tokens":["shadow.raised"]}}
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, UTC)
            .isoformat(timespec="milliseconds")
            .replace("+00:00", "Z"),
            "level": record.levelname,
            "component": getattr(record, "component", "tinct"),
            "message": record.getMessage(),
        }

        context = getattr(record, "context", None)
        if context:
            entry["context"] = context

        if record.exc_info and record.exc_info[0]:
            entry["exception"] = {
                "type": record.exc_info[0].__name__,
                "message": str(record.exc_info[1]),
            }

        return json.dumps(entry, default=str)


class ConsoleFormatter(logging.Formatter):
    """Human-readable formatter for console output."""

    LEVEL_COLORS = {
        logging.DEBUG: Colors.DEBUG,
        logging.INFO: Colors.INFO,
        logging.WARNING: Colors.WARNING,
        logging.ERROR: Colors.ERROR,
        logging.CRITICAL: Colors.CRITICAL,
    }

    def format(self, record: logging.LogRecord) -> str:
        component = getattr(record, "component", "tinct")
        timestamp = datetime.fromtimestamp(record.created).strftime("%H:%M:%S")

        if _NO_COLOR:
            prefix = f"[{timestamp}] [{component}]"
        else:
            prefix = f"{Colors.DIM}{timestamp}{Colors.RESET} {Colors.COMPONENT}[{component}]{Colors.RESET}"

        if record.levelno != logging.INFO:
            level_name = record.levelname
            if not _NO_COLOR:
                level_name = f"{self.LEVEL_COLORS.get(record.levelno, '')}{level_name}{Colors.RESET}"
            prefix = f"{prefix} {level_name}:"

        message = f"{prefix} {record.getMessage()}"
        context = getattr(record, "context", None)
        if context and record.levelno >= logging.WARNING:
            message += f" {json.dumps(context, default=str, sort_keys=True)}"
        return message


# =============================================================================
# Logger Setup
# =============================================================================

ROOT_LOGGER_NAME = "tinct"

_loggers: dict[str, logging.Logger] = {}


def setup_logging(
    level: int | str = logging.INFO,
    log_dir: Path | str | None = None,
    max_bytes: int = 5 * 1024 * 1024,  # 5MB
    backup_count: int = 3,
) -> Path | None:
    """
    Initialize the tinct logging handlers.

    Args:
        level: Minimum log level (number or name such as "DEBUG")
        log_dir: Directory for tinct.log (JSONL). None disables file output.
        max_bytes: Max size per log file before rotation
        backup_count: Number of backup files to keep

    Returns:
        Path to the log file, or None when file logging is disabled
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(ConsoleFormatter())
    console_handler.setLevel(level)
    root_logger.addHandler(console_handler)

    if not log_dir:
        return None

    log_path = Path(log_dir)
    log_path.mkdir(parents=True, exist_ok=True)
    log_file = log_path / "tinct.log"
    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=max_bytes,
        backupCount=backup_count,
        encoding="utf-8",
    )
    file_handler.setFormatter(JSONLFormatter())
    file_handler.setLevel(level)
    root_logger.addHandler(file_handler)

    log_with_context(
        root_logger,
        logging.DEBUG,
        "tinct logging initialized",
        log_format="jsonl",
        log_file=str(log_file),
    )
    return log_file


class _ComponentFilter(logging.Filter):
    def __init__(self, component: str):
        super().__init__()
        self.component = component

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "component"):
            record.component = self.component
        return True


def get_logger(component: str) -> logging.Logger:
    """
    Get a logger for a specific component.

    Args:
        component: Component name (e.g., "Theme", "Compiler")

    Returns:
        Logger named ``tinct.<component>`` tagging records with the component
    """
    if component in _loggers:
        return _loggers[component]

    logger = logging.getLogger(f"{ROOT_LOGGER_NAME}.{component.lower().replace(' ', '_')}")
    logger.addFilter(_ComponentFilter(component))
    _loggers[component] = logger
    return logger


def log_with_context(
    logger: logging.Logger,
    level: int,
    message: str,
    context: dict[str, Any] | None = None,
    **kwargs: Any,
) -> None:
    """
    Log a message with structured context data.

    Args:
        logger: Logger instance
        level: Logging level (logging.INFO, logging.WARNING, etc.)
        message: Human-readable message
        context: Structured context data (included in JSONL output)
        **kwargs: Additional context items
    """
    extra = {"context": {**(context or {}), **kwargs}} if (context or kwargs) else {}
    logger.log(level, message, extra=extra)


# =============================================================================
# Theme Logger Helpers
# =============================================================================


def get_theme_logger() -> logging.Logger:
    """Get logger for runtime theming."""
    return get_logger("Theme")


def get_compiler_logger() -> logging.Logger:
    """Get logger for token compilation."""
    return get_logger("Compiler")


def warn_validation(theme_name: str, warnings: Sequence[ValidationWarning]) -> None:
    """Log validation warnings for a brand payload, grouped by kind."""
    if not warnings:
        return

    logger = get_theme_logger()
    grouped: dict[str, list[str]] = {}
    for warning in warnings:
        grouped.setdefault(warning.kind.value, []).append(warning.path)

    missing = grouped.get("MissingToken", [])
    if missing:
        log_with_context(
            logger,
            logging.WARNING,
            f'Missing {len(missing)} token(s) in "{theme_name}" - using fallbacks',
            tokens=missing,
        )

    malformed = [w for w in warnings if w.kind.value == "MalformedToken"]
    if malformed:
        log_with_context(
            logger,
            logging.WARNING,
            f'Malformed {len(malformed)} token(s) in "{theme_name}" - using fallbacks',
            tokens={w.path: w.raw for w in malformed},
        )

    unknown = grouped.get("UnknownToken", [])
    if unknown:
        log_with_context(
            logger,
            logging.INFO,
            f'Ignoring {len(unknown)} unknown token(s) in "{theme_name}"',
            tokens=unknown,
        )


def error_fetch_failed(theme_name: str, error: Exception) -> None:
    """Log a brand payload fetch failure."""
    url = getattr(error, "url", None)
    status = getattr(error, "status", None)
    if status == 404:
        hint = "Theme file not found. Check the file is deployed under themes/"
    elif status is not None:
        hint = "Server error"
    else:
        hint = "Network, timeout, or unparseable document"
    log_with_context(
        get_theme_logger(),
        logging.ERROR,
        f'Failed to fetch theme "{theme_name}": {error}',
        status=status,
        url=url,
        hint=hint,
    )


def info_theme_applied(theme_name: str, mode: str) -> None:
    """Log successful brand theme application."""
    log_with_context(get_theme_logger(), logging.INFO, f'Applied theme "{theme_name}"', mode=mode)


def info_base_theme_init() -> None:
    """Log base theme initialization."""
    get_theme_logger().info("Base theme initialized")
