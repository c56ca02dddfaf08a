"""
Centralized logging configuration using Loguru.

Features:
- Structured logging with Loguru
- Standard library logging interception (redis-py logs through stdlib logging)
- Console (colored) or flat JSON output, optional rotating log files
"""

import json
import logging
import sys
from pathlib import Path
from typing import Optional

from loguru import logger  # type: ignore

from core.constants import VALID_LOG_LEVELS

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"
LOG_DIR = Path("logs")


class InterceptHandler(logging.Handler):
    """Route standard library log records to Loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Find caller from where logging call originated
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


def intercept_standard_logging() -> None:
    """Install InterceptHandler on the stdlib root logger."""
    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)


def configure_third_party_loggers() -> None:
    """Keep client library chatter out of application logs."""
    logging.getLogger("redis").setLevel(logging.WARNING)
    logging.getLogger("asyncio").setLevel(logging.WARNING)


def normalize_level(level: Optional[str], debug: bool = False) -> str:
    """Return a valid Loguru level name, falling back to INFO."""
    if not level:
        return "DEBUG" if debug else "INFO"
    level = level.upper()
    if level not in VALID_LOG_LEVELS:
        return "INFO"
    return level


def format_exception_short(exception: Exception, context: Optional[str] = None) -> str:
    """
    Format exception to be short and readable.

    Args:
        exception: Exception object
        context: Optional context message

    Returns:
        Short formatted error message, e.g.
        "Connecting to Redis | ConnectionError: refused | (connection.py:363)"
    """
    try:
        exc_type = type(exception).__name__

        tb = exception.__traceback__
        if tb:
            while tb.tb_next:
                tb = tb.tb_next
            filename = Path(tb.tb_frame.f_code.co_filename).name
            location = f"{filename}:{tb.tb_lineno}"
        else:
            location = "unknown"

        parts = []
        if context:
            parts.append(context)
        parts.append(f"{exc_type}: {exception}")
        parts.append(f"({location})")
        return " | ".join(parts)

    except Exception:
        return f"{type(exception).__name__}: {str(exception)}"


def serialize_log_record(record: dict) -> str:
    """
    Serialize a Loguru record to a flat JSON line.

    Used as a format callable, so braces and color tags are escaped.
    """
    log_record = {
        "timestamp": record["time"].isoformat(),
        "level": record["level"].name,
        "message": record["message"],
        "module": record["module"],
        "function": record["function"],
        "line": record["line"],
    }

    if record.get("exception"):
        exception = record["exception"]
        log_record["exception"] = {
            "type": exception.type.__name__ if exception.type else "Unknown",
            "message": str(exception.value),
        }

    # Context bound via logger.bind()
    for key, value in (record.get("extra") or {}).items():
        try:
            json.dumps(value)
            log_record[key] = value
        except (TypeError, OverflowError):
            log_record[key] = str(value)

    return (
        json.dumps(log_record).replace("{", "{{").replace("}", "}}").replace("<", "\\<")
        + "\n"
    )


def _add_file_handlers(fmt, suffix: str) -> None:
    LOG_DIR.mkdir(exist_ok=True)
    for name, level in (("app", "DEBUG"), ("error", "ERROR")):
        logger.add(
            LOG_DIR / f"{name}{suffix}",
            rotation="100 MB",
            retention="30 days",
            compression="zip",
            format=fmt,
            level=level,
            colorize=False,
        )


def setup_logger(force: bool = False) -> None:
    """
    Configure logger handlers.

    Only configures once unless force is set; repeated calls do not add
    duplicate handlers.
    """
    from core.config import get_settings

    if getattr(setup_logger, "_configured", False) and not force:
        return

    settings = get_settings()
    log_level = normalize_level(settings.log_level, settings.debug)
    log_format = (settings.log_format or "console").lower()

    logger.remove()

    if log_format == "json":
        logger.add(
            sys.stdout, format=serialize_log_record, level=log_level, colorize=False
        )
        if settings.log_file_enabled:
            _add_file_handlers(serialize_log_record, ".json.log")
    else:
        logger.add(sys.stdout, colorize=True, format=CONSOLE_FORMAT, level=log_level)
        if settings.log_file_enabled:
            _add_file_handlers(FILE_FORMAT, ".log")

    intercept_standard_logging()
    configure_third_party_loggers()
    setup_logger._configured = True


# Configure logger on module import
setup_logger()

__all__ = [
    "logger",
    "setup_logger",
    "format_exception_short",
    "configure_third_party_loggers",
    "intercept_standard_logging",
    "normalize_level",
    "serialize_log_record",
    "InterceptHandler",
]
