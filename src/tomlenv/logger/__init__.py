"""
tomlenv Logger Module

Usage:
    from tomlenv.logger import get_logger, create_logger

    # Configured from TOMLENV_LOG_LEVEL / TOMLENV_LOG_FILE / TOMLENV_LOG_JSON
    logger = get_logger()

    # Show merge diagnostics regardless of the environment
    logger = create_logger(level=logging.DEBUG)

Environment Variables:
    {PREFIX}_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    {PREFIX}_LOG_FILE: Optional file path for log output
    {PREFIX}_LOG_JSON: Set to "true" for JSON output format

    Where {PREFIX} is derived from the logger name ("tomlenv" -> "TOMLENV")
"""

import logging
import os
from typing import Optional, TextIO

from .interface import Logger
from .structured_logger import JsonFormatter, StructuredLogger, TextFormatter


def _get_env_prefix(name: str) -> str:
    """Convert a logger name to its environment variable prefix.

    Examples:
        "tomlenv" -> "TOMLENV"
        "tomlenv-cli" -> "TOMLENV_CLI"
    """
    return name.upper().replace("-", "_")


def parse_level(value: Optional[str], default: int = logging.INFO) -> int:
    """Map a level name such as "debug" to its ``logging`` constant."""
    if not value:
        return default
    level = logging.getLevelName(value.strip().upper())
    return level if isinstance(level, int) else default


def create_logger(
    name: str = "tomlenv",
    level: Optional[int] = None,
    log_file: Optional[str] = None,
    json_format: Optional[bool] = None,
    stream: Optional[TextIO] = None,
) -> Logger:
    """Create a logger, falling back to environment variables for unset options.

    Args:
        name: Logger name; also determines the environment variable prefix
        level: Logging level (defaults to {PREFIX}_LOG_LEVEL or INFO)
        log_file: Optional file path (defaults to {PREFIX}_LOG_FILE)
        json_format: JSON output (defaults to {PREFIX}_LOG_JSON == "true")
        stream: Console stream (defaults to stdout)

    Returns:
        A configured Logger instance
    """
    env_prefix = _get_env_prefix(name)

    if level is None:
        level = parse_level(os.environ.get(f"{env_prefix}_LOG_LEVEL"))

    if log_file is None:
        log_file = os.environ.get(f"{env_prefix}_LOG_FILE")

    if json_format is None:
        json_format = os.environ.get(f"{env_prefix}_LOG_JSON", "false").lower() == "true"

    return StructuredLogger(
        name=name,
        level=level,
        log_file=log_file,
        json_format=json_format,
        stream=stream,
    )


def get_logger(name: str = "tomlenv") -> Logger:
    """Get a logger configured entirely from environment variables."""
    return create_logger(name=name)


_default_logger: Optional[Logger] = None


def get_default_logger() -> Logger:
    """Return the process-wide logger used when a loader is given none.

    Built once from the environment; later calls reuse it and leave the
    handlers of the underlying "tomlenv" logger untouched.
    """
    global _default_logger
    if _default_logger is None:
        _default_logger = get_logger()
    return _default_logger


__all__ = [
    "Logger",
    "StructuredLogger",
    "JsonFormatter",
    "TextFormatter",
    "create_logger",
    "get_logger",
    "get_default_logger",
    "parse_level",
]
