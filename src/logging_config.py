"""
Logging configuration for the Kodus data source.
Logs go to stderr; stdout carries the MCP stdio protocol.
"""

import logging
import sys

LOGGER_NAME = "kodus-datasource"


def setup_logging(level: int = logging.INFO) -> logging.Logger:
    """
    Configure logging for the data source server.

    Args:
        level: Logging level (default: logging.INFO)

    Returns:
        Configured logger instance
    """
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )
    return logging.getLogger(LOGGER_NAME)


def parse_level(value: str | None) -> int:
    """Turn a LOG_LEVEL value (name or number) into a logging level."""
    if not value:
        return logging.INFO
    if value.isdigit():
        return int(value)
    level = logging.getLevelName(value.upper())
    return level if isinstance(level, int) else logging.INFO
