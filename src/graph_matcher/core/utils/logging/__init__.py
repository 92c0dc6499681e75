"""Logging utilities for graph_matcher package."""

import logging
import sys

# Create global logger instance
logger = logging.getLogger("graph_matcher")


def setup_graph_matcher_logging(level: int | str | None = None) -> None:
    """
    Setup logging with a clean format for the graph_matcher package.

    Args:
        level: Logging level, as a number or a level name
            (default: GRAPH_MATCHER_LOG_LEVEL, else WARNING)
    """
    if level is None:
        from graph_matcher.types.config import get_matcher_settings

        level = get_matcher_settings().log_level

    if isinstance(level, str):
        level_name = level
        level = logging.getLevelName(level_name.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown logging level: {level_name}")

    # Remove existing handlers to avoid duplicates
    logger.handlers.clear()

    # Use stdout stream handler to ensure logs are dumped to stdout
    logging_handler = logging.StreamHandler(sys.stdout)
    logging_formatter = logging.Formatter("[Graph Matcher] [%(levelname)s] %(message)s")

    logging_handler.setFormatter(logging_formatter)
    logger.addHandler(logging_handler)
    logger.setLevel(level)
    logger.propagate = False  # Don't propagate to root logger


__all__ = [
    "logger",
    "setup_graph_matcher_logging",
]
