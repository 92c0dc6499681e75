"""Core modules for Graph Matcher."""

from .utils.logging import logger, setup_graph_matcher_logging

__all__ = [
    "logger",
    "setup_graph_matcher_logging",
]
