from .formatting import describe_value
from .logging import logger, setup_graph_matcher_logging

__all__ = [
    "describe_value",
    "logger",
    "setup_graph_matcher_logging",
]
