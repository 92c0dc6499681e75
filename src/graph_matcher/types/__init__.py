"""Type definitions for Graph Matcher."""

from .config import MatcherSettings, get_matcher_settings
from .result import MatchResult, Mismatch

__all__ = [
    "MatchResult",
    "MatcherSettings",
    "Mismatch",
    "get_matcher_settings",
]
