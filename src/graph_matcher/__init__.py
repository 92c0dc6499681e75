"""Graph Matcher - deep structural comparison of object graphs for test assertions"""

from graph_matcher import comparators
from graph_matcher.core.engine import TheSameAs, the_same_as
from graph_matcher.core.exceptions import (
    ComparisonError,
    GraphMatcherError,
    IntrospectionError,
    RuleConfigurationError,
)
from graph_matcher.core.introspection import PropertyEnumerator
from graph_matcher.core.utils import logger, setup_graph_matcher_logging
from graph_matcher.matchers import HasPath, HasProperty, assert_that, has_path, has_property
from graph_matcher.types import MatcherSettings, MatchResult, Mismatch

__all__ = [
    "ComparisonError",
    "GraphMatcherError",
    "HasPath",
    "HasProperty",
    "IntrospectionError",
    "MatchResult",
    "MatcherSettings",
    "Mismatch",
    "PropertyEnumerator",
    "RuleConfigurationError",
    "TheSameAs",
    "assert_that",
    "comparators",
    "has_path",
    "has_property",
    "logger",
    "setup_graph_matcher_logging",
    "the_same_as",
]
