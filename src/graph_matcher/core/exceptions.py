"""Exceptions raised while comparing object graphs.

A structural difference between the two graphs is never an exception; it is
reported through ``MatchResult``. The errors below mean the comparison itself
could not be completed.
"""

from __future__ import annotations


class GraphMatcherError(Exception):
    """Base exception for graph matcher failures.

    Attributes:
        path: Traversal path at which the failure happened, if known.
    """

    def __init__(self, message: str, path: str | None = None):
        self.message = message
        self.path = path
        super().__init__(message)

    def __str__(self) -> str:
        if self.path is None:
            return self.message
        return f"Error comparing path '{self.path}': {self.message}"

    def with_path(self, path: str) -> GraphMatcherError:
        """Attach the traversal path unless one is already set."""
        if self.path is None:
            self.path = path
        return self


class IntrospectionError(GraphMatcherError):
    """Reading a discovered property raised an exception."""

    def __init__(self, message: str, path: str | None = None, property_name: str | None = None):
        super().__init__(message, path)
        self.property_name = property_name


class RuleConfigurationError(GraphMatcherError):
    """A comparison rule was applied to values it does not support."""


class ComparisonError(GraphMatcherError):
    """A comparison rule failed unexpectedly."""


__all__ = [
    "ComparisonError",
    "GraphMatcherError",
    "IntrospectionError",
    "RuleConfigurationError",
]
