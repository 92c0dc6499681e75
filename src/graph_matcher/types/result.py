"""Result types produced by a match."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from graph_matcher.core.utils.formatting import describe_value


class Mismatch(BaseModel):
    """A divergence between the expected and actual graphs at one path.

    Attributes:
        path: Traversal path of the diverging node (e.g. "Tree.branches[0].dead").
        expected: Value found in the expected graph.
        actual: Value found in the actual graph.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    path: str = Field(description="Traversal path of the diverging node")
    expected: Any = Field(default=None, description="Value found in the expected graph")
    actual: Any = Field(default=None, description="Value found in the actual graph")

    def render(self, max_length: int = 80) -> str:
        """Render as '<path> is <actual> instead of <expected>'."""
        actual = describe_value(self.actual, max_length=max_length)
        expected = describe_value(self.expected, max_length=max_length)
        return f"{self.path} is {actual} instead of {expected}"


class MatchResult(BaseModel):
    """Outcome of comparing an actual graph against the expected graph.

    Attributes:
        matched: True when no mismatch was recorded.
        mismatches: Divergences in discovery order (depth-first, property order).
        separator: Separator placed between rendered mismatches.
        value_repr_max_length: Maximum length of each rendered value.
    """

    model_config = ConfigDict(frozen=True)

    matched: bool = Field(description="True when no mismatch was recorded")
    mismatches: tuple[Mismatch, ...] = Field(default=(), description="Divergences in discovery order")
    separator: str = Field(default="\n", description="Separator placed between rendered mismatches")
    value_repr_max_length: int = Field(default=80, description="Maximum length of each rendered value")

    @property
    def description(self) -> str:
        """Rendered mismatch report, empty when the graphs matched."""
        return self.separator.join(
            mismatch.render(max_length=self.value_repr_max_length) for mismatch in self.mismatches
        )

    @property
    def paths(self) -> list[str]:
        """Paths of all mismatches, in discovery order."""
        return [mismatch.path for mismatch in self.mismatches]

    def __bool__(self) -> bool:
        return self.matched


__all__ = [
    "MatchResult",
    "Mismatch",
]
