"""Per-match state: visited identity pairs and recorded mismatches.

A ``MatchContext`` is created for every top-level match call and discarded
afterwards. Nothing in here is shared across calls or engine instances.
"""

from __future__ import annotations

from typing import Any

from graph_matcher.types.result import MatchResult, Mismatch


class CycleGuard:
    """Tracks ``(expected, actual)`` reference pairs already compared.

    Membership is decided by object identity only, never by content equality.
    Each newly seen object is assigned a monotonic handle and kept referenced
    until the guard is discarded, so an ``id()`` recycled by the interpreter
    can never be mistaken for an object seen earlier in the same match.
    """

    def __init__(self) -> None:
        self._handles: dict[int, tuple[int, Any]] = {}
        self._pairs: set[tuple[int, int]] = set()

    def _handle(self, obj: Any) -> int:
        entry = self._handles.get(id(obj))
        if entry is None:
            entry = (len(self._handles), obj)
            self._handles[id(obj)] = entry
        return entry[0]

    def seen(self, expected: Any, actual: Any) -> bool:
        """Check if the pair was already visited during this match."""
        expected_entry = self._handles.get(id(expected))
        actual_entry = self._handles.get(id(actual))
        if expected_entry is None or actual_entry is None:
            return False
        return (expected_entry[0], actual_entry[0]) in self._pairs

    def mark_seen(self, expected: Any, actual: Any) -> None:
        """Record the pair as visited."""
        self._pairs.add((self._handle(expected), self._handle(actual)))

    def __len__(self) -> int:
        return len(self._pairs)


class MismatchLedger:
    """Append-only, ordered record of divergences plus the overall verdict."""

    def __init__(self) -> None:
        self._mismatches: list[Mismatch] = []
        self._same = True

    def record(self, expected: Any, actual: Any, path: str) -> None:
        """Append a divergence and flip the verdict to not equivalent."""
        self._mismatches.append(Mismatch(path=path, expected=expected, actual=actual))
        self._same = False

    def is_equivalent(self) -> bool:
        """Return True while no divergence has been recorded."""
        return self._same

    @property
    def mismatches(self) -> tuple[Mismatch, ...]:
        return tuple(self._mismatches)

    def render(self, separator: str = "\n", max_length: int = 80) -> str:
        """Render one '<path> is <actual> instead of <expected>' line per divergence."""
        return separator.join(mismatch.render(max_length=max_length) for mismatch in self._mismatches)

    def to_result(self, separator: str = "\n", max_length: int = 80) -> MatchResult:
        """Freeze the ledger into a MatchResult."""
        return MatchResult(
            matched=self._same,
            mismatches=self.mismatches,
            separator=separator,
            value_repr_max_length=max_length,
        )

    def __len__(self) -> int:
        return len(self._mismatches)


class MatchContext:
    """State scoped to a single top-level match call."""

    def __init__(self) -> None:
        self.guard = CycleGuard()
        self.ledger = MismatchLedger()

    def record(self, expected: Any, actual: Any, path: str) -> None:
        self.ledger.record(expected, actual, path)

    def visit(self, expected: Any, actual: Any) -> bool:
        """Mark the pair visited.

        Returns:
            False if the pair had already been visited, True otherwise.
        """
        if self.guard.seen(expected, actual):
            return False
        self.guard.mark_seen(expected, actual)
        return True


__all__ = [
    "CycleGuard",
    "MatchContext",
    "MismatchLedger",
]
