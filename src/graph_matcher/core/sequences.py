"""Comparison of arrays, lists, unordered collections and mappings.

Containers are compared size first. A size difference is reported once at
``<path>.size`` and nothing below the container is compared.
"""

from __future__ import annotations

from collections.abc import Callable, Collection, Mapping, Sequence
from typing import Any

from graph_matcher.core.utils import logger

from . import paths
from .context import MatchContext
from .exceptions import ComparisonError, GraphMatcherError
from .ordering import OrderingStrategy, sort_elements

CompareFn = Callable[[Any, Any, str, MatchContext], None]


class CollectionComparator:
    """Compares containers, re-entering the graph walker for their elements.

    Args:
        compare: Walker callback ``compare(expected, actual, path, ctx)``.
        ordering: Fallback ordering for elements without natural ordering.
    """

    def __init__(self, compare: CompareFn, ordering: OrderingStrategy) -> None:
        self._compare = compare
        self.ordering = ordering

    def _sizes_match(self, expected: Collection[Any], actual: Collection[Any], path: str, ctx: MatchContext) -> bool:
        if len(expected) != len(actual):
            ctx.record(len(expected), len(actual), paths.size(path))
            return False
        return True

    def compare_sequences(
        self,
        expected: Collection[Any],
        actual: Collection[Any],
        path: str,
        ctx: MatchContext,
    ) -> None:
        """Compare two collections as content, ignoring element order.

        Both sides are copied and sorted, then compared pairwise by index.
        """
        logger.debug("Compare path [%s] as collection", path)
        if not expected and not actual:
            return
        if not self._sizes_match(expected, actual, path, ctx):
            return

        try:
            expected_sorted = sort_elements(expected, self.ordering)
            actual_sorted = sort_elements(actual, self.ordering)
        except GraphMatcherError as exc:
            raise exc.with_path(path)
        except Exception as exc:
            raise ComparisonError(f"Cannot order elements: {exc}", path) from exc
        for index, (expected_item, actual_item) in enumerate(zip(expected_sorted, actual_sorted, strict=True)):
            self._compare(expected_item, actual_item, paths.element(path, index), ctx)

    def compare_arrays(self, expected: Sequence[Any], actual: Sequence[Any], path: str, ctx: MatchContext) -> None:
        """Compare two fixed, positional sequences element by element."""
        logger.debug("Compare path [%s] as array", path)
        if not self._sizes_match(expected, actual, path, ctx):
            return
        for index, (expected_item, actual_item) in enumerate(zip(expected, actual, strict=True)):
            self._compare(expected_item, actual_item, paths.element(path, index), ctx)

    def compare_maps(
        self,
        expected: Mapping[Any, Any],
        actual: Mapping[Any, Any],
        path: str,
        ctx: MatchContext,
    ) -> None:
        """Compare two mappings key by key.

        Every expected key missing from the actual mapping is one mismatch at
        ``<path>[<key>]``; present keys are compared recursively.
        """
        logger.debug("Compare path [%s] as map", path)
        if not self._sizes_match(expected, actual, path, ctx):
            return
        for key, expected_value in expected.items():
            entry_path = paths.element(path, key)
            if key not in actual:
                ctx.record(expected_value, None, entry_path)
                continue
            self._compare(expected_value, actual[key], entry_path, ctx)


__all__ = [
    "CollectionComparator",
    "CompareFn",
]
