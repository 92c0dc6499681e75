"""Deep structural comparison of two object graphs.

``TheSameAs`` walks an expected and an actual graph side by side. At every
node it handles nulls, guards against cycles, consults the override registry
and finally compares the node according to its ``ValueKind``. Every
divergence is recorded with its traversal path, e.g.::

    Tree.branches[0].dead is True instead of False
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Generic, TypeVar

from graph_matcher.comparators.base import ComparisonRule, as_rule
from graph_matcher.comparators.equality import Excluded, IsEqual
from graph_matcher.core.utils import describe_value, logger
from graph_matcher.types.config import MatcherSettings, get_matcher_settings
from graph_matcher.types.result import MatchResult

from . import paths
from .classifier import ValueKind, classify
from .context import MatchContext
from .exceptions import ComparisonError, GraphMatcherError
from .introspection import MISSING, PropertyEnumerator, default_enumerator, read_property
from .ordering import OrderingStrategy, StructuralOrdering
from .overrides import OverrideRegistry, default_type_rules
from .sequences import CollectionComparator

T = TypeVar("T")

RuleLike = ComparisonRule | Callable[..., Any]


class TheSameAs(Generic[T]):
    """Matches the full object graph of an expected instance against another instance.

    Collections are compared as content: both sides are sorted before their
    elements are compared, so ``[1, 2, 3]`` is the same as ``[3, 1, 2]``.
    Tuples are positional.

    Args:
        expected: Root of the expected graph.
        name: Root name used as the prefix of every reported path. Defaults
            to the simple type name of ``expected``.
        enumerator: Property enumerator for composite objects.
        ordering: Fallback ordering for collection elements without natural ordering.
        settings: Settings providing the mismatch separator and value rendering
            length. Defaults to settings read from the environment.

    Example:
        >>> matcher = TheSameAs(expected_tree).exclude_property("age")
        >>> matcher.matches(actual_tree)
        True
        >>> matcher.describe_mismatch(other_tree)
        'Tree.name is "Elm" instead of "Oak"'
    """

    def __init__(
        self,
        expected: T,
        name: str | None = None,
        *,
        enumerator: PropertyEnumerator | None = None,
        ordering: OrderingStrategy | None = None,
        settings: MatcherSettings | None = None,
    ) -> None:
        self.expected = expected
        self.name = type(expected).__name__ if name is None else name
        self.enumerator = enumerator or default_enumerator
        self.settings = settings or get_matcher_settings()
        self.overrides = OverrideRegistry(default_type_rules())
        self.collections = CollectionComparator(
            self._compare,
            ordering or StructuralOrdering(self.enumerator),
        )
        self._dispatch: dict[ValueKind, Callable[[Any, Any, str, MatchContext], None]] = {
            ValueKind.VALUE: self._compare_values,
            ValueKind.ARRAY: self.collections.compare_arrays,
            ValueKind.LIST: self.collections.compare_sequences,
            ValueKind.COLLECTION: self.collections.compare_sequences,
            ValueKind.MAP: self.collections.compare_maps,
            ValueKind.COMPOSITE: self._compare_composites,
        }

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def exclude_path(self, path: str) -> TheSameAs[T]:
        """Exclude a property path from the comparison, e.g. ``"Person.last_name"``."""
        self.overrides.add_path(path, Excluded())
        return self

    def exclude_property(self, name: str) -> TheSameAs[T]:
        """Exclude every property with this name, wherever it appears in the graph."""
        self.overrides.add_property(name, Excluded())
        return self

    def exclude_type(self, type_: type) -> TheSameAs[T]:
        """Exclude every value of this type (or a subclass) from the comparison."""
        self.overrides.add_type(type_, Excluded())
        return self

    def compare_path(self, path: str, rule: RuleLike) -> TheSameAs[T]:
        """Compare the node at a path with a rule, a two-argument function or a one-argument predicate."""
        self.overrides.add_path(path, as_rule(rule))
        return self

    def compare_property(self, name: str, rule: RuleLike) -> TheSameAs[T]:
        """Compare every property with this name using a rule, function or predicate."""
        self.overrides.add_property(name, as_rule(rule))
        return self

    def compare_type(self, type_: type, rule: RuleLike) -> TheSameAs[T]:
        """Compare every value of this type (or a subclass) using a rule, function or predicate."""
        self.overrides.add_type(type_, as_rule(rule))
        return self

    # ------------------------------------------------------------------
    # Evaluation
    # ------------------------------------------------------------------

    def match(self, actual: Any) -> MatchResult:
        """Compare the actual graph against the expected graph.

        Args:
            actual: Root of the actual graph.

        Returns:
            MatchResult with the verdict and every mismatch in discovery order.

        Raises:
            IntrospectionError: If a property of either graph could not be read.
            RuleConfigurationError: If a rule was applied to values it does not support.
            ComparisonError: If a rule failed for any other reason.
        """
        ctx = MatchContext()
        self._compare(self.expected, actual, self.name, ctx)
        result = ctx.ledger.to_result(
            separator=self.settings.mismatch_separator,
            max_length=self.settings.value_repr_max_length,
        )
        logger.debug(
            "Compared [%s]: %s (%d mismatches, %d pairs visited)",
            self.name,
            "same" if result.matched else "different",
            len(result.mismatches),
            len(ctx.guard),
        )
        return result

    def matches(self, actual: Any) -> bool:
        """Return True if the actual graph is the same as the expected graph."""
        return self.match(actual).matched

    def describe(self) -> str:
        return f"the same as {describe_value(self.expected, max_length=self.settings.value_repr_max_length)}"

    def describe_mismatch(self, actual: Any) -> str:
        """Rendered mismatches, one line per divergence, or an empty string."""
        return self.match(actual).description

    def assert_matches(self, actual: Any) -> None:
        """Raise AssertionError describing every mismatch unless the graphs are the same."""
        result = self.match(actual)
        if not result.matched:
            raise AssertionError(f"\nExpected: {self.describe()}\n     but: {result.description}")

    def __repr__(self) -> str:
        return f"TheSameAs({self.name!r})"

    # ------------------------------------------------------------------
    # Graph walk
    # ------------------------------------------------------------------

    def _compare(self, expected: Any, actual: Any, path: str, ctx: MatchContext) -> None:
        if expected is None and actual is None:
            return

        expected_kind, actual_kind = classify(expected), classify(actual)
        logger.debug("Compare [%s] vs [%s] at [%s]", expected_kind, actual_kind, path)

        # Scalars cannot form cycles; only structures take part in the guard
        if expected is not None and actual is not None and expected_kind is not ValueKind.VALUE:
            if not ctx.visit(expected, actual):
                logger.debug("Already compared pair at [%s]", path)
                return

        value_type = type(expected) if expected is not None else type(actual)
        override = self.overrides.resolve(path, value_type)
        if override is not None:
            scope, rule = override
            self._compare_with_rule(expected, actual, path, scope, rule, ctx)
            return

        if expected is None or actual is None or expected_kind is not actual_kind:
            ctx.record(expected, actual, path)
            return

        self._dispatch[expected_kind](expected, actual, path, ctx)

    def _compare_with_rule(
        self,
        expected: Any,
        actual: Any,
        path: str,
        scope: str,
        rule: ComparisonRule,
        ctx: MatchContext,
    ) -> None:
        logger.debug("Compare path [%s] using %s rule [%r]", path, scope, rule)
        try:
            same = rule.matches(expected, actual)
        except GraphMatcherError as exc:
            raise exc.with_path(path)
        except Exception as exc:
            raise ComparisonError(f"Rule {rule!r} failed: {exc}", path) from exc
        if not same:
            ctx.record(expected, actual, path)

    def _compare_values(self, expected: Any, actual: Any, path: str, ctx: MatchContext) -> None:
        self._compare_with_rule(expected, actual, path, "value", IsEqual(), ctx)

    def _compare_composites(self, expected: Any, actual: Any, path: str, ctx: MatchContext) -> None:
        if not isinstance(actual, type(expected)):
            logger.debug("Type mismatch at [%s]: %s vs %s", path, type(expected), type(actual))
            ctx.record(expected, actual, path)
            return

        for accessor in self.enumerator.properties_of_both(expected, actual):
            property_path = paths.child(path, accessor.name)
            expected_value = read_property(accessor, expected, property_path)
            actual_value = read_property(accessor, actual, property_path)
            if expected_value is MISSING or actual_value is MISSING:
                self._compare_missing(expected_value, actual_value, property_path, ctx)
            else:
                self._compare(expected_value, actual_value, property_path, ctx)

    def _compare_missing(self, expected: Any, actual: Any, path: str, ctx: MatchContext) -> None:
        # Type rules do not apply to an absent attribute
        rule = self.overrides.for_path(path)
        if rule is None:
            rule = self.overrides.for_property(path)
        if rule is None:
            logger.debug("Attribute present on one side only at [%s]", path)
            ctx.record(expected, actual, path)
            return
        self._compare_with_rule(
            None if expected is MISSING else expected,
            None if actual is MISSING else actual,
            path,
            "path or property",
            rule,
            ctx,
        )


def the_same_as(expected: T, name: str | None = None) -> TheSameAs[T]:
    """Create a matcher comparing the full object graph of ``expected`` against another instance.

    Example:
        >>> assert_that(dao.get_by_id(tree.id), the_same_as(tree))
        >>> assert_that(dao.get_by_id(tree.id), the_same_as(tree, "MyTree"))
    """
    return TheSameAs(expected, name)


__all__ = [
    "RuleLike",
    "TheSameAs",
    "the_same_as",
]
