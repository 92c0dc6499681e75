"""Tests for collection element ordering."""

import math
from decimal import Decimal

import pytest

from graph_matcher.core.exceptions import IntrospectionError
from graph_matcher.core.introspection import PropertyEnumerator
from graph_matcher.core.ordering import StructuralOrdering, is_nan, sort_elements
from helpers.trees import Branch, Broken, Leaf, a_cycle


@pytest.fixture
def ordering() -> StructuralOrdering:
    return StructuralOrdering()


def test_natural_ordering(ordering):
    assert sort_elements([3, 1, 2], ordering) == [1, 2, 3]
    assert sort_elements(["b", "a"], ordering) == ["a", "b"]


def test_sort_elements_copies(ordering):
    items = [3, 1, 2]
    sort_elements(items, ordering)
    assert items == [3, 1, 2]


def test_mixed_types_fall_back_to_kind_then_type_name(ordering):
    assert sort_elements(["a", 1, None], ordering) == [None, 1, "a"]


def test_composites_ordered_by_properties(ordering):
    leaves = [Leaf(fallen=True, veins=1), Leaf(fallen=False, veins=9), Leaf(fallen=False, veins=3)]

    ordered = sort_elements(leaves, ordering)

    assert ordered == [Leaf(fallen=False, veins=3), Leaf(fallen=False, veins=9), Leaf(fallen=True, veins=1)]


def test_nested_composites(ordering):
    first = Branch(False, [Leaf(veins=2)])
    second = Branch(False, [Leaf(veins=1)])

    assert sort_elements([first, second], ordering) == [second, first]


def test_sets_never_use_natural_ordering(ordering):
    """Verify sets are ordered by content rather than by the subset relation."""
    ordered = sort_elements([{3}, {1, 2}, {1}], ordering)
    assert ordered == [{1}, {3}, {1, 2}]


def test_maps_ordered_by_size_then_keys_then_values(ordering):
    ordered = sort_elements([{"b": 1}, {"a": 2}, {"a": 1}, {"a": 1, "b": 1}], ordering)
    assert ordered == [{"a": 1}, {"a": 2}, {"b": 1}, {"a": 1, "b": 1}]


def test_compare_is_zero_for_equal_structures(ordering):
    assert ordering.compare(Branch(True), Branch(True)) == 0
    assert ordering.compare([1, 2], [1, 2]) == 0


def test_compare_sign(ordering):
    assert ordering.compare(Leaf(veins=1), Leaf(veins=2)) < 0
    assert ordering.compare(Leaf(veins=2), Leaf(veins=1)) > 0


def test_cycles_compare_equal(ordering):
    assert ordering.compare(a_cycle("x"), a_cycle("x")) == 0


def test_ordering_uses_enumerator():
    enumerator = PropertyEnumerator().register(Leaf, ["veins"])
    ordering = StructuralOrdering(enumerator)

    assert ordering.compare(Leaf(fallen=True, veins=1), Leaf(fallen=False, veins=1)) == 0


@pytest.mark.parametrize(
    "value, expected",
    [
        (float("nan"), True),
        (Decimal("NaN"), True),
        (1.0, False),
        (Decimal("1"), False),
        ("nan", False),
    ],
    ids=["float", "decimal", "float-number", "decimal-number", "text"],
)
def test_is_nan(value, expected):
    assert is_nan(value) is expected


def test_nan_sorts_last(ordering):
    result = sort_elements([float("nan"), 1.0, 0.5], ordering)

    assert result[:2] == [0.5, 1.0]
    assert math.isnan(result[2])


def test_nan_sort_is_independent_of_input_order(ordering):
    nan = float("nan")
    assert sort_elements([2.0, nan, 1.0], ordering)[:2] == sort_elements([nan, 1.0, 2.0], ordering)[:2] == [1.0, 2.0]


def test_absent_attribute_orders_first(ordering):
    plain, extended = Branch(), Branch()
    extended.extra = 1

    assert ordering.compare(plain, extended) < 0
    assert ordering.compare(extended, plain) > 0


def test_property_read_failure(ordering):
    with pytest.raises(IntrospectionError, match="Cannot read property 'value' of Broken: boom"):
        sort_elements([Broken(), Broken()], ordering)
