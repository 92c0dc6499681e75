"""Tests for graph navigation."""

import pytest

from graph_matcher.core.exceptions import IntrospectionError
from graph_matcher.core.graph import NOT_FOUND, GraphNavigator, parse_path
from helpers.trees import Branch, Broken, Leaf, Tree, a_cycle


@pytest.fixture
def navigator() -> GraphNavigator:
    return GraphNavigator()


@pytest.fixture
def tree() -> Tree:
    tree = Tree()
    tree.add_branches([Branch(True, [Leaf(veins=3)])])
    return tree


def test_parse_path():
    assert parse_path("Tree.branches[0].dead") == [("Tree", False), ("branches", False), ("0", True), ("dead", False)]
    assert parse_path("dict[Oak].age") == [("dict", False), ("Oak", True), ("age", False)]


@pytest.mark.parametrize(
    "path, expected",
    [
        ("Tree.name", "Oak"),
        ("TREE.Name", "Oak"),
        ("name", "Oak"),
        ("Tree.main_branch.dead", False),
        ("Tree.branches[0].dead", True),
        ("Tree.branches[0].leaves[0].veins", 3),
    ],
    ids=["rooted", "case-insensitive", "unrooted", "nested", "indexed", "deep"],
)
def test_find_path(navigator, tree, path, expected):
    assert navigator.find_path(tree, path) == expected


@pytest.mark.parametrize(
    "path",
    ["Tree.missing", "Tree.branches[5].dead", "Tree.branches[x]", "Tree.name.length", "Tree.age[0]"],
    ids=["missing-property", "index-out-of-range", "bad-index", "below-value", "index-on-value"],
)
def test_find_path_not_found(navigator, tree, path):
    assert navigator.find_path(tree, path) is NOT_FOUND


def test_find_path_through_maps(navigator):
    forest = {"Oak": Tree()}

    assert navigator.find_path(forest, "dict[Oak].age") == 1
    assert navigator.find_path(forest, "dict.oak.age") == 1
    assert navigator.find_path(forest, "dict[Elm]") is NOT_FOUND


def test_find_property_depth_first(navigator, tree):
    assert navigator.find_property(tree, "Name") == "Oak"
    assert navigator.find_property(tree, "veins") == 3
    assert navigator.find_property(tree, "missing") is NOT_FOUND


def test_iter_properties_terminates_on_cycles(navigator):
    node = a_cycle("x")

    properties = list(navigator.iter_properties(node))

    assert [name for name, _ in properties] == ["name", "next"]
    assert properties[1][1] is node


def test_property_read_failure(navigator):
    with pytest.raises(IntrospectionError, match="boom"):
        navigator.find_property(Broken(), "value")
