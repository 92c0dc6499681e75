"""Tests for value classification."""

import array
import uuid
from collections import OrderedDict, deque, namedtuple
from datetime import date, datetime, time, timedelta
from decimal import Decimal
from enum import Enum
from fractions import Fraction
from pathlib import Path

import pytest

from graph_matcher.core.classifier import ValueKind, classify, is_named_tuple
from helpers.trees import Leaf, Tree

Point = namedtuple("Point", ["x", "y"])


class Colour(Enum):
    GREEN = "green"


@pytest.mark.parametrize(
    "value, kind",
    [
        (None, ValueKind.NULL),
        ("text", ValueKind.VALUE),
        (b"bytes", ValueKind.VALUE),
        (True, ValueKind.VALUE),
        (1, ValueKind.VALUE),
        (1.5, ValueKind.VALUE),
        (1j, ValueKind.VALUE),
        (Decimal("1.5"), ValueKind.VALUE),
        (Fraction(1, 3), ValueKind.VALUE),
        (date(2024, 1, 1), ValueKind.VALUE),
        (datetime(2024, 1, 1), ValueKind.VALUE),
        (time(12, 0), ValueKind.VALUE),
        (timedelta(days=1), ValueKind.VALUE),
        (Colour.GREEN, ValueKind.VALUE),
        (uuid.UUID(int=0), ValueKind.VALUE),
        (Path("/tmp"), ValueKind.VALUE),
        (range(3), ValueKind.VALUE),
        (int, ValueKind.VALUE),
        ({"a": 1}, ValueKind.MAP),
        (OrderedDict(), ValueKind.MAP),
        ((1, 2), ValueKind.ARRAY),
        (array.array("i", [1, 2]), ValueKind.ARRAY),
        ([1, 2], ValueKind.LIST),
        (deque([1]), ValueKind.LIST),
        ({1, 2}, ValueKind.COLLECTION),
        (frozenset(), ValueKind.COLLECTION),
        (Point(1, 2), ValueKind.COMPOSITE),
        (Leaf(), ValueKind.COMPOSITE),
        (Tree(), ValueKind.COMPOSITE),
    ],
    ids=[
        "none",
        "str",
        "bytes",
        "bool",
        "int",
        "float",
        "complex",
        "decimal",
        "fraction",
        "date",
        "datetime",
        "time",
        "timedelta",
        "enum",
        "uuid",
        "path",
        "range",
        "class",
        "dict",
        "ordered-dict",
        "tuple",
        "array",
        "list",
        "deque",
        "set",
        "frozenset",
        "named-tuple",
        "dataclass",
        "plain-object",
    ],
)
def test_classify(value, kind):
    assert classify(value) is kind


def test_is_named_tuple():
    assert is_named_tuple(Point(1, 2))
    assert not is_named_tuple((1, 2))
    assert not is_named_tuple(Point)


@pytest.mark.parametrize(
    "kind, is_container",
    [
        (ValueKind.NULL, False),
        (ValueKind.VALUE, False),
        (ValueKind.ARRAY, True),
        (ValueKind.MAP, True),
        (ValueKind.LIST, True),
        (ValueKind.COLLECTION, True),
        (ValueKind.COMPOSITE, False),
    ],
)
def test_is_container(kind, is_container):
    assert kind.is_container is is_container
