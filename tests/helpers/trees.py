"""Object graphs shared by the test modules."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal


@dataclass
class Leaf:
    """A leaf with no natural ordering."""

    fallen: bool = False
    veins: int = 12


class Branch:
    def __init__(self, dead: bool = False, leaves: list[Leaf] | None = None):
        self.dead = dead
        self.leaves = leaves if leaves is not None else [Leaf()]

    def __repr__(self) -> str:
        return f"Branch [dead={self.dead}]"


class Tree:
    """A plain class exposing its state through public instance attributes."""

    def __init__(self, name: str = "Oak"):
        self.name = name
        self.age = 1
        self.num_of_branches = 20000
        self.weight = 4.56
        self.height = Decimal("10.98")
        self.girth = 2.34
        self.germination_date = date(1975, 8, 9)
        self.deciduous = True
        self.branches: list[Branch] = []
        self.main_branch: Branch | None = Branch(False)

    def add_branches(self, branches: list[Branch]) -> None:
        self.branches.extend(branches)

    def __repr__(self) -> str:
        return f"Tree [{self.name}]"


class Node:
    """A linked node, used to build cyclic graphs."""

    def __init__(self, name: str):
        self.name = name
        self.next: Node | None = None


def a_cycle(name: str) -> Node:
    """A node that links to itself."""
    node = Node(name)
    node.next = node
    return node


class Broken:
    """Exposes a property whose getter fails."""

    @property
    def value(self) -> int:
        raise ValueError("boom")
