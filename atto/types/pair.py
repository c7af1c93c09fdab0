"""Immutable cons cell for Atto lists."""

from __future__ import annotations

from typing import Iterator

from atto import AttoValue
from atto.types.nil import Nil


class Pair:
    """A cons cell. A proper list is a chain of Pairs ending in Nil."""

    __slots__ = ("head", "tail")

    def __init__(self, head: AttoValue, tail: AttoValue = Nil):
        object.__setattr__(self, "head", head)
        object.__setattr__(self, "tail", tail)

    def __setattr__(self, name, value):
        raise AttributeError("Pair is immutable")

    def __iter__(self) -> Iterator[AttoValue]:
        """Iterate the elements along the tail chain (stops at the first non-Pair tail)."""
        node: AttoValue = self
        while isinstance(node, Pair):
            yield node.head
            node = node.tail

    def __eq__(self, other) -> bool:
        from atto.types.values import is_equal
        return isinstance(other, Pair) and is_equal(self, other)

    __hash__ = None

    def __repr__(self) -> str:
        from atto.types.values import to_str
        return f"Pair({to_str(self)})"
