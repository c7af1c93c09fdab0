from __future__ import annotations


class NilType:
    """The null value; also the empty list that terminates every proper list."""

    __slots__ = ()

    def __repr__(self): return "null"
    def __bool__(self): return False

    # Nil is equal only to Nil
    def __eq__(self, other):
        return isinstance(other, NilType)

    def __hash__(self):
        return hash(NilType)


Nil = NilType()
