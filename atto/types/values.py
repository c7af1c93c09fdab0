"""Value model helpers: equality, rendering, parsing and host conversion.

Values are Nil, bool, int, str and Pair. Rendering, equality and
`to_python` work from explicit stacks, so neither long lists nor lists
nested through their heads deepen the Python stack.
"""

from __future__ import annotations

import re
from typing import Iterable

from atto import AttoValue
from atto.errors import AttoTypeMismatch
from atto.types.nil import Nil, NilType
from atto.types.pair import Pair

_INT_RE = re.compile(r"-?[0-9]+")


def type_name(value: AttoValue) -> str:
    """Return the Atto name of a value's variant, for error messages."""
    if value is Nil:
        return "null"
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, int):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, Pair):
        return "list"
    return type(value).__name__


def is_list(value: AttoValue) -> bool:
    """Nil (the empty list) or a Pair."""
    return value is Nil or isinstance(value, Pair)


# -------------------------------
# Equality
# -------------------------------
def is_equal(a: AttoValue, b: AttoValue) -> bool:
    """Deep structural equality across all variants; true never equals 1."""
    pending = [(a, b)]
    while pending:
        x, y = pending.pop()
        if x is y:
            continue
        if isinstance(x, Pair) and isinstance(y, Pair):
            pending.append((x.tail, y.tail))
            pending.append((x.head, y.head))
            continue
        if type(x) is not type(y) or x != y:
            return False
    return True


# -------------------------------
# Rendering
# -------------------------------
def _atom_str(value: AttoValue) -> str:
    if value is Nil:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, str):
        return value
    raise AttoTypeMismatch("str", f"cannot render {value!r}")


def to_str(value: AttoValue) -> str:
    """Render a value the way `str` and `print` do.

    Lists nested through their heads are walked with an explicit stack, so
    rendering depth is not bounded by the Python stack. Pending entries are
    values still to render, or 1-tuples holding punctuation to emit as is.
    """
    if not isinstance(value, Pair):
        return _atom_str(value)
    parts: list[str] = []
    pending: list = [value]
    while pending:
        item = pending.pop()
        if type(item) is tuple:
            parts.append(item[0])
            continue
        if not isinstance(item, Pair):
            parts.append(_atom_str(item))
            continue
        heads = []
        node = item
        while isinstance(node, Pair):
            heads.append(node.head)
            node = node.tail
        # an improper tail is always an atom
        closing = "]" if node is Nil else " . " + _atom_str(node) + "]"
        pending.append((closing,))
        for i in range(len(heads) - 1, -1, -1):
            pending.append(heads[i])
            if i:
                pending.append((", ",))
        pending.append(("[",))
    return "".join(parts)


# -------------------------------
# Parsing
# -------------------------------
def litr(text: str) -> AttoValue:
    """Parse text as null, a boolean or an integer; otherwise return it unchanged.

    Surrounding whitespace is ignored when parsing, but text that does not
    parse comes back as given, whitespace included.
    """
    s = text.strip()
    if s == "null":
        return Nil
    if s == "true":
        return True
    if s == "false":
        return False
    if _INT_RE.fullmatch(s):
        return int(s)
    return text


def words(text: str) -> AttoValue:
    """Split text on runs of whitespace into a list of strings."""
    return from_iterable(text.split())


# -------------------------------
# Host conversion
# -------------------------------
def from_iterable(items: Iterable[AttoValue]) -> AttoValue:
    """Build a proper list from already-converted values."""
    result: AttoValue = Nil
    for item in reversed(list(items)):
        result = Pair(item, result)
    return result


def to_list(value: AttoValue) -> list[AttoValue]:
    """Return the elements of a proper list (Nil gives [])."""
    out = []
    node = value
    while isinstance(node, Pair):
        out.append(node.head)
        node = node.tail
    if node is not Nil:
        raise AttoTypeMismatch("list", f"expected a proper list, got {to_str(value)}")
    return out


def from_python(obj) -> AttoValue:
    """Convert None/bool/int/str and nested lists or tuples to Atto values."""
    if obj is None or isinstance(obj, NilType):
        return Nil
    if isinstance(obj, (bool, int, str, Pair)):
        return obj
    if isinstance(obj, (list, tuple)):
        return from_iterable(from_python(x) for x in obj)
    raise TypeError(f"Cannot convert {type(obj).__name__} to an Atto value")


def to_python(value: AttoValue):
    """Convert an Atto value to None/bool/int/str and nested Python lists."""
    if value is Nil:
        return None
    if not isinstance(value, Pair):
        return value
    root: list = []
    pending = [(value, root)]
    while pending:
        node, out = pending.pop()
        for item in to_list(node):
            if isinstance(item, Pair):
                child: list = []
                out.append(child)
                pending.append((item, child))
            else:
                out.append(None if item is Nil else item)
    return root
