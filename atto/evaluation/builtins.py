"""Builtin primitives for the Atto runtime.

Each builtin receives the console and its already-evaluated arguments and
returns a value. `if` is not here: it is the one lazy form and the
evaluator handles it itself.
"""
from __future__ import annotations

from typing import Callable

from atto import AttoValue
from atto.console import Console
from atto.errors import AttoDivisionByZero, AttoEmptyList, AttoTypeMismatch
from atto.types.nil import Nil
from atto.types.pair import Pair
from atto.types.values import from_iterable, is_equal, is_list, litr, to_list, to_str, type_name, words

Builtin = Callable[[Console, list[AttoValue]], AttoValue]


def _is_num(v: AttoValue) -> bool:
    return isinstance(v, int) and not isinstance(v, bool)


def _mismatch(op: str, *values: AttoValue) -> AttoTypeMismatch:
    kinds = ", ".join(type_name(v) for v in values)
    return AttoTypeMismatch(op, f"unsupported operand type(s): {kinds}")


def _numbers(op: str, a: AttoValue, b: AttoValue) -> tuple[int, int]:
    if not (_is_num(a) and _is_num(b)):
        raise _mismatch(op, a, b)
    return a, b


# -------------------------------
# Arithmetic
# -------------------------------
def add(console: Console, args: list[AttoValue]) -> AttoValue:
    """Sum two numbers, or concatenate two strings."""
    a, b = args
    if isinstance(a, str) and isinstance(b, str):
        return a + b
    a, b = _numbers("+", a, b)
    return a + b


def sub(console: Console, args: list[AttoValue]) -> AttoValue:
    a, b = _numbers("-", *args)
    return a - b


def mul(console: Console, args: list[AttoValue]) -> AttoValue:
    a, b = _numbers("*", *args)
    return a * b


def div(console: Console, args: list[AttoValue]) -> AttoValue:
    """Floor division."""
    a, b = _numbers("/", *args)
    if b == 0:
        raise AttoDivisionByZero("/", "division by zero")
    return a // b


def rem(console: Console, args: list[AttoValue]) -> AttoValue:
    """Remainder with the sign of the divisor (pairs with floor division)."""
    a, b = _numbers("%", *args)
    if b == 0:
        raise AttoDivisionByZero("%", "modulo by zero")
    return a % b


# -------------------------------
# Comparison
# -------------------------------
def equals(console: Console, args: list[AttoValue]) -> bool:
    a, b = args
    return is_equal(a, b)


def _ordered(op: str, a: AttoValue, b: AttoValue) -> None:
    if _is_num(a) and _is_num(b):
        return
    if isinstance(a, str) and isinstance(b, str):
        return
    raise _mismatch(op, a, b)


def less(console: Console, args: list[AttoValue]) -> bool:
    a, b = args
    _ordered("<", a, b)
    return a < b


def less_eq(console: Console, args: list[AttoValue]) -> bool:
    a, b = args
    _ordered("<=", a, b)
    return a <= b


# -------------------------------
# Lists
# -------------------------------
def head(console: Console, args: list[AttoValue]) -> AttoValue:
    (lst,) = args
    if lst is Nil:
        raise AttoEmptyList("head", "head of an empty list")
    if not isinstance(lst, Pair):
        raise _mismatch("head", lst)
    return lst.head


def tail(console: Console, args: list[AttoValue]) -> AttoValue:
    (lst,) = args
    if lst is Nil:
        raise AttoEmptyList("tail", "tail of an empty list")
    if not isinstance(lst, Pair):
        raise _mismatch("tail", lst)
    return lst.tail


def pair(console: Console, args: list[AttoValue]) -> AttoValue:
    a, b = args
    return Pair(a, Pair(b, Nil))


def _items(v: AttoValue) -> list[AttoValue]:
    """Elements of a list, or the value itself as a single element."""
    if is_list(v):
        return to_list(v)
    return [v]


def fuse(console: Console, args: list[AttoValue]) -> AttoValue:
    """Concatenate; a non-list operand counts as a one-element list."""
    a, b = args
    if is_list(b):
        # Share the right-hand list; only the left side is copied
        result = b
        for item in reversed(_items(a)):
            result = Pair(item, result)
        return result
    return from_iterable(_items(a) + [b])


# -------------------------------
# Strings
# -------------------------------
def litr_(console: Console, args: list[AttoValue]) -> AttoValue:
    (text,) = args
    if not isinstance(text, str):
        raise _mismatch("litr", text)
    return litr(text)


def str_(console: Console, args: list[AttoValue]) -> str:
    (value,) = args
    return to_str(value)


def words_(console: Console, args: list[AttoValue]) -> AttoValue:
    (text,) = args
    if not isinstance(text, str):
        raise _mismatch("words", text)
    return words(text)


# -------------------------------
# I/O
# -------------------------------
def input_(console: Console, args: list[AttoValue]) -> str:
    (prompt,) = args
    return console.read_line(to_str(prompt))


def print_(console: Console, args: list[AttoValue]) -> AttoValue:
    (value,) = args
    console.write_line(to_str(value))
    return value


BUILTINS: dict[str, Builtin] = {
    "head": head,
    "tail": tail,
    "pair": pair,
    "fuse": fuse,
    "litr": litr_,
    "str": str_,
    "words": words_,
    "input": input_,
    "print": print_,
    "=": equals,
    "<": less,
    "<=": less_eq,
    "+": add,
    "-": sub,
    "*": mul,
    "/": div,
    "%": rem,
}
