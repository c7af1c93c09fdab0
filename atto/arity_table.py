"""Arity table: the fixed number of sub-expressions each name consumes.

The parser cannot find where a call ends without knowing its arity, so a
name is bound to exactly one arity for the life of a program.
"""

from __future__ import annotations

import logging

from atto.errors import AttoArityConflict, AttoSyntaxError, AttoUnknownFunction
from atto.reader.lexer import Token

logger = logging.getLogger(__name__)

BUILTIN_ARITIES: dict[str, int] = {
    # Flow control
    "if": 3,
    # List manipulation
    "head": 1,
    "tail": 1,
    "pair": 2,
    "fuse": 2,
    # String conversion
    "litr": 1,
    "str": 1,
    "words": 1,
    # I/O
    "input": 1,
    "print": 1,
    # Comparison
    "=": 2,
    "<": 2,
    "<=": 2,
    # Arithmetic
    "+": 2,
    "-": 2,
    "*": 2,
    "/": 2,
    "%": 2,
}

# Words that may never name a function or a parameter
RESERVED = frozenset({"fn", "is", "true", "false", "null"})


def _pos(token: Token | None) -> tuple[int | None, int | None]:
    return (token.line, token.col) if token is not None else (None, None)


class ArityTable:
    """Mapping name -> arity, pre-populated with the builtins."""

    def __init__(self):
        self._arities: dict[str, int] = dict(BUILTIN_ARITIES)

    def arity(self, name: str, token: Token | None = None) -> int:
        try:
            return self._arities[name]
        except KeyError:
            raise AttoUnknownFunction(f"Unknown function '{name}'", *_pos(token)) from None

    def declare(self, name: str, arity: int, token: Token | None = None) -> None:
        """Record a user function's arity; an existing name must keep its arity."""
        if name in RESERVED:
            raise AttoSyntaxError(f"'{name}' is a reserved word", *_pos(token))
        if name in BUILTIN_ARITIES:
            raise AttoSyntaxError(f"Cannot redefine builtin '{name}'", *_pos(token))
        known = self._arities.get(name)
        if known is not None and known != arity:
            raise AttoArityConflict(
                f"'{name}' is already defined with {known} parameter(s), not {arity}",
                *_pos(token),
            )
        if known is None:
            logger.debug("declared %s/%d", name, arity)
        self._arities[name] = arity

    def copy(self) -> ArityTable:
        clone = ArityTable()
        clone._arities = dict(self._arities)
        return clone

    def __contains__(self, name: str) -> bool:
        return name in self._arities

    def __len__(self) -> int:
        return len(self._arities)
