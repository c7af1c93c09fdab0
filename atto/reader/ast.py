"""Expression nodes built by the parser.

A Call owns exactly as many children as its name's arity.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from atto import AttoValue


@dataclass(frozen=True, slots=True)
class Literal:
    value: AttoValue
    pos: tuple[int, int] | None = field(default=None, compare=False)


@dataclass(frozen=True, slots=True)
class Variable:
    name: str
    pos: tuple[int, int] | None = field(default=None, compare=False)


@dataclass(frozen=True, slots=True)
class Call:
    name: str
    args: tuple = ()
    pos: tuple[int, int] | None = field(default=None, compare=False)

    @property
    def arity(self) -> int:
        return len(self.args)
