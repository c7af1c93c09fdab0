"""Top-level function definitions."""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO

from atto import Expression


@dataclass(frozen=True, slots=True)
class FunctionDefinition:
    """A `fn name p1 ... pk is body` definition; arity is the parameter count."""

    name: str
    params: tuple[str, ...]
    body: Expression
    pos: tuple[int, int] | None = None

    @property
    def arity(self) -> int:
        return len(self.params)

    def signature(self) -> str:
        with StringIO() as buffer:
            buffer.write("fn ")
            buffer.write(self.name)
            for p in self.params:
                buffer.write(" ")
                buffer.write(p)
            buffer.write(" is")
            return buffer.getvalue()

    def __str__(self) -> str:
        return self.signature()
