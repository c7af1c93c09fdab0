"""Runtime environment for Atto.

An Environment binds the parameter names of one active function call to
their argument values. Functions are not closures, so there is no outer
link: a body sees its own parameters and nothing else.
"""

from __future__ import annotations

from typing import Iterable, Mapping

from atto import AttoValue
from atto.errors import AttoUnboundVariable


class Environment:
    """Flat, frame-local mapping from parameter names to values."""

    __slots__ = ("vars",)

    def __init__(self, bindings: Mapping[str, AttoValue] | None = None):
        self.vars: dict[str, AttoValue] = dict(bindings) if bindings else {}

    @classmethod
    def bind(cls, params: Iterable[str], args: Iterable[AttoValue]) -> Environment:
        """Positionally bind argument values to parameter names."""
        env = cls()
        env.vars = dict(zip(params, args))
        return env

    def lookup(self, name: str) -> AttoValue:
        try:
            return self.vars[name]
        except KeyError:
            raise AttoUnboundVariable(name, f"variable '{name}' is not bound") from None

    def __contains__(self, name: str) -> bool:
        return name in self.vars

    def __len__(self) -> int:
        return len(self.vars)

    def __repr__(self) -> str:
        inner = ", ".join(f"{k}={v!r}" for k, v in self.vars.items())
        return f"Environment({inner})"
