from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterator, Mapping, Optional

from atto.types.function_def import FunctionDefinition

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Program:
    """Read-only view of every definition visible to one run."""

    functions: Mapping[str, FunctionDefinition]
    entry: str = "main"

    def get(self, name: str) -> Optional[FunctionDefinition]:
        return self.functions.get(name)

    @property
    def main(self) -> Optional[FunctionDefinition]:
        return self.functions.get(self.entry)

    def __contains__(self, name: str) -> bool:
        return name in self.functions


class FunctionRegistry:
    """Whole-program function store; the last definition of a name wins.

    Populated in two phases (prelude, then user source). The evaluator only
    ever sees a Program snapshot, never the registry itself.
    """

    def __init__(self):
        self._functions: dict[str, FunctionDefinition] = {}
        self._origins: dict[str, str] = {}

    def define(self, fdef: FunctionDefinition, origin: str = "user") -> None:
        previous = self._origins.get(fdef.name)
        if previous is not None:
            logger.debug("%s definition of %s overrides %s definition", origin, fdef.name, previous)
        self._functions[fdef.name] = fdef
        self._origins[fdef.name] = origin

    def get(self, name: str) -> Optional[FunctionDefinition]:
        return self._functions.get(name)

    def origin(self, name: str) -> Optional[str]:
        return self._origins.get(name)

    def names(self) -> Iterator[str]:
        return iter(self._functions)

    def snapshot(self, entry: str = "main") -> Program:
        return Program(MappingProxyType(dict(self._functions)), entry)

    def __contains__(self, name: str) -> bool:
        return name in self._functions

    def __len__(self) -> int:
        return len(self._functions)
