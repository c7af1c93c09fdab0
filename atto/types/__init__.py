"""Atto runtime types: the value model, environments and definitions."""

from atto.types.nil import Nil, NilType
from atto.types.pair import Pair
from atto.types.environment import Environment
from atto.types.function_def import FunctionDefinition

__all__ = ["Nil", "NilType", "Pair", "Environment", "FunctionDefinition"]
