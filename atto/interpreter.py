from __future__ import annotations

import logging
import sys
from typing import Literal, Sequence

from atto import AttoValue, Expression
from atto.arity_table import ArityTable
from atto.console import Console, StdConsole
from atto.errors import AttoEntryPointError, AttoNoEntryPoint, AttoUnknownFunction
from atto.evaluation.evaluator import evaluate
from atto.reader.parser import parse_expression, parse_program
from atto.registry import FunctionRegistry, Program
from atto.types.environment import Environment
from atto.types.function_def import FunctionDefinition
from atto.types.values import from_python

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Orchestrates reading and running Atto code.
    Keeps one ArityTable and one FunctionRegistry across calls: the prelude
    is loaded first, then user source, and each run sees a snapshot.
    """

    def __init__(
        self,
        console: Console | None = None,
        prelude: str | None | Literal['auto'] = 'auto',
    ):
        # Atto integers are unbounded, and so is their decimal text for str, print and litr
        if hasattr(sys, "set_int_max_str_digits"):
            sys.set_int_max_str_digits(0)
        self.console: Console = console if console is not None else StdConsole()
        self.arities = ArityTable()
        self.registry = FunctionRegistry()

        if prelude is None:
            pass  # explicit: no prelude
        elif prelude == 'auto':
            try:
                # Lazy import to avoid circular imports
                from atto.modules.prelude_loader import load_prelude
                load_prelude(self)
            except FileNotFoundError:
                # Be permissive: no prelude found -> proceed
                logger.warning("prelude not found; continuing without it")
        elif prelude:
            self.eval_prelude(prelude)

    # --- Loading ---
    def _register(self, code: str, origin: str) -> list[FunctionDefinition]:
        # Parse against a copy so a failed load leaves no half-declared arities
        arities = self.arities.copy()
        defs = parse_program(code, arities)
        self.arities = arities
        for fdef in defs:
            self.registry.define(fdef, origin)
        logger.debug("registered %d %s definition(s)", len(defs), origin)
        return defs

    def eval_prelude(self, code: str) -> None:
        self._register(code, 'prelude')

    def load(self, code: str) -> list[FunctionDefinition]:
        """Parse and register user definitions; later definitions override earlier ones."""
        return self._register(code, 'user')

    def program(self, entry: str = 'main') -> Program:
        return self.registry.snapshot(entry)

    # --- Running ---
    def run(self, code: str | None = None, args: Sequence = ()) -> AttoValue:
        """Optionally load `code`, then evaluate `main` with `args`."""
        if code is not None:
            self.load(code)
        program = self.program()
        main = program.main
        if main is None:
            raise AttoNoEntryPoint(f"No '{program.entry}' function defined")
        if len(args) != main.arity:
            raise AttoEntryPointError(
                f"'{main.name}' expects {main.arity} argument(s), got {len(args)}"
            )
        logger.debug("running %s with %d argument(s)", main.name, len(args))
        env = Environment.bind(main.params, [from_python(a) for a in args])
        return evaluate(main.body, env, program, self.console)

    def call(self, name: str, *args) -> AttoValue:
        """Call a defined function with host values."""
        program = self.program()
        fdef = program.get(name)
        if fdef is None:
            raise AttoUnknownFunction(f"Unknown function '{name}'")
        if len(args) != fdef.arity:
            raise AttoEntryPointError(
                f"'{name}' expects {fdef.arity} argument(s), got {len(args)}"
            )
        env = Environment.bind(fdef.params, [from_python(a) for a in args])
        return evaluate(fdef.body, env, program, self.console)

    def parse_expr(self, code: str) -> Expression:
        return parse_expression(code, self.arities)

    def eval_expr(self, code: str) -> AttoValue:
        """Evaluate one free-standing expression against the current definitions."""
        expr = self.parse_expr(code)
        return evaluate(expr, Environment(), self.program(), self.console)
