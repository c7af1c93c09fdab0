"""Core evaluator for the Atto interpreter.

Evaluation runs on an explicit continuation stack held in a Python list
(a trampoline), so the depth of Atto recursion is limited by memory rather
than by the Python call stack. Arguments are evaluated strictly, left to
right; `if` evaluates its condition and then exactly one branch. A user
call pops its argument frame before the body starts, so calls in tail
position run in constant stack space.
"""

from __future__ import annotations

from atto import AttoValue, Expression
from atto.console import Console
from atto.errors import AttoRuntimeError, AttoTypeMismatch, AttoUnknownFunction
from atto.evaluation.builtins import BUILTINS
from atto.reader.ast import Call, Literal, Variable
from atto.registry import Program
from atto.types.environment import Environment
from atto.types.nil import Nil
from atto.types.values import type_name


class _Args:
    """Continuation: collecting the strict arguments of a call."""

    __slots__ = ("call", "env", "values")

    def __init__(self, call: Call, env: Environment):
        self.call = call
        self.env = env
        self.values: list[AttoValue] = []


class _Branch:
    """Continuation: waiting for the condition of an `if`."""

    __slots__ = ("call", "env")

    def __init__(self, call: Call, env: Environment):
        self.call = call
        self.env = env


def _apply(
    call: Call, args: list[AttoValue], program: Program, console: Console
) -> tuple[AttoValue, Expression | None, Environment | None]:
    """Apply a call to evaluated arguments.

    Returns (value, None, None) for a builtin, or (None, body, env) when a
    user function's body still has to be evaluated.
    """
    builtin = BUILTINS.get(call.name)
    if builtin is not None:
        try:
            return builtin(console, args), None, None
        except AttoRuntimeError as e:
            raise e.locate(call.pos)

    fdef = program.get(call.name)
    if fdef is None:
        raise AttoUnknownFunction(
            f"Unknown function '{call.name}'", *(call.pos or (None, None))
        )
    return None, fdef.body, Environment.bind(fdef.params, args)


def evaluate(
    expr: Expression, env: Environment, program: Program, console: Console
) -> AttoValue:
    """Reduce `expr` under `env` to a value."""
    stack: list[_Args | _Branch] = []
    value: AttoValue = Nil
    pending: Expression | None = expr

    while True:
        # --- Descend into the pending node ---
        if pending is not None:
            node, pending = pending, None
            match node:
                case Literal():
                    value = node.value
                case Variable():
                    try:
                        value = env.lookup(node.name)
                    except AttoRuntimeError as e:
                        raise e.locate(node.pos)
                case Call(name="if"):
                    stack.append(_Branch(node, env))
                    pending = node.args[0]
                case Call() if node.args:
                    stack.append(_Args(node, env))
                    pending = node.args[0]
                case Call():
                    value, pending, callee_env = _apply(node, [], program, console)
                    if pending is not None:
                        env = callee_env
                case _:
                    raise TypeError(f"Not an expression node: {node!r}")
            continue

        # --- Return `value` to the innermost continuation ---
        if not stack:
            return value
        frame = stack[-1]
        env = frame.env

        if isinstance(frame, _Branch):
            stack.pop()
            if not isinstance(value, bool):
                raise AttoTypeMismatch(
                    "if", f"condition must be a bool, got {type_name(value)}"
                ).locate(frame.call.pos)
            pending = frame.call.args[1] if value else frame.call.args[2]
            continue

        frame.values.append(value)
        call = frame.call
        if len(frame.values) < len(call.args):
            pending = call.args[len(frame.values)]
            continue

        stack.pop()
        value, pending, callee_env = _apply(call, frame.values, program, console)
        if pending is not None:
            env = callee_env
