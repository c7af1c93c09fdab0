"""Render parsed Atto code with the implicit structure made explicit.

    + 1 * 2 3   ->   (+ 1 (* 2 3))

Used by `atto --dump-ast` to show how arities resolved expression spans.
"""

from atto import Expression
from atto.reader.ast import Call, Literal, Variable
from atto.types.function_def import FunctionDefinition
from atto.types.values import to_str

# ----------------- ANSI colors -----------------
RESET = "\033[0m"
COLOR_CALL = "\033[94m"
COLOR_VARIABLE = "\033[92m"
COLOR_LITERAL = "\033[95m"


def _literal(value) -> str:
    if isinstance(value, str):
        return '"' + value.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n") + '"'
    return to_str(value)


def format_expr(expr: Expression, color: bool = False) -> str:
    # pending holds nodes still to render and str chunks to emit as is
    parts: list[str] = []
    pending: list = [expr]
    while pending:
        item = pending.pop()
        if isinstance(item, str):
            parts.append(item)
        elif isinstance(item, Literal):
            text = _literal(item.value)
            parts.append(f"{COLOR_LITERAL}{text}{RESET}" if color else text)
        elif isinstance(item, Variable):
            parts.append(f"{COLOR_VARIABLE}{item.name}{RESET}" if color else item.name)
        elif isinstance(item, Call):
            name = f"{COLOR_CALL}{item.name}{RESET}" if color else item.name
            pending.append(")")
            for arg in reversed(item.args):
                pending.append(arg)
                pending.append(" ")
            pending.append("(" + name)
        else:
            raise TypeError(f"Not an expression node: {item!r}")
    return "".join(parts)


def format_definition(fdef: FunctionDefinition, color: bool = False) -> str:
    return f"{fdef.signature()} {format_expr(fdef.body, color)}"
