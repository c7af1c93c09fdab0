"""Error taxonomy for the Atto interpreter.

Parse-time errors carry the line/column of the offending token and abort
before any evaluation begins. Runtime errors name the innermost failing
operation and abort the current run; nothing inside the interpreter catches
or retries them.
"""

from __future__ import annotations


class AttoError(Exception):
    """ Base class for all Atto errors"""
    pass


# -------------------------------
# Parse-time errors
# -------------------------------
class AttoParseError(AttoError):
    """ Base class for errors raised while lexing or parsing source text"""

    def __init__(self, message: str, line: int | None = None, col: int | None = None):
        self.message = message
        self.line = line
        self.col = col
        if line is not None:
            message = f"{message} at {line}:{col}"
        super().__init__(message)


class AttoLexError(AttoParseError):
    """ Raised on a malformed literal or an unterminated string"""


class AttoUnknownFunction(AttoParseError):
    """ Raised when a call names something with no known arity or definition"""


class AttoUnexpectedEndOfExpression(AttoParseError):
    """ Raised when the token stream runs out while a call still needs arguments"""


class AttoArityConflict(AttoParseError):
    """ Raised when a redefinition changes a name's established arity"""


class AttoSyntaxError(AttoParseError):
    """ Raised on a malformed definition header or a misplaced keyword"""


# -------------------------------
# Runtime errors
# -------------------------------
class AttoRuntimeError(AttoError):
    """ Base class for errors raised while evaluating a program"""

    def __init__(self, operation: str, message: str):
        self.operation = operation
        self.message = message
        self.line: int | None = None
        self.col: int | None = None
        super().__init__(f"{operation}: {message}")

    def locate(self, pos: tuple[int, int] | None) -> AttoRuntimeError:
        """Attach the source position of the failing call, keeping the innermost one."""
        if pos is not None and self.line is None:
            self.line, self.col = pos
            self.args = (f"{self.operation}: {self.message} at {self.line}:{self.col}",)
        return self


class AttoUnboundVariable(AttoRuntimeError):
    """ Raised when a variable is not bound in the current call's environment"""


class AttoTypeMismatch(AttoRuntimeError):
    """ Raised when an operand's variant is not supported by an operation"""


class AttoDivisionByZero(AttoRuntimeError):
    """ Raised by / and % on a zero divisor"""


class AttoEmptyList(AttoRuntimeError):
    """ Raised by head and tail on null"""


# -------------------------------
# Entry point errors
# -------------------------------
class AttoNoEntryPoint(AttoError):
    """ Raised when a program has no main definition"""


class AttoEntryPointError(AttoError):
    """ Raised when main is run with the wrong number of arguments"""
