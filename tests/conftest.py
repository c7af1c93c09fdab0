import pytest

from atto.console import ScriptedConsole
from atto.interpreter import Interpreter

# Every interpreter in the suite talks to a ScriptedConsole, so `print` and
# `input` are deterministic and never touch the real stdin/stdout.


@pytest.fixture
def console():
    return ScriptedConsole()


@pytest.fixture
def interp(console):
    """Interpreter with the core library loaded."""
    return Interpreter(console=console)


@pytest.fixture
def bare(console):
    """Interpreter with builtins only."""
    return Interpreter(console=console, prelude=None)
