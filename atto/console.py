"""Console capability used by the `input` and `print` builtins.

The evaluator performs no direct I/O; whoever runs a program hands it an
object with `read_line(prompt)` and `write_line(text)`.
"""

from __future__ import annotations

import sys
from typing import Iterable, Protocol, TextIO


class Console(Protocol):
    def read_line(self, prompt: str) -> str: ...
    def write_line(self, text: str) -> None: ...


class StdConsole:
    """Console over text streams (stdin/stdout by default)."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None):
        self.stdin = stdin
        self.stdout = stdout

    def read_line(self, prompt: str) -> str:
        out = self.stdout or sys.stdout
        out.write(prompt)
        out.flush()
        line = (self.stdin or sys.stdin).readline()
        # EOF reads as the empty string
        return line.rstrip("\r\n")

    def write_line(self, text: str) -> None:
        out = self.stdout or sys.stdout
        out.write(text + "\n")
        out.flush()


class ScriptedConsole:
    """Deterministic console: replays queued input lines and records everything."""

    def __init__(self, inputs: Iterable[str] = ()):
        self.inputs: list[str] = list(inputs)
        self.prompts: list[str] = []
        self.outputs: list[str] = []

    def read_line(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.inputs:
            return ""
        return self.inputs.pop(0)

    def write_line(self, text: str) -> None:
        self.outputs.append(text)
