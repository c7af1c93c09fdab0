from __future__ import annotations

"""
Lightweight indexer for Atto files without evaluating code.

We collect every `fn name params is` header for document symbols, hover
and completion, then run the real lexer and parser (against the builtins
plus the core library) to report the first error with its position.
The header scan is tolerant, so symbols survive a broken body.
"""

from dataclasses import dataclass, field
from functools import lru_cache
from typing import Dict, List, Optional, Tuple

from atto.arity_table import ArityTable
from atto.console import ScriptedConsole
from atto.errors import AttoParseError
from atto.interpreter import Interpreter
from atto.reader.lexer import IDENTIFIER, SYMBOL, Token, lex
from atto.reader.parser import parse_program


BUILTIN_SIGNATURES: Dict[str, str] = {
    "if": "if cond then else - evaluates cond, then exactly one branch",
    "head": "head list - first element",
    "tail": "tail list - list without its first element",
    "pair": "pair a b - two-element list [a, b]",
    "fuse": "fuse a b - concatenation; non-lists count as one element",
    "litr": "litr string - parse null, true, false or an integer",
    "str": "str value - textual form",
    "words": "words string - list of whitespace-separated words",
    "input": "input prompt - read a line",
    "print": "print value - write the textual form, returns value",
    "=": "= a b - structural equality",
    "<": "< a b - less than (numbers or strings)",
    "<=": "<= a b - less than or equal (numbers or strings)",
    "+": "+ a b - sum, or string concatenation",
    "-": "- a b - difference",
    "*": "* a b - product",
    "/": "/ a b - floor division",
    "%": "% a b - remainder",
}


@dataclass
class SymbolDef:
    name: str
    params: Tuple[str, ...]
    line: int  # 0-based
    col: int  # 0-based

    @property
    def signature(self) -> str:
        return " ".join(("fn", self.name, *self.params, "is"))


@dataclass
class Problem:
    message: str
    line: int  # 0-based
    col: int  # 0-based


@dataclass
class DocumentIndex:
    symbols: Dict[str, SymbolDef] = field(default_factory=dict)
    problems: List[Problem] = field(default_factory=list)


@lru_cache(maxsize=1)
def _core_interpreter() -> Interpreter:
    return Interpreter(console=ScriptedConsole())


def core_arities() -> ArityTable:
    return _core_interpreter().arities


def core_signatures() -> Dict[str, str]:
    itp = _core_interpreter()
    return {
        name: itp.registry.get(name).signature()
        for name in itp.registry.names()
    }


def _scan_headers(tokens: List[Token]) -> Dict[str, SymbolDef]:
    symbols: Dict[str, SymbolDef] = {}
    n = len(tokens)
    for i, tok in enumerate(tokens):
        if tok.kind != IDENTIFIER or tok.text != "fn" or i + 1 >= n:
            continue
        name_tok = tokens[i + 1]
        if name_tok.kind not in (IDENTIFIER, SYMBOL):
            continue
        params = []
        j = i + 2
        while j < n and not (tokens[j].kind == IDENTIFIER and tokens[j].text in ("is", "fn")):
            params.append(tokens[j].text)
            j += 1
        symbols[name_tok.text] = SymbolDef(name_tok.text, tuple(params), name_tok.line - 1, name_tok.col - 1)
    return symbols


def _problem(err: AttoParseError) -> Problem:
    line = (err.line or 1) - 1
    col = (err.col or 1) - 1
    return Problem(err.message, line, col)


def build_index(text: str) -> DocumentIndex:
    idx = DocumentIndex()
    try:
        tokens = lex(text)
    except AttoParseError as e:
        idx.problems.append(_problem(e))
        return idx

    idx.symbols = _scan_headers(tokens)
    try:
        parse_program(text, core_arities().copy())
    except AttoParseError as e:
        idx.problems.append(_problem(e))
    return idx


def describe(word: str, idx: Optional[DocumentIndex] = None) -> Optional[str]:
    """Hover text for a name: builtin, document function or core function."""
    if word in BUILTIN_SIGNATURES:
        return BUILTIN_SIGNATURES[word]
    if idx is not None and word in idx.symbols:
        sdef = idx.symbols[word]
        return f"{sdef.signature} (defined at {sdef.line+1}:{sdef.col+1})"
    core = core_signatures()
    if word in core:
        return f"{core[word]} (core library)"
    return None
