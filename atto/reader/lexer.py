"""
  Atto Lexer

- Whitespace separates tokens; there are no delimiters.
- "..." is one string token (escapes: \\" \\\\ \\n \\t).
- '#' starts a comment running to the end of the line.
- Everything else is a number, a symbol (punctuation only) or an identifier.

   numbers     -> \\d or [1-9]\\d+ (no leading zeros)
   symbols     -> + - * / % = < <= ...
   identifiers -> fn, is, true, head, my_func, ...
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator

from atto.errors import AttoLexError

IDENTIFIER = "identifier"
NUMBER = "number"
STRING = "string"
SYMBOL = "symbol"

TOKEN_RE = re.compile(
    r"(?P<space>\s+)"
    r"|(?P<comment>\#[^\n]*)"  # single-line comment
    r'|(?P<string>"(?:\\.|[^\\"])*")'  # double-quoted strings
    r'|(?P<open_string>")'  # a quote with no closing partner
    r'|(?P<word>[^\s"\#]+)',  # numbers, symbols, identifiers
    re.DOTALL,
)

NUMBER_RE = re.compile(r"[0-9]|[1-9][0-9]+")

ESCAPES: dict[str, str] = {
    '"': '"',
    "\\": "\\",
    "n": "\n",
    "t": "\t",
}


@dataclass(frozen=True, slots=True)
class Token:
    kind: str
    text: str
    line: int
    col: int

    @property
    def pos(self) -> tuple[int, int]:
        return self.line, self.col

    def __str__(self) -> str:
        if self.kind == STRING:
            return '"' + self.text.replace("\\", "\\\\").replace('"', '\\"') + '"'
        return self.text


def _unescape(raw: str, line: int, col: int) -> str:
    out = []
    chars = iter(raw)
    for c in chars:
        if c != "\\":
            out.append(c)
            continue
        esc = next(chars)
        if esc not in ESCAPES:
            raise AttoLexError(f"Invalid escape sequence '\\{esc}' in string", line, col)
        out.append(ESCAPES[esc])
    return "".join(out)


def _classify(word: str, line: int, col: int) -> Token:
    if word[0].isdigit():
        if not NUMBER_RE.fullmatch(word):
            raise AttoLexError(f"Malformed number literal '{word}'", line, col)
        return Token(NUMBER, word, line, col)
    if not any(c.isalnum() or c == "_" for c in word):
        return Token(SYMBOL, word, line, col)
    return Token(IDENTIFIER, word, line, col)


def iter_tokens(source: str) -> Iterator[Token]:
    """Token generator: yields Tokens with 1-based line/column positions."""
    pos = 0
    n = len(source)
    line = 1
    line_start = 0

    while pos < n:
        m = TOKEN_RE.match(source, pos)
        kind = m.lastgroup
        text = m.group()
        col = pos - line_start + 1

        if kind == "open_string":
            raise AttoLexError("Unterminated string literal", line, col)
        if kind == "string":
            yield Token(STRING, _unescape(text[1:-1], line, col), line, col)
        elif kind == "word":
            yield _classify(text, line, col)

        newlines = text.count("\n")
        if newlines:
            line += newlines
            line_start = pos + text.rindex("\n") + 1
        pos = m.end()


def lex(source: str) -> list[Token]:
    """Lex the whole source; the result is a pure function of the text."""
    return list(iter_tokens(source))
