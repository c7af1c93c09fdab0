"""
  Atto Parser (expression-span resolver)

There are no brackets, so an expression's extent is derived from arities
alone: a call to a name of arity k owns the next k complete expressions,
each of which owns its own children in turn. One forward pass over the
tokens builds the tree; open calls wait on an explicit stack, so nesting
depth is not bounded by the Python stack.

   + 1 * 2 3          -> Call('+', (1, Call('*', (2, 3))))
   fn sq x is * x x   -> FunctionDefinition('sq', ('x',), Call('*', (x, x)))

Definitions are pre-scanned before bodies are parsed, so a call may refer
to a function defined later in the source.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from atto import Expression
from atto.arity_table import ArityTable
from atto.errors import AttoSyntaxError, AttoUnexpectedEndOfExpression
from atto.reader.ast import Call, Literal, Variable
from atto.reader.lexer import IDENTIFIER, NUMBER, STRING, SYMBOL, Token, lex
from atto.types.function_def import FunctionDefinition
from atto.types.nil import Nil

logger = logging.getLogger(__name__)

KEYWORD_LITERALS = {
    "true": True,
    "false": False,
    "null": Nil,
}


def _is_keyword(tok: Optional[Token], word: str) -> bool:
    return tok is not None and tok.kind == IDENTIFIER and tok.text == word


class TokenStream:
    """Cursor over a lexed token list."""

    def __init__(self, tokens: Iterable[Token]):
        self.tokens: list[Token] = tokens if isinstance(tokens, list) else list(tokens)
        self.index = 0

    def peek(self) -> Optional[Token]:
        if self.index < len(self.tokens):
            return self.tokens[self.index]
        return None

    def advance(self) -> Optional[Token]:
        tok = self.peek()
        if tok is not None:
            self.index += 1
        return tok

    def at_end(self) -> bool:
        return self.index >= len(self.tokens)

    def last(self) -> Optional[Token]:
        return self.tokens[-1] if self.tokens else None


class Parser:
    def __init__(self, stream: TokenStream, arities: ArityTable):
        self.stream = stream
        self.arities = arities

    # ------------------------
    # Expressions
    # ------------------------
    def parse_expr(self, params: tuple[str, ...] = ()) -> Expression:
        tok = self.stream.peek()
        if tok is None or _is_keyword(tok, "fn"):
            at = tok or self.stream.last()
            raise AttoUnexpectedEndOfExpression(
                "Expected an expression", *(at.pos if at else (None, None))
            )
        return self._parse_from(self.stream.advance(), params)

    def _leaf(self, tok: Token, params: tuple[str, ...]) -> Optional[Expression]:
        """Literal or Variable for `tok`, or None when it names a call."""
        if tok.kind == NUMBER:
            return Literal(int(tok.text), tok.pos)
        if tok.kind == STRING:
            return Literal(tok.text, tok.pos)

        name = tok.text
        if name in KEYWORD_LITERALS:
            return Literal(KEYWORD_LITERALS[name], tok.pos)
        if name == "is" or name == "fn":
            raise AttoSyntaxError(f"Unexpected keyword '{name}' in expression", *tok.pos)
        if name in params:
            return Variable(name, tok.pos)
        return None

    def _next_argument(self, frame: tuple[Token, int, list]) -> Token:
        call_tok, arity, args = frame
        nxt = self.stream.peek()
        if nxt is None or _is_keyword(nxt, "fn"):
            raise AttoUnexpectedEndOfExpression(
                f"'{call_tok.text}' expects {arity} argument(s) but the expression ended after {len(args)}",
                *call_tok.pos,
            )
        return self.stream.advance()

    def _parse_from(self, tok: Token, params: tuple[str, ...]) -> Expression:
        # Calls still collecting children, innermost last: (token, arity, args)
        frames: list[tuple[Token, int, list]] = []
        while True:
            node = self._leaf(tok, params)
            if node is None:
                arity = self.arities.arity(tok.text, tok)
                if arity:
                    frames.append((tok, arity, []))
                    tok = self._next_argument(frames[-1])
                    continue
                node = Call(tok.text, (), tok.pos)

            # Hand the finished node to its parent, closing every call it completes
            while frames:
                call_tok, arity, args = frames[-1]
                args.append(node)
                if len(args) < arity:
                    break
                frames.pop()
                node = Call(call_tok.text, tuple(args), call_tok.pos)
            else:
                return node
            tok = self._next_argument(frames[-1])

    # ------------------------
    # Definitions
    # ------------------------
    def parse_header(self) -> tuple[Token, tuple[str, ...]]:
        """Recognise `fn <name> <param>* is` and return the name token and params."""
        tok = self.stream.advance()
        if not _is_keyword(tok, "fn"):
            raise AttoSyntaxError(
                f"Expected 'fn' to start a definition, found '{tok}'", *tok.pos
            )

        name_tok = self.stream.advance()
        if name_tok is None:
            raise AttoSyntaxError("Expected a function name after 'fn'", *tok.pos)
        if name_tok.kind not in (IDENTIFIER, SYMBOL) or name_tok.text == "is":
            raise AttoSyntaxError(f"Invalid function name '{name_tok}'", *name_tok.pos)

        params: list[str] = []
        while True:
            p = self.stream.advance()
            if p is None:
                raise AttoSyntaxError(
                    f"Expected 'is' to end the header of '{name_tok.text}'", *name_tok.pos
                )
            if _is_keyword(p, "is"):
                break
            if p.kind != IDENTIFIER or p.text in ("fn", *KEYWORD_LITERALS):
                raise AttoSyntaxError(f"Invalid parameter name '{p}'", *p.pos)
            if p.text in params:
                raise AttoSyntaxError(f"Duplicate parameter '{p.text}'", *p.pos)
            params.append(p.text)
        return name_tok, tuple(params)

    def parse_definition(self) -> FunctionDefinition:
        name_tok, params = self.parse_header()
        # Register before the body so self-recursive calls resolve
        self.arities.declare(name_tok.text, len(params), name_tok)
        body = self.parse_expr(params)
        return FunctionDefinition(name_tok.text, params, body, name_tok.pos)

    def parse_definitions(self) -> list[FunctionDefinition]:
        defs = []
        while not self.stream.at_end():
            defs.append(self.parse_definition())
        return defs


def prescan(tokens: list[Token], arities: ArityTable) -> None:
    """Declare the arity of every `fn` header so forward references resolve."""
    stream = TokenStream(tokens)
    parser = Parser(stream, arities)
    for i, tok in enumerate(tokens):
        if _is_keyword(tok, "fn"):
            stream.index = i
            name_tok, params = parser.parse_header()
            arities.declare(name_tok.text, len(params), name_tok)


def parse_program(source: str, arities: ArityTable) -> list[FunctionDefinition]:
    """Parse a sequence of definitions, declaring their arities into `arities`."""
    tokens = lex(source)
    prescan(tokens, arities)
    defs = Parser(TokenStream(tokens), arities).parse_definitions()
    logger.debug("parsed %d definition(s) from %d token(s)", len(defs), len(tokens))
    return defs


def parse_expression(
    source: str, arities: ArityTable, params: tuple[str, ...] = ()
) -> Expression:
    """Parse exactly one free-standing expression."""
    stream = TokenStream(lex(source))
    expr = Parser(stream, arities).parse_expr(params)
    trailing = stream.peek()
    if trailing is not None:
        raise AttoSyntaxError(f"Unexpected trailing token '{trailing}'", *trailing.pos)
    return expr
