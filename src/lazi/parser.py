"""Recursive-descent parser that evaluates integer expressions as it goes.

Grammar (lowest precedence first):

    expr   := expr0
    expr0  := expr1 (('+' | '-') expr1)*
    expr1  := expr2 (('*' | '/') expr2)*
    expr2  := '-' expr2 | expr3
    expr3  := INT | '(' expr ')'

No tree is built; each rule returns the value of what it recognized.
"""

from __future__ import annotations

import logging

from lazi.errors import DivisionByZeroError, ParseError
from lazi.intern import StringInterner
from lazi.lexer import Lexer
from lazi.tokens import IntToken, Token, TokenKind, token_kind_name

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 100

_PLUS = ord("+")
_MINUS = ord("-")
_STAR = ord("*")
_SLASH = ord("/")
_LPAREN = ord("(")
_RPAREN = ord(")")


class Parser:
    """Evaluate the token stream of a Lexer."""

    def __init__(self, lexer: Lexer, *, max_depth: int = DEFAULT_MAX_DEPTH) -> None:
        self._lexer = lexer
        self._max_depth = max_depth
        self._depth = 0

    # ------------------------------------------------------------------
    # Token matching
    # ------------------------------------------------------------------

    def is_token(self, kind: int) -> bool:
        return self._lexer.peek().kind == kind

    def match_token(self, kind: int) -> bool:
        """Consume the current token if it has *kind*."""
        if self.is_token(kind):
            self._lexer.advance()
            return True
        return False

    def expect_token(self, kind: int) -> Token:
        tok = self._lexer.peek()
        if tok.kind != kind:
            raise self._error(
                f"expected {token_kind_name(kind)}, got {token_kind_name(tok.kind)}", tok
            )
        return self._lexer.advance()

    # ------------------------------------------------------------------
    # Grammar
    # ------------------------------------------------------------------

    def parse(self) -> int:
        """Evaluate a complete expression; nothing may follow it."""
        try:
            value = self.parse_expr()
        except RecursionError:
            # max_depth above what the interpreter stack can hold
            self._depth = 0
            raise self._error("expression nested too deeply", self._lexer.peek()) from None
        tok = self._lexer.peek()
        if tok.kind != TokenKind.EOF:
            raise self._error(f"unexpected {token_kind_name(tok.kind)} after expression", tok)
        return value

    def parse_expr(self) -> int:
        return self._parse_expr0()

    def _parse_expr0(self) -> int:
        value = self._parse_expr1()
        while self.is_token(_PLUS) or self.is_token(_MINUS):
            op = self._lexer.advance()
            rhs = self._parse_expr1()
            if op.kind == _PLUS:
                value += rhs
            else:
                value -= rhs
        return value

    def _parse_expr1(self) -> int:
        value = self._parse_expr2()
        while self.is_token(_STAR) or self.is_token(_SLASH):
            op = self._lexer.advance()
            rhs = self._parse_expr2()
            if op.kind == _STAR:
                value *= rhs
            else:
                value = self._divide(value, rhs, op)
        return value

    def _parse_expr2(self) -> int:
        if self.is_token(_MINUS):
            tok = self._lexer.advance()
            self._enter(tok)
            try:
                return -self._parse_expr2()
            finally:
                self._depth -= 1
        return self._parse_expr3()

    def _parse_expr3(self) -> int:
        tok = self._lexer.peek()
        if isinstance(tok, IntToken):
            self._lexer.advance()
            return tok.value
        if self.match_token(_LPAREN):
            self._enter(tok)
            try:
                value = self.parse_expr()
            finally:
                self._depth -= 1
            self.expect_token(_RPAREN)
            return value
        raise self._error(f"expected integer or '(', got {token_kind_name(tok.kind)}", tok)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _divide(self, lhs: int, rhs: int, op: Token) -> int:
        """Integer division truncating toward zero."""
        if rhs == 0:
            raise DivisionByZeroError("division by zero", op.span, self._lexer.source)
        quotient = abs(lhs) // abs(rhs)
        return quotient if (lhs < 0) == (rhs < 0) else -quotient

    def _enter(self, tok: Token) -> None:
        self._depth += 1
        if self._depth > self._max_depth:
            raise self._error("expression nested too deeply", tok)

    def _error(self, message: str, tok: Token) -> ParseError:
        return ParseError(message, tok.span, self._lexer.source, kind=tok.kind)


def evaluate(
    source: str | bytes,
    filename: str = "<expr>",
    *,
    interner: StringInterner | None = None,
    strict_ints: bool = False,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> int:
    """Convenience function: lex and evaluate source text."""
    lexer = Lexer(source, filename, interner=interner, strict_ints=strict_ints)
    value = Parser(lexer, max_depth=max_depth).parse()
    logger.debug("evaluated %s to %d", filename, value)
    return value
