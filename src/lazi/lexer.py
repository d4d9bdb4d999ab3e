"""Lexer: a forward-only cursor producing one token at a time."""

from __future__ import annotations

import logging
from collections.abc import Iterator

from lazi.buf import GrowBuffer
from lazi.errors import LexError
from lazi.intern import StringInterner
from lazi.tokens import (
    U64_MAX,
    IntToken,
    NameToken,
    Position,
    Span,
    Token,
    TokenKind,
    is_digit,
    is_name_char,
    is_name_start,
)

logger = logging.getLogger(__name__)


class Lexer:
    """Tokenize an in-memory expression source.

    The first token is lexed on construction. ``peek()`` returns the current
    token and ``advance()`` consumes it. Once the current token is EOF the
    cursor never moves again.
    """

    def __init__(
        self,
        source: str | bytes,
        filename: str = "<expr>",
        *,
        interner: StringInterner | None = None,
        strict_ints: bool = False,
    ) -> None:
        if isinstance(source, str):
            self._text = source
            self._source = source.encode("utf-8")
        else:
            self._text = source.decode("utf-8", errors="replace")
            self._source = bytes(source)
        self._filename = filename
        self._interner = interner if interner is not None else StringInterner()
        self._strict_ints = strict_ints
        self._pos = 0
        self._line = 1
        self._col = 1
        self._exhausted = False
        self._token = self._next_token()

    @property
    def source(self) -> str:
        return self._text

    @property
    def filename(self) -> str:
        return self._filename

    @property
    def interner(self) -> StringInterner:
        return self._interner

    def peek(self) -> Token:
        return self._token

    def advance(self) -> Token:
        """Consume and return the current token."""
        tok = self._token
        if tok.kind != TokenKind.EOF:
            self._token = self._next_token()
        return tok

    def __iter__(self) -> Iterator[Token]:
        return self

    def __next__(self) -> Token:
        if self._exhausted:
            raise StopIteration
        tok = self.advance()
        if tok.kind == TokenKind.EOF:
            self._exhausted = True
        return tok

    # ------------------------------------------------------------------
    # Cursor helpers
    # ------------------------------------------------------------------

    def _current_pos(self) -> Position:
        return Position(self._line, self._col, self._pos)

    def _peek_byte(self) -> int:
        if self._pos < len(self._source):
            return self._source[self._pos]
        return 0

    def _advance_byte(self) -> int:
        b = self._source[self._pos]
        self._pos += 1
        if b == 0x0A:
            self._line += 1
            self._col = 1
        elif (b & 0xC0) != 0x80:
            # UTF-8 continuation bytes share the column of their lead byte
            self._col += 1
        return b

    def _span_from(self, start: Position) -> tuple[str, Span]:
        raw = self._source[start.offset : self._pos].decode("utf-8", errors="replace")
        return raw, Span(start, self._current_pos())

    # ------------------------------------------------------------------
    # Token production
    # ------------------------------------------------------------------

    def _next_token(self) -> Token:
        start = self._current_pos()
        b = self._peek_byte()

        if b == 0:
            # End of input is never consumed
            return Token(TokenKind.EOF, "", Span(start, start))

        if is_digit(b):
            return self._lex_int(start)

        if is_name_start(b):
            return self._lex_name(start)

        self._advance_byte()
        raw, span = self._span_from(start)
        return Token(b, raw, span)

    def _lex_int(self, start: Position) -> IntToken:
        value = 0
        while is_digit(self._peek_byte()):
            value = value * 10 + (self._advance_byte() - 0x30)
            if value > U64_MAX:
                if self._strict_ints:
                    raise LexError("integer literal overflows 64 bits", start, self._text)
                value &= U64_MAX
        raw, span = self._span_from(start)
        return IntToken(TokenKind.INT, raw, span, value)

    def _lex_name(self, start: Position) -> NameToken:
        self._advance_byte()
        while is_name_char(self._peek_byte()):
            self._advance_byte()
        name = self._interner.intern(self._source[start.offset : self._pos])
        raw, span = self._span_from(start)
        return NameToken(TokenKind.NAME, raw, span, name)


def lex_all(
    source: str | bytes,
    filename: str = "<expr>",
    *,
    interner: StringInterner | None = None,
    strict_ints: bool = False,
) -> GrowBuffer[Token]:
    """Convenience function: lex the whole source, end-of-input token included."""
    tokens: GrowBuffer[Token] = GrowBuffer()
    for tok in Lexer(source, filename, interner=interner, strict_ints=strict_ints):
        tokens.push(tok)
    logger.debug("lexed %d tokens from %s", len(tokens), filename)
    return tokens
