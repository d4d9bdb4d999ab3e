"""--tokens dump to stderr."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import TextIO

from lazi.tokens import IntToken, Token, TokenKind, token_kind_name


def dump_tokens(tokens: Iterable[Token], *, file: TextIO | None = None) -> None:
    """Print one line per token to *file* (default stderr), stopping at end of input."""
    if file is None:
        file = sys.stderr
    for tok in tokens:
        if tok.kind == TokenKind.EOF:
            break
        file.write(_format_token(tok) + "\n")


def _format_token(tok: Token) -> str:
    line = f"[TOKEN: {token_kind_name(tok.kind)}] [LEXEME: {tok.raw}]"
    if isinstance(tok, IntToken):
        line += f" [VALUE: {tok.value}]"
    return line
