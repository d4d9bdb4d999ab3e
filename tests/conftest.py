"""Shared test fixtures and helpers."""

from __future__ import annotations

import pytest

from lazi.intern import StringInterner
from lazi.lexer import lex_all
from lazi.tokens import Token, TokenKind


@pytest.fixture
def interner() -> StringInterner:
    return StringInterner()


@pytest.fixture
def lex(interner):
    """Return a helper that lexes source and returns tokens (excluding EOF)."""

    def _lex(source: str | bytes) -> list[Token]:
        tokens = lex_all(source, interner=interner)
        # Strip trailing EOF for convenience
        return [t for t in tokens if t.kind != TokenKind.EOF]

    return _lex


def kinds(*chars: str | int) -> list[int]:
    """Build an expected kind list: one-char strings become their byte value."""
    return [ord(c) if isinstance(c, str) else int(c) for c in chars]


def assert_kinds(tokens: list[Token], expected: list[int]) -> None:
    """Assert that the token kinds match the expected list."""
    actual = [t.kind for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"
