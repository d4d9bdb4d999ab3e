"""Token kinds, data structures, and byte classification helpers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from lazi.intern import InternedString


class TokenKind(IntEnum):
    # Single-byte punctuation uses the byte value itself as its kind
    EOF = 0  # NUL byte or end of buffer

    # Multi-byte kinds, above the byte range
    INT = 256
    NAME = 257


@dataclass(frozen=True, slots=True)
class Position:
    """Source position, 1-based line and character column, 0-based byte offset."""

    line: int
    column: int
    offset: int


@dataclass(frozen=True, slots=True)
class Span:
    """Source range from start to end position."""

    start: Position
    end: Position


@dataclass(frozen=True, slots=True)
class Token:
    """A punctuation or end-of-input token: the kind is the byte value."""

    kind: int
    raw: str
    span: Span


@dataclass(frozen=True, slots=True)
class IntToken(Token):
    """Integer literal, value already reduced to 64 bits."""

    value: int


@dataclass(frozen=True, slots=True)
class NameToken(Token):
    """Identifier, carrying its interned name."""

    name: InternedString


U64_MAX = (1 << 64) - 1


def is_digit(b: int) -> bool:
    """Return True if byte b is an ASCII decimal digit."""
    return 0x30 <= b <= 0x39


def is_name_start(b: int) -> bool:
    """Return True if byte b can start an identifier."""
    return 0x41 <= b <= 0x5A or 0x61 <= b <= 0x7A or b == 0x5F


def is_name_char(b: int) -> bool:
    return is_name_start(b) or is_digit(b)


def token_kind_name(kind: int) -> str:
    """Render a token kind for diagnostics."""
    if kind == TokenKind.INT:
        return "integer"
    if kind == TokenKind.NAME:
        return "name"
    if 0x20 <= kind < 0x7F:
        return f"'{chr(kind)}'"
    return f"<ASCII {int(kind)}>"
