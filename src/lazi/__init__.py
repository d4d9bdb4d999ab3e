"""Lazi integer expression lexer and evaluator."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from lazi.intern import StringInterner

__version__ = "0.1.0"


def evaluate(
    source: str | bytes,
    filename: str = "<expr>",
    *,
    interner: StringInterner | None = None,
    strict_ints: bool = False,
    max_depth: int | None = None,
) -> int:
    """Lex and evaluate an expression, returning its integer value."""
    from lazi.parser import DEFAULT_MAX_DEPTH
    from lazi.parser import evaluate as _evaluate

    return _evaluate(
        source,
        filename,
        interner=interner,
        strict_ints=strict_ints,
        max_depth=DEFAULT_MAX_DEPTH if max_depth is None else max_depth,
    )
