"""Error types with formatted source context."""

from __future__ import annotations

from lazi.tokens import Position, Span


def _format_snippet(message: str, span: Span, source: str, filename: str) -> str:
    lines = source.splitlines(keepends=True)
    line_idx = span.start.line - 1
    col = span.start.column

    # Strip trailing newline for display
    if 0 <= line_idx < len(lines):
        source_line = lines[line_idx].rstrip("\n").rstrip("\r")
    else:
        source_line = ""

    # Underline the span when on one line, otherwise to end of line
    if span.end.line == span.start.line:
        underline_len = max(1, span.end.column - col)
    else:
        underline_len = max(1, len(source_line) - col + 1)

    pad = " " * (col - 1)
    carets = "^" * underline_len

    line_num = str(span.start.line)
    gutter_width = len(line_num) + 1

    blank_gutter = " " * gutter_width + "|"
    line_gutter = f"{line_num:>{gutter_width - 1}} |"

    return (
        f"error: {message}\n"
        f"{' ' * gutter_width}--> {filename}:{span.start.line}:{col}\n"
        f"{blank_gutter}\n"
        f"{line_gutter} {source_line}\n"
        f"{blank_gutter} {pad}{carets}"
    )


class LexError(Exception):
    """Raised when the lexer rejects a literal, with position and source context."""

    def __init__(self, message: str, position: Position, source: str) -> None:
        self.message = message
        self.position = position
        self.source = source
        super().__init__(self.format())

    def format(self, filename: str = "<expr>") -> str:
        span = Span(self.position, self.position)
        return _format_snippet(self.message, span, self.source, filename)


class ParseError(Exception):
    """Raised when the token stream does not match the grammar.

    ``kind`` is the kind of the offending token, when there is one.
    """

    def __init__(self, message: str, span: Span, source: str, kind: int | None = None) -> None:
        self.message = message
        self.span = span
        self.source = source
        self.kind = kind
        super().__init__(self.format())

    @property
    def offset(self) -> int:
        return self.span.start.offset

    def format(self, filename: str = "<expr>") -> str:
        return _format_snippet(self.message, self.span, self.source, filename)


class EvalError(Exception):
    """Raised on evaluation errors, with span and source context."""

    def __init__(self, message: str, span: Span, source: str) -> None:
        self.message = message
        self.span = span
        self.source = source
        super().__init__(self.format())

    def format(self, filename: str = "<expr>") -> str:
        return _format_snippet(self.message, self.span, self.source, filename)


class DivisionByZeroError(EvalError):
    """Raised when the right operand of '/' evaluates to zero."""
