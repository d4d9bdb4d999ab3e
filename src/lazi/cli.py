"""Command-line interface for Lazi."""

from __future__ import annotations

import argparse
import logging
import sys
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from lazi.errors import EvalError, LexError, ParseError
from lazi.parser import DEFAULT_MAX_DEPTH

logger = logging.getLogger(__name__)

# Sample expressions evaluated by --demo
DEMO_EXPRESSIONS = ("1+1", "4*(3+1)", "2*3+4*5", "-(1+2)", "--5", "10/3", "-7/2")


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    input_file: Path | None
    output_file: Path | None
    expressions: list[str]
    demo: bool
    strict_ints: bool
    max_depth: int
    tokens: bool


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="lazi",
        description="Evaluate integer expressions",
    )
    p.add_argument("input", nargs="?", help="File with one expression per line")
    p.add_argument("-o", "--output", help="Output file (default: stdout)")
    p.add_argument(
        "-e",
        "--expr",
        action="append",
        default=[],
        metavar="EXPR",
        help="Expression to evaluate (repeatable)",
    )
    p.add_argument("--demo", action="store_true", help="Evaluate the built-in sample expressions")
    p.add_argument(
        "--config",
        metavar="FILE",
        help="Config file (default: auto-discover lazi.toml)",
    )
    p.add_argument(
        "--strict-ints",
        action="store_true",
        default=None,
        help="Reject integer literals that overflow 64 bits instead of wrapping",
    )
    p.add_argument(
        "--max-depth",
        type=int,
        default=None,
        metavar="N",
        help=f"Maximum nesting depth (default: {DEFAULT_MAX_DEPTH})",
    )
    p.add_argument("--tokens", action="store_true", help="Dump tokens to stderr")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return p


def load_config(config_path: Path | None, input_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else input_dir / "lazi.toml"

    if not path.is_file():
        return {}

    with open(path, "rb") as f:
        config = tomllib.load(f)
    logger.debug("loaded config from %s", path)
    return config


def resolve_options(args: argparse.Namespace) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: defaults < config file < CLI flags.
    """
    input_file = Path(args.input) if args.input else None
    input_dir = input_file.parent if input_file is not None else Path(".")
    if not input_dir.parts:
        input_dir = Path(".")

    config_path = Path(args.config) if args.config else None
    config = load_config(config_path, input_dir)

    strict_ints = False
    cfg_lexer = config.get("lexer")
    if isinstance(cfg_lexer, dict):
        cfg_strict = cfg_lexer.get("strict_ints")
        if isinstance(cfg_strict, bool):
            strict_ints = cfg_strict
    if args.strict_ints is not None:
        strict_ints = args.strict_ints

    max_depth = DEFAULT_MAX_DEPTH
    cfg_parser = config.get("parser")
    if isinstance(cfg_parser, dict):
        cfg_depth = cfg_parser.get("max_depth")
        if isinstance(cfg_depth, int) and not isinstance(cfg_depth, bool):
            max_depth = cfg_depth
    if args.max_depth is not None:
        max_depth = args.max_depth
    if max_depth < 1:
        raise argparse.ArgumentTypeError(f"max depth must be positive: {max_depth}")

    output_file = Path(args.output) if args.output else None

    return CliOptions(
        input_file=input_file,
        output_file=output_file,
        expressions=list(args.expr),
        demo=args.demo,
        strict_ints=strict_ints,
        max_depth=max_depth,
        tokens=args.tokens,
    )


def collect_sources(options: CliOptions) -> list[tuple[str, str]]:
    """Return (filename, expression) pairs: input file lines, then -e, then demo."""
    sources: list[tuple[str, str]] = []
    if options.input_file is not None:
        text = options.input_file.read_text(encoding="utf-8")
        for line in text.splitlines():
            if line.strip():
                sources.append((str(options.input_file), line))
    sources.extend(("<expr>", expr) for expr in options.expressions)
    if options.demo:
        sources.extend(("<demo>", expr) for expr in DEMO_EXPRESSIONS)
    return sources


def evaluate_sources(options: CliOptions, sources: list[tuple[str, str]]) -> tuple[list[str], int]:
    """Evaluate every source, reporting errors to stderr and carrying on.

    Returns the ``<expr> = <result>`` lines and the exit code.
    """
    from lazi.debug import dump_tokens
    from lazi.intern import StringInterner
    from lazi.lexer import lex_all
    from lazi.parser import evaluate

    interner = StringInterner()
    lines: list[str] = []
    status = 0

    for filename, source in sources:
        try:
            if options.tokens:
                tokens = lex_all(
                    source, filename, interner=interner, strict_ints=options.strict_ints
                )
                dump_tokens(tokens)
            value = evaluate(
                source,
                filename,
                interner=interner,
                strict_ints=options.strict_ints,
                max_depth=options.max_depth,
            )
        except (LexError, ParseError) as exc:
            print(exc.format(filename), file=sys.stderr)
            status = 1
            continue
        except EvalError as exc:
            print(exc.format(filename), file=sys.stderr)
            if status == 0:
                status = 2
            continue
        lines.append(f"{source} = {value}")

    logger.debug("evaluated %d expressions, %d names interned", len(sources), len(interner))
    return lines, status


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    try:
        options = resolve_options(args)
    except argparse.ArgumentTypeError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    except tomllib.TOMLDecodeError as exc:
        print(f"error: invalid config file: {exc}", file=sys.stderr)
        return 2

    try:
        sources = collect_sources(options)
    except OSError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if not sources:
        print("error: no expressions given (pass a file, -e EXPR, or --demo)", file=sys.stderr)
        return 2

    lines, status = evaluate_sources(options, sources)
    output = "".join(f"{line}\n" for line in lines)

    if options.output_file:
        options.output_file.write_text(output, encoding="utf-8")
    else:
        sys.stdout.write(output)

    return status
