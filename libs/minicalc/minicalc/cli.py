"""Command-line front end for minicalc.

Usage::

    minicalc program.calc
    minicalc program.calc --dump-tokens --dump-ast
    python -m minicalc program.calc --log-level debug
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from minicalc import __version__
from minicalc.core.expressions import EvalError
from minicalc.diagnostics.source import SourceText
from minicalc.interpreter import Interpreter
from minicalc.parser.errors import ParseError
from minicalc.parser.lexer import tokenize

logger = logging.getLogger("minicalc")


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="minicalc",
        description="Run a minicalc program",
    )
    parser.add_argument("filepath", type=Path, help="Source file to run")
    parser.add_argument(
        "--dump-tokens",
        action="store_true",
        help="Print the token stream before running",
    )
    parser.add_argument(
        "--dump-ast",
        action="store_true",
        help="Print the parsed statements before running",
    )
    parser.add_argument(
        "--log-level",
        choices=["debug", "info", "warning", "error"],
        default="warning",
        help="Logging level (default: warning)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Entry point. Returns the process exit status."""
    args = create_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        text = args.filepath.read_text(encoding="utf-8")
    except OSError as e:
        print(f"error: cannot read {args.filepath}: {e}", file=sys.stderr)
        return 2

    filename = str(args.filepath)
    source = SourceText(text, filename)
    logger.info("Running %s", filename)

    try:
        if args.dump_tokens:
            for tok in tokenize(text, filename).tokens:
                print(f"{tok.line}:{tok.column} {tok.kind.name} {tok.lexeme}")

        interpreter = Interpreter(text, filename)
        program = interpreter.build_ast()

        if args.dump_ast:
            for stmt in program.statements:
                print(repr(stmt))

        interpreter.run()
    except ParseError as e:
        print(source.render(e.diagnostic), file=sys.stderr)
        return 1
    except EvalError as e:
        if e.diagnostic is not None:
            print(source.render(e.diagnostic), file=sys.stderr)
        else:
            print(f"error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
