"""Command line entry point: run files, evaluate an expression, or start a prompt."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from drift import __version__
from drift.config import configure_logging
from drift.errors import DriftError
from drift.interpreter import Interpreter
from drift.printer import format_value
from drift.types.nil import Nil

PROMPT = "drift> "


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="drift", description="Run drift programs.")
    parser.add_argument("files", nargs="*", help="source units to load, in order")
    parser.add_argument("-e", "--eval", dest="code", help="evaluate CODE and print its value")
    parser.add_argument("--log-level", help="logging level (defaults to DRIFT_LOG_LEVEL or WARNING)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def repl(interp: Interpreter) -> None:
    while True:
        try:
            line = input(PROMPT)
        except EOFError:
            print()
            return
        if not line.strip():
            continue
        try:
            result = interp.eval(line)
        except (DriftError, RecursionError) as e:
            print(f"error: {e}", file=sys.stderr)
            continue
        if result is not Nil:
            print(format_value(result))


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)
    interp = Interpreter()

    try:
        for name in args.files:
            interp.load_file(name)
        if args.code is not None:
            print(format_value(interp.eval(args.code)))
    except (DriftError, FileNotFoundError, RecursionError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    if not args.files and args.code is None:
        repl(interp)
    return 0


if __name__ == "__main__":
    sys.exit(main())
