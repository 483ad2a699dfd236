"""Command-line entry point.

    funclang program.scm
    funclang -e '(+ 1 2)'
    funclang --abstract x=num -e '(if (> x 0) 1 -1)'
    funclang                      # interactive loop

Exit codes: 0 success, 1 syntax error or unreadable (or non UTF-8) file, 2 usage error.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from funclang.config import get_log_level
from funclang.errors import FuncLangError, FuncLangSyntaxError
from funclang.interpreter import Interpreter
from funclang.printer import format_value
from funclang.types import UnitType

_log = logging.getLogger("funclang")

EXIT_OK: int = 0
EXIT_ERROR: int = 1
EXIT_USAGE: int = 2

PROMPT = "funclang> "


def _configure_logging(verbosity: int) -> None:
    """Set up the ``funclang`` logger: 0 → configured default, 1 → INFO, 2+ → DEBUG."""
    level = logging.getLevelName(get_log_level())
    if not isinstance(level, int):
        level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG

    root = logging.getLogger("funclang")
    root.setLevel(level)
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            logging.Formatter(fmt="%(asctime)s [%(levelname)-5.5s] %(name)s: %(message)s", datefmt="%H:%M:%S")
        )
        root.addHandler(handler)


def _parse_binding(raw: str) -> tuple[str, str]:
    name, sep, spec = raw.partition("=")
    if not sep or not name.strip() or not spec.strip():
        raise argparse.ArgumentTypeError(f"expected NAME=SPEC, got {raw!r}")
    return name.strip(), spec.strip()


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="funclang",
        description="Evaluate FuncLang programs concretely or over the sign/boolean lattice.",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="count",
        default=0,
        help="Increase verbosity (-v info, -vv debug).",
    )
    parser.add_argument(
        "--abstract",
        metavar="NAME=SPEC",
        type=_parse_binding,
        action="append",
        default=[],
        help="Bind NAME to an abstract value before evaluation. "
             "SPEC is 'num', 'bool' or comma-separated tokens (NumPos,NumZero,...).",
    )
    parser.add_argument(
        "--read-path",
        metavar="DIR",
        action="append",
        help="Directory searched by (read ...). May be repeated.",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument("-e", "--eval", dest="code", metavar="CODE", help="Evaluate CODE.")
    source.add_argument("file", nargs="?", help="Program file to evaluate.")
    return parser


def _print_result(value) -> None:
    if not isinstance(value, UnitType):
        print(format_value(value))


def _repl(interp: Interpreter) -> int:
    while True:
        try:
            line = input(PROMPT)
        except EOFError:
            print()
            return EXIT_OK
        if not line.strip():
            continue
        try:
            _print_result(interp.eval(line))
        except FuncLangSyntaxError as exc:
            print(f"Syntax error: {exc}", file=sys.stderr)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    interp = Interpreter(read_roots=args.read_path)
    try:
        interp.set_abstract_env(dict(args.abstract))
    except FuncLangError as exc:
        _log.error("%s", exc)
        return EXIT_USAGE

    if args.code is None and args.file is None:
        return _repl(interp)

    try:
        if args.code is not None:
            result = interp.eval(args.code)
        else:
            result = interp.eval_file(args.file)
    except FuncLangSyntaxError as exc:
        print(f"Syntax error: {exc}", file=sys.stderr)
        return EXIT_ERROR
    except (OSError, UnicodeDecodeError) as exc:
        _log.error("cannot read %s: %s", args.file, exc)
        return EXIT_ERROR

    _print_result(result)
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
