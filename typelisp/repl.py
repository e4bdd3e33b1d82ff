"""Interactive loop and command line for typelisp.

    typelisp [FILE ...] [-i] [--max-depth N] [--log-level LEVEL]

Files named in TYPELISP_PRELUDE_PATH are loaded first, then each FILE with
the printed result of every form written to stdout. Without files, or with
-i, an interactive loop reads one form per line.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence, TextIO

from typelisp import __version__
from typelisp.config import get_log_level, get_prelude_paths, get_prompt
from typelisp.interpreter import Interpreter
from typelisp.types import Error

logger = logging.getLogger(__name__)


def run(
    interp: Interpreter,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    prompt: str | None = None,
) -> None:
    """Read a line, write its printed value, repeat until end of input."""
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    prompt = get_prompt() if prompt is None else prompt
    stdout.write(prompt)
    stdout.flush()
    for line in stdin:
        stdout.write(interp.rep(line))
        stdout.write("\n")
        stdout.write(prompt)
        stdout.flush()


def run_file(interp: Interpreter, path: str, stdout: TextIO | None = None) -> bool:
    """Evaluate every form in `path`, printing each result. False on a reader error."""
    stdout = sys.stdout if stdout is None else stdout
    with open(path, encoding="utf-8") as f:
        code = f.read()
    for form in interp.read_forms(code):
        if isinstance(form, Error):
            stdout.write(interp.print(form) + "\n")
            return False
        stdout.write(interp.print(interp.evaluate(form)) + "\n")
    return True


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="typelisp", description="A minimal Lisp read-eval-print loop.")
    parser.add_argument("files", nargs="*", metavar="FILE", help="source files to evaluate")
    parser.add_argument("-i", "--interactive", action="store_true",
                        help="start the interactive loop after evaluating FILEs")
    parser.add_argument("--max-depth", type=int, default=None,
                        help="evaluation depth limit (default: TYPELISP_MAX_DEPTH or 2500)")
    parser.add_argument("--log-level", default=None,
                        help="logging level (default: TYPELISP_LOG_LEVEL or WARNING)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=(args.log_level or get_log_level()).upper(),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    interp = Interpreter(max_depth=args.max_depth)
    for path in get_prelude_paths():
        logger.info("prelude %s", path)
        result = interp.load(path)
        if isinstance(result, Error):
            logger.warning("prelude %s: %s", path, result.message)

    status = 0
    for path in args.files:
        if not run_file(interp, path):
            status = 1

    if args.interactive or not args.files:
        run(interp)
    return status
