"""Command-line front end: reduce the ``main`` term of a file and print it.

    m3lc FILE [-v] [--max-steps N] [--log-level LEVEL] [--recursion-limit N]

After the normal form, the result is compared against the known encodings
and any match is reported, e.g. ``Alpha-equivalent to: Church numeral 3``.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from collections.abc import Callable, Sequence
from types import TracebackType
from typing import TextIO

from termcolor import colored

from m3lc.core.ast import Term
from m3lc.core.limits import DEFAULT_RECURSION_LIMIT, recursion_limit
from m3lc.core.names import NameSupply
from m3lc.core.reduce import reduction_chain
from m3lc.data.boolean import as_boolean
from m3lc.data.church import as_numeral
from m3lc.surface.errors import ParseError
from m3lc.surface.parse import parse_file

logger = logging.getLogger(__name__)

LOG_LEVEL_ENV = "M3LC_LOG_LEVEL"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class StepBudgetExceeded(RuntimeError):
    """Raised when a reduction runs past ``--max-steps``."""

    def __init__(self, max_steps: int) -> None:
        super().__init__(f"no normal form reached within {max_steps} steps")
        self.max_steps = max_steps


class ErrorHandler:
    """Turns exceptions raised inside it into error messages and an exit status."""

    ERROR = "red"

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream if stream is not None else sys.stderr
        self.status = 0

    def report(self, msg: str, internal: bool = False) -> None:
        prefix = ""
        if internal:
            prefix = colored("[internal] ", ErrorHandler.ERROR, attrs=["bold"])
        label = colored("error: ", ErrorHandler.ERROR, attrs=["bold"])
        print(f"{prefix}{label}{msg}", file=self.stream)
        self.status = 1

    def __enter__(self) -> ErrorHandler:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> bool:
        if exc_type is None or exc_val is None:
            return False
        if issubclass(exc_type, SystemExit):
            return False

        if issubclass(exc_type, KeyboardInterrupt):
            self.report("keyboard interrupt")
        elif issubclass(exc_type, RecursionError):
            self.report("maximum recursion depth exceeded while reducing")
        elif issubclass(exc_type, ParseError):
            self.report(f"parse error: {exc_val}")
        elif issubclass(exc_type, OSError):
            self.report(f"could not open file: {exc_val}")
        elif issubclass(exc_type, StepBudgetExceeded):
            self.report(str(exc_val))
        else:
            logger.debug("unhandled exception", exc_info=(exc_type, exc_val, exc_tb))
            msg = f"unknown error: '{exc_type.__name__}: {exc_val}'"
            self.report(msg, internal=True)
        return True


def _boolean_text(term: Term) -> str | None:
    value = as_boolean(term)
    return None if value is None else str(value).lower()


_RECOGNIZERS: tuple[tuple[str, Callable[[Term], object]], ...] = (
    ("Church numeral {}", as_numeral),
    ("boolean {}", _boolean_text),
)


def guess_values(term: Term) -> list[str]:
    """Describe every known encoding ``term`` matches, in a fixed order."""
    matches: list[str] = []
    for template, recognize in _RECOGNIZERS:
        value = recognize(term)
        if value is not None:
            matches.append(template.format(value))
    return matches


def format_matches(matches: Sequence[str]) -> str:
    if len(matches) == 1:
        return colored(matches[0], "green")
    return "".join(f"\n - {colored(m, 'green')}" for m in matches)


def normalize(
    term: Term,
    verbose: bool = False,
    max_steps: int | None = None,
    names: NameSupply | None = None,
) -> Term:
    """Reduce ``term``, optionally tracing steps and stopping after ``max_steps``."""
    names = names if names is not None else NameSupply()
    previous: Term | None = None
    steps = 0
    for steps, current in enumerate(reduction_chain(term, names)):
        if max_steps is not None and steps > max_steps:
            raise StepBudgetExceeded(max_steps)
        if verbose and previous is not None:
            print(previous)
        previous = current
    assert previous is not None
    logger.info("normal form after %d steps, %d fresh names", steps, names.issued)
    return previous


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="m3lc", description="Reduce a lambda-calculus file to normal form."
    )
    parser.add_argument("file", help="input file")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="print each beta-reduction step"
    )
    parser.add_argument(
        "--max-steps",
        type=int,
        default=None,
        help="give up after this many reduction steps (default: no limit)",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=os.environ.get(LOG_LEVEL_ENV, "WARNING").upper(),
        help=f"logging level (default: ${LOG_LEVEL_ENV} or WARNING)",
    )
    parser.add_argument(
        "--recursion-limit",
        type=int,
        default=DEFAULT_RECURSION_LIMIT,
        help="Python recursion limit used while reducing deep terms",
    )
    return parser


def run(args: argparse.Namespace) -> None:
    with open(args.file, encoding="utf-8") as f:
        source = f.read()

    term = parse_file(source).unroll()
    logger.info("reducing %s", args.file)
    result = normalize(term, verbose=args.verbose, max_steps=args.max_steps)
    print(result)

    matches = guess_values(result)
    if matches:
        print()
        print(f"Alpha-equivalent to: {format_matches(matches)}")


def main(argv: Sequence[str] | None = None) -> int:
    args = build_arg_parser().parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )

    with ErrorHandler() as handler, recursion_limit(args.recursion_limit):
        run(args)
    return handler.status


if __name__ == "__main__":
    sys.exit(main())
