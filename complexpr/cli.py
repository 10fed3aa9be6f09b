"""
Command line front end.

    complexpr "exp(I*pi) + 1"
    complexpr "x^2 + y" --var x=1+2j --var y=3
"""

import argparse
import logging
import sys
from typing import List, Optional

from .api import Compiler
from .evaluator import evaluate
from .library import Cell, variable
from .parser import ParseError


def _parse_binding(text: str):
    name, sep, value = text.partition("=")
    if not sep or not name:
        raise argparse.ArgumentTypeError(f"expected NAME=VALUE, got '{text}'")
    try:
        number = complex(value.replace(" ", ""))
    except ValueError:
        raise argparse.ArgumentTypeError(f"'{value}' is not a complex number")
    return variable(name, Cell(number))


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="complexpr",
        description="Evaluate a complex arithmetic expression."
    )
    parser.add_argument("expression", help="expression to evaluate, e.g. 'sqrt(-4) + 2I'")
    parser.add_argument("--var", dest="variables", action="append", default=[],
                        type=_parse_binding, metavar="NAME=VALUE",
                        help="bind a variable (Python complex syntax, e.g. 1+2j)")
    parser.add_argument("--no-optimize", action="store_true",
                        help="skip constant folding")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="log compiler debug output")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s"
    )

    compiler = Compiler(args.variables, optimize=not args.no_optimize, filename="<argv>")
    try:
        tree = compiler.compile(args.expression)
    except ParseError as e:
        print(args.expression, file=sys.stderr)
        print(" " * (e.offset - 1) + "^", file=sys.stderr)
        print(e, file=sys.stderr, end="")
        return 1

    print(complex(evaluate(tree)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
