"""
Host-facing entry points.

    tree, error = compile_expression("x^2 + 1", [variable("x", cell)])
    if tree is not None:
        value = evaluate(tree)    # re-evaluate freely after changing cell.value
        destroy(tree)

``error`` is 0 on success and otherwise the character offset (at least 1)
at which compilation stopped. A ``None`` tree is the only failure signal.
"""

import logging
from typing import Optional, Sequence, Tuple

from .evaluator import evaluate
from .lexer import Lexer
from .library import Binding
from .numerics import Complex, NAN
from .optimizer import fold_constants
from .parser import ASTNode, Parser, ParseError

logger = logging.getLogger(__name__)


class Compiler:
    """
    Compiles expression text against a fixed lookup table.

    Unlike ``compile_expression``, ``compile`` raises ParseError with the
    full diagnostic.
    """

    def __init__(self, variables: Optional[Sequence[Binding]] = None,
                 optimize: bool = True, filename: str = "<expression>"):
        self.variables: Sequence[Binding] = tuple(variables or ())
        self.optimize = optimize
        self.filename = filename

    def compile(self, expression: str) -> ASTNode:
        parser = Parser(Lexer(expression, self.variables, self.filename))
        root = parser.parse()

        if self.optimize:
            root = fold_constants(root)

        return root


def compile_expression(expression: str, variables: Optional[Sequence[Binding]] = None,
                       optimize: bool = True,
                       filename: str = "<expression>") -> Tuple[Optional[ASTNode], int]:
    """
    Compile ``expression``, binding identifiers from ``variables`` first.

    Returns:
        ``(tree, 0)`` on success, ``(None, offset)`` on failure
    """
    compiler = Compiler(variables, optimize, filename)
    try:
        tree = compiler.compile(expression)
    except ParseError as e:
        logger.debug("compile failed at offset %d: %s", e.offset, e.diagnostic.message)
        return None, e.offset

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("compiled %r into %d node(s)", expression, tree.count_nodes())
    return tree, 0


def interpret(expression: str) -> Tuple[Complex, int]:
    """
    Compile and evaluate once, without variables.

    Returns:
        ``(value, 0)`` on success, ``(NaN, offset)`` on failure
    """
    tree, error = compile_expression(expression)
    if tree is None:
        return NAN, error

    value = evaluate(tree)
    destroy(tree)
    return value, 0


def destroy(tree: Optional[ASTNode]) -> None:
    """Release a compiled tree. A ``None`` tree is ignored."""
    if tree is None:
        return
    tree.release()
