"""
Tree evaluator for complexpr.

Evaluation is a pure function of the tree and of the current contents of
the host cells it references. Nothing here mutates the tree, so a compiled
tree may be evaluated from several threads as long as the host keeps its
own cell writes race-free.
"""

from typing import Optional

from ..numerics import Complex, NAN, quiet, to_complex
from ..parser.ast_nodes import ASTNode, ASTVisitor, Call, ClosureCall, Constant, VariableRef


class Evaluator(ASTVisitor):
    """Computes the complex value of an expression tree."""

    def evaluate(self, node: Optional[ASTNode]) -> Complex:
        """
        Evaluate ``node``.

        Returns:
            The value of the tree, or NaN for a missing tree. Division by
            zero and domain errors yield inf/nan, they never raise.
        """
        if node is None:
            return NAN
        with quiet():
            return node.accept(self)

    def visit(self, node: ASTNode) -> Complex:
        if isinstance(node, Constant):
            return node.value
        elif isinstance(node, VariableRef):
            return node.cell.value
        elif isinstance(node, Call):
            # one frame per tree level
            args = []
            for arg in node.args:
                args.append(self.visit(arg))
            if isinstance(node, ClosureCall):
                return to_complex(node.function(node.context, *args))
            return to_complex(node.function(*args))
        return NAN


_default_evaluator = Evaluator()


def evaluate(node: Optional[ASTNode]) -> Complex:
    """Evaluate a compiled tree; ``None`` evaluates to NaN."""
    return _default_evaluator.evaluate(node)
