"""
Constant Folding Pass
=====================

Runs once over a freshly parsed tree. A pure Call whose arguments are all
constants (after folding them first) is evaluated on the spot and replaced
by a Constant; its argument subtrees are released. Variable references are
never folded, and the arguments of impure calls are left as written.

One bottom-up traversal reaches the fixpoint, since children are folded
before their parent is inspected.
"""

import logging
from typing import Optional

from ..evaluator import Evaluator
from ..parser.ast_nodes import ASTNode, Call, Constant

logger = logging.getLogger(__name__)


class ConstantFolder:
    """Folds pure, fully constant subtrees into Constant nodes."""

    def __init__(self, evaluator: Optional[Evaluator] = None):
        self.evaluator = evaluator or Evaluator()
        self.folded = 0

    def optimize(self, node: ASTNode) -> ASTNode:
        """
        Fold ``node`` and its descendants.

        Returns:
            The node to use in place of ``node``: either ``node`` itself,
            possibly with folded arguments, or a new Constant.
        """
        if not isinstance(node, Call) or not node.pure:
            return node

        known = True
        for index, arg in enumerate(node.args):
            folded = self.optimize(arg)
            node.replace_arg(index, folded)
            if not isinstance(folded, Constant):
                known = False

        if not known:
            return node

        value = self.evaluator.evaluate(node)
        span = node.span
        node.release()
        self.folded += 1
        return Constant(value, span)


def fold_constants(root: ASTNode) -> ASTNode:
    """Run constant folding over ``root`` and return the new root."""
    folder = ConstantFolder()
    if not logger.isEnabledFor(logging.DEBUG):
        return folder.optimize(root)

    before = root.count_nodes()
    result = folder.optimize(root)
    logger.debug("constant folding: %d call(s) folded, %d -> %d nodes",
                 folder.folded, before, result.count_nodes())
    return result
