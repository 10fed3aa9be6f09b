"""
Abstract Syntax Tree node definitions for complexpr.

A compiled expression is a strict tree of three node kinds:

- Constant: a complex value
- VariableRef: a borrowed reference to a host Cell, read at evaluation time
- Call: a function of fixed arity (0..6) applied to the same number of
  child subtrees; ClosureCall additionally passes an opaque context

Each node exclusively owns its children. Nodes carry no parent pointers, so
the structure can never contain a cycle. ``release()`` drops a subtree.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, List, Optional, Sequence
from dataclasses import dataclass
from enum import Enum

from ..lexer.tokens import SourceLocation
from ..library import Cell, MAX_ARITY
from ..numerics import Complex, to_complex


class ASTNodeType(Enum):
    """Enumeration of all AST node types."""
    CONSTANT = "Constant"
    VARIABLE = "Variable"
    CALL = "Call"
    CLOSURE_CALL = "ClosureCall"


@dataclass
class SourceSpan:
    """Represents a span of source code (start and end locations)."""
    start: SourceLocation
    end: SourceLocation

    def __str__(self) -> str:
        return f"{self.start.filename}:{self.start.offset}-{self.end.offset}"


class ASTVisitor(ABC):
    """Abstract visitor interface for traversing AST nodes."""

    @abstractmethod
    def visit(self, node: 'ASTNode') -> Any:
        """Visit a generic AST node."""
        pass


class ASTNode(ABC):
    """Base class for all AST nodes."""

    def __init__(self, node_type: ASTNodeType, span: Optional[SourceSpan] = None):
        self.node_type = node_type
        self.span = span

    def accept(self, visitor: ASTVisitor) -> Any:
        """Accept a visitor (visitor pattern)."""
        return visitor.visit(self)

    @abstractmethod
    def children(self) -> List['ASTNode']:
        """Get all child nodes."""
        pass

    def release(self):
        """Drop every owned subtree. Terminals own nothing."""
        pass

    def count_nodes(self) -> int:
        """Number of nodes in this subtree, this one included."""
        count = 0
        pending = [self]
        while pending:
            node = pending.pop()
            count += 1
            pending.extend(node.children())
        return count

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class Constant(ASTNode):
    """A complex literal or a folded subexpression."""

    def __init__(self, value: complex, span: Optional[SourceSpan] = None):
        super().__init__(ASTNodeType.CONSTANT, span)
        self.value: Complex = to_complex(value)

    def children(self) -> List[ASTNode]:
        return []

    def __repr__(self) -> str:
        return f"Constant({complex(self.value)!r})"


class VariableRef(ASTNode):
    """Reference to host storage; the cell is borrowed, not owned."""

    def __init__(self, name: str, cell: Cell, span: Optional[SourceSpan] = None):
        super().__init__(ASTNodeType.VARIABLE, span)
        self.name = name
        self.cell = cell

    def children(self) -> List[ASTNode]:
        return []

    def __repr__(self) -> str:
        return f"VariableRef({self.name!r})"


class Call(ASTNode):
    """
    Application of a fixed-arity function to owned argument subtrees.

    The arity is fixed when the node is built; ``replace_arg`` swaps one
    argument for another and never changes the count.
    """

    def __init__(self, name: str, function: Callable[..., complex],
                 args: Sequence[ASTNode], pure: bool,
                 span: Optional[SourceSpan] = None,
                 node_type: ASTNodeType = ASTNodeType.CALL):
        if len(args) > MAX_ARITY:
            raise ValueError(f"Call '{name}' has {len(args)} arguments, at most {MAX_ARITY} allowed")
        super().__init__(node_type, span)
        self.name = name
        self.function = function
        self.pure = pure
        self._args: List[ASTNode] = list(args)
        self._arity = len(self._args)

    @property
    def arity(self) -> int:
        return self._arity

    @property
    def args(self) -> List[ASTNode]:
        return list(self._args)

    def replace_arg(self, index: int, node: ASTNode):
        old = self._args[index]
        if old is not node:
            old.release()
            self._args[index] = node

    def children(self) -> List[ASTNode]:
        return list(self._args)

    def release(self):
        for child in self._args:
            child.release()
        self._args = []

    def __repr__(self) -> str:
        args = ", ".join(repr(arg) for arg in self._args)
        return f"{self.__class__.__name__}({self.name!r}, [{args}])"


class ClosureCall(Call):
    """A Call whose function also receives ``context`` as its first argument."""

    def __init__(self, name: str, function: Callable[..., complex],
                 args: Sequence[ASTNode], pure: bool, context: Any,
                 span: Optional[SourceSpan] = None):
        super().__init__(name, function, args, pure, span, ASTNodeType.CLOSURE_CALL)
        self.context = context
