"""
complexpr Parser Package

Recursive descent parser producing expression trees of Constant,
VariableRef and fixed-arity Call nodes.
"""

from .ast_nodes import (
    ASTNode, ASTNodeType, ASTVisitor, SourceSpan,
    Constant, VariableRef, Call, ClosureCall,
)
from .parser import Parser, parse_string
from .errors import ParseError

__all__ = [
    "Parser",
    "parse_string",

    # AST nodes
    "ASTNode", "ASTNodeType", "ASTVisitor", "SourceSpan",
    "Constant", "VariableRef", "Call", "ClosureCall",

    # Error handling
    "ParseError",
]
