"""
complexpr

Compiles arithmetic expressions over complex numbers into trees that can be
evaluated repeatedly against host-owned variables.

Architecture:
    complexpr/
    ├── numerics/        # Complex type and arithmetic primitives
    ├── library/         # Binding entries and the builtin registry
    ├── lexer/           # Pull-based tokenizer
    ├── parser/          # Recursive descent parser and AST nodes
    ├── optimizer/       # Constant folding
    └── evaluator/       # Tree evaluation

License: MIT
"""

from ._version import __version__
from .api import Compiler, compile_expression, interpret, destroy
from .evaluator import Evaluator, evaluate
from .library import Binding, BindingError, Cell, EntryKind, variable, function, closure
from .lexer import Lexer, LexerError
from .parser import Parser, ParseError
from .numerics import Complex, NAN

__all__ = [
    # Host API
    "compile_expression",
    "interpret",
    "evaluate",
    "destroy",
    "Compiler",

    # Bindings
    "Binding",
    "BindingError",
    "Cell",
    "EntryKind",
    "variable",
    "function",
    "closure",

    # Components
    "Lexer",
    "Parser",
    "Evaluator",
    "LexerError",
    "ParseError",
    "Complex",
    "NAN",

    # Version info
    "__version__",
]
