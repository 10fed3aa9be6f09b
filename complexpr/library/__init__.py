"""
complexpr library package

Binding entries (host variables, functions, closures) and the sorted
registry of builtin constants and functions.
"""

from .bindings import (
    Binding, BindingError, Cell, EntryKind, MAX_ARITY,
    variable, function, closure,
)
from .registry import BUILTINS, find_builtin, builtin_names, check_ordering

__all__ = [
    "Binding", "BindingError", "Cell", "EntryKind", "MAX_ARITY",
    "variable", "function", "closure",
    "BUILTINS", "find_builtin", "builtin_names", "check_ordering",
]
