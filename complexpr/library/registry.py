"""
Builtin constants and functions.

The table must stay sorted by name (code point order, so "I" sorts before
the lowercase names); lookups are a binary search over it. Ordering is
checked once at import time.
"""

from bisect import bisect_left
from typing import List, Optional, Tuple

from ..numerics import complex_math as cm
from .bindings import Binding, EntryKind


def _builtin(name: str, fn, arity: int) -> Binding:
    return Binding(name, fn, EntryKind.FUNCTION, arity, pure=True)


BUILTINS: Tuple[Binding, ...] = (
    _builtin("I", cm.imaginary_unit, 0),
    _builtin("abs", cm.absolute, 1),
    _builtin("acos", cm.acos, 1),
    _builtin("acosh", cm.acosh, 1),
    _builtin("arg", cm.argument, 1),
    _builtin("asin", cm.asin, 1),
    _builtin("asinh", cm.asinh, 1),
    _builtin("atan", cm.atan, 1),
    _builtin("atanh", cm.atanh, 1),
    _builtin("conj", cm.conjugate, 1),
    _builtin("cos", cm.cos, 1),
    _builtin("cosh", cm.cosh, 1),
    _builtin("e", cm.e, 0),
    _builtin("exp", cm.exp, 1),
    _builtin("imag", cm.imag_part, 1),
    _builtin("inf", cm.infinity, 0),
    _builtin("log", cm.log, 1),
    _builtin("pi", cm.pi, 0),
    _builtin("pow", cm.power, 2),
    _builtin("real", cm.real_part, 1),
    _builtin("sin", cm.sin, 1),
    _builtin("sinh", cm.sinh, 1),
    _builtin("sqrt", cm.sqrt, 1),
    _builtin("tan", cm.tan, 1),
    _builtin("tanh", cm.tanh, 1),
)

_NAMES: Tuple[str, ...] = tuple(entry.name for entry in BUILTINS)


def check_ordering(names=_NAMES) -> None:
    """Raise RuntimeError unless ``names`` is strictly ascending."""
    for previous, current in zip(names, names[1:]):
        if previous >= current:
            raise RuntimeError(
                f"Builtin table out of order: '{previous}' must sort before '{current}'"
            )


check_ordering()


def find_builtin(name: str) -> Optional[Binding]:
    """Binary search for an exact name match; prefixes never match."""
    index = bisect_left(_NAMES, name)
    if index < len(_NAMES) and _NAMES[index] == name:
        return BUILTINS[index]
    return None


def builtin_names() -> List[str]:
    return list(_NAMES)
