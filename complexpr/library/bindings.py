"""
Binding entries shared by the builtin registry and host lookup tables.

A Binding names something an expression can refer to: a host variable (a
Cell the host owns and may mutate between evaluations), a function of fixed
arity, or a closure that also receives an opaque context object.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional

from ..numerics import Complex, to_complex

MAX_ARITY = 6


class EntryKind(Enum):
    """What a binding refers to."""
    VARIABLE = "variable"
    FUNCTION = "function"
    CLOSURE = "closure"


class BindingError(ValueError):
    """Raised when a binding entry is malformed."""


class Cell:
    """
    Host-owned storage for a complex variable.

    Compiled trees keep a reference to the cell, never a copy of its value,
    so assigning ``cell.value`` changes the result of the next evaluation.
    No locking is done here; a host sharing a cell across threads must
    synchronize its own writes.
    """

    __slots__ = ("_value",)

    def __init__(self, value: complex = 0j):
        self._value = to_complex(value)

    @property
    def value(self) -> Complex:
        return self._value

    @value.setter
    def value(self, value: complex):
        self._value = to_complex(value)

    def __repr__(self) -> str:
        return f"Cell({complex(self._value)!r})"


@dataclass(frozen=True)
class Binding:
    """
    A named entry in a lookup table or in the builtin registry.

    ``address`` is a Cell for variables and a callable for functions and
    closures. ``arity`` is the number of complex arguments (closures get
    ``context`` as an extra leading argument).
    """
    name: str
    address: Any
    kind: EntryKind = EntryKind.VARIABLE
    arity: int = 0
    pure: bool = False
    context: Any = None

    def __post_init__(self):
        if not self.name:
            raise BindingError("Binding name must be a non-empty string")
        if self.kind is EntryKind.VARIABLE:
            if not isinstance(self.address, Cell):
                raise BindingError(f"Variable '{self.name}' must be bound to a Cell")
            if self.arity != 0:
                raise BindingError(f"Variable '{self.name}' cannot take arguments")
            return
        if not callable(self.address):
            raise BindingError(f"'{self.name}' is not bound to a callable")
        if not 0 <= self.arity <= MAX_ARITY:
            raise BindingError(
                f"'{self.name}' has arity {self.arity}, expected 0..{MAX_ARITY}"
            )

    @property
    def is_variable(self) -> bool:
        return self.kind is EntryKind.VARIABLE

    @property
    def is_closure(self) -> bool:
        return self.kind is EntryKind.CLOSURE


def variable(name: str, cell: Cell) -> Binding:
    """Bind ``name`` to host storage."""
    return Binding(name, cell, EntryKind.VARIABLE)


def function(name: str, fn: Callable[..., complex], arity: int, pure: bool = False) -> Binding:
    """Bind ``name`` to a function taking ``arity`` complex arguments."""
    return Binding(name, fn, EntryKind.FUNCTION, arity, pure)


def closure(name: str, fn: Callable[..., complex], arity: int,
            context: Optional[Any] = None, pure: bool = False) -> Binding:
    """Bind ``name`` to ``fn(context, *args)``."""
    return Binding(name, fn, EntryKind.CLOSURE, arity, pure, context)
