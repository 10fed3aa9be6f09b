"""
Token definitions for the complexpr lexer.

Defines the token types produced while scanning an expression:
- Numeric literals (real, and imaginary with the ``I`` suffix)
- Identifiers already resolved to a variable, function or closure binding
- Infix operators, each carrying the binary operation it stands for
- Punctuation, end of input and the error token
"""

from enum import Enum, auto
from dataclasses import dataclass
from typing import Any

from ..numerics import complex_math as cm


class TokenType(Enum):
    """Enumeration of all token types in an expression."""

    # Literals
    NUMBER_REAL = auto()            # 2.5, 1e-3
    NUMBER_IMAGINARY = auto()       # 4I, .5e2I

    # Resolved identifiers
    VARIABLE = auto()               # host-bound variable
    FUNCTION = auto()               # builtin or host function, arity 0..6
    CLOSURE = auto()                # host closure, arity 0..6

    # Infix operators
    PLUS = auto()                   # +
    MINUS = auto()                  # -
    MULTIPLY = auto()               # *
    DIVIDE = auto()                 # /
    POWER = auto()                  # ^

    # Punctuation
    LEFT_PAREN = auto()             # (
    RIGHT_PAREN = auto()            # )
    COMMA = auto()                  # ,

    # Special
    END = auto()                    # end of input
    ERROR = auto()                  # unrecognized character or identifier


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the expression text.

    ``offset`` is the character index from the start of the input.
    """
    filename: str
    line: int
    column: int
    offset: int

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"


@dataclass(frozen=True)
class Token:
    """
    A lexical token.

    ``value`` depends on the type: a float for numeric literals, the resolved
    Binding for identifiers, the bound binary operation for infix operators,
    and a diagnostic message for ERROR tokens.
    """
    type: TokenType
    lexeme: str
    value: Any
    location: SourceLocation

    def __str__(self) -> str:
        return f"{self.type.name}({self.lexeme!r})"

    @property
    def is_infix(self) -> bool:
        return self.type in INFIX_TYPES

    @property
    def is_sign(self) -> bool:
        """True for the operators that may also act as a unary prefix."""
        return self.type in (TokenType.PLUS, TokenType.MINUS)


OPERATORS = {
    "+": (TokenType.PLUS, cm.add),
    "-": (TokenType.MINUS, cm.sub),
    "*": (TokenType.MULTIPLY, cm.mul),
    "/": (TokenType.DIVIDE, cm.divide),
    "^": (TokenType.POWER, cm.power),
}

PUNCTUATION = {
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    ",": TokenType.COMMA,
}

INFIX_TYPES = frozenset(token_type for token_type, _ in OPERATORS.values())

WHITESPACE = frozenset(" \t\n\r")

IMAGINARY_SUFFIX = "I"
