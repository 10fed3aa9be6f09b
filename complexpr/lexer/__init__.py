"""
complexpr Lexer Package

Pull-based tokenizer for complex arithmetic expressions. Numbers may carry
the ``I`` suffix to mark them imaginary, identifiers are resolved against
host bindings and then the builtin registry as they are scanned.
"""

from .tokens import Token, TokenType, SourceLocation
from .lexer import Lexer, tokenize_string
from .errors import Diagnostic, LexerError

__all__ = [
    "Lexer",
    "Token",
    "TokenType",
    "SourceLocation",
    "Diagnostic",
    "LexerError",
    "tokenize_string",
]
