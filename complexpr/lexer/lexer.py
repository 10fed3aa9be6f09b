"""
complexpr Lexer - turns expression text into tokens on demand

The parser pulls one token at a time through ``next_token()``; the current
token is kept on the lexer as ``token`` and the cursor as ``pos``. Error
offsets reported by the parser are read straight from ``pos``.

Identifiers are resolved while scanning: the host lookup table is searched
first (linear, first exact match wins), then the builtin registry.
"""

import math
import re
from typing import List, Optional, Sequence

from ..library import Binding, EntryKind, find_builtin
from .tokens import (
    Token, TokenType, SourceLocation, OPERATORS, PUNCTUATION,
    WHITESPACE, IMAGINARY_SUFFIX
)
from .errors import (
    LexerError, invalid_character_message, unknown_identifier_message
)

DIGITS = "0123456789"

_IDENTIFIER_TOKEN_TYPES = {
    EntryKind.VARIABLE: TokenType.VARIABLE,
    EntryKind.FUNCTION: TokenType.FUNCTION,
    EntryKind.CLOSURE: TokenType.CLOSURE,
}


class Lexer:
    """
    Pull-based lexical analyzer for complex arithmetic expressions.
    """

    def __init__(self, source: str, variables: Optional[Sequence[Binding]] = None,
                 filename: str = "<expression>"):
        """
        Initialize the lexer.

        Args:
            source: Expression text
            variables: Host lookup table, searched before the builtins
            filename: Name used in diagnostics
        """
        self.source = source
        self.variables: Sequence[Binding] = variables or ()
        self.filename = filename
        self.pos = 0
        self.line = 1
        self.column = 1
        self.token: Optional[Token] = None

        # Decimal and exponential forms only; the match always succeeds on
        # a leading digit or '.', even when the text is not a valid float.
        self.number_pattern = re.compile(r'(?:\d+\.?\d*|\.\d*)(?:[eE][+-]?\d+)?', re.ASCII)

    def next_token(self) -> Token:
        """Scan the next token, store it as ``self.token`` and return it."""
        self._skip_whitespace()

        start_pos = self.pos
        location = SourceLocation(self.filename, self.line, self.column, start_pos)

        if self.pos >= len(self.source):
            self.token = Token(TokenType.END, "", None, location)
            return self.token

        current_char = self.source[self.pos]

        if current_char in DIGITS or current_char == '.':
            self.token = self._tokenize_number(location)
        elif self._is_identifier_start(current_char):
            self.token = self._tokenize_identifier(location)
        elif current_char in OPERATORS:
            self._advance()
            token_type, operation = OPERATORS[current_char]
            self.token = Token(token_type, current_char, operation, location)
        elif current_char in PUNCTUATION:
            self._advance()
            self.token = Token(PUNCTUATION[current_char], current_char, None, location)
        else:
            self._advance()
            self.token = Token(
                TokenType.ERROR, current_char,
                invalid_character_message(current_char), location
            )

        return self.token

    def tokenize(self) -> List[Token]:
        """
        Scan the remaining input.

        Returns:
            Tokens up to and including END, or up to the first ERROR token
        """
        tokens = []
        while True:
            token = self.next_token()
            tokens.append(token)
            if token.type in (TokenType.END, TokenType.ERROR):
                return tokens

    def resolve(self, name: str) -> Optional[Binding]:
        """Find ``name`` in the host lookup table, then in the builtins."""
        for entry in self.variables:
            if entry.name == name:
                return entry
        return find_builtin(name)

    def _tokenize_number(self, location: SourceLocation) -> Token:
        """Tokenize a real or imaginary numeric literal."""
        match = self.number_pattern.match(self.source, self.pos)
        lexeme = match.group(0)
        self._advance_by(len(lexeme))

        try:
            value = float(lexeme)
        except ValueError:
            # A lone '.' is not a float; it becomes NaN rather than an error.
            value = math.nan

        if self._current() == IMAGINARY_SUFFIX:
            self._advance()
            return Token(TokenType.NUMBER_IMAGINARY, lexeme + IMAGINARY_SUFFIX, value, location)

        return Token(TokenType.NUMBER_REAL, lexeme, value, location)

    def _tokenize_identifier(self, location: SourceLocation) -> Token:
        """Tokenize an identifier and resolve it to a binding."""
        start_pos = self.pos
        self._advance()

        while self.pos < len(self.source) and self._is_identifier_continue(self.source[self.pos]):
            self._advance()

        name = self.source[start_pos:self.pos]
        entry = self.resolve(name)

        if entry is None:
            return Token(TokenType.ERROR, name, unknown_identifier_message(name), location)

        return Token(_IDENTIFIER_TOKEN_TYPES[entry.kind], name, entry, location)

    def _is_identifier_start(self, char: str) -> bool:
        return char.isascii() and char.isalpha()

    def _is_identifier_continue(self, char: str) -> bool:
        return char.isascii() and (char.isalnum() or char == '_')

    def _skip_whitespace(self):
        while self.pos < len(self.source) and self.source[self.pos] in WHITESPACE:
            self._advance()

    def _current(self) -> str:
        if self.pos < len(self.source):
            return self.source[self.pos]
        return '\0'

    def _advance(self):
        """Advance position by one character, updating line/column."""
        if self.pos < len(self.source):
            if self.source[self.pos] == '\n':
                self.line += 1
                self.column = 1
            else:
                self.column += 1
            self.pos += 1

    def _advance_by(self, count: int):
        for _ in range(count):
            self._advance()


def tokenize_string(source: str, variables: Optional[Sequence[Binding]] = None,
                    filename: str = "<expression>") -> List[Token]:
    """
    Convenience function to tokenize a whole expression.

    Raises:
        LexerError: On the first unrecognized character or identifier
    """
    tokens = Lexer(source, variables, filename).tokenize()
    last = tokens[-1]

    if last.type == TokenType.ERROR:
        code = "L011" if last.lexeme[:1].isalpha() else "L001"
        raise LexerError(last.value, last.location, code=code)

    return tokens
