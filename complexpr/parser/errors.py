"""
Error handling for the complexpr parser.

Every syntax problem surfaces as a ParseError carrying the character
offset at which parsing stopped. That offset is the lexer cursor at the
moment the problem was detected, i.e. just past the offending token.
"""

from typing import Optional, List, Union

from ..lexer.tokens import Token, TokenType, SourceLocation
from ..lexer.errors import Diagnostic, suggest_names


class ParseError(Exception):
    """
    Exception raised when an expression cannot be compiled.

    ``offset`` is the error position reported to hosts (never zero).
    """

    def __init__(
        self,
        message: str,
        location: SourceLocation,
        offset: int,
        token: Optional[Token] = None,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="error",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )
        self.token = token
        # Zero would read as "no error" to hosts checking the offset.
        self.offset = offset if offset > 0 else 1

    def __str__(self) -> str:
        return str(self.diagnostic)


_TOKEN_DESCRIPTIONS = {
    TokenType.LEFT_PAREN: "'('",
    TokenType.RIGHT_PAREN: "')'",
    TokenType.COMMA: "','",
    TokenType.END: "end of input",
}


def describe(expected: Union[TokenType, str]) -> str:
    if isinstance(expected, TokenType):
        return _TOKEN_DESCRIPTIONS.get(expected, expected.name)
    return expected


def create_lexical_error(token: Token, offset: int, known_names: List[str]) -> ParseError:
    """Create an error for an ERROR token produced by the lexer."""
    if token.lexeme[:1].isalpha():
        suggestions = suggest_names(token.lexeme, known_names)
        return ParseError(
            message=token.value,
            location=token.location,
            offset=offset,
            token=token,
            code="L011",
            help_text="Identifiers must name a bound variable or a builtin.",
            suggestions=[f"Did you mean '{name}'?" for name in suggestions]
        )

    return ParseError(
        message=token.value,
        location=token.location,
        offset=offset,
        token=token,
        code="L001",
        help_text="Only numbers, names, + - * / ^ ( ) and , may appear in an expression."
    )


def create_unexpected_token_error(expected: Union[TokenType, str], found: Token,
                                  offset: int) -> ParseError:
    """Create an error for an unexpected token."""
    if found.type == TokenType.END:
        return create_unexpected_eof_error(describe(expected), found, offset)

    return ParseError(
        message=f"Expected {describe(expected)}, found '{found.lexeme}'",
        location=found.location,
        offset=offset,
        token=found,
        code="P001"
    )


def create_unexpected_eof_error(expected: str, found: Token, offset: int) -> ParseError:
    """Create an error for unexpected end of input."""
    return ParseError(
        message=f"Unexpected end of input, expected {expected}",
        location=found.location,
        offset=offset,
        token=found,
        code="P010",
        help_text=f"The expression ended while expecting {expected}."
    )


def create_unclosed_delimiter_error(open_location: SourceLocation, found: Token,
                                    offset: int) -> ParseError:
    """Create an error for a '(' with no matching ')'."""
    return ParseError(
        message="Unclosed delimiter '('",
        location=found.location,
        offset=offset,
        token=found,
        code="P004",
        help_text=f"The opening '(' at offset {open_location.offset} was never closed.",
        suggestions=["Add a closing ')'"]
    )


def create_arity_mismatch_error(name: str, expected: int, found_args: Union[int, str], token: Token,
                                offset: int) -> ParseError:
    """Create an error for a call with the wrong number of arguments."""
    return ParseError(
        message=f"'{name}' takes {expected} arguments",
        location=token.location,
        offset=offset,
        token=token,
        code="P013",
        help_text=f"'{name}' was called with {found_args} argument(s).",
        suggestions=[f"Call it as {name}({', '.join(f'a{i + 1}' for i in range(expected))})"]
    )


def create_invalid_expression_error(token: Token, offset: int) -> ParseError:
    """Create an error for a token that cannot start an operand."""
    if token.type == TokenType.END:
        return create_unexpected_eof_error("an operand", token, offset)

    return ParseError(
        message=f"Invalid expression: unexpected '{token.lexeme}'",
        location=token.location,
        offset=offset,
        token=token,
        code="P005",
        help_text="Expected a number, a variable, a function or '('."
    )


def create_trailing_input_error(token: Token, offset: int) -> ParseError:
    """Create an error for input left over after a complete expression."""
    return ParseError(
        message=f"Unexpected '{token.lexeme}' after complete expression",
        location=token.location,
        offset=offset,
        token=token,
        code="P014",
        suggestions=["Insert an operator between the operands"]
    )
