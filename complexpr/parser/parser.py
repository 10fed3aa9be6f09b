"""
complexpr recursive descent parser

Grammar, lowest to highest precedence:

    list   = expr {"," expr}
    expr   = term {("+" | "-") term}
    term   = factor {("*" | "/") factor}
    factor = power {"^" power}
    power  = {"+" | "-"} base
    base   = NUMBER | VARIABLE
           | FUNCTION0 ["(" ")"]
           | FUNCTION1 power
           | FUNCTIONn "(" expr {"," expr} ")"
           | "(" list ")"

Notes:
- ``^`` folds to the left: a^b^c is (a^b)^c
- a run of leading signs collapses to one; -a^b is (-a)^b
- a comma at list level yields its right operand

Each production returns a finished subtree. A failure raises ParseError,
and the subtrees built so far on the failing path are simply dropped.
"""

from typing import Callable, List, Optional

from ..lexer.lexer import Lexer
from ..lexer.tokens import Token, TokenType
from ..library import Binding, builtin_names
from ..numerics import complex_math as cm
from .ast_nodes import ASTNode, Call, ClosureCall, Constant, SourceSpan, VariableRef
from .errors import (
    ParseError, create_lexical_error, create_unexpected_token_error,
    create_unclosed_delimiter_error, create_arity_mismatch_error,
    create_invalid_expression_error, create_trailing_input_error
)


class Parser:
    """
    Recursive descent parser pulling tokens from a Lexer.
    """

    def __init__(self, lexer: Lexer):
        """
        Initialize parser.

        Args:
            lexer: Lexer positioned at the start of the expression
        """
        self.lexer = lexer
        self.previous: Optional[Token] = None

    def parse(self) -> ASTNode:
        """
        Parse the whole expression.

        Returns:
            Root of the expression tree

        Raises:
            ParseError: On any lexical or syntax error, including input left
                over after a complete expression
        """
        self._advance()
        root = self._parse_list()

        if not self._check(TokenType.END):
            raise self._error(lambda: create_trailing_input_error(self._peek(), self.lexer.pos))

        return root

    # Productions

    def _parse_list(self) -> ASTNode:
        node = self._parse_expr()

        while self._check(TokenType.COMMA):
            self._advance()
            right = self._parse_expr()
            node = Call(",", cm.comma, [node, right], True, self._span(node, right))

        return node

    def _parse_expr(self) -> ASTNode:
        node = self._parse_term()

        while self._check(TokenType.PLUS) or self._check(TokenType.MINUS):
            operator = self._advance()
            right = self._parse_term()
            node = Call(operator.lexeme, operator.value, [node, right], True, self._span(node, right))

        return node

    def _parse_term(self) -> ASTNode:
        node = self._parse_factor()

        while self._check(TokenType.MULTIPLY) or self._check(TokenType.DIVIDE):
            operator = self._advance()
            right = self._parse_factor()
            node = Call(operator.lexeme, operator.value, [node, right], True, self._span(node, right))

        return node

    def _parse_factor(self) -> ASTNode:
        node = self._parse_power()

        while self._check(TokenType.POWER):
            operator = self._advance()
            right = self._parse_power()
            node = Call(operator.lexeme, operator.value, [node, right], True, self._span(node, right))

        return node

    def _parse_power(self) -> ASTNode:
        start = self._peek()
        negative = False

        while self._peek().is_sign:
            if self._peek().type == TokenType.MINUS:
                negative = not negative
            self._advance()

        operand = self._parse_base()

        if not negative:
            return operand

        span = SourceSpan(start.location, self.previous.location)
        return Call("-", cm.negate, [operand], True, span)

    def _parse_base(self) -> ASTNode:
        token = self._peek()

        if token.type == TokenType.NUMBER_REAL:
            self._advance()
            return Constant(complex(token.value, 0.0), self._token_span(token))

        if token.type == TokenType.NUMBER_IMAGINARY:
            self._advance()
            return Constant(complex(0.0, token.value), self._token_span(token))

        if token.type == TokenType.VARIABLE:
            self._advance()
            return VariableRef(token.lexeme, token.value.address, self._token_span(token))

        if token.type in (TokenType.FUNCTION, TokenType.CLOSURE):
            return self._parse_call(token)

        if token.type == TokenType.LEFT_PAREN:
            self._advance()
            node = self._parse_list()
            if not self._check(TokenType.RIGHT_PAREN):
                raise self._error(lambda: create_unclosed_delimiter_error(
                    token.location, self._peek(), self.lexer.pos))
            self._advance()
            return node

        raise self._error(lambda: create_invalid_expression_error(token, self.lexer.pos))

    def _parse_call(self, token: Token) -> ASTNode:
        """Parse a function or closure application according to its arity."""
        entry: Binding = token.value
        self._advance()

        if entry.arity == 0:
            if self._check(TokenType.LEFT_PAREN):
                self._advance()
                if not self._check(TokenType.RIGHT_PAREN):
                    raise self._error(lambda: create_unexpected_token_error(
                        TokenType.RIGHT_PAREN, self._peek(), self.lexer.pos))
                self._advance()
            return self._make_call(entry, [], token)

        if entry.arity == 1:
            return self._make_call(entry, [self._parse_power()], token)

        if not self._check(TokenType.LEFT_PAREN):
            raise self._error(lambda: create_unexpected_token_error(
                TokenType.LEFT_PAREN, self._peek(), self.lexer.pos))

        args: List[ASTNode] = []
        while True:
            self._advance()  # '(' or ','
            args.append(self._parse_expr())
            if len(args) == entry.arity or not self._check(TokenType.COMMA):
                break

        if len(args) != entry.arity or self._check(TokenType.COMMA):
            found = len(args) if len(args) != entry.arity else f"more than {entry.arity}"
            raise self._error(lambda: create_arity_mismatch_error(
                entry.name, entry.arity, found, token, self.lexer.pos))

        if not self._check(TokenType.RIGHT_PAREN):
            raise self._error(lambda: create_unexpected_token_error(
                TokenType.RIGHT_PAREN, self._peek(), self.lexer.pos))

        self._advance()
        return self._make_call(entry, args, token)

    def _make_call(self, entry: Binding, args: List[ASTNode], start: Token) -> Call:
        span = SourceSpan(start.location, self.previous.location)
        if entry.is_closure:
            return ClosureCall(entry.name, entry.address, args, entry.pure, entry.context, span)
        return Call(entry.name, entry.address, args, entry.pure, span)

    # Utility methods

    def _error(self, factory: Callable[[], ParseError]) -> ParseError:
        """Build the error for the current position; lexer errors take precedence."""
        current = self._peek()
        if current.type == TokenType.ERROR:
            known = [entry.name for entry in self.lexer.variables] + builtin_names()
            return create_lexical_error(current, self.lexer.pos, known)
        return factory()

    def _check(self, token_type: TokenType) -> bool:
        """Check if current token matches type without consuming."""
        return self._peek().type == token_type

    def _advance(self) -> Token:
        """Consume the current token, scan the next one and return the consumed one."""
        self.previous = self.lexer.token
        self.lexer.next_token()
        return self.previous

    def _peek(self) -> Token:
        """Return current token without consuming."""
        return self.lexer.token

    def _span(self, left: ASTNode, right: ASTNode) -> Optional[SourceSpan]:
        if left.span is None or right.span is None:
            return None
        return SourceSpan(left.span.start, right.span.end)

    def _token_span(self, token: Token) -> SourceSpan:
        return SourceSpan(token.location, token.location)


def parse_string(source: str, variables=None, filename: str = "<expression>") -> ASTNode:
    """
    Convenience function to parse an expression without optimizing it.

    Raises:
        ParseError: If parsing fails
    """
    parser = Parser(Lexer(source, variables, filename))
    return parser.parse()
