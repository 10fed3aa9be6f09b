"""
Tests for the complexpr lexer.

Covers literal scanning, identifier resolution order, operator tokens and
the cursor positions the parser uses for error offsets.
"""

import math
import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from complexpr.lexer import Lexer, LexerError, TokenType, tokenize_string
from complexpr.library import Cell, variable
from complexpr.numerics import complex_math as cm


class TestLexer(unittest.TestCase):
    """Test cases for tokenization."""

    def _types(self, source, variables=None):
        return [token.type for token in Lexer(source, variables).tokenize()]

    def test_real_literals(self):
        for text, expected in (("3.5", 3.5), ("42", 42.0), (".25", 0.25),
                               ("1e3", 1000.0), ("2.5E-1", 0.25), ("7.", 7.0)):
            token = Lexer(text).next_token()
            self.assertEqual(token.type, TokenType.NUMBER_REAL, text)
            self.assertEqual(token.value, expected, text)

    def test_imaginary_literal(self):
        lexer = Lexer("2.5I")
        token = lexer.next_token()
        self.assertEqual(token.type, TokenType.NUMBER_IMAGINARY)
        self.assertEqual(token.value, 2.5)
        self.assertEqual(token.lexeme, "2.5I")
        self.assertEqual(lexer.pos, 4)
        self.assertEqual(lexer.next_token().type, TokenType.END)

    def test_suffix_must_be_adjacent(self):
        self.assertEqual(self._types("2 I"), [
            TokenType.NUMBER_REAL, TokenType.FUNCTION, TokenType.END
        ])

    def test_lone_decimal_point_is_nan(self):
        token = Lexer(".").next_token()
        self.assertEqual(token.type, TokenType.NUMBER_REAL)
        self.assertTrue(math.isnan(token.value))

    def test_incomplete_exponent_leaves_identifier(self):
        lexer = Lexer("1e")
        self.assertEqual(lexer.next_token().value, 1.0)
        token = lexer.next_token()
        self.assertEqual(token.type, TokenType.FUNCTION)
        self.assertEqual(token.lexeme, "e")

    def test_operators_carry_operations(self):
        tokens = Lexer("+-*/^").tokenize()
        self.assertEqual([t.type for t in tokens], [
            TokenType.PLUS, TokenType.MINUS, TokenType.MULTIPLY,
            TokenType.DIVIDE, TokenType.POWER, TokenType.END
        ])
        self.assertEqual([t.value for t in tokens[:-1]],
                         [cm.add, cm.sub, cm.mul, cm.divide, cm.power])
        self.assertTrue(all(t.is_infix for t in tokens[:-1]))

    def test_punctuation(self):
        self.assertEqual(self._types("(,)"), [
            TokenType.LEFT_PAREN, TokenType.COMMA, TokenType.RIGHT_PAREN, TokenType.END
        ])

    def test_whitespace_skipped(self):
        lexer = Lexer(" 1 \t+\r\n 2 ")
        tokens = lexer.tokenize()
        self.assertEqual([t.type for t in tokens], [
            TokenType.NUMBER_REAL, TokenType.PLUS, TokenType.NUMBER_REAL, TokenType.END
        ])
        self.assertEqual(tokens[2].location.line, 2)
        self.assertEqual(tokens[2].location.offset, 8)
        self.assertEqual(lexer.pos, 10)

    def test_builtin_resolution(self):
        token = Lexer("sinh").next_token()
        self.assertEqual(token.type, TokenType.FUNCTION)
        self.assertEqual(token.value.name, "sinh")
        self.assertEqual(token.value.arity, 1)

    def test_variables_resolved_before_builtins(self):
        cell = Cell(3)
        token = Lexer("pi", [variable("pi", cell)]).next_token()
        self.assertEqual(token.type, TokenType.VARIABLE)
        self.assertIs(token.value.address, cell)

    def test_first_matching_variable_wins(self):
        first, second = Cell(1), Cell(2)
        token = Lexer("x", [variable("x", first), variable("x", second)]).next_token()
        self.assertIs(token.value.address, first)

    def test_identifier_characters(self):
        cell = Cell()
        lexer = Lexer("x_1+2", [variable("x_1", cell)])
        self.assertEqual(lexer.next_token().type, TokenType.VARIABLE)
        self.assertEqual(lexer.pos, 3)

    def test_unknown_identifier(self):
        lexer = Lexer("foo+1")
        token = lexer.next_token()
        self.assertEqual(token.type, TokenType.ERROR)
        self.assertIn("foo", token.value)
        self.assertEqual(lexer.pos, 3)

    def test_invalid_characters(self):
        for text in ("$", "_x", "#", "%"):
            lexer = Lexer(text)
            self.assertEqual(lexer.next_token().type, TokenType.ERROR, text)
            self.assertEqual(lexer.pos, 1, text)

    def test_end_of_input(self):
        lexer = Lexer("   ")
        self.assertEqual(lexer.next_token().type, TokenType.END)
        self.assertEqual(lexer.pos, 3)
        self.assertEqual(lexer.next_token().type, TokenType.END)

    def test_tokenize_stops_at_error(self):
        tokens = Lexer("1 @ 2").tokenize()
        self.assertEqual(tokens[-1].type, TokenType.ERROR)
        self.assertEqual(len(tokens), 2)

    def test_tokenize_string_raises(self):
        with self.assertRaises(LexerError) as ctx:
            tokenize_string("1 + foo")
        self.assertEqual(ctx.exception.diagnostic.code, "L011")

        with self.assertRaises(LexerError) as ctx:
            tokenize_string("1 ? 2")
        self.assertEqual(ctx.exception.diagnostic.code, "L001")

        self.assertEqual(tokenize_string("1+2")[-1].type, TokenType.END)


if __name__ == '__main__':
    unittest.main()
