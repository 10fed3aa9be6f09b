"""
End-to-end tests for the host API.

Exercises compile / evaluate / destroy / interpret together, including
re-evaluation against changing host variables.
"""

import cmath
import math
import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from complexpr import (
    Cell, Compiler, ParseError, closure, compile_expression,
    destroy, evaluate, function, interpret, variable,
)
from complexpr.parser import Call, Constant


class TestInterpret(unittest.TestCase):
    """One-shot evaluation."""

    def _value(self, text):
        value, error = interpret(text)
        self.assertEqual(error, 0, text)
        return value

    def test_complex_literals(self):
        cases = {
            "3+4I": 3 + 4j,
            "2.5-0.5I": 2.5 - 0.5j,
            "-1-1I": -1 - 1j,
            "0.125I": 0.125j,
            "1e2+1e-2I": 100 + 0.01j,
        }
        for text, expected in cases.items():
            value = self._value(text)
            self.assertEqual(value.real, expected.real, text)
            self.assertEqual(value.imag, expected.imag, text)

    def test_power_is_left_associative(self):
        for a, b, c in ((2, 3, 2), (1.5, 2, 3), (3, 0.5, 4)):
            chained = self._value(f"{a}^{b}^{c}")
            grouped = self._value(f"({a}^{b})^{c}")
            self.assertAlmostEqual(chained, grouped)
        self.assertAlmostEqual(self._value("2^3^2"), 64)
        self.assertNotAlmostEqual(self._value("2^3^2"), self._value("2^(3^2)"))

    def test_unary_sign_runs(self):
        self.assertEqual(self._value("--5"), 5)
        self.assertEqual(self._value("-+-5"), 5)
        self.assertEqual(self._value("+-5"), -5)
        self.assertEqual(self._value("---5"), -5)

    def test_negation_precedes_power(self):
        self.assertAlmostEqual(self._value("-2^2"), 4)
        self.assertAlmostEqual(self._value("0-2^2"), -4)

    def test_reference_values(self):
        self.assertAlmostEqual(self._value("sin(pi/2)"), 1)
        self.assertAlmostEqual(self._value("I*I"), -1)
        self.assertAlmostEqual(self._value("exp(I*pi)+1"), 0)
        self.assertAlmostEqual(self._value("e"), math.e)
        self.assertAlmostEqual(self._value("pi()"), math.pi)
        self.assertEqual(self._value("sqrt(0-4)"), 2j)

    def test_infinity(self):
        value = self._value("inf")
        self.assertTrue(math.isinf(value.real))
        self.assertEqual(value.imag, 0)

    def test_comma_yields_last(self):
        self.assertEqual(self._value("1,2"), 2)
        self.assertEqual(self._value("(1, 2, 3) * 2"), 6)

    def test_unary_function_precedence(self):
        self.assertAlmostEqual(self._value("sin pi/2"), 0)
        self.assertAlmostEqual(self._value("sqrt 4 * 3"), 6)

    def test_error(self):
        value, error = interpret("1+")
        self.assertTrue(cmath.isnan(value))
        self.assertEqual(error, 2)

    def test_lone_decimal_point(self):
        value, error = interpret(".")
        self.assertEqual(error, 0)
        self.assertTrue(cmath.isnan(value))


class TestCompile(unittest.TestCase):
    """Compilation against host bindings."""

    def test_variable_rebinding(self):
        x = Cell(2)
        tree, error = compile_expression("x+1", [variable("x", x)])
        self.assertEqual(error, 0)
        self.assertEqual(evaluate(tree), 3)

        x.value = 5
        self.assertEqual(evaluate(tree), 6)
        destroy(tree)

    def test_pow_matches_caret(self):
        a = Cell()
        bindings = [variable("a", a)]
        by_function, _ = compile_expression("pow(a, 2)", bindings)
        by_operator, _ = compile_expression("a^2", bindings)

        for value in (0, 1, -3.5, 2j, 1 - 1j, 0.3 + 7j, -4 - 0.25j):
            a.value = value
            self.assertEqual(evaluate(by_function), evaluate(by_operator))

    def test_unclosed_parenthesis(self):
        tree, error = compile_expression("(1+2")
        self.assertIsNone(tree)
        self.assertEqual(error, 4)

    def test_arity_mismatch(self):
        tree, error = compile_expression("pow(1)")
        self.assertIsNone(tree)
        self.assertGreater(error, 0)

    def test_error_at_first_token(self):
        tree, error = compile_expression(")")
        self.assertIsNone(tree)
        self.assertEqual(error, 1)

        tree, error = compile_expression("")
        self.assertIsNone(tree)
        self.assertEqual(error, 1)

    def test_unknown_variable(self):
        tree, error = compile_expression("x + y", [variable("x", Cell())])
        self.assertIsNone(tree)
        self.assertEqual(error, 5)

    def test_constants_folded(self):
        tree, _ = compile_expression("2*pi + 1")
        self.assertIsInstance(tree, Constant)
        self.assertAlmostEqual(tree.value, 2 * math.pi + 1)

    def test_optimize_disabled(self):
        tree, _ = compile_expression("2*pi + 1", optimize=False)
        self.assertIsInstance(tree, Call)
        self.assertEqual(tree.count_nodes(), 5)

    def test_host_functions_and_closures(self):
        t = Cell(0.5)
        lerp = function("lerp", lambda a, b, s: a + (b - a) * s, 3, pure=True)
        offset = closure("shift", lambda ctx, v: v + ctx, 1, 10)
        tree, error = compile_expression(
            "shift lerp(0, 4I, t)", [variable("t", t), lerp, offset]
        )
        self.assertEqual(error, 0)
        self.assertEqual(evaluate(tree), 10 + 2j)

        t.value = 1
        self.assertEqual(evaluate(tree), 10 + 4j)

    def test_variable_shadows_builtin(self):
        e = Cell(2)
        tree, _ = compile_expression("e^2", [variable("e", e)])
        self.assertAlmostEqual(evaluate(tree), 4)

    def test_compiler_raises(self):
        compiler = Compiler(filename="formula")
        with self.assertRaises(ParseError) as ctx:
            compiler.compile("1 +* 2")
        self.assertEqual(ctx.exception.offset, 4)
        self.assertEqual(ctx.exception.diagnostic.location.filename, "formula")

    def test_long_flat_sum(self):
        value, error = interpret("+".join(["1"] * 600))
        self.assertEqual(error, 0)
        self.assertEqual(value, 600)

        x = Cell(1)
        tree, error = compile_expression("+".join(["x"] * 600), [variable("x", x)])
        self.assertEqual(error, 0)
        self.assertEqual(tree.count_nodes(), 1199)
        self.assertEqual(evaluate(tree), 600)

        x.value = 0.5j
        self.assertEqual(evaluate(tree), 300j)
        destroy(tree)

    def test_long_flat_sum_with_debug_logging(self):
        text = "-".join(["2"] * 600)
        with self.assertLogs("complexpr", level="DEBUG") as logs:
            tree, error = compile_expression(text)
        self.assertEqual(error, 0)
        self.assertEqual(evaluate(tree), -1196)
        self.assertTrue(any("1199 -> 1 nodes" in line for line in logs.output))

    def test_compiler_reuses_bindings(self):
        x = Cell(1)
        compiler = Compiler([variable("x", x)])
        double = compiler.compile("2*x")
        square = compiler.compile("x*x")
        x.value = 3
        self.assertEqual(evaluate(double), 6)
        self.assertEqual(evaluate(square), 9)


class TestDestroy(unittest.TestCase):
    """Releasing compiled trees."""

    def test_none_is_noop(self):
        destroy(None)

    def test_releases_children(self):
        x = Cell(1)
        tree, _ = compile_expression("x*2 + x", [variable("x", x)])
        child = tree.args[0]
        destroy(tree)
        self.assertEqual(tree.children(), [])
        self.assertEqual(child.children(), [])

    def test_evaluate_missing_tree(self):
        tree, _ = compile_expression("(")
        self.assertTrue(cmath.isnan(evaluate(tree)))


if __name__ == '__main__':
    unittest.main()
