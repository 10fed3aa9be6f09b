"""
complexpr numerics package

Complex number type and the primitive operations the evaluator dispatches to.
"""

from .complex_math import (
    Complex, NAN, to_complex, quiet,
    add, sub, mul, divide, negate, comma, power,
)

__all__ = [
    "Complex", "NAN", "to_complex", "quiet",
    "add", "sub", "mul", "divide", "negate", "comma", "power",
]
