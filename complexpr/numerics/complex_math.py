"""
Complex arithmetic primitives for complexpr.

Every value flowing through a compiled tree is a ``numpy.complex128``. numpy
follows C99 complex semantics for division by zero and branch cuts, and under
``quiet()`` it reports anomalies as inf/nan instead of raising, which is
what the evaluator needs (evaluation never fails, it propagates NaN).

Real-valued functions (abs, arg, real, imag) are promoted back to Complex so
that every builtin has the same signature.
"""

import math
from contextlib import contextmanager
from typing import Iterator, Union

import numpy as np

Complex = np.complex128
Number = Union[int, float, complex]

NAN = Complex(complex(math.nan, 0.0))


def to_complex(value: Number) -> Complex:
    """Coerce a Python or numpy number to Complex."""
    return Complex(value)


@contextmanager
def quiet() -> Iterator[None]:
    """Silence numpy floating-point warnings for the duration of the block."""
    with np.errstate(all="ignore"):
        yield


# Constants (0-arity builtins)

def imaginary_unit() -> Complex:
    return Complex(1j)


def pi() -> Complex:
    return Complex(math.pi)


def e() -> Complex:
    return Complex(math.e)


def infinity() -> Complex:
    return Complex(math.inf)


# Infix operators

def add(a: Complex, b: Complex) -> Complex:
    return a + b


def sub(a: Complex, b: Complex) -> Complex:
    return a - b


def mul(a: Complex, b: Complex) -> Complex:
    return a * b


def divide(a: Complex, b: Complex) -> Complex:
    return Complex(np.true_divide(a, b))


def power(a: Complex, b: Complex) -> Complex:
    return Complex(np.power(Complex(a), Complex(b)))


def negate(a: Complex) -> Complex:
    return -a


def comma(a: Complex, b: Complex) -> Complex:
    """List separator: the left value is discarded."""
    return b


# Unary functions

def absolute(a: Complex) -> Complex:
    return Complex(np.abs(a))


def argument(a: Complex) -> Complex:
    return Complex(np.angle(a))


def real_part(a: Complex) -> Complex:
    return Complex(np.real(a))


def imag_part(a: Complex) -> Complex:
    return Complex(np.imag(a))


def conjugate(a: Complex) -> Complex:
    return Complex(np.conj(a))


def sqrt(a: Complex) -> Complex:
    return Complex(np.sqrt(Complex(a)))


def exp(a: Complex) -> Complex:
    return Complex(np.exp(Complex(a)))


def log(a: Complex) -> Complex:
    # Natural logarithm only; log(0) is -inf+0j.
    return Complex(np.log(Complex(a)))


def sin(a: Complex) -> Complex:
    return Complex(np.sin(Complex(a)))


def cos(a: Complex) -> Complex:
    return Complex(np.cos(Complex(a)))


def tan(a: Complex) -> Complex:
    return Complex(np.tan(Complex(a)))


def asin(a: Complex) -> Complex:
    return Complex(np.arcsin(Complex(a)))


def acos(a: Complex) -> Complex:
    return Complex(np.arccos(Complex(a)))


def atan(a: Complex) -> Complex:
    return Complex(np.arctan(Complex(a)))


def sinh(a: Complex) -> Complex:
    return Complex(np.sinh(Complex(a)))


def cosh(a: Complex) -> Complex:
    return Complex(np.cosh(Complex(a)))


def tanh(a: Complex) -> Complex:
    return Complex(np.tanh(Complex(a)))


def asinh(a: Complex) -> Complex:
    return Complex(np.arcsinh(Complex(a)))


def acosh(a: Complex) -> Complex:
    return Complex(np.arccosh(Complex(a)))


def atanh(a: Complex) -> Complex:
    return Complex(np.arctanh(Complex(a)))
