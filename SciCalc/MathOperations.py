# MathOperations.py
"""""
Pure numeric operations behind the calculator keys.

All functions are total over floats: instead of raising, they return ERROR_MARKER
where the calculator shows "Error", and nan / inf where IEEE-754 arithmetic would
(log of 0 is -inf, log of a negative number is nan, ...). Trigonometric functions
work in radians; converting degrees is up to the caller.
"""""

import math

from .error import ERROR_MARKER

PI = math.pi
E = math.e

# Largest n whose factorial is still a finite float
MAX_FACTORIAL = 170


# -----------------------------
# Arithmetic
# -----------------------------

def add(a, b):
    return a + b


def subtract(a, b):
    return a - b


def multiply(a, b):
    return a * b


def divide(a, b):
    """Return a / b, or ERROR_MARKER for b == 0."""
    if b == 0:
        return ERROR_MARKER
    return a / b


# -----------------------------
# Trigonometry (radians)
# -----------------------------

def _ieee(fn, x):
    """Call a math function, turning its ValueError (domain) into nan like a float unit would."""
    try:
        return fn(x)
    except ValueError:
        return math.nan


def sin(x):
    return _ieee(math.sin, x)


def cos(x):
    return _ieee(math.cos, x)


def tan(x):
    return _ieee(math.tan, x)


def asin(x):
    return _ieee(math.asin, x)


def acos(x):
    return _ieee(math.acos, x)


def atan(x):
    return _ieee(math.atan, x)


# -----------------------------
# Logarithms
# -----------------------------

def _log(fn, x):
    if math.isnan(x) or x < 0:
        return math.nan
    if x == 0:
        return -math.inf
    return fn(x)


def log10(x):
    """Base-10 logarithm; -inf for 0, nan for negative numbers."""
    return _log(math.log10, x)


def naturalLog(x):
    """Natural logarithm; -inf for 0, nan for negative numbers."""
    return _log(math.log, x)


# -----------------------------
# Powers and roots
# -----------------------------

def power(base, exponent):
    try:
        return math.pow(base, exponent)
    except ValueError:
        # e.g. negative base with fractional exponent, or 0 to a negative power
        if base == 0 and exponent < 0:
            return math.inf
        return math.nan
    except OverflowError:
        if base < 0 and float(exponent).is_integer() and exponent % 2 == 1:
            return -math.inf
        return math.inf


def sqrt(x):
    if math.isnan(x) or x < 0:
        return math.nan
    return math.sqrt(x)


def square(x):
    return multiply(x, x)


# -----------------------------
# Misc
# -----------------------------

def factorial(n):
    """Iterative n! for an already floored n.

    Returns ERROR_MARKER for negative n and inf once the product no longer fits a float.
    """
    if n < 0:
        return ERROR_MARKER
    if n == 0 or n == 1:
        return 1
    if n > MAX_FACTORIAL:
        return math.inf
    result = 1
    for i in range(2, int(n) + 1):
        result *= i
    return result


def reciprocal(x):
    if x == 0:
        return ERROR_MARKER
    return divide(1, x)


def absolute(x):
    return abs(x)


def negate(x):
    return -x
