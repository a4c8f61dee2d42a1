import math
import sys, pathlib
sys.path.insert(0, str(pathlib.Path(__file__).parent.parent))

import pytest

from SciCalc import MathOperations as M
from SciCalc.error import ERROR_MARKER


def test_arithmetic():
    assert M.add(2, 3) == 5
    assert M.subtract(2, 3) == -1
    assert M.multiply(4, 2.5) == 10
    assert M.divide(9, 4) == 2.25


@pytest.mark.parametrize("a", [0, 1, -7.5, 1e300])
def test_divide_by_zero_is_error(a):
    assert M.divide(a, 0) == ERROR_MARKER


@pytest.mark.parametrize("a, b", [(1, 3), (-10, 7), (0.1, 0.2), (1e10, -3.3)])
def test_divide_then_multiply_gives_back_dividend(a, b):
    assert M.divide(a, b) * b == pytest.approx(a)


def test_trig_works_in_radians():
    assert M.sin(math.pi / 2) == pytest.approx(1)
    assert M.cos(0) == 1
    assert M.tan(math.pi / 4) == pytest.approx(1)
    assert M.asin(1) == pytest.approx(math.pi / 2)
    assert M.acos(1) == 0
    assert M.atan(1) == pytest.approx(math.pi / 4)


def test_trig_outside_domain_is_nan():
    assert math.isnan(M.asin(2))
    assert math.isnan(M.acos(-1.5))
    assert math.isnan(M.sin(math.inf))


def test_logarithms():
    assert M.log10(1000) == pytest.approx(3)
    assert M.naturalLog(M.E) == pytest.approx(1)


def test_logarithm_of_zero_and_negative_follow_ieee():
    assert M.log10(0) == -math.inf
    assert M.naturalLog(0) == -math.inf
    assert math.isnan(M.log10(-1))
    assert math.isnan(M.naturalLog(-5))
    assert math.isnan(M.naturalLog(math.nan))


def test_power_and_roots():
    assert M.power(2, 10) == 1024
    assert M.power(9, 0.5) == 3
    assert M.sqrt(16) == 4
    assert M.square(-3) == 9
    assert math.isnan(M.sqrt(-4))


def test_power_edge_cases():
    assert math.isnan(M.power(-8, 1 / 3))
    assert M.power(0, -1) == math.inf
    assert M.power(10, 400) == math.inf
    assert M.power(-10, 401) == -math.inf


@pytest.mark.parametrize("n", [0, 1, 2, 5, 10, 20, 50])
def test_factorial_is_iterative_product(n):
    assert M.factorial(n) == math.factorial(n)


def test_factorial_special_values():
    assert M.factorial(-1) == ERROR_MARKER
    assert M.factorial(-20) == ERROR_MARKER
    assert M.factorial(171) == math.inf


def test_reciprocal():
    assert M.reciprocal(4) == 0.25
    assert M.reciprocal(-0.5) == -2
    assert M.reciprocal(0) == ERROR_MARKER


def test_absolute_and_negate():
    assert M.absolute(-3.5) == 3.5
    assert M.negate(2) == -2
    assert M.negate(-2) == 2


def test_constants():
    assert M.PI == math.pi
    assert M.E == math.e
