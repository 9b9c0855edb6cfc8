import math
from fractions import Fraction

import pytest

from ratiofloat.rational import DEFAULT_EPSILON, BigFloat, factorial


def test_default_epsilon_value():
    assert DEFAULT_EPSILON == BigFloat.parse("1/10000")
    assert BigFloat.DEFAULT_EPSILON == DEFAULT_EPSILON


def test_constructor_reduces_to_lowest_terms():
    value = BigFloat(2, 4)
    assert math.gcd(value.numerator, value.denominator) == 1
    assert value.denominator > 0
    assert value.numerator * 4 == 2 * value.denominator


def test_sign_moves_to_numerator():
    value = BigFloat(3, -6)
    assert value.denominator > 0
    assert value.numerator < 0
    assert value == BigFloat(-3, 6)


def test_zero_denominator_rejected():
    with pytest.raises(ValueError):
        BigFloat(1, 0)


def test_parse_with_spaces():
    assert BigFloat.parse(" 3 / 4 ") == BigFloat(3, 4)
    assert BigFloat.parse("+5/-10") == BigFloat(5, -10)
    assert BigFloat.parse("-12") == BigFloat(-12)


def test_parse_lone_sign_is_zero():
    assert BigFloat.parse("-") == BigFloat(0)


@pytest.mark.parametrize("text", ["", "abc", "1/0", "1 2", "-/3", "1/2x", "1/ "])
def test_parse_errors(text):
    with pytest.raises(ValueError):
        BigFloat.parse(text)


@pytest.mark.parametrize(
    "a,b",
    [((1, 2), (1, 3)), ((-7, 3), (5, 11)), ((10, 1), (-4, 9))],
)
def test_add_sub_round_trip(a, b):
    x, y = BigFloat(*a), BigFloat(*b)
    assert (x + y) - y == x
    assert x + y == y + x
    assert Fraction(*a) + Fraction(*b) == Fraction((x + y).numerator, (x + y).denominator)


@pytest.mark.parametrize("a,b", [((2, 3), (5, 7)), ((-1, 4), (9, 2))])
def test_mul_div_round_trip(a, b):
    x, y = BigFloat(*a), BigFloat(*b)
    assert x * y / y == x
    assert x * y == y * x


def test_operations_with_ints():
    x = BigFloat(1, 2)
    assert x + 1 == BigFloat(3, 2)
    assert 1 - x == x
    assert 2 * x == 1
    assert 1 / x == 2


def test_division_by_zero():
    with pytest.raises(ZeroDivisionError):
        BigFloat(1) / BigFloat(0)


def test_negation_and_abs():
    x = BigFloat(-3, 4)
    assert -x + x == 0
    assert x.abs() == -x
    assert abs(x) == BigFloat(3, 4)


@pytest.mark.parametrize("a,b", [(7, 3), (-7, 3), (7, -3), (BigFloat(7, 2), BigFloat(2, 3))])
def test_mod_invariants(a, b):
    x, y = BigFloat(a) if isinstance(a, int) else a, BigFloat(b) if isinstance(b, int) else b
    r = x % y
    assert r >= 0
    assert r < y.abs()
    candidates = [(x - r) / y, (x + r) / y]
    assert any(c.denominator == 1 for c in candidates)


def test_comparisons_match_fraction_order():
    pairs = [(1, 2), (-1, 3), (5, 4), (0, 1), (-7, 2), (2, 3)]
    values = [BigFloat(*p) for p in pairs]
    ordered = sorted(values)
    expected = sorted(Fraction(*p) for p in pairs)
    assert [Fraction(v.numerator, v.denominator) for v in ordered] == expected
    assert BigFloat(-1, 2) < BigFloat(1, 3)
    assert BigFloat(1, 3) > BigFloat(-1, 2)
    assert BigFloat(2, 4) <= BigFloat(1, 2)
    assert BigFloat(2, 4) >= BigFloat(1, 2)
    assert BigFloat(4) > 3


def test_hash_consistent_with_equality():
    assert hash(BigFloat(2, 4)) == hash(BigFloat(1, 2))
    assert hash(BigFloat(6, 3)) == hash(2)
    assert len({BigFloat(1, 2), BigFloat(3, 6)}) == 1


def test_to_decimal():
    assert BigFloat(1, 4).to_decimal(2) == "0.25"
    assert BigFloat(-1, 4).to_decimal(2) == "-" + BigFloat(1, 4).to_decimal(2)
    assert BigFloat(5).to_decimal(0) == "5"
    with pytest.raises(ValueError):
        BigFloat(1).to_decimal(-1)


def test_str():
    assert str(BigFloat()) == "0"
    assert str(BigFloat(1, 2)) == "0.50000000000000000"
    assert len(str(BigFloat(1, 3)).split(".")[1]) == 17


def test_float_conversion():
    assert float(BigFloat(3, 4)) == 3 / 4


def test_pow():
    x = BigFloat(2, 3)
    assert x.pow(3) == x * x * x
    assert x**2 == x * x
    assert x.pow(0) == BigFloat(1)
    with pytest.raises(ValueError):
        BigFloat(0).pow(0)
    with pytest.raises(ValueError):
        x.pow(-1)


@pytest.mark.parametrize("value", [BigFloat(2), BigFloat(9), BigFloat(1, 7), BigFloat(12345, 10)])
def test_sqrt_squares_back(value):
    root = value.sqrt()
    assert root > 0
    assert (root * root - value).abs() / value < BigFloat(1, 1000)


def test_sqrt_edge_cases():
    assert BigFloat(0).sqrt() == 0
    with pytest.raises(ValueError):
        BigFloat(-1).sqrt()


@pytest.mark.parametrize("value", [BigFloat(10), BigFloat(1, 1000), BigFloat(2), BigFloat(7, 3)])
def test_ln_close_to_math(value):
    assert abs(float(value.ln()) - math.log(float(value))) < 1e-3


def test_ln_of_one_is_zero():
    assert BigFloat(1).ln() == 0


def test_ln_product_rule():
    a, b = BigFloat(3), BigFloat(5, 2)
    eps = BigFloat(1, 10**8)
    diff = (a * b).ln(eps) - (a.ln(eps) + b.ln(eps))
    assert diff.abs() < BigFloat(1, 10**5)


@pytest.mark.parametrize("method", [BigFloat.ln, BigFloat.log2, BigFloat.log10])
@pytest.mark.parametrize("value", [BigFloat(0), BigFloat(-3)])
def test_logs_reject_non_positive(method, value):
    before = (value.numerator, value.denominator)
    with pytest.raises(ValueError) as excinfo:
        method(value, DEFAULT_EPSILON)
    assert str(excinfo.value)
    assert (value.numerator, value.denominator) == before


def test_log2_and_log10():
    assert abs(float(BigFloat(8).log2()) - math.log2(8)) < 1e-3
    assert abs(float(BigFloat(1000).log10()) - math.log10(1000)) < 1e-3


def test_factorial():
    assert factorial(0) == 1
    assert factorial(1) == 1
    assert factorial(20) == math.factorial(20)
    with pytest.raises(ValueError):
        factorial(-1)