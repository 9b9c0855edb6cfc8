"""Exact rational numbers with approximate roots and logarithms."""

from __future__ import annotations

import math
from fractions import Fraction
from functools import lru_cache

_DIGITS = frozenset("0123456789")
_MAX_SQRT_ITERATIONS = 1_000_000
_FIXED_DIGITS = 17


def _skip_spaces(text: str, pos: int) -> int:
    while pos < len(text) and text[pos] == " ":
        pos += 1
    return pos


def _parse_integer(text: str, pos: int) -> tuple[int, int]:
    """Read an optionally signed integer starting at ``pos``.

    A sign (or nothing) right at the end of the text reads as zero.
    """
    pos = _skip_spaces(text, pos)
    negative = False
    if pos < len(text) and text[pos] in "+-":
        negative = text[pos] == "-"
        pos += 1
    start = pos
    while pos < len(text) and text[pos] in _DIGITS:
        pos += 1
    if start == pos:
        if pos < len(text):
            raise ValueError("No digits found in number")
        return 0, pos
    value = int(text[start:pos])
    return (-value if negative else value), pos


def _coerce(value: object) -> BigFloat | None:
    if isinstance(value, BigFloat):
        return value
    if isinstance(value, int):
        return BigFloat(value)
    return None


def _epsilon(eps: object) -> BigFloat:
    if eps is None:
        return DEFAULT_EPSILON
    converted = _coerce(eps)
    if converted is None:
        raise TypeError("epsilon must be a BigFloat or an integer")
    return converted


def _ln_series(x: BigFloat, eps: BigFloat) -> BigFloat:
    """ln(x) from the series 2 * sum(w**(2k+1) / (2k+1)), w = (x-1)/(x+1)."""
    w = (x - 1) / (x + 1)
    w_squared = w * w
    term = w
    result = w
    n = 3
    while term.abs() > eps:
        term = term * w_squared
        result = result + term / n
        n += 2
    return result * 2


@lru_cache(maxsize=None)
def _ln2(eps: BigFloat) -> BigFloat:
    return _ln_series(BigFloat(2), eps)


class BigFloat:
    """An exact fraction of two arbitrary-precision integers.

    The value is kept in lowest terms with a positive denominator.
    """

    __slots__ = ("_num", "_den")

    def __init__(self, numerator: int = 0, denominator: int = 1) -> None:
        if not isinstance(numerator, int) or not isinstance(denominator, int):
            raise TypeError("numerator and denominator must be integers")
        if denominator == 0:
            raise ValueError("Denominator cannot be zero")
        if denominator < 0:
            numerator, denominator = -numerator, -denominator
        divisor = math.gcd(numerator, denominator)
        self._num = numerator // divisor
        self._den = denominator // divisor

    @classmethod
    def parse(cls, text: str) -> BigFloat:
        """Parse ``"n"`` or ``"n/d"``, allowing spaces around the parts."""
        if not text:
            raise ValueError("Empty input string")
        numerator, pos = _parse_integer(text, 0)
        denominator = 1
        if "/" in text:
            pos = _skip_spaces(text, pos)
            if pos >= len(text) or text[pos] != "/":
                raise ValueError("Expected '/' after numerator")
            denominator, pos = _parse_integer(text, pos + 1)
            if denominator == 0:
                raise ValueError("Denominator cannot be zero")
        pos = _skip_spaces(text, pos)
        if pos != len(text):
            raise ValueError("Invalid characters after number")
        return cls(numerator, denominator)

    @property
    def numerator(self) -> int:
        return self._num

    @property
    def denominator(self) -> int:
        return self._den

    def abs(self) -> BigFloat:
        return BigFloat(abs(self._num), self._den)

    __abs__ = abs

    def __neg__(self) -> BigFloat:
        return BigFloat(-self._num, self._den)

    def __add__(self, other: object) -> BigFloat:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return BigFloat(self._num * other._den + other._num * self._den, self._den * other._den)

    __radd__ = __add__

    def __sub__(self, other: object) -> BigFloat:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return BigFloat(self._num * other._den - other._num * self._den, self._den * other._den)

    def __rsub__(self, other: object) -> BigFloat:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return other - self

    def __mul__(self, other: object) -> BigFloat:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return BigFloat(self._num * other._num, self._den * other._den)

    __rmul__ = __mul__

    def __truediv__(self, other: object) -> BigFloat:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        if other._num == 0:
            raise ZeroDivisionError("Division by zero")
        return BigFloat(self._num * other._den, self._den * other._num)

    def __rtruediv__(self, other: object) -> BigFloat:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return other / self

    def _truncated(self) -> int:
        if self._num >= 0:
            return self._num // self._den
        return -((-self._num) // self._den)

    def __mod__(self, other: object) -> BigFloat:
        """Magnitude of the remainder of division truncated toward zero."""
        other = _coerce(other)
        if other is None:
            return NotImplemented
        quotient = (self / other)._truncated()
        return (self - other * quotient).abs()

    def _cross(self, other: object) -> tuple[int, int] | None:
        other = _coerce(other)
        if other is None:
            return None
        return self._num * other._den, other._num * self._den

    def __eq__(self, other: object) -> bool:
        pair = self._cross(other)
        if pair is None:
            return NotImplemented
        return pair[0] == pair[1]

    def __lt__(self, other: object) -> bool:
        pair = self._cross(other)
        if pair is None:
            return NotImplemented
        return pair[0] < pair[1]

    def __le__(self, other: object) -> bool:
        pair = self._cross(other)
        if pair is None:
            return NotImplemented
        return pair[0] <= pair[1]

    def __gt__(self, other: object) -> bool:
        pair = self._cross(other)
        if pair is None:
            return NotImplemented
        return pair[0] > pair[1]

    def __ge__(self, other: object) -> bool:
        pair = self._cross(other)
        if pair is None:
            return NotImplemented
        return pair[0] >= pair[1]

    def __hash__(self) -> int:
        return hash(Fraction(self._num, self._den))

    def __bool__(self) -> bool:
        return self._num != 0

    def __float__(self) -> float:
        return self._num / self._den

    def __repr__(self) -> str:
        return f"BigFloat({self._num}, {self._den})"

    def to_decimal(self, precision: int) -> str:
        """Fixed-point text with ``precision`` digits after the point, rounded."""
        if precision < 0:
            raise ValueError("precision must not be negative")
        scaled, remainder = divmod(abs(self._num) * 10**precision, self._den)
        if 2 * remainder >= self._den:
            scaled += 1
        sign = "-" if self._num < 0 and scaled else ""
        digits = str(scaled).rjust(precision + 1, "0")
        if precision == 0:
            return sign + digits
        return f"{sign}{digits[:-precision]}.{digits[-precision:]}"

    def __str__(self) -> str:
        if self._num == 0:
            return "0"
        return self.to_decimal(_FIXED_DIGITS)

    def pow(self, exp: int) -> BigFloat:
        if not isinstance(exp, int):
            raise TypeError("exponent must be an integer")
        if exp < 0:
            raise ValueError("Negative exponent not supported")
        if exp == 0 and self._num == 0:
            raise ValueError("Zero base with zero exponent is undefined")
        return BigFloat(self._num**exp, self._den**exp)

    def __pow__(self, exp: object) -> BigFloat:
        if not isinstance(exp, int):
            return NotImplemented
        return self.pow(exp)

    def sqrt(self, eps: BigFloat | int | None = None) -> BigFloat:
        """Square root by Newton's method until the relative step is below ``eps``."""
        eps = _epsilon(eps)
        if self._num < 0:
            raise ValueError("Cannot calculate square root of a negative number")
        if self._num == 0:
            return BigFloat()
        guess = BigFloat(math.isqrt(self._num // self._den) or 1)
        for iteration in range(_MAX_SQRT_ITERATIONS + 1):
            previous = guess
            guess = (guess + self / guess) / 2
            if iteration > 0 and (guess - previous).abs() / guess.abs() < eps:
                return guess
        raise RuntimeError("sqrt: did not converge within max iterations")

    def ln(self, eps: BigFloat | int | None = None) -> BigFloat:
        """Natural logarithm, reducing the argument by powers of two."""
        eps = _epsilon(eps)
        if self <= 0:
            raise ValueError("Logarithm undefined for non-positive values")
        x = self
        k = 0
        while x > 1:
            x = x / 2
            k += 1
        half = BigFloat(1, 2)
        while x < half:
            x = x * 2
            k -= 1
        result = _ln_series(x, eps)
        if k:
            result = result + k * _ln2(eps)
        return result

    def log2(self, eps: BigFloat | int | None = None) -> BigFloat:
        if self <= 0:
            raise ValueError("Logarithm undefined for non-positive values")
        return self.ln(eps) / BigFloat(2).ln(eps)

    def log10(self, eps: BigFloat | int | None = None) -> BigFloat:
        if self <= 0:
            raise ValueError("Logarithm undefined for non-positive values")
        return self.ln(eps) / BigFloat(10).ln(eps)


DEFAULT_EPSILON = BigFloat.parse("1/10000")
BigFloat.DEFAULT_EPSILON = DEFAULT_EPSILON


def factorial(n: int) -> int:
    """n! for a non-negative integer n."""
    if not isinstance(n, int):
        raise TypeError("factorial needs an integer")
    if n < 0:
        raise ValueError("Factorial is not defined for negative numbers")
    return math.factorial(n)