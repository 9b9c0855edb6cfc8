# ratiofloat

Exact rational arithmetic on arbitrarily large integers. Square roots and
logarithms are approximated until they meet a tolerance you choose.

A `BigFloat` holds a numerator and a denominator in lowest terms, with the
denominator always positive. Addition, subtraction, multiplication, division
and comparison are exact, and plain Python integers can be mixed in on
either side of an operator.

## Installation

```
pip install ratiofloat
```

There are no runtime dependencies. To run the tests:

```
pip install "ratiofloat[test]"
pytest
```

## Usage

```python
from ratiofloat.rational import BigFloat, factorial

a = BigFloat.parse("1/3")
b = BigFloat(1, 6)

total = a + b                 # BigFloat(1, 2)
print(total.to_decimal(5))    # 0.50000
print(total.numerator, total.denominator)  # 1 2
print(a * b, a / b, a - b)

eps = BigFloat.parse("1/1000000")
root = BigFloat(2).sqrt(eps)
print(root.to_decimal(6))

print(BigFloat(8).log2(eps).to_decimal(4))
print(BigFloat(100).log10(eps).to_decimal(4))

print(repr(BigFloat(2, 3).pow(3)))  # BigFloat(8, 27)
print(factorial(10))                # 3628800
```

### Parsing and printing

`BigFloat.parse` accepts an integer or `numerator/denominator`, each part
with an optional `+` or `-` sign, and spaces around the parts. An empty
string, a zero denominator, a missing number or stray characters raise
`ValueError`.

`to_decimal(precision)` gives fixed-point text with `precision` digits after
the point, rounded half away from zero. `str()` uses 17 digits, and prints
`0` for zero.

### Arithmetic

- Dividing by zero raises `ZeroDivisionError`; a zero denominator given to
  the constructor raises `ValueError`.
- `a % b` is the magnitude of the remainder left after dividing `a` by `b`
  with the quotient truncated toward zero.
- `pow(exp)` (and `**`) takes a non-negative integer; a negative exponent,
  and zero raised to zero, raise `ValueError`.
- `abs()` and `-x` work as expected; `BigFloat` values are hashable and equal
  values hash alike.

### Roots and logarithms

`sqrt`, `ln`, `log2` and `log10` take an epsilon as a `BigFloat` or an
integer. Left out, it is `DEFAULT_EPSILON` (1/10000), also available as
`BigFloat.DEFAULT_EPSILON`.

- `sqrt` runs Newton's method until the relative change between steps is
  below epsilon. Negative input raises `ValueError`.
- `ln` halves or doubles its argument into [1/2, 1], sums an odd-power
  series until a term is no larger than epsilon, and adds back multiples of
  ln 2. `log2` and `log10` divide by ln 2 and ln 10. Zero or negative input
  raises `ValueError`.

`factorial(n)` returns n! for a non-negative integer and raises
`ValueError` for a negative one.

### Reading from a stream

`read_big_float` reads one token from a text stream and parses it. Carriage
returns and tabs are skipped; a token ends after a space, at a newline or at
the end of the stream.

```python
import io
from ratiofloat.streams import read_big_float

stream = io.StringIO("3/4 5")
print(read_big_float(stream))  # 0.75000000000000000
print(read_big_float(stream))  # 5.00000000000000000
```

A token with more than one `/` is rejected with `ValueError`.

## What it does not do

The package is a library only: it has no command-line program. It offers no
trigonometric functions, exponentials or constants such as pi, and no vector
or matrix types built on `BigFloat`.