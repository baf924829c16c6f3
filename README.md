# fixed8

Signed fixed-point numbers that keep eight fractional bits. A value is held as
a signed 32-bit raw integer equal to the number times 256.

## Installing

    pip install .

## Using the `Fixed` type

```python
from fixed8.fixed import Fixed, format_float, larger, smaller

a = Fixed(10)          # from an int: raw value 10 << 8
b = Fixed(42.42)       # from a float: rounded to the nearest 1/256
c = Fixed.from_raw(1)  # the smallest positive step, 1/256
z = Fixed()            # zero

print(b)               # 42.4219
print(b.to_int())      # 42
print(b.to_float())    # 42.421875
print(b.raw)           # 10860

print(a + b, a - b, a * b, b / a)
print(a < b, a == Fixed(10))

x = Fixed(0)
x.increment()          # adds one raw step, 1/256, in place
x.decrement()

print(smaller(a, b), larger(a, b))
```

### Behaviour

- `Fixed(value)` accepts an `int`, a `float` or another `Fixed` (which is
  copied); anything else raises `TypeError`. Floats go through single
  precision and are rounded half away from zero.
- The raw value can be read and set through the `raw` property. Every result
  wraps to the signed 32-bit range.
- `to_float()` (also `float(x)`) gives the value as a single-precision float;
  `to_int()` (also `int(x)`) drops the fractional bits, rounding toward
  negative infinity.
- `+`, `-`, `*` and `/` take a `Fixed`, an `int` or a `float` on the right.
  Multiplication shifts the raw product right by eight bits; division shifts
  the dividend left by eight bits and truncates toward zero. Division by zero
  raises `ZeroDivisionError`.
- Comparisons work between `Fixed` values and compare raw values. Values are
  hashable.
- `increment()` and `decrement()` change the value by one raw step in place
  and return it.
- `smaller(a, b)` and `larger(a, b)` return one of their arguments; on a tie
  they return the second.
- `str(x)` and `format_float(value)` give six significant digits with
  trailing zeros removed.

## Demonstration

    fixed8-demo

prints all of the walk-throughs. Name one or more of `basics`, `conversion`
and `operators` to run only those:

    fixed8-demo operators

The same lines are available as lists of strings from
`fixed8.demo.basics_lines()`, `conversion_lines()` and `operators_lines()`.

## Running the tests

    pip install .[test]
    pytest