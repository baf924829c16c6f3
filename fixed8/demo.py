"""Demonstration runs of the fixed-point type: raw bits, conversions and operators."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Sequence

from fixed8.fixed import Fixed, larger, smaller


def _post_increment(value: Fixed) -> Fixed:
    previous = Fixed(value)
    value.increment()
    return previous


def _post_decrement(value: Fixed) -> Fixed:
    previous = Fixed(value)
    value.decrement()
    return previous


def basics_lines() -> list[str]:
    """Raw bits of a default value, a copy of it and a value assigned from that copy."""
    a = Fixed()
    b = Fixed(a)
    c = Fixed()
    c.raw = b.raw
    return [str(value.raw) for value in (a, b, c)]


def conversion_lines() -> list[str]:
    """Values built from integers and floats, shown as floats and as integers."""
    a = Fixed()
    b = Fixed(10)
    c = Fixed(42.42)
    d = Fixed(b)
    a = Fixed(1234.4321)

    named = [("a", a), ("b", b), ("c", c), ("d", d)]
    lines = [f"{name} is {value}" for name, value in named]
    lines.extend(f"{name} is {value.to_int()} as integer" for name, value in named)
    return lines


def operators_lines() -> list[str]:
    """Comparison, arithmetic, stepping and min/max on fixed-point values."""
    lines = ["===== CONSTRUCTORS ====="]
    a = Fixed()
    b = Fixed(123)
    c = Fixed(456.789)
    d = Fixed(b)
    e = Fixed()
    e.raw = c.raw

    lines += ["", "===== BASIC VALUES ====="]
    lines += [f"{name}: {value}" for name, value in
              (("a", a), ("b", b), ("c", c), ("d", d), ("e", e))]

    # Truth values are shown as 1 and 0, the way a stream prints them by default.
    lines += ["", "===== COMPARISON OPERATORS ====="]
    lines += [
        f"b > c: {int(b > c)}",
        f"b < c: {int(b < c)}",
        f"b >= d: {int(b >= d)}",
        f"b <= d: {int(b <= d)}",
        f"b == d: {int(b == d)}",
        f"c != e: {int(c != e)}",
    ]

    lines += ["", "===== ARITHMETIC OPERATORS ====="]
    lines += [
        f"b + c = {b + c}",
        f"c - b = {c - b}",
        f"b * c = {b * c}",
        f"c / b = {c / b}",
    ]

    lines += ["", "===== INCREMENT/DECREMENT OPERATORS ====="]
    j = Fixed()
    lines.append(f"j: {j}")
    lines.append(f"++j: {j.increment()}")
    lines.append(f"j: {j}")
    lines.append(f"j++: {_post_increment(j)}")
    lines.append(f"j: {j}")
    lines.append(f"--j: {j.decrement()}")
    lines.append(f"j: {j}")
    lines.append(f"j--: {_post_decrement(j)}")
    lines.append(f"j: {j}")

    lines += ["", "===== MIN/MAX FUNCTIONS ====="]
    const_b = Fixed(b)
    const_c = Fixed(c)
    lines += [
        f"min(b, c): {smaller(b, c)}",
        f"min(const_b, const_c): {smaller(const_b, const_c)}",
        f"max(b, c): {larger(b, c)}",
        f"max(const_b, const_c): {larger(const_b, const_c)}",
    ]

    lines += ["", "===== REQUIRED TEST ====="]
    x = Fixed()
    y = Fixed(Fixed(5.05) * Fixed(2))
    lines.append(str(x))
    lines.append(str(x.increment()))
    lines.append(str(x))
    lines.append(str(_post_increment(x)))
    lines.append(str(x))
    lines.append(str(y))
    lines.append(str(larger(x, y)))
    return lines


_DEMOS: dict[str, Callable[[], list[str]]] = {
    "basics": basics_lines,
    "conversion": conversion_lines,
    "operators": operators_lines,
}


def main(argv: Sequence[str] | None = None) -> int:
    """Print the chosen demonstrations, all of them when none is named."""
    parser = argparse.ArgumentParser(
        prog="fixed8-demo",
        description="Show fixed-point values at work.",
    )
    parser.add_argument(
        "demos",
        nargs="*",
        choices=sorted(_DEMOS),
        help="which demonstrations to run (default: all)",
    )
    args = parser.parse_args(argv)
    chosen = args.demos or list(_DEMOS)
    for name in chosen:
        for line in _DEMOS[name]():
            print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())