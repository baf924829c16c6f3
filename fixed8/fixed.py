"""Signed fixed-point numbers with eight fractional bits, stored in 32 bits."""

from __future__ import annotations

import math
import struct
from typing import Union

FRACTIONAL_BITS = 8
_SCALE = 1 << FRACTIONAL_BITS
_INT_BITS = 32
_INT_MASK = (1 << _INT_BITS) - 1
_INT_SIGN = 1 << (_INT_BITS - 1)

Number = Union[int, float, "Fixed"]


def _wrap_int32(value: int) -> int:
    """Reduce an integer to the range of a signed 32-bit integer."""
    value &= _INT_MASK
    return value - (1 << _INT_BITS) if value & _INT_SIGN else value


def _to_float32(value: float) -> float:
    """Round a float to single precision."""
    return struct.unpack("<f", struct.pack("<f", value))[0]


def _round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    magnitude = math.floor(abs(value) + 0.5)
    return -magnitude if value < 0 else magnitude


def format_float(value: float) -> str:
    """Format a float the way a default-configured text stream does (six significant digits)."""
    return f"{value:g}"


class Fixed:
    """A fixed-point number: a signed 32-bit raw value with 8 fractional bits."""

    __slots__ = ("_raw",)

    def __init__(self, value: Number = 0) -> None:
        if isinstance(value, Fixed):
            self._raw = value._raw
        elif isinstance(value, int):
            self._raw = _wrap_int32(int(value) << FRACTIONAL_BITS)
        elif isinstance(value, float):
            scaled = _to_float32(_to_float32(value) * _SCALE)
            self._raw = _wrap_int32(_round_half_away(scaled))
        else:
            raise TypeError(
                f"cannot make a Fixed from {type(value).__name__!r}"
            )

    @classmethod
    def from_raw(cls, raw: int) -> Fixed:
        """Build a value directly from its raw fixed-point bits."""
        result = cls()
        result.raw = raw
        return result

    @property
    def raw(self) -> int:
        """The raw fixed-point bits as a signed 32-bit integer."""
        return self._raw

    @raw.setter
    def raw(self, value: int) -> None:
        self._raw = _wrap_int32(int(value))

    def to_float(self) -> float:
        """The value as a single-precision float."""
        return _to_float32(float(self._raw)) / _SCALE

    def to_int(self) -> int:
        """The integer part, dropping the fractional bits (rounds toward minus infinity)."""
        return self._raw >> FRACTIONAL_BITS

    def increment(self) -> Fixed:
        """Add the smallest representable step in place and return self."""
        self.raw = self._raw + 1
        return self

    def decrement(self) -> Fixed:
        """Subtract the smallest representable step in place and return self."""
        self.raw = self._raw - 1
        return self

    def __float__(self) -> float:
        return self.to_float()

    def __int__(self) -> int:
        return self.to_int()

    def __str__(self) -> str:
        return format_float(self.to_float())

    def __repr__(self) -> str:
        return f"Fixed.from_raw({self._raw})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Fixed):
            return NotImplemented
        return self._raw == other._raw

    def __lt__(self, other: Fixed) -> bool:
        if not isinstance(other, Fixed):
            return NotImplemented
        return self._raw < other._raw

    def __le__(self, other: Fixed) -> bool:
        if not isinstance(other, Fixed):
            return NotImplemented
        return self._raw <= other._raw

    def __gt__(self, other: Fixed) -> bool:
        if not isinstance(other, Fixed):
            return NotImplemented
        return self._raw > other._raw

    def __ge__(self, other: Fixed) -> bool:
        if not isinstance(other, Fixed):
            return NotImplemented
        return self._raw >= other._raw

    def __hash__(self) -> int:
        return hash(self._raw)

    @staticmethod
    def _coerce(other: object) -> Fixed | None:
        if isinstance(other, Fixed):
            return other
        if isinstance(other, (int, float)):
            return Fixed(other)
        return None

    def __add__(self, other: Number) -> Fixed:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Fixed.from_raw(self._raw + rhs._raw)

    def __sub__(self, other: Number) -> Fixed:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Fixed.from_raw(self._raw - rhs._raw)

    def __mul__(self, other: Number) -> Fixed:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Fixed.from_raw((self._raw * rhs._raw) >> FRACTIONAL_BITS)

    def __truediv__(self, other: Number) -> Fixed:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        if rhs._raw == 0:
            raise ZeroDivisionError("division of a Fixed by zero")
        dividend = self._raw << FRACTIONAL_BITS
        quotient = abs(dividend) // abs(rhs._raw)
        if (dividend < 0) != (rhs._raw < 0):
            quotient = -quotient
        return Fixed.from_raw(quotient)


def smaller(a: Fixed, b: Fixed) -> Fixed:
    """Return the smaller of two values; on a tie, the second."""
    return a if a < b else b


def larger(a: Fixed, b: Fixed) -> Fixed:
    """Return the larger of two values; on a tie, the second."""
    return a if a > b else b