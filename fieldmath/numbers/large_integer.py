#!/usr/bin/env python3
#
# Copyright 2022 Max Planck Insitute Magdeburg
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
#
#
"""
Exact arbitrary precision integers.

LargeInteger is an immutable ring element on top of Python's int, which
already has arbitrary precision. The class adds the ring method names used
throughout the package (plus, minus, times, opposite), division truncating
toward zero, shifts in both directions and magnitude comparisons.
"""

import math
from typing import Union

IntLike = Union[int, 'LargeInteger']


def _as_int(value: IntLike) -> int:
    if isinstance(value, LargeInteger):
        return value._value
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Expected an integer, got {type(value).__name__}")
    return value


class LargeInteger:
    """
    Immutable arbitrary precision integer.

    Division truncates toward zero and the remainder takes the sign of the
    dividend, so that ``a == a.divide(b).times(b).plus(a.remainder(b))``.
    """

    __slots__ = ('_value',)

    def __init__(self, value: IntLike = 0):
        self._value = _as_int(value)

    @staticmethod
    def value_of(value: Union[int, str, 'LargeInteger'], radix: int = 10) -> 'LargeInteger':
        """
        Factory method for large integers.

        Args:
            value: An int, a LargeInteger or a string of digits in the given radix
            radix: Radix used to parse strings (2 to 36)
        """
        if isinstance(value, LargeInteger):
            return value
        if isinstance(value, str):
            return LargeInteger(int(value.strip(), radix))
        return LargeInteger(value)

    @property
    def value(self) -> int:
        """The wrapped Python int"""
        return self._value

    # Ring operations
    def plus(self, that: IntLike) -> 'LargeInteger':
        return LargeInteger(self._value + _as_int(that))

    def minus(self, that: IntLike) -> 'LargeInteger':
        return LargeInteger(self._value - _as_int(that))

    def times(self, that: IntLike) -> 'LargeInteger':
        return LargeInteger(self._value * _as_int(that))

    def opposite(self) -> 'LargeInteger':
        return LargeInteger(-self._value)

    def abs(self) -> 'LargeInteger':
        return LargeInteger(abs(self._value))

    def divide(self, that: IntLike) -> 'LargeInteger':
        """Integer division truncated toward zero"""
        divisor = _as_int(that)
        if divisor == 0:
            raise ArithmeticError("Division by zero")
        quotient = abs(self._value) // abs(divisor)
        if (self._value < 0) != (divisor < 0):
            quotient = -quotient
        return LargeInteger(quotient)

    def remainder(self, that: IntLike) -> 'LargeInteger':
        """Remainder of the truncated division, same sign as this"""
        return self.minus(self.divide(that).times(that))

    def mod(self, modulus: IntLike) -> 'LargeInteger':
        """Non-negative remainder for a positive modulus"""
        m = _as_int(modulus)
        if m <= 0:
            raise ArithmeticError(f"Modulus must be positive, got {m}")
        return LargeInteger(self._value % m)

    def pow(self, exp: int) -> 'LargeInteger':
        if exp < 0:
            raise ArithmeticError("Negative exponent for an integer power")
        return LargeInteger(self._value ** exp)

    def gcd(self, that: IntLike) -> 'LargeInteger':
        """Greatest common divisor, always non-negative"""
        return LargeInteger(math.gcd(self._value, _as_int(that)))

    # Bit operations
    def shift_left(self, n: int) -> 'LargeInteger':
        """Multiply by 2^n; a negative n shifts right"""
        if n < 0:
            return self.shift_right(-n)
        return LargeInteger(self._value << n)

    def shift_right(self, n: int) -> 'LargeInteger':
        """Floor division by 2^n; a negative n shifts left"""
        if n < 0:
            return self.shift_left(-n)
        return LargeInteger(self._value >> n)

    def bit_length(self) -> int:
        """Number of bits of the magnitude, excluding the sign"""
        return self._value.bit_length()

    # Sign and comparison
    def signum(self) -> int:
        return (self._value > 0) - (self._value < 0)

    def is_zero(self) -> bool:
        return self._value == 0

    def is_one(self) -> bool:
        return self._value == 1

    def is_positive(self) -> bool:
        return self._value > 0

    def is_negative(self) -> bool:
        return self._value < 0

    def is_larger_than(self, that: IntLike) -> bool:
        """Compare magnitudes: |this| > |that|"""
        return abs(self._value) > abs(_as_int(that))

    def compare_to(self, that: IntLike) -> int:
        other = _as_int(that)
        return (self._value > other) - (self._value < other)

    # Conversions
    def long_value(self) -> int:
        return self._value

    def double_value(self) -> float:
        """Nearest float; values beyond the float range map to +/-inf"""
        try:
            return float(self._value)
        except OverflowError:
            return math.copysign(math.inf, self._value)

    def to_text(self, radix: int = 10) -> str:
        if radix == 10:
            return str(self._value)
        if not 2 <= radix <= 36:
            raise ValueError(f"radix out of range: {radix}")
        digits = "0123456789abcdefghijklmnopqrstuvwxyz"
        n = abs(self._value)
        chars = []
        while True:
            n, r = divmod(n, radix)
            chars.append(digits[r])
            if n == 0:
                break
        if self._value < 0:
            chars.append('-')
        return ''.join(reversed(chars))

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    def __float__(self) -> float:
        return self.double_value()

    def __bool__(self) -> bool:
        return self._value != 0

    def __eq__(self, other) -> bool:
        if isinstance(other, LargeInteger):
            return self._value == other._value
        return False

    def __hash__(self) -> int:
        return hash(self._value)

    def __lt__(self, other):
        if isinstance(other, LargeInteger):
            return self._value < other._value
        return NotImplemented

    def __le__(self, other):
        if isinstance(other, LargeInteger):
            return self._value <= other._value
        return NotImplemented

    def __gt__(self, other):
        if isinstance(other, LargeInteger):
            return self._value > other._value
        return NotImplemented

    def __ge__(self, other):
        if isinstance(other, LargeInteger):
            return self._value >= other._value
        return NotImplemented

    def __str__(self) -> str:
        return str(self._value)

    def __repr__(self) -> str:
        return f"LargeInteger({self._value})"

    # Python operator overloading for convenience
    def __add__(self, other):
        return self.plus(other)

    def __sub__(self, other):
        return self.minus(other)

    def __mul__(self, other):
        return self.times(other)

    def __neg__(self):
        return self.opposite()

    def __abs__(self):
        return self.abs()

    def __lshift__(self, n):
        return self.shift_left(n)

    def __rshift__(self, n):
        return self.shift_right(n)


LargeInteger.ZERO = LargeInteger(0)
LargeInteger.ONE = LargeInteger(1)
