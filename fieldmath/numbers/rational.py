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
Exact rational numbers.

A Rational is a pair (dividend, divisor) of LargeInteger values kept in
canonical form after every construction:

1. divisor > 0 (the sign lives on the dividend)
2. gcd(|dividend|, divisor) == 1
3. zero is represented as 0/1

Every arithmetic operation cross-multiplies and normalizes again, so the
size of the representation never grows beyond what the value requires.
Conversions to and from fractions.Fraction and sympy.Rational are provided
for interoperability with the rest of the scientific Python stack.
"""

import math
from fractions import Fraction
from typing import Union

from sympy import Rational as SympyRational

from .large_integer import LargeInteger

IntLike = Union[int, LargeInteger]


def _int(value: IntLike) -> int:
    if isinstance(value, LargeInteger):
        return value.value
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Expected an integer, got {type(value).__name__}")
    return value


def _window(value: int, n: int) -> float:
    """Drop the n lowest bits of a non-negative value"""
    return float(value >> n)


class Rational:
    """
    Exact element of the field of rational numbers.

    Instances are immutable. Use Rational.value_of to construct from
    integers, strings, Fractions or sympy Rationals; the constructor itself
    normalizes too.
    """

    __slots__ = ('_dividend', '_divisor')

    def __init__(self, dividend: IntLike = 0, divisor: IntLike = 1):
        """
        Create the normalized rational dividend/divisor.

        Args:
            dividend: Numerator
            divisor: Denominator, must not be zero

        Raises:
            ArithmeticError: If divisor is zero
        """
        d = _int(dividend)
        q = _int(divisor)
        if q == 0:
            raise ArithmeticError("Zero divisor")
        if q < 0:
            d, q = -d, -q
        gcd = math.gcd(d, q)
        if gcd != 1:
            d //= gcd
            q //= gcd
        self._dividend = LargeInteger(d)
        self._divisor = LargeInteger(q)

    @staticmethod
    def value_of(dividend: Union[IntLike, str, Fraction, SympyRational, 'Rational'],
                 divisor: IntLike = 1) -> 'Rational':
        """
        Factory method to create a Rational from various types.

        Args:
            dividend: int, LargeInteger, string "a/b" or "a", Fraction,
                sympy Rational or Rational
            divisor: Denominator, divides the value given by dividend

        Raises:
            ArithmeticError: If the divisor is zero
        """
        if isinstance(dividend, Rational):
            if _int(divisor) == 1:
                return dividend
            return dividend.divide(Rational(divisor))
        if isinstance(dividend, str):
            text = dividend.strip()
            if '/' in text:
                parts = text.split('/')
                if len(parts) != 2:
                    raise ValueError(f"Invalid rational format: {dividend}")
                return Rational(int(parts[0]), int(parts[1])).divide(Rational(divisor))
            return Rational(int(text), divisor)
        if isinstance(dividend, Fraction):
            return Rational.from_fraction(dividend).divide(Rational(divisor))
        if isinstance(dividend, SympyRational):
            return Rational.from_sympy(dividend).divide(Rational(divisor))
        return Rational(dividend, divisor)

    @staticmethod
    def from_fraction(value: Fraction) -> 'Rational':
        return Rational(value.numerator, value.denominator)

    @staticmethod
    def from_sympy(value: SympyRational) -> 'Rational':
        return Rational(int(value.p), int(value.q))

    def to_fraction(self) -> Fraction:
        return Fraction(self._dividend.value, self._divisor.value)

    def to_sympy(self) -> SympyRational:
        return SympyRational(self._dividend.value, self._divisor.value)

    def get_dividend(self) -> LargeInteger:
        return self._dividend

    def get_divisor(self) -> LargeInteger:
        return self._divisor

    @property
    def dividend(self) -> LargeInteger:
        return self._dividend

    @property
    def divisor(self) -> LargeInteger:
        return self._divisor

    # Field operations
    def plus(self, that: 'Rational') -> 'Rational':
        a, b = self._dividend.value, self._divisor.value
        c, d = that._dividend.value, that._divisor.value
        return Rational(a * d + b * c, b * d)

    def minus(self, that: 'Rational') -> 'Rational':
        a, b = self._dividend.value, self._divisor.value
        c, d = that._dividend.value, that._divisor.value
        return Rational(a * d - b * c, b * d)

    def times(self, that: 'Rational') -> 'Rational':
        return Rational(self._dividend.value * that._dividend.value, self._divisor.value * that._divisor.value)

    def divide(self, that: 'Rational') -> 'Rational':
        if that._dividend.is_zero():
            raise ArithmeticError("Division by zero")
        return Rational(self._dividend.value * that._divisor.value, self._divisor.value * that._dividend.value)

    def opposite(self) -> 'Rational':
        return Rational(-self._dividend.value, self._divisor.value)

    def inverse(self) -> 'Rational':
        """
        Return the multiplicative inverse (1/this).

        Raises:
            ArithmeticError: If this rational is zero
        """
        if self._dividend.is_zero():
            raise ArithmeticError("Dividend is zero")
        return Rational(self._divisor.value, self._dividend.value)

    def abs(self) -> 'Rational':
        return Rational(abs(self._dividend.value), self._divisor.value)

    def magnitude(self) -> 'Rational':
        """Absolute value, used to rank pivot candidates"""
        return self.abs()

    def pow(self, exp: int) -> 'Rational':
        """Integer power; negative exponents invert first"""
        if exp < 0:
            return self.inverse().pow(-exp)
        return Rational(self._dividend.value ** exp, self._divisor.value ** exp)

    def round(self) -> LargeInteger:
        """Integer part, truncated toward zero"""
        return self._dividend.divide(self._divisor)

    # Predicates
    def signum(self) -> int:
        return self._dividend.signum()

    def is_zero(self) -> bool:
        return self._dividend.is_zero()

    def is_one(self) -> bool:
        return self._dividend.is_one() and self._divisor.is_one()

    def is_integer(self) -> bool:
        return self._divisor.is_one()

    def is_larger_than(self, that: 'Rational') -> bool:
        """Compare magnitudes |this| > |that| without dividing"""
        return self._dividend.times(that._divisor).is_larger_than(that._dividend.times(self._divisor))

    def compare_to(self, that: 'Rational') -> int:
        """Signed comparison by cross products: -1, 0 or 1"""
        return self._dividend.times(that._divisor).compare_to(that._dividend.times(self._divisor))

    # Conversions
    def double_value(self) -> float:
        """
        Convert to float without overflowing on huge dividends or divisors.

        Dividend and divisor magnitudes are shifted into a 63 bit window
        each, divided as floats and the shift difference is restored on the
        exponent. Values beyond the float range map to +/-inf.
        """
        dividend = self._dividend.value
        if dividend == 0:
            return 0.0
        a = abs(dividend)
        b = self._divisor.value
        shift_a = max(a.bit_length() - 63, 0)
        shift_b = max(b.bit_length() - 63, 0)
        try:
            value = math.ldexp(_window(a, shift_a) / _window(b, shift_b), shift_a - shift_b)
        except OverflowError:
            value = math.inf
        return value if dividend > 0 else -value

    def long_value(self) -> int:
        return self.round().long_value()

    def to_text(self, radix: int = 10) -> str:
        """Always dividend/divisor, also for integers (2/1)"""
        return self._dividend.to_text(radix) + '/' + self._divisor.to_text(radix)

    def __float__(self) -> float:
        return self.double_value()

    def __eq__(self, other) -> bool:
        if isinstance(other, Rational):
            return self._dividend == other._dividend and self._divisor == other._divisor
        return False

    def __hash__(self) -> int:
        return hash((self._dividend.value, self._divisor.value))

    def __lt__(self, other):
        if isinstance(other, Rational):
            return self.compare_to(other) < 0
        return NotImplemented

    def __le__(self, other):
        if isinstance(other, Rational):
            return self.compare_to(other) <= 0
        return NotImplemented

    def __gt__(self, other):
        if isinstance(other, Rational):
            return self.compare_to(other) > 0
        return NotImplemented

    def __ge__(self, other):
        if isinstance(other, Rational):
            return self.compare_to(other) >= 0
        return NotImplemented

    def __str__(self) -> str:
        if self._divisor.is_one():
            return str(self._dividend)
        return f"{self._dividend}/{self._divisor}"

    def __repr__(self) -> str:
        return f"Rational({self._dividend.value}, {self._divisor.value})"

    # Python operator overloading for convenience
    def __add__(self, other):
        return self.plus(other)

    def __sub__(self, other):
        return self.minus(other)

    def __mul__(self, other):
        return self.times(other)

    def __truediv__(self, other):
        return self.divide(other)

    def __neg__(self):
        return self.opposite()

    def __abs__(self):
        return self.abs()

    def __pow__(self, exp: int):
        return self.pow(exp)


# Constants
Rational.ZERO = Rational(0, 1)
Rational.ONE = Rational(1, 1)
