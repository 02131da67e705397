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
"""Complex numbers with 64-bit floating point parts as field elements."""

import cmath
import math
from typing import Union


class Complex:
    """Field element holding a real and an imaginary double."""

    __slots__ = ('_real', '_imaginary')

    def __init__(self, real: float = 0.0, imaginary: float = 0.0):
        self._real = float(real)
        self._imaginary = float(imaginary)

    @staticmethod
    def value_of(value: Union[complex, float, int, 'Complex'], imaginary: float = 0.0) -> 'Complex':
        if isinstance(value, Complex):
            return value
        if isinstance(value, complex):
            return Complex(value.real, value.imag)
        return Complex(value, imaginary)

    def get_real(self) -> float:
        return self._real

    def get_imaginary(self) -> float:
        return self._imaginary

    @property
    def real(self) -> float:
        return self._real

    @property
    def imaginary(self) -> float:
        return self._imaginary

    def plus(self, that: 'Complex') -> 'Complex':
        return Complex(self._real + that._real, self._imaginary + that._imaginary)

    def minus(self, that: 'Complex') -> 'Complex':
        return Complex(self._real - that._real, self._imaginary - that._imaginary)

    def times(self, that: 'Complex') -> 'Complex':
        return Complex(self._real * that._real - self._imaginary * that._imaginary,
                       self._real * that._imaginary + self._imaginary * that._real)

    def divide(self, that: 'Complex') -> 'Complex':
        return self.times(that.inverse())

    def opposite(self) -> 'Complex':
        return Complex(-self._real, -self._imaginary)

    def inverse(self) -> 'Complex':
        """
        Return 1/this.

        Raises:
            ArithmeticError: If both parts are zero
        """
        norm2 = self._real * self._real + self._imaginary * self._imaginary
        if norm2 == 0.0:
            raise ArithmeticError("Division by zero")
        return Complex(self._real / norm2, -self._imaginary / norm2)

    def conjugate(self) -> 'Complex':
        return Complex(self._real, -self._imaginary)

    def magnitude(self) -> float:
        return math.hypot(self._real, self._imaginary)

    def argument(self) -> float:
        return math.atan2(self._imaginary, self._real)

    def sqrt(self) -> 'Complex':
        return Complex.value_of(cmath.sqrt(complex(self._real, self._imaginary)))

    def is_zero(self) -> bool:
        return self._real == 0.0 and self._imaginary == 0.0

    def __complex__(self) -> complex:
        return complex(self._real, self._imaginary)

    def __eq__(self, other) -> bool:
        if isinstance(other, Complex):
            return self._real == other._real and self._imaginary == other._imaginary
        return False

    def __hash__(self) -> int:
        return hash((self._real, self._imaginary))

    def __str__(self) -> str:
        sign = '-' if self._imaginary < 0 or (self._imaginary == 0 and math.copysign(1.0, self._imaginary) < 0) else '+'
        return f"{self._real!r} {sign} {abs(self._imaginary)!r}i"

    def __repr__(self) -> str:
        return f"Complex({self._real!r}, {self._imaginary!r})"

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
        return self.magnitude()


Complex.ZERO = Complex(0.0, 0.0)
Complex.ONE = Complex(1.0, 0.0)
Complex.I = Complex(0.0, 1.0)
