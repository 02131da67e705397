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
"""64-bit floating point numbers as field elements."""

import math
from typing import Union


class Float64:
    """
    Field element wrapping a Python float.

    Equality is exact; use fieldmath.structures.approx_equal for tolerance
    based comparisons.
    """

    __slots__ = ('_value',)

    def __init__(self, value: Union[float, int] = 0.0):
        self._value = float(value)

    @staticmethod
    def value_of(value: Union[float, int, str, 'Float64']) -> 'Float64':
        if isinstance(value, Float64):
            return value
        return Float64(float(value))

    @property
    def value(self) -> float:
        return self._value

    def double_value(self) -> float:
        return self._value

    def plus(self, that: 'Float64') -> 'Float64':
        return Float64(self._value + that._value)

    def minus(self, that: 'Float64') -> 'Float64':
        return Float64(self._value - that._value)

    def times(self, that: 'Float64') -> 'Float64':
        return Float64(self._value * that._value)

    def divide(self, that: 'Float64') -> 'Float64':
        if that._value == 0.0:
            raise ArithmeticError("Division by zero")
        return Float64(self._value / that._value)

    def opposite(self) -> 'Float64':
        return Float64(-self._value)

    def inverse(self) -> 'Float64':
        if self._value == 0.0:
            raise ArithmeticError("Division by zero")
        return Float64(1.0 / self._value)

    def abs(self) -> 'Float64':
        return Float64(abs(self._value))

    def magnitude(self) -> float:
        return abs(self._value)

    def sqrt(self) -> 'Float64':
        return Float64(math.sqrt(self._value))

    def pow(self, exp: float) -> 'Float64':
        return Float64(self._value ** exp)

    def is_zero(self) -> bool:
        return self._value == 0.0

    def is_larger_than(self, that: 'Float64') -> bool:
        return abs(self._value) > abs(that._value)

    def compare_to(self, that: 'Float64') -> int:
        return (self._value > that._value) - (self._value < that._value)

    def __float__(self) -> float:
        return self._value

    def __eq__(self, other) -> bool:
        if isinstance(other, Float64):
            return self._value == other._value
        return False

    def __hash__(self) -> int:
        return hash(self._value)

    def __lt__(self, other):
        if isinstance(other, Float64):
            return self._value < other._value
        return NotImplemented

    def __gt__(self, other):
        if isinstance(other, Float64):
            return self._value > other._value
        return NotImplemented

    def __str__(self) -> str:
        return repr(self._value)

    def __repr__(self) -> str:
        return f"Float64({self._value!r})"

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


Float64.ZERO = Float64(0.0)
Float64.ONE = Float64(1.0)
