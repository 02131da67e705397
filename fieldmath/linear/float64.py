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
"""Dense vectors and matrices of 64-bit floating point numbers."""

import math
from typing import Iterable, List, Sequence

import numpy as np

from ..numbers.float64 import Float64
from .dense_matrix import DenseMatrix
from .dense_vector import DenseVector


class Float64Vector(DenseVector[Float64]):
    """
    Dense vector of Float64 elements built from plain floats.

    Example:
        v = Float64Vector.value_of(3.0, 4.0)
        v.norm()           # 5.0
        v.to_numpy()       # array([3., 4.])
    """

    __slots__ = ()

    @classmethod
    def value_of(cls, *values: float) -> 'Float64Vector':
        return cls(Float64.value_of(x) for x in values)

    @classmethod
    def from_numpy(cls, array: np.ndarray) -> 'Float64Vector':
        return cls(Float64(float(x)) for x in np.asarray(array, dtype=float).ravel())

    def _matrix_class(self):
        return Float64Matrix

    def get_value(self, i: int) -> float:
        return self.get(i).double_value()

    def norm(self) -> float:
        """Euclidean norm"""
        return math.sqrt(sum(e.double_value() * e.double_value() for e in self._elements))

    def to_numpy(self) -> np.ndarray:
        return np.array([e.double_value() for e in self._elements], dtype=float)


class Float64Matrix(DenseMatrix[Float64]):
    """
    Dense matrix of Float64 elements built from plain floats.

    Example:
        m = Float64Matrix.value_of([[1.0, 2.0], [3.0, 4.0]])
        m.inverse().to_numpy()
    """

    __slots__ = ()

    _vector_class = Float64Vector

    @classmethod
    def value_of(cls, values: Iterable[Sequence[float]]) -> 'Float64Matrix':
        return cls([Float64.value_of(x) for x in row] for row in values)

    @classmethod
    def from_numpy(cls, array: np.ndarray) -> 'Float64Matrix':
        array = np.atleast_2d(np.asarray(array, dtype=float))
        return cls([Float64(float(x)) for x in row] for row in array)

    def get_value(self, i: int, j: int) -> float:
        return self.get(i, j).double_value()

    def norm(self) -> float:
        """Frobenius norm"""
        return math.sqrt(sum(e.double_value() * e.double_value() for row in self.to_lists() for e in row))

    def to_numpy(self) -> np.ndarray:
        return np.array([[e.double_value() for e in row] for row in self.to_lists()], dtype=float)

    def to_float_lists(self) -> List[List[float]]:
        return [[e.double_value() for e in row] for row in self.to_lists()]
