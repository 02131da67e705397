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
"""Dense vectors and matrices of complex numbers."""

import math
from typing import Sequence

import numpy as np

from ..exceptions import check_dimension
from ..numbers.complex import Complex
from .dense_matrix import DenseMatrix
from .dense_vector import DenseVector


class ComplexVector(DenseVector[Complex]):
    """Dense vector of Complex elements."""

    __slots__ = ()

    @classmethod
    def value_of(cls, reals: Sequence[float], imaginaries: Sequence[float] = None) -> 'ComplexVector':
        """
        Args:
            reals: Real parts, or Python complex numbers
            imaginaries: Imaginary parts, zero if omitted
        """
        if imaginaries is None:
            return cls(Complex.value_of(x) for x in reals)
        check_dimension(len(reals), len(imaginaries), "imaginary part count")
        return cls(Complex(re, im) for re, im in zip(reals, imaginaries))

    def _matrix_class(self):
        return ComplexMatrix

    def conjugate(self) -> 'ComplexVector':
        return self._create(tuple(e.conjugate() for e in self._elements))

    def norm(self) -> float:
        """Euclidean norm, sqrt(sum |e|^2)"""
        return math.sqrt(sum(e.magnitude() ** 2 for e in self._elements))

    def to_numpy(self) -> np.ndarray:
        return np.array([complex(e) for e in self._elements], dtype=complex)


class ComplexMatrix(DenseMatrix[Complex]):
    """Dense matrix of Complex elements."""

    __slots__ = ()

    _vector_class = ComplexVector

    @classmethod
    def value_of(cls, reals: Sequence[Sequence[float]], imaginaries: Sequence[Sequence[float]] = None) -> 'ComplexMatrix':
        if imaginaries is None:
            return cls([Complex.value_of(x) for x in row] for row in reals)
        check_dimension(len(reals), len(imaginaries), "imaginary row count")
        return cls(ComplexVector.value_of(re, im) for re, im in zip(reals, imaginaries))

    def conjugate(self) -> 'ComplexMatrix':
        return self._create(tuple(v.conjugate() for v in self._vectors), self._transposed)

    def conjugate_transpose(self) -> 'ComplexMatrix':
        """Hermitian adjoint"""
        return self.conjugate().transpose()

    def to_numpy(self) -> np.ndarray:
        return np.array([[complex(e) for e in row] for row in self.to_lists()], dtype=complex)
