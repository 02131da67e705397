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
Sparse matrix

A tuple of sparse row (or column) vectors sharing one zero element. All
operations produce the same elements as the dense representation; they
only skip the stored zeros.
"""

from typing import Iterable, Sequence, Tuple

from ..exceptions import check_dimension
from ..structures import ZeroPredicate
from .matrix import Matrix
from .sparse_vector import SparseVector
from .vector import Vector, F


class SparseMatrix(Matrix[F]):
    """
    Matrix storing only its non-zero elements.

    Example:
        m = SparseMatrix.from_matrix(dense, Rational.ZERO)
        m.get_row(0).to_dict()    # {0: 1, 4: -2}
        m.to_dense() == dense     # True
    """

    __slots__ = ('_zero_element',)

    def __init__(self, rows: Iterable[Vector], zero: F):
        """
        Args:
            rows: Row vectors of the same dimension, dense rows are
                sparsified with exact equality to zero
            zero: Zero element of the field

        Raises:
            ValueError: If no row is given
            DimensionError: If the rows differ in dimension
        """
        vectors = tuple(self._as_vector(row, zero) for row in rows)
        if len(vectors) == 0:
            raise ValueError("A matrix requires at least one row")
        n = vectors[0].get_dimension()
        for v in vectors[1:]:
            check_dimension(n, v.get_dimension(), "row length")
        self._vectors = vectors
        self._transposed = False
        self._zero_element = zero

    @staticmethod
    def _as_vector(row, zero: F) -> SparseVector:
        if isinstance(row, SparseVector) and row.get_zero() == zero:
            return row
        if isinstance(row, Vector):
            return SparseVector.from_vector(row, zero)
        return SparseVector.from_elements(list(row), zero)

    @classmethod
    def _create(cls, vectors: Tuple[SparseVector, ...], transposed: bool, zero: F) -> 'SparseMatrix[F]':
        # trusted construction, vectors already validated
        matrix = cls.__new__(cls)
        matrix._vectors = vectors
        matrix._transposed = transposed
        matrix._zero_element = zero
        return matrix

    @classmethod
    def from_matrix(cls, matrix: Matrix[F], zero: F, is_zero: ZeroPredicate = None) -> 'SparseMatrix[F]':
        """
        Sparsify any matrix, keeping its orientation.

        Args:
            matrix: Matrix to convert
            zero: Zero element of the field
            is_zero: Classifies the zero element, exact equality by default
        """
        vectors = tuple(SparseVector.from_vector(v, zero, is_zero) for v in matrix._vectors)
        return cls._create(vectors, matrix._transposed, zero)

    def get_zero(self) -> F:
        return self._zero_element

    def get_non_zero_count(self) -> int:
        return sum(v.get_non_zero_count() for v in self._vectors)

    def to_dense(self):
        """Dense copy with the zero element materialized"""
        from .dense_matrix import DenseMatrix
        return DenseMatrix.from_matrix(self)

    def _vector_like(self, elements: Sequence[F]) -> SparseVector:
        return SparseVector.from_elements(elements, self._zero_element)

    def _from_vectors(self, vectors, transposed: bool) -> 'SparseMatrix[F]':
        return self._create(tuple(vectors), transposed, self._zero_element)

    def _convert(self, matrix: Matrix[F]) -> 'SparseMatrix[F]':
        return self.from_matrix(matrix, self._zero_element)

    def is_dense(self) -> bool:
        return False

    def get_row(self, i: int) -> SparseVector:
        self._check_row(i)
        if not self._transposed:
            return self._vectors[i]
        return self._gather(i)

    def get_column(self, j: int) -> SparseVector:
        self._check_column(j)
        if self._transposed:
            return self._vectors[j]
        return self._gather(j)

    def _gather(self, index: int) -> SparseVector:
        # crosses the stored orientation, looks up index in every stored vector
        indices = []
        values = []
        for k, v in enumerate(self._vectors):
            value = v.get(index)
            if value != self._zero_element:
                indices.append(k)
                values.append(value)
        return SparseVector._create(len(self._vectors), self._zero_element, tuple(indices), tuple(values))

    def __repr__(self) -> str:
        rows = [self.get_row(i).to_dict() for i in range(self.get_row_count())]
        return f"SparseMatrix({rows!r}, {self._zero_element!r})"
