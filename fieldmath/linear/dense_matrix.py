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
"""Dense matrix: a tuple of dense row (or column) vectors."""

from typing import Callable, Iterable, Sequence, Tuple

from ..exceptions import check_dimension
from .dense_vector import DenseVector
from .matrix import Matrix
from .vector import Vector, F


class DenseMatrix(Matrix[F]):
    """
    Matrix storing every element.

    Example:
        m = DenseMatrix.from_lists([[1, 2], [3, 4]], Rational.value_of)
        m.determinant()    # -2
        m.inverse()        # { [-2, 1] [3/2, -1/2] }
    """

    __slots__ = ()

    # Vector type of the rows, specializations override it
    _vector_class = DenseVector

    def __init__(self, rows: Iterable):
        """
        Args:
            rows: Row vectors or sequences of field elements, all of the
                same length

        Raises:
            ValueError: If no row is given
            DimensionError: If the rows differ in length
        """
        vectors = tuple(self._as_vector(row) for row in rows)
        if len(vectors) == 0:
            raise ValueError("A matrix requires at least one row")
        n = vectors[0].get_dimension()
        for v in vectors[1:]:
            check_dimension(n, v.get_dimension(), "row length")
        self._vectors = vectors
        self._transposed = False

    @classmethod
    def _as_vector(cls, row) -> DenseVector:
        if isinstance(row, cls._vector_class):
            return row
        if isinstance(row, Vector):
            return cls._vector_class._create(tuple(row.to_list()))
        return cls._vector_class(row)

    @classmethod
    def _create(cls, vectors: Tuple[DenseVector, ...], transposed: bool) -> 'DenseMatrix[F]':
        # trusted construction, vectors already validated
        matrix = cls.__new__(cls)
        matrix._vectors = vectors
        matrix._transposed = transposed
        return matrix

    @classmethod
    def value_of(cls, *rows) -> 'DenseMatrix[F]':
        return cls(rows)

    @classmethod
    def from_lists(cls, values: Sequence[Sequence], field: Callable = None) -> 'DenseMatrix[F]':
        """
        Build a matrix from nested lists.

        Args:
            values: Rows of the matrix
            field: Optional converter applied to every value, e.g.
                Rational.value_of
        """
        if field is None:
            return cls(values)
        return cls([[field(x) for x in row] for row in values])

    @classmethod
    def from_matrix(cls, matrix: Matrix[F]) -> 'DenseMatrix[F]':
        """Dense copy of any matrix, keeping its orientation"""
        if type(matrix) is cls:
            return matrix
        if isinstance(matrix, Matrix):
            vectors = tuple(cls._vector_class._create(tuple(v.to_list())) for v in matrix._vectors)
            return cls._create(vectors, matrix._transposed)
        return cls(matrix)

    @classmethod
    def identity(cls, n: int, zero: F, one: F) -> 'DenseMatrix[F]':
        if n < 1:
            raise ValueError("A matrix requires at least one row")
        vectors = []
        for i in range(n):
            row = [zero] * n
            row[i] = one
            vectors.append(cls._vector_class._create(tuple(row)))
        return cls._create(tuple(vectors), False)

    def _vector_like(self, elements: Sequence[F]) -> DenseVector:
        return self._vector_class._create(tuple(elements))

    def _from_vectors(self, vectors, transposed: bool) -> 'DenseMatrix[F]':
        return self._create(tuple(vectors), transposed)

    def _convert(self, matrix: Matrix[F]) -> 'DenseMatrix[F]':
        return type(self).from_matrix(matrix)

    def is_dense(self) -> bool:
        return True

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_lists()!r})"
