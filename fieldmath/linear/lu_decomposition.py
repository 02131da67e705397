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
LU decomposition with partial pivoting.

Works on any square matrix whose elements are Pivotable. The decomposition
satisfies P * A = L * U where P is a row permutation, L is unit lower
triangular and U is upper triangular. For exact fields (Rational) every
result is exact.
"""

import logging
from typing import List, Union

from ..exceptions import SingularMatrixError, check_dimension
from ..structures import ZeroPredicate, one_of, zero_of
from .dense_matrix import DenseMatrix
from .dense_vector import DenseVector
from .matrix import Matrix
from .vector import Vector

LOG = logging.getLogger(__name__)


class LUDecomposition:
    """
    Pivoted LU decomposition of a square matrix.

    Example:
        lu = LUDecomposition.value_of(m)
        lu.determinant()
        x = lu.solve(b)

    L and U are kept in one working table, the multipliers of L below the
    diagonal and U on and above it. A column without a non-zero pivot marks
    the decomposition singular; elimination continues with the next column
    so that determinant() still returns zero.
    """

    def __init__(self, lu: List[list], pivots: List[int], sign: int, singular_step: int, zero, one):
        self._lu = lu
        self._pivots = pivots
        self._sign = sign
        self._singular_step = singular_step
        self._zero = zero
        self._one = one

    @classmethod
    def value_of(cls, matrix: Matrix, is_zero: ZeroPredicate = None) -> 'LUDecomposition':
        """
        Decompose a square matrix.

        Args:
            matrix: Square matrix with Pivotable elements
            is_zero: Classifies zero pivots, exact equality by default

        Raises:
            DimensionError: If the matrix is not square
        """
        n = matrix.get_row_count()
        check_dimension(n, matrix.get_column_count(), "square matrix")
        lu = matrix.to_lists()
        zero = zero_of(lu[0][0])
        one = one_of(e for row in lu for e in row)
        if is_zero is None:
            is_zero = lambda x: x == zero
        pivots = list(range(n))
        sign = 1
        singular_step = -1

        for col in range(n):
            pivot_row = cls._find_pivot_row(lu, col, is_zero)
            if pivot_row == -1:
                # no pivot in this column, the multipliers below stay zero
                LOG.debug("No pivot in column %d of %dx%d matrix.", col, n, n)
                if singular_step == -1:
                    singular_step = col
                for row in range(col + 1, n):
                    lu[row][col] = zero
                continue
            if pivot_row != col:
                lu[pivot_row], lu[col] = lu[col], lu[pivot_row]
                pivots[pivot_row], pivots[col] = pivots[col], pivots[pivot_row]
                sign = -sign
            cls._eliminate_column(lu, col, zero, is_zero)

        return cls(lu, pivots, sign, singular_step, zero, one)

    @staticmethod
    def _find_pivot_row(lu: List[list], col: int, is_zero: ZeroPredicate) -> int:
        """Row at or below col with the largest magnitude in col, -1 if all are zero"""
        best_row = -1
        best = None
        for row in range(col, len(lu)):
            value = lu[row][col]
            if is_zero(value):
                continue
            magnitude = value.magnitude()
            if best_row == -1 or magnitude > best:
                best_row = row
                best = magnitude
        return best_row

    @staticmethod
    def _eliminate_column(lu: List[list], col: int, zero, is_zero: ZeroPredicate) -> None:
        n = len(lu)
        pivot_inverse = lu[col][col].inverse()
        pivot_row = lu[col]
        for row in range(col + 1, n):
            current = lu[row]
            if is_zero(current[col]):
                current[col] = zero
                continue
            multiplier = current[col].times(pivot_inverse)
            current[col] = multiplier
            for j in range(col + 1, n):
                if pivot_row[j] == zero:
                    continue
                current[j] = current[j].minus(multiplier.times(pivot_row[j]))

    def get_dimension(self) -> int:
        return len(self._lu)

    def is_singular(self) -> bool:
        return self._singular_step != -1

    def determinant(self):
        """Product of the diagonal of U times the sign of the permutation"""
        if self.is_singular():
            return self._zero
        result = self._lu[0][0]
        for k in range(1, len(self._lu)):
            result = result.times(self._lu[k][k])
        if self._sign < 0:
            return result.opposite()
        return result

    def solve(self, b: Union[Vector, Matrix]):
        """
        Solve A * x = b.

        Args:
            b: Vector of the matrix dimension, or Matrix with as many rows

        Returns:
            DenseVector for a vector b, DenseMatrix for a matrix b

        Raises:
            DimensionError: If b does not fit the matrix
            SingularMatrixError: If the matrix is singular
        """
        n = len(self._lu)
        self._check_regular()
        if isinstance(b, Matrix):
            check_dimension(n, b.get_row_count(), "row count")
            columns = tuple(DenseVector._create(tuple(self._substitute(b.get_column(j).to_list())))
                            for j in range(b.get_column_count()))
            return DenseMatrix._create(columns, True)
        check_dimension(n, b.get_dimension(), "vector dimension")
        return DenseVector._create(tuple(self._substitute(b.to_list())))

    def inverse(self) -> DenseMatrix:
        """
        Raises:
            SingularMatrixError: If the matrix is singular
        """
        return self.solve(self._identity())

    def _substitute(self, b: list) -> list:
        # forward substitution L * y = P * b, back substitution U * x = y
        lu = self._lu
        n = len(lu)
        y = [b[p] for p in self._pivots]
        for i in range(1, n):
            value = y[i]
            for j in range(i):
                if lu[i][j] != self._zero:
                    value = value.minus(lu[i][j].times(y[j]))
            y[i] = value
        for i in range(n - 1, -1, -1):
            value = y[i]
            for j in range(i + 1, n):
                if lu[i][j] != self._zero:
                    value = value.minus(lu[i][j].times(y[j]))
            y[i] = value.times(lu[i][i].inverse())
        return y

    def _check_regular(self) -> None:
        if self.is_singular():
            raise SingularMatrixError(f"Matrix is singular, no pivot in column {self._singular_step}",
                                      step=self._singular_step, dimension=len(self._lu))

    def _identity(self) -> DenseMatrix:
        return DenseMatrix.identity(len(self._lu), self._zero, self._one)

    def get_lower(self) -> DenseMatrix:
        """Unit lower triangular factor L"""
        n = len(self._lu)
        rows = []
        for i in range(n):
            row = [self._zero] * n
            row[:i] = self._lu[i][:i]
            row[i] = self._one
            rows.append(DenseVector._create(tuple(row)))
        return DenseMatrix._create(tuple(rows), False)

    def get_upper(self) -> DenseMatrix:
        """Upper triangular factor U"""
        n = len(self._lu)
        rows = []
        for i in range(n):
            row = [self._zero] * i + self._lu[i][i:]
            rows.append(DenseVector._create(tuple(row)))
        return DenseMatrix._create(tuple(rows), False)

    def get_permutation(self) -> DenseMatrix:
        """Permutation matrix P with P * A = L * U"""
        n = len(self._lu)
        rows = []
        for p in self._pivots:
            row = [self._zero] * n
            row[p] = self._one
            rows.append(DenseVector._create(tuple(row)))
        return DenseMatrix._create(tuple(rows), False)

    def get_pivots(self) -> List[int]:
        """Original row index of every row of L * U"""
        return list(self._pivots)
