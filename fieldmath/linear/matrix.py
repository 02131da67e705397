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
Matrix interface

A matrix is stored as a tuple of vectors plus an orientation flag. If the
flag is unset the vectors are the rows of the matrix, otherwise they are
its columns. transpose() flips the flag and shares the tuple, so a matrix
and its transpose never copy data. Rows are only materialized when they
are read across the stored orientation.

Operations reduce to vector operations. inverse(), determinant() and
solve() use LU decomposition when the element type is Pivotable and fall
back to cofactor expansion otherwise.
"""

from abc import ABC, abstractmethod
from typing import Generic, List, Sequence, Tuple

from ..exceptions import DimensionError, SingularMatrixError, check_dimension
from ..names import LU, COFACTOR
from ..structures import Comparator, exact_equal, is_pivotable, one_of, zero_of
from .vector import Vector, F


class Matrix(ABC, Generic[F]):
    """
    Base class of dense and sparse matrices.

    Subclasses define how vectors of their representation are built
    (_vector_like) and how new matrices are assembled from stored vectors
    (_from_vectors, _convert). Everything else is implemented here on top
    of the stored vectors.
    """

    __slots__ = ('_vectors', '_transposed')

    _vectors: Tuple[Vector, ...]
    _transposed: bool

    @abstractmethod
    def _vector_like(self, elements: Sequence[F]) -> Vector[F]:
        """New vector of this representation holding the given elements"""
        pass

    @abstractmethod
    def _from_vectors(self, vectors: Tuple[Vector, ...], transposed: bool) -> 'Matrix[F]':
        """New matrix of this representation from stored vectors"""
        pass

    @abstractmethod
    def _convert(self, matrix: 'Matrix[F]') -> 'Matrix[F]':
        """Copy of any matrix in this representation"""
        pass

    @abstractmethod
    def is_dense(self) -> bool:
        pass

    # Shape and element access
    def get_row_count(self) -> int:
        if self._transposed:
            return self._vectors[0].get_dimension()
        return len(self._vectors)

    def get_column_count(self) -> int:
        if self._transposed:
            return len(self._vectors)
        return self._vectors[0].get_dimension()

    def is_square(self) -> bool:
        return self.get_row_count() == self.get_column_count()

    def is_transposed(self) -> bool:
        """True if the stored vectors are the columns of this matrix"""
        return self._transposed

    def get(self, i: int, j: int) -> F:
        """
        Element in row i and column j.

        Raises:
            IndexError: If i or j is out of range
        """
        self._check_row(i)
        self._check_column(j)
        if self._transposed:
            return self._vectors[j].get(i)
        return self._vectors[i].get(j)

    def get_row(self, i: int) -> Vector[F]:
        self._check_row(i)
        if not self._transposed:
            return self._vectors[i]
        return self._vector_like([v.get(i) for v in self._vectors])

    def get_column(self, j: int) -> Vector[F]:
        self._check_column(j)
        if self._transposed:
            return self._vectors[j]
        return self._vector_like([v.get(j) for v in self._vectors])

    def get_diagonal(self) -> Vector[F]:
        """Vector of the elements (i, i), i < min(rows, columns)"""
        n = min(self.get_row_count(), self.get_column_count())
        return self._vector_like([self.get(i, i) for i in range(n)])

    def get_sub_matrix(self, rows: Sequence[int], columns: Sequence[int]) -> 'Matrix[F]':
        """
        Matrix of the elements at the given row and column indices.

        Args:
            rows: Row indices, in output order
            columns: Column indices, in output order
        """
        if len(rows) == 0 or len(columns) == 0:
            raise DimensionError("Sub-matrix requires at least one row and one column",
                                 expected='>= 1', actual=(len(rows), len(columns)))
        vectors = tuple(self._vector_like([self.get(i, j) for j in columns]) for i in rows)
        return self._from_vectors(vectors, False)

    def to_lists(self) -> List[List[F]]:
        """Rows of the matrix as lists, zeros materialized"""
        if self._transposed:
            columns = [v.to_list() for v in self._vectors]
            return [list(row) for row in zip(*columns)]
        return [v.to_list() for v in self._vectors]

    def transpose(self) -> 'Matrix[F]':
        return self._from_vectors(self._vectors, not self._transposed)

    # Arithmetic
    def plus(self, that: 'Matrix[F]') -> 'Matrix[F]':
        self._check_same_shape(that)
        if self._transposed:
            vectors = tuple(v.plus(that.get_column(j)) for j, v in enumerate(self._vectors))
        else:
            vectors = tuple(v.plus(that.get_row(i)) for i, v in enumerate(self._vectors))
        return self._from_vectors(vectors, self._transposed)

    def minus(self, that: 'Matrix[F]') -> 'Matrix[F]':
        return self.plus(that.opposite())

    def opposite(self) -> 'Matrix[F]':
        return self._from_vectors(tuple(v.opposite() for v in self._vectors), self._transposed)

    def times(self, that):
        """
        Product with a field element, a vector or a matrix.

        Args:
            that: Scalar, Vector of dimension get_column_count() or Matrix
                with get_column_count() rows

        Returns:
            Matrix for scalars and matrices, Vector for vectors
        """
        if isinstance(that, Matrix):
            from .multiply import multiply
            columns = multiply(self, that, self._vector_like)
            return self._from_vectors(tuple(columns), True)
        if isinstance(that, Vector):
            check_dimension(self.get_column_count(), that.get_dimension(), "vector dimension")
            return self._vector_like([self.get_row(i).times(that) for i in range(self.get_row_count())])
        return self._from_vectors(tuple(v.times(that) for v in self._vectors), self._transposed)

    def divide(self, that: 'Matrix[F]') -> 'Matrix[F]':
        """this * that^-1"""
        return self.times(that.inverse())

    def tensor(self, that: 'Matrix[F]') -> 'Matrix[F]':
        """
        Kronecker product.

        The result has (m * p) rows and (n * q) columns for an m x n matrix
        and a p x q matrix; element (i*p + k, j*q + l) is this(i, j) * that(k, l).
        """
        mine = self.to_lists()
        theirs = that.to_lists()
        vectors = []
        for row in mine:
            for other in theirs:
                vectors.append(self._vector_like([a.times(b) for a in row for b in other]))
        return self._from_vectors(tuple(vectors), False)

    def vectorization(self) -> Vector[F]:
        """Columns stacked on top of each other"""
        elements = []
        for j in range(self.get_column_count()):
            elements.extend(self.get_column(j).to_list())
        return self._vector_like(elements)

    def trace(self) -> F:
        self._check_square("trace")
        result = self.get(0, 0)
        for i in range(1, self.get_row_count()):
            result = result.plus(self.get(i, i))
        return result

    # Square matrix operations
    def determinant(self) -> F:
        """
        Determinant of a square matrix.

        Raises:
            DimensionError: If the matrix is not square
        """
        self._check_square("determinant")
        if self.strategy() == LU:
            from .lu_decomposition import LUDecomposition
            return LUDecomposition.value_of(self).determinant()
        return self._laplace_determinant()

    def inverse(self) -> 'Matrix[F]':
        """
        Raises:
            DimensionError: If the matrix is not square
            SingularMatrixError: If the matrix is singular
        """
        self._check_square("inverse")
        if self.strategy() == LU:
            from .lu_decomposition import LUDecomposition
            return self._convert(LUDecomposition.value_of(self).inverse())
        det = self._laplace_determinant()
        if det == zero_of(det):
            raise SingularMatrixError("Matrix is singular", dimension=self.get_row_count())
        return self.adjoint().times(det.inverse())

    def solve(self, y):
        """
        Solve this * x = y for x.

        Args:
            y: Vector of dimension get_row_count(), or Matrix with
                get_row_count() rows

        Raises:
            DimensionError: If the matrix is not square or y does not fit
            SingularMatrixError: If the matrix is singular
        """
        self._check_square("solve")
        n = self.get_row_count()
        if isinstance(y, Matrix):
            check_dimension(n, y.get_row_count(), "row count")
        else:
            check_dimension(n, y.get_dimension(), "vector dimension")
        if self.strategy() == LU:
            from .lu_decomposition import LUDecomposition
            x = LUDecomposition.value_of(self).solve(y)
            if isinstance(x, Matrix):
                return self._convert(x)
            return self._vector_like(x.to_list())
        return self.inverse().times(y)

    def pseudo_inverse(self) -> 'Matrix[F]':
        """
        Moore-Penrose inverse of a matrix with full rank.

        (A^T A)^-1 A^T for tall matrices, A^T (A A^T)^-1 for wide ones and
        the inverse for square ones.
        """
        if self.is_square():
            return self.inverse()
        t = self.transpose()
        if self.get_row_count() > self.get_column_count():
            return t.times(self).inverse().times(t)
        return t.times(self.times(t).inverse())

    def pow(self, exp: int) -> 'Matrix[F]':
        """
        Integer power of a square matrix.

        pow(0) is the identity, negative exponents invert first.
        """
        self._check_square("pow")
        if exp < 0:
            return self.inverse().pow(-exp)
        if exp == 0:
            return self._identity()
        result = None
        square = self
        while exp > 0:
            if exp & 1:
                result = square if result is None else result.times(square)
            exp >>= 1
            if exp > 0:
                square = square.times(square)
        return result

    def cofactor(self, i: int, j: int) -> F:
        """
        Signed minor, (-1)^(i+j) times the determinant of this matrix
        without row i and column j.
        """
        self._check_square("cofactor")
        self._check_row(i)
        self._check_column(j)
        n = self.get_row_count()
        if n == 1:
            return one_of([self.get(0, 0)])
        rows = [k for k in range(n) if k != i]
        columns = [k for k in range(n) if k != j]
        minor = self.get_sub_matrix(rows, columns)._laplace_determinant()
        if (i + j) % 2 == 1:
            return minor.opposite()
        return minor

    def adjoint(self) -> 'Matrix[F]':
        """Transpose of the matrix of cofactors"""
        self._check_square("adjoint")
        n = self.get_row_count()
        vectors = tuple(self._vector_like([self.cofactor(i, j) for j in range(n)]) for i in range(n))
        return self._from_vectors(vectors, False).transpose()

    def strategy(self) -> str:
        """LU if the element type is Pivotable, COFACTOR otherwise"""
        if is_pivotable(self.get(0, 0)):
            return LU
        return COFACTOR

    def _laplace_determinant(self) -> F:
        # expansion along the first row
        n = self.get_row_count()
        if n == 1:
            return self.get(0, 0)
        if n == 2:
            return self.get(0, 0).times(self.get(1, 1)).minus(self.get(0, 1).times(self.get(1, 0)))
        first = self.get_row(0).to_list()
        zero = zero_of(first[0])
        result = zero
        for j, a in enumerate(first):
            if a == zero:
                continue
            result = result.plus(a.times(self.cofactor(0, j)))
        return result

    def _identity(self) -> 'Matrix[F]':
        n = self.get_row_count()
        elements = [e for row in self.to_lists() for e in row]
        zero = zero_of(elements[0])
        one = one_of(elements)
        vectors = []
        for i in range(n):
            row = [zero] * n
            row[i] = one
            vectors.append(self._vector_like(row))
        return self._from_vectors(tuple(vectors), False)

    # Validation
    def _check_row(self, i: int) -> None:
        if not 0 <= i < self.get_row_count():
            raise IndexError(f"row {i} out of range [0, {self.get_row_count()})")

    def _check_column(self, j: int) -> None:
        if not 0 <= j < self.get_column_count():
            raise IndexError(f"column {j} out of range [0, {self.get_column_count()})")

    def _check_square(self, operation: str) -> None:
        if not self.is_square():
            shape = (self.get_row_count(), self.get_column_count())
            raise DimensionError(f"{operation} requires a square matrix, found {shape[0]}x{shape[1]}",
                                 expected='square', actual=shape)

    def _check_same_shape(self, that: 'Matrix') -> None:
        mine = (self.get_row_count(), self.get_column_count())
        theirs = (that.get_row_count(), that.get_column_count())
        if mine != theirs:
            raise DimensionError(f"shape mismatch: expected {mine[0]}x{mine[1]} but found {theirs[0]}x{theirs[1]}",
                                 expected=mine, actual=theirs)

    # Comparison and output
    def equals(self, that: 'Matrix[F]', cmp: Comparator = None) -> bool:
        """
        Element-wise equality under a caller supplied comparator.

        Args:
            that: Matrix to compare with
            cmp: Predicate (a, b) -> bool, exact equality by default
        """
        if cmp is None:
            cmp = exact_equal
        if (self.get_row_count(), self.get_column_count()) != (that.get_row_count(), that.get_column_count()):
            return False
        for mine, theirs in zip(self.to_lists(), that.to_lists()):
            if not all(cmp(a, b) for a, b in zip(mine, theirs)):
                return False
        return True

    def __eq__(self, other) -> bool:
        if not isinstance(other, Matrix):
            return False
        return self.equals(other)

    def __hash__(self) -> int:
        return hash(tuple(tuple(row) for row in self.to_lists()))

    def __str__(self) -> str:
        """Single line string representation"""
        return self._matrix_to_string("{", " }", " [", "]", ", ")

    def to_multiline_string(self) -> str:
        """Multi-line string representation"""
        return self._matrix_to_string("{\n", "}\n", " [", "]\n", ", ")

    def _matrix_to_string(self, prefix: str, postfix: str, row_prefix: str, row_postfix: str,
                          col_separator: str) -> str:
        result = [prefix]
        for row in self.to_lists():
            result.append(row_prefix)
            result.append(col_separator.join(str(e) for e in row))
            result.append(row_postfix)
        result.append(postfix)
        return ''.join(result)

    # Python operator overloading for convenience
    def __add__(self, other):
        return self.plus(other)

    def __sub__(self, other):
        return self.minus(other)

    def __neg__(self):
        return self.opposite()

    def __mul__(self, other):
        return self.times(other)

    def __matmul__(self, other):
        return self.times(other)

    def __truediv__(self, other):
        return self.divide(other)

    def __pow__(self, exp):
        return self.pow(exp)
