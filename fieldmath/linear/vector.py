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
Vector interface

This module provides the base class of all vectors. A vector is an
immutable, ordered sequence of field elements of a fixed dimension. It is a
vector space over its element field: vectors can be added, negated and
scaled, and two vectors of equal dimension have a dot product.

Two representations exist, DenseVector and SparseVector. They are
interchangeable operands of each other's operations and compare equal
whenever they hold the same elements.
"""

from abc import ABC, abstractmethod
from typing import Generic, Iterator, List, Sequence, TypeVar

from ..exceptions import DimensionError, check_dimension
from ..structures import Comparator, exact_equal, zero_of

# Type variable for field elements (Rational, Float64, Complex, ...)
F = TypeVar('F')


class Vector(ABC, Generic[F]):
    """
    Base class of dense and sparse vectors.

    Subclasses implement element access, the representation specific
    arithmetic and the _like() factory used by the generic operations.
    """

    @abstractmethod
    def get_dimension(self) -> int:
        """Number of elements"""
        pass

    @abstractmethod
    def get(self, i: int) -> F:
        """
        Element at index i.

        Raises:
            IndexError: If i is outside [0, dimension)
        """
        pass

    @abstractmethod
    def is_dense(self) -> bool:
        pass

    @abstractmethod
    def plus(self, that: 'Vector[F]') -> 'Vector[F]':
        pass

    @abstractmethod
    def opposite(self) -> 'Vector[F]':
        pass

    @abstractmethod
    def times(self, k):
        """
        Scalar product with a field element, or dot product with a vector.

        Args:
            k: Field element or Vector of the same dimension

        Returns:
            Vector scaled by k, or the field element sum(this[i] * k[i])
        """
        pass

    @abstractmethod
    def tensor(self, that: 'Vector[F]'):
        """Outer product, the matrix M[i][j] = this[i] * that[j]"""
        pass

    @abstractmethod
    def _like(self, elements: Sequence[F]) -> 'Vector[F]':
        """New vector of this representation holding the given elements"""
        pass

    @abstractmethod
    def as_row(self):
        """1 x n matrix view of this vector"""
        pass

    @abstractmethod
    def as_column(self):
        """n x 1 matrix view of this vector"""
        pass

    @abstractmethod
    def as_diagonal(self):
        """n x n matrix with this vector on its diagonal"""
        pass

    def minus(self, that: 'Vector[F]') -> 'Vector[F]':
        return self.plus(that.opposite())

    def cross(self, that: 'Vector[F]') -> 'Vector[F]':
        """
        Cross product of two 3-dimensional vectors.

        Raises:
            DimensionError: If either vector is not 3-dimensional
        """
        check_dimension(3, self.get_dimension())
        check_dimension(3, that.get_dimension())
        a0, a1, a2 = self.to_list()
        b0, b1, b2 = that.to_list()
        return self._like([
            a1.times(b2).minus(a2.times(b1)),
            a2.times(b0).minus(a0.times(b2)),
            a0.times(b1).minus(a1.times(b0)),
        ])

    def get_sub_vector(self, indices: Sequence[int]) -> 'Vector[F]':
        """Vector of the elements at the given indices, in the given order"""
        if len(indices) == 0:
            raise DimensionError("Sub-vector requires at least one index", expected='>= 1', actual=0)
        return self._like([self.get(i) for i in indices])

    def to_list(self) -> List[F]:
        """All elements in index order, zeros materialized"""
        return [self.get(i) for i in range(self.get_dimension())]

    def equals(self, that: 'Vector[F]', cmp: Comparator = None) -> bool:
        """
        Element-wise equality under a caller supplied comparator.

        Args:
            that: Vector to compare with
            cmp: Predicate (a, b) -> bool, exact equality by default
        """
        if cmp is None:
            cmp = exact_equal
        if self.get_dimension() != that.get_dimension():
            return False
        return all(cmp(a, b) for a, b in zip(self.to_list(), that.to_list()))

    def _check_index(self, i: int) -> None:
        if not 0 <= i < self.get_dimension():
            raise IndexError(f"index {i} out of range [0, {self.get_dimension()})")

    def _check_same_dimension(self, that: 'Vector') -> None:
        check_dimension(self.get_dimension(), that.get_dimension(), "vector dimension")

    def _zero(self) -> F:
        return zero_of(self.get(0))

    def __len__(self) -> int:
        return self.get_dimension()

    def __getitem__(self, i: int) -> F:
        return self.get(i)

    def __iter__(self) -> Iterator[F]:
        return iter(self.to_list())

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector):
            return False
        return self.get_dimension() == other.get_dimension() and self.to_list() == other.to_list()

    def __hash__(self) -> int:
        return hash(tuple(self.to_list()))

    def __str__(self) -> str:
        return "[" + ", ".join(str(e) for e in self.to_list()) + "]"

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
