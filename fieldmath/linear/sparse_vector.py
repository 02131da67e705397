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
Sparse vector

Stores the dimension, the zero element of the field and two parallel
tuples: strictly increasing indices and the values at those indices. Every
index not listed holds the zero element. Values equal to zero are never
stored, so two sparse vectors with the same elements have the same storage.
"""

from bisect import bisect_left
from typing import Dict, Iterable, List, Sequence, Tuple

from ..exceptions import IllegalArgumentError
from ..structures import ZeroPredicate
from .vector import Vector, F


class SparseVector(Vector[F]):
    """
    Vector storing only its non-zero elements.

    Example:
        v = SparseVector(5, Rational.ZERO, [1, 3], [Rational(2), Rational(1, 3)])
        v.get(0)      # 0
        v.get(3)      # 1/3
        v.to_dict()   # {1: 2, 3: 1/3}
    """

    __slots__ = ('_dimension', '_zero_element', '_indices', '_values')

    def __init__(self, dimension: int, zero: F, indices: Iterable[int] = (), values: Iterable[F] = ()):
        """
        Args:
            dimension: Number of elements, at least one
            zero: Zero element of the field
            indices: Strictly increasing indices in [0, dimension)
            values: Values at the given indices

        Raises:
            ValueError: If dimension is not positive
            IllegalArgumentError: If indices are unsorted or duplicated, or
                if indices and values differ in length
            IndexError: If an index is outside [0, dimension)
        """
        if dimension < 1:
            raise ValueError("A vector requires at least one element")
        indices = tuple(indices)
        values = tuple(values)
        if len(indices) != len(values):
            raise IllegalArgumentError(f"{len(indices)} indices but {len(values)} values")
        previous = -1
        for i in indices:
            if i <= previous:
                raise IllegalArgumentError(f"Indices must be strictly increasing, found {i} after {previous}")
            previous = i
        if indices and (indices[0] < 0 or indices[-1] >= dimension):
            bad = indices[0] if indices[0] < 0 else indices[-1]
            raise IndexError(f"index {bad} out of range [0, {dimension})")
        keep = [k for k, value in enumerate(values) if value != zero]
        if len(keep) != len(values):
            indices = tuple(indices[k] for k in keep)
            values = tuple(values[k] for k in keep)
        self._dimension = dimension
        self._zero_element = zero
        self._indices = indices
        self._values = values

    @classmethod
    def _create(cls, dimension: int, zero: F, indices: Tuple[int, ...], values: Tuple[F, ...]) -> 'SparseVector[F]':
        # trusted construction, indices sorted and values non-zero
        vector = cls.__new__(cls)
        vector._dimension = dimension
        vector._zero_element = zero
        vector._indices = indices
        vector._values = values
        return vector

    @classmethod
    def from_dict(cls, dimension: int, zero: F, entries: Dict[int, F]) -> 'SparseVector[F]':
        """Build a sparse vector from an index -> value mapping"""
        indices = sorted(entries)
        return cls(dimension, zero, indices, [entries[i] for i in indices])

    @classmethod
    def from_elements(cls, elements: Sequence[F], zero: F, is_zero: ZeroPredicate = None) -> 'SparseVector[F]':
        """
        Sparsify a sequence of elements.

        Args:
            elements: All elements of the vector
            zero: Zero element of the field
            is_zero: Classifies the zero element, exact equality by default
        """
        if is_zero is None:
            is_zero = lambda x: x == zero
        if len(elements) == 0:
            raise ValueError("A vector requires at least one element")
        indices = []
        values = []
        for i, value in enumerate(elements):
            if not is_zero(value):
                indices.append(i)
                values.append(value)
        return cls._create(len(elements), zero, tuple(indices), tuple(values))

    @classmethod
    def from_vector(cls, vector: Vector[F], zero: F, is_zero: ZeroPredicate = None) -> 'SparseVector[F]':
        return cls.from_elements(vector.to_list(), zero, is_zero)

    def _like(self, elements: Sequence[F]) -> 'SparseVector[F]':
        return self.from_elements(elements, self._zero_element)

    def _matrix_class(self):
        from .sparse_matrix import SparseMatrix
        return SparseMatrix

    def get_dimension(self) -> int:
        return self._dimension

    def get_zero(self) -> F:
        return self._zero_element

    def get_indices(self) -> List[int]:
        return list(self._indices)

    def get_data(self) -> List[F]:
        return list(self._values)

    def get_non_zero_count(self) -> int:
        return len(self._indices)

    def to_dict(self) -> Dict[int, F]:
        return dict(zip(self._indices, self._values))

    def to_dense(self):
        from .dense_vector import DenseVector
        return DenseVector._create(tuple(self.to_list()))

    def get(self, i: int) -> F:
        self._check_index(i)
        k = bisect_left(self._indices, i)
        if k < len(self._indices) and self._indices[k] == i:
            return self._values[k]
        return self._zero_element

    def is_dense(self) -> bool:
        return False

    def to_list(self) -> List[F]:
        elements = [self._zero_element] * self._dimension
        for i, value in zip(self._indices, self._values):
            elements[i] = value
        return elements

    def _zero(self) -> F:
        return self._zero_element

    def plus(self, that: Vector[F]) -> 'SparseVector[F]':
        self._check_same_dimension(that)
        if isinstance(that, SparseVector):
            positions = sorted(set(self._indices).union(that._indices))
        else:
            positions = range(self._dimension)
        return self._collect((i, self.get(i).plus(that.get(i))) for i in positions)

    def minus(self, that: Vector[F]) -> 'SparseVector[F]':
        self._check_same_dimension(that)
        if isinstance(that, SparseVector):
            positions = sorted(set(self._indices).union(that._indices))
        else:
            positions = range(self._dimension)
        return self._collect((i, self.get(i).minus(that.get(i))) for i in positions)

    def opposite(self) -> 'SparseVector[F]':
        return self._collect((i, value.opposite()) for i, value in zip(self._indices, self._values))

    def times(self, k):
        if isinstance(k, Vector):
            return self.dot(k)
        return self._collect((i, value.times(k)) for i, value in zip(self._indices, self._values))

    def dot(self, that: Vector[F]) -> F:
        """Sum of this[i] * that[i] over the stored indices, ascending"""
        self._check_same_dimension(that)
        result = self._zero_element
        for i, value in zip(self._indices, self._values):
            result = result.plus(value.times(that.get(i)))
        return result

    def tensor(self, that: Vector[F]):
        rows = []
        empty = self._create(that.get_dimension(), self._zero_element, (), ())
        for i in range(self._dimension):
            a = self.get(i)
            if a == self._zero_element:
                rows.append(empty)
            else:
                rows.append(self.from_elements([a.times(b) for b in that.to_list()], self._zero_element))
        return self._matrix_class()._create(tuple(rows), False, self._zero_element)

    def as_row(self):
        return self._matrix_class()._create((self,), False, self._zero_element)

    def as_column(self):
        return self._matrix_class()._create((self,), True, self._zero_element)

    def as_diagonal(self):
        n = self._dimension
        rows = []
        for i in range(n):
            value = self.get(i)
            if value == self._zero_element:
                rows.append(self._create(n, self._zero_element, (), ()))
            else:
                rows.append(self._create(n, self._zero_element, (i,), (value,)))
        return self._matrix_class()._create(tuple(rows), False, self._zero_element)

    def _collect(self, entries) -> 'SparseVector[F]':
        indices = []
        values = []
        for i, value in entries:
            if value != self._zero_element:
                indices.append(i)
                values.append(value)
        return self._create(self._dimension, self._zero_element, tuple(indices), tuple(values))

    def __eq__(self, other) -> bool:
        if isinstance(other, SparseVector) and self._zero_element == other._zero_element:
            return (self._dimension == other._dimension and self._indices == other._indices
                    and self._values == other._values)
        return super().__eq__(other)

    def __hash__(self) -> int:
        return hash(tuple(self.to_list()))

    def __str__(self) -> str:
        return "{" + ", ".join(f"{i}={value}" for i, value in zip(self._indices, self._values)) + "}"

    def __repr__(self) -> str:
        return f"SparseVector({self._dimension}, {self._zero_element!r}, {self.to_dict()!r})"
