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
"""Dense vector: every element stored in an immutable tuple."""

from typing import Iterable, List, Sequence, Tuple

from .vector import Vector, F


class DenseVector(Vector[F]):
    """
    Vector storing all of its elements.

    Example:
        v = DenseVector([Rational(1), Rational(1, 2)])
        w = DenseVector.value_of(Rational(3), Rational(-2))
        v.plus(w)     # [4, -3/2]
        v.times(w)    # 2
    """

    __slots__ = ('_elements',)

    def __init__(self, elements: Iterable[F]):
        elements = tuple(elements)
        if len(elements) == 0:
            raise ValueError("A vector requires at least one element")
        self._elements = elements

    @classmethod
    def value_of(cls, *elements: F) -> 'DenseVector[F]':
        return cls(elements)

    @classmethod
    def _create(cls, elements: Tuple[F, ...]) -> 'DenseVector[F]':
        # trusted construction, elements already validated
        vector = cls.__new__(cls)
        vector._elements = elements
        return vector

    def _like(self, elements: Sequence[F]) -> 'DenseVector[F]':
        return self._create(tuple(elements))

    def _matrix_class(self):
        from .dense_matrix import DenseMatrix
        return DenseMatrix

    def get_dimension(self) -> int:
        return len(self._elements)

    def get(self, i: int) -> F:
        self._check_index(i)
        return self._elements[i]

    def is_dense(self) -> bool:
        return True

    def to_list(self) -> List[F]:
        return list(self._elements)

    def plus(self, that: Vector[F]) -> 'DenseVector[F]':
        self._check_same_dimension(that)
        return self._create(tuple(a.plus(b) for a, b in zip(self._elements, that.to_list())))

    def minus(self, that: Vector[F]) -> 'DenseVector[F]':
        self._check_same_dimension(that)
        return self._create(tuple(a.minus(b) for a, b in zip(self._elements, that.to_list())))

    def opposite(self) -> 'DenseVector[F]':
        return self._create(tuple(a.opposite() for a in self._elements))

    def times(self, k):
        if isinstance(k, Vector):
            return self.dot(k)
        return self._create(tuple(a.times(k) for a in self._elements))

    def dot(self, that: Vector[F]) -> F:
        """Sum of this[i] * that[i] in ascending index order"""
        self._check_same_dimension(that)
        others = that.to_list()
        result = self._elements[0].times(others[0])
        for a, b in zip(self._elements[1:], others[1:]):
            result = result.plus(a.times(b))
        return result

    def tensor(self, that: Vector[F]):
        others = that.to_list()
        rows = tuple(self._create(tuple(a.times(b) for b in others)) for a in self._elements)
        return self._matrix_class()._create(rows, False)

    def as_row(self):
        return self._matrix_class()._create((self,), False)

    def as_column(self):
        return self._matrix_class()._create((self,), True)

    def as_diagonal(self):
        zero = self._zero()
        n = len(self._elements)
        rows = []
        for i, a in enumerate(self._elements):
            row = [zero] * n
            row[i] = a
            rows.append(self._create(tuple(row)))
        return self._matrix_class()._create(tuple(rows), False)

    def __iter__(self):
        return iter(self._elements)

    def __eq__(self, other) -> bool:
        if isinstance(other, DenseVector):
            return self._elements == other._elements
        return super().__eq__(other)

    def __hash__(self) -> int:
        return hash(self._elements)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._elements)!r})"
