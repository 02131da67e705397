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
"""Factory functions for vectors."""

from typing import Dict, Sequence

from ..structures import ZeroPredicate
from .complex import ComplexVector
from .dense_vector import DenseVector
from .float64 import Float64Vector
from .sparse_vector import SparseVector
from .vector import Vector, F


def dense_vector(*elements: F) -> DenseVector[F]:
    return DenseVector(elements)


def dense_vector_from(vector: Vector[F]) -> DenseVector[F]:
    """Dense copy of any vector"""
    if isinstance(vector, DenseVector):
        return vector
    return DenseVector(vector.to_list())


def sparse_vector(dimension: int, zero: F, indices: Sequence[int] = (), values: Sequence[F] = ()) -> SparseVector[F]:
    return SparseVector(dimension, zero, indices, values)


def sparse_vector_from(vector: Vector[F], zero: F, is_zero: ZeroPredicate = None) -> SparseVector[F]:
    """
    Sparse copy of any vector.

    Args:
        vector: Vector to convert
        zero: Zero element of the field
        is_zero: Classifies the zero element, exact equality by default
    """
    return SparseVector.from_vector(vector, zero, is_zero)


def sparse_vector_from_dict(dimension: int, zero: F, mapping: Dict[int, F]) -> SparseVector[F]:
    return SparseVector.from_dict(dimension, zero, mapping)


def float_vector(*values: float) -> Float64Vector:
    return Float64Vector.value_of(*values)


def complex_vector(reals: Sequence[float], imaginaries: Sequence[float] = None) -> ComplexVector:
    return ComplexVector.value_of(reals, imaginaries)
