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
"""Factory functions for matrices."""

from typing import Callable, Iterable, Sequence

from ..structures import ZeroPredicate
from .complex import ComplexMatrix
from .dense_matrix import DenseMatrix
from .float64 import Float64Matrix
from .matrix import Matrix
from .sparse_matrix import SparseMatrix
from .vector import Vector, F


def dense_matrix(*rows) -> DenseMatrix[F]:
    """Dense matrix from row vectors or sequences of elements"""
    return DenseMatrix(rows)


def dense_matrix_from(matrix: Matrix[F]) -> DenseMatrix[F]:
    """Dense copy of any matrix, zeros materialized"""
    return DenseMatrix.from_matrix(matrix)


def dense_matrix_from_lists(values: Sequence[Sequence], field: Callable = None) -> DenseMatrix[F]:
    return DenseMatrix.from_lists(values, field)


def sparse_matrix(matrix: Matrix[F], zero: F, is_zero: ZeroPredicate = None) -> SparseMatrix[F]:
    """
    Sparse copy of any matrix.

    Args:
        matrix: Matrix to convert
        zero: Zero element of the field
        is_zero: Classifies the zero element, exact equality by default
    """
    return SparseMatrix.from_matrix(matrix, zero, is_zero)


def sparse_matrix_from_rows(rows: Iterable[Vector[F]], zero: F) -> SparseMatrix[F]:
    return SparseMatrix(rows, zero)


def float_matrix(values: Iterable[Sequence[float]]) -> Float64Matrix:
    return Float64Matrix.value_of(values)


def complex_matrix(reals: Sequence[Sequence[float]], imaginaries: Sequence[Sequence[float]] = None) -> ComplexMatrix:
    return ComplexMatrix.value_of(reals, imaginaries)


def identity(n: int, zero: F, one: F) -> DenseMatrix[F]:
    """n x n identity matrix over the field of zero and one"""
    return DenseMatrix.identity(n, zero, one)
