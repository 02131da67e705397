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
Conversions between fieldmath objects and numpy, scipy.sparse and sympy.

Floating point input becomes Rational by default, using the closest
fraction with a bounded denominator (Fraction.limit_denominator). Pass
field=Float64.value_of to keep the floats as they are.
"""

from fractions import Fraction
from typing import Callable, Union

import numpy as np
from scipy import sparse
import sympy

from ..numbers.complex import Complex
from ..numbers.rational import Rational
from .dense_matrix import DenseMatrix
from .dense_vector import DenseVector
from .matrix import Matrix
from .sparse_matrix import SparseMatrix
from .sparse_vector import SparseVector
from .vector import Vector


def to_rational(value) -> Rational:
    """
    Convert a numeric value to a Rational.

    Args:
        value: An int, float, numpy scalar, Fraction, sympy.Rational or Rational
    """
    if isinstance(value, Rational):
        return value
    if isinstance(value, Fraction):
        return Rational.from_fraction(value)
    if isinstance(value, sympy.Rational):
        return Rational.from_sympy(value)
    if isinstance(value, (int, np.integer)):
        return Rational(int(value))
    if isinstance(value, (float, np.floating)):
        return Rational.from_fraction(Fraction(float(value)).limit_denominator())
    raise TypeError(f"Cannot convert {type(value)} to Rational")


def _default_field(array: np.ndarray) -> Callable:
    if array.dtype.kind == 'c':
        return Complex.value_of
    return to_rational


def _to_float(element):
    if isinstance(element, Complex):
        return complex(element)
    if hasattr(element, 'double_value'):
        return element.double_value()
    return float(element)


def to_numpy(value: Union[Vector, Matrix], as_float: bool = False) -> np.ndarray:
    """
    Convert a vector or matrix to a numpy array.

    Args:
        value: Vector (1-d result) or Matrix (2-d result)
        as_float: If True, convert to a float (or complex) array; if False,
            return an object array holding the field elements

    Returns:
        Numpy array representation
    """
    if isinstance(value, Vector):
        rows = [value.to_list()]
    else:
        rows = value.to_lists()
    if as_float:
        floats = [[_to_float(e) for e in row] for row in rows]
        dtype = complex if any(isinstance(x, complex) for row in floats for x in row) else float
        result = np.array(floats, dtype=dtype)
    else:
        result = np.empty((len(rows), len(rows[0])), dtype=object)
        for i, row in enumerate(rows):
            for j, e in enumerate(row):
                result[i, j] = e
    if isinstance(value, Vector):
        return result[0]
    return result


def from_numpy(array: np.ndarray, field: Callable = None, sparse_mode: bool = False,
               zero=None) -> Union[Vector, Matrix]:
    """
    Create a vector (1-d array) or matrix (2-d array) from a numpy array.

    Args:
        array: Numpy array to convert
        field: Converter applied to every entry, to_rational by default
            (Complex.value_of for complex arrays)
        sparse_mode: If True, return a SparseMatrix
        zero: Zero element for sparse storage, field(0) by default

    Returns:
        DenseVector, DenseMatrix or SparseMatrix with the same values
    """
    array = np.asarray(array)
    if field is None:
        field = _default_field(array)
    if array.ndim == 1:
        return DenseVector([field(x) for x in array])
    if array.ndim != 2:
        raise ValueError(f"Expected a 1-d or 2-d array, got {array.ndim} dimensions")
    matrix = DenseMatrix([[field(x) for x in row] for row in array])
    if sparse_mode:
        return SparseMatrix.from_matrix(matrix, field(0) if zero is None else zero)
    return matrix


def to_scipy_sparse(matrix: Matrix) -> sparse.csr_matrix:
    """Convert a matrix to a scipy CSR matrix of floats (complex for Complex elements)"""
    rows, cols, data = [], [], []
    for i in range(matrix.get_row_count()):
        row = matrix.get_row(i)
        for j, e in enumerate(row.to_list()):
            value = _to_float(e)
            if value != 0:
                rows.append(i)
                cols.append(j)
                data.append(value)
    dtype = complex if any(isinstance(v, complex) for v in data) else float
    return sparse.csr_matrix((np.array(data, dtype=dtype), (rows, cols)),
                             shape=(matrix.get_row_count(), matrix.get_column_count()))


def from_scipy_sparse(sparse_matrix: sparse.spmatrix, field: Callable = None, zero=None) -> SparseMatrix:
    """
    Create a SparseMatrix from a scipy sparse matrix.

    Args:
        sparse_matrix: Scipy sparse matrix
        field: Converter applied to every stored entry, to_rational by default
        zero: Zero element, field(0) by default

    Returns:
        SparseMatrix with the same values
    """
    n_rows, n_cols = sparse_matrix.shape
    if field is None:
        field = Complex.value_of if sparse_matrix.dtype.kind == 'c' else to_rational
    if zero is None:
        zero = field(0)
    entries = [dict() for _ in range(n_rows)]
    # COO with duplicate entries summed, as scipy interprets them
    coo = sparse_matrix.tocoo(copy=True)
    coo.sum_duplicates()
    for i, j, v in zip(coo.row, coo.col, coo.data):
        value = field(v)
        if value != zero:
            entries[int(i)][int(j)] = value
    rows = tuple(SparseVector.from_dict(n_cols, zero, row) for row in entries)
    return SparseMatrix._create(rows, False, zero)


def to_sympy(matrix: Matrix) -> sympy.Matrix:
    """Exact sympy matrix of a Rational matrix"""
    return sympy.Matrix([[e.to_sympy() for e in row] for row in matrix.to_lists()])


def from_sympy(matrix: sympy.Matrix) -> DenseMatrix:
    """Rational matrix of a sympy matrix with rational entries"""
    return DenseMatrix([[to_rational(sympy.Rational(e)) for e in matrix.row(i)] for i in range(matrix.rows)])
