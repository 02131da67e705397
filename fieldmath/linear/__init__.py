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
Linear algebra over arbitrary fields

This module provides vectors and matrices whose elements belong to any
type implementing the Field protocol:
- DenseVector / SparseVector and DenseMatrix / SparseMatrix
- Float64 and Complex specializations with numpy conversion
- LUDecomposition for solve, inverse and determinant
- Factory functions and numpy / scipy.sparse / sympy interoperability

Dense and sparse instances are interchangeable operands and compare equal
whenever they hold the same elements.
"""

from .vector import Vector
from .dense_vector import DenseVector
from .sparse_vector import SparseVector
from .matrix import Matrix
from .dense_matrix import DenseMatrix
from .sparse_matrix import SparseMatrix
from .float64 import Float64Vector, Float64Matrix
from .complex import ComplexVector, ComplexMatrix
from .lu_decomposition import LUDecomposition
from .multiply import multiply
from .vectors import (dense_vector, dense_vector_from, sparse_vector, sparse_vector_from, sparse_vector_from_dict,
                      float_vector, complex_vector)
from .matrices import (dense_matrix, dense_matrix_from, dense_matrix_from_lists, sparse_matrix,
                       sparse_matrix_from_rows, float_matrix, complex_matrix, identity)
from .interop import to_numpy, from_numpy, to_scipy_sparse, from_scipy_sparse, to_rational

__all__ = [
    'Vector',
    'DenseVector',
    'SparseVector',
    'Matrix',
    'DenseMatrix',
    'SparseMatrix',
    'Float64Vector',
    'Float64Matrix',
    'ComplexVector',
    'ComplexMatrix',
    'LUDecomposition',
    'multiply',
    'dense_vector',
    'dense_vector_from',
    'sparse_vector',
    'sparse_vector_from',
    'sparse_vector_from_dict',
    'float_vector',
    'complex_vector',
    'dense_matrix',
    'dense_matrix_from',
    'dense_matrix_from_lists',
    'sparse_matrix',
    'sparse_matrix_from_rows',
    'float_matrix',
    'complex_matrix',
    'identity',
    'to_numpy',
    'from_numpy',
    'to_scipy_sparse',
    'from_scipy_sparse',
    'to_rational',
]
