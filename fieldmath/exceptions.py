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
Exception hierarchy for fieldmath.

All library specific exceptions inherit from FieldMathError. They also
inherit from the matching built-in exception (ValueError, ArithmeticError),
so callers that only know the standard library hierarchy still catch them.
Division of a single field element by zero raises the built-in
ArithmeticError, out-of-range indices raise the built-in IndexError.
"""


class FieldMathError(Exception):
    """Base exception for all fieldmath errors."""
    pass


class DimensionError(FieldMathError, ValueError):
    """
    Operand shapes are incompatible with the requested operation.

    Raised for vector length mismatches, matrix row/column mismatches and
    non-square arguments to square-only operations.

    Attributes:
        expected: Expected dimension or shape, if known
        actual: Actual dimension or shape, if known
    """

    def __init__(self, message: str = "Dimension mismatch", expected=None, actual=None):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class IllegalArgumentError(FieldMathError, ValueError):
    """
    Malformed construction arguments.

    Raised when sparse vector indices are unsorted or duplicated, or when
    index and value lists differ in length.
    """
    pass


class SingularMatrixError(FieldMathError, ArithmeticError):
    """
    Matrix is singular.

    Raised by solve and inverse when no non-zero pivot exists for a column
    of the decomposition.

    Attributes:
        step: Column index at which no pivot was found
        dimension: Dimension of the square matrix
    """

    def __init__(self, message: str = "Matrix is singular", step=None, dimension=None):
        super().__init__(message)
        self.step = step
        self.dimension = dimension


def check_dimension(expected: int, actual: int, what: str = "dimension") -> None:
    """Raise DimensionError unless both dimensions agree."""
    if expected != actual:
        raise DimensionError(f"{what} mismatch: expected {expected} but found {actual}", expected=expected, actual=actual)
