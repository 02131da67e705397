"""
Number types

This module provides the scalar fields the linear algebra layer is usually
instantiated with:
- LargeInteger: arbitrary precision integers (ring)
- Rational: exact fractions in lowest terms
- Float64: 64-bit floating point numbers
- Complex: complex numbers with 64-bit floating point parts
"""

from .large_integer import LargeInteger
from .rational import Rational
from .float64 import Float64
from .complex import Complex

__all__ = [
    'LargeInteger',
    'Rational',
    'Float64',
    'Complex',
]
