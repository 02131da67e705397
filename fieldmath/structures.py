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
Algebraic capability protocols.

Element types are not required to inherit from anything. Any object that
provides the methods of a protocol satisfies it structurally, so user
defined fields (finite fields, polynomial quotients, ...) plug into the
linear algebra layer without touching this package.

    GroupAdditive:  plus, opposite
    Ring:           GroupAdditive + minus, times
    Field:          Ring + inverse
    VectorSpace:    plus, opposite, times(scalar)
    Pivotable:      magnitude (opt-in for LU decomposition)
"""

from typing import Any, Callable, Iterable, Protocol, TypeVar, runtime_checkable

F = TypeVar('F')

__all__ = ('GroupAdditive', 'Ring', 'Field', 'VectorSpace', 'Pivotable', 'Comparator', 'ZeroPredicate', 'is_pivotable',
           'zero_of', 'one_of', 'exact_equal', 'approx_equal', 'zero_predicate')

# Equality predicate used for element-wise comparisons, (a, b) -> bool
Comparator = Callable[[Any, Any], bool]

# Zero classification predicate, x -> bool
ZeroPredicate = Callable[[Any], bool]


@runtime_checkable
class GroupAdditive(Protocol):
    """Additive group: closed under addition, every element has an opposite."""

    def plus(self, that):
        ...

    def opposite(self):
        ...


@runtime_checkable
class Ring(Protocol):
    """Additive group with an associative multiplication."""

    def plus(self, that):
        ...

    def minus(self, that):
        ...

    def times(self, that):
        ...

    def opposite(self):
        ...


@runtime_checkable
class Field(Protocol):
    """Ring in which every non-zero element has a multiplicative inverse."""

    def plus(self, that):
        ...

    def minus(self, that):
        ...

    def times(self, that):
        ...

    def opposite(self):
        ...

    def inverse(self):
        ...


@runtime_checkable
class VectorSpace(Protocol):
    """Additive group with a scalar multiplication."""

    def plus(self, that):
        ...

    def opposite(self):
        ...

    def times(self, k):
        ...


@runtime_checkable
class Pivotable(Protocol):
    """
    Field with a notion of magnitude.

    Implementing magnitude() is the explicit opt-in of a field type for LU
    decomposition with partial pivoting. The returned values only need to
    be mutually orderable with ``>``.
    """

    def magnitude(self):
        ...


def is_pivotable(element) -> bool:
    """Check if the element type supports pivoting by magnitude."""
    return isinstance(element, Pivotable)


def zero_of(element):
    """Return the additive identity of the element's field."""
    zero = getattr(type(element), 'ZERO', None)
    if zero is not None:
        return zero
    return element.minus(element)


def one_of(elements: Iterable):
    """
    Return the multiplicative identity of the elements' field.

    Uses the ONE constant of the element type when present, otherwise
    derives it from the first non-zero element as x * x^-1.

    Raises:
        ArithmeticError: If no element is available to derive the identity
    """
    zero = None
    for element in elements:
        one = getattr(type(element), 'ONE', None)
        if one is not None:
            return one
        if zero is None:
            zero = zero_of(element)
        if element != zero:
            return element.times(element.inverse())
    raise ArithmeticError("Cannot derive the unit element from zero elements only")


def exact_equal(a, b) -> bool:
    """Default comparator, strict value equality."""
    return a == b


def approx_equal(tolerance: float) -> Comparator:
    """
    Build a tolerance based comparator.

    Two elements are considered equal if the magnitude of their difference
    does not exceed the tolerance. Elements without magnitude() fall back
    to abs() of the difference.

    Args:
        tolerance: Non-negative absolute tolerance

    Returns:
        Comparator (a, b) -> bool
    """
    if tolerance < 0:
        raise ValueError(f"tolerance must be non-negative, got {tolerance}")

    def comparator(a, b) -> bool:
        difference = a.minus(b)
        if is_pivotable(difference):
            return float(difference.magnitude()) <= tolerance
        return float(abs(difference)) <= tolerance

    return comparator


def zero_predicate(zero, cmp: Comparator = None) -> ZeroPredicate:
    """Turn a comparator into a predicate classifying the zero element."""
    if cmp is None:
        cmp = exact_equal
    return lambda x: cmp(x, zero)
