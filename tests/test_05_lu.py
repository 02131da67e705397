"""LU decomposition tests."""
import logging
import random

import pytest

from fieldmath import (Rational, Float64, DenseMatrix, DimensionError, SingularMatrixError, LUDecomposition, dense_vector,
                       float_matrix, identity, approx_equal, zero_predicate, DisableLogger)


def r(x):
    return Rational.value_of(x)


def test_factors_reproduce_the_matrix(rational_matrix):
    m = rational_matrix([[0, 2, 1], [1, 1, 0], [3, 0, "1/2"]])
    lu = LUDecomposition.value_of(m)
    lower = lu.get_lower()
    upper = lu.get_upper()
    assert lu.get_permutation().times(m) == lower.times(upper)
    for i in range(3):
        assert lower.get(i, i) == Rational.ONE
        for j in range(i + 1, 3):
            assert lower.get(i, j) == Rational.ZERO
            assert upper.get(j, i) == Rational.ZERO


def test_partial_pivoting_picks_largest_magnitude():
    m = DenseMatrix.from_lists([[1, 2], [-4, 1]], Rational.value_of)
    lu = LUDecomposition.value_of(m)
    assert lu.get_pivots() == [1, 0]
    assert lu.get_upper().get(0, 0) == r(-4)


def test_determinant_sign_follows_permutation():
    m = DenseMatrix.from_lists([[0, 1], [1, 0]], Rational.value_of)
    assert LUDecomposition.value_of(m).determinant() == r(-1)


def test_random_factorizations(random_rational_matrix):
    rng = random.Random(3)
    for n in (1, 2, 5, 7):
        m = random_rational_matrix(rng, n, n, density=0.7)
        lu = LUDecomposition.value_of(m)
        assert lu.get_permutation().times(m) == lu.get_lower().times(lu.get_upper())


def test_solve_vector_and_matrix():
    m = DenseMatrix.from_lists([[2, 1, 1], [4, -6, 0], [-2, 7, 2]], Rational.value_of)
    lu = LUDecomposition.value_of(m)
    x = lu.solve(dense_vector(r(5), r(-2), r(9)))
    assert x == dense_vector(r(1), r(1), r(2))
    assert lu.inverse().times(m) == identity(3, Rational.ZERO, Rational.ONE)
    b = DenseMatrix.from_lists([[1, 0], [0, 1], [1, 1]], Rational.value_of)
    assert m.times(lu.solve(b)) == b


def test_singular_decomposition():
    m = DenseMatrix.from_lists([[1, 2, 3], [2, 4, 6], [1, 0, 1]], Rational.value_of)
    lu = LUDecomposition.value_of(m)
    assert lu.is_singular()
    assert lu.determinant() == Rational.ZERO
    with pytest.raises(SingularMatrixError) as error:
        lu.solve(dense_vector(r(1), r(2), r(3)))
    assert error.value.dimension == 3
    with pytest.raises(ArithmeticError):
        lu.inverse()


def test_singular_column_is_logged(caplog):
    m = DenseMatrix.from_lists([[0, 1], [0, 2]], Rational.value_of)
    with caplog.at_level(logging.DEBUG, logger="fieldmath.linear.lu_decomposition"):
        LUDecomposition.value_of(m)
    assert "No pivot in column 0" in caplog.text
    caplog.clear()
    with DisableLogger():
        LUDecomposition.value_of(m)
    assert caplog.text == ""


def test_non_square_matrix():
    with pytest.raises(DimensionError):
        LUDecomposition.value_of(DenseMatrix.from_lists([[1, 2, 3]], Rational.value_of))


def test_solve_dimension_mismatch():
    lu = LUDecomposition.value_of(identity(2, Rational.ZERO, Rational.ONE))
    with pytest.raises(DimensionError):
        lu.solve(dense_vector(r(1), r(2), r(3)))


def test_zero_predicate_with_tolerance():
    m = float_matrix([[1.0, 1.0], [1.0, 1.0 + 1e-15]])
    assert not LUDecomposition.value_of(m).is_singular()
    lu = LUDecomposition.value_of(m, zero_predicate(Float64.ZERO, approx_equal(1e-12)))
    assert lu.is_singular()
    assert lu.determinant() == Float64.ZERO


def test_float_solution_is_close():
    m = float_matrix([[3.0, 2.0, -1.0], [2.0, -2.0, 4.0], [-1.0, 0.5, -1.0]])
    x = LUDecomposition.value_of(m).solve(dense_vector(Float64(1.0), Float64(-2.0), Float64(0.0)))
    assert x.equals(dense_vector(Float64(1.0), Float64(-2.0), Float64(-2.0)), approx_equal(1e-12))
