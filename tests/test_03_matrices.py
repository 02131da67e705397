"""Matrix tests, run against dense and sparse storage."""
import random

import pytest

from fieldmath import (Rational, LargeInteger, DenseMatrix, SparseMatrix, DimensionError, SingularMatrixError,
                       dense_matrix, dense_vector, float_matrix, complex_matrix, identity, approx_equal, Complex,
                       Float64, LU, COFACTOR)


def r(x):
    return Rational.value_of(x)


def rows(*values):
    return [[r(x) for x in row] for row in values]


# =============================================================================
# Shape, access and orientation
# =============================================================================


def test_shape_and_access(rational_matrix):
    m = rational_matrix([[1, 2, 3], [4, 5, 6]])
    assert m.get_row_count() == 2
    assert m.get_column_count() == 3
    assert not m.is_square()
    assert m.get(1, 2) == r(6)
    assert m.get_row(0) == dense_vector(r(1), r(2), r(3))
    assert m.get_column(1) == dense_vector(r(2), r(5))
    with pytest.raises(IndexError):
        m.get(2, 0)
    with pytest.raises(IndexError):
        m.get_column(3)


def test_transpose_shares_storage(rational_matrix):
    m = rational_matrix([[1, 2, 3], [4, 5, 6]])
    t = m.transpose()
    assert t._vectors is m._vectors
    assert t.get_row_count() == 3
    assert t.get(2, 1) == r(6)
    assert t.get_row(2) == dense_vector(r(3), r(6))
    assert t.transpose() == m
    assert t.transpose().transpose().transpose() == t


def test_diagonal_and_sub_matrix(rational_matrix):
    m = rational_matrix([[1, 2, 3], [4, 5, 6]])
    assert m.get_diagonal() == dense_vector(r(1), r(5))
    assert m.get_sub_matrix([1, 0], [2]).to_lists() == rows([6], [3])


def test_rows_of_different_length():
    with pytest.raises(DimensionError):
        dense_matrix([r(1), r(2)], [r(3)])


# =============================================================================
# Arithmetic
# =============================================================================


def test_plus_minus_opposite(rational_matrix):
    a = rational_matrix([[1, 2], [3, 4]])
    b = rational_matrix([["1/2", 0], [0, -4]])
    assert a.plus(b).to_lists() == rows(["3/2", 2], [3, 0])
    assert a.minus(b).to_lists() == rows(["1/2", 2], [3, 8])
    assert a.opposite().to_lists() == rows([-1, -2], [-3, -4])
    assert a.plus(b).minus(b) == a


def test_plus_across_orientation(rational_matrix):
    a = rational_matrix([[1, 2], [3, 4]])
    assert a.plus(a.transpose()).to_lists() == rows([2, 5], [5, 8])
    assert a.transpose().plus(a).to_lists() == rows([2, 5], [5, 8])


def test_plus_shape_mismatch(rational_matrix):
    with pytest.raises(DimensionError):
        rational_matrix([[1, 2]]).plus(rational_matrix([[1], [2]]))


def test_times_scalar_vector_matrix(rational_matrix, rational_vector):
    a = rational_matrix([[1, 2], [3, 4], [0, 1]])
    b = rational_matrix([[1, 0, 2], [0, 1, "1/2"]])
    assert a.times(r(2)).to_lists() == rows([2, 4], [6, 8], [0, 2])
    assert a.times(rational_vector(1, -1)) == dense_vector(r(-1), r(-1), r(-1))
    assert a.times(b).to_lists() == rows([1, 2, 3], [3, 4, 8], [0, 1, "1/2"])
    assert (a @ b) == a.times(b)
    with pytest.raises(DimensionError):
        a.times(a)
    with pytest.raises(DimensionError):
        a.times(rational_vector(1, 2, 3))


def test_mixed_representations_multiply():
    a = DenseMatrix(rows([1, 2], [3, 4]))
    b = a.transpose()
    sparse = SparseMatrix.from_matrix(b, Rational.ZERO)
    assert a.times(sparse) == a.times(b)
    assert sparse.times(a) == b.times(a)


def test_tensor_product(rational_matrix):
    a = rational_matrix([[1, 2]])
    b = rational_matrix([[0, 1], [1, 0]])
    assert a.tensor(b).to_lists() == rows([0, 1, 0, 2], [1, 0, 2, 0])


def test_vectorization(rational_matrix):
    m = rational_matrix([[1, 2], [3, 4]])
    assert m.vectorization() == dense_vector(r(1), r(3), r(2), r(4))


def test_trace(rational_matrix):
    assert rational_matrix([[1, 2], [3, "1/2"]]).trace() == r("3/2")
    with pytest.raises(DimensionError):
        rational_matrix([[1, 2]]).trace()


# =============================================================================
# Determinant, inverse and solve
# =============================================================================


def test_determinant(rational_matrix):
    assert rational_matrix([[1, 2], [3, 4]]).determinant() == r(-2)
    assert rational_matrix([[2, 0, 1], [1, 3, 2], [1, 1, 2]]).determinant() == r(6)
    assert rational_matrix([[1, 2], [2, 4]]).determinant() == r(0)
    assert rational_matrix([[7]]).determinant() == r(7)


def test_inverse(rational_matrix):
    m = rational_matrix([[1, 2], [3, 4]])
    assert m.inverse().to_lists() == rows([-2, 1], ["3/2", "-1/2"])
    assert m.inverse().is_dense() == m.is_dense()


def test_inverse_of_random_matrices_is_exact(random_rational_matrix, representation):
    rng = random.Random(1234)
    checked = 0
    while checked < 10:
        m = random_rational_matrix(rng, 4, 4)
        if m.determinant() == Rational.ZERO:
            continue
        if representation == 'sparse':
            m = SparseMatrix.from_matrix(m, Rational.ZERO)
        assert m.times(m.inverse()) == identity(4, Rational.ZERO, Rational.ONE)
        assert m.inverse().times(m) == identity(4, Rational.ZERO, Rational.ONE)
        checked += 1


def test_determinant_is_multiplicative(random_rational_matrix):
    rng = random.Random(99)
    for _ in range(10):
        a = random_rational_matrix(rng, 4, 4)
        b = random_rational_matrix(rng, 4, 4, density=0.6)
        assert a.times(b).determinant() == a.determinant().times(b.determinant())


def test_non_square_inverse(rational_matrix):
    with pytest.raises(DimensionError):
        rational_matrix([[1, 2, 3], [4, 5, 6]]).inverse()
    with pytest.raises(DimensionError):
        rational_matrix([[1, 2, 3], [4, 5, 6]]).determinant()


def test_singular_inverse(rational_matrix):
    with pytest.raises(SingularMatrixError):
        rational_matrix([[1, 2], [2, 4]]).inverse()
    with pytest.raises(ArithmeticError):
        rational_matrix([[0, 0], [0, 0]]).inverse()


def test_solve(rational_matrix, rational_vector):
    m = rational_matrix([[2, 1], [1, 3]])
    x = m.solve(rational_vector(3, 5))
    assert x == dense_vector(r("4/5"), r("7/5"))
    assert m.times(x) == dense_vector(r(3), r(5))
    b = rational_matrix([[3, 1], [5, 0]])
    assert m.times(m.solve(b)) == b
    with pytest.raises(DimensionError):
        m.solve(rational_vector(1, 2, 3))


def test_divide(rational_matrix):
    a = rational_matrix([[1, 2], [3, 4]])
    b = rational_matrix([[2, 0], [0, 4]])
    assert a.divide(b).to_lists() == rows(["1/2", "1/2"], ["3/2", 1])
    assert a.divide(b).times(b) == a


def test_pseudo_inverse(rational_matrix):
    tall = rational_matrix([[1, 0], [0, 1], [1, 1]])
    pinv = tall.pseudo_inverse()
    assert (pinv.get_row_count(), pinv.get_column_count()) == (2, 3)
    assert pinv.times(tall) == identity(2, Rational.ZERO, Rational.ONE)
    wide = tall.transpose()
    assert wide.times(wide.pseudo_inverse()) == identity(2, Rational.ZERO, Rational.ONE)


def test_pow(rational_matrix):
    m = rational_matrix([[1, 1], [0, 1]])
    assert m.pow(0) == identity(2, Rational.ZERO, Rational.ONE)
    assert m.pow(1) == m
    assert m.pow(5).to_lists() == rows([1, 5], [0, 1])
    assert m.pow(-3).to_lists() == rows([1, -3], [0, 1])
    assert (m ** 2) == m.times(m)
    with pytest.raises(DimensionError):
        rational_matrix([[1, 2]]).pow(2)


# =============================================================================
# Cofactor path
# =============================================================================


def test_cofactor_and_adjoint(rational_matrix):
    m = rational_matrix([[1, 2], [3, 4]])
    assert m.cofactor(0, 0) == r(4)
    assert m.cofactor(0, 1) == r(-3)
    assert m.cofactor(1, 0) == r(-2)
    assert m.adjoint().to_lists() == rows([4, -2], [-3, 1])
    assert m.adjoint().times(m.determinant().inverse()) == m.inverse()


def test_adjoint_three_by_three(rational_matrix):
    m = rational_matrix([[2, 0, 1], [1, 3, 2], [1, 1, 2]])
    adj = m.adjoint()
    assert m.times(adj) == identity(3, Rational.ZERO, Rational.ONE).times(m.determinant())
    with pytest.raises(DimensionError):
        rational_matrix([[1, 2, 3]]).adjoint()


def test_strategy_follows_element_type(rational_matrix):
    assert rational_matrix([[1]]).strategy() == LU
    assert dense_matrix([LargeInteger(1)]).strategy() == COFACTOR


def test_laplace_determinant_over_a_ring():
    m = dense_matrix([LargeInteger(2), LargeInteger(0), LargeInteger(1)],
                     [LargeInteger(1), LargeInteger(3), LargeInteger(2)],
                     [LargeInteger(1), LargeInteger(1), LargeInteger(2)])
    assert m.determinant() == LargeInteger(6)
    assert m.cofactor(0, 2) == LargeInteger(-2)


def test_inverse_over_a_field_without_magnitude(gf7, gf7_matrix):
    m = gf7_matrix([[1, 2], [3, 4]])
    assert m.strategy() == COFACTOR
    inv = m.inverse()
    assert inv.is_dense() == m.is_dense()
    assert inv.to_lists() == [[gf7(5), gf7(1)], [gf7(5), gf7(3)]]
    assert m.times(inv) == identity(2, gf7.ZERO, gf7.ONE)
    assert m.pow(-1) == inv
    assert m.pow(-2) == inv.times(inv)


def test_solve_over_a_field_without_magnitude(gf7, gf7_matrix):
    m = gf7_matrix([[2, 0, 1], [1, 3, 2], [1, 1, 2]])
    assert m.determinant() == gf7(6)
    x = m.solve(dense_vector(gf7(2), gf7(1), gf7(1)))
    assert x == dense_vector(gf7(1), gf7(0), gf7(0))
    b = gf7_matrix([[2, 1], [1, 0], [1, 1]])
    assert m.times(m.solve(b)) == b


def test_singular_matrix_over_a_field_without_magnitude(gf7, gf7_matrix):
    m = gf7_matrix([[1, 2], [2, 4]])
    assert m.determinant() == gf7.ZERO
    with pytest.raises(SingularMatrixError) as error:
        m.inverse()
    assert error.value.dimension == 2
    with pytest.raises(SingularMatrixError):
        m.solve(dense_vector(gf7(1), gf7(1)))


# =============================================================================
# Float64 and Complex matrices
# =============================================================================


def test_float_matrix_inverse():
    m = float_matrix([[4.0, 7.0], [2.0, 6.0]])
    assert m.inverse().equals(float_matrix([[0.6, -0.7], [-0.2, 0.4]]), approx_equal(1e-12))
    assert type(m.inverse()).__name__ == 'Float64Matrix'
    assert m.determinant().double_value() == pytest.approx(10.0)
    assert m.times(m.inverse()).equals(identity(2, Float64.ZERO, Float64.ONE), approx_equal(1e-12))


def test_complex_matrix():
    m = complex_matrix([[1.0, 0.0], [0.0, 1.0]], [[0.0, 1.0], [1.0, 0.0]])
    assert m.get(0, 1) == Complex(0.0, 1.0)
    assert m.conjugate_transpose().get(0, 1) == Complex(0.0, -1.0)
    assert m.times(m.inverse()).equals(identity(2, Complex.ZERO, Complex.ONE), approx_equal(1e-12))


# =============================================================================
# Equality and text
# =============================================================================


def test_equality_and_hash(rational_matrix):
    a = rational_matrix([[1, 0], [0, 2]])
    b = DenseMatrix(rows([1, 0], [0, 2]))
    assert a == b
    assert hash(a) == hash(b)
    assert a != DenseMatrix(rows([1, 0], [0, 3]))
    assert a != DenseMatrix(rows([1, 0, 0], [0, 2, 0]))


def test_equals_with_tolerance():
    a = float_matrix([[1.0, 2.0]])
    b = float_matrix([[1.0, 2.0 + 1e-13]])
    assert a != b
    assert a.equals(b, approx_equal(1e-9))


def test_text(rational_matrix):
    m = rational_matrix([[1, "1/2"], [0, -3]])
    assert str(m) == "{ [1, 1/2] [0, -3] }"
    assert m.to_multiline_string() == "{\n [1, 1/2]\n [0, -3]\n}\n"
