"""Vector tests, run against dense and sparse storage."""
import pytest

from fieldmath import (Rational, Float64, DenseVector, SparseVector, DimensionError, approx_equal, dense_vector,
                       float_vector, complex_vector, Complex)


def r(x):
    return Rational.value_of(x)


def test_dimension_and_access(rational_vector):
    v = rational_vector(1, 0, "1/2")
    assert v.get_dimension() == 3
    assert len(v) == 3
    assert v.get(2) == Rational(1, 2)
    assert v[1] == Rational.ZERO
    assert v.to_list() == [r(1), r(0), r("1/2")]
    with pytest.raises(IndexError):
        v.get(3)
    with pytest.raises(IndexError):
        v.get(-1)


def test_plus_minus_opposite(rational_vector):
    a = rational_vector(1, 2, 0)
    b = rational_vector("1/2", -2, 0)
    assert a.plus(b) == dense_vector(r("3/2"), r(0), r(0))
    assert a.minus(b) == dense_vector(r("1/2"), r(4), r(0))
    assert a.opposite() == dense_vector(r(-1), r(-2), r(0))
    assert (a + b) - b == a
    assert -(-a) == a


def test_mismatched_dimensions_raise(rational_vector):
    with pytest.raises(DimensionError):
        rational_vector(1, 2, 3).plus(rational_vector(1, 2))
    with pytest.raises(DimensionError):
        rational_vector(1, 2, 3).times(rational_vector(1, 2))


def test_dense_vector_plus_shorter_vector():
    with pytest.raises(DimensionError) as error:
        dense_vector(r(1), r(2), r(3)).plus(dense_vector(r(1), r(2)))
    assert error.value.expected == 3
    assert error.value.actual == 2


def test_scalar_and_dot_product(rational_vector):
    a = rational_vector(1, 2, "1/3")
    b = rational_vector(3, 0, 3)
    assert a.times(r(2)) == dense_vector(r(2), r(4), r("2/3"))
    assert a.times(b) == r(4)
    assert a * b == r(4)
    assert a.times(r(0)) == dense_vector(r(0), r(0), r(0))


def test_cross_product(rational_vector):
    x = rational_vector(1, 0, 0)
    y = rational_vector(0, 1, 0)
    assert x.cross(y) == dense_vector(r(0), r(0), r(1))
    assert y.cross(x) == dense_vector(r(0), r(0), r(-1))
    with pytest.raises(DimensionError):
        rational_vector(1, 2).cross(rational_vector(3, 4))


def test_tensor_product(rational_vector):
    a = rational_vector(1, 0)
    b = rational_vector(2, 3, 4)
    m = a.tensor(b)
    assert m.get_row_count() == 2
    assert m.get_column_count() == 3
    assert m.to_lists() == [[r(2), r(3), r(4)], [r(0), r(0), r(0)]]


def test_sub_vector(rational_vector):
    v = rational_vector(5, 0, 7, 8)
    assert v.get_sub_vector([3, 0]) == dense_vector(r(8), r(5))
    with pytest.raises(IndexError):
        v.get_sub_vector([4])


def test_row_column_and_diagonal_views(rational_vector):
    v = rational_vector(1, 0, 2)
    row = v.as_row()
    column = v.as_column()
    assert (row.get_row_count(), row.get_column_count()) == (1, 3)
    assert (column.get_row_count(), column.get_column_count()) == (3, 1)
    assert column.transpose() == row
    diagonal = v.as_diagonal()
    assert diagonal.get(2, 2) == r(2)
    assert diagonal.get(0, 2) == r(0)
    assert diagonal.get_diagonal() == v


def test_dense_and_sparse_compare_equal():
    dense = dense_vector(r(0), r(3), r(0))
    sparse = SparseVector(3, Rational.ZERO, [1], [r(3)])
    assert dense == sparse
    assert sparse == dense
    assert hash(dense) == hash(sparse)
    assert dense != dense_vector(r(0), r(3))


def test_equals_with_tolerance():
    a = float_vector(1.0, 2.0)
    b = float_vector(1.0, 2.0 + 1e-12)
    assert a != b
    assert a.equals(b, approx_equal(1e-9))
    assert not a.equals(float_vector(1.0), approx_equal(1e-9))


def test_text():
    assert str(dense_vector(r(1), r("1/2"))) == "[1, 1/2]"
    assert str(SparseVector(4, Rational.ZERO, [1, 3], [r(2), r("1/3")])) == "{1=2, 3=1/3}"


def test_empty_dense_vector_is_rejected():
    with pytest.raises(ValueError):
        DenseVector([])


def test_float_vector():
    v = float_vector(3.0, 4.0)
    assert v.norm() == 5.0
    assert v.get(0) == Float64(3.0)
    assert v.get_value(1) == 4.0
    assert list(v.to_numpy()) == [3.0, 4.0]
    assert v.times(v) == Float64(25.0)


def test_complex_vector():
    v = complex_vector([1.0, 0.0], [0.0, 1.0])
    assert v.get(1) == Complex.I
    assert v.conjugate().get(1) == Complex(0.0, -1.0)
    assert v.times(v.conjugate()) == Complex(2.0, 0.0)
    with pytest.raises(DimensionError):
        complex_vector([1.0, 2.0], [1.0])
