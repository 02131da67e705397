import random

import pytest

from fieldmath import Rational, DenseMatrix, DenseVector, SparseMatrix, SparseVector, pool

# Storage representations every matrix test runs against
representations = ['dense', 'sparse']


class GF7:
    """Integers modulo 7, a field without magnitude()."""

    __slots__ = ('value',)

    def __init__(self, value: int):
        self.value = value % 7

    def plus(self, that):
        return GF7(self.value + that.value)

    def minus(self, that):
        return GF7(self.value - that.value)

    def times(self, that):
        return GF7(self.value * that.value)

    def opposite(self):
        return GF7(-self.value)

    def inverse(self):
        if self.value == 0:
            raise ArithmeticError("Division by zero")
        return GF7(pow(self.value, 5, 7))

    def __eq__(self, other) -> bool:
        return isinstance(other, GF7) and self.value == other.value

    def __hash__(self) -> int:
        return hash(('GF7', self.value))

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return f"GF7({self.value})"


GF7.ZERO = GF7(0)
GF7.ONE = GF7(1)


def as_representation(value, representation: str):
    """Convert a dense vector or matrix to the requested representation."""
    if representation == 'dense':
        return value
    if isinstance(value, DenseVector):
        return SparseVector.from_vector(value, Rational.ZERO)
    return SparseMatrix.from_matrix(value, Rational.ZERO)


@pytest.fixture(params=representations, scope="session")
def representation(request: pytest.FixtureRequest) -> str:
    """Provide session-level fixture for parametrized storage representations."""
    return request.param


@pytest.fixture(scope="session")
def rational_matrix(representation):
    """Provide a builder of rational matrices from nested lists of ints or 'a/b' strings."""

    def build(values):
        return as_representation(DenseMatrix.from_lists(values, Rational.value_of), representation)

    return build


@pytest.fixture(scope="session")
def rational_vector(representation):
    """Provide a builder of rational vectors from ints or 'a/b' strings."""

    def build(*values):
        return as_representation(DenseVector([Rational.value_of(x) for x in values]), representation)

    return build


@pytest.fixture(scope="session")
def random_rational_matrix():
    """Provide a builder of random rational matrices."""

    def build(rng: random.Random, rows: int, cols: int, density: float = 1.0, bound: int = 9):
        values = []
        for _ in range(rows):
            row = []
            for _ in range(cols):
                if rng.random() < density:
                    row.append(Rational(rng.randint(-bound, bound), rng.randint(1, bound)))
                else:
                    row.append(Rational.ZERO)
            values.append(row)
        return DenseMatrix(values)

    return build


@pytest.fixture(params=[2, 3, 5, 32], scope="session")
def threshold(request: pytest.FixtureRequest) -> int:
    """Provide session-level fixture for concurrency thresholds."""
    return request.param


@pytest.fixture(scope="session")
def gf7():
    """Provide the field of integers modulo 7."""
    return GF7


@pytest.fixture(scope="session")
def gf7_matrix(representation):
    """Provide a builder of matrices over GF(7) from nested lists of ints."""

    def build(values):
        matrix = DenseMatrix([[GF7(x) for x in row] for row in values])
        if representation == 'dense':
            return matrix
        return SparseMatrix.from_matrix(matrix, GF7.ZERO)

    return build


@pytest.fixture
def rng() -> random.Random:
    return random.Random(4711)


@pytest.fixture(scope="session", autouse=True)
def stop_shared_pool():
    """Stop the shared worker pool after the test session."""
    yield
    pool.shutdown()
