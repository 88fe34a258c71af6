"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


class ListMatrix:
    """
    Matrix protocol over nested Python lists.

    Exercises the protocol with storage that is neither numpy nor scipy,
    and whose row count can change after construction.
    """

    def __init__(self, rows):
        self.rows = [list(r) for r in rows]

    @property
    def nrows(self):
        return len(self.rows)

    @property
    def ncols(self):
        return len(self.rows[0]) if self.rows else 0

    def get_unchecked(self, row, col):
        return self.rows[row][col]

    def set_unchecked(self, row, col, value):
        self.rows[row][col] = value

    def swap_unchecked(self, a, b):
        (r1, c1), (r2, c2) = a, b
        self.rows[r1][c1], self.rows[r2][c2] = self.rows[r2][c2], self.rows[r1][c1]


class RecordingMatrix(ListMatrix):
    """ListMatrix that records every element access."""

    def __init__(self, rows):
        super().__init__(rows)
        self.calls = []

    def get_unchecked(self, row, col):
        self.calls.append(('get', row, col))
        return super().get_unchecked(row, col)

    def set_unchecked(self, row, col, value):
        self.calls.append(('set', row, col))
        super().set_unchecked(row, col, value)

    def swap_unchecked(self, a, b):
        self.calls.append(('swap', a, b))
        super().swap_unchecked(a, b)


class PoisonFactor:
    """Factor that fails on any arithmetic, to prove it is never used."""

    def __mul__(self, other):
        raise AssertionError("factor must not be used")

    __rmul__ = __mul__
    __add__ = __mul__
    __radd__ = __mul__


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def system_2x3():
    """x1 + 2x2 = 3, 4x1 + 5x2 = 6 as an augmented integer matrix."""
    return np.array([[1, 2, 3], [4, 5, 6]])


@pytest.fixture
def square_2x2():
    return np.array([[1, 2], [3, 4]])


@pytest.fixture
def random_int_matrix(rng):
    """5x4 integer matrix; integer arithmetic keeps inverse checks exact."""
    return rng.integers(-9, 10, size=(5, 4))


@pytest.fixture
def random_float_matrix(rng):
    return rng.standard_normal((6, 3))


@pytest.fixture
def list_matrix():
    return ListMatrix([[1, 2, 3], [4, 5, 6]])


@pytest.fixture
def recording_matrix():
    return RecordingMatrix([[1, 2, 3], [4, 5, 6]])


@pytest.fixture
def poison():
    return PoisonFactor()


@pytest.fixture
def make_list_matrix():
    """Factory for ListMatrix instances with arbitrary content."""
    return ListMatrix
