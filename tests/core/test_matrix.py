"""
Tests for matrix storages and the Matrix protocol.

Validates:
    - ArrayMatrix wraps without copying and validates its array
    - SparseMatrix accepts LIL only
    - as_matrix dispatch
    - Unchecked accessors read/write/swap the right entries
    - Mutation-path guards: read-only storage, lossy factor casts
"""

from fractions import Fraction

import numpy as np
import pytest
import scipy.sparse as sp

from pylinsys.core.exceptions import CastingError, DimensionError, ValidationError
from pylinsys.core.matrix import (
    ArrayMatrix,
    SparseMatrix,
    as_matrix,
    backing_array,
    require_lossless,
    require_writeable,
)
from pylinsys.core.protocols import Matrix


class TestArrayMatrix:

    def test_wraps_without_copy(self, square_2x2):
        m = ArrayMatrix(square_2x2)
        assert m.array is square_2x2

    def test_shape(self, system_2x3):
        m = ArrayMatrix(system_2x3)
        assert m.nrows == 2
        assert m.ncols == 3

    def test_satisfies_protocol(self, square_2x2):
        assert isinstance(ArrayMatrix(square_2x2), Matrix)

    def test_get_set(self, square_2x2):
        m = ArrayMatrix(square_2x2)
        assert m.get_unchecked(1, 0) == 3
        m.set_unchecked(1, 0, 7)
        assert square_2x2[1, 0] == 7

    def test_swap(self, square_2x2):
        m = ArrayMatrix(square_2x2)
        m.swap_unchecked((0, 0), (1, 1))
        np.testing.assert_array_equal(square_2x2, [[4, 2], [3, 1]])

    def test_swap_object_entries_keeps_identity(self):
        a, b = Fraction(1, 2), Fraction(3, 4)
        arr = np.array([[a], [b]], dtype=object)
        ArrayMatrix(arr).swap_unchecked((0, 0), (1, 0))
        assert arr[0, 0] is b
        assert arr[1, 0] is a

    def test_rejects_list(self):
        with pytest.raises(ValidationError, match="numpy.ndarray"):
            ArrayMatrix([[1, 2], [3, 4]])

    def test_rejects_1d(self):
        with pytest.raises(DimensionError):
            ArrayMatrix(np.arange(3))

    def test_wraps_read_only(self):
        """Read-only arrays can be wrapped; only mutation needs write access."""
        arr = np.ones((2, 2))
        arr.flags.writeable = False
        m = ArrayMatrix(arr)
        assert m.array is arr
        assert m.nrows == 2

    def test_rejects_strings(self):
        with pytest.raises(ValidationError):
            ArrayMatrix(np.array([["a", "b"]]))

    def test_empty_rows_allowed(self):
        m = ArrayMatrix(np.zeros((0, 3)))
        assert m.nrows == 0
        assert m.ncols == 3

    def test_repr(self):
        assert repr(ArrayMatrix(np.zeros((2, 3)))) == "ArrayMatrix(shape=(2, 3), dtype=float64)"


class TestArrayMatrixFromArray:

    def test_from_nested_list(self):
        m = ArrayMatrix.from_array([[1, 2, 3], [4, 5, 6]])
        assert m.nrows == 2
        np.testing.assert_array_equal(m.array, [[1, 2, 3], [4, 5, 6]])

    def test_dtype(self):
        m = ArrayMatrix.from_array([[1, 2]], dtype=object)
        assert m.array.dtype == object

    def test_ndarray_not_copied(self, square_2x2):
        assert ArrayMatrix.from_array(square_2x2).array is square_2x2

    def test_read_only_copied_with_warning(self):
        arr = np.ones((2, 2))
        arr.flags.writeable = False
        with pytest.warns(UserWarning, match="read-only"):
            m = ArrayMatrix.from_array(arr)
        assert m.array is not arr
        assert m.array.flags.writeable

    def test_rejects_1d(self):
        with pytest.raises(DimensionError):
            ArrayMatrix.from_array([1, 2, 3])


class TestSparseMatrix:

    def test_wraps_lil_without_copy(self):
        lil = sp.lil_array((3, 4))
        m = SparseMatrix(lil)
        assert m.array is lil
        assert (m.nrows, m.ncols) == (3, 4)

    def test_lil_matrix_accepted(self):
        m = SparseMatrix(sp.lil_matrix(np.eye(2)))
        assert m.nrows == 2

    def test_get_set_swap(self):
        lil = sp.lil_array(np.array([[1.0, 0.0], [0.0, 2.0]]))
        m = SparseMatrix(lil)
        m.set_unchecked(0, 1, 5.0)
        m.swap_unchecked((0, 0), (1, 1))
        np.testing.assert_array_equal(lil.toarray(), [[2.0, 5.0], [0.0, 1.0]])
        assert m.get_unchecked(0, 1) == 5.0

    def test_csr_rejected(self):
        with pytest.raises(ValidationError, match="tolil"):
            SparseMatrix(sp.csr_array(np.eye(2)))

    def test_dense_rejected(self):
        with pytest.raises(ValidationError, match="scipy.sparse"):
            SparseMatrix(np.eye(2))

    def test_satisfies_protocol(self):
        assert isinstance(SparseMatrix(sp.lil_array((2, 2))), Matrix)


class TestAsMatrix:

    def test_ndarray_wrapped(self, square_2x2):
        m = as_matrix(square_2x2)
        assert isinstance(m, ArrayMatrix)
        assert m.array is square_2x2

    def test_lil_wrapped(self):
        assert isinstance(as_matrix(sp.lil_array((2, 2))), SparseMatrix)

    def test_matrix_passthrough(self, list_matrix):
        assert as_matrix(list_matrix) is list_matrix

    def test_array_matrix_passthrough(self, square_2x2):
        m = ArrayMatrix(square_2x2)
        assert as_matrix(m) is m

    @pytest.mark.parametrize("obj", [[[1, 2]], None, 3.0, "matrix"])
    def test_rejects_other(self, obj):
        with pytest.raises(ValidationError, match="expected a Matrix"):
            as_matrix(obj)


# ═══════════════════════════════════════════════════════════════════════
# Mutation-path guards
# ═══════════════════════════════════════════════════════════════════════


class TestBackingArray:

    def test_array_matrix(self, square_2x2):
        assert backing_array(ArrayMatrix(square_2x2)) is square_2x2

    def test_sparse_matrix(self):
        lil = sp.lil_array((2, 2))
        assert backing_array(SparseMatrix(lil)) is lil

    def test_follows_matrix_attribute(self, square_2x2):
        class Wrapper:
            def __init__(self, matrix):
                self.matrix = matrix

        wrapped = Wrapper(Wrapper(ArrayMatrix(square_2x2)))
        assert backing_array(wrapped) is square_2x2

    def test_protocol_only_storage(self, list_matrix):
        assert backing_array(list_matrix) is None


class TestRequireWriteable:

    def test_writeable_passes(self, square_2x2):
        require_writeable(ArrayMatrix(square_2x2))

    def test_read_only_raises(self):
        arr = np.ones((2, 2))
        arr.flags.writeable = False
        with pytest.raises(ValidationError, match="read-only"):
            require_writeable(ArrayMatrix(arr))

    def test_no_backing_array_passes(self, list_matrix):
        require_writeable(list_matrix)


class TestRequireLossless:

    def test_int_factor_on_int_storage(self, square_2x2):
        require_lossless(ArrayMatrix(square_2x2), 3)

    def test_float_factor_on_int_storage(self, square_2x2):
        with pytest.raises(CastingError) as exc_info:
            require_lossless(ArrayMatrix(square_2x2), 0.5)
        assert exc_info.value.storage_dtype == square_2x2.dtype
        assert exc_info.value.result_dtype == np.float64

    def test_fraction_factor_on_sparse_int_storage(self):
        lil = sp.lil_array(np.array([[1, 0], [0, 2]]))
        with pytest.raises(CastingError):
            require_lossless(SparseMatrix(lil), Fraction(1, 2))

    def test_no_backing_array_passes(self, list_matrix):
        require_lossless(list_matrix, Fraction(1, 2))
