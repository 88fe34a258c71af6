"""
Concrete matrix storages for pylinsys.

Both adapters wrap the caller's object *without copying*, so every row
operation performed through them is visible in the original array.

    ArrayMatrix   dense numpy.ndarray (numeric or object dtype)
    SparseMatrix  scipy.sparse LIL array/matrix

Usage:
    from pylinsys.core.matrix import ArrayMatrix, as_matrix

    a = np.array([[1, 2, 3], [4, 5, 6]])
    m = ArrayMatrix(a)             # wraps a, no copy
    m = ArrayMatrix.from_array([[1, 2], [3, 4]])
    m = as_matrix(a)               # same as ArrayMatrix(a)

Element accessors never check bounds. Construction does not require
writeable storage, so read-only arrays can still be validated against;
the mutation path calls require_writeable() and require_lossless() first,
which refuse read-only arrays and factors whose products numpy would
silently truncate on assignment (a float or Fraction factor on an integer
array).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import warnings

import numpy as np
from numpy.typing import ArrayLike, NDArray
import scipy.sparse as sp

from pylinsys.core.exceptions import ValidationError
from pylinsys.core.protocols import Matrix
from pylinsys.core.validation import (
    check_2d,
    check_array,
    check_entry_dtype,
    check_lossless_cast,
    check_writeable,
)


@dataclass(eq=False)
class ArrayMatrix:
    """
    Matrix backed by a 2D numpy array.

    Construct directly to wrap an existing ndarray, or via from_array()
    for any array-like.
    """
    array: NDArray[Any]

    def __post_init__(self) -> None:
        if not isinstance(self.array, np.ndarray):
            raise ValidationError(
                f"array: expected numpy.ndarray, got {type(self.array).__name__}"
            )
        check_2d(self.array, 'array')
        check_entry_dtype(self.array, 'array')

    @classmethod
    def from_array(cls, data: ArrayLike, *, dtype=None) -> ArrayMatrix:
        """
        Build an ArrayMatrix from any array-like.

        Args:
            data: Nested sequences or an ndarray
            dtype: Optional dtype; use dtype=object for exact scalars

        Returns:
            ArrayMatrix over np.asarray(data, dtype=dtype)

        Warns:
            UserWarning: If the resulting array is read-only and had to be copied
        """
        array = check_array(data, 'data', dtype=dtype)
        if not array.flags.writeable:
            warnings.warn(
                "data: array is read-only, row operations will act on a copy",
                UserWarning,
                stacklevel=2,
            )
            array = array.copy()
        return cls(array)

    @property
    def nrows(self) -> int:
        return self.array.shape[0]

    @property
    def ncols(self) -> int:
        return self.array.shape[1]

    def get_unchecked(self, row: int, col: int) -> Any:
        return self.array[row, col]

    def set_unchecked(self, row: int, col: int, value: Any) -> None:
        self.array[row, col] = value

    def swap_unchecked(self, a: tuple[int, int], b: tuple[int, int]) -> None:
        arr = self.array
        arr[a], arr[b] = arr[b], arr[a]

    def __repr__(self) -> str:
        return f"ArrayMatrix(shape={self.array.shape}, dtype={self.array.dtype})"


@dataclass(eq=False)
class SparseMatrix:
    """
    Matrix backed by a scipy.sparse LIL array or matrix.

    LIL is the only accepted format: it stores rows as Python lists, so
    element writes are cheap and happen in place. Other formats would
    have to be converted, which copies and detaches the caller's object.
    """
    array: Any

    def __post_init__(self) -> None:
        if not sp.issparse(self.array):
            raise ValidationError(
                f"array: expected a scipy.sparse object, got {type(self.array).__name__}"
            )
        if self.array.format != 'lil':
            raise ValidationError(
                f"array: sparse format '{self.array.format}' cannot be mutated in place, "
                f"convert with .tolil() first"
            )
        check_2d(self.array, 'array')
        check_entry_dtype(self.array, 'array')

    @property
    def nrows(self) -> int:
        return self.array.shape[0]

    @property
    def ncols(self) -> int:
        return self.array.shape[1]

    def get_unchecked(self, row: int, col: int) -> Any:
        return self.array[row, col]

    def set_unchecked(self, row: int, col: int, value: Any) -> None:
        self.array[row, col] = value

    def swap_unchecked(self, a: tuple[int, int], b: tuple[int, int]) -> None:
        arr = self.array
        first, second = arr[a], arr[b]
        arr[a] = second
        arr[b] = first

    def __repr__(self) -> str:
        return f"SparseMatrix(shape={self.array.shape}, nnz={self.array.nnz})"


def as_matrix(obj: Any) -> Matrix:
    """
    Return a Matrix view of obj without copying.

    Args:
        obj: A Matrix implementation, a 2D ndarray, or a
            scipy.sparse LIL object

    Returns:
        obj itself if it already satisfies Matrix, otherwise an adapter

    Raises:
        ValidationError: If obj cannot be used as matrix storage
    """
    if isinstance(obj, np.ndarray):
        return ArrayMatrix(obj)
    if sp.issparse(obj):
        return SparseMatrix(obj)
    if isinstance(obj, Matrix):
        return obj
    raise ValidationError(
        f"matrix: expected a Matrix, numpy.ndarray or scipy.sparse LIL object, "
        f"got {type(obj).__name__}"
    )


def backing_array(matrix: Any) -> Any:
    """
    Return the ndarray / sparse object behind matrix, or None.

    Follows `.matrix` through wrappers such as LinearSystem. Storages
    other than ArrayMatrix and SparseMatrix have no backing array.
    """
    while not isinstance(matrix, (ArrayMatrix, SparseMatrix)):
        matrix = getattr(matrix, 'matrix', None)
        if matrix is None:
            return None
    return matrix.array


def require_writeable(matrix: Any) -> None:
    """
    Raises:
        ValidationError: If matrix is backed by a read-only ndarray
    """
    array = backing_array(matrix)
    if isinstance(array, np.ndarray):
        check_writeable(array, 'array')


def require_lossless(matrix: Any, factor: Any) -> None:
    """
    Raises:
        CastingError: If the backing array's dtype would truncate entry * factor
    """
    array = backing_array(matrix)
    if array is not None:
        check_lossless_cast(array.dtype, factor, 'factor')
