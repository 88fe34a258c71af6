"""
LinearSystem: matrix representation of a linear system.

LinearSystem wraps one Matrix (typically the augmented matrix [A | b])
and exposes the elementary row operations as methods. It owns no state
beyond the wrapped matrix, and since it forwards the Matrix protocol it
can itself be handed to any operation.

Usage:
    from pylinsys import LinearSystem, RowAdd

    # x1 + 2x2 = 3
    # 4x1 + 5x2 = 6
    system = LinearSystem.from_array([[1, 2, 3], [4, 5, 6]])
    system.row_add(RowAdd(target=1, source=0, factor=-4))
    system.to_array()    # [[1, 2, 3], [0, -3, -6]]
"""

from __future__ import annotations

from typing import Any

from numpy.typing import ArrayLike

from pylinsys.core.matrix import ArrayMatrix, as_matrix
from pylinsys.core.protocols import Matrix
from pylinsys.rowops._common import ElementaryRowOperation
from pylinsys.rowops.add import RowAdd
from pylinsys.rowops.exchange import RowExchange
from pylinsys.rowops.scale import RowScale


def _expect(op: Any, kind: type, method: str) -> None:
    if not isinstance(op, kind):
        raise TypeError(
            f"{method}() expects a {kind.__name__}, got {type(op).__name__}"
        )


class LinearSystem:
    """
    Matrix representation of a linear system.

    Construction wraps the given storage without copying it. Row and
    column counts are always read from the wrapped matrix.

    Checked methods (row_exchange, row_add, row_scale, perform) raise the
    operation's out-of-bounds error and leave the matrix untouched on
    failure. The *_unchecked methods skip validation: the caller must
    guarantee that every row index is below nrows.
    """

    __slots__ = ('_matrix',)

    def __init__(self, matrix: Any):
        """
        Args:
            matrix: A Matrix, a 2D numpy array or a scipy.sparse
                LIL object. Arrays are wrapped, not copied.
        """
        self._matrix = as_matrix(matrix)

    @classmethod
    def from_array(cls, data: ArrayLike, *, dtype=None) -> LinearSystem:
        """Build a LinearSystem over ArrayMatrix.from_array(data, dtype=dtype)."""
        return cls(ArrayMatrix.from_array(data, dtype=dtype))

    # === Ownership ===

    @property
    def matrix(self) -> Matrix:
        """The wrapped Matrix."""
        return self._matrix

    def to_matrix(self) -> Matrix:
        """
        Hand the wrapped Matrix back to the caller.

        Reads better than `.matrix` at the end of a chain of operations,
        when the system is no longer needed.
        """
        return self._matrix

    def to_array(self) -> Any:
        """
        Return the backing array of the wrapped Matrix.

        Returns:
            The ndarray / sparse object for ArrayMatrix and SparseMatrix
            storage (the caller's own object, not a copy)

        Raises:
            TypeError: If the wrapped Matrix has no backing array
        """
        array = getattr(self._matrix, 'array', None)
        if array is None:
            raise TypeError(
                f"{type(self._matrix).__name__} has no backing array"
            )
        return array

    # === Matrix protocol ===

    @property
    def nrows(self) -> int:
        return self._matrix.nrows

    @property
    def ncols(self) -> int:
        return self._matrix.ncols

    def get_unchecked(self, row: int, col: int) -> Any:
        return self._matrix.get_unchecked(row, col)

    def set_unchecked(self, row: int, col: int, value: Any) -> None:
        self._matrix.set_unchecked(row, col, value)

    def swap_unchecked(self, a: tuple[int, int], b: tuple[int, int]) -> None:
        self._matrix.swap_unchecked(a, b)

    # === Generic operations ===

    def perform(self, op: ElementaryRowOperation) -> None:
        """Validate and apply any elementary row operation."""
        _expect(op, ElementaryRowOperation, 'perform')
        op.perform(self._matrix)

    def perform_unchecked(self, op: ElementaryRowOperation) -> None:
        """Apply any elementary row operation without validation."""
        _expect(op, ElementaryRowOperation, 'perform_unchecked')
        op.perform_unchecked(self._matrix)

    # === Row exchange ===

    def row_exchange(self, op: RowExchange) -> None:
        """
        Exchange two rows after bounds checking.

        Raises:
            BinaryRowIndexOutOfBoundsError: One of its three subclasses,
                naming which of (first, second) is out of bounds
        """
        _expect(op, RowExchange, 'row_exchange')
        op.perform(self._matrix)

    def row_exchange_unchecked(self, op: RowExchange) -> None:
        """
        Exchange two rows without bounds checking.

        Precondition: op.first < nrows and op.second < nrows.
        """
        _expect(op, RowExchange, 'row_exchange_unchecked')
        op.perform_unchecked(self._matrix)

    # === Row addition ===

    def row_add(self, op: RowAdd) -> None:
        """
        Add op.factor times row op.source to row op.target after bounds checking.

        Raises:
            BinaryRowIndexOutOfBoundsError: With (target, source) as the
                (first, second) pair
        """
        _expect(op, RowAdd, 'row_add')
        op.perform(self._matrix)

    def row_add_unchecked(self, op: RowAdd) -> None:
        """
        Add a scaled row without bounds checking.

        Precondition: op.target < nrows and op.source < nrows.
        """
        _expect(op, RowAdd, 'row_add_unchecked')
        op.perform_unchecked(self._matrix)

    # === Row scaling ===

    def row_scale(self, op: RowScale) -> None:
        """
        Multiply row op.row by op.factor after bounds checking.

        Raises:
            RowIndexOutOfBoundsError: If op.row >= nrows
        """
        _expect(op, RowScale, 'row_scale')
        op.perform(self._matrix)

    def row_scale_unchecked(self, op: RowScale) -> None:
        """
        Scale a row without bounds checking.

        Precondition: op.row < nrows.
        """
        _expect(op, RowScale, 'row_scale_unchecked')
        op.perform_unchecked(self._matrix)

    def __repr__(self) -> str:
        return f"LinearSystem({self._matrix!r})"
