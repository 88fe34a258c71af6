"""
Row scaling: multiply every entry of one row by a factor.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from pylinsys.core.matrix import as_matrix, require_lossless, require_writeable
from pylinsys.core.validation import check_row_index
from pylinsys.rowops._common import ElementaryRowOperation, check_row

T = TypeVar('T')


@dataclass(frozen=True)
class RowScale(ElementaryRowOperation, Generic[T]):
    """
    Parameter object for `row[row] *= factor`.

    A zero factor is accepted, although the result is then no longer
    an invertible (elementary) transformation.

    Example:
        >>> m = np.array([[1, 2], [3, 4]])
        >>> RowScale(row=0, factor=2).perform(m)
        >>> m
        array([[2, 4],
               [3, 4]])
    """
    row: int
    factor: T

    def __post_init__(self) -> None:
        object.__setattr__(self, 'row', check_row_index(self.row, 'row'))

    def validate(self, matrix: Any) -> None:
        check_row(self.row, as_matrix(matrix).nrows)

    def perform_unchecked(self, matrix: Any) -> None:
        m = as_matrix(matrix)
        i, factor = self.row, self.factor
        require_writeable(m)
        require_lossless(m, factor)
        for j in range(m.ncols):
            entry = m.get_unchecked(i, j)
            entry *= factor
            m.set_unchecked(i, j, entry)
