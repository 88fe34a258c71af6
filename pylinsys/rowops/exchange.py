"""
Row exchange: swap two rows of a matrix entry by entry.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pylinsys.core.matrix import as_matrix, require_writeable
from pylinsys.core.validation import check_row_index
from pylinsys.rowops._common import ElementaryRowOperation, check_row_pair


@dataclass(frozen=True)
class RowExchange(ElementaryRowOperation):
    """
    Parameter object for exchanging rows `first` and `second`.

    The swap itself is symmetric; the slot order only decides which
    error is raised when exactly one index is out of bounds.

    Example:
        >>> m = np.array([[1, 2], [3, 4]])
        >>> RowExchange(0, 1).perform(m)
        >>> m
        array([[3, 4],
               [1, 2]])
    """
    first: int
    second: int

    def __post_init__(self) -> None:
        object.__setattr__(self, 'first', check_row_index(self.first, 'first'))
        object.__setattr__(self, 'second', check_row_index(self.second, 'second'))

    def validate(self, matrix: Any) -> None:
        check_row_pair(self.first, self.second, as_matrix(matrix).nrows)

    def perform_unchecked(self, matrix: Any) -> None:
        m = as_matrix(matrix)
        require_writeable(m)
        i, k = self.first, self.second
        if i == k:
            return
        # swap in storage, entries are never copied
        for j in range(m.ncols):
            m.swap_unchecked((i, j), (k, j))
