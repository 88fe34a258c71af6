"""
Row addition: add a multiple of one row to another row.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from pylinsys.core.matrix import as_matrix, require_lossless, require_writeable
from pylinsys.core.validation import check_row_index
from pylinsys.rowops._common import ElementaryRowOperation, check_row_pair

T = TypeVar('T')


@dataclass(frozen=True)
class RowAdd(ElementaryRowOperation, Generic[T]):
    """
    Parameter object for `row[target] += row[source] * factor`.

    Attributes:
        target: Row updated in place (first slot in error reports)
        source: Row read and scaled (second slot in error reports)
        factor: Scalar multiplier; entries must support
            `entry * factor` and `entry += product`

    `target == source` is allowed: every column then becomes
    `entry + entry * factor`, computed from the pre-update entry.

    Example:
        >>> m = np.array([[1, 2, 3], [4, 5, 6]])
        >>> RowAdd(target=1, source=0, factor=-4).perform(m)
        >>> m
        array([[ 1,  2,  3],
               [ 0, -3, -6]])
    """
    target: int
    source: int
    factor: T

    def __post_init__(self) -> None:
        object.__setattr__(self, 'target', check_row_index(self.target, 'target'))
        object.__setattr__(self, 'source', check_row_index(self.source, 'source'))

    def validate(self, matrix: Any) -> None:
        check_row_pair(self.target, self.source, as_matrix(matrix).nrows)

    def perform_unchecked(self, matrix: Any) -> None:
        m = as_matrix(matrix)
        target, source, factor = self.target, self.source, self.factor
        require_writeable(m)
        require_lossless(m, factor)
        for j in range(m.ncols):
            # read before the write of the same column
            scaled = m.get_unchecked(source, j) * factor
            entry = m.get_unchecked(target, j)
            entry += scaled
            m.set_unchecked(target, j, entry)
