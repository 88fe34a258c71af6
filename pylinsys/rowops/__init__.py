"""
Elementary row operations.

Each operation is a frozen parameter object with a checked and an
unchecked entry point:

    op.validate(matrix)            raise if an index is out of bounds
    op.perform_unchecked(matrix)   mutate, caller guarantees valid indices
    op.perform(matrix)             validate, then mutate

Example:
    >>> from pylinsys.rowops import RowAdd
    >>> m = np.array([[1, 2, 3], [4, 5, 6]])
    >>> RowAdd(target=1, source=0, factor=-4).perform(m)
"""

from pylinsys.rowops._common import ElementaryRowOperation
from pylinsys.rowops.add import RowAdd
from pylinsys.rowops.exchange import RowExchange
from pylinsys.rowops.scale import RowScale

__all__ = [
    "ElementaryRowOperation",
    "RowAdd",
    "RowExchange",
    "RowScale",
]
