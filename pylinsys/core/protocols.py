"""
Core protocols for pylinsys.

These define structural interfaces that storage implementations must satisfy.
We use Protocol (structural typing) rather than ABC (nominal typing) so that
any grid type can take part in row operations without inheriting from us.

Design Principles:
    - Minimal contracts: prescribe only what row operations actually use
    - No bounds checking in the contract; that belongs to validate()
    - Generic over the scalar type so exact and float entries both work
"""

from typing import Protocol, TypeVar, runtime_checkable

T = TypeVar('T')  # Scalar entry type


@runtime_checkable
class Matrix(Protocol[T]):
    """
    Minimal protocol for a mutable, row-major addressable 2D grid.

    Implementations (ArrayMatrix, SparseMatrix, LinearSystem) provide
    live row/column counts and unchecked element access. "Unchecked"
    means the caller guarantees 0 <= row < nrows and 0 <= col < ncols;
    an implementation may do anything when that does not hold.

    Scalar capabilities required by the operations:
        RowExchange: none (entries are swapped, never copied)
        RowAdd: entry * factor and entry + entry
        RowScale: entry * factor
    """

    @property
    def nrows(self) -> int:
        """Current number of rows."""
        ...

    @property
    def ncols(self) -> int:
        """Current number of columns."""
        ...

    def get_unchecked(self, row: int, col: int) -> T:
        """Read the entry at (row, col)."""
        ...

    def set_unchecked(self, row: int, col: int, value: T) -> None:
        """Overwrite the entry at (row, col)."""
        ...

    def swap_unchecked(self, a: tuple[int, int], b: tuple[int, int]) -> None:
        """Exchange the entries at positions a and b."""
        ...
