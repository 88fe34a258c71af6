"""
Exception hierarchy for pylinsys.

All exceptions inherit from PyLinSysError to allow catching any
library-specific error. Row-index errors additionally inherit from
IndexError so that generic index handling keeps working.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information

Row-index error families:
    Binary-index (RowExchange, RowAdd):
        FirstRowIndexOutOfBoundsError
        SecondRowIndexOutOfBoundsError
        BothRowIndicesOutOfBoundsError
    Single-index (RowScale):
        RowIndexOutOfBoundsError
"""


class PyLinSysError(Exception):
    """Base exception for all pylinsys errors."""
    pass


class ValidationError(PyLinSysError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect.

    Raised when an array handed over as matrix storage is not 2-dimensional.
    """
    pass


class CastingError(ValidationError):
    """
    Storage cannot hold the result of an operation without loss.

    Raised before any entry is written when entry * factor would be cast
    back to a narrower dtype (for example a float or Fraction factor on
    an integer array).

    Attributes:
        result_dtype: dtype the arithmetic would produce
        storage_dtype: dtype of the backing array
    """

    def __init__(self, message: str, result_dtype=None, storage_dtype=None):
        super().__init__(message)
        self.result_dtype = result_dtype
        self.storage_dtype = storage_dtype


def _rows_hint(nrows: int | None) -> str:
    if nrows is None:
        return ""
    return f"; matrix has {nrows} rows"


class BinaryRowIndexOutOfBoundsError(ValidationError, IndexError):
    """
    Out-of-bounds error for operations taking two row indices.

    Never raised directly: one of the three subclasses tells which
    index slot was invalid. Catch this class to handle all of them.

    Attributes:
        indices: The literal (first, second) index pair of the operation
        nrows: Row count of the matrix at validation time, if known
    """

    description = "Row index pair is out of bounds"

    def __init__(self, indices: tuple[int, int], nrows: int | None = None):
        self.indices = (indices[0], indices[1])
        self.nrows = nrows
        super().__init__(f"{self.description}: {self.indices}{_rows_hint(nrows)}")

    @property
    def first(self) -> int:
        return self.indices[0]

    @property
    def second(self) -> int:
        return self.indices[1]


class FirstRowIndexOutOfBoundsError(BinaryRowIndexOutOfBoundsError):
    """Only the first row index is out of bounds."""

    description = "First row index is out of bounds"


class SecondRowIndexOutOfBoundsError(BinaryRowIndexOutOfBoundsError):
    """Only the second row index is out of bounds."""

    description = "Second row index is out of bounds"


class BothRowIndicesOutOfBoundsError(BinaryRowIndexOutOfBoundsError):
    """Both row indices are out of bounds."""

    description = "Both row indices are out of bounds"


class RowIndexOutOfBoundsError(ValidationError, IndexError):
    """
    Out-of-bounds error for operations taking a single row index.

    As opposed to BinaryRowIndexOutOfBoundsError there is no doubt
    about which index is wrong, so there is a single variant.

    Attributes:
        index: The offending row index
        nrows: Row count of the matrix at validation time, if known
    """

    def __init__(self, index: int, nrows: int | None = None):
        self.index = index
        self.nrows = nrows
        super().__init__(f"Row index is out of bounds: {index}{_rows_hint(nrows)}")
