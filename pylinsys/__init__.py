"""
pylinsys: elementary row operations on matrix representations of linear systems.

Every operation has a checked entry point that validates row indices
and an unchecked one for callers that already know them to be valid.

Submodules:
    core: Matrix protocol, storages, exceptions, validators
    rowops: RowExchange, RowAdd, RowScale
    system: LinearSystem wrapper
"""

__version__ = "0.1.0"

from pylinsys.core import (
    Matrix,
    ArrayMatrix,
    SparseMatrix,
    as_matrix,
    PyLinSysError,
    ValidationError,
    DimensionError,
    CastingError,
    BinaryRowIndexOutOfBoundsError,
    FirstRowIndexOutOfBoundsError,
    SecondRowIndexOutOfBoundsError,
    BothRowIndicesOutOfBoundsError,
    RowIndexOutOfBoundsError,
)
from pylinsys.rowops import ElementaryRowOperation, RowAdd, RowExchange, RowScale
from pylinsys.system import LinearSystem

__all__ = [
    "__version__",
    # Storage
    "Matrix",
    "ArrayMatrix",
    "SparseMatrix",
    "as_matrix",
    # Operations
    "ElementaryRowOperation",
    "RowExchange",
    "RowAdd",
    "RowScale",
    # Wrapper
    "LinearSystem",
    # Exceptions
    "PyLinSysError",
    "ValidationError",
    "DimensionError",
    "CastingError",
    "BinaryRowIndexOutOfBoundsError",
    "FirstRowIndexOutOfBoundsError",
    "SecondRowIndexOutOfBoundsError",
    "BothRowIndicesOutOfBoundsError",
    "RowIndexOutOfBoundsError",
]
