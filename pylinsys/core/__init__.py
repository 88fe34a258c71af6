"""
Core infrastructure for pylinsys.

This module provides the shared abstractions used by the row operations
and the LinearSystem wrapper.

Key components:
    protocols: Matrix protocol
    matrix: ArrayMatrix / SparseMatrix storages
    exceptions: Exception hierarchy and row-index error taxonomy
    validation: Input validators
"""

from pylinsys.core.protocols import Matrix
from pylinsys.core.matrix import ArrayMatrix, SparseMatrix, as_matrix
from pylinsys.core.exceptions import (
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

__all__ = [
    # Protocols
    "Matrix",
    # Storage
    "ArrayMatrix",
    "SparseMatrix",
    "as_matrix",
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
