"""
Shared contract for elementary row operations.

Every operation is a small frozen parameter object implementing two
primitives:

    validate(matrix)            pure bounds check, raises on failure
    perform_unchecked(matrix)   in-place mutation, no checks at all

and inherits the derived, final composite:

    perform(matrix)             validate, then perform_unchecked

perform_unchecked exists for callers that have already established
valid indices (for example an elimination loop whose indices are valid
by construction) and want to skip the repeated check.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, final

from pylinsys.core.exceptions import (
    BothRowIndicesOutOfBoundsError,
    FirstRowIndexOutOfBoundsError,
    RowIndexOutOfBoundsError,
    SecondRowIndexOutOfBoundsError,
)
from pylinsys.core.matrix import as_matrix


class ElementaryRowOperation(ABC):
    """Abstract elementary row operation acting in place on a Matrix."""

    @abstractmethod
    def validate(self, matrix: Any) -> None:
        """
        Check the operation's row indices against the matrix.

        Never reads the factor and never mutates the matrix. Read-only
        storage is fine here; only the mutation path needs write access.

        Args:
            matrix: Anything accepted by pylinsys.core.matrix.as_matrix

        Raises:
            BinaryRowIndexOutOfBoundsError or RowIndexOutOfBoundsError,
            depending on the operation's arity
        """
        ...

    @abstractmethod
    def perform_unchecked(self, matrix: Any) -> None:
        """
        Apply the operation in place without validating it.

        Precondition: every row index of the operation is strictly less
        than matrix.nrows. It is not re-checked; breaking it may raise an
        arbitrary error, touch the wrong row (numpy wraps negative
        indices) or leave the matrix partially modified.

        Storage capability is still checked, before the first write:

        Raises:
            ValidationError: If the backing ndarray is read-only
            CastingError: If the backing dtype would truncate entry * factor
        """
        ...

    @final
    def perform(self, matrix: Any) -> None:
        """
        Validate, then apply the operation in place.

        If this raises, the matrix has not been modified.
        """
        target = as_matrix(matrix)
        self.validate(target)
        self.perform_unchecked(target)


def check_row_pair(first: int, second: int, nrows: int) -> None:
    """
    Classify a (first, second) row index pair against a row count.

    Policy: both out of bounds wins over either single one; otherwise
    the offending slot is reported. Slot order is argument order.

    Raises:
        BothRowIndicesOutOfBoundsError
        FirstRowIndexOutOfBoundsError
        SecondRowIndexOutOfBoundsError
    """
    first_bad = first >= nrows
    second_bad = second >= nrows
    if first_bad and second_bad:
        raise BothRowIndicesOutOfBoundsError((first, second), nrows)
    if first_bad:
        raise FirstRowIndexOutOfBoundsError((first, second), nrows)
    if second_bad:
        raise SecondRowIndexOutOfBoundsError((first, second), nrows)


def check_row(row: int, nrows: int) -> None:
    """
    Raises:
        RowIndexOutOfBoundsError: If row >= nrows
    """
    if row >= nrows:
        raise RowIndexOutOfBoundsError(row, nrows)

