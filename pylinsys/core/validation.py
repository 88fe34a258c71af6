"""
Input validation utilities for pylinsys.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages

Row-index *bounds* are not checked here. They depend on the matrix an
operation is applied to and belong to each operation's validate().
"""

import numbers
import operator

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinsys.core.exceptions import CastingError, DimensionError, ValidationError


def check_array(array: ArrayLike, name: str, dtype=None) -> NDArray:
    """
    Validate and convert input to numpy array.

    Accepts any array-like. Numeric dtypes are kept as they are (integer
    matrices stay integer). Object dtype is accepted so that exact scalar
    types such as fractions.Fraction can be stored.

    Args:
        array: Input to validate
        name: Parameter name for error messages
        dtype: Optional dtype to convert to

    Returns:
        numpy.ndarray with numeric or object dtype

    Raises:
        ValidationError: If input cannot be converted or is non-numeric
    """
    try:
        result = np.asarray(array, dtype=dtype)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    check_entry_dtype(result, name)
    return result


def check_entry_dtype(array: NDArray, name: str) -> None:
    """
    Verify array entries can take part in row arithmetic.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        ValidationError: If dtype is boolean or non-numeric (strings, dates, ...)
    """
    if array.dtype == object:
        return
    if array.dtype == np.bool_ or not np.issubdtype(array.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {array.dtype}, expected numeric or object data"
        )


def check_ndim(array, ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Args:
        array: Array to check (ndarray or scipy.sparse object)
        ndim: Required number of dimensions
        name: Parameter name for error messages

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_2d(array, name: str) -> None:
    """
    Verify array is 2-dimensional.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        DimensionError: If array is not 2D
    """
    check_ndim(array, 2, name)


def check_writeable(array: NDArray, name: str) -> None:
    """
    Verify array can be mutated in place.

    Raises:
        ValidationError: If the array is read-only
    """
    if not array.flags.writeable:
        raise ValidationError(
            f"{name}: array is read-only, row operations need writeable storage"
        )


def check_lossless_cast(storage_dtype, factor, name: str) -> None:
    """
    Verify entry * factor can be stored back without narrowing.

    Object storage holds any result and always passes. For numeric
    storage the promoted dtype of (storage, factor) must cast back
    within the same kind: int -> int and float -> float pass, float or
    Fraction results on integer storage do not. Python number objects
    without a numpy dtype (Fraction, Decimal, ...) count as the kind
    they belong to: integral fractions as int, other reals as float.

    Args:
        storage_dtype: dtype of the backing array
        factor: Scalar multiplier of the operation
        name: Parameter name for error messages

    Raises:
        CastingError: If storing the product would drop information
    """
    storage_dtype = np.dtype(storage_dtype)
    if storage_dtype == object:
        return
    result_dtype = np.result_type(storage_dtype, _factor_dtype(factor))
    if not np.can_cast(result_dtype, storage_dtype, casting='same_kind'):
        raise CastingError(
            f"{name}: {type(factor).__name__} factor gives {result_dtype} entries, "
            f"which {storage_dtype} storage would truncate; use a wider or object dtype",
            result_dtype=result_dtype,
            storage_dtype=storage_dtype,
        )


def _factor_dtype(factor) -> np.dtype:
    dtype = np.asarray(factor).dtype
    if dtype != object:
        return dtype
    if isinstance(factor, numbers.Rational) and factor.denominator == 1:
        return np.dtype(np.int64)
    if isinstance(factor, numbers.Real):
        return np.dtype(np.float64)
    if isinstance(factor, numbers.Complex):
        return np.dtype(np.complex128)
    return dtype


def check_row_index(value, name: str) -> int:
    """
    Validate that a value is usable as a zero-based row index.

    Only the type and sign are checked; whether the index fits a
    particular matrix is decided by the operation's validate().

    Args:
        value: Candidate index (int or numpy integer)
        name: Parameter name for error messages

    Returns:
        The index as a plain int

    Raises:
        ValidationError: If value is not a non-negative integer
    """
    if isinstance(value, (bool, np.bool_)):
        raise ValidationError(f"{name}: expected a row index, got bool {value!r}")
    try:
        index = operator.index(value)
    except TypeError as e:
        raise ValidationError(
            f"{name}: expected an integer row index, got {type(value).__name__}"
        ) from e
    if index < 0:
        raise ValidationError(f"{name}: row index must be non-negative, got {index}")
    return index
