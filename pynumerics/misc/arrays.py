"""
Array reordering, joining and slicing helpers.

Every function returns a new array; inputs are never modified. Numeric
dtypes, including integer and complex, are preserved.
"""

from typing import Any, Literal
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pynumerics.core.exceptions import DimensionError, ValidationError
from pynumerics.core.validation import (
    check_array,
    check_1d,
    check_2d,
)


def _as_vector(arr: ArrayLike, name: str) -> NDArray[Any]:
    result = check_array(arr, name, allow_complex=True, promote=False)
    check_1d(result, name)
    return result


def _check_index(value: Any, name: str) -> int:
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, (int, np.integer)):
        raise ValidationError(
            f"{name}: expected an integer index, got {type(value).__name__}"
        )
    if value < 0:
        raise DimensionError(f"{name}: index must be non-negative, got {value}")
    return int(value)


def reverse(arr: ArrayLike) -> NDArray[Any]:
    """
    Elements of a 1D array in reverse order.

    Examples:
        >>> reverse([1, 2, 3])
        array([3, 2, 1])
        >>> reverse([1 + 2j, 3 + 4j])
        array([3.+4.j, 1.+2.j])
    """
    vec = _as_vector(arr, 'arr')
    return vec[::-1].copy()


def reverse_matrix(
    matrix: ArrayLike,
    axis: Literal[0, 1] | None = None,
) -> NDArray[Any]:
    """
    Reverse a 2D array.

    Args:
        matrix: 2D array
        axis: None reverses both the row order and the element order
            within each row (a 180 degree rotation). 0 reverses only the
            row order, 1 only the element order within each row.

    Raises:
        DimensionError: If matrix is not 2D
        ValidationError: If axis is not None, 0 or 1
    """
    if axis not in (None, 0, 1):
        raise ValidationError(f"axis: expected None, 0 or 1, got {axis!r}")
    mat = check_array(matrix, 'matrix', allow_complex=True, promote=False)
    check_2d(mat, 'matrix')
    return np.flip(mat, axis=axis).copy()


def concatenate(a: ArrayLike, b: ArrayLike) -> NDArray[Any]:
    """
    Elements of ``a`` followed by elements of ``b``.

    The result dtype follows NumPy promotion (int + float -> float).

    Examples:
        >>> concatenate([1, 2], [3, 4])
        array([1, 2, 3, 4])
    """
    return np.concatenate([_as_vector(a, 'a'), _as_vector(b, 'b')])


def split_by_index(arr: ArrayLike, start: int, end: int) -> NDArray[Any]:
    """
    Elements of a 1D array with index in [start, end).

    Unlike Python slicing, out-of-range or inverted bounds are an error
    rather than being clipped.

    Raises:
        ValidationError: If start or end is not an integer
        DimensionError: If start < 0, end > len(arr) or start > end

    Examples:
        >>> split_by_index([10, 20, 30, 40], 1, 3)
        array([20, 30])
    """
    vec = _as_vector(arr, 'arr')
    start = _check_index(start, 'start')
    end = _check_index(end, 'end')

    if end > vec.shape[0]:
        raise DimensionError(
            f"end: index {end} out of range for array of length {vec.shape[0]}"
        )
    if start > end:
        raise DimensionError(f"start ({start}) must not exceed end ({end})")

    return vec[start:end].copy()
