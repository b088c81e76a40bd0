"""
Sequence generation and array helpers.

Public API:
    linspace(start, stop, samples)           - Evenly spaced values
    linspace_repeated(start, stop, n, reps)  - linspace concatenated reps times
    arange(start, stop, step)                - Half-open stepped range
    reverse(arr)                             - 1D array reversed
    reverse_matrix(matrix, axis)             - 2D array reversed by row and/or element
    concatenate(a, b)                        - a followed by b
    split_by_index(arr, start, end)          - Elements with index in [start, end)
"""

from pynumerics.misc.sequences import linspace, linspace_repeated, arange
from pynumerics.misc.arrays import (
    reverse,
    reverse_matrix,
    concatenate,
    split_by_index,
)

__all__ = [
    "linspace",
    "linspace_repeated",
    "arange",
    "reverse",
    "reverse_matrix",
    "concatenate",
    "split_by_index",
]
