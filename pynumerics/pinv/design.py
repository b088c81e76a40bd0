"""
PinvDesign: validated input for the pseudo-inverse.

Wraps the matrix to be inverted. All validation happens once, here;
backends trust the design.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pynumerics.core.validation import (
    check_array,
    check_2d,
    check_finite,
    check_nonempty,
)


@dataclass(frozen=True)
class PinvDesign:
    """
    Design for the Moore-Penrose pseudo-inverse.

    Holds a real, finite, non-empty m x n float64 matrix. Immutable after
    construction; the stored array is a read-only float64 copy, so the
    caller's matrix is never aliased and every backend starts from the
    same precision.

    Construction:
        PinvDesign.from_array(A)
    """
    _A: NDArray[np.float64]

    @classmethod
    def from_array(cls, A: ArrayLike, name: str = 'A') -> PinvDesign:
        """
        Build PinvDesign from an array-like matrix.

        Args:
            A: 2D real-valued matrix (m x n), m >= 1, n >= 1
            name: Parameter name for error messages

        Raises:
            ValidationError: If A is non-numeric or contains NaN/Inf
            DimensionError: If A is not 2D or has a zero dimension
        """
        arr = check_array(A, name)
        check_2d(arr, name)
        check_nonempty(arr, name)
        check_finite(arr, name)

        arr = np.array(arr, dtype=np.float64, copy=True)
        arr.setflags(write=False)
        return cls(_A=arr)

    @property
    def A(self) -> NDArray[np.float64]:
        """The matrix (m x n), read-only."""
        return self._A

    @property
    def m(self) -> int:
        """Number of rows."""
        return self._A.shape[0]

    @property
    def n(self) -> int:
        """Number of columns."""
        return self._A.shape[1]

    @property
    def shape(self) -> tuple[int, int]:
        return (self.m, self.n)

    @property
    def dtype(self) -> np.dtype:
        return self._A.dtype

    @property
    def metadata(self) -> dict[str, Any]:
        return {'m': self.m, 'n': self.n, 'dtype': str(self.dtype)}

    def __repr__(self) -> str:
        return f"PinvDesign(m={self.m}, n={self.n}, dtype={self.dtype})"
