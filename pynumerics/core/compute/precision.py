"""
Numerical precision constants and utilities.

Provides machine epsilon and the default relative cutoff used to decide
which singular values count as zero.
"""

import numpy as np


# Machine epsilon for float64
EPSILON_64: float = float(np.finfo(np.float64).eps)  # ~2.22e-16

# Machine epsilon for float32
EPSILON_32: float = float(np.finfo(np.float32).eps)  # ~1.19e-7


def machine_epsilon(dtype: np.dtype | type = np.float64) -> float:
    """
    Get machine epsilon for a given dtype.

    Args:
        dtype: NumPy dtype or type

    Returns:
        Machine epsilon for the dtype
    """
    return float(np.finfo(dtype).eps)


def default_rcond(shape: tuple[int, ...], dtype: np.dtype | type = np.float64) -> float:
    """
    Default relative cutoff for small singular values.

    Uses the LAPACK/NumPy rank convention: max(m, n) * eps. Singular
    values at or below rcond * s_max are treated as zero.

    Args:
        shape: Matrix shape (m, n)
        dtype: Floating dtype the decomposition runs in

    Returns:
        Relative cutoff
    """
    return max(shape) * machine_epsilon(dtype)
