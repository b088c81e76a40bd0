"""
Linear algebra kernels for PyNumerics.

All functions follow these conventions:
    - CPU functions use NumPy/SciPy (LAPACK under the hood)
    - GPU functions use PyTorch and return NumPy arrays (data moved to CPU)
    - Each operation returns a structured result dataclass
    - Errors are raised immediately with clear messages

Submodules:
    svd: Singular value decomposition
"""

from pynumerics.core.compute.linalg.svd import (
    SVDResult,
    svd_cpu,
    svd_gpu,
)

__all__ = [
    "SVDResult",
    "svd_cpu",
    "svd_gpu",
]
