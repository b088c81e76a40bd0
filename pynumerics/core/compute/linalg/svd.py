"""
Singular value decomposition implementations.

Provides a consistent economy-SVD interface across CPU (LAPACK via SciPy)
and GPU (PyTorch). Used by the pseudo-inverse backends and anywhere a
numerical rank is needed.
"""

import warnings
from dataclasses import dataclass
from typing import Literal, Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from pynumerics.core.exceptions import NumericalError
from pynumerics.core.compute.precision import default_rcond

if TYPE_CHECKING:
    import torch


LapackDriver = Literal['gesdd', 'gesvd']


@dataclass(frozen=True)
class SVDResult:
    """
    Result of economy singular value decomposition.

    A = U @ diag(s) @ Vh with k = min(m, n).

    Attributes:
        U: Left singular vectors (m x k), orthonormal columns
        s: Singular values (k,), non-negative and descending
        Vh: Right singular vectors, transposed (k x n)
        lapack_driver: LAPACK routine that produced the factors, or
                       'torch' for the GPU path
    """
    U: NDArray[np.floating[Any]]
    s: NDArray[np.floating[Any]]
    Vh: NDArray[np.floating[Any]]
    lapack_driver: str

    @property
    def shape(self) -> tuple[int, int]:
        """Shape (m, n) of the decomposed matrix."""
        return (self.U.shape[0], self.Vh.shape[1])

    def cutoff(self, rcond: float | None = None) -> float:
        """
        Absolute threshold below which singular values count as zero.

        Args:
            rcond: Relative cutoff. Defaults to max(m, n) * eps.
        """
        if rcond is None:
            rcond = default_rcond(self.shape, self.s.dtype)
        if self.s.size == 0:
            return 0.0
        return float(rcond * self.s[0])

    def rank(self, rcond: float | None = None) -> int:
        """Numerical rank: number of singular values strictly above the cutoff."""
        return int(np.sum(self.s > self.cutoff(rcond)))


def svd_cpu(
    A: NDArray[np.floating[Any]],
    lapack_driver: LapackDriver = 'gesdd',
    fallback: bool = True,
) -> SVDResult:
    """
    Economy SVD using LAPACK (via SciPy).

    gesdd (divide and conquer) is fast but occasionally fails to converge
    on badly scaled input. With fallback=True a gesdd failure is retried
    once with gesvd (QR iteration), which is slower but more robust.

    Args:
        A: Matrix to decompose (m x n), finite values only
        lapack_driver: LAPACK routine to try first
        fallback: Retry with gesvd if gesdd does not converge

    Returns:
        SVDResult with U, s, Vh and the driver that succeeded

    Raises:
        NumericalError: If the decomposition does not converge
    """
    from scipy.linalg import svd

    try:
        U, s, Vh = svd(A, full_matrices=False, check_finite=False,
                       lapack_driver=lapack_driver)
    except np.linalg.LinAlgError as e:
        if not (fallback and lapack_driver == 'gesdd'):
            raise NumericalError(
                f"SVD did not converge (LAPACK {lapack_driver}): {e}",
                matrix_name='A',
                lapack_driver=lapack_driver,
            ) from e
        warnings.warn(
            "SVD via gesdd did not converge, retrying with gesvd",
            RuntimeWarning,
            stacklevel=2,
        )
        return svd_cpu(A, lapack_driver='gesvd', fallback=False)

    return SVDResult(U=U, s=s, Vh=Vh, lapack_driver=lapack_driver)


def svd_gpu(A: 'torch.Tensor') -> SVDResult:
    """
    Economy SVD using PyTorch (GPU-accelerated).

    torch.linalg.svd is not implemented for MPS; MPS tensors are
    decomposed on the CPU through torch instead.

    Args:
        A: Tensor to decompose (m x n), must already be on desired device

    Returns:
        SVDResult with U, s, Vh as NumPy arrays (moved to CPU)

    Raises:
        NumericalError: If the decomposition does not converge
    """
    import torch

    X = A.cpu() if A.device.type == 'mps' else A
    try:
        U, s, Vh = torch.linalg.svd(X, full_matrices=False)
    except torch.linalg.LinAlgError as e:
        raise NumericalError(
            f"SVD did not converge on {A.device}: {e}",
            matrix_name='A',
        ) from e

    return SVDResult(
        U=U.cpu().numpy(),
        s=s.cpu().numpy(),
        Vh=Vh.cpu().numpy(),
        lapack_driver='torch',
    )
