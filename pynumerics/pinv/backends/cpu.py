"""
CPU reference backend for the pseudo-inverse.

Uses economy SVD via LAPACK (through SciPy). This is the reference
implementation the GPU backend is validated against.
"""

from typing import Any
import numpy as np
from numpy.typing import NDArray

from pynumerics.core.result import Result
from pynumerics.core.compute.timing import Timer
from pynumerics.core.compute.precision import default_rcond
from pynumerics.core.compute.linalg.svd import svd_cpu, LapackDriver
from pynumerics.pinv.design import PinvDesign
from pynumerics.pinv.solution import PinvParams


def invert_singular_values(
    s: NDArray[np.floating[Any]],
    cutoff: float,
) -> NDArray[np.floating[Any]]:
    """
    Reciprocals of the singular values above cutoff, zero elsewhere.

    Values at or below cutoff are never divided, so exact zeros and
    near-zeros cannot blow up.
    """
    s_inv = np.zeros_like(s)
    keep = s > cutoff
    s_inv[keep] = 1.0 / s[keep]
    return s_inv


def rank_deficiency_warning(rank: int, shape: tuple[int, int]) -> str:
    return (
        f"Matrix is rank-deficient (rank={rank}, min(m, n)={min(shape)}). "
        f"Singular values at or below the cutoff were treated as zero."
    )


class CPUSVDBackend:
    """
    CPU backend using singular value decomposition.

    Implements the Backend protocol for PinvDesign -> PinvParams.
    """

    def __init__(self, rcond: float | None = None, lapack_driver: LapackDriver = 'gesdd'):
        """
        Args:
            rcond: Relative cutoff for small singular values. None uses
                   max(m, n) * eps.
            lapack_driver: LAPACK routine tried first. A gesdd failure is
                           retried with gesvd.
        """
        self.rcond = rcond
        self.lapack_driver = lapack_driver

    @property
    def name(self) -> str:
        return 'cpu_svd'

    def solve(self, design: PinvDesign) -> Result[PinvParams]:
        """
        Compute A⁺ via SVD.

        Algorithm:
            1. A = U diag(s) Vh (economy)
            2. cutoff = rcond * s[0]; invert s above cutoff, zero the rest
            3. A⁺ = Vh' diag(1/s) U'

        Raises:
            NumericalError: If the SVD does not converge with either driver
        """
        timer = Timer()
        timer.start()

        with timer.section('svd'):
            svd = svd_cpu(design.A, lapack_driver=self.lapack_driver)

        rcond = self.rcond
        if rcond is None:
            rcond = default_rcond(design.shape, svd.s.dtype)
        cutoff = svd.cutoff(rcond)
        rank = svd.rank(rcond)

        with timer.section('invert'):
            s_inv = invert_singular_values(svd.s, cutoff)
            # Scale columns of V instead of forming the k x k diagonal
            A_pinv = (svd.Vh.T * s_inv) @ svd.U.T

        timer.stop()

        warnings_list = []
        if rank < min(design.shape):
            warnings_list.append(rank_deficiency_warning(rank, design.shape))

        params = PinvParams(
            pinv=A_pinv,
            singular_values=svd.s,
            rank=rank,
            cutoff=cutoff,
            rcond=rcond,
        )

        info: dict[str, Any] = {
            'method': 'svd',
            'rank': rank,
            'lapack_driver': svd.lapack_driver,
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
