"""
Pseudo-inverse solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pynumerics.core.result import Result
from pynumerics.core.exceptions import DimensionError
from pynumerics.core.validation import check_array, check_finite
from pynumerics.core.compute.tolerances import (
    ILL_CONDITIONED_THRESHOLD,
    ToleranceTier,
    select_tolerance,
)

if TYPE_CHECKING:
    from pynumerics.pinv.design import PinvDesign


@dataclass(frozen=True)
class PinvParams:
    """
    Parameter payload for the pseudo-inverse.

    This is the immutable data computed by backends.

    Attributes:
        pinv: Moore-Penrose pseudo-inverse (n x m)
        singular_values: Singular values of A, descending
        rank: Number of singular values above the cutoff
        cutoff: Absolute threshold applied to the singular values
        rcond: Relative threshold the cutoff was derived from
    """
    pinv: NDArray[np.floating[Any]]
    singular_values: NDArray[np.floating[Any]]
    rank: int
    cutoff: float
    rcond: float


@dataclass
class PinvSolution:
    """
    User-facing pseudo-inverse results.

    Wraps the backend Result and provides the pseudo-inverse together
    with rank and conditioning diagnostics.
    """
    _result: Result[PinvParams]
    _design: 'PinvDesign'

    @property
    def pinv(self) -> NDArray[np.floating[Any]]:
        """The pseudo-inverse A⁺ (n x m)."""
        return self._result.params.pinv

    @property
    def singular_values(self) -> NDArray[np.floating[Any]]:
        return self._result.params.singular_values

    @property
    def rank(self) -> int:
        return self._result.params.rank

    @property
    def cutoff(self) -> float:
        return self._result.params.cutoff

    @property
    def rcond(self) -> float:
        return self._result.params.rcond

    @property
    def shape(self) -> tuple[int, int]:
        """Shape of the pseudo-inverse, (n, m)."""
        return (self._design.n, self._design.m)

    @property
    def is_full_rank(self) -> bool:
        return self.rank == min(self._design.m, self._design.n)

    @property
    def condition_number(self) -> float:
        """
        2-norm condition number s_max / s_min.

        Infinite when the smallest singular value is zero, including the
        all-zero matrix.
        """
        s = self.singular_values
        if s[-1] == 0:
            return float('inf')
        return float(s[0] / s[-1])

    @property
    def tolerance(self) -> ToleranceTier:
        """Tolerance tier appropriate to the backend and conditioning."""
        return select_tolerance(
            self.backend_name,
            is_ill_conditioned=self.condition_number > ILL_CONDITIONED_THRESHOLD,
        )

    def solve(self, b: ArrayLike) -> NDArray[np.floating[Any]]:
        """
        Minimum-norm least squares solution x = A⁺ b.

        Args:
            b: Right-hand side, shape (m,) or (m, k)

        Returns:
            x with shape (n,) or (n, k)

        Raises:
            ValidationError: If b is non-numeric or non-finite
            DimensionError: If b is not 1D/2D or has the wrong number of rows
        """
        b_arr = check_array(b, 'b')
        if b_arr.ndim not in (1, 2):
            raise DimensionError(
                f"b: expected 1D or 2D array, got {b_arr.ndim}D with shape {b_arr.shape}"
            )
        if b_arr.shape[0] != self._design.m:
            raise DimensionError(
                f"b: has {b_arr.shape[0]} rows but A has {self._design.m} rows"
            )
        check_finite(b_arr, 'b')
        return self.pinv @ b_arr

    def penrose_residuals(self) -> dict[str, float]:
        """
        Max-abs residuals of the four Moore-Penrose conditions.

        Returns:
            Dictionary with keys:
                'A_Ap_A': |A A⁺ A - A|
                'Ap_A_Ap': |A⁺ A A⁺ - A⁺|
                'A_Ap_sym': |(A A⁺)ᵀ - A A⁺|
                'Ap_A_sym': |(A⁺ A)ᵀ - A⁺ A|
        """
        A = self._design.A
        Ap = self.pinv
        AAp = A @ Ap
        ApA = Ap @ A

        def _maxabs(x: NDArray) -> float:
            return float(np.max(np.abs(x))) if x.size else 0.0

        return {
            'A_Ap_A': _maxabs(AAp @ A - A),
            'Ap_A_Ap': _maxabs(ApA @ Ap - Ap),
            'A_Ap_sym': _maxabs(AAp.T - AAp),
            'Ap_A_sym': _maxabs(ApA.T - ApA),
        }

    def satisfies_penrose(self, tolerance: ToleranceTier | None = None) -> bool:
        """
        Whether all four Moore-Penrose conditions hold within tolerance.

        The first two residuals are measured against the size of A and A⁺
        respectively; the symmetry residuals against 1, the scale of a
        projector.

        Args:
            tolerance: Tier to check against. Defaults to self.tolerance.
        """
        tier = tolerance if tolerance is not None else self.tolerance
        residuals = self.penrose_residuals()
        scales = {
            'A_Ap_A': float(np.max(np.abs(self._design.A))),
            'Ap_A_Ap': float(np.max(np.abs(self.pinv))),
            'A_Ap_sym': 1.0,
            'Ap_A_sym': 1.0,
        }
        return all(tier.accepts(residuals[k], scales[k]) for k in residuals)

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """Generate a text summary of the decomposition."""
        s = self.singular_values
        lines = [
            "Moore-Penrose Pseudo-Inverse",
            "=" * 60,
            f"Input shape: {self._design.m} x {self._design.n}",
            f"Rank: {self.rank} of {min(self._design.m, self._design.n)}",
            f"Condition number: {self.condition_number:.6e}",
            f"Cutoff: {self.cutoff:.6e} (rcond={self.rcond:.3e})",
            f"Moore-Penrose conditions ({self.tolerance.name}): "
            f"{'hold' if self.satisfies_penrose() else 'violated'}",
            "",
            "Singular values:",
            "-" * 60,
        ]

        for i, sv in enumerate(s):
            flag = "" if sv > self.cutoff else "  (truncated)"
            lines.append(f"  s[{i}]: {sv:14.6e}{flag}")

        lines.append("-" * 60)
        lines.append(f"Backend: {self.backend_name}")
        if 'lapack_driver' in self.info:
            lines.append(f"Driver: {self.info['lapack_driver']}")
        if self.timing:
            lines.append(f"Time: {self.timing.get('total_seconds', 0):.4f}s")
        for w in self.warnings:
            lines.append(f"Warning: {w}")

        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"PinvSolution(m={self._design.m}, n={self._design.n}, "
            f"rank={self.rank}, cond={self.condition_number:.4g})"
        )
