"""
Acceptance tolerances for computed pseudo-inverses.

A tier bounds the error a residual may carry for a given arithmetic
precision: ``atol + rtol * scale``, with ``scale`` the magnitude of the
quantity the residual is measured against. PinvSolution.satisfies_penrose
checks the Moore-Penrose residuals against the tier picked by
select_tolerance.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Relative and absolute error bound for one precision class."""
    rtol: float
    atol: float
    name: str

    def bound(self, scale: float = 1.0) -> float:
        """Largest acceptable absolute error for a quantity of size ``scale``."""
        return self.atol + self.rtol * scale

    def accepts(self, error: float, scale: float = 1.0) -> bool:
        return error <= self.bound(scale)


CPU_FP64 = ToleranceTier(rtol=1e-10, atol=1e-12, name='cpu_fp64')
CPU_FP64_ILL_CONDITIONED = ToleranceTier(rtol=1e-4, atol=1e-6, name='cpu_fp64_ill_conditioned')
GPU_FP64 = ToleranceTier(rtol=1e-10, atol=1e-12, name='gpu_fp64')
GPU_FP32 = ToleranceTier(rtol=1e-4, atol=1e-5, name='gpu_fp32')
GPU_FP32_ILL_CONDITIONED = ToleranceTier(rtol=1e-2, atol=1e-3, name='gpu_fp32_ill_conditioned')

# Condition number above which the relaxed tier applies
ILL_CONDITIONED_THRESHOLD = 1e4


def select_tolerance(
    backend_name: str,
    is_ill_conditioned: bool = False,
) -> ToleranceTier:
    """
    Tier for results produced by ``backend_name``.

    Backend names carry their precision: 'cpu_svd' is float64,
    'gpu_svd_fp64' and 'gpu_svd_fp32' say so explicitly.
    """
    if backend_name.startswith('gpu'):
        if backend_name.endswith('fp64'):
            # fp64 GPU kernels match the CPU reference, conditioning aside
            return CPU_FP64_ILL_CONDITIONED if is_ill_conditioned else GPU_FP64
        return GPU_FP32_ILL_CONDITIONED if is_ill_conditioned else GPU_FP32
    return CPU_FP64_ILL_CONDITIONED if is_ill_conditioned else CPU_FP64
