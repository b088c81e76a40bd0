"""
Solver dispatch for the pseudo-inverse.

This module provides the pseudo_inverse() and pinv() functions (public
API) and backend selection.
"""

from typing import Any, Literal
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pynumerics.core.exceptions import ValidationError
from pynumerics.core.validation import check_real_scalar
from pynumerics.core.compute.device import select_device
from pynumerics.pinv.design import PinvDesign
from pynumerics.pinv.solution import PinvSolution
from pynumerics.pinv.backends.cpu import CPUSVDBackend


BackendChoice = Literal['auto', 'cpu', 'gpu']


def pseudo_inverse(
    A: ArrayLike,
    *,
    rcond: float | None = None,
    backend: BackendChoice = 'auto',
) -> PinvSolution:
    """
    Compute the Moore-Penrose pseudo-inverse of a matrix.

    Works for any real m x n matrix, square or not, full rank or not:
        A = U diag(s) Vh
        A⁺ = Vh' diag(s⁺) U'
    where s⁺ holds 1/s for singular values above rcond * max(s) and
    zero for the rest.

    Args:
        A: Matrix (m x n). Can be any real array-like.
        rcond: Relative cutoff for small singular values. Defaults to
            max(m, n) * machine epsilon.
        backend: Computational backend to use:
            - 'auto': float64 GPU (CUDA) if available, else CPU
            - 'cpu': SciPy/LAPACK SVD (reference)
            - 'gpu': PyTorch SVD (requires CUDA or MPS)

    Returns:
        PinvSolution with the pseudo-inverse, rank and diagnostics

    Raises:
        ValidationError: If A is non-numeric or non-finite, or rcond is negative
        DimensionError: If A is not 2D or has zero rows or columns
        NumericalError: If the SVD does not converge
        RuntimeError: If backend='gpu' and no GPU is available
        ValueError: If the backend name is unknown

    Example:
        >>> import numpy as np
        >>> from pynumerics.pinv import pseudo_inverse
        >>>
        >>> A = np.array([[1.0, 2.0], [2.0, 4.0], [3.0, 6.0]])
        >>> result = pseudo_inverse(A, backend='cpu')
        >>> result.rank
        1
        >>> print(result.summary())
    """
    # === Input Validation ===
    # This is the boundary - validate here, trust everywhere else
    design = PinvDesign.from_array(A)
    rcond = _check_rcond(rcond)

    backend_impl = _get_backend(backend, rcond)

    result = backend_impl.solve(design)

    return PinvSolution(_result=result, _design=design)


def pinv(
    A: ArrayLike,
    *,
    rcond: float | None = None,
    backend: BackendChoice = 'cpu',
) -> NDArray[np.floating[Any]]:
    """
    Moore-Penrose pseudo-inverse of A as a plain array (n x m).

    Shorthand for pseudo_inverse(A, ...).pinv. Defaults to the CPU
    reference backend. The result is float64 whatever the input dtype.

    Example:
        >>> pinv([[5.0]])
        array([[0.2]])
        >>> pinv(np.zeros((2, 3))).shape
        (3, 2)
    """
    return pseudo_inverse(A, rcond=rcond, backend=backend).pinv


def _check_rcond(rcond: float | None) -> float | None:
    if rcond is None:
        return None
    rcond = check_real_scalar(rcond, 'rcond')
    if rcond < 0:
        raise ValidationError(f"rcond: must be non-negative, got {rcond}")
    return rcond


def _get_backend(choice: BackendChoice, rcond: float | None):
    """
    Select and instantiate the appropriate backend.

    'auto' only ever picks a float64 path: CUDA runs the GPU backend in
    fp64, and MPS (float32 only) falls back to the CPU. An fp32 GPU
    result is available by asking for 'gpu' explicitly.

    Raises:
        ValueError: If unknown backend specified
        RuntimeError: If GPU requested but unavailable
    """
    if choice == 'auto':
        device = select_device('auto')
        if device.is_gpu and device.supports_fp64:
            from pynumerics.pinv.backends.gpu import GPUSVDBackend
            return GPUSVDBackend(rcond=rcond, use_fp64=True, device=device.device_type)
        return CPUSVDBackend(rcond=rcond)

    elif choice == 'cpu':
        return CPUSVDBackend(rcond=rcond)

    elif choice == 'gpu':
        device = select_device('gpu')
        from pynumerics.pinv.backends.gpu import GPUSVDBackend
        return GPUSVDBackend(rcond=rcond, device=device.device_type)

    else:
        raise ValueError(f"Unknown backend: {choice!r}")
