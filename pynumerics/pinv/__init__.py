"""
Moore-Penrose pseudo-inverse.

Computes the pseudo-inverse of any real matrix (non-square,
rank-deficient, all-zero) via singular value decomposition, with
optional GPU acceleration.

Public API:
    pseudo_inverse(A)  - Pseudo-inverse with rank and conditioning diagnostics
    pinv(A)            - Pseudo-inverse as a plain array
"""

from pynumerics.pinv.design import PinvDesign
from pynumerics.pinv.solution import PinvParams, PinvSolution
from pynumerics.pinv.solvers import pseudo_inverse, pinv

__all__ = [
    "pseudo_inverse",
    "pinv",
    "PinvDesign",
    "PinvParams",
    "PinvSolution",
]
