"""
PyNumerics: small numeric helpers built on NumPy and SciPy.

Submodules:
    pinv: Moore-Penrose pseudo-inverse via SVD (optional GPU backend)
    misc: Sequence generation (linspace, arange) and array helpers
"""

__version__ = "0.1.0"

from pynumerics import pinv
from pynumerics import misc

__all__ = [
    "__version__",
    "pinv",
    "misc",
]
