"""
Shared compute infrastructure for PyNumerics.

Hardware detection, timing, precision constants and linear algebra
kernels shared by the domain backends. Domain-specific backends live in
{domain}/backends/, not here.

Submodules:
    device: GPU detection and device selection
    timing: Execution timing utilities
    precision: Machine epsilon and default rank cutoff
    tolerances: Acceptance tolerances per compute path
    linalg: Linear algebra kernels (SVD)
"""

from pynumerics.core.compute.device import (
    DeviceInfo,
    detect_gpu,
    select_device,
)
from pynumerics.core.compute.timing import Timer, timed

__all__ = [
    # Device detection
    "DeviceInfo",
    "detect_gpu",
    "select_device",
    # Timing
    "Timer",
    "timed",
]
