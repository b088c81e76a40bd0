"""
Pseudo-inverse backends.

Available backends:
    CPUSVDBackend: CPU reference implementation using LAPACK SVD
    GPUSVDBackend: GPU implementation using PyTorch (imported on demand)
"""

from pynumerics.pinv.backends.cpu import CPUSVDBackend

__all__ = [
    "CPUSVDBackend",
]
