"""
Compute device selection.

Backend dispatch only needs to know which kind of device is present and
whether it can run float64; everything else about the hardware is left
to torch.
"""

from dataclasses import dataclass
from typing import Literal


DeviceType = Literal['cpu', 'cuda', 'mps']


@dataclass(frozen=True)
class DeviceInfo:
    """
    A compute device as seen by backend dispatch.

    Attributes:
        device_type: 'cpu', 'cuda' or 'mps'
        supports_fp64: Whether float64 kernels are available. False on
            MPS, which has no double precision.
    """
    device_type: DeviceType
    supports_fp64: bool

    @property
    def is_gpu(self) -> bool:
        return self.device_type != 'cpu'


CPU = DeviceInfo(device_type='cpu', supports_fp64=True)


def detect_gpu() -> DeviceInfo | None:
    """
    Best available GPU (CUDA before MPS), or None.

    torch is an optional dependency and is imported lazily; without it
    there is no GPU.
    """
    try:
        import torch
    except ImportError:
        return None

    if torch.cuda.is_available():
        return DeviceInfo(device_type='cuda', supports_fp64=True)
    if hasattr(torch.backends, 'mps') and torch.backends.mps.is_available():
        return DeviceInfo(device_type='mps', supports_fp64=False)
    return None


def select_device(prefer: Literal['cpu', 'gpu', 'auto'] = 'auto') -> DeviceInfo:
    """
    Select compute device based on preference and availability.

    Args:
        prefer: 'cpu' always, 'gpu' requires one, 'auto' takes a GPU if present

    Raises:
        RuntimeError: If 'gpu' requested but no GPU available
    """
    if prefer == 'cpu':
        return CPU

    gpu = detect_gpu()
    if prefer == 'gpu' and gpu is None:
        raise RuntimeError(
            "GPU requested but no GPU available. "
            "Ensure PyTorch is installed with CUDA/MPS support."
        )
    return gpu if gpu is not None else CPU
