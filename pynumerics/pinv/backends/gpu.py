"""
GPU backend for the pseudo-inverse using PyTorch.

Performance path for large matrices, validated against the CPU reference.
Supports CUDA (Linux/Windows) and MPS (macOS Apple Silicon).
"""

from typing import Any
import numpy as np

from pynumerics.core.result import Result
from pynumerics.core.compute.timing import Timer
from pynumerics.core.compute.precision import default_rcond
from pynumerics.core.compute.linalg.svd import svd_gpu
from pynumerics.pinv.design import PinvDesign
from pynumerics.pinv.solution import PinvParams
from pynumerics.pinv.backends.cpu import rank_deficiency_warning


class GPUSVDBackend:
    """
    GPU backend using PyTorch SVD.

    FP32 by default for throughput on consumer GPUs; the cutoff then uses
    float32 epsilon, so rank decisions are coarser than on the CPU.
    MPS has no float64 and no SVD kernel: the factorization runs on the
    CPU through torch and only the reconstruction runs on the device.
    """

    def __init__(
        self,
        rcond: float | None = None,
        use_fp64: bool = False,
        device: str = 'cuda',
    ):
        """
        Args:
            rcond: Relative cutoff for small singular values. None uses
                   max(m, n) * eps of the compute dtype.
            use_fp64: If True, use FP64 (slow on consumer GPUs).
            device: GPU device type ('cuda', 'cuda:0', 'mps')

        Raises:
            RuntimeError: If the requested device is unavailable
            ValueError: If the device string is not recognised
        """
        import torch

        self.rcond = rcond

        if device.startswith('cuda'):
            if not torch.cuda.is_available():
                raise RuntimeError(
                    "CUDA not available. Install PyTorch with CUDA support, "
                    "or use backend='cpu'."
                )
            self.device = torch.device(device)
            self.dtype = torch.float64 if use_fp64 else torch.float32
            self.use_fp64 = use_fp64

        elif device == 'mps':
            if not (hasattr(torch.backends, 'mps') and torch.backends.mps.is_available()):
                raise RuntimeError(
                    "MPS not available. Requires macOS with Apple Silicon "
                    "and PyTorch with MPS support."
                )
            if use_fp64:
                raise RuntimeError(
                    "MPS does not support float64. Use use_fp64=False "
                    "or use backend='cpu' for double precision."
                )
            self.device = torch.device('mps')
            self.dtype = torch.float32
            self.use_fp64 = False

        else:
            raise ValueError(
                f"Unknown GPU device: {device!r}. Use 'cuda' or 'mps'."
            )

    @property
    def name(self) -> str:
        precision = "fp64" if self.use_fp64 else "fp32"
        return f'gpu_svd_{precision}'

    def solve(self, design: PinvDesign) -> Result[PinvParams]:
        """
        Compute A⁺ via SVD on the GPU.

        Raises:
            NumericalError: If the SVD does not converge
        """
        import torch

        timer = Timer(sync_cuda=self.device.type == 'cuda')
        timer.start()

        with timer.section('data_transfer_to_gpu'):
            A = torch.from_numpy(np.ascontiguousarray(design.A)).to(
                device=self.device, dtype=self.dtype
            )

        with timer.section('svd'):
            svd = svd_gpu(A)

        rcond = self.rcond
        if rcond is None:
            rcond = default_rcond(design.shape, svd.s.dtype)
        cutoff = svd.cutoff(rcond)
        rank = svd.rank(rcond)

        with timer.section('invert'):
            U = torch.from_numpy(svd.U).to(self.device)
            s = torch.from_numpy(svd.s).to(self.device)
            Vh = torch.from_numpy(svd.Vh).to(self.device)
            s_inv = torch.where(s > cutoff, 1.0 / s, torch.zeros_like(s))
            A_pinv = (Vh.T * s_inv) @ U.T

        with timer.section('data_transfer_to_cpu'):
            A_pinv_np = A_pinv.cpu().numpy().astype(np.float64)
            s_np = svd.s.astype(np.float64)

        timer.stop()

        warnings_list = []
        if rank < min(design.shape):
            warnings_list.append(rank_deficiency_warning(rank, design.shape))

        params = PinvParams(
            pinv=A_pinv_np,
            singular_values=s_np,
            rank=rank,
            cutoff=cutoff,
            rcond=rcond,
        )

        info: dict[str, Any] = {
            'method': 'svd',
            'rank': rank,
            'lapack_driver': svd.lapack_driver,
            'device': str(self.device),
            'dtype': str(self.dtype),
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
