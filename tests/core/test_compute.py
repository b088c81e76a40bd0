"""
Tests for shared compute infrastructure.

Validates:
    - SVD kernel: factor shapes, reconstruction, rank, driver fallback
    - default_rcond and machine epsilon
    - Timer sections and error ordering
    - ToleranceTier bounds and select_tolerance tier selection
    - select_device preferences
"""

import warnings

import numpy as np
import pytest

from pynumerics.core.exceptions import NumericalError
from pynumerics.core.compute import device as device_module
from pynumerics.core.compute.device import DeviceInfo, select_device
from pynumerics.core.compute.linalg.svd import svd_cpu
from pynumerics.core.compute.precision import (
    EPSILON_32,
    EPSILON_64,
    default_rcond,
    machine_epsilon,
)
from pynumerics.core.compute.timing import Timer, timed
from pynumerics.core.compute.tolerances import (
    CPU_FP64,
    CPU_FP64_ILL_CONDITIONED,
    GPU_FP32,
    GPU_FP64,
    select_tolerance,
)


class TestSVDCPU:

    def test_shapes_tall(self, rng):
        A = rng.standard_normal((6, 3))
        result = svd_cpu(A)
        assert result.U.shape == (6, 3)
        assert result.s.shape == (3,)
        assert result.Vh.shape == (3, 3)
        assert result.shape == (6, 3)

    def test_shapes_wide(self, rng):
        A = rng.standard_normal((2, 5))
        result = svd_cpu(A)
        assert result.U.shape == (2, 2)
        assert result.Vh.shape == (2, 5)

    def test_reconstruction(self, rng):
        A = rng.standard_normal((4, 3))
        result = svd_cpu(A)
        np.testing.assert_allclose(result.U @ np.diag(result.s) @ result.Vh, A, atol=1e-12)

    def test_singular_values_descending_non_negative(self, rng):
        result = svd_cpu(rng.standard_normal((5, 5)))
        assert np.all(result.s >= 0)
        assert np.all(np.diff(result.s) <= 0)

    def test_matches_numpy(self, rng):
        A = rng.standard_normal((4, 3))
        np.testing.assert_allclose(svd_cpu(A).s, np.linalg.svd(A, compute_uv=False))

    def test_rank(self, rank_deficient):
        assert svd_cpu(rank_deficient).rank() == 2

    def test_rank_zero_matrix(self):
        result = svd_cpu(np.zeros((3, 2)))
        assert result.cutoff() == 0.0
        assert result.rank() == 0

    def test_gesvd_driver(self, rng):
        result = svd_cpu(rng.standard_normal((3, 3)), lapack_driver='gesvd')
        assert result.lapack_driver == 'gesvd'

    def test_falls_back_to_gesvd(self, rng, monkeypatch):
        import scipy.linalg

        real_svd = scipy.linalg.svd

        def flaky_svd(a, **kwargs):
            if kwargs.get('lapack_driver') == 'gesdd':
                raise np.linalg.LinAlgError("SVD did not converge")
            return real_svd(a, **kwargs)

        monkeypatch.setattr(scipy.linalg, 'svd', flaky_svd)
        A = rng.standard_normal((3, 3))
        with pytest.warns(RuntimeWarning, match="retrying with gesvd"):
            result = svd_cpu(A)
        assert result.lapack_driver == 'gesvd'

    def test_raises_numerical_error_when_both_drivers_fail(self, rng, monkeypatch):
        import scipy.linalg

        def broken_svd(a, **kwargs):
            raise np.linalg.LinAlgError("SVD did not converge")

        monkeypatch.setattr(scipy.linalg, 'svd', broken_svd)
        with warnings.catch_warnings():
            warnings.simplefilter("ignore", RuntimeWarning)
            with pytest.raises(NumericalError, match="did not converge") as exc_info:
                svd_cpu(rng.standard_normal((3, 3)))
        assert exc_info.value.lapack_driver == 'gesvd'

    def test_no_fallback(self, rng, monkeypatch):
        import scipy.linalg

        def broken_svd(a, **kwargs):
            raise np.linalg.LinAlgError("SVD did not converge")

        monkeypatch.setattr(scipy.linalg, 'svd', broken_svd)
        with pytest.raises(NumericalError) as exc_info:
            svd_cpu(rng.standard_normal((3, 3)), fallback=False)
        assert exc_info.value.lapack_driver == 'gesdd'


class TestPrecision:

    def test_epsilons(self):
        assert EPSILON_64 == np.finfo(np.float64).eps
        assert EPSILON_32 == np.finfo(np.float32).eps
        assert machine_epsilon(np.float32) == EPSILON_32

    def test_default_rcond_uses_larger_dimension(self):
        assert default_rcond((3, 7)) == 7 * EPSILON_64
        assert default_rcond((3, 7), np.float32) == 7 * EPSILON_32


class TestTimer:

    def test_sections_recorded(self):
        timer = Timer()
        timer.start()
        with timer.section('svd'):
            pass
        with timer.section('svd'):
            pass
        timer.stop()
        result = timer.result()
        assert set(result) == {'total_seconds', 'svd'}
        assert result['total_seconds'] >= 0.0

    def test_stop_before_start(self):
        with pytest.raises(RuntimeError, match="before start"):
            Timer().stop()

    def test_result_before_stop(self):
        timer = Timer()
        timer.start()
        assert timer.running
        with pytest.raises(RuntimeError, match="before stop"):
            timer.result()

    def test_timed_context(self):
        with timed() as timer:
            pass
        assert not timer.running
        assert 'total_seconds' in timer.result()


class TestTolerances:

    def test_cpu(self):
        assert select_tolerance('cpu_svd') is CPU_FP64
        assert select_tolerance('cpu_svd', is_ill_conditioned=True) is CPU_FP64_ILL_CONDITIONED

    def test_gpu(self):
        assert select_tolerance('gpu_svd_fp32') is GPU_FP32
        assert select_tolerance('gpu_svd_fp64') is GPU_FP64

    def test_gpu_fp64_ill_conditioned_matches_cpu(self):
        tier = select_tolerance('gpu_svd_fp64', is_ill_conditioned=True)
        assert tier is CPU_FP64_ILL_CONDITIONED

    def test_bound_scales_with_magnitude(self):
        assert CPU_FP64.bound() == pytest.approx(1e-12 + 1e-10)
        assert CPU_FP64.bound(1e6) == pytest.approx(1e-12 + 1e-4)

    def test_accepts(self):
        assert CPU_FP64.accepts(1e-13)
        assert not CPU_FP64.accepts(1e-6)
        assert GPU_FP32.accepts(1e-6)
        # Same error, larger quantity
        assert CPU_FP64.accepts(1e-6, scale=1e5)


class TestDevice:

    def test_select_cpu(self):
        device = select_device('cpu')
        assert device.device_type == 'cpu'
        assert not device.is_gpu
        assert device.supports_fp64

    def test_auto_without_gpu(self, monkeypatch):
        monkeypatch.setattr(device_module, 'detect_gpu', lambda: None)
        assert select_device('auto').device_type == 'cpu'

    def test_gpu_required(self, monkeypatch):
        monkeypatch.setattr(device_module, 'detect_gpu', lambda: None)
        with pytest.raises(RuntimeError, match="no GPU available"):
            select_device('gpu')

    def test_auto_prefers_gpu(self, monkeypatch):
        mps = DeviceInfo(device_type='mps', supports_fp64=False)
        monkeypatch.setattr(device_module, 'detect_gpu', lambda: mps)
        device = select_device('auto')
        assert device.is_gpu
        assert not device.supports_fp64
