"""
Evenly spaced sequence generation.

NumPy-compatible helpers for sampling grids and periodic test signals.
"""

from typing import Any
import numpy as np
from numpy.typing import NDArray

from pynumerics.core.exceptions import ValidationError
from pynumerics.core.validation import check_non_negative_int, check_real_scalar


def linspace(
    start: float,
    stop: float,
    samples: int,
    include_end: bool = True,
) -> NDArray[np.float64]:
    """
    Evenly spaced numbers over an interval.

    Equivalent to numpy.linspace(start, stop, samples, endpoint=include_end),
    except that the last value is always exactly ``stop`` when include_end
    is True, including the single-sample case.

    Args:
        start: First value of the sequence
        stop: End of the interval
        samples: Number of values to generate (>= 0)
        include_end: If True, spacing is (stop - start) / (samples - 1) and
            stop is the last value. If False, spacing is
            (stop - start) / samples and stop is excluded.

    Returns:
        float64 array of length samples

    Raises:
        ValidationError: If samples is negative, start/stop are not finite,
            or stop - start overflows float64

    Examples:
        >>> linspace(0, 10, 5)
        array([ 0. ,  2.5,  5. ,  7.5, 10. ])
        >>> linspace(0, 10, 5, include_end=False)
        array([0., 2., 4., 6., 8.])
    """
    start = check_real_scalar(start, 'start')
    stop = check_real_scalar(stop, 'stop')
    samples = check_non_negative_int(samples, 'samples')

    try:
        span = float(stop) - float(start)
    except OverflowError:
        span = float('inf')
    if not np.isfinite(span):
        raise ValidationError(
            f"stop - start: interval [{start}, {stop}] is too wide for float64"
        )

    if samples == 0:
        return np.empty(0, dtype=np.float64)

    values = np.linspace(start, stop, samples, endpoint=include_end, dtype=np.float64)
    if include_end:
        values[-1] = stop
    return values


def linspace_repeated(
    start: float,
    stop: float,
    samples: int,
    repeats: int,
) -> NDArray[np.float64]:
    """
    An inclusive linspace concatenated ``repeats`` times.

    Useful for periodic signals where each period samples the same grid.

    Returns:
        float64 array of length samples * repeats; empty if either is zero

    Examples:
        >>> linspace_repeated(0, 10, 5, 2)
        array([ 0. ,  2.5,  5. ,  7.5, 10. ,  0. ,  2.5,  5. ,  7.5, 10. ])
    """
    repeats = check_non_negative_int(repeats, 'repeats')
    period = linspace(start, stop, samples, include_end=True)
    return np.tile(period, repeats)


def arange(start: float, stop: float, step: float = 1) -> NDArray[Any]:
    """
    Values in the half-open interval [start, stop) spaced by step.

    Equivalent to numpy.arange. A negative step counts down, and the
    interval is then (stop, start]. Integer arguments give an integer
    array. As with numpy, a non-integer step can make the length
    off by one due to rounding; use linspace for float grids.

    Raises:
        ValidationError: If step is zero or any argument is not finite

    Examples:
        >>> arange(0, 10, 2)
        array([0, 2, 4, 6, 8])
        >>> arange(10, 0, -2)
        array([10,  8,  6,  4,  2])
    """
    start = check_real_scalar(start, 'start')
    stop = check_real_scalar(stop, 'stop')
    step = check_real_scalar(step, 'step')

    if step == 0:
        raise ValidationError("step: step size cannot be zero")

    return np.arange(start, stop, step)
