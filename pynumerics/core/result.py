"""
Generic result container for PyNumerics computations.

The Result class provides a standardized envelope that domain-specific
results use. Domains define their own parameter payloads; the envelope
carries timing, backend identity and non-fatal warnings.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (method, rank, driver)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) for reproducibility
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for numerical computations.

    Type Parameters:
        P: The domain-specific parameter payload type

    Attributes:
        params: Domain-specific parameters (pseudo-inverse, singular values, etc.)
        info: Structured metadata (method, rank, LAPACK driver)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=PinvParams(pinv=A_pinv, ...),
        ...     info={'method': 'svd', 'rank': 3, 'lapack_driver': 'gesdd'},
        ...     timing={'total_seconds': 0.01, 'svd': 0.008},
        ...     backend_name='cpu_svd'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
