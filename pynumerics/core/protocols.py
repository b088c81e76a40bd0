"""
Core protocols for PyNumerics.

We use Protocol (structural typing) rather than ABC (nominal typing) so
backends need not inherit from anything to be dispatchable.
"""

from typing import Protocol, TypeVar, runtime_checkable

from pynumerics.core.result import Result

D = TypeVar('D')  # Design type
P = TypeVar('P')  # Parameter payload type


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for computational backends.

    Each backend takes a validated domain design and produces a
    domain-specific parameter payload wrapped in a Result. The backend
    handles all hardware-specific computation (CPU/GPU, precision).

    Backends are stateless: all configuration is passed at construction
    time or carried by the design.

    Type Parameters:
        D: The design type this backend accepts
        P: The parameter payload type this backend produces
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{device}_{algorithm}'
        Examples: 'cpu_svd', 'gpu_svd_fp32'
        """
        ...

    def solve(self, design: D) -> 'Result[P]':
        """
        Execute the computation.

        Raises:
            NumericalError: If the decomposition fails
            ValidationError: If design is invalid for this backend
        """
        ...
