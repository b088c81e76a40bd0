"""
Exception hierarchy for PyNumerics.

All exceptions inherit from PyNumericsError to allow catching any
library-specific error.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyNumericsError(Exception):
    """Base exception for all PyNumerics errors."""
    pass


class ValidationError(PyNumericsError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions or indices are incorrect or inconsistent.

    Raised when array shapes don't match expected dimensions, when an
    array is empty where data is required, or when slice indices fall
    outside the array.
    """
    pass


class NumericalError(PyNumericsError):
    """
    Numerical computation failed.

    Raised when a decomposition does not converge or a computation is
    numerically unstable.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        lapack_driver: LAPACK driver that failed, if the failure came from LAPACK
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        lapack_driver: str | None = None,
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.lapack_driver = lapack_driver
