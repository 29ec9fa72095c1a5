"""
Exception hierarchy for PyPredict.

All exceptions inherit from PyPredictError to allow catching any
library-specific error. Domain-specific exceptions should inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyPredictError(Exception):
    """Base exception for all PyPredict errors."""
    pass


class ValidationError(PyPredictError):
    """
    Input validation failed.

    Raised when user-provided inputs (observations, alpha, model arrays)
    fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when array shapes don't match expected dimensions or
    when multiple arrays have inconsistent shapes.

    Attributes:
        expected: Expected size or shape, if known
        actual: Actual size or shape, if known
    """

    def __init__(
        self,
        message: str,
        expected: int | tuple[int, ...] | None = None,
        actual: int | tuple[int, ...] | None = None,
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class NumericalError(PyPredictError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class DegreesOfFreedomError(NumericalError):
    """
    Residual degrees of freedom are not positive.

    The Student-t reference distribution is undefined for df <= 0, so no
    interval can be computed.

    Attributes:
        df: The offending degrees of freedom
    """

    def __init__(self, message: str, df: int):
        super().__init__(message)
        self.df = df
