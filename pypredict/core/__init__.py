"""
Core infrastructure for PyPredict.

This module provides shared abstractions, utilities, and compute defaults
used by the domain-specific submodules (regression, prediction).

Key components:
    protocols: LinearFit, LinearAlgebra, QuantileSource protocols
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: NumPy/SciPy capability implementations, timing
"""

from pypredict.core.protocols import LinearFit, LinearAlgebra, QuantileSource
from pypredict.core.result import Result
from pypredict.core.exceptions import (
    PyPredictError,
    ValidationError,
    DimensionError,
    NumericalError,
    DegreesOfFreedomError,
)

__all__ = [
    # Protocols
    "LinearFit",
    "LinearAlgebra",
    "QuantileSource",
    # Result
    "Result",
    # Exceptions
    "PyPredictError",
    "ValidationError",
    "DimensionError",
    "NumericalError",
    "DegreesOfFreedomError",
]
