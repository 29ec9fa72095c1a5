"""
Shared compute infrastructure for PyPredict.

This module provides the default implementations of the capability
protocols and timing utilities shared by the prediction code.

IMPORTANT: This is NOT where prediction logic lives. That goes in
pypredict.prediction. This module contains shared NUMERIC infrastructure.

Submodules:
    linalg: NumPy linear algebra capability
    distributions: SciPy Student-t quantile capability
    timing: Execution timing utilities
"""

from pypredict.core.compute.linalg import NumpyLinearAlgebra
from pypredict.core.compute.distributions import StudentTQuantiles
from pypredict.core.compute.timing import Timer

__all__ = [
    "NumpyLinearAlgebra",
    "StudentTQuantiles",
    "Timer",
]
