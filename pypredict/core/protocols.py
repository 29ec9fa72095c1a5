"""
Core protocols for PyPredict.

These define structural interfaces for the collaborators the prediction
code consumes as black boxes. We use Protocol (structural typing) rather
than ABC (nominal typing) so that any object with the right shape can be
injected, including fixed-value stubs in tests.

Design Principles:
    - Minimal contracts: prescribe only what the interval math needs
    - Capability-driven: linear algebra and quantiles are swappable
    - No implementation here; defaults live in core.compute
"""

from typing import Protocol, Any, runtime_checkable

import numpy as np
from numpy.typing import NDArray


@runtime_checkable
class LinearFit(Protocol):
    """
    Read-only view of a completed linear regression fit.

    pypredict.regression.FittedModel implements this protocol. The
    design matrix is stored term-major: one row per model term.
    """

    @property
    def coefficients(self) -> NDArray[np.floating[Any]]:
        """Coefficient vector β, intercept last when present."""
        ...

    @property
    def sigma2(self) -> float:
        """Residual variance estimate σ²."""
        ...

    @property
    def xtx_inverse(self) -> NDArray[np.floating[Any]]:
        """Inverse Gram matrix (X'X)⁻¹."""
        ...

    @property
    def has_intercept(self) -> bool:
        """Whether the last model term is an intercept."""
        ...

    @property
    def response(self) -> NDArray[np.floating[Any]]:
        """Response vector used in fitting."""
        ...

    @property
    def design_matrix(self) -> NDArray[np.floating[Any]]:
        """Design matrix used in fitting, one row per model term."""
        ...


@runtime_checkable
class LinearAlgebra(Protocol):
    """
    Vector and matrix operations used by the predictor.

    Implementations must not mutate their arguments.
    """

    def dot(self, x: Any, y: Any) -> float:
        """Dot product of two equal-length vectors."""
        ...

    def append(self, x: Any, value: float) -> Any:
        """New vector equal to x with value added at the end."""
        ...

    def quadratic_form(self, x: Any, A: Any) -> float:
        """The scalar x' A x."""
        ...

    def row(self, M: Any, i: int) -> Any:
        """Row i of matrix M as a vector."""
        ...

    def nrow(self, M: Any) -> int:
        """Number of rows of matrix M."""
        ...


@runtime_checkable
class QuantileSource(Protocol):
    """
    Quantile function of the Student-t family.

    Given a cumulative probability and degrees of freedom, returns the
    value t such that P(T <= t) = probability.
    """

    def quantile(self, probability: float, df: int) -> float:
        ...
