"""
Fitted regression model container.

FittedModel holds everything a completed least-squares fit hands over to
prediction: coefficients, residual variance, the inverse Gram matrix, the
intercept flag, and the response/design arrays the fit was computed from.
Producing those numbers is the fitting code's job, not this module's.

Like a furniture maker receiving finished parts: the parts are checked
for fit on delivery, never re-cut.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pypredict.core.exceptions import DimensionError
from pypredict.core.protocols import LinearFit
from pypredict.core.validation import (
    check_array,
    check_finite,
    check_1d,
    check_2d,
    check_square,
    check_length,
    check_columns,
    check_non_negative,
)


@dataclass(frozen=True, eq=False)
class FittedModel:
    """
    Completed multiple linear regression fit.

    Immutable after construction. Equality is value equality over every
    field (arrays compared element-wise) and hashing agrees with it.

    Conventions:
        - p model terms; when has_intercept is True the intercept is the
          LAST coefficient, matching the 1.0 appended to observations.
        - design_matrix is term-major: shape (p, n), one row per model term
          and one column per observation.

    Construction:
        FittedModel.from_arrays(beta, sigma2, xtx_inv, y, X_terms,
                                has_intercept=True)
    """
    _coefficients: NDArray[np.floating[Any]]
    _sigma2: float
    _xtx_inverse: NDArray[np.floating[Any]]
    _response: NDArray[np.floating[Any]]
    _design_matrix: NDArray[np.floating[Any]]
    _has_intercept: bool

    @classmethod
    def from_arrays(
        cls,
        coefficients: ArrayLike,
        sigma2: float,
        xtx_inverse: ArrayLike,
        response: ArrayLike,
        design_matrix: ArrayLike,
        *,
        has_intercept: bool,
    ) -> FittedModel:
        """
        Build a FittedModel from the outputs of a fitting routine.

        Args:
            coefficients: β, length p
            sigma2: Residual variance estimate σ² (finite, >= 0)
            xtx_inverse: (X'X)⁻¹, shape (p, p)
            response: Response vector y, length n
            design_matrix: Design matrix, term-major, shape (p, n)
            has_intercept: Whether the last term is an intercept

        Returns:
            Validated FittedModel owning float64 copies of the arrays

        Raises:
            ValidationError: If any array is non-numeric or non-finite,
                or sigma2 is negative
            DimensionError: If the arrays do not agree on p and n
        """
        beta = np.array(check_array(coefficients, 'coefficients'), dtype=np.float64)
        xtx_inv = np.array(check_array(xtx_inverse, 'xtx_inverse'), dtype=np.float64)
        y = np.array(check_array(response, 'response'), dtype=np.float64)
        X = np.array(check_array(design_matrix, 'design_matrix'), dtype=np.float64)

        model = cls(
            _coefficients=beta,
            _sigma2=float(sigma2),
            _xtx_inverse=xtx_inv,
            _response=y,
            _design_matrix=X,
            _has_intercept=bool(has_intercept),
        )
        check_model(model)
        return model

    # === Properties ===

    @property
    def coefficients(self) -> NDArray[np.floating[Any]]:
        """Coefficient vector β (p,)."""
        return self._coefficients

    @property
    def sigma2(self) -> float:
        """Residual variance estimate σ²."""
        return self._sigma2

    @property
    def xtx_inverse(self) -> NDArray[np.floating[Any]]:
        """Inverse Gram matrix (X'X)⁻¹ (p x p)."""
        return self._xtx_inverse

    @property
    def response(self) -> NDArray[np.floating[Any]]:
        """Response vector (n,)."""
        return self._response

    @property
    def design_matrix(self) -> NDArray[np.floating[Any]]:
        """Design matrix, term-major (p x n)."""
        return self._design_matrix

    @property
    def has_intercept(self) -> bool:
        return self._has_intercept

    @property
    def n(self) -> int:
        """Number of observations used in fitting."""
        return int(self._response.shape[0])

    @property
    def p(self) -> int:
        """Number of model terms, intercept included."""
        return int(self._coefficients.shape[0])

    @property
    def n_predictors(self) -> int:
        """Length of a raw observation vector (intercept excluded)."""
        return self.p - 1 if self._has_intercept else self.p

    # === Identity ===

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, FittedModel):
            return NotImplemented
        return (
            self._has_intercept == other._has_intercept
            and self._sigma2 == other._sigma2
            and np.array_equal(self._coefficients, other._coefficients)
            and np.array_equal(self._xtx_inverse, other._xtx_inverse)
            and np.array_equal(self._response, other._response)
            and np.array_equal(self._design_matrix, other._design_matrix)
        )

    def __hash__(self) -> int:
        return hash((
            self._has_intercept,
            self._sigma2 + 0.0,
            _array_key(self._coefficients),
            _array_key(self._xtx_inverse),
            _array_key(self._response),
            _array_key(self._design_matrix),
        ))

    def __repr__(self) -> str:
        return (
            f"FittedModel(n={self.n}, p={self.p}, "
            f"has_intercept={self._has_intercept}, sigma2={self._sigma2:.6g})"
        )


def check_model(model: LinearFit) -> None:
    """
    Verify a fitted model is structurally consistent.

    Checks the contracts the predictor relies on; it does not judge
    whether the fit itself is any good.

    Args:
        model: Any object implementing the LinearFit protocol

    Raises:
        ValidationError: Non-finite arrays or negative/non-finite sigma2
        DimensionError: β, (X'X)⁻¹, design matrix and response disagree
    """
    beta = np.asarray(model.coefficients)
    xtx_inv = np.asarray(model.xtx_inverse)
    y = np.asarray(model.response)
    X = np.asarray(model.design_matrix)

    check_1d(beta, 'coefficients')
    check_1d(y, 'response')
    check_square(xtx_inv, 'xtx_inverse')
    check_2d(X, 'design_matrix')
    for array, name in (
        (beta, 'coefficients'),
        (xtx_inv, 'xtx_inverse'),
        (y, 'response'),
        (X, 'design_matrix'),
    ):
        check_finite(array, name)
    check_non_negative(model.sigma2, 'sigma2')

    p = beta.shape[0]
    if p == 0:
        raise DimensionError("coefficients: model has no terms", expected=1, actual=0)

    check_length(xtx_inv, p, 'xtx_inverse')
    check_length(X, p, 'design_matrix')
    check_columns(X, y.shape[0], 'design_matrix')


def _array_key(array: NDArray[np.floating[Any]]) -> tuple[tuple[int, ...], bytes]:
    """Hashable key for an array; adding 0.0 folds -0.0 into 0.0."""
    return array.shape, (array + 0.0).tobytes()
