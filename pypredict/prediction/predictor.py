"""
Predictions and interval estimates from a fitted linear regression.

For a predictor vector x the Predictor computes:

    estimate  = x'β
    se_fit    = sqrt(σ² · x'(X'X)⁻¹x)
    t         = qt(1 - α/2, df)
    CI        = estimate ± t · se_fit
    PI        = estimate ± t · sqrt(σ² + se_fit²)

The confidence interval brackets the mean response at x. The prediction
interval adds the residual variance of one future observation, so it is
never narrower.

Two entry points exist on purpose. predict() takes raw observations and
appends the intercept term itself; predict_design_matrix() takes rows that
already carry it. Neither accepts a flag to switch between the two.
"""

from __future__ import annotations

import math
import warnings
from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pypredict.core.compute import NumpyLinearAlgebra, StudentTQuantiles, Timer
from pypredict.core.exceptions import (
    DegreesOfFreedomError,
    DimensionError,
    NumericalError,
)
from pypredict.core.protocols import LinearAlgebra, LinearFit, QuantileSource
from pypredict.core.result import Result
from pypredict.core.validation import (
    check_alpha,
    check_array,
    check_finite,
    check_length,
    check_columns,
)
from pypredict.prediction._common import (
    DEFAULT_ALPHA,
    Interval,
    Prediction,
    PredictionParams,
)
from pypredict.prediction.solution import PredictionSolution
from pypredict.regression.model import check_model


@dataclass(frozen=True, eq=False)
class Predictor:
    """
    Prediction engine bound to one fitted model.

    Immutable after construction: holds the model, a private read-only
    copy of (X'X)⁻¹, the residual degrees of freedom, and the linear
    algebra and quantile capabilities. Every call recomputes from that
    state, so one instance can serve concurrent callers.

    Construction:
        Predictor.from_model(model)
        Predictor.from_model(model, linalg=..., quantiles=...)

    Two predictors are equal iff their models are equal.
    """
    _model: LinearFit
    _xtx_inverse: NDArray[np.floating[Any]]
    _df: int
    _linalg: LinearAlgebra
    _quantiles: QuantileSource

    @classmethod
    def from_model(
        cls,
        model: LinearFit,
        *,
        linalg: LinearAlgebra | None = None,
        quantiles: QuantileSource | None = None,
    ) -> Predictor:
        """
        Create a predictor from a fitted model.

        Args:
            model: Completed fit (see pypredict.regression.FittedModel)
            linalg: Linear algebra capability; NumPy by default
            quantiles: Student-t quantile capability; SciPy by default

        Returns:
            Predictor ready for any number of queries

        Raises:
            ValidationError: If the model holds non-finite values or a
                negative residual variance
            DimensionError: If the model's arrays disagree in shape
        """
        check_model(model)

        if linalg is None:
            linalg = NumpyLinearAlgebra()
        if quantiles is None:
            quantiles = StudentTQuantiles()

        xtx_inverse = np.array(model.xtx_inverse, dtype=np.float64, copy=True)
        xtx_inverse.setflags(write=False)

        # Row count of the term-major design matrix is the number of terms.
        df = int(np.asarray(model.response).shape[0]) - int(linalg.nrow(model.design_matrix))

        if model.sigma2 == 0.0:
            warnings.warn(
                "Residual variance is zero; confidence and prediction "
                "intervals collapse to the point estimate.",
                RuntimeWarning,
                stacklevel=2,
            )

        return cls(
            _model=model,
            _xtx_inverse=xtx_inverse,
            _df=df,
            _linalg=linalg,
            _quantiles=quantiles,
        )

    # === Properties ===

    @property
    def model(self) -> LinearFit:
        return self._model

    @property
    def df(self) -> int:
        """Residual degrees of freedom used for the t reference distribution."""
        return self._df

    @property
    def xtx_inverse(self) -> NDArray[np.floating[Any]]:
        """Read-only copy of (X'X)⁻¹ owned by this predictor."""
        return self._xtx_inverse

    @property
    def n_terms(self) -> int:
        """Length of a full predictor vector (intercept included)."""
        return int(np.asarray(self._model.coefficients).shape[0])

    @property
    def n_predictors(self) -> int:
        """Length of a raw observation vector (intercept excluded)."""
        return self.n_terms - 1 if self._model.has_intercept else self.n_terms

    # === Public API ===

    def predict(
        self,
        observations: ArrayLike,
        alpha: float = DEFAULT_ALPHA,
    ) -> Prediction | PredictionSolution:
        """
        Predict from raw observations.

        A 1D input is a single observation and yields a Prediction. A 2D
        input holds one observation per row and yields a PredictionSolution
        whose i-th element equals predict(observations[i], alpha).

        If the model has an intercept, 1.0 is appended to every observation.

        Args:
            observations: Vector of length n_predictors, or matrix with
                n_predictors columns
            alpha: Significance level in (0, 1); intervals have coverage
                1 - alpha

        Returns:
            Prediction for a vector, PredictionSolution for a matrix

        Raises:
            ValidationError: If alpha is outside (0, 1) or the input is
                non-numeric or non-finite
            DimensionError: If the observation length is wrong or the
                input is neither 1D nor 2D
            DegreesOfFreedomError: If the model has df <= 0
        """
        X = np.asarray(check_array(observations, 'observations'), dtype=np.float64)
        alpha = check_alpha(alpha)

        if X.ndim == 1:
            check_length(X, self.n_predictors, 'observation')
            check_finite(X, 'observation')
            t_value = self._critical_value(alpha)
            return self._predict_vector(self._predictor_vector(X), t_value)

        if X.ndim == 2:
            check_columns(X, self.n_predictors, 'observations')
            check_finite(X, 'observations')
            return self._predict_rows(
                np.ascontiguousarray(X), alpha,
                method='observations', append_intercept=True,
            )

        raise DimensionError(
            f"observations: expected 1D or 2D array, got {X.ndim}D with shape {X.shape}",
            expected=2,
            actual=X.ndim,
        )

    def predict_design_matrix(
        self,
        design_matrix: ArrayLike,
        alpha: float = DEFAULT_ALPHA,
    ) -> PredictionSolution:
        """
        Predict one response per row of a complete design matrix.

        Rows are used exactly as given: they must already contain the
        intercept column when the model has one, and nothing is appended.

        Args:
            design_matrix: Observation-major matrix (k x n_terms)
            alpha: Significance level in (0, 1)

        Returns:
            PredictionSolution, one Prediction per row in row order

        Raises:
            ValidationError: If alpha is outside (0, 1) or the matrix is
                non-numeric or non-finite
            DimensionError: If the matrix is not 2D with n_terms columns
            DegreesOfFreedomError: If the model has df <= 0
        """
        X = np.asarray(check_array(design_matrix, 'design_matrix'), dtype=np.float64)
        alpha = check_alpha(alpha)

        if X.ndim != 2:
            raise DimensionError(
                f"design_matrix: expected 2D array, got {X.ndim}D with shape {X.shape}",
                expected=2,
                actual=X.ndim,
            )
        check_columns(X, self.n_terms, 'design_matrix')
        check_finite(X, 'design_matrix')

        return self._predict_rows(
            np.ascontiguousarray(X), alpha,
            method='design_matrix', append_intercept=False,
        )

    # === Internals ===

    def _predictor_vector(self, observation: NDArray[np.floating[Any]]) -> Any:
        if self._model.has_intercept:
            return self._linalg.append(observation, 1.0)
        return observation

    def _critical_value(self, alpha: float) -> float:
        if self._df <= 0:
            raise DegreesOfFreedomError(
                f"Residual degrees of freedom must be positive for interval "
                f"estimates, got df={self._df}",
                df=self._df,
            )
        return float(self._quantiles.quantile(1.0 - alpha / 2.0, self._df))

    def _standard_error_fit(self, x: Any) -> float:
        form = self._linalg.quadratic_form(x, self._xtx_inverse)
        if form < 0:
            raise NumericalError(
                f"Quadratic form x'(X'X)⁻¹x is negative ({form}); "
                f"xtx_inverse is not positive semi-definite"
            )
        return math.sqrt(self._model.sigma2 * form)

    def _predict_vector(self, x: Any, t_value: float) -> Prediction:
        sigma2 = self._model.sigma2
        estimate = self._linalg.dot(x, self._model.coefficients)
        se_fit = self._standard_error_fit(x)
        se_pred = math.sqrt(sigma2 + se_fit * se_fit)

        return Prediction(
            estimate=estimate,
            standard_error=se_fit,
            confidence_interval=Interval.around(estimate, t_value * se_fit),
            prediction_interval=Interval.around(estimate, t_value * se_pred),
        )

    def _predict_rows(
        self,
        X: NDArray[np.floating[Any]],
        alpha: float,
        *,
        method: str,
        append_intercept: bool,
    ) -> PredictionSolution:
        timer = Timer()
        timer.start()

        with timer.section('critical_value'):
            t_value = self._critical_value(alpha)

        n_rows = self._linalg.nrow(X)
        with timer.section('rows'):
            predictions = []
            for i in range(n_rows):
                row = self._linalg.row(X, i)
                x = self._predictor_vector(row) if append_intercept else row
                predictions.append(self._predict_vector(x, t_value))

        timer.stop()

        warnings_list: list[str] = []
        if n_rows == 0:
            warnings_list.append("no rows to predict")
        if self._model.sigma2 == 0.0:
            warnings_list.append(
                "residual variance is zero; intervals collapse to the estimate"
            )

        params = PredictionParams(
            predictions=tuple(predictions),
            alpha=alpha,
            df=self._df,
            critical_value=t_value,
        )
        info: dict[str, Any] = {
            'alpha': alpha,
            'df': self._df,
            'critical_value': t_value,
            'n_rows': n_rows,
            'intercept_appended': append_intercept and bool(self._model.has_intercept),
        }

        return PredictionSolution(
            _result=Result(
                params=params,
                info=info,
                timing=timer.result(),
                method=method,
                warnings=tuple(warnings_list),
            )
        )

    # === Identity ===

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Predictor):
            return NotImplemented
        return self._model == other._model

    def __hash__(self) -> int:
        return hash(self._model)

    def __repr__(self) -> str:
        return (
            f"Predictor(n_terms={self.n_terms}, "
            f"has_intercept={bool(self._model.has_intercept)}, df={self._df})"
        )
