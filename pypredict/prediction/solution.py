"""
Prediction solution types.

PredictionSolution wraps Result[PredictionParams] and behaves as an
immutable sequence of Prediction objects, one per input row.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, overload
import numpy as np
from numpy.typing import NDArray

from pypredict.core.result import Result
from pypredict.prediction._common import Prediction, PredictionParams


@dataclass(frozen=True, eq=False)
class PredictionSolution(Sequence):
    """
    User-facing batch prediction results.

    Indexing, iteration and len() follow input row order:
    ``solution[i]`` is the Prediction for row i. Column-wise views are
    available as NumPy arrays, and summary() prints an R predict.lm
    style table.
    """
    _result: Result[PredictionParams]

    # --- Sequence protocol ---

    @overload
    def __getitem__(self, index: int) -> Prediction: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[Prediction, ...]: ...

    def __getitem__(self, index):
        return self._result.params.predictions[index]

    def __len__(self) -> int:
        return len(self._result.params.predictions)

    # --- Column views ---

    @property
    def predictions(self) -> tuple[Prediction, ...]:
        return self._result.params.predictions

    @property
    def estimates(self) -> NDArray[np.floating[Any]]:
        """Point estimates, shape (k,)."""
        return np.array([p.estimate for p in self.predictions], dtype=np.float64)

    @property
    def standard_errors(self) -> NDArray[np.floating[Any]]:
        """Standard errors of fit, shape (k,)."""
        return np.array([p.standard_error for p in self.predictions], dtype=np.float64)

    @property
    def confidence_intervals(self) -> NDArray[np.floating[Any]]:
        """Confidence bounds, shape (k, 2) as [lower, upper]."""
        return _bounds([p.confidence_interval.as_tuple() for p in self.predictions])

    @property
    def prediction_intervals(self) -> NDArray[np.floating[Any]]:
        """Prediction bounds, shape (k, 2) as [lower, upper]."""
        return _bounds([p.prediction_interval.as_tuple() for p in self.predictions])

    # --- Parameters and metadata ---

    @property
    def alpha(self) -> float:
        return self._result.params.alpha

    @property
    def conf_level(self) -> float:
        """Coverage of both intervals, 1 - alpha."""
        return 1.0 - self._result.params.alpha

    @property
    def df(self) -> int:
        return self._result.params.df

    @property
    def critical_value(self) -> float:
        """Student-t quantile at 1 - alpha/2 used for every row."""
        return self._result.params.critical_value

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def method(self) -> str:
        """'observations' or 'design_matrix'."""
        return self._result.method

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """Generate R-style predict.lm output."""
        lines = [
            "Linear Regression Predictions",
            "=" * 78,
            f"Rows: {len(self)}",
            f"Confidence level: {self.conf_level:.4g}",
            f"Residual DF: {self.df}",
            f"t critical value: {self.critical_value:.6f}",
            "",
            f"{'':<6} {'fit':>11} {'se.fit':>10} "
            f"{'conf.lwr':>11} {'conf.upr':>11} {'pred.lwr':>11} {'pred.upr':>11}",
            "-" * 78,
        ]

        for i, p in enumerate(self.predictions):
            ci = p.confidence_interval
            pi = p.prediction_interval
            lines.append(
                f"{f'[{i}]':<6} {p.estimate:11.5f} {p.standard_error:10.5f} "
                f"{ci.lower:11.5f} {ci.upper:11.5f} {pi.lower:11.5f} {pi.upper:11.5f}"
            )

        lines.append("-" * 78)
        lines.append(f"Method: {self.method}")
        if self.timing:
            lines.append(f"Time: {self.timing.get('total_seconds', 0):.4f}s")
        for w in self.warnings:
            lines.append(f"Warning: {w}")

        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"PredictionSolution(rows={len(self)}, alpha={self.alpha}, "
            f"df={self.df}, method={self.method!r})"
        )


def _bounds(pairs: list[tuple[float, float]]) -> NDArray[np.floating[Any]]:
    """Stack (lower, upper) pairs into a (k, 2) array, keeping shape when empty."""
    return np.array(pairs, dtype=np.float64).reshape(len(pairs), 2)
