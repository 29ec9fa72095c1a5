"""
Common types for prediction.

Defines the Interval and Prediction value types and the PredictionParams
payload carried by batch results.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator


DEFAULT_ALPHA = 0.05


@dataclass(frozen=True)
class Interval:
    """
    Closed interval [lower, upper] on the response scale.

    Unpacks like a pair: ``lwr, upr = prediction.confidence_interval``.
    """
    lower: float
    upper: float

    @classmethod
    def around(cls, center: float, half_width: float) -> Interval:
        """Symmetric interval center ± half_width."""
        return cls(lower=center - half_width, upper=center + half_width)

    @property
    def width(self) -> float:
        return self.upper - self.lower

    @property
    def midpoint(self) -> float:
        return (self.lower + self.upper) / 2.0

    def contains(self, value: float) -> bool:
        """Whether value lies in the closed interval."""
        return self.lower <= value <= self.upper

    def as_tuple(self) -> tuple[float, float]:
        return (self.lower, self.upper)

    def __iter__(self) -> Iterator[float]:
        return iter(self.as_tuple())


@dataclass(frozen=True)
class Prediction:
    """
    Prediction at a single predictor vector.

    Attributes
    ----------
    estimate : float
        Point estimate x'β.
    standard_error : float
        Standard error of the fitted mean, sqrt(σ² x'(X'X)⁻¹x).
    confidence_interval : Interval
        Interval for the mean response at x.
    prediction_interval : Interval
        Interval for a single new response at x; always contains the
        confidence interval.
    """
    estimate: float
    standard_error: float
    confidence_interval: Interval
    prediction_interval: Interval


@dataclass(frozen=True)
class PredictionParams:
    """
    Parameter payload for batch prediction.

    predictions[i] corresponds to row i of the input matrix.
    """
    predictions: tuple[Prediction, ...]
    alpha: float
    df: int
    critical_value: float
