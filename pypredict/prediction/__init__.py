"""
Predictions and interval estimates for linear regression.

Public API:
    Predictor.from_model(model) -> Predictor
    predict(model, observations, alpha=...) -> Prediction | PredictionSolution
    predict_design_matrix(model, design_matrix, alpha=...) -> PredictionSolution

Every prediction carries a point estimate, the standard error of the
fitted mean, a confidence interval for the mean response and a wider
prediction interval for a single new response.

Example:
    >>> from pypredict.prediction import Predictor
    >>> predictor = Predictor.from_model(model)
    >>> p = predictor.predict([4.0], alpha=0.05)
    >>> p.estimate, p.confidence_interval.as_tuple()
"""

from pypredict.prediction._common import DEFAULT_ALPHA, Interval, Prediction, PredictionParams
from pypredict.prediction.predictor import Predictor
from pypredict.prediction.solution import PredictionSolution
from pypredict.prediction.solvers import predict, predict_design_matrix

__all__ = [
    "predict",
    "predict_design_matrix",
    "Predictor",
    "Prediction",
    "PredictionSolution",
    "PredictionParams",
    "Interval",
    "DEFAULT_ALPHA",
]
