"""
Functional entry points for prediction.

Each function builds a Predictor with the default capabilities and
delegates to it. Hold on to a Predictor instead when making repeated
queries against the same model.
"""

from numpy.typing import ArrayLike

from pypredict.core.protocols import LinearFit
from pypredict.prediction._common import DEFAULT_ALPHA, Prediction
from pypredict.prediction.predictor import Predictor
from pypredict.prediction.solution import PredictionSolution


def predict(
    model: LinearFit,
    observations: ArrayLike,
    *,
    alpha: float = DEFAULT_ALPHA,
) -> Prediction | PredictionSolution:
    """
    Predict responses for new raw observations.

    Args:
        model: Completed fit
        observations: One observation (1D) or one per row (2D), without
            the intercept column
        alpha: Significance level in (0, 1)

    Returns:
        Prediction for a single observation, PredictionSolution otherwise

    Example:
        >>> from pypredict.prediction import predict
        >>> result = predict(model, [[4.0], [5.0]], alpha=0.05)
        >>> print(result.summary())
    """
    return Predictor.from_model(model).predict(observations, alpha)


def predict_design_matrix(
    model: LinearFit,
    design_matrix: ArrayLike,
    *,
    alpha: float = DEFAULT_ALPHA,
) -> PredictionSolution:
    """
    Predict responses for the rows of a complete design matrix.

    Rows must already include the intercept column when the model has
    one; nothing is appended.

    Args:
        model: Completed fit
        design_matrix: Observation-major matrix (k x p)
        alpha: Significance level in (0, 1)

    Returns:
        PredictionSolution, one Prediction per row
    """
    return Predictor.from_model(model).predict_design_matrix(design_matrix, alpha)
