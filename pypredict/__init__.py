"""
PyPredict: predictions and interval estimates for linear regression.

Given a completed multiple linear regression fit, computes point
predictions, standard errors of fit, confidence intervals for the mean
response and prediction intervals for new observations, using the
Student-t reference distribution.

Submodules:
    regression: FittedModel container for a completed fit
    prediction: Predictor and batch prediction results
    core: Exceptions, validation, protocols, NumPy/SciPy defaults
"""

__version__ = "0.1.0"

from pypredict import regression
from pypredict import prediction

__all__ = [
    "__version__",
    "regression",
    "prediction",
]
