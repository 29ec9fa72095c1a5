"""
Fitted linear regression models.

This module holds the hand-over point between fitting and prediction.
Fitting itself happens elsewhere; FittedModel only receives and checks
its outputs.

Public API:
    FittedModel.from_arrays(...) -> FittedModel
    check_model(model) -> None

Example:
    >>> from pypredict.regression import FittedModel
    >>> model = FittedModel.from_arrays(
    ...     coefficients=[3.0, 2.0], sigma2=1.0,
    ...     xtx_inverse=[[0.1, 0.0], [0.0, 0.5]],
    ...     response=y, design_matrix=X_terms, has_intercept=True,
    ... )
"""

from pypredict.regression.model import FittedModel, check_model

__all__ = [
    "FittedModel",
    "check_model",
]
