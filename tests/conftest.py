"""
pytest configuration and shared fixtures.
"""

import numpy as np
import pytest

from pypredict.regression import FittedModel


def build_model(
    coefficients,
    sigma2,
    xtx_inverse,
    *,
    n,
    has_intercept=True,
):
    """
    FittedModel with the given parameters and a placeholder fit of size n.

    The design matrix is term-major (p x n); with an intercept its last
    row is all ones.
    """
    beta = np.asarray(coefficients, dtype=np.float64)
    p = beta.shape[0]
    X_terms = np.tile(np.arange(1.0, n + 1.0), (p, 1))
    if has_intercept:
        X_terms[-1] = 1.0
    y = np.zeros(n)
    return FittedModel.from_arrays(
        coefficients=beta,
        sigma2=sigma2,
        xtx_inverse=xtx_inverse,
        response=y,
        design_matrix=X_terms,
        has_intercept=has_intercept,
    )


def fit_ols(X, y, *, has_intercept=True):
    """
    Least-squares fit producing a FittedModel (test helper only).

    X is observation-major without the intercept column; the intercept
    column is appended last when has_intercept is True.
    """
    X = np.asarray(X, dtype=np.float64)
    if has_intercept:
        X = np.column_stack([X, np.ones(X.shape[0])])
    n, p = X.shape
    xtx_inv = np.linalg.inv(X.T @ X)
    beta = xtx_inv @ X.T @ y
    resid = y - X @ beta
    sigma2 = float(resid @ resid) / (n - p)
    return FittedModel.from_arrays(
        coefficients=beta,
        sigma2=sigma2,
        xtx_inverse=xtx_inv,
        response=y,
        design_matrix=X.T,
        has_intercept=has_intercept,
    )


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def make_model():
    """Factory for FittedModel with placeholder data, see build_model."""
    return build_model


@pytest.fixture
def ols():
    """Factory fitting OLS on (X, y), see fit_ols."""
    return fit_ols


@pytest.fixture
def worked_model():
    """
    Intercept + one slope: β = [slope 3.0, intercept 2.0], σ² = 1,
    (X'X)⁻¹ = diag(0.1, 0.5), n = 10 so df = 10 - 2 = 8.
    """
    return build_model(
        [3.0, 2.0],
        1.0,
        [[0.1, 0.0], [0.0, 0.5]],
        n=10,
    )


@pytest.fixture
def regression_data(rng):
    """Observations (n x 2) and response from a known linear model."""
    n = 50
    X = rng.standard_normal((n, 2))
    y = X @ np.array([1.5, -0.7]) + 4.0 + rng.standard_normal(n) * 0.5
    return X, y


@pytest.fixture
def fitted_model(regression_data):
    """OLS fit with intercept on regression_data."""
    X, y = regression_data
    return fit_ols(X, y)


@pytest.fixture
def new_observations(rng):
    """Fresh observations for prediction (5 x 2)."""
    return rng.standard_normal((5, 2))
