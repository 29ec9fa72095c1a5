"""
Tests for batch prediction.

Validates:
    - predict(M, a)[i] == predict(M[i], a) in row order
    - predict_design_matrix() never appends the intercept
    - Column-wise accessors, metadata and warnings on PredictionSolution
    - Agreement with the textbook formulas on a real least-squares fit
"""

import numpy as np
import pytest
from scipy import stats as sp_stats

from pypredict.core.exceptions import DegreesOfFreedomError, DimensionError, ValidationError
from pypredict.prediction import Prediction, PredictionSolution, Predictor


# ═══════════════════════════════════════════════════════════════════════
# Raw observations
# ═══════════════════════════════════════════════════════════════════════


class TestBatchObservations:

    def test_returns_solution(self, fitted_model, new_observations):
        result = Predictor.from_model(fitted_model).predict(new_observations, 0.05)
        assert isinstance(result, PredictionSolution)
        assert len(result) == 5
        assert all(isinstance(p, Prediction) for p in result)

    def test_elementwise_equal_to_single(self, fitted_model, new_observations):
        predictor = Predictor.from_model(fitted_model)
        batch = predictor.predict(new_observations, 0.1)
        for i in range(new_observations.shape[0]):
            assert batch[i] == predictor.predict(new_observations[i], 0.1)

    def test_order_preserved(self, worked_model):
        obs = np.array([[3.0], [-1.0], [10.0], [0.0]])
        batch = Predictor.from_model(worked_model).predict(obs, 0.05)
        np.testing.assert_allclose(batch.estimates, 3.0 * obs[:, 0] + 2.0)

    def test_fortran_ordered_input(self, fitted_model, new_observations):
        predictor = Predictor.from_model(fitted_model)
        batch = predictor.predict(np.asfortranarray(new_observations), 0.05)
        for i, p in enumerate(batch):
            assert p == predictor.predict(new_observations[i], 0.05)

    def test_nested_list_input(self, worked_model):
        batch = Predictor.from_model(worked_model).predict([[4.0], [5.0]], 0.05)
        assert batch[0].estimate == pytest.approx(14.0)
        assert batch[1].estimate == pytest.approx(17.0)

    def test_wrong_column_count(self, fitted_model):
        with pytest.raises(DimensionError, match="observations: expected 2 columns, got 3"):
            Predictor.from_model(fitted_model).predict(np.zeros((4, 3)), 0.05)

    def test_non_finite_row(self, fitted_model):
        X = np.zeros((3, 2))
        X[1, 0] = np.inf
        with pytest.raises(ValidationError, match="non-finite"):
            Predictor.from_model(fitted_model).predict(X, 0.05)

    def test_invalid_alpha(self, fitted_model, new_observations):
        with pytest.raises(ValidationError, match="alpha"):
            Predictor.from_model(fitted_model).predict(new_observations, 1.0)

    def test_degenerate_df(self, make_model):
        predictor = Predictor.from_model(make_model([1.0, 2.0], 1.0, np.eye(2), n=2))
        with pytest.raises(DegreesOfFreedomError):
            predictor.predict(np.ones((3, 1)), 0.05)

    def test_empty_batch(self, fitted_model):
        batch = Predictor.from_model(fitted_model).predict(np.zeros((0, 2)), 0.05)
        assert len(batch) == 0
        assert batch.estimates.shape == (0,)
        assert batch.confidence_intervals.shape == (0, 2)
        assert "no rows to predict" in batch.warnings


# ═══════════════════════════════════════════════════════════════════════
# Pre-built design matrix
# ═══════════════════════════════════════════════════════════════════════


class TestDesignMatrix:

    def test_rows_used_unchanged(self, worked_model):
        rows = np.array([[4.0, 1.0], [5.0, 1.0], [0.0, 1.0]])
        batch = Predictor.from_model(worked_model).predict_design_matrix(rows, 0.05)
        np.testing.assert_allclose(batch.estimates, rows @ worked_model.coefficients)

    def test_matches_raw_observation_path(self, fitted_model, new_observations):
        predictor = Predictor.from_model(fitted_model)
        full = np.column_stack([new_observations, np.ones(new_observations.shape[0])])
        from_design = predictor.predict_design_matrix(full, 0.05)
        from_raw = predictor.predict(new_observations, 0.05)
        np.testing.assert_allclose(from_design.estimates, from_raw.estimates, rtol=1e-12)
        np.testing.assert_allclose(
            from_design.standard_errors, from_raw.standard_errors, rtol=1e-12
        )

    def test_rescoring_training_rows(self, fitted_model, regression_data):
        X, y = regression_data
        predictor = Predictor.from_model(fitted_model)
        batch = predictor.predict_design_matrix(fitted_model.design_matrix.T, 0.05)
        fitted = fitted_model.design_matrix.T @ fitted_model.coefficients
        np.testing.assert_allclose(batch.estimates, fitted, rtol=1e-12)
        assert len(batch) == X.shape[0]

    def test_raw_observation_rejected(self, worked_model):
        """A row without the intercept column is the wrong width here."""
        with pytest.raises(DimensionError, match="design_matrix: expected 2 columns, got 1"):
            Predictor.from_model(worked_model).predict_design_matrix([[4.0]], 0.05)

    def test_requires_2d(self, worked_model):
        with pytest.raises(DimensionError, match="expected 2D array, got 1D"):
            Predictor.from_model(worked_model).predict_design_matrix([4.0, 1.0], 0.05)

    def test_intercept_not_appended_for_intercept_model(self, worked_model):
        predictor = Predictor.from_model(worked_model)
        batch = predictor.predict_design_matrix([[4.0, 1.0]], 0.05)
        assert batch[0] == predictor.predict([4.0], 0.05)
        assert batch.info['intercept_appended'] is False

    def test_method_recorded(self, worked_model):
        predictor = Predictor.from_model(worked_model)
        assert predictor.predict_design_matrix([[4.0, 1.0]]).method == 'design_matrix'
        assert predictor.predict([[4.0]]).method == 'observations'
        assert predictor.predict([[4.0]]).info['intercept_appended'] is True


# ═══════════════════════════════════════════════════════════════════════
# Reference formulas
# ═══════════════════════════════════════════════════════════════════════


class TestAgainstReference:
    """Compare against predict.lm-style formulas computed directly."""

    def test_matches_textbook(self, fitted_model, new_observations):
        alpha = 0.05
        batch = Predictor.from_model(fitted_model).predict(new_observations, alpha)

        X0 = np.column_stack([new_observations, np.ones(new_observations.shape[0])])
        fit = X0 @ fitted_model.coefficients
        se = np.sqrt(
            fitted_model.sigma2
            * np.einsum('ij,jk,ik->i', X0, fitted_model.xtx_inverse, X0)
        )
        df = fitted_model.n - fitted_model.p
        t = sp_stats.t.ppf(1 - alpha / 2, df)
        se_pred = np.sqrt(fitted_model.sigma2 + se ** 2)

        np.testing.assert_allclose(batch.estimates, fit, rtol=1e-12)
        np.testing.assert_allclose(batch.standard_errors, se, rtol=1e-10)
        np.testing.assert_allclose(
            batch.confidence_intervals, np.column_stack([fit - t * se, fit + t * se]),
            rtol=1e-10,
        )
        np.testing.assert_allclose(
            batch.prediction_intervals,
            np.column_stack([fit - t * se_pred, fit + t * se_pred]),
            rtol=1e-10,
        )

    def test_confidence_interval_coverage(self, ols):
        """About 95% of CIs built from repeated fits cover the true mean."""
        rng = np.random.default_rng(7)
        x0 = np.array([0.5])
        true_mean = 1.0 + 2.0 * 0.5
        covered = 0
        n_sims = 400
        for _ in range(n_sims):
            X = rng.uniform(-1, 1, size=(30, 1))
            y = 1.0 + 2.0 * X[:, 0] + rng.standard_normal(30)
            p = Predictor.from_model(ols(X, y)).predict(x0, 0.05)
            covered += p.confidence_interval.contains(true_mean)
        assert 0.91 <= covered / n_sims <= 0.99
