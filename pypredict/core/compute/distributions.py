"""
Student-t quantiles via SciPy.

This is the default QuantileSource. It replicates R's qt() to machine
precision, which is what the interval estimates are validated against.
"""

from scipy import stats as sp_stats


class StudentTQuantiles:
    """QuantileSource backed by scipy.stats.t.ppf."""

    @property
    def name(self) -> str:
        return 'scipy_t'

    def quantile(self, probability: float, df: int) -> float:
        """
        Inverse CDF of the Student-t distribution.

        Args:
            probability: Cumulative probability in (0, 1)
            df: Degrees of freedom (> 0)

        Returns:
            The t value with P(T <= t) = probability
        """
        return float(sp_stats.t.ppf(probability, df))

    def __repr__(self) -> str:
        return "StudentTQuantiles()"
