"""
Sample size planning for ratio metrics (for metrics like revenue per mille)

A ratio metric has the form:

    ratio = (total numerator) / (total denominator)

Examples
--------
1) Revenue per thousand impressions (RPM):
   numerator   = revenue
   denominator = impressions / 1000

2) Average revenue per user (ARPU):
   numerator   = revenue
   denominator = users

Why ratio metrics are planned differently
-----------------------------------------
For a ratio the natural unit of change is relative: a 10% lift in RPM means
the same thing whether RPM is 5.5 or 55. So instead of turning the minimum
detectable effect into an absolute difference (as the mean module does), the
noise is expressed relative to the mean too, through the coefficient of
variation:

    cv = standard_deviation / mean

and the per-group sample size is

    n = 2 * cv^2 * (quantile_alpha + quantile_beta)^2 / (mde / 100)^2
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .power import SampleSize, refine_sample_size


@dataclass(frozen=True)
class RatioEffect:
    """Variance and effect model for a relative change in a ratio metric."""

    mean: float
    standard_deviation: float
    minimum_detectable_effect: float

    @property
    def coefficient_of_variation(self) -> float:
        return np.float64(self.standard_deviation) / self.mean

    def sample_size(self, quantile_alpha: float, quantile_beta: float) -> float:
        relative_effect = np.float64(self.minimum_detectable_effect) / 100.0
        cv = self.coefficient_of_variation
        return 2.0 * cv**2 * (quantile_alpha + quantile_beta) ** 2 / relative_effect**2


def calculate_ratio_sample_size(
    mean: float,
    standard_deviation: float,
    minimum_detectable_effect: float,
    significance: float,
    power: float,
    variations: int = 1,
) -> SampleSize:
    """
    Required sample size per group for detecting a relative change in a ratio metric.

    Inputs
    ------
    mean, standard_deviation:
        Expected value of the ratio and its standard deviation.

    minimum_detectable_effect:
        Relative change to detect, in percent. Used directly in the
        denominator of the formula, not converted to an absolute effect.

    significance, power, variations:
        Same meaning as for the other metric families.

    Returns
    -------
    Integer sample size per group. A zero mean gives inf.
    """
    effect = RatioEffect(mean, standard_deviation, minimum_detectable_effect)
    return refine_sample_size(effect, significance, power, variations)
