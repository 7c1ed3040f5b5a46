"""
Sample size planning for mean metrics (e.g., average order value, time on page).

In many product experiments you care about an "average" outcome:
- average order value
- average revenue per user
- average number of pages per session

The planning inputs are the current mean, its standard deviation per user and
the minimum detectable effect as a relative change in percent. The relative
effect is turned into an absolute one first:

    mde_abs = (mde / 100) * mean

For two independent groups of equal size n, the standard error of the
difference in means is sqrt(2 * sigma^2 / n). Solving for n gives:

    n = 2 * sigma^2 * (quantile_alpha + quantile_beta)^2 / mde_abs^2
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .power import SampleSize, refine_sample_size


@dataclass(frozen=True)
class ContinuousEffect:
    """Variance and effect model for a relative change in a mean."""

    mean: float
    standard_deviation: float
    minimum_detectable_effect: float

    @property
    def absolute_effect(self) -> float:
        return np.float64(self.minimum_detectable_effect) / 100.0 * self.mean

    def sample_size(self, quantile_alpha: float, quantile_beta: float) -> float:
        variance = np.float64(self.standard_deviation) ** 2
        return 2.0 * variance * (quantile_alpha + quantile_beta) ** 2 / self.absolute_effect**2


def calculate_continuous_sample_size(
    mean: float,
    standard_deviation: float,
    minimum_detectable_effect: float,
    significance: float,
    power: float,
    variations: int = 1,
) -> SampleSize:
    """
    Required sample size per group for detecting a relative change in a mean.

    Parameters
    ----------
    mean:
        Expected mean of the metric in the control group.

    standard_deviation:
        Expected standard deviation of the metric per user (same units as the mean).

    minimum_detectable_effect:
        Relative change to detect, in percent of the mean.

    Returns
    -------
    Integer sample size per group. A zero mean gives inf.
    """
    effect = ContinuousEffect(mean, standard_deviation, minimum_detectable_effect)
    return refine_sample_size(effect, significance, power, variations)
