"""
Sample size planning for conversion rate metrics (binary metrics)

This module helps answer questions like:

  "How many visitors do I need per variant to notice a 10% relative lift in
   booking conversion?"

A conversion metric is binary: each user either converts or does not. The
planning inputs are:

- baseline conversion rate, in percent (for example 10 means 10%)
- minimum detectable effect, as a relative lift in percent
  (10 means the treatment rate is 10% higher than the baseline, 10% -> 11%)

The basic model
---------------
Each user outcome is a Bernoulli random variable with probability p. With
p1 the control rate and p2 the treatment rate:

    p1 = baseline / 100
    p2 = p1 * (1 + mde / 100)

The spread of the test statistic is different under "no effect" and under
"the effect is real", so the formula uses two spread terms:

    sd1 = sqrt(2 * p1 * (1 - p1))                   (both groups at p1)
    sd2 = sqrt(p1 * (1 - p1) + p2 * (1 - p2))       (one group at each rate)

and the per-group sample size is

    n = (quantile_alpha * sd1 + quantile_beta * sd2)^2 / (p2 - p1)^2

Edge cases are not guarded. A baseline of 0 makes both rates 0 and the
formula becomes 0 / 0, which is returned as nan.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .power import SampleSize, refine_sample_size


@dataclass(frozen=True)
class BinomialEffect:
    """Variance and effect model for a relative lift in conversion rate."""

    baseline_value: float
    minimum_detectable_effect: float

    @property
    def control_rate(self) -> float:
        return np.float64(self.baseline_value) / 100.0

    @property
    def treatment_rate(self) -> float:
        return self.control_rate * (1.0 + self.minimum_detectable_effect / 100.0)

    def sample_size(self, quantile_alpha: float, quantile_beta: float) -> float:
        p1 = self.control_rate
        p2 = self.treatment_rate

        sd1 = np.sqrt(2.0 * p1 * (1.0 - p1))
        sd2 = np.sqrt(p1 * (1.0 - p1) + p2 * (1.0 - p2))

        numerator = (quantile_alpha * sd1 + quantile_beta * sd2) ** 2
        denominator = (p2 - p1) ** 2
        return numerator / denominator


def calculate_binomial_sample_size(
    baseline_value: float,
    minimum_detectable_effect: float,
    significance: float,
    power: float,
    variations: int = 1,
) -> SampleSize:
    """
    Required sample size per group for detecting a relative conversion lift.

    Parameters
    ----------
    baseline_value:
        Expected conversion rate in the control group, in percent (0-100).

    minimum_detectable_effect:
        Relative lift to detect, in percent. 10 means +10% of the baseline rate.

    significance:
        Nominal confidence level for a two-sided test, for example 0.95.

    power:
        Desired power (probability of detecting the effect if it is real).

    variations:
        Number of treatment arms, not counting the control.

    Returns
    -------
    Integer sample size per group (nan or inf for degenerate inputs).
    """
    effect = BinomialEffect(baseline_value, minimum_detectable_effect)
    return refine_sample_size(effect, significance, power, variations)
