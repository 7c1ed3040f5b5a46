"""
Sample size estimation for A/B testing.

This module answers the planning question:

    "How many users do I need in each group to reliably detect an effect?"

Key terms
-------------------------
- Significance (confidence level):
  How strict we are about false positives. 0.95 means we accept about a 5%
  false positive rate when there is no real effect.

- Power:
  The probability you detect a real effect (when there actually is one).
  Power = 0.8 is a common target, meaning an 80% chance of detecting the effect.

- Minimum detectable effect:
  The smallest relative change (in percent) you care about detecting.

How the estimate is computed
----------------------------
Every metric family (conversion, mean, ratio) has a formula of the shape

    n = f(quantile_alpha, quantile_beta)

where the quantiles come from a distribution and f encodes the metric's
variance and effect size. Those formulas live next to each metric
(`absize.conversion`, `absize.mean`, `absize.ratio`) as small "effect model"
objects. This module runs the shared procedure on top of them:

1) Correct the significance for the number of treatment arms.
2) Start with normal quantiles (a quick first guess for n).
3) Refine four times: derive the degrees of freedom of a two-sample t-test
   from the current n, look up t quantiles, and recompute n.

n is rounded up on every pass, so the degrees of freedom always come from a
whole number of users. The loop always runs exactly four times and the value
from the last pass is the answer.

All sample sizes returned are "per group" (users in control and in each
treatment arm).
"""

from __future__ import annotations

from typing import Protocol, Union

import numpy as np
import structlog

from .config import ensure_logging_configured
from .multiple_testing import apply_bonferroni_correction
from .quantiles import z_score
from .t_distribution import t_value

logger = structlog.get_logger(__name__)

REFINEMENT_PASSES = 4

SampleSize = Union[int, float]


class EffectModel(Protocol):
    """Metric-specific part of the sample size formula."""

    def sample_size(self, quantile_alpha: float, quantile_beta: float) -> float:
        ...


def round_up(value: float) -> SampleSize:
    """
    Round a raw sample size up to a whole number of users.

    Degenerate inputs (for example a zero mean) produce inf or nan in the
    formulas. Those are returned unchanged as floats instead of raising.
    """
    if not np.isfinite(value):
        return float(value)
    return int(np.ceil(value))


def degrees_of_freedom(sample_size: SampleSize) -> SampleSize:
    """Degrees of freedom for a pooled two-sample t-test with equal groups."""
    return 2 * sample_size - 2


def refine_sample_size(
    model: EffectModel,
    significance: float,
    power: float,
    variations: int = 1,
) -> SampleSize:
    """
    Required sample size per group for an effect model.

    Parameters
    ----------
    model:
        Object with a `sample_size(quantile_alpha, quantile_beta)` method that
        returns the unrounded per-group sample size.

    significance:
        Nominal confidence level, for example 0.95.

    power:
        Desired power, for example 0.8.

    variations:
        Number of treatment arms excluding the control. More than one arm
        triggers the multiple comparison correction.

    Returns
    -------
    Integer sample size per group, or inf/nan for degenerate inputs.
    """
    ensure_logging_configured()
    corrected_significance = apply_bonferroni_correction(significance, variations)

    # Division by zero is part of the contract for degenerate inputs.
    with np.errstate(divide="ignore", invalid="ignore"):
        sample_size = round_up(
            model.sample_size(z_score(corrected_significance), z_score(power))
        )
        logger.debug(
            "sample_size_initial_estimate",
            model=type(model).__name__,
            corrected_significance=corrected_significance,
            sample_size=sample_size,
        )

        for iteration in range(1, REFINEMENT_PASSES + 1):
            df = degrees_of_freedom(sample_size)

            t_alpha = t_value(df, corrected_significance)
            t_beta = t_value(df, power)

            sample_size = round_up(model.sample_size(t_alpha, t_beta))
            logger.debug(
                "sample_size_refined",
                iteration=iteration,
                degrees_of_freedom=df,
                t_alpha=t_alpha,
                t_beta=t_beta,
                sample_size=sample_size,
            )

    return sample_size
