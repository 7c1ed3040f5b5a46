"""
Closed-form approximation of the Student-t quantile.

Why not just use the normal distribution?
-----------------------------------------
When a test compares two group averages, the test statistic follows a
Student-t distribution. The t distribution has heavier tails than the normal
distribution, so for the same confidence level its quantile is a bit larger.
How much larger depends on the degrees of freedom (df):

- small df (small samples): noticeably larger than the normal quantile
- large df (large samples): almost the same as the normal quantile

A practical approximation
-------------------------
This module does not evaluate the t quantile exactly. It starts from a known
normal quantile and adds two correction terms that shrink as df grows:

    t ≈ z + c1 / df + c2 / df^2

The coefficients are fixed for the three most common confidence levels
(90%, 95% and 99%). Every other level uses generic coefficients on top of the
normal quantile from `absize.quantiles`.
"""

from __future__ import annotations

from .quantiles import initial_t_score, z_score

# Below this many degrees of freedom the series above is not usable.
MIN_DEGREES_OF_FREEDOM = 3

SMALL_SAMPLE_WIDENING = 1.5


def t_value(degrees_of_freedom: float, confidence_level: float) -> float:
    """
    Approximate two-tailed Student-t quantile.

    Parameters
    ----------
    degrees_of_freedom:
        Degrees of freedom of the t distribution. For a two-sample test with
        n users per group this is 2n - 2.

    confidence_level:
        Two-sided confidence level, for example 0.95.

    Returns
    -------
    The approximate quantile.

    Notes
    -----
    Branch selection compares the upper-tail probability with 0.975, 0.95 and
    0.995 using exact equality. A level that is merely close to 0.95, 0.90 or
    0.99 uses the generic coefficients.
    """
    if degrees_of_freedom < MIN_DEGREES_OF_FREEDOM:
        # Conservative estimate for near-degenerate samples.
        return initial_t_score(confidence_level) * SMALL_SAMPLE_WIDENING

    alpha = 1.0 - confidence_level
    a = 1.0 - alpha / 2.0
    df = degrees_of_freedom

    if a == 0.975:
        return 1.96 + 0.958 / df + 0.25 / df**2
    if a == 0.95:
        return 1.645 + 0.727 / df + 0.18 / df**2
    if a == 0.995:
        return 2.576 + 1.28 / df + 0.38 / df**2

    return z_score(confidence_level) + 0.85 / df + 0.22 / df**2
