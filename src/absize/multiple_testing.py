"""
Multiple comparison correction for sample size planning.

Why this matters
----------------
An experiment with more than one treatment arm compares every arm against the
same control.

Example:
- control vs new checkout button
- control vs new checkout button + free shipping banner

Each comparison is its own hypothesis test. If every test uses the usual
95% confidence level, the chance that at least one of them produces a false
positive grows with the number of arms (the family-wise error rate).

A common fix is to make each individual comparison stricter. This module
adjusts the confidence level passed into the sample size calculation
based on the number of comparisons.

How the adjustment works here
-----------------------------
With `comparisons` arms and a nominal confidence level `significance`:

    alpha           = 1 - significance
    corrected_alpha = 1 - (1 - alpha) ** (1 / comparisons)

The result is clamped so it never drops below 0.5, because confidence levels
below 50% make the quantile approximations unstable.

The returned value is used exactly like an uncorrected confidence level, so it
goes through the same table lookups. Values that are not table keys fall back
to the 95% entry (see `absize.quantiles`).
"""

from __future__ import annotations

MIN_CORRECTED_SIGNIFICANCE = 0.5


def apply_bonferroni_correction(significance: float, comparisons: int) -> float:
    """
    Adjust a confidence level for `comparisons` treatment arms vs one control.

    Parameters
    ----------
    significance:
        Nominal confidence level, for example 0.95.

    comparisons:
        Number of treatment arms, not counting the control.

    Returns
    -------
    The confidence level to plan with. With a single comparison it is returned
    unchanged.

    Example
    -------
        apply_bonferroni_correction(0.95, 1)  -> 0.95
        apply_bonferroni_correction(0.95, 3)  -> 0.5   (hits the floor)
    """
    if comparisons <= 1:
        return significance

    alpha = 1.0 - significance
    corrected_alpha = 1.0 - (1.0 - alpha) ** (1.0 / comparisons)

    return max(corrected_alpha, MIN_CORRECTED_SIGNIFICANCE)
