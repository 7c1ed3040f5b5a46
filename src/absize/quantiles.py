"""
Quantile lookup tables for sample size planning.

A sample size formula needs two numbers that come from a probability
distribution:

- a quantile for the significance level (how strict we are about false positives)
- a quantile for the power (how sure we want to be of catching a real effect)

Computing these exactly needs a statistics library. For planning purposes this
package uses small fixed tables instead.

Two tables
----------
1) NORMAL_QUANTILES:
   Approximate quantiles of the standard normal distribution, keyed by
   confidence level. These seed the first (normal-approximation) estimate.

2) REFERENCE_T_QUANTILES:
   Approximate Student-t quantiles at a moderate number of degrees of freedom
   (around 30). These are only a fallback for very small samples, see
   `absize.t_distribution.t_value`.

How lookup works
----------------
Lookup is an exact match on the confidence level. Anything that is not a key
(for example 0.97, or 0.5 coming out of the multiple comparison correction)
resolves to the 0.95 entry. There is no interpolation between keys.
"""

from __future__ import annotations

from typing import Tuple

QuantileTable = Tuple[Tuple[float, float], ...]

DEFAULT_LEVEL = 0.95

NORMAL_QUANTILES: QuantileTable = (
    (0.8, 0.84),
    (0.85, 1.04),
    (0.9, 1.28),
    (0.95, 1.65),
    (0.99, 2.33),
    (0.995, 2.58),
    (0.999, 3.29),
)

# Student-t at df = 30, refined during the iterative calculation.
REFERENCE_T_QUANTILES: QuantileTable = (
    (0.8, 0.854),
    (0.85, 1.055),
    (0.9, 1.31),
    (0.95, 1.697),
    (0.99, 2.457),
    (0.995, 2.75),
    (0.999, 3.646),
)


def lookup(table: QuantileTable, level: float) -> float:
    """
    Return the quantile stored for `level`, or the 0.95 entry if there is none.

    Example
    -------
        lookup(NORMAL_QUANTILES, 0.99)  -> 2.33
        lookup(NORMAL_QUANTILES, 0.97)  -> 1.65   (not a key, falls back)
    """
    default = None
    for key, value in table:
        if key == level:
            return value
        if key == DEFAULT_LEVEL:
            default = value
    if default is None:
        raise ValueError(f"Quantile table has no {DEFAULT_LEVEL} entry to fall back to.")
    return default


def z_score(confidence_level: float) -> float:
    """Approximate normal quantile for a confidence level."""
    return lookup(NORMAL_QUANTILES, confidence_level)


def initial_t_score(confidence_level: float) -> float:
    """Reference Student-t quantile used as a starting point for small samples."""
    return lookup(REFERENCE_T_QUANTILES, confidence_level)
