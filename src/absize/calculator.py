"""
One entry point for all metric families.

`calculate_sample_size` takes a validated `MetricInput`, picks the matching
formula and returns the per-group sample size together with the totals an
experiment plan needs (control + every treatment arm).
"""

from __future__ import annotations

import structlog

from .config import ensure_logging_configured
from .conversion import calculate_binomial_sample_size
from .mean import calculate_continuous_sample_size
from .multiple_testing import apply_bonferroni_correction
from .power import SampleSize
from .ratio import calculate_ratio_sample_size
from .types import MetricInput, MetricType, SampleSizeResult

logger = structlog.get_logger(__name__)


def _per_group(metric: MetricInput) -> SampleSize:
    if metric.metric_type is MetricType.BINOMIAL:
        return calculate_binomial_sample_size(
            metric.baseline_value,
            metric.minimum_detectable_effect,
            metric.significance,
            metric.power,
            metric.variations,
        )

    if metric.metric_type is MetricType.CONTINUOUS:
        calculate = calculate_continuous_sample_size
    else:
        calculate = calculate_ratio_sample_size

    return calculate(
        metric.baseline_value,
        metric.standard_deviation,
        metric.minimum_detectable_effect,
        metric.significance,
        metric.power,
        metric.variations,
    )


def calculate_sample_size(metric: MetricInput) -> SampleSizeResult:
    """
    Plan the sample size for one metric.

    Returns
    -------
    SampleSizeResult:
        Includes users per group, number of groups (treatment arms + control),
        the total and the confidence level actually planned with.
    """
    ensure_logging_configured()
    per_group = _per_group(metric)

    result = SampleSizeResult(
        metric_type=metric.metric_type,
        per_group=per_group,
        groups=metric.variations + 1,
        corrected_significance=apply_bonferroni_correction(
            metric.significance, metric.variations
        ),
    )
    logger.info(
        "sample_size_calculated",
        metric_type=metric.metric_type.value,
        per_group=result.per_group,
        groups=result.groups,
        total=result.total,
    )
    return result
