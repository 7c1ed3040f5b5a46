from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class MetricType(str, Enum):
    """The three metric families the calculator can plan for."""

    BINOMIAL = "binomial"
    CONTINUOUS = "continuous"
    RATIO = "ratio"


@dataclass(frozen=True)
class MetricInput:
    """
    Everything needed to plan the sample size of one experiment.

    Example
    -------
    "Average order value is 75 with a standard deviation of 25. We want to
    detect a 10% change at 95% confidence and 80% power, with one treatment
    arm against the control":

        MetricInput(
            metric_type=MetricType.CONTINUOUS,
            baseline_value=75.0,
            standard_deviation=25.0,
            minimum_detectable_effect=10.0,
            significance=0.95,
            power=0.8,
        )

    Units
    -----
    - baseline_value:
        conversion rate in percent (0-100) for binomial metrics, the metric's
        own scale for continuous and ratio metrics
    - minimum_detectable_effect:
        relative change in percent (10 means "10% higher than the baseline")
    - significance and power:
        probabilities between 0 and 1
    - variations:
        treatment arms, not counting the control

    A standard deviation is required for continuous and ratio metrics and is
    ignored for binomial ones. Invalid combinations raise ValueError here, so
    they never reach the sample size formulas.
    """

    metric_type: MetricType
    baseline_value: float
    minimum_detectable_effect: float
    significance: float
    power: float
    variations: int = 1
    standard_deviation: Optional[float] = None

    def __post_init__(self) -> None:
        # Accept plain strings such as "ratio".
        object.__setattr__(self, "metric_type", MetricType(self.metric_type))

        if not self.baseline_value > 0.0:
            raise ValueError("baseline_value must be positive.")
        if self.metric_type is MetricType.BINOMIAL and self.baseline_value > 100.0:
            raise ValueError("baseline_value is a percentage for binomial metrics (0-100).")
        if not self.minimum_detectable_effect > 0.0:
            raise ValueError("minimum_detectable_effect must be positive.")
        if not (0.0 < self.significance < 1.0):
            raise ValueError("significance must be between 0 and 1 (exclusive).")
        if not (0.0 < self.power < 1.0):
            raise ValueError("power must be between 0 and 1 (exclusive).")
        if self.variations < 1:
            raise ValueError("variations must be at least 1.")

        if self.metric_type is not MetricType.BINOMIAL:
            if self.standard_deviation is None:
                raise ValueError(
                    f"standard_deviation is required for {self.metric_type.value} metrics."
                )
            if not self.standard_deviation > 0.0:
                raise ValueError("standard_deviation must be positive.")


@dataclass(frozen=True)
class SampleSizeResult:
    """
    Planned sample size for an experiment.

    `per_group` users are needed in the control and in each treatment arm, so
    the experiment needs `total = per_group * groups` users overall, where
    `groups = variations + 1`.

    Example
    -------
    per_group = 175 with 2 treatment arms:
        groups = 3, total = 525
    """

    metric_type: MetricType
    per_group: Union[int, float]
    groups: int
    corrected_significance: float

    @property
    def total(self) -> Union[int, float]:
        return self.per_group * self.groups

    @property
    def is_finite(self) -> bool:
        # nan/inf come out of degenerate inputs such as a zero mean
        return math.isfinite(self.per_group)
