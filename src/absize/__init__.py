"""
absize (A/B Sample Size)

Minimum per-group sample size for A/B experiments with conversion, mean and
ratio metrics.
"""

from .calculator import calculate_sample_size
from .conversion import calculate_binomial_sample_size
from .mean import calculate_continuous_sample_size
from .multiple_testing import apply_bonferroni_correction
from .quantiles import initial_t_score, z_score
from .ratio import calculate_ratio_sample_size
from .t_distribution import t_value
from .types import MetricInput, MetricType, SampleSizeResult

__all__ = [
    "__version__",
    "calculate_binomial_sample_size",
    "calculate_continuous_sample_size",
    "calculate_ratio_sample_size",
    "apply_bonferroni_correction",
    "calculate_sample_size",
    "t_value",
    "z_score",
    "initial_t_score",
    "MetricInput",
    "MetricType",
    "SampleSizeResult",
]
__version__ = "0.1.0"
