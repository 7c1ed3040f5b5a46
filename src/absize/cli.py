"""
CLI for experiment sample size planning.

Usage:
    absize binomial --baseline 10 --mde 10
    absize continuous --baseline 75 --std-dev 25 --mde 10 --power 0.9
    absize ratio --baseline 5.5 --std-dev 1.8 --mde 5 --variations 2
"""

import argparse
import sys
from typing import Optional, Sequence

import structlog

from absize.calculator import calculate_sample_size
from absize.config import Settings, configure_logging, get_settings
from absize.types import MetricInput, MetricType, SampleSizeResult

logger = structlog.get_logger(__name__)

METRIC_LABELS = {
    MetricType.BINOMIAL: "Binomial (Conversion Rate)",
    MetricType.CONTINUOUS: "Continuous (Average Value)",
    MetricType.RATIO: "Ratio (RPM, ARPU)",
}


def format_count(value) -> str:
    """Format a user count with thousands separators."""
    if isinstance(value, float):
        return str(value)
    return f"{value:,}"


def print_result(metric: MetricInput, result: SampleSizeResult) -> None:
    print("\nSample Size")
    print("===========")
    print(f"Metric type: {METRIC_LABELS[metric.metric_type]}")
    if metric.metric_type is MetricType.BINOMIAL:
        print(f"Baseline conversion rate: {metric.baseline_value}%")
    else:
        print(f"Baseline value: {metric.baseline_value}")
        print(f"Standard deviation: {metric.standard_deviation}")
    print(f"Minimum detectable effect: {metric.minimum_detectable_effect}%")
    print(f"Significance: {metric.significance * 100:g}%")
    print(f"Power: {metric.power * 100:g}%")
    print()
    print(f"Sample size per variation: {format_count(result.per_group)}")
    print(f"Total variations: {result.groups} ({metric.variations} test + 1 control)")
    print(f"Total sample size: {format_count(result.total)}")

    if metric.variations > 1:
        print(
            f"\nMultiple comparisons: significance adjusted to "
            f"{result.corrected_significance:.4g} for {metric.variations} test variations."
        )


def cmd_calculate(args: argparse.Namespace) -> int:
    """Validate the arguments, plan the sample size and print it."""
    try:
        metric = MetricInput(
            metric_type=MetricType(args.metric_type),
            baseline_value=args.baseline,
            standard_deviation=getattr(args, "std_dev", None),
            minimum_detectable_effect=args.mde,
            significance=args.significance,
            power=args.power,
            variations=args.variations,
        )
    except ValueError as e:
        logger.warning("invalid_metric_input", metric_type=args.metric_type, error=str(e))
        print(f"error: {e}", file=sys.stderr)
        return 2

    result = calculate_sample_size(metric)
    print_result(metric, result)
    return 0


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="absize",
        description="Minimum per-group sample size for A/B experiments",
    )
    parser.add_argument(
        "--log-level",
        default=settings.LOG_LEVEL,
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help=f"structlog level (default: {settings.LOG_LEVEL})",
    )

    subparsers = parser.add_subparsers(dest="metric_type", required=True)

    for metric_type in MetricType:
        sub = subparsers.add_parser(metric_type.value, help=METRIC_LABELS[metric_type])
        if metric_type is MetricType.BINOMIAL:
            sub.add_argument(
                "--baseline",
                type=float,
                required=True,
                help="Baseline conversion rate in percent (e.g. 10)",
            )
        else:
            sub.add_argument(
                "--baseline", type=float, required=True, help="Baseline mean of the metric"
            )
            sub.add_argument(
                "--std-dev",
                type=float,
                required=True,
                help="Standard deviation of the metric",
            )
        sub.add_argument(
            "--mde",
            type=float,
            required=True,
            help="Minimum detectable effect, relative, in percent",
        )
        sub.add_argument(
            "--significance",
            type=float,
            default=settings.DEFAULT_SIGNIFICANCE,
            help=f"Confidence level (default: {settings.DEFAULT_SIGNIFICANCE})",
        )
        sub.add_argument(
            "--power",
            type=float,
            default=settings.DEFAULT_POWER,
            help=f"Statistical power (default: {settings.DEFAULT_POWER})",
        )
        sub.add_argument(
            "--variations",
            type=int,
            default=settings.DEFAULT_VARIATIONS,
            help=f"Test variations excluding control (default: {settings.DEFAULT_VARIATIONS})",
        )
        sub.set_defaults(func=cmd_calculate)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser(get_settings())
    args = parser.parse_args(argv)

    configure_logging(args.log_level)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
