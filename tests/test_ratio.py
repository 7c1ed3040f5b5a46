import math

from absize.ratio import RatioEffect, calculate_ratio_sample_size


def test_ratio_sample_size_reference_scenario():
    """
    Revenue per thousand impressions of 5.5 with standard deviation 1.8,
    detecting a 10% change at 95% confidence and 80% power.
    """
    n = calculate_ratio_sample_size(5.5, 1.8, 10, 0.95, 0.8)
    assert n == 169


def test_coefficient_of_variation():
    assert math.isclose(RatioEffect(5.5, 1.8, 10).coefficient_of_variation, 1.8 / 5.5)


def test_only_relative_noise_matters():
    """
    The formula works in relative terms, so scaling mean and standard
    deviation together does not change the answer.
    """
    small = calculate_ratio_sample_size(5.5, 1.8, 10, 0.95, 0.8)
    large = calculate_ratio_sample_size(550.0, 180.0, 10, 0.95, 0.8)
    assert small == large


def test_larger_effect_needs_fewer_users():
    sizes = [calculate_ratio_sample_size(5.5, 1.8, mde, 0.95, 0.8) for mde in (2, 5, 10)]
    assert sizes[0] > sizes[1] > sizes[2]


def test_more_power_or_confidence_needs_more_users():
    n = calculate_ratio_sample_size(5.5, 1.8, 5, 0.9, 0.8)
    assert calculate_ratio_sample_size(5.5, 1.8, 5, 0.9, 0.95) > n
    assert calculate_ratio_sample_size(5.5, 1.8, 5, 0.95, 0.8) > n


def test_variations_plan_with_the_corrected_significance():
    multi = calculate_ratio_sample_size(5.5, 1.8, 5, 0.95, 0.8, variations=4)
    single = calculate_ratio_sample_size(5.5, 1.8, 5, 0.5, 0.8)
    assert multi == single


def test_zero_mean_gives_infinity():
    assert math.isinf(calculate_ratio_sample_size(0, 1.8, 10, 0.95, 0.8))
