import pytest

from absize.quantiles import initial_t_score
from absize.t_distribution import t_value


def test_small_degrees_of_freedom_widen_the_reference_t_score():
    for df in (-2, 0, 1, 2, 2.9):
        for level in (0.8, 0.85, 0.9, 0.95, 0.99, 0.995, 0.999, 0.5):
            assert t_value(df, level) == initial_t_score(level) * 1.5


def test_95_percent_uses_its_own_coefficients():
    df = 1000
    assert t_value(df, 0.95) == pytest.approx(1.96 + 0.958 / df + 0.25 / df**2)


def test_90_percent_uses_its_own_coefficients():
    df = 100
    assert t_value(df, 0.9) == pytest.approx(1.645 + 0.727 / df + 0.18 / df**2)


def test_99_percent_uses_its_own_coefficients():
    df = 100
    assert t_value(df, 0.99) == pytest.approx(2.576 + 1.28 / df + 0.38 / df**2)


def test_other_levels_build_on_the_normal_table():
    df = 100
    assert t_value(df, 0.8) == pytest.approx(0.84 + 0.85 / df + 0.22 / df**2)
    assert t_value(df, 0.999) == pytest.approx(3.29 + 0.85 / df + 0.22 / df**2)


def test_levels_close_to_a_special_case_use_generic_coefficients():
    """
    Branches are chosen by exact equality, so a level that is only near 0.95
    goes through the generic formula with the table fallback (1.65).
    """
    df = 100
    assert t_value(df, 0.9500001) == pytest.approx(1.65 + 0.85 / df + 0.22 / df**2)

    # the level the multiple comparison floor produces
    assert t_value(df, 0.5) == pytest.approx(1.65 + 0.85 / df + 0.22 / df**2)


def test_t_value_shrinks_towards_its_asymptote_as_df_grows():
    values = [t_value(df, 0.95) for df in (10, 100, 1000, 100000)]
    assert values == sorted(values, reverse=True)
    assert abs(t_value(1_000_000, 0.95) - 1.96) < 1e-5


def test_t_value_is_larger_than_the_normal_quantile():
    # heavier tails than the normal distribution
    assert t_value(30, 0.95) > 1.96
    assert t_value(30, 0.9) > 1.645
