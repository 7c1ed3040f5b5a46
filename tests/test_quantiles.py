import pytest

from absize.quantiles import (
    NORMAL_QUANTILES,
    REFERENCE_T_QUANTILES,
    initial_t_score,
    lookup,
    z_score,
)


def test_z_score_returns_table_constants():
    expected = {
        0.8: 0.84,
        0.85: 1.04,
        0.9: 1.28,
        0.95: 1.65,
        0.99: 2.33,
        0.995: 2.58,
        0.999: 3.29,
    }
    for level, value in expected.items():
        assert z_score(level) == value


def test_initial_t_score_returns_table_constants():
    expected = {
        0.8: 0.854,
        0.85: 1.055,
        0.9: 1.31,
        0.95: 1.697,
        0.99: 2.457,
        0.995: 2.75,
        0.999: 3.646,
    }
    for level, value in expected.items():
        assert initial_t_score(level) == value


def test_unknown_levels_fall_back_to_95_percent_entry():
    """
    Levels that are not keys are not interpolated. 0.97 sits between two keys
    and 0.5 is what the multiple comparison correction produces for most
    multi-arm experiments; both resolve to the 0.95 entry.
    """
    for level in (0.97, 0.5, 0.75, 0.9500001):
        assert z_score(level) == 1.65
        assert initial_t_score(level) == 1.697


def test_tables_share_the_same_levels():
    assert [k for k, _ in NORMAL_QUANTILES] == [k for k, _ in REFERENCE_T_QUANTILES]


def test_lookup_requires_a_default_entry():
    table = ((0.8, 0.84), (0.9, 1.28))
    assert lookup(table, 0.9) == 1.28

    with pytest.raises(ValueError):
        lookup(table, 0.95)
