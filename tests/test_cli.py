import pytest
import structlog

from absize.cli import format_count, main
from absize.config import get_settings


@pytest.fixture(autouse=True)
def fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    structlog.reset_defaults()


def test_continuous_plan_is_printed(capsys):
    code = main(["continuous", "--baseline", "75", "--std-dev", "25", "--mde", "10"])

    out = capsys.readouterr().out
    assert code == 0
    assert "Continuous (Average Value)" in out
    assert "Sample size per variation: 175" in out
    assert "Total variations: 2 (1 test + 1 control)" in out
    assert "Total sample size: 350" in out
    assert "Multiple comparisons" not in out


def test_binomial_plan_with_several_variations(capsys):
    code = main(["binomial", "--baseline", "10", "--mde", "10", "--variations", "2"])

    out = capsys.readouterr().out
    assert code == 0
    assert "Baseline conversion rate: 10.0%" in out
    assert "Total variations: 3 (2 test + 1 control)" in out
    assert "Multiple comparisons: significance adjusted to 0.5" in out


def test_defaults_come_from_settings(monkeypatch, capsys):
    monkeypatch.setenv("ABSIZE_DEFAULT_POWER", "0.9")

    main(["ratio", "--baseline", "5.5", "--std-dev", "1.8", "--mde", "10"])

    assert "Power: 90%" in capsys.readouterr().out


def test_standard_deviation_flag_is_required_for_ratio():
    with pytest.raises(SystemExit) as exc:
        main(["ratio", "--baseline", "5.5", "--mde", "10"])
    assert exc.value.code == 2


def test_invalid_input_returns_error_code(capsys):
    code = main(["binomial", "--baseline", "10", "--mde", "10", "--power", "1.5"])

    err = capsys.readouterr().err
    assert code == 2
    assert "power must be between 0 and 1" in err


def test_format_count():
    assert format_count(14298) == "14,298"
    assert format_count(float("inf")) == "inf"


def test_log_level_flag(capsys):
    code = main(["--log-level", "debug", "binomial", "--baseline", "10", "--mde", "10"])

    out = capsys.readouterr().out
    assert code == 0
    assert "sample_size_refined" in out


def test_fractional_percentages_are_not_rounded(capsys):
    main(["binomial", "--baseline", "10", "--mde", "10", "--significance", "0.995"])

    out = capsys.readouterr().out
    assert "Significance: 99.5%" in out
    assert "Power: 80%" in out
