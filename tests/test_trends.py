import pytest

from healthquest.core.trends import TrendReport, round_half_up, trend_percentage


def test_sparse_previous_period_is_flat():
    assert trend_percentage([50000], [500]) == "+0%"
    assert trend_percentage([0], [999]) == "+0%"


def test_positive_trend_has_plus_sign():
    assert trend_percentage([1200], [1000]) == "+20%"


def test_negative_trend_has_no_plus_sign():
    assert trend_percentage([600], [1000]) == "-40%"


def test_no_change_is_plus_zero():
    assert trend_percentage([1000, 500], [1500]) == "+0%"


@pytest.mark.parametrize("current,previous,expected", [
    ([100000], [1000], "+95%"),
    ([0], [1000], "-95%"),
    ([10], [5000], "-95%"),
])
def test_trend_is_clamped(current, previous, expected):
    assert trend_percentage(current, previous) == expected


def test_rounds_to_nearest_percent():
    assert trend_percentage([2025], [2000]) == "+1%"
    assert trend_percentage([1975], [2000]) == "-1%"
    assert trend_percentage([2035], [2000]) == "+2%"


def test_halves_round_up_not_away_from_zero():
    assert trend_percentage([2250], [2000]) == "+13%"
    assert trend_percentage([1750], [2000]) == "-12%"
    assert round_half_up(-2.5) == -2
    assert round_half_up(2.5) == 3


def test_trend_always_within_bounds():
    for cur in range(0, 200000, 7919):
        for prev in range(1000, 60000, 6007):
            pct = int(trend_percentage([cur], [prev]).rstrip("%"))
            assert -95 <= pct <= 95


def test_trend_report_to_dict_merges_extra():
    report = TrendReport(labels=["Mon"], values=[1], unit="ml", extra={"max": 1})
    assert report.to_dict() == {"labels": ["Mon"], "values": [1], "unit": "ml", "max": 1}
