import pytest

from healthquest.core.calories import DEFAULT_MET, MET_VALUES, calories_burned, met_value


def test_running_hour_for_70kg():
    assert calories_burned("running", 60, 70) == pytest.approx(686.0)


def test_female_adjustment():
    assert calories_burned("walking", 60, 60, gender="female") == pytest.approx(189.0)


def test_unknown_kind_uses_default_met():
    assert met_value("underwater_basket_weaving") == DEFAULT_MET
    assert calories_burned("underwater_basket_weaving", 30, 80) == pytest.approx(160.0)


def test_no_weight_means_no_calories():
    assert calories_burned("running", 60, None) == 0.0


def test_kind_lookup_is_case_insensitive():
    assert met_value(" Running ") == MET_VALUES["running"]


def test_every_met_value_is_positive():
    assert all(v > 0 for v in MET_VALUES.values())
