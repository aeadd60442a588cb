from datetime import date

import pytest

from finance_tracker.utils.dates import month_abbreviation, month_name, period_fields, week_of_month


@pytest.mark.parametrize(
    "day, week",
    [(1, 1), (7, 1), (8, 2), (14, 2), (15, 3), (21, 3), (22, 4), (28, 4), (29, 5), (31, 5)],
)
def test_week_of_month(day, week):
    assert week_of_month(date(2025, 1, day)) == week


def test_month_names_are_english_and_one_based():
    assert month_name(1) == "January"
    assert month_name(12) == "December"
    assert month_name(0) == ""
    assert month_abbreviation(9) == "Sep"


def test_period_fields_prefers_explicit_week():
    assert period_fields(date(2025, 3, 16)) == {"week": 3, "month": 3, "year": 2025}
    assert period_fields(date(2025, 3, 16), week=2)["week"] == 2
