import pytest

from finance_tracker.models.enums import PayoutCategoryType, PayoutStatus
from finance_tracker.schemas.payout_category import PayoutCategoryRef
from finance_tracker.schemas.records import IncomeRecord, PayoutRecord
from finance_tracker.schemas.savings import SavingsMode
from finance_tracker.services.aggregation import (
    UNCATEGORIZED,
    build_savings_report,
    monthly_savings_view,
    compute_savings,
    payouts_by_category,
    savings_rate_actual,
    summarize_income_month,
    summarize_month,
    summarize_year,
    week_share_of_month,
    yearly_income_by_month,
    yearly_payouts_by_month,
)


def income(month, week, net, year=2025, gross=None):
    return IncomeRecord(
        week=week, month=month, year=year, net_amount=net,
        gross_amount=gross if gross is not None else net,
    )


def payout(month, amount, year=2025, status=PayoutStatus.pending, category=None):
    return PayoutRecord(month=month, year=year, amount=amount, status=status, category=category)


def test_march_example_groups_weeks_and_subtracts_payouts():
    records = [income(3, 1, 1000), income(3, 1, 500), income(3, 2, 2000)]
    payouts = [payout(3, 300), payout(3, 500)]

    [march] = summarize_year(records, payouts, 2025)

    assert march.month == 3
    assert march.month_name == "March"
    assert [(w.week, w.net_amount) for w in march.weeks] == [(1, 1500), (2, 2000)]
    assert march.total_net_amount == 3500
    assert march.total_payouts == 800
    assert march.total_savings == 2700


def test_savings_are_floored_at_zero():
    [april] = summarize_year([income(4, 1, 1000)], [payout(4, 1500)], 2025)
    assert april.total_savings == 0


def test_empty_income_yields_empty_result_even_with_payouts():
    assert summarize_year([], [payout(5, 100)], 2025) == []


def test_months_with_only_payouts_are_omitted():
    summaries = summarize_year([income(1, 2, 400)], [payout(1, 100), payout(2, 900)], 2025)
    assert [s.month for s in summaries] == [1]


def test_months_and_weeks_are_sorted_regardless_of_input_order():
    records = [income(7, 3, 10), income(2, 4, 20), income(7, 1, 30), income(2, 1, 40)]
    summaries = summarize_year(records, [], 2025)

    assert [s.month for s in summaries] == [2, 7]
    assert [w.week for w in summaries[0].weeks] == [1, 4]
    assert [w.week for w in summaries[1].weeks] == [1, 3]


def test_totals_match_weeks_and_raw_records():
    records = [income(6, w, 100.0 * w) for w in (1, 2, 2, 3, 5, 5, 5)]
    [june] = summarize_year(records, [], 2025)

    assert june.total_net_amount == sum(w.net_amount for w in june.weeks)
    assert june.total_net_amount == sum(r.net_amount for r in records)
    assert len({w.week for w in june.weeks}) == len(june.weeks)


def test_other_years_are_filtered_out():
    records = [income(3, 1, 100, year=2024), income(3, 1, 250)]
    payouts = [payout(3, 50, year=2024)]

    [march] = summarize_year(records, payouts, 2025)
    assert march.total_net_amount == 250
    assert march.total_payouts == 0


def test_summarize_year_is_idempotent():
    records = [income(1, 1, 100), income(2, 3, 50)]
    payouts = [payout(1, 20)]

    assert summarize_year(records, payouts, 2025) == summarize_year(records, payouts, 2025)


def test_summarize_month_without_income_is_none():
    assert summarize_month([income(1, 1, 100)], [payout(2, 10)], 2025, 2) is None


def test_summarize_month_matches_yearly_entry():
    records = [income(3, 1, 1000), income(3, 1, 500), income(3, 2, 2000), income(4, 1, 80)]
    payouts = [payout(3, 800), payout(4, 5)]

    month = summarize_month(records, payouts, 2025, 3)
    yearly = summarize_year(records, payouts, 2025)

    assert month == yearly[0]


def test_fixed_rate_mode_ignores_payouts():
    [march] = summarize_year(
        [income(3, 1, 1000)], [payout(3, 900)], 2025,
        mode=SavingsMode.fixed_rate, rate=0.4,
    )
    assert march.total_savings == pytest.approx(400)
    assert march.total_payouts == 900


@pytest.mark.parametrize("rate", [None, -0.1, 1.5])
def test_fixed_rate_mode_requires_valid_rate(rate):
    with pytest.raises(ValueError):
        compute_savings(1000, 0, SavingsMode.fixed_rate, rate)


def test_percentages_are_zero_when_denominator_is_zero():
    assert week_share_of_month(0, 0) == 0
    assert savings_rate_actual(0, 0) == 0
    assert week_share_of_month(250, 1000) == 0.25


def test_savings_report_annotates_weeks_and_totals():
    records = [income(1, 1, 0)]
    summaries = summarize_year(records, [], 2025)
    report = build_savings_report(2025, summaries, SavingsMode.net_minus_payouts)

    assert report.months[0].weeks[0].share_of_month == 0
    assert report.months[0].savings_rate_actual == 0
    assert report.rate is None

    records = [income(1, 1, 600), income(1, 2, 400), income(2, 1, 1000)]
    summaries = summarize_year(records, [payout(1, 250), payout(2, 1200)], 2025)
    report = build_savings_report(2025, summaries, SavingsMode.net_minus_payouts)

    january = report.months[0]
    assert [w.share_of_month for w in january.weeks] == [0.6, 0.4]
    assert january.total_savings == 750
    assert january.remaining == 250
    assert january.savings_rate_actual == 0.75
    assert report.total_net_amount == 2000
    assert report.total_savings == 750
    assert report.total_remaining == 1250
    assert report.months_with_income == 2


def test_fixed_rate_view_adds_weekly_savings_and_remaining():
    [january] = summarize_year(
        [income(1, 1, 600), income(1, 2, 400)], [payout(1, 900)], 2025,
        mode=SavingsMode.fixed_rate, rate=0.5,
    )
    view = monthly_savings_view(january, SavingsMode.fixed_rate, 0.5)

    assert [(w.savings, w.remaining) for w in view.weeks] == [(300, 300), (200, 200)]
    assert sum(w.savings for w in view.weeks) == view.total_savings

    default_view = monthly_savings_view(summarize_year([income(1, 1, 600)], [], 2025)[0])
    assert default_view.weeks[0].savings is None
    assert default_view.weeks[0].remaining is None


def test_summarize_income_month():
    records = [income(5, 1, 800, gross=1000), income(5, 2, 400, gross=500), income(6, 1, 99)]
    summary = summarize_income_month(records, 2025, 5)

    assert summary.total_gross_income == 1500
    assert summary.total_net_income == 1200
    assert summary.entry_count == 2
    assert summary.average_net_per_entry == 600
    assert summarize_income_month([], 2025, 5).average_net_per_entry == 0


def test_yearly_series_are_zero_filled():
    income_points = yearly_income_by_month([income(2, 1, 100, gross=120)], 2025)
    payout_points = yearly_payouts_by_month([payout(12, 30), payout(12, 20)], 2025)

    assert len(income_points) == 12 and len(payout_points) == 12
    assert income_points[1].month_name == "Feb"
    assert (income_points[1].total_gross, income_points[1].total_net) == (120, 100)
    assert income_points[0].total_net == 0
    assert payout_points[11].total_payouts == 50
    assert payout_points[11].month_name == "Dec"


def test_payouts_by_category():
    rent = PayoutCategoryRef(id=1, name="Rent", type=PayoutCategoryType.obligation, color="#000000", target_amount=1000)
    food = PayoutCategoryRef(id=2, name="Food", type=PayoutCategoryType.expense, color="#FFFFFF")
    records = [
        payout(1, 600, status=PayoutStatus.paid, category=rent),
        payout(1, 200, status=PayoutStatus.partially_paid, category=rent),
        payout(1, 150, category=food),
        payout(1, 50),
    ]

    summaries = payouts_by_category(records)

    assert [s.category_name for s in summaries] == ["Rent", "Food", UNCATEGORIZED]
    assert summaries[0].total == 800
    assert summaries[0].paid_total == 600
    assert summaries[0].count == 2
    assert summaries[0].target_amount == 1000
    assert summaries[0].share == 0.8
    assert summaries[2].category_id is None
    assert payouts_by_category([]) == []
