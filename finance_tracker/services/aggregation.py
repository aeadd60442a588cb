# finance_tracker/services/aggregation.py
"""
Agregaciones puras sobre ingresos y egresos ya consultados.

Ninguna función de este módulo hace I/O ni guarda estado: reciben listas de
registros (filas del modelo o `IncomeRecord`/`PayoutRecord`) y devuelven
view-models nuevos en cada llamada.
"""

from collections import defaultdict
from typing import Dict, Iterable, List, Optional

from finance_tracker.models.enums import PayoutStatus
from finance_tracker.schemas.dashboard import (
    CategoryPayoutSummary,
    IncomeMonthSummary,
    YearlyIncomePoint,
    YearlyPayoutPoint,
)
from finance_tracker.schemas.savings import (
    MonthlySavingsRead,
    MonthlySummary,
    SavingsMode,
    SavingsReport,
    WeeklyBucket,
    WeeklySavingsRead,
)
from finance_tracker.utils.dates import month_abbreviation, month_name

UNCATEGORIZED = "Uncategorized"


def _ratio(numerator: float, denominator: float) -> float:
    return numerator / denominator if denominator else 0.0


def week_share_of_month(week_net: float, month_total_net: float) -> float:
    """Porción de la semana sobre el neto del mes; 0 si el mes suma 0."""
    return _ratio(week_net, month_total_net)


def savings_rate_actual(total_savings: float, total_net_amount: float) -> float:
    """Ahorro real sobre el ingreso neto; 0 si no hubo ingreso neto."""
    return _ratio(total_savings, total_net_amount)


def compute_savings(
    total_net_amount: float,
    total_payouts: float,
    mode: SavingsMode = SavingsMode.net_minus_payouts,
    rate: Optional[float] = None,
) -> float:
    """
    Ahorro de un periodo según el modo configurado.

    - net_minus_payouts: neto - egresos, nunca negativo.
    - fixed_rate: neto * tasa, sin mirar los egresos.
    """
    if mode == SavingsMode.fixed_rate:
        if rate is None or not (0 <= rate <= 1):
            raise ValueError("fixed_rate mode requires a savings rate between 0 and 1")
        return total_net_amount * rate
    return max(0.0, total_net_amount - total_payouts)


def _build_month(
    year: int,
    month: int,
    income: Iterable,
    total_payouts: float,
    mode: SavingsMode,
    rate: Optional[float],
) -> MonthlySummary:
    by_week: Dict[int, float] = defaultdict(float)
    total_net = 0.0
    for entry in income:
        by_week[entry.week] += entry.net_amount
        total_net += entry.net_amount

    weeks = [WeeklyBucket(week=w, net_amount=amount) for w, amount in sorted(by_week.items())]

    return MonthlySummary(
        month=month,
        year=year,
        month_name=month_name(month),
        weeks=weeks,
        total_net_amount=total_net,
        total_payouts=total_payouts,
        total_savings=compute_savings(total_net, total_payouts, mode, rate),
    )


def summarize_year(
    income_records: Iterable,
    payout_records: Iterable,
    year: int,
    *,
    mode: SavingsMode = SavingsMode.net_minus_payouts,
    rate: Optional[float] = None,
) -> List[MonthlySummary]:
    """
    Resumen mensual del año: semanas ordenadas, totales y ahorro.

    Solo aparecen los meses con al menos un ingreso; un mes que solo tiene
    egresos no se emite.
    """
    income_by_month = defaultdict(list)
    for entry in income_records:
        if entry.year == year:
            income_by_month[entry.month].append(entry)

    payouts_by_month: Dict[int, float] = defaultdict(float)
    for payout in payout_records:
        if payout.year == year:
            payouts_by_month[payout.month] += payout.amount

    return [
        _build_month(year, month, entries, payouts_by_month.get(month, 0.0), mode, rate)
        for month, entries in sorted(income_by_month.items())
    ]


def summarize_month(
    income_records: Iterable,
    payout_records: Iterable,
    year: int,
    month: int,
    *,
    mode: SavingsMode = SavingsMode.net_minus_payouts,
    rate: Optional[float] = None,
) -> Optional[MonthlySummary]:
    """Igual que `summarize_year` para un solo mes; None si el mes no tiene ingresos."""
    income = [e for e in income_records if e.year == year and e.month == month]
    if not income:
        return None

    total_payouts = sum(
        p.amount for p in payout_records if p.year == year and p.month == month
    )
    return _build_month(year, month, income, total_payouts, mode, rate)


def _weekly_view(
    bucket: WeeklyBucket,
    month_total_net: float,
    mode: SavingsMode,
    rate: Optional[float],
) -> WeeklySavingsRead:
    week = WeeklySavingsRead(
        week=bucket.week,
        net_amount=bucket.net_amount,
        share_of_month=week_share_of_month(bucket.net_amount, month_total_net),
    )
    if mode == SavingsMode.fixed_rate:
        week.savings = compute_savings(bucket.net_amount, 0.0, mode, rate)
        week.remaining = bucket.net_amount - week.savings
    return week


def monthly_savings_view(
    summary: MonthlySummary,
    mode: SavingsMode = SavingsMode.net_minus_payouts,
    rate: Optional[float] = None,
) -> MonthlySavingsRead:
    """
    Agrega a un resumen mensual los porcentajes y el remanente que muestra la vista.

    En modo fixed_rate cada semana lleva además su ahorro y su remanente.
    """
    weeks = [
        _weekly_view(bucket, summary.total_net_amount, mode, rate)
        for bucket in summary.weeks
    ]
    return MonthlySavingsRead(
        month=summary.month,
        year=summary.year,
        month_name=summary.month_name,
        weeks=weeks,
        total_net_amount=summary.total_net_amount,
        total_payouts=summary.total_payouts,
        total_savings=summary.total_savings,
        remaining=summary.total_net_amount - summary.total_savings,
        savings_rate_actual=savings_rate_actual(summary.total_savings, summary.total_net_amount),
    )


def build_savings_report(
    year: int,
    summaries: List[MonthlySummary],
    mode: SavingsMode,
    rate: Optional[float] = None,
) -> SavingsReport:
    months = [monthly_savings_view(summary, mode, rate) for summary in summaries]

    total_net = sum(m.total_net_amount for m in months)
    total_savings = sum(m.total_savings for m in months)

    return SavingsReport(
        year=year,
        mode=mode,
        rate=rate if mode == SavingsMode.fixed_rate else None,
        months=months,
        total_net_amount=total_net,
        total_payouts=sum(m.total_payouts for m in months),
        total_savings=total_savings,
        total_remaining=total_net - total_savings,
        months_with_income=len(months),
    )


def summarize_income_month(income_records: Iterable, year: int, month: int) -> IncomeMonthSummary:
    entries = [e for e in income_records if e.year == year and e.month == month]
    total_gross = sum(e.gross_amount for e in entries)
    total_net = sum(e.net_amount for e in entries)

    return IncomeMonthSummary(
        total_gross_income=total_gross,
        total_net_income=total_net,
        entry_count=len(entries),
        average_net_per_entry=_ratio(total_net, len(entries)),
    )


def yearly_income_by_month(income_records: Iterable, year: int) -> List[YearlyIncomePoint]:
    """Serie de 12 meses (enero a diciembre) con bruto y neto; meses sin datos en 0."""
    points = [
        YearlyIncomePoint(month=m, month_name=month_abbreviation(m), total_gross=0.0, total_net=0.0)
        for m in range(1, 13)
    ]
    for entry in income_records:
        if entry.year == year and 1 <= entry.month <= 12:
            point = points[entry.month - 1]
            point.total_gross += entry.gross_amount
            point.total_net += entry.net_amount
    return points


def yearly_payouts_by_month(payout_records: Iterable, year: int) -> List[YearlyPayoutPoint]:
    points = [
        YearlyPayoutPoint(month=m, month_name=month_abbreviation(m), total_payouts=0.0)
        for m in range(1, 13)
    ]
    for payout in payout_records:
        if payout.year == year and 1 <= payout.month <= 12:
            points[payout.month - 1].total_payouts += payout.amount
    return points


def payouts_by_category(payout_records: Iterable) -> List[CategoryPayoutSummary]:
    """
    Agrupa egresos por categoría, de mayor a menor total.

    Los egresos cuya categoría no se resuelve quedan en "Uncategorized".
    """
    grouped: Dict[Optional[int], CategoryPayoutSummary] = {}
    grand_total = 0.0

    for payout in payout_records:
        category = payout.category
        key = category.id if category else None
        summary = grouped.get(key)
        if summary is None:
            summary = CategoryPayoutSummary(
                category_id=key,
                category_name=category.name if category else UNCATEGORIZED,
                category_type=category.type if category else None,
                color=category.color if category else None,
                target_amount=category.target_amount if category else None,
                total=0.0,
                paid_total=0.0,
                count=0,
                share=0.0,
            )
            grouped[key] = summary

        summary.total += payout.amount
        summary.count += 1
        if payout.status == PayoutStatus.paid:
            summary.paid_total += payout.amount
        grand_total += payout.amount

    summaries = list(grouped.values())
    for summary in summaries:
        summary.share = _ratio(summary.total, grand_total)
    summaries.sort(key=lambda s: s.total, reverse=True)
    return summaries
