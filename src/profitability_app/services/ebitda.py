from __future__ import annotations

from ..models.common import ReportingPeriod
from ..models.ebitda import EBITDABreakdown, ExpenseData, PLDocumentRevenueSource, RevenueData
from .rounding import round_half_away, round_to_cents


def calculate_ebitda_margin(ebitda: float, revenue: float) -> float:
    """EBITDA as a percentage of revenue, to two decimals; 0 when there is no revenue."""
    if revenue == 0:
        return 0.0
    return round_to_cents(ebitda / revenue * 100)


def calculate_ebitda(revenue: RevenueData, expenses: ExpenseData) -> EBITDABreakdown:
    ebitda = round_half_away(revenue.amount - expenses.total)

    period = None
    source = revenue.source
    if isinstance(source, PLDocumentRevenueSource) and source.period_start and source.period_end:
        period = ReportingPeriod(start_date=source.period_start, end_date=source.period_end)

    return EBITDABreakdown(
        revenue=revenue.amount,
        revenue_source=revenue.source,
        total_operating_expenses=expenses.total,
        expense_categories=expenses.categories,
        expense_sources=expenses.sources,
        ebitda=ebitda,
        ebitda_margin=calculate_ebitda_margin(ebitda, revenue.amount),
        period=period,
    )
