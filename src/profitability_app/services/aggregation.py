"""Revenue and expense resolution across P&L documents, manual entries and profile estimates.

Revenue priority: most recent P&L document, then the profile revenue range midpoint.
Expense priority: most recent P&L document alone, otherwise overhead plus payroll.
A P&L is assumed to already include payroll and overhead, so the two branches never mix.
"""
from __future__ import annotations

from typing import List, Optional, Sequence

from ..models.common import CalculationSettings, RevenueRange
from ..models.documents import FinancialDocument
from ..models.ebitda import (
    EmployeeCostExpenseSource,
    ExpenseCategory,
    ExpenseData,
    OverheadExpenseSource,
    PLDocumentExpenseSource,
    PLDocumentRevenueSource,
    ProfileEstimateRevenueSource,
    RevenueData,
)
from ..models.employees import EmployeeCostSummary
from ..models.overhead import OverheadCosts
from .documents import select_most_recent_document
from .employee_costs import DEFAULT_SETTINGS, calculate_total_monthly_overhead
from .rounding import round_half_away

OVERHEAD_CATEGORY = "Overhead Costs"
PAYROLL_CATEGORY = "Payroll & Employee Costs"


def get_revenue_from_profile(
    revenue_range: Optional[RevenueRange | str],
    settings: Optional[CalculationSettings] = None,
) -> Optional[float]:
    return (settings or DEFAULT_SETTINGS).revenue_for_range(revenue_range)


def aggregate_revenue_from_sources(
    documents: Sequence[FinancialDocument],
    profile_revenue_range: Optional[RevenueRange | str],
    now: str,
    settings: Optional[CalculationSettings] = None,
) -> Optional[RevenueData]:
    most_recent = select_most_recent_document(documents)
    if most_recent is not None:
        extraction = most_recent.extraction
        source = PLDocumentRevenueSource(
            document_id=most_recent.document_id,
            filename=most_recent.filename,
            period_start=extraction.period.start_date or None,
            period_end=extraction.period.end_date or None,
            last_updated=most_recent.last_updated,
        )
        return RevenueData(amount=extraction.revenue.total, source=source)

    profile_revenue = get_revenue_from_profile(profile_revenue_range, settings)
    if profile_revenue is not None:
        return RevenueData(amount=profile_revenue, source=ProfileEstimateRevenueSource(last_updated=now))

    return None


def aggregate_expenses_from_sources(
    documents: Sequence[FinancialDocument],
    overhead_costs: Optional[OverheadCosts],
    employee_cost_summary: Optional[EmployeeCostSummary],
    now: str,
) -> ExpenseData:
    most_recent = select_most_recent_document(documents)
    if most_recent is not None:
        expenses = most_recent.extraction.expenses
        document_source = PLDocumentExpenseSource(
            document_id=most_recent.document_id,
            filename=most_recent.filename,
            last_updated=most_recent.last_updated,
            amount=expenses.total,
        )
        categories = [
            ExpenseCategory(name=category.category, amount=category.amount, source=document_source)
            for category in expenses.categories
        ]
        return ExpenseData(total=expenses.total, categories=categories, sources=[document_source])

    categories: List[ExpenseCategory] = []
    total = 0.0

    if overhead_costs is not None:
        annual_overhead = round_half_away(calculate_total_monthly_overhead(overhead_costs) * 12)
        overhead_source = OverheadExpenseSource(last_updated=overhead_costs.updated_at, amount=annual_overhead)
        categories.append(ExpenseCategory(name=OVERHEAD_CATEGORY, amount=annual_overhead, source=overhead_source))
        total += annual_overhead

    if employee_cost_summary is not None:
        payroll = employee_cost_summary.total_fully_loaded_cost
        payroll_source = EmployeeCostExpenseSource(last_updated=now, amount=payroll)
        categories.append(ExpenseCategory(name=PAYROLL_CATEGORY, amount=payroll, source=payroll_source))
        total += payroll

    return ExpenseData(total=total, categories=categories, sources=[category.source for category in categories])
