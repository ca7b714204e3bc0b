from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Callable, List, Optional, Tuple

from ..models.common import CalculationSettings
from ..models.ebitda import DataCompleteness, EBITDAResult, ProfileEstimateRevenueSource
from ..models.employees import (
    EmployeeCostResult,
    EmployeeCostSummary,
    EmployeeDataSource,
    OverheadSource,
)
from ..models.overhead import OverheadCosts
from ..models.snapshot import BusinessSnapshot
from .aggregation import aggregate_expenses_from_sources, aggregate_revenue_from_sources
from .documents import parse_timestamp
from .ebitda import calculate_ebitda
from .employee_costs import calculate_all_employee_costs, calculate_cost_summary, overhead_from_estimate

NO_REVENUE_WARNING = "No revenue data found. Upload a P&L statement or complete your profile with revenue information."
ESTIMATED_REVENUE_WARNING = "Using estimated revenue from your profile. Upload a P&L statement for more accurate results."
NO_EXPENSES_WARNING = "No expense data available. Upload a P&L statement or enter overhead costs and employees."
NEGATIVE_EBITDA_WARNING = (
    "Your EBITDA is negative, indicating an operating loss. "
    "Consider reviewing expenses or strategies to increase revenue."
)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class FinancialCalculator:
    """Assembles employee cost and EBITDA results from a snapshot of business records.

    Stateless between calls: the clock is the only time-dependent input, so a fixed clock
    makes repeated runs over the same snapshot identical.
    """

    def __init__(
        self,
        settings: Optional[CalculationSettings] = None,
        clock: Optional[Callable[[], datetime]] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.settings = settings or CalculationSettings()
        self.clock = clock or _utc_now
        self.logger = logger or logging.getLogger(__name__)

    def employee_costs(self, snapshot: BusinessSnapshot) -> EmployeeCostResult:
        now = self._now()
        overhead, overhead_source = self._resolve_overhead(snapshot, now)

        employee_costs = calculate_all_employee_costs(snapshot.employees, overhead, self.settings)
        summary = calculate_cost_summary(employee_costs, has_overhead_data=overhead is not None)

        timestamps = [employee.updated_at for employee in snapshot.employees if employee.updated_at]
        if overhead is not None:
            timestamps.append(overhead.updated_at)
        last_updated = max(timestamps, key=parse_timestamp) if timestamps else now

        self.logger.info(
            "employee costs calculated: employees=%d overhead_source=%s total=%.2f",
            len(snapshot.employees),
            overhead_source.value,
            summary.total_fully_loaded_cost,
        )
        return EmployeeCostResult(
            employees=employee_costs,
            summary=summary,
            data_source=EmployeeDataSource(overhead_source=overhead_source, last_updated=last_updated),
        )

    def ebitda(self, snapshot: BusinessSnapshot) -> EBITDAResult:
        now = self._now()
        documents = snapshot.documents
        has_pl_data = len(documents) > 0

        # Payroll feeds the expense fallback, so it is resolved before expenses.
        employee_cost_summary = self._employee_cost_summary(snapshot)

        revenue = aggregate_revenue_from_sources(documents, snapshot.profile_revenue_range, now, self.settings)
        expenses = aggregate_expenses_from_sources(
            documents,
            None if has_pl_data else snapshot.overhead,
            None if has_pl_data else employee_cost_summary,
            now,
        )

        has_revenue_data = revenue is not None
        has_payroll_data = employee_cost_summary is not None
        has_overhead_data = snapshot.overhead is not None
        data_completeness = DataCompleteness(
            has_revenue_data=has_revenue_data,
            has_expense_data=expenses.total > 0,
            has_payroll_data=has_payroll_data,
            has_overhead_data=has_overhead_data,
        )

        warnings: List[str] = []
        if revenue is None:
            warnings.append(NO_REVENUE_WARNING)
        elif isinstance(revenue.source, ProfileEstimateRevenueSource):
            warnings.append(ESTIMATED_REVENUE_WARNING)
        if not has_pl_data and not has_overhead_data and not has_payroll_data:
            warnings.append(NO_EXPENSES_WARNING)

        if revenue is None:
            self.logger.info("ebitda not calculated: no revenue data (documents=%d)", len(documents))
            return EBITDAResult(data_completeness=data_completeness, warnings=warnings, last_updated=now)

        breakdown = calculate_ebitda(revenue, expenses)
        if breakdown.ebitda < 0:
            warnings.append(NEGATIVE_EBITDA_WARNING)

        self.logger.info(
            "ebitda calculated: documents=%d overhead=%s payroll=%s ebitda=%.0f margin=%.2f",
            len(documents),
            has_overhead_data,
            has_payroll_data,
            breakdown.ebitda,
            breakdown.ebitda_margin,
        )
        return EBITDAResult(
            breakdown=breakdown,
            data_completeness=data_completeness,
            warnings=warnings,
            last_updated=now,
        )

    def _now(self) -> str:
        return self.clock().isoformat()

    def _resolve_overhead(self, snapshot: BusinessSnapshot, now: str) -> Tuple[Optional[OverheadCosts], OverheadSource]:
        if snapshot.overhead is not None:
            return snapshot.overhead, OverheadSource.MANUAL
        if snapshot.profile_monthly_overhead_estimate:
            return overhead_from_estimate(snapshot.profile_monthly_overhead_estimate, now), OverheadSource.PROFILE_ESTIMATE
        return None, OverheadSource.NONE

    def _employee_cost_summary(self, snapshot: BusinessSnapshot) -> Optional[EmployeeCostSummary]:
        if not snapshot.employees:
            return None
        return self.employee_costs(snapshot).summary
