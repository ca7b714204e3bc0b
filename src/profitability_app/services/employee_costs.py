"""Fully loaded employee cost calculation.

fully_loaded_cost = base_salary + payroll_taxes + benefits + allocated_overhead

- payroll_taxes: employer FICA (7.65% by default) on the full salary.
- allocated_overhead: annual overhead split evenly across the whole roster.
"""
from __future__ import annotations

from typing import List, Optional, Sequence

from ..models.common import CalculationSettings
from ..models.employees import Employee, EmployeeCostBreakdown, EmployeeCostSummary
from ..models.overhead import OverheadCosts
from .rounding import round_half_away

OVERHEAD_MISSING_WARNING = "Overhead data not available. Allocated overhead is not included in calculations."

DEFAULT_SETTINGS = CalculationSettings()


def calculate_total_monthly_overhead(overhead: Optional[OverheadCosts]) -> float:
    if overhead is None:
        return 0.0
    software_total = sum(software.monthly_cost for software in overhead.software_costs)
    return (
        overhead.monthly_rent
        + overhead.monthly_utilities
        + overhead.monthly_insurance
        + overhead.other_monthly_costs
        + software_total
    )


def calculate_fully_loaded_cost(
    employee: Employee,
    overhead: Optional[OverheadCosts],
    headcount: int,
    settings: Optional[CalculationSettings] = None,
) -> EmployeeCostBreakdown:
    settings = settings or DEFAULT_SETTINGS
    base_salary = employee.annual_salary
    payroll_taxes = round_half_away(base_salary * settings.payroll_tax_rate)
    benefits = employee.annual_benefits

    annual_overhead = calculate_total_monthly_overhead(overhead) * 12
    allocated_overhead = round_half_away(annual_overhead / headcount) if headcount > 0 else 0.0

    fully_loaded_cost = base_salary + payroll_taxes + benefits + allocated_overhead

    return EmployeeCostBreakdown(
        employee_id=employee.id,
        employee_name=employee.name,
        role=employee.role,
        department=employee.department,
        employment_type=employee.employment_type,
        base_salary=base_salary,
        payroll_taxes=payroll_taxes,
        benefits=benefits,
        allocated_overhead=allocated_overhead,
        fully_loaded_cost=fully_loaded_cost,
        annual_cost=fully_loaded_cost,
        monthly_cost=fully_loaded_cost / 12,
    )


def calculate_all_employee_costs(
    employees: Sequence[Employee],
    overhead: Optional[OverheadCosts],
    settings: Optional[CalculationSettings] = None,
) -> List[EmployeeCostBreakdown]:
    headcount = len(employees)
    return [calculate_fully_loaded_cost(employee, overhead, headcount, settings) for employee in employees]


def calculate_cost_summary(
    employee_costs: Sequence[EmployeeCostBreakdown],
    has_overhead_data: bool,
) -> EmployeeCostSummary:
    total_headcount = len(employee_costs)
    warnings: List[str] = []
    if not has_overhead_data:
        warnings.append(OVERHEAD_MISSING_WARNING)

    if total_headcount == 0:
        return EmployeeCostSummary(
            total_headcount=0,
            total_fully_loaded_cost=0.0,
            average_fully_loaded_cost=0.0,
            total_base_salary=0.0,
            total_payroll_taxes=0.0,
            total_benefits=0.0,
            total_overhead_allocated=0.0,
            has_overhead_data=has_overhead_data,
            has_benefits_data=False,
            missing_data_warnings=warnings,
        )

    total_fully_loaded_cost = sum(cost.fully_loaded_cost for cost in employee_costs)

    # A stored zero and an omitted value are indistinguishable here.
    without_benefits = sum(1 for cost in employee_costs if cost.benefits == 0)
    if without_benefits > 0:
        warnings.append(f"Benefits not specified for {without_benefits} employee(s).")

    return EmployeeCostSummary(
        total_headcount=total_headcount,
        total_fully_loaded_cost=total_fully_loaded_cost,
        average_fully_loaded_cost=total_fully_loaded_cost / total_headcount,
        total_base_salary=sum(cost.base_salary for cost in employee_costs),
        total_payroll_taxes=sum(cost.payroll_taxes for cost in employee_costs),
        total_benefits=sum(cost.benefits for cost in employee_costs),
        total_overhead_allocated=sum(cost.allocated_overhead for cost in employee_costs),
        has_overhead_data=has_overhead_data,
        has_benefits_data=any(cost.benefits > 0 for cost in employee_costs),
        missing_data_warnings=warnings,
    )


def overhead_from_estimate(monthly_estimate: float, updated_at: str) -> OverheadCosts:
    """Synthetic overhead record carrying a coarse profile estimate as other costs."""
    return OverheadCosts(other_monthly_costs=monthly_estimate, updated_at=updated_at)
