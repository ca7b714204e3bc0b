from __future__ import annotations

import pytest

from profitability_app.models.common import CalculationSettings
from profitability_app.models.employees import Employee
from profitability_app.models.overhead import OverheadCosts, SoftwareCost
from profitability_app.sample_data import build_sample_employees, build_sample_overhead
from profitability_app.services.employee_costs import (
    OVERHEAD_MISSING_WARNING,
    calculate_all_employee_costs,
    calculate_cost_summary,
    calculate_fully_loaded_cost,
    calculate_total_monthly_overhead,
    overhead_from_estimate,
)


def _employee(salary: float = 100000, benefits: float = 15000, employee_id: str = "emp-1") -> Employee:
    return Employee(id=employee_id, name="Test Person", role="Producer", annual_salary=salary, annual_benefits=benefits)


def test_total_monthly_overhead_sums_fixed_and_software_costs():
    overhead = build_sample_overhead()
    assert calculate_total_monthly_overhead(overhead) == 7300


def test_total_monthly_overhead_is_zero_without_record():
    assert calculate_total_monthly_overhead(None) == 0


def test_fully_loaded_cost_matches_reference_example():
    breakdown = calculate_fully_loaded_cost(_employee(), build_sample_overhead(), headcount=5)

    assert breakdown.payroll_taxes == 7650
    assert breakdown.benefits == 15000
    assert breakdown.allocated_overhead == 17520
    assert breakdown.fully_loaded_cost == 140170
    assert breakdown.annual_cost == breakdown.fully_loaded_cost
    assert breakdown.monthly_cost == pytest.approx(11680.83, abs=0.01)


def test_fully_loaded_cost_is_exact_sum_of_components():
    overhead = OverheadCosts(monthly_rent=1234.56, software_costs=[SoftwareCost(name="CRM", monthly_cost=99.99)], updated_at="2024-01-01")
    for salary in (0, 33333, 51234.5, 87999):
        breakdown = calculate_fully_loaded_cost(_employee(salary=salary, benefits=1234.5), overhead, headcount=3)
        assert breakdown.fully_loaded_cost == (
            breakdown.base_salary + breakdown.payroll_taxes + breakdown.benefits + breakdown.allocated_overhead
        )


def test_no_overhead_allocated_without_overhead_record():
    costs = calculate_all_employee_costs(build_sample_employees(), None)
    assert all(cost.allocated_overhead == 0 for cost in costs)


def test_non_positive_headcount_allocates_nothing():
    breakdown = calculate_fully_loaded_cost(_employee(), build_sample_overhead(), headcount=0)
    assert breakdown.allocated_overhead == 0
    assert breakdown.fully_loaded_cost == 100000 + 7650 + 15000


def test_payroll_tax_rounds_half_away_from_zero():
    # 25 * 0.1 == 2.5; banker's rounding would give 2.
    settings = CalculationSettings(payroll_tax_rate=0.1)
    breakdown = calculate_fully_loaded_cost(_employee(salary=25, benefits=0), None, headcount=1, settings=settings)
    assert breakdown.payroll_taxes == 3


def test_overhead_split_remainder_is_bounded_by_headcount():
    overhead = OverheadCosts(other_monthly_costs=1000, updated_at="2024-01-01")
    employees = [_employee(employee_id=f"emp-{i}") for i in range(7)]

    costs = calculate_all_employee_costs(employees, overhead)
    allocated = sum(cost.allocated_overhead for cost in costs)

    assert {cost.allocated_overhead for cost in costs} == {1714}
    assert abs(allocated - 12000) <= len(employees) - 1


def test_cost_summary_totals_and_warnings():
    costs = calculate_all_employee_costs(build_sample_employees(), build_sample_overhead())
    summary = calculate_cost_summary(costs, has_overhead_data=True)

    assert summary.total_headcount == 5
    assert summary.total_base_salary == 280000
    assert summary.total_payroll_taxes == 21420
    assert summary.total_benefits == 30000
    assert summary.total_overhead_allocated == 87600
    assert summary.total_fully_loaded_cost == 419020
    assert summary.average_fully_loaded_cost == pytest.approx(83804)
    assert summary.has_overhead_data is True
    assert summary.has_benefits_data is True
    assert summary.missing_data_warnings == ["Benefits not specified for 2 employee(s)."]


def test_cost_summary_lists_overhead_warning_before_benefits_warning():
    costs = calculate_all_employee_costs([_employee(benefits=0)], None)
    summary = calculate_cost_summary(costs, has_overhead_data=False)

    assert summary.has_benefits_data is False
    assert summary.missing_data_warnings == [
        OVERHEAD_MISSING_WARNING,
        "Benefits not specified for 1 employee(s).",
    ]


def test_cost_summary_for_empty_roster():
    summary = calculate_cost_summary([], has_overhead_data=False)

    assert summary.total_headcount == 0
    assert summary.total_fully_loaded_cost == 0
    assert summary.average_fully_loaded_cost == 0
    assert summary.has_benefits_data is False
    assert summary.missing_data_warnings == [OVERHEAD_MISSING_WARNING]

    assert calculate_cost_summary([], has_overhead_data=True).missing_data_warnings == []


def test_overhead_from_estimate_carries_estimate_as_other_costs():
    overhead = overhead_from_estimate(2500, "2024-06-01T00:00:00+00:00")
    assert calculate_total_monthly_overhead(overhead) == 2500
    assert overhead.updated_at == "2024-06-01T00:00:00+00:00"
