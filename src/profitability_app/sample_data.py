from __future__ import annotations

from .models.common import EmploymentType, RevenueRange
from .models.documents import (
    ExtractedExpenseCategory,
    ExtractedExpenses,
    ExtractedPeriod,
    ExtractedRevenue,
    FinancialDocument,
    LineItem,
    PLExtraction,
)
from .models.employees import Employee
from .models.overhead import OverheadCosts, SoftwareCost
from .models.snapshot import BusinessSnapshot


def build_sample_employees() -> list[Employee]:
    return [
        Employee(
            id="emp-1",
            name="Alice Johnson",
            role="Producer",
            department="Sales",
            annual_salary=100000,
            annual_benefits=15000,
            updated_at="2024-11-02T09:30:00Z",
        ),
        Employee(
            id="emp-2",
            name="Bob Smith",
            role="Account Manager",
            department="Service",
            annual_salary=60000,
            annual_benefits=9000,
            updated_at="2024-10-15T14:00:00Z",
        ),
        Employee(
            id="emp-3",
            name="Carol Diaz",
            role="CSR (Customer Service Representative)",
            department="Service",
            annual_salary=48000,
            annual_benefits=6000,
            updated_at="2024-09-20T08:15:00Z",
        ),
        Employee(
            id="emp-4",
            name="Dan Lee",
            role="Office Manager",
            department="Administration",
            employment_type=EmploymentType.PART_TIME,
            annual_salary=32000,
            updated_at="2024-08-01T12:00:00Z",
        ),
        Employee(
            id="emp-5",
            name="Eve Martin",
            role="Marketing",
            employment_type=EmploymentType.CONTRACTOR,
            annual_salary=40000,
            updated_at="2024-07-11T16:45:00Z",
        ),
    ]


def build_sample_overhead() -> OverheadCosts:
    # 4,000 + 500 + 800 + 1,500 + 500 in software = 7,300 per month.
    return OverheadCosts(
        monthly_rent=4000,
        monthly_utilities=500,
        monthly_insurance=800,
        other_monthly_costs=1500,
        software_costs=[
            SoftwareCost(name="QuickBooks", monthly_cost=200),
            SoftwareCost(name="Slack", monthly_cost=150),
            SoftwareCost(name="Agency Management System", monthly_cost=150),
        ],
        updated_at="2024-10-01T10:00:00Z",
    )


def build_sample_document(
    document_id: str = "doc-2024",
    last_updated: str = "2024-12-01T00:00:00Z",
    revenue: float = 500000,
    expenses: float = 420000,
) -> FinancialDocument:
    return FinancialDocument(
        document_id=document_id,
        filename=f"{document_id}-profit-and-loss.pdf",
        last_updated=last_updated,
        extraction=PLExtraction(
            period=ExtractedPeriod(start_date="2024-01-01", end_date="2024-12-31"),
            revenue=ExtractedRevenue(
                total=revenue,
                line_items=[
                    LineItem(description="Commissions", amount=revenue * 0.8),
                    LineItem(description="Fees", amount=revenue * 0.2),
                ],
            ),
            expenses=ExtractedExpenses(
                total=expenses,
                categories=[
                    ExtractedExpenseCategory(category="Payroll", amount=expenses * 0.6),
                    ExtractedExpenseCategory(category="Rent", amount=expenses * 0.25),
                    ExtractedExpenseCategory(category="Marketing", amount=expenses * 0.15),
                ],
            ),
            net_income=revenue - expenses,
        ),
    )


def build_sample_snapshot(with_documents: bool = True) -> BusinessSnapshot:
    return BusinessSnapshot(
        employees=build_sample_employees(),
        overhead=build_sample_overhead(),
        documents=[build_sample_document()] if with_documents else [],
        profile_revenue_range=RevenueRange.FROM_500K_TO_1M,
    )
