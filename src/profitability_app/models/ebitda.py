from __future__ import annotations

from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, Field

from .common import Confidence, ReportingPeriod


class PLDocumentRevenueSource(BaseModel):
    type: Literal["pl_document"] = "pl_document"
    document_id: str
    filename: str
    period_start: Optional[str] = None
    period_end: Optional[str] = None
    last_updated: str
    confidence: Confidence = Confidence.HIGH


class ProfileEstimateRevenueSource(BaseModel):
    type: Literal["profile_estimate"] = "profile_estimate"
    last_updated: str
    confidence: Confidence = Confidence.LOW


RevenueSource = Annotated[
    Union[PLDocumentRevenueSource, ProfileEstimateRevenueSource],
    Field(discriminator="type"),
]


class PLDocumentExpenseSource(BaseModel):
    type: Literal["pl_document"] = "pl_document"
    document_id: str
    filename: str
    last_updated: str
    amount: float


class OverheadExpenseSource(BaseModel):
    type: Literal["overhead_costs"] = "overhead_costs"
    last_updated: str
    amount: float


class EmployeeCostExpenseSource(BaseModel):
    type: Literal["employee_costs"] = "employee_costs"
    last_updated: str
    amount: float


ExpenseSource = Annotated[
    Union[PLDocumentExpenseSource, OverheadExpenseSource, EmployeeCostExpenseSource],
    Field(discriminator="type"),
]


class ExpenseCategory(BaseModel):
    name: str
    amount: float
    source: ExpenseSource


class RevenueData(BaseModel):
    amount: float
    source: RevenueSource


class ExpenseData(BaseModel):
    total: float = 0.0
    categories: List[ExpenseCategory] = Field(default_factory=list)
    sources: List[ExpenseSource] = Field(default_factory=list)


class EBITDABreakdown(BaseModel):
    revenue: float
    revenue_source: RevenueSource
    total_operating_expenses: float
    expense_categories: List[ExpenseCategory]
    expense_sources: List[ExpenseSource]
    ebitda: float
    ebitda_margin: float = Field(..., description="Percentage, e.g. 25.5 for 25.5%")
    period: Optional[ReportingPeriod] = None


class DataCompleteness(BaseModel):
    has_revenue_data: bool
    has_expense_data: bool
    has_payroll_data: bool
    has_overhead_data: bool


class EBITDAResult(BaseModel):
    breakdown: Optional[EBITDABreakdown] = Field(None, description="None when no revenue figure could be resolved")
    data_completeness: DataCompleteness
    warnings: List[str] = Field(default_factory=list)
    last_updated: str
