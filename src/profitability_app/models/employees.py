from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field, confloat

from .common import EmploymentType


class Employee(BaseModel):
    id: str
    name: str
    role: str
    department: Optional[str] = None
    employment_type: EmploymentType = EmploymentType.FULL_TIME
    annual_salary: confloat(ge=0)
    annual_benefits: confloat(ge=0) = Field(0.0, description="Zero when benefits were not provided")
    updated_at: Optional[str] = None


class EmployeeCostBreakdown(BaseModel):
    employee_id: str
    employee_name: str
    role: str
    department: Optional[str] = None
    employment_type: EmploymentType
    base_salary: float
    payroll_taxes: float
    benefits: float
    allocated_overhead: float
    fully_loaded_cost: float
    annual_cost: float
    monthly_cost: float


class EmployeeCostSummary(BaseModel):
    total_headcount: int
    total_fully_loaded_cost: float
    average_fully_loaded_cost: float
    total_base_salary: float
    total_payroll_taxes: float
    total_benefits: float
    total_overhead_allocated: float
    has_overhead_data: bool
    has_benefits_data: bool
    missing_data_warnings: List[str] = Field(default_factory=list)


class EmployeesSource(str, Enum):
    MANUAL = "manual"
    CSV_IMPORT = "csv_import"
    MIXED = "mixed"


class OverheadSource(str, Enum):
    MANUAL = "manual"
    PROFILE_ESTIMATE = "profile_estimate"
    NONE = "none"


class EmployeeDataSource(BaseModel):
    employees_source: EmployeesSource = EmployeesSource.MANUAL
    overhead_source: OverheadSource
    last_updated: str


class EmployeeCostResult(BaseModel):
    employees: List[EmployeeCostBreakdown]
    summary: EmployeeCostSummary
    data_source: EmployeeDataSource
