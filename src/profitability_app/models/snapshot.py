from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field, confloat

from .common import RevenueRange
from .documents import FinancialDocument
from .employees import Employee
from .overhead import OverheadCosts


class BusinessSnapshot(BaseModel):
    employees: List[Employee] = Field(default_factory=list)
    overhead: Optional[OverheadCosts] = None
    documents: List[FinancialDocument] = Field(default_factory=list, description="P&L documents only")
    profile_revenue_range: Optional[RevenueRange] = None
    profile_monthly_overhead_estimate: Optional[confloat(ge=0)] = None
