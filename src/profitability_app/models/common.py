from __future__ import annotations

from enum import Enum
from typing import Dict

from pydantic import BaseModel, Field, confloat


class EmploymentType(str, Enum):
    FULL_TIME = "full-time"
    PART_TIME = "part-time"
    CONTRACTOR = "contractor"


class Confidence(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class RevenueRange(str, Enum):
    UNDER_250K = "under-250k"
    FROM_250K_TO_500K = "250k-500k"
    FROM_500K_TO_1M = "500k-1m"
    FROM_1M_TO_2M = "1m-2m"
    FROM_2M_TO_5M = "2m-5m"
    OVER_5M = "5m-plus"


# Employer-side FICA: Social Security 6.2% + Medicare 1.45%, no wage cap.
PAYROLL_TAX_RATE = 0.0765

REVENUE_RANGE_MIDPOINTS: Dict[str, float] = {
    RevenueRange.UNDER_250K.value: 125000,
    RevenueRange.FROM_250K_TO_500K.value: 375000,
    RevenueRange.FROM_500K_TO_1M.value: 750000,
    RevenueRange.FROM_1M_TO_2M.value: 1500000,
    RevenueRange.FROM_2M_TO_5M.value: 3500000,
    RevenueRange.OVER_5M.value: 7500000,
}


class CalculationSettings(BaseModel):
    payroll_tax_rate: confloat(ge=0, le=1) = Field(PAYROLL_TAX_RATE, description="Employer payroll tax rate as decimal")
    revenue_range_midpoints: Dict[str, float] = Field(
        default_factory=lambda: dict(REVENUE_RANGE_MIDPOINTS),
        description="Dollar estimate used for each profile revenue range",
    )

    def revenue_for_range(self, revenue_range: str | None) -> float | None:
        if not revenue_range:
            return None
        if isinstance(revenue_range, RevenueRange):
            revenue_range = revenue_range.value
        return self.revenue_range_midpoints.get(revenue_range)


class ReportingPeriod(BaseModel):
    start_date: str
    end_date: str
