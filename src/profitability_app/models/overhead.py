from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field, confloat


class SoftwareCost(BaseModel):
    name: str
    monthly_cost: float


class OverheadCosts(BaseModel):
    monthly_rent: confloat(ge=0) = 0.0
    monthly_utilities: confloat(ge=0) = 0.0
    monthly_insurance: confloat(ge=0) = 0.0
    other_monthly_costs: confloat(ge=0) = 0.0
    software_costs: List[SoftwareCost] = Field(default_factory=list)
    updated_at: str = Field(..., description="ISO timestamp of the last edit to this record")
