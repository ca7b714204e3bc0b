from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class LineItem(BaseModel):
    description: str
    amount: float


class ExtractedPeriod(BaseModel):
    start_date: str = Field("", description="YYYY-MM-DD, empty string if unknown")
    end_date: str = Field("", description="YYYY-MM-DD, empty string if unknown")


class ExtractedRevenue(BaseModel):
    total: float
    line_items: List[LineItem] = Field(default_factory=list)


class ExtractedExpenseCategory(BaseModel):
    category: str
    amount: float
    line_items: List[LineItem] = Field(default_factory=list)


class ExtractedExpenses(BaseModel):
    total: float
    categories: List[ExtractedExpenseCategory] = Field(default_factory=list)


class PLExtraction(BaseModel):
    period: ExtractedPeriod = Field(default_factory=ExtractedPeriod)
    revenue: ExtractedRevenue
    expenses: ExtractedExpenses
    net_income: float = Field(0.0, description="Revenue minus expenses as stated, 0 if unknown")


class FinancialDocument(BaseModel):
    document_id: str
    filename: str
    last_updated: str
    extraction: PLExtraction


class DocumentRecord(BaseModel):
    """Document row as handed over by the record store, before P&L filtering."""

    document_id: str
    filename: str
    updated_at: str
    processing_status: str = "completed"
    extracted_data: Optional[Dict[str, Any]] = None
