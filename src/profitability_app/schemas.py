from __future__ import annotations

from typing import List

from pydantic import BaseModel

from .models.documents import DocumentRecord, FinancialDocument
from .models.ebitda import EBITDAResult
from .models.employees import EmployeeCostResult


class EmployeeCostResponse(BaseModel):
    result: EmployeeCostResult


class EBITDAResponse(BaseModel):
    result: EBITDAResult


class DocumentFilterRequest(BaseModel):
    records: List[DocumentRecord]


class DocumentFilterResponse(BaseModel):
    documents: List[FinancialDocument]
