from __future__ import annotations

from typing import Dict

from fastapi import FastAPI, HTTPException

from .models.snapshot import BusinessSnapshot
from .schemas import DocumentFilterRequest, DocumentFilterResponse, EBITDAResponse, EmployeeCostResponse
from .services.calculator import FinancialCalculator
from .services.documents import collect_pl_documents


app = FastAPI(title="Small Business Profitability Engine", version="0.1.0")

calculator = FinancialCalculator()


@app.post("/employee-costs", response_model=EmployeeCostResponse)
def get_employee_costs(payload: BusinessSnapshot) -> EmployeeCostResponse:
    if not payload.employees:
        raise HTTPException(status_code=404, detail="No employees found. Add employees first to calculate costs.")
    result = calculator.employee_costs(payload)
    return EmployeeCostResponse(result=result)


@app.post("/ebitda", response_model=EBITDAResponse)
def get_ebitda(payload: BusinessSnapshot) -> EBITDAResponse:
    result = calculator.ebitda(payload)
    if result.breakdown is None:
        raise HTTPException(status_code=404, detail="No revenue data found. Upload a P&L statement or complete your profile.")
    return EBITDAResponse(result=result)


@app.post("/documents/pl", response_model=DocumentFilterResponse)
def filter_pl_documents(payload: DocumentFilterRequest) -> DocumentFilterResponse:
    return DocumentFilterResponse(documents=collect_pl_documents(payload.records))


@app.get("/health")
def healthcheck() -> Dict[str, str]:
    return {"status": "ok"}
