from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Optional, Sequence

from dateutil.parser import isoparse, parse

from ..models.documents import (
    DocumentRecord,
    ExtractedExpenseCategory,
    ExtractedExpenses,
    ExtractedPeriod,
    ExtractedRevenue,
    FinancialDocument,
    LineItem,
    PLExtraction,
)

PL_DOCUMENT_TYPES = {"pl", "income_statement", "profit_loss"}

# Fills components missing from loose dates such as "Dec 2024" so parsing never depends on today.
_PARSE_DEFAULT = datetime(1970, 1, 1)


def parse_timestamp(value: Optional[str]) -> float:
    """Epoch seconds for a date string; 0 (oldest) when it cannot be parsed.

    ISO-8601 is tried first, then loose forms such as "2024/12/01" or "Dec 1, 2024".
    """
    if not value:
        return 0.0
    try:
        parsed = isoparse(value)
    except ValueError:
        try:
            parsed = parse(value, default=_PARSE_DEFAULT)
        except (ValueError, OverflowError):
            return 0.0
    except OverflowError:
        return 0.0
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.timestamp()


def select_most_recent_document(documents: Sequence[FinancialDocument]) -> Optional[FinancialDocument]:
    """Latest ``last_updated`` wins; equal timestamps fall back to the smallest document id."""
    if not documents:
        return None
    ordered = sorted(documents, key=lambda doc: (-parse_timestamp(doc.last_updated), doc.document_id))
    return ordered[0]


def is_pl_document(extracted_data: Optional[Dict[str, Any]]) -> bool:
    if not extracted_data:
        return False
    return extracted_data.get("documentType") in PL_DOCUMENT_TYPES


def _line_items(items: Optional[List[Dict[str, Any]]]) -> List[LineItem]:
    return [LineItem(description=item.get("description", ""), amount=item.get("amount", 0.0)) for item in items or []]


def extraction_from_payload(data: Dict[str, Any]) -> PLExtraction:
    """Build a ``PLExtraction`` from the camelCase payload stored by the extraction step."""
    period = data.get("period") or {}
    revenue = data.get("revenue") or {}
    expenses = data.get("expenses") or {}
    return PLExtraction(
        period=ExtractedPeriod(
            start_date=period.get("startDate") or "",
            end_date=period.get("endDate") or "",
        ),
        revenue=ExtractedRevenue(
            total=revenue.get("total", 0.0),
            line_items=_line_items(revenue.get("lineItems")),
        ),
        expenses=ExtractedExpenses(
            total=expenses.get("total", 0.0),
            categories=[
                ExtractedExpenseCategory(
                    category=cat.get("category", ""),
                    amount=cat.get("amount", 0.0),
                    line_items=_line_items(cat.get("lineItems")),
                )
                for cat in expenses.get("categories") or []
            ],
        ),
        net_income=data.get("netIncome", 0.0),
    )


def collect_pl_documents(records: Iterable[DocumentRecord]) -> List[FinancialDocument]:
    """Completed records whose extraction is a P&L statement, in input order."""
    documents: List[FinancialDocument] = []
    for record in records:
        if record.processing_status != "completed" or not is_pl_document(record.extracted_data):
            continue
        documents.append(
            FinancialDocument(
                document_id=record.document_id,
                filename=record.filename,
                last_updated=record.updated_at,
                extraction=extraction_from_payload(record.extracted_data),
            )
        )
    return documents
