"""Audit report payloads."""
from __future__ import annotations

from .types import AuditResult, SheetResult
from .unused_css import AUDIT_META


def _sheet_row(result: SheetResult) -> dict:
    return {
        "url": result.url,
        "numUnused": result.num_unused,
        "wastedBytes": result.wasted_bytes,
        "totalKb": result.total_kb,
        "potentialSavings": result.potential_savings,
    }


def build_audit_report(result: AuditResult) -> dict:
    return {
        "name": AUDIT_META["name"],
        "category": AUDIT_META["category"],
        "description": AUDIT_META["description"],
        "helpText": AUDIT_META["helpText"],
        "score": result.score,
        "rawValue": result.raw_value,
        "displayValue": result.display_value,
        "summary": {
            "unusedRatio": round(result.unused_ratio, 4),
            "wastedBytes": result.total_wasted_bytes,
        },
        "extendedInfo": {
            "formatter": "table",
            "value": {
                "results": [_sheet_row(row) for row in result.results],
                "tableHeadings": dict(result.table_headings),
            },
        },
    }


__all__ = ["build_audit_report"]
