"""Unused CSS rules audit: estimates bytes and time spent on CSS the page never applies."""
from __future__ import annotations

import math

import structlog
from opentelemetry import trace

from ..config import get_settings
from .formatting import KB_IN_BYTES, round_half_up
from .indexing import index_stylesheets_by_id
from .sheet_results import map_sheet_to_result
from .throughput import ThroughputProvider, ThroughputUnavailableError
from .types import AuditArtifacts, AuditResult, SheetResult
from .usage import count_unused_rules

logger = structlog.get_logger(__name__)
tracer = trace.get_tracer(__name__)

AUDIT_META = {
    "category": "CSS",
    "name": "unused-css-rules",
    "description": "Uses 90% of its CSS rules",
    "helpText": (
        "Remove unused rules from stylesheets to reduce unnecessary bytes consumed by network activity. "
        "[Learn more](https://developers.google.com/speed/docs/insights/OptimizeCSSDelivery)"
    ),
    "requiredArtifacts": ["CSSUsage", "Styles", "URL", "networkRecords"],
}

TABLE_HEADINGS = {
    "url": "URL",
    "numUnused": "Unused Rules",
    "totalKb": "Original (KB)",
    "potentialSavings": "Potential Savings (%)",
}


def estimate_wasted_ms(wasted_bytes: int, network_throughput: float) -> int:
    """Load time for the wasted bytes, rounded to the nearest 10ms.

    ``audit`` only passes positive throughput; direct ``audit_`` callers must do the same.
    """
    if not network_throughput > 0:
        raise ValueError(f"Network throughput must be positive, got {network_throughput!r}")
    if math.isinf(network_throughput):
        return 0
    return round_half_up(wasted_bytes / network_throughput * 100) * 10


def _display_value(unused: int, wasted_bytes: int, network_throughput: float) -> str:
    if unused <= 0:
        return ""
    wasted_kb = round_half_up(wasted_bytes / KB_IN_BYTES)
    wasted_ms = estimate_wasted_ms(wasted_bytes, network_throughput)
    return f"{wasted_kb}KB (~{wasted_ms}ms) potential savings"


async def audit(artifacts: AuditArtifacts, throughput_provider: ThroughputProvider) -> AuditResult:
    network_throughput = await throughput_provider.request_network_throughput(artifacts.network_records)
    if not network_throughput > 0:
        raise ThroughputUnavailableError(f"Network throughput must be positive, got {network_throughput!r}")
    return audit_(artifacts, network_throughput)


def audit_(artifacts: AuditArtifacts, network_throughput: float) -> AuditResult:
    with tracer.start_as_current_span("unused_css_rules.audit") as span:
        indexed_sheets = index_stylesheets_by_id(artifacts.styles, artifacts.network_records)
        unused = count_unused_rules(artifacts.css_usage, indexed_sheets)
        unused_ratio = unused / len(artifacts.css_usage) if artifacts.css_usage else 0.0

        results: list[SheetResult] = []
        for stylesheet_info in indexed_sheets.values():
            result = map_sheet_to_result(stylesheet_info, artifacts.page_url)
            if result is not None:
                results.append(result)

        wasted_bytes = sum(result.wasted_bytes for result in results)
        display_value = _display_value(unused, wasted_bytes, network_throughput)
        passed = unused_ratio < get_settings().tuning.allowable_unused_rules_ratio

        span.set_attribute("css_audit.unused_rules", unused)
        span.set_attribute("css_audit.wasted_bytes", wasted_bytes)
        logger.info(
            "unused_css.audit",
            page_url=artifacts.page_url,
            stylesheets=len(indexed_sheets),
            usage_entries=len(artifacts.css_usage),
            unused_rules=unused,
            unused_ratio=round(unused_ratio, 4),
            wasted_bytes=wasted_bytes,
            passed=passed,
        )

    return AuditResult(
        raw_value=passed,
        display_value=display_value,
        unused_ratio=unused_ratio,
        total_wasted_bytes=wasted_bytes,
        results=results,
        table_headings=dict(TABLE_HEADINGS),
    )


__all__ = ["AUDIT_META", "TABLE_HEADINGS", "audit", "audit_", "estimate_wasted_ms"]
