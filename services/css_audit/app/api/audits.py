"""Audit API."""
from __future__ import annotations

from typing import Any, List

from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict, Field

from ..domain.report import build_audit_report
from ..domain.throughput import FixedThroughput, ThroughputProvider
from ..domain.types import AuditArtifacts, NetworkTransferRecord, StylesheetRecord, UsageEntry
from ..domain.unused_css import audit
from .deps import get_throughput_provider

router = APIRouter(prefix="/audits", tags=["audits"])


class StylesheetHeader(BaseModel):
    style_sheet_id: str = Field(alias="styleSheetId")
    source_url: str | None = Field(default=None, alias="sourceURL")

    model_config = ConfigDict(populate_by_name=True)


class StylesheetPayload(BaseModel):
    header: StylesheetHeader
    content: str = ""
    is_duplicate: bool = Field(default=False, alias="isDuplicate")

    model_config = ConfigDict(populate_by_name=True)

    def to_record(self) -> StylesheetRecord:
        return StylesheetRecord(
            stylesheet_id=self.header.style_sheet_id,
            source_url=self.header.source_url,
            content=self.content,
            is_duplicate=self.is_duplicate,
        )


class UsagePayload(BaseModel):
    style_sheet_id: str = Field(alias="styleSheetId")
    used: bool

    model_config = ConfigDict(populate_by_name=True)


class NetworkRecordPayload(BaseModel):
    url: str
    resource_type: str | None = Field(default=None, alias="resourceType")
    transfer_size: int = Field(default=0, alias="transferSize")
    response_received_time: float | None = Field(default=None, alias="responseReceivedTime")
    end_time: float | None = Field(default=None, alias="endTime")
    status_code: int | None = Field(default=None, alias="statusCode")
    finished: bool = True
    failed: bool = False

    model_config = ConfigDict(populate_by_name=True)

    def to_record(self) -> NetworkTransferRecord:
        return NetworkTransferRecord(
            url=self.url,
            resource_type=self.resource_type,
            transfer_size=self.transfer_size,
            response_received_time=self.response_received_time,
            end_time=self.end_time,
            status_code=self.status_code,
            finished=self.finished,
            failed=self.failed,
        )


class PageUrlPayload(BaseModel):
    final_url: str = Field(alias="finalUrl")

    model_config = ConfigDict(populate_by_name=True)


class UnusedCssAuditRequest(BaseModel):
    styles: List[StylesheetPayload] = Field(default_factory=list, alias="Styles")
    css_usage: List[UsagePayload] = Field(default_factory=list, alias="CSSUsage")
    url: PageUrlPayload = Field(alias="URL")
    network_records: List[NetworkRecordPayload] = Field(default_factory=list, alias="networkRecords")
    network_throughput: float | None = Field(default=None, alias="networkThroughput", gt=0)

    model_config = ConfigDict(populate_by_name=True)

    def to_artifacts(self) -> AuditArtifacts:
        return AuditArtifacts(
            styles=[sheet.to_record() for sheet in self.styles],
            css_usage=[UsageEntry(stylesheet_id=entry.style_sheet_id, used=entry.used) for entry in self.css_usage],
            page_url=self.url.final_url,
            network_records=[record.to_record() for record in self.network_records],
        )


@router.post("/unused-css-rules")
async def run_unused_css_audit(
    request: UnusedCssAuditRequest,
    throughput_provider: ThroughputProvider = Depends(get_throughput_provider),
) -> dict[str, Any]:
    if request.network_throughput is not None:
        throughput_provider = FixedThroughput(request.network_throughput)
    result = await audit(request.to_artifacts(), throughput_provider)
    return build_audit_report(result)


__all__ = ["router"]
