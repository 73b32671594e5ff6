"""Domain-level dataclasses for the unused CSS audit."""
from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class StylesheetRecord:
    stylesheet_id: str
    source_url: str | None
    content: str = ""
    is_duplicate: bool = False


@dataclass(frozen=True)
class UsageEntry:
    stylesheet_id: str
    used: bool


@dataclass(frozen=True)
class NetworkTransferRecord:
    url: str
    resource_type: str | None
    transfer_size: int = 0
    response_received_time: float | None = None
    end_time: float | None = None
    status_code: int | None = None
    finished: bool = True
    failed: bool = False

    @property
    def is_stylesheet(self) -> bool:
        return (self.resource_type or "").lower() == "stylesheet"


@dataclass
class IndexedStylesheetInfo:
    """Per-sheet aggregation state; only ``used`` and ``unused`` change after indexing."""

    stylesheet: StylesheetRecord
    network_record: NetworkTransferRecord | None = None
    used: list[UsageEntry] = field(default_factory=list)
    unused: list[UsageEntry] = field(default_factory=list)

    @property
    def stylesheet_id(self) -> str:
        return self.stylesheet.stylesheet_id

    @property
    def source_url(self) -> str | None:
        return self.stylesheet.source_url

    @property
    def content(self) -> str:
        return self.stylesheet.content

    @property
    def is_duplicate(self) -> bool:
        return self.stylesheet.is_duplicate


@dataclass(frozen=True)
class SheetResult:
    url: str
    num_unused: int
    wasted_bytes: int
    total_kb: str
    potential_savings: str


@dataclass
class AuditArtifacts:
    styles: list[StylesheetRecord]
    css_usage: list[UsageEntry]
    page_url: str
    network_records: list[NetworkTransferRecord] = field(default_factory=list)


@dataclass
class AuditResult:
    raw_value: bool
    display_value: str
    unused_ratio: float
    total_wasted_bytes: int
    results: list[SheetResult]
    table_headings: dict[str, str]

    @property
    def score(self) -> bool:
        return self.raw_value


__all__ = [
    "AuditArtifacts",
    "AuditResult",
    "IndexedStylesheetInfo",
    "NetworkTransferRecord",
    "SheetResult",
    "StylesheetRecord",
    "UsageEntry",
]
