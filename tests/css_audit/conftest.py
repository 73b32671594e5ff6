from types import SimpleNamespace

import pytest

from services.css_audit.app.domain.types import (
    AuditArtifacts,
    NetworkTransferRecord,
    StylesheetRecord,
    UsageEntry,
)


@pytest.fixture
def tuned_settings(monkeypatch):
    settings = SimpleNamespace(
        tuning=SimpleNamespace(
            preview_length=100,
            allowable_unused_rules_ratio=0.10,
            gzip_size_ratio=3,
        )
    )
    for module in ("preview", "sheet_results", "unused_css"):
        monkeypatch.setattr(f"services.css_audit.app.domain.{module}.get_settings", lambda: settings)
    return settings


def _usage(stylesheet_id: str, used: int, unused: int) -> list[UsageEntry]:
    return [UsageEntry(stylesheet_id, True) for _ in range(used)] + [
        UsageEntry(stylesheet_id, False) for _ in range(unused)
    ]


def _stylesheet_record(url: str, transfer_size: int, resource_type: str = "stylesheet") -> NetworkTransferRecord:
    return NetworkTransferRecord(url=url, resource_type=resource_type, transfer_size=transfer_size)


@pytest.fixture
def page_artifacts() -> AuditArtifacts:
    styles = [
        StylesheetRecord("1", "https://example.com/css/site.css", ".a { color: red; }" * 100),
        StylesheetRecord("2", "https://example.com/", ".inline { margin: 0; }"),
        StylesheetRecord("3", "https://example.com/css/copy.css", ".a { color: red; }" * 100, is_duplicate=True),
    ]
    css_usage = _usage("1", 8, 2) + _usage("2", 1, 1) + _usage("3", 0, 50) + _usage("missing", 0, 7)
    network_records = [
        _stylesheet_record("https://example.com/css/site.css", 10_000),
        _stylesheet_record("https://example.com/", 40_000, resource_type="document"),
    ]
    return AuditArtifacts(
        styles=styles,
        css_usage=css_usage,
        page_url="https://example.com/",
        network_records=network_records,
    )
