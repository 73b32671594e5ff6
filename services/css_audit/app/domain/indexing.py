"""Stylesheet indexing keyed by stylesheet id."""
from __future__ import annotations

from typing import Iterable

from .types import IndexedStylesheetInfo, NetworkTransferRecord, StylesheetRecord


def index_network_records(network_records: Iterable[NetworkTransferRecord]) -> dict[str, NetworkTransferRecord]:
    indexed: dict[str, NetworkTransferRecord] = {}
    for record in network_records:
        if record.is_stylesheet:
            indexed[record.url] = record
    return indexed


def index_stylesheets_by_id(
    styles: Iterable[StylesheetRecord],
    network_records: Iterable[NetworkTransferRecord],
) -> dict[str, IndexedStylesheetInfo]:
    """Map each stylesheet id to fresh aggregation state plus its transfer record, if any."""
    records_by_url = index_network_records(network_records)
    indexed: dict[str, IndexedStylesheetInfo] = {}
    for stylesheet in styles:
        network_record = records_by_url.get(stylesheet.source_url) if stylesheet.source_url else None
        indexed[stylesheet.stylesheet_id] = IndexedStylesheetInfo(
            stylesheet=stylesheet,
            network_record=network_record,
        )
    return indexed


__all__ = ["index_network_records", "index_stylesheets_by_id"]
