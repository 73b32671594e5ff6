from services.css_audit.app.domain.indexing import index_stylesheets_by_id
from services.css_audit.app.domain.types import NetworkTransferRecord, StylesheetRecord, UsageEntry
from services.css_audit.app.domain.usage import count_unused_rules


def _record(url: str, size: int, resource_type: str | None = "stylesheet") -> NetworkTransferRecord:
    return NetworkTransferRecord(url=url, resource_type=resource_type, transfer_size=size)


def test_index_attaches_matching_stylesheet_transfer():
    styles = [
        StylesheetRecord("a", "https://example.com/a.css", ".a{}"),
        StylesheetRecord("b", "https://example.com/b.css", ".b{}"),
        StylesheetRecord("inline", None, ".c{}"),
    ]
    records = [
        _record("https://example.com/a.css", 100),
        _record("https://example.com/b.css", 200, resource_type="script"),
        _record("https://example.com/a.css", 300, resource_type="Stylesheet"),
    ]

    indexed = index_stylesheets_by_id(styles, records)

    assert list(indexed) == ["a", "b", "inline"]
    assert indexed["a"].network_record.transfer_size == 300
    assert indexed["b"].network_record is None
    assert indexed["inline"].network_record is None
    assert all(info.used == [] and info.unused == [] for info in indexed.values())
    assert indexed["a"].stylesheet is styles[0]


def test_index_without_network_records():
    indexed = index_stylesheets_by_id([StylesheetRecord("a", "https://example.com/a.css")], [])

    assert indexed["a"].network_record is None


def test_count_unused_rules_splits_entries_per_sheet():
    indexed = index_stylesheets_by_id(
        [StylesheetRecord("a", None, ".a{}"), StylesheetRecord("b", None, ".b{}")],
        [],
    )
    entries = [
        UsageEntry("a", True),
        UsageEntry("a", False),
        UsageEntry("b", False),
        UsageEntry("a", False),
    ]

    unused = count_unused_rules(entries, indexed)

    assert unused == 3
    assert indexed["a"].used == [entries[0]]
    assert indexed["a"].unused == [entries[1], entries[3]]
    assert indexed["b"].unused == [entries[2]]


def test_unknown_stylesheet_entries_are_ignored():
    indexed = index_stylesheets_by_id([StylesheetRecord("a", None)], [])

    unused = count_unused_rules([UsageEntry("ghost", False), UsageEntry("ghost", True)], indexed)

    assert unused == 0
    assert indexed["a"].used == []
    assert indexed["a"].unused == []


def test_duplicate_stylesheet_entries_are_ignored():
    indexed = index_stylesheets_by_id(
        [StylesheetRecord("dup", None, is_duplicate=True), StylesheetRecord("a", None)],
        [],
    )
    entries = [UsageEntry("dup", False)] * 20 + [UsageEntry("a", False)]

    assert count_unused_rules(entries, indexed) == 1
    assert indexed["dup"].used == []
    assert indexed["dup"].unused == []
