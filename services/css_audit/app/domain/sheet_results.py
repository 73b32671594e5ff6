"""Per-stylesheet waste estimates."""
from __future__ import annotations

from ..config import get_settings
from .formatting import format_kb, format_percent, round_half_up
from .preview import determine_content_preview
from .types import IndexedStylesheetInfo, SheetResult
from .url_display import get_display_name

INLINE_MARKER = "*inline*"


def display_url_for(stylesheet_info: IndexedStylesheetInfo, page_url: str) -> str:
    url = stylesheet_info.source_url
    if not url or url == page_url:
        return f"{INLINE_MARKER}```{determine_content_preview(stylesheet_info.content)}```"
    return get_display_name(url)


def estimate_total_bytes(stylesheet_info: IndexedStylesheetInfo) -> int:
    if stylesheet_info.network_record is not None:
        return stylesheet_info.network_record.transfer_size
    # Without a transfer record, assume the sheet went over the wire gzipped.
    ratio = get_settings().tuning.gzip_size_ratio
    return round_half_up(len(stylesheet_info.content) / ratio)


def map_sheet_to_result(stylesheet_info: IndexedStylesheetInfo, page_url: str) -> SheetResult | None:
    """Return the table row for a sheet, or None when it has no usage data or is a duplicate."""
    num_used = len(stylesheet_info.used)
    num_unused = len(stylesheet_info.unused)

    if (num_used == 0 and num_unused == 0) or stylesheet_info.is_duplicate:
        return None

    total_bytes = estimate_total_bytes(stylesheet_info)
    percent_unused = num_unused / (num_used + num_unused)
    wasted_bytes = round_half_up(percent_unused * total_bytes)

    return SheetResult(
        url=display_url_for(stylesheet_info, page_url),
        num_unused=num_unused,
        wasted_bytes=wasted_bytes,
        total_kb=format_kb(total_bytes),
        potential_savings=format_percent(percent_unused),
    )


__all__ = ["INLINE_MARKER", "display_url_for", "estimate_total_bytes", "map_sheet_to_result"]
