"""Attribution of CSS usage entries to their stylesheets."""
from __future__ import annotations

from typing import Iterable, Mapping

from .types import IndexedStylesheetInfo, UsageEntry


def count_unused_rules(usage: Iterable[UsageEntry], indexed_stylesheets: Mapping[str, IndexedStylesheetInfo]) -> int:
    """Split usage entries into per-sheet used/unused lists and return the unused total.

    Entries for unknown or duplicate stylesheets are ignored.
    """
    unused = 0
    for rule in usage:
        stylesheet_info = indexed_stylesheets.get(rule.stylesheet_id)
        if stylesheet_info is None or stylesheet_info.is_duplicate:
            continue
        if rule.used:
            stylesheet_info.used.append(rule)
        else:
            unused += 1
            stylesheet_info.unused.append(rule)
    return unused


__all__ = ["count_unused_rules"]
