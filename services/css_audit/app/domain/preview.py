"""Content previews for stylesheets that have no URL of their own."""
from __future__ import annotations

import re

from ..config import get_settings

_INDENTATION = re.compile(r"( {2,}|\t)+")
_CLOSING_BRACE_INDENTATION = re.compile(r"\n\s+}")


def determine_content_preview(content: str, preview_length: int | None = None) -> str:
    """Trim stylesheet content down to roughly its first rule-set."""
    if preview_length is None:
        preview_length = get_settings().tuning.preview_length

    preview = content[: preview_length * 5]
    preview = _INDENTATION.sub("  ", preview)
    preview = _CLOSING_BRACE_INDENTATION.sub("\n}", preview)
    preview = preview.strip()

    if len(preview) <= preview_length:
        return preview

    first_rule_start = preview.find("{")
    first_rule_end = preview.find("}")

    if (
        first_rule_start == -1
        or first_rule_end == -1
        or first_rule_start > first_rule_end
        or first_rule_start > preview_length
    ):
        # No usable first rule-set inside the preview window
        return preview[:preview_length] + "..."

    if first_rule_end < preview_length:
        return preview[: first_rule_end + 1] + " ..."

    last_semicolon = preview[:preview_length].rfind(";")
    if last_semicolon < first_rule_start:
        return preview[:preview_length] + "... } ..."
    return preview[: last_semicolon + 1] + " ... } ..."


__all__ = ["determine_content_preview"]
