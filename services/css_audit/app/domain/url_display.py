"""Short, human readable names for resource URLs."""
from __future__ import annotations

import re
from urllib.parse import urlsplit

ELLIPSIS = "…"
MAX_DISPLAY_LENGTH = 64

_HASH_RUN = re.compile(r"([a-f0-9]{7})[a-f0-9]{13}[a-f0-9]*")
_FIRST_QUERY_PARAM = re.compile(r"\?([^=]*)(=)?.*")
_QUERY = re.compile(r"\?.*")


def get_display_name(
    url: str,
    num_path_parts: int = 2,
    preserve_query: bool = True,
    preserve_host: bool = False,
) -> str:
    try:
        parsed = urlsplit(url)
    except ValueError:
        # Malformed URLs (e.g. a broken IPv6 host) are shown as given
        return url

    if parsed.scheme in ("about", "data"):
        name = url
    else:
        name = parsed.path or "/"
        parts = [part for part in name.split("/") if part]
        if num_path_parts and len(parts) > num_path_parts:
            name = ELLIPSIS + "/".join(parts[-num_path_parts:])
        if preserve_host:
            name = f"{parsed.netloc}/{name.lstrip('/')}"
        if preserve_query and parsed.query:
            name = f"{name}?{parsed.query}"

    name = _HASH_RUN.sub(lambda match: match.group(1) + ELLIPSIS, name)

    if len(name) > MAX_DISPLAY_LENGTH and "?" in name:
        # Keep the first query key where possible, then drop the query entirely
        name = _FIRST_QUERY_PARAM.sub(
            lambda match: f"?{match.group(1)}{match.group(2) or ''}{ELLIPSIS}", name, count=1
        )
        if len(name) > MAX_DISPLAY_LENGTH:
            name = _QUERY.sub(f"?{ELLIPSIS}", name, count=1)

    if len(name) > MAX_DISPLAY_LENGTH:
        dot_index = name.rfind(".")
        if dot_index >= 0:
            name = name[: MAX_DISPLAY_LENGTH - 1 - (len(name) - dot_index)] + ELLIPSIS + name[dot_index:]
        else:
            name = name[: MAX_DISPLAY_LENGTH - 1] + ELLIPSIS

    return name


__all__ = ["ELLIPSIS", "get_display_name"]
