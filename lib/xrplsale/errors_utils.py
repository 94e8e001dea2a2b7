from __future__ import annotations

import json
from typing import Any


def parse_api_error_detail(details: str | None) -> Any:
    if not details:
        return None
    try:
        return json.loads(details)
    except ValueError:
        return None


def parse_retry_after(value: str | None) -> int | None:
    """Integer seconds from a Retry-After header; HTTP-date values are ignored."""
    text = (value or "").strip()
    # isdigit() alone accepts unicode digits such as "²"
    if not (text.isascii() and text.isdigit()):
        return None
    return int(text)
