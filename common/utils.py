from __future__ import annotations

import re
from datetime import datetime, timezone
from typing import Optional

PLACE_ID_RE = re.compile(r"[0-9]+")


def iso_now_ms() -> str:
    """UTC ISO-8601 timestamp with millisecond precision."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def normalize_place_id(value: Optional[str]) -> str:
    """Trim surrounding whitespace; None becomes ''."""
    return (value or "").strip()


def is_place_id(value: Optional[str]) -> bool:
    """
    True when `value` is a non-empty all-digit string.
    Whitespace is NOT stripped here; call normalize_place_id first.
    """
    # ASCII digits only; str.isdigit() would also accept '²'
    return bool(value) and PLACE_ID_RE.fullmatch(value) is not None


def format_count(n: Optional[int]) -> str:
    """12345 -> '12,345'; None -> '-'."""
    if n is None:
        return "-"
    return f"{int(n):,}"
