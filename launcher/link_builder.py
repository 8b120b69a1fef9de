from __future__ import annotations

import json
from typing import Optional
from urllib.parse import quote

from common.types import LAUNCH_METHOD, LaunchRequest
from common.utils import is_place_id, normalize_place_id

SCHEME_BASE = "roblox://experiences/start"
ANY_SERVER_SENTINEL = "n/a"

# encodeURIComponent leaves these unescaped
_URI_COMPONENT_SAFE = "-_.!~*'()"


class LaunchInputError(ValueError):
    """User input cannot produce a launch URL; str(e) is the form message."""


def validate_place_id(place_id: Optional[str]) -> Optional[str]:
    """Return the user-facing error message, or None when the id is usable."""
    pid = normalize_place_id(place_id)
    if not pid:
        return "Please enter a Place ID"
    if not is_place_id(pid):
        return "Place ID must be a valid number"
    return None


def usable_instance_id(instance_id: Optional[str]) -> Optional[str]:
    """Trimmed instance id, or None for blank / "N/A" (any server)."""
    iid = (instance_id or "").strip()
    if not iid or iid.lower() == ANY_SERVER_SENTINEL:
        return None
    return iid


def encode_launch_data(method: str = LAUNCH_METHOD) -> str:
    """Compact JSON, percent-encoded: {"method":"Joined via SWarp"} -> %7B%22method%22..."""
    payload = json.dumps({"method": method}, separators=(",", ":"), ensure_ascii=False)
    return quote(payload, safe=_URI_COMPONENT_SAFE)


def make_launch_request(place_id: Optional[str], instance_id: Optional[str] = None) -> LaunchRequest:
    msg = validate_place_id(place_id)
    if msg:
        raise LaunchInputError(msg)
    return LaunchRequest(place_id=normalize_place_id(place_id), instance_id=instance_id)


def build_launch_url(req: LaunchRequest) -> str:
    """
    roblox://experiences/start?placeId=<id>[&gameInstanceId=<iid>]&launchData=<enc>

    The instance id goes in verbatim (trimmed); launchData is always last.
    """
    parts = [f"placeId={req.place_id}"]
    iid = usable_instance_id(req.instance_id)
    if iid is not None:
        parts.append(f"gameInstanceId={iid}")
    parts.append(f"launchData={encode_launch_data(req.launch_method)}")
    return f"{SCHEME_BASE}?{'&'.join(parts)}"
