from __future__ import annotations

"""
Roblox catalog adapter used by the metadata resolver.

Three unauthenticated GETs, consumed as opaque JSON:
    place -> universe   apis.roblox.com/universes/v1/places/{placeId}/universe
    universe -> games   games.roblox.com/v1/games?universeIds=...
    universe -> icon    thumbnails.roblox.com/v1/games/icons?universeIds=...

Non-success statuses and unexpected payloads raise CatalogError. Transport
failures (connection errors, timeouts) propagate as requests exceptions so the
caller can tell "upstream said no" apart from "upstream unreachable".

Usage:
    svc = RobloxCatalogService()
    uid = svc.get_universe_id("130452706173960")
    games = svc.get_games(uid)
    icon = svc.get_icon_url(uid)
"""

import logging
from typing import Any, Dict, List, Optional
from urllib.parse import urlencode

import requests

from common.config import DEFAULTS

log = logging.getLogger(__name__)


class CatalogError(Exception):
    """Upstream answered, but not with what we asked for."""

    def __init__(self, message: str, status: Optional[int] = None, reason: str = "", url: str = "") -> None:
        self.status = status
        self.reason = reason
        self.url = url
        super().__init__(message)


class RobloxCatalogService:
    def __init__(
        self,
        universe_url: Optional[str] = None,
        games_url: Optional[str] = None,
        icons_url: Optional[str] = None,
        icon_size: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        """
        Params:
            *_url: endpoint overrides (defaults from common.config.DEFAULTS)
            icon_size: thumbnail size, e.g. "512x512"
            timeout: seconds per request
            session: optional requests.Session for connection reuse
        """
        d = DEFAULTS["catalog"]
        self.universe_url = universe_url or d["universe_url"]
        self.games_url = games_url or d["games_url"]
        self.icons_url = icons_url or d["icons_url"]
        self.icon_size = icon_size or d["icon_size"]
        self.timeout = float(timeout if timeout is not None else d["timeout_s"])
        self.session = session or requests.Session()

    @classmethod
    def from_params(cls, params: Dict[str, Any], session: Optional[requests.Session] = None) -> "RobloxCatalogService":
        c = params.get("catalog", {})
        return cls(
            universe_url=c.get("universe_url"),
            games_url=c.get("games_url"),
            icons_url=c.get("icons_url"),
            icon_size=c.get("icon_size"),
            timeout=c.get("timeout_s"),
            session=session,
        )

    # ----------------------------
    # URL builders (no request performed)
    # ----------------------------
    def universe_lookup_url(self, place_id: str) -> str:
        return self.universe_url.format(place_id=place_id)

    def games_lookup_url(self, universe_id: int) -> str:
        return f"{self.games_url}?{urlencode({'universeIds': universe_id})}"

    def icon_lookup_url(self, universe_id: int) -> str:
        params = {
            "universeIds": universe_id,
            "size": self.icon_size,
            "format": "Png",
            "isCircular": "false",
        }
        return f"{self.icons_url}?{urlencode(params)}"

    # ----------------------------
    # Lookups
    # ----------------------------
    def get_universe_id(self, place_id: str) -> int:
        data = self._get_json(self.universe_lookup_url(place_id))
        uid = data.get("universeId") if isinstance(data, dict) else None
        if uid is None:
            raise CatalogError(f"no universe for place {place_id}", status=404, reason="Not Found")
        return int(uid)

    def get_games(self, universe_id: int) -> List[Dict[str, Any]]:
        """Game summaries for the universe; may be empty."""
        data = self._get_json(self.games_lookup_url(universe_id))
        items = data.get("data") if isinstance(data, dict) else None
        return list(items or [])

    def get_icon_url(self, universe_id: int) -> Optional[str]:
        """Icon image URL, None when the thumbnail list is empty."""
        data = self._get_json(self.icon_lookup_url(universe_id))
        items = data.get("data") if isinstance(data, dict) else None
        if not items:
            return None
        return items[0].get("imageUrl") or None

    # ----------------------------
    # internals
    # ----------------------------
    def _get_json(self, url: str) -> Any:
        r = self.session.get(url, timeout=self.timeout)
        if not r.ok:
            raise CatalogError(
                f"{r.status_code} {r.reason} from {url}",
                status=r.status_code,
                reason=str(r.reason or ""),
                url=url,
            )
        try:
            return r.json()
        except ValueError as e:
            raise CatalogError(f"invalid JSON from {url}: {e}", status=r.status_code, url=url) from e
