from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from common.utils import is_place_id

LAUNCH_METHOD = "Joined via SWarp"


@dataclass(slots=True)
class Creator:
    """
    Owner of a catalog entry (user or group), as reported by the games API.

    JSON keys follow the catalog: id, name, type, isRNVAccount, hasVerifiedBadge.
    """
    id: int
    name: str
    type: str = "User"
    is_rnv_account: bool = False
    has_verified_badge: bool = False

    @classmethod
    def from_json(cls, d: Optional[Dict[str, Any]]) -> "Creator":
        d = d or {}
        return cls(
            id=int(d.get("id") or 0),
            name=str(d.get("name") or ""),
            type=str(d.get("type") or "User"),
            is_rnv_account=bool(d.get("isRNVAccount", False)),
            has_verified_badge=bool(d.get("hasVerifiedBadge", False)),
        )

    def to_json(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "type": self.type,
            "isRNVAccount": self.is_rnv_account,
            "hasVerifiedBadge": self.has_verified_badge,
        }


@dataclass(slots=True)
class GameDescriptor:
    """
    Display metadata for one experience, assembled per lookup and never stored.

    Attributes:
        name, description: catalog text.
        creator: owning user/group.
        concurrent_players: live player count ("playing").
        total_visits: lifetime visits ("visits").
        icon_url: 512x512 PNG icon, None when the thumbnail lookup failed.
    """
    name: str
    description: str
    creator: Creator
    concurrent_players: int = 0
    total_visits: int = 0
    icon_url: Optional[str] = None

    @classmethod
    def from_catalog(cls, game: Dict[str, Any], icon_url: Optional[str] = None) -> "GameDescriptor":
        """Build from one element of the games API `data` list."""
        return cls(
            name=str(game.get("name") or ""),
            description=str(game.get("description") or ""),
            creator=Creator.from_json(game.get("creator")),
            concurrent_players=int(game.get("playing") or 0),
            total_visits=int(game.get("visits") or 0),
            icon_url=icon_url or None,
        )

    @classmethod
    def from_json(cls, d: Dict[str, Any]) -> "GameDescriptor":
        """Inverse of to_json (the /api/game-info response body)."""
        return cls(
            name=str(d.get("name") or ""),
            description=str(d.get("description") or ""),
            creator=Creator.from_json(d.get("creator")),
            concurrent_players=int(d.get("playing") or 0),
            total_visits=int(d.get("visits") or 0),
            icon_url=d.get("iconUrl") or None,
        )

    def to_json(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "creator": self.creator.to_json(),
            "playing": self.concurrent_players,
            "visits": self.total_visits,
            "iconUrl": self.icon_url,
        }


@dataclass(slots=True)
class LaunchRequest:
    """
    Validated user input, consumed once to build a scheme URL.

    place_id is trimmed and must be all ASCII digits; instance_id is kept raw
    (the link builder decides whether it is usable).
    """
    place_id: str
    instance_id: Optional[str] = None
    launch_method: str = field(default=LAUNCH_METHOD)

    def __post_init__(self) -> None:
        self.place_id = (self.place_id or "").strip()
        if not is_place_id(self.place_id):
            raise ValueError(f"place_id must be all digits, got {self.place_id!r}")
