from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Tuple

from catalog.errors import ResolutionError
from catalog.result import Err, Ok, Result, and_then, best_effort
from catalog.roblox_api import CatalogError, RobloxCatalogService
from common.types import GameDescriptor
from common.utils import is_place_id, normalize_place_id

log = logging.getLogger(__name__)


class MetadataResolver:
    """
    Resolve a place id to a GameDescriptor, strictly in sequence:

      1) validate the place id (digits only)       -> InvalidInput
      2) place -> universe                          -> NotFound on upstream failure
      3) universe -> games list (first entry wins)  -> NotFound on failure / empty list
      4) universe -> icon, best effort              -> icon_url=None on any failure

    No retries. resolve() never raises; unexpected exceptions become Internal.
    """

    def __init__(self, catalog: Optional[RobloxCatalogService] = None):
        self.catalog = catalog or RobloxCatalogService()

    def resolve(self, place_id: Optional[str]) -> Result[GameDescriptor]:
        try:
            return self._resolve(place_id)
        except Exception:
            log.exception("Error fetching game info for placeId %s", place_id)
            return Err(ResolutionError.internal())

    # -------- steps --------

    def _resolve(self, place_id: Optional[str]) -> Result[GameDescriptor]:
        pid = normalize_place_id(place_id)
        if not is_place_id(pid):
            return Err(ResolutionError.invalid_input())

        found = and_then(self._lookup_universe(pid), self._lookup_game)
        if isinstance(found, Err):
            return found
        universe_id, game = found.value

        icon_url = best_effort(self.catalog.get_icon_url, universe_id, what="game icon")
        return Ok(GameDescriptor.from_catalog(game, icon_url=icon_url))

    def _lookup_universe(self, place_id: str) -> Result[int]:
        try:
            return Ok(self.catalog.get_universe_id(place_id))
        except CatalogError as e:
            log.error(
                "Roblox Universe API error for placeId %s: %s %s",
                place_id, e.status, e.reason,
                extra={"ctx": {"place_id": place_id, "status": e.status, "url": e.url}},
            )
            return Err(ResolutionError.not_found("Game not found or API issue (Universe API)"))

    def _lookup_game(self, universe_id: int) -> Result[Tuple[int, Dict[str, Any]]]:
        try:
            games = self.catalog.get_games(universe_id)
        except CatalogError as e:
            log.error(
                "Roblox Games API error for universeId %s: %s %s",
                universe_id, e.status, e.reason,
                extra={"ctx": {"universe_id": universe_id, "status": e.status, "url": e.url}},
            )
            return Err(ResolutionError.not_found("Game details not found or API issue (Games API)"))
        if not games:
            return Err(ResolutionError.not_found("Game not found"))
        return Ok((universe_id, games[0]))


def resolve(place_id: Optional[str], catalog: Optional[RobloxCatalogService] = None) -> Result[GameDescriptor]:
    """One-shot convenience wrapper around MetadataResolver."""
    return MetadataResolver(catalog).resolve(place_id)
