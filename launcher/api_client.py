from __future__ import annotations

import logging
from typing import Optional

import requests

from common.types import GameDescriptor

log = logging.getLogger(__name__)


class GameInfoError(Exception):
    """The game-info API did not return a descriptor. status=0 means no HTTP answer."""

    def __init__(self, status: int, message: str) -> None:
        self.status = status
        self.message = message
        super().__init__(f"{status}: {message}" if status else message)


class GameInfoClient:
    def __init__(self, base_url: str = "http://127.0.0.1:5000", timeout: float = 10.0,
                 session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = float(timeout)
        self.session = session or requests.Session()

    def url_for(self, place_id: str) -> str:
        return f"{self.base_url}/api/game-info/{place_id}"

    def get_game_info(self, place_id: str) -> GameDescriptor:
        """
        GET /api/game-info/{place_id}.

        Raises:
            GameInfoError on a non-200 answer (message taken from the body's "error")
            requests.RequestException on transport failure / timeout
        """
        r = self.session.get(self.url_for(place_id), timeout=self.timeout)
        if r.status_code != 200:
            try:
                body = r.json()
            except ValueError:
                body = None
            message = (body.get("error") if isinstance(body, dict) else None) or r.reason or "request failed"
            log.info("game-info lookup for %s failed: %s %s", place_id, r.status_code, message)
            raise GameInfoError(r.status_code, str(message))
        return GameDescriptor.from_json(r.json())
