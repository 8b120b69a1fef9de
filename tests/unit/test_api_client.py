"""
Unit tests for the game info HTTP client (launcher.api_client)
"""

import pytest
import os
import sys
from unittest.mock import Mock

# Add project root to path
project_root = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
sys.path.append(project_root)

from launcher.api_client import GameInfoClient, GameInfoError


def _resp(status, body=None, reason="OK"):
    r = Mock()
    r.status_code = status
    r.reason = reason
    if isinstance(body, Exception):
        r.json.side_effect = body
    else:
        r.json.return_value = body
    return r


class TestGameInfoClient:
    def test_url_for(self):
        c = GameInfoClient("http://api.local:5000/", session=Mock())
        assert c.url_for("123") == "http://api.local:5000/api/game-info/123"

    def test_success(self):
        session = Mock()
        session.get.return_value = _resp(200, {
            "name": "Slugmoon",
            "description": "d",
            "creator": {"id": 7, "name": "Slug", "type": "User", "isRNVAccount": False, "hasVerifiedBadge": False},
            "playing": 3,
            "visits": 40,
            "iconUrl": None,
        })
        c = GameInfoClient("http://api.local", timeout=2.0, session=session)

        d = c.get_game_info("123")
        assert d.name == "Slugmoon"
        assert d.creator.id == 7
        assert d.concurrent_players == 3
        assert d.total_visits == 40
        assert d.icon_url is None
        session.get.assert_called_once_with("http://api.local/api/game-info/123", timeout=2.0)

    def test_error_message_from_body(self):
        session = Mock()
        session.get.return_value = _resp(404, {"error": "Game not found"}, reason="Not Found")
        c = GameInfoClient(session=session)

        with pytest.raises(GameInfoError) as ei:
            c.get_game_info("123")
        assert ei.value.status == 404
        assert ei.value.message == "Game not found"

    def test_error_without_json(self):
        session = Mock()
        session.get.return_value = _resp(502, ValueError("no json"), reason="Bad Gateway")
        c = GameInfoClient(session=session)

        with pytest.raises(GameInfoError) as ei:
            c.get_game_info("123")
        assert ei.value.status == 502
        assert ei.value.message == "Bad Gateway"
