"""
Unit tests for the Roblox catalog adapter
"""

import pytest
import os
import sys
from unittest.mock import Mock

# Add project root to path
project_root = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
sys.path.append(project_root)

from catalog.roblox_api import CatalogError, RobloxCatalogService


def _resp(status=200, body=None, reason="OK"):
    r = Mock()
    r.status_code = status
    r.ok = 200 <= status < 300
    r.reason = reason
    if isinstance(body, Exception):
        r.json.side_effect = body
    else:
        r.json.return_value = body
    return r


class TestRobloxCatalogService:
    """Test cases for RobloxCatalogService"""

    def test_default_endpoints(self):
        """Endpoints default to the public Roblox APIs"""
        svc = RobloxCatalogService(session=Mock())
        assert svc.universe_lookup_url("123") == "https://apis.roblox.com/universes/v1/places/123/universe"
        assert svc.games_lookup_url(42) == "https://games.roblox.com/v1/games?universeIds=42"
        assert svc.timeout == 10.0

    def test_icon_url_params(self):
        """Icon lookup asks for a square 512px PNG"""
        svc = RobloxCatalogService(session=Mock())
        url = svc.icon_lookup_url(42)
        assert url.startswith("https://thumbnails.roblox.com/v1/games/icons?")
        assert "universeIds=42" in url
        assert "size=512x512" in url
        assert "format=Png" in url
        assert "isCircular=false" in url

    def test_from_params(self):
        """Config section overrides defaults"""
        params = {"catalog": {"games_url": "http://games.local/v1/games", "timeout_s": 2.5}}
        svc = RobloxCatalogService.from_params(params, session=Mock())
        assert svc.games_url == "http://games.local/v1/games"
        assert svc.timeout == 2.5
        assert svc.icon_size == "512x512"

    def test_get_universe_id_success(self):
        """Universe id read from the universe endpoint, timeout forwarded"""
        session = Mock()
        session.get.return_value = _resp(body={"universeId": 4567})
        svc = RobloxCatalogService(session=session, timeout=3.0)

        assert svc.get_universe_id("123") == 4567
        session.get.assert_called_once_with(
            "https://apis.roblox.com/universes/v1/places/123/universe", timeout=3.0
        )

    def test_get_universe_id_http_error(self):
        """Non-success status raises CatalogError carrying the status"""
        session = Mock()
        session.get.return_value = _resp(status=404, body={"errors": []}, reason="Not Found")
        svc = RobloxCatalogService(session=session)

        with pytest.raises(CatalogError) as ei:
            svc.get_universe_id("123")
        assert ei.value.status == 404
        assert ei.value.reason == "Not Found"

    def test_get_universe_id_missing_field(self):
        """A 200 without universeId is still a miss"""
        session = Mock()
        session.get.return_value = _resp(body={"universeId": None})
        svc = RobloxCatalogService(session=session)

        with pytest.raises(CatalogError):
            svc.get_universe_id("123")

    def test_get_games(self):
        """Games list returned as-is; missing data means empty list"""
        session = Mock()
        session.get.side_effect = [_resp(body={"data": [{"name": "A"}, {"name": "B"}]}), _resp(body={})]
        svc = RobloxCatalogService(session=session)

        assert [g["name"] for g in svc.get_games(1)] == ["A", "B"]
        assert svc.get_games(1) == []

    def test_get_icon_url(self):
        """First thumbnail's imageUrl, None when the list is empty"""
        session = Mock()
        session.get.side_effect = [
            _resp(body={"data": [{"targetId": 1, "state": "Completed", "imageUrl": "https://tr.rbxcdn.com/icon.png"}]}),
            _resp(body={"data": []}),
        ]
        svc = RobloxCatalogService(session=session)

        assert svc.get_icon_url(1) == "https://tr.rbxcdn.com/icon.png"
        assert svc.get_icon_url(1) is None

    def test_invalid_json(self):
        """Undecodable body raises CatalogError"""
        session = Mock()
        session.get.return_value = _resp(body=ValueError("Expecting value"))
        svc = RobloxCatalogService(session=session)

        with pytest.raises(CatalogError, match="invalid JSON"):
            svc.get_games(1)

    def test_transport_error_propagates(self):
        """Connection problems are not CatalogError"""
        import requests

        session = Mock()
        session.get.side_effect = requests.ConnectionError("boom")
        svc = RobloxCatalogService(session=session)

        with pytest.raises(requests.ConnectionError):
            svc.get_universe_id("123")
