"""
Unit tests for the launcher CLI (launcher.service)
"""

import pytest
import os
import sys
from unittest.mock import Mock, patch

# Add project root to path
project_root = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
sys.path.append(project_root)

from common.types import Creator, GameDescriptor
from launcher import service
from launcher.api_client import GameInfoError

REFERENCE_URL = (
    "roblox://experiences/start?placeId=130452706173960"
    "&launchData=%7B%22method%22%3A%22Joined%20via%20SWarp%22%7D"
)


@pytest.fixture(autouse=True)
def _no_root_logging():
    """Keep the CLI from rebinding the root logger to a captured stream"""
    with patch.object(service, "setup_logging"):
        yield


class TestLauncherCli:
    def test_print_only(self, capsys):
        with patch.object(service, "open_url") as mock_open:
            rc = service.main(["--place-id", "130452706173960", "--print-only"])
        assert rc == 0
        assert capsys.readouterr().out.strip() == REFERENCE_URL
        mock_open.assert_not_called()

    def test_invalid_place_id(self, capsys):
        rc = service.main(["--place-id", "abc", "--print-only"])
        assert rc == 2
        assert "Place ID must be a valid number" in capsys.readouterr().err

    @patch("launcher.service.GameInfoClient.get_game_info")
    def test_yes_launches_even_if_lookup_fails(self, mock_info, capsys):
        mock_info.side_effect = GameInfoError(404, "Game not found")
        with patch.object(service, "open_url", return_value=True) as mock_open:
            rc = service.main(["--place-id", "130452706173960", "--instance-id", "N/A", "--yes"])
        assert rc == 0
        mock_open.assert_called_once_with(REFERENCE_URL)
        out = capsys.readouterr().out
        assert "Could not load full game details" in out
        assert "Launching Roblox: Joining game..." in out

    @patch("launcher.service.GameInfoClient.get_game_info")
    def test_prompt_declined(self, mock_info, capsys):
        mock_info.return_value = GameDescriptor(
            name="Slugmoon", description="", creator=Creator(id=1, name="SlugStudio"), concurrent_players=5
        )
        with patch.object(service, "open_url") as mock_open, patch("builtins.input", return_value="n"):
            rc = service.main(["--place-id", "1", "--instance-id", "srv"])
        assert rc == 1
        mock_open.assert_not_called()
        out = capsys.readouterr().out
        assert "Slugmoon" in out
        assert "by SlugStudio" in out
        assert "Cancelled." in out

    @patch("launcher.service.GameInfoClient.get_game_info", Mock(side_effect=GameInfoError(0, "offline")))
    def test_dispatch_failure_exit_code(self):
        with patch.object(service, "open_url", return_value=False), patch("builtins.input", return_value="y"):
            assert service.main(["--place-id", "1"]) == 3
