"""
Unit tests for OS URL dispatch (launcher.dispatch)
"""

import os
import sys
import webbrowser
from unittest.mock import patch

# Add project root to path
project_root = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
sys.path.append(project_root)

from launcher import dispatch

URL = "roblox://experiences/start?placeId=1&launchData=%7B%7D"


class TestOpenUrl:
    @patch("launcher.dispatch.subprocess.Popen")
    def test_linux_uses_xdg_open(self, mock_popen):
        with patch.object(dispatch.sys, "platform", "linux"):
            assert dispatch.open_url(URL) is True
        assert mock_popen.call_args[0][0] == ["xdg-open", URL]

    @patch("launcher.dispatch.subprocess.Popen")
    def test_macos_uses_open(self, mock_popen):
        with patch.object(dispatch.sys, "platform", "darwin"):
            assert dispatch.open_url(URL) is True
        assert mock_popen.call_args[0][0] == ["open", URL]

    def test_windows_uses_startfile(self):
        with patch.object(dispatch.sys, "platform", "win32"), \
                patch.object(dispatch.os, "startfile", create=True) as mock_start:
            assert dispatch.open_url(URL) is True
        mock_start.assert_called_once_with(URL)

    @patch("launcher.dispatch.webbrowser.open", return_value=True)
    @patch("launcher.dispatch.subprocess.Popen", side_effect=FileNotFoundError("xdg-open"))
    def test_fallback_to_webbrowser(self, mock_popen, mock_wb):
        with patch.object(dispatch.sys, "platform", "linux"):
            assert dispatch.open_url(URL) is True
        mock_wb.assert_called_once_with(URL)

    @patch("launcher.dispatch.webbrowser.open", side_effect=webbrowser.Error("no browser"))
    @patch("launcher.dispatch.subprocess.Popen", side_effect=OSError("nope"))
    def test_total_failure_returns_false(self, mock_popen, mock_wb):
        with patch.object(dispatch.sys, "platform", "linux"):
            assert dispatch.open_url(URL) is False
