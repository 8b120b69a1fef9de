from __future__ import annotations

import logging
import os
import subprocess
import sys
import webbrowser

log = logging.getLogger(__name__)


def open_url(url: str) -> bool:
    """
    Hand a scheme URL (roblox://...) to the OS protocol handler without blocking.

    Windows: os.startfile; macOS: `open`; elsewhere: `xdg-open`.
    Falls back to webbrowser.open. Returns False instead of raising.
    """
    try:
        if sys.platform.startswith("win"):
            os.startfile(url)  # type: ignore[attr-defined]
            return True
        opener = "open" if sys.platform == "darwin" else "xdg-open"
        subprocess.Popen([opener, url], stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL)
        return True
    except (OSError, AttributeError) as e:
        log.warning("Native URL handler failed for %s: %s; trying webbrowser", url.split("?")[0], e)
    try:
        return bool(webbrowser.open(url))
    except webbrowser.Error as e:
        log.error("Could not open %s: %s", url.split("?")[0], e)
        return False
