from __future__ import annotations

import copy
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

log = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "config/params.yaml"

DEFAULTS: Dict[str, Any] = {
    "catalog": {
        "universe_url": "https://apis.roblox.com/universes/v1/places/{place_id}/universe",
        "games_url": "https://games.roblox.com/v1/games",
        "icons_url": "https://thumbnails.roblox.com/v1/games/icons",
        "icon_size": "512x512",
        "timeout_s": 10.0,
    },
    "server": {"host": "0.0.0.0", "port": 5000, "cors_origins": ["*"]},
    "client": {"api_url": "http://127.0.0.1:5000", "timeout_s": 10.0, "stale_s": 300.0},
}


def _merge(base: Dict[str, Any], over: Dict[str, Any]) -> Dict[str, Any]:
    out = copy.deepcopy(base)
    for k, v in (over or {}).items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = _merge(out[k], v)
        else:
            out[k] = v
    return out


def load_params(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load config/params.yaml on top of DEFAULTS.

    Path precedence: explicit arg, env SWARP_CONFIG, config/params.yaml.
    A missing or unreadable file yields the defaults. Env overrides applied last:
      SWARP_API_URL -> client.api_url
      PORT          -> server.port
    """
    p = Path(path or os.environ.get("SWARP_CONFIG") or DEFAULT_CONFIG_PATH)
    loaded: Dict[str, Any] = {}
    if p.exists():
        try:
            with p.open("r", encoding="utf-8") as f:
                loaded = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            log.warning("Could not read config %s, using defaults: %s", p, e)
            loaded = {}
    params = _merge(DEFAULTS, loaded if isinstance(loaded, dict) else {})

    if os.environ.get("SWARP_API_URL"):
        params["client"]["api_url"] = os.environ["SWARP_API_URL"]
    if os.environ.get("PORT"):
        params["server"]["port"] = int(os.environ["PORT"])
    return params
