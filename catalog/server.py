from __future__ import annotations

import logging

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from catalog.errors import ResolutionError
from catalog.resolver import MetadataResolver
from catalog.result import Err
from catalog.roblox_api import RobloxCatalogService
from common.config import load_params
from common.logging_setup import setup_logging

log = logging.getLogger(__name__)

P = load_params()

catalog = RobloxCatalogService.from_params(P)
resolver = MetadataResolver(catalog)

app = FastAPI(title="SWarp Game Info API", version="1.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=P["server"].get("cors_origins", ["*"]),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(Exception)
async def _unhandled(request: Request, exc: Exception) -> JSONResponse:
    log.error("API error on %s: %s", request.url.path, exc, exc_info=exc)
    err = ResolutionError.internal()
    return JSONResponse(err.to_json(), status_code=err.status)


@app.get("/health")
def health():
    return {
        "status": "ok",
        "catalog": {
            "universe_url": catalog.universe_url,
            "games_url": catalog.games_url,
            "icons_url": catalog.icons_url,
            "timeout_s": catalog.timeout,
        },
    }


@app.get("/api/game-info/{place_id}")
def game_info(place_id: str):
    """
    Display metadata for a place.

    200 {name, description, creator, playing, visits, iconUrl|null}
    400 non-digit place id, 404 any upstream miss, 500 anything unexpected.
    """
    result = resolver.resolve(place_id)
    if isinstance(result, Err):
        return JSONResponse(result.error.to_json(), status_code=result.error.status)
    return result.value.to_json()


def main() -> None:
    setup_logging()
    srv = P["server"]
    log.info("Serving game info API on port %s", srv["port"])
    uvicorn.run(app, host=srv["host"], port=int(srv["port"]))


# -------- local dev entrypoint --------
if __name__ == "__main__":
    main()
