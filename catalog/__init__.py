"""
Catalog: Game Metadata Resolver

- roblox_api: thin requests client for the universe, games and icon endpoints
- resolver: place id -> GameDescriptor (universe -> game -> best-effort icon)
- server: FastAPI app serving GET /api/game-info/{placeId} and /health
"""
