"""
Launcher: Launch-Link Builder (client side)

Provides:
- link_builder: input validation and roblox:// URL construction
- flow: LaunchFlow state machine (Idle -> Validating -> ConfirmPending -> Launched, Error)
- metadata_cache: background game-info lookups keyed by the current place id
- api_client: requests client for the /api/game-info endpoint
- dispatch: hand a scheme URL to the OS
- service: small CLI driving the same flow

Usage examples:
    from launcher.link_builder import build_launch_url
    from launcher.flow import LaunchFlow
"""
