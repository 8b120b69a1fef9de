from __future__ import annotations

"""
Command-line launcher: same LaunchFlow as the Streamlit page, driven from a terminal.

Examples:
  # Any server, ask before launching
  python -m launcher.service --place-id 130452706173960

  # Specific server, no prompt
  python -m launcher.service --place-id 130452706173960 --instance-id 1c0e6c1e-... --yes

  # Just print the URL
  python -m launcher.service --place-id 130452706173960 --print-only
"""

import argparse
import sys
from typing import List, Optional

from common.config import load_params
from common.logging_setup import setup_logging
from launcher.api_client import GameInfoClient
from launcher.dispatch import open_url
from launcher.flow import FlowState, LaunchFlow, Notification
from launcher.metadata_cache import MetadataCache


def _print_notification(n: Notification) -> None:
    stream = sys.stderr if n.variant == "destructive" else sys.stdout
    print(f"{n.title}: {n.description}", file=stream)


def _render_dialog(flow: LaunchFlow) -> None:
    d = flow.dialog
    if d is None:
        return
    print(d.title)
    print(d.prompt)
    print(f"  {d.display_name}")
    if d.creator_line:
        print(f"  {d.creator_line}")
    for label, value in d.stats:
        print(f"  {label}: {value}")
    if d.notice:
        print(f"  ({d.notice})")


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Join a Roblox experience via roblox:// link")
    ap.add_argument("--place-id", required=True, help="Numeric place id")
    ap.add_argument("--instance-id", default="", help="Server (game instance) id; blank or N/A = any server")
    ap.add_argument("--api-url", default=None, help="Game info API base URL (default from config)")
    ap.add_argument("--config", default=None, help="Path to params.yaml")
    ap.add_argument("--yes", action="store_true", help="Launch without asking")
    ap.add_argument("--print-only", action="store_true", help="Print the URL, do not launch")
    ap.add_argument("--log-level", default=None, help="DEBUG/INFO/WARNING/ERROR")
    args = ap.parse_args(argv)

    setup_logging(args.log_level, stream=sys.stderr)
    P = load_params(args.config)
    client = GameInfoClient(args.api_url or P["client"]["api_url"], timeout=P["client"]["timeout_s"])

    metadata = None
    if not args.print_only:
        # lookups run inline: a terminal has nothing else to do meanwhile
        metadata = MetadataCache(client.get_game_info, stale_s=P["client"]["stale_s"], spawn=lambda fn: fn())

    flow = LaunchFlow(dispatcher=open_url, notifier=_print_notification, metadata=metadata)
    flow.edit_place_id(args.place_id)
    flow.edit_instance_id(args.instance_id)

    if flow.submit() == FlowState.ERROR:
        print(flow.error, file=sys.stderr)
        return 2

    if args.print_only:
        print(flow.pending_url)
        return 0

    _render_dialog(flow)
    if not args.yes:
        answer = input("Join Game? [y/N] ").strip().lower()
        if answer not in ("y", "yes"):
            flow.cancel()
            print("Cancelled.")
            return 1

    return 0 if flow.confirm() else 3


if __name__ == "__main__":
    raise SystemExit(main())
