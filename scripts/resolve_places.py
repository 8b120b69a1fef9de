#!/usr/bin/env python3
"""
Resolve a batch of place ids through the catalog resolver and append JSONL.

One line per id:
  {"ts": ..., "place_id": "...", "status": 200, "game": {...}}
  {"ts": ..., "place_id": "...", "status": 404, "error": "Game not found"}

Usage:
  python scripts/resolve_places.py 130452706173960 920587237
  python scripts/resolve_places.py --file ids.txt --out logs/places.jsonl --sleep 0.5
"""

import argparse
import json
import os
import sys
import time
from pathlib import Path
from typing import Dict, Iterable, List, Optional

# Add the project root to the path
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from catalog.resolver import MetadataResolver
from catalog.result import Err
from catalog.roblox_api import RobloxCatalogService
from common.config import load_params
from common.logging_setup import get_logger
from common.utils import iso_now_ms

log = get_logger("scripts.resolve_places")


def read_ids(args_ids: List[str], file: Optional[str] = None) -> List[str]:
    ids = list(args_ids)
    if file:
        for line in Path(file).read_text(encoding="utf-8").splitlines():
            line = line.split("#", 1)[0].strip()
            if line:
                ids.append(line)
    return ids


def resolve_rows(resolver: MetadataResolver, ids: Iterable[str], sleep_s: float = 0.0) -> Iterable[Dict]:
    for i, pid in enumerate(ids):
        if i and sleep_s > 0:
            time.sleep(sleep_s)
        res = resolver.resolve(pid)
        row = {"ts": iso_now_ms(), "place_id": pid}
        if isinstance(res, Err):
            row.update(status=res.error.status, error=res.error.message)
        else:
            row.update(status=200, game=res.value.to_json())
        yield row


def main() -> int:
    ap = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    ap.add_argument("ids", nargs="*", help="Place ids")
    ap.add_argument("--file", help="File with one place id per line (# comments allowed)")
    ap.add_argument("--out", default="logs/places.jsonl", help="JSONL file to append to")
    ap.add_argument("--sleep", type=float, default=0.25, help="Pause between ids (s)")
    ap.add_argument("--config", default=None, help="Path to params.yaml")
    args = ap.parse_args()

    ids = read_ids(args.ids, args.file)
    if not ids:
        ap.error("no place ids given")

    resolver = MetadataResolver(RobloxCatalogService.from_params(load_params(args.config)))
    out = Path(args.out)
    out.parent.mkdir(parents=True, exist_ok=True)

    ok = 0
    with out.open("a", encoding="utf-8") as f:
        for row in resolve_rows(resolver, ids, sleep_s=args.sleep):
            f.write(json.dumps(row, ensure_ascii=False) + "\n")
            ok += row["status"] == 200
            log.info("placeId %s -> %s", row["place_id"], row["status"])

    log.info("Resolved %d/%d place ids into %s", ok, len(ids), out)
    return 0 if ok == len(ids) else 1


if __name__ == "__main__":
    raise SystemExit(main())
