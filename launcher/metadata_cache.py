from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Set

from common.types import GameDescriptor
from common.utils import is_place_id, normalize_place_id

log = logging.getLogger(__name__)

IDLE = "idle"
LOADING = "loading"
RESOLVED = "resolved"
FAILED = "failed"


@dataclass(frozen=True)
class LookupState:
    """What the view should render for the current place id."""
    place_id: str
    status: str = IDLE
    descriptor: Optional[GameDescriptor] = None
    error: Optional[str] = None

    @property
    def loading(self) -> bool:
        return self.status == LOADING

    @property
    def failed(self) -> bool:
        return self.status == FAILED


@dataclass
class _Entry:
    descriptor: Optional[GameDescriptor]
    error: Optional[str]
    fetched_at: float


def _spawn_thread(fn: Callable[[], None]) -> None:
    threading.Thread(target=fn, daemon=True).start()


class MetadataCache:
    """
    Game-info lookups keyed by the current place id.

    - track(place_id) moves the key; a digit key without a usable entry starts a
      background lookup. Invalid keys never hit the network.
    - Results are stored under the key they were requested for, so a late answer
      for an old key is never rendered for the new one. Nothing is cancelled.
    - Resolved entries are reused for `stale_s` seconds. Failed entries are kept
      until the key changes; coming back to that key tries again.
    """

    def __init__(
        self,
        fetch: Callable[[str], GameDescriptor],
        stale_s: float = 300.0,
        clock: Callable[[], float] = time.monotonic,
        spawn: Optional[Callable[[Callable[[], None]], None]] = None,
    ):
        self._fetch = fetch
        self.stale_s = float(stale_s)
        self._clock = clock
        self._spawn = spawn or _spawn_thread
        self._lock = threading.Lock()
        self._entries: Dict[str, _Entry] = {}
        self._inflight: Set[str] = set()
        self._key = ""

    @property
    def key(self) -> str:
        return self._key

    def track(self, place_id: Optional[str]) -> LookupState:
        key = normalize_place_id(place_id)
        with self._lock:
            changed = key != self._key
            self._key = key
            start = is_place_id(key) and self._needs_fetch(key, changed)
            if start:
                self._inflight.add(key)
        if start:
            self._spawn(lambda: self._run(key))
        return self.current()

    def refresh(self) -> LookupState:
        """Force a new lookup for the current key (user-initiated retry)."""
        with self._lock:
            key = self._key
            self._entries.pop(key, None)
        return self.track(key)

    def current(self) -> LookupState:
        with self._lock:
            key = self._key
            if not is_place_id(key):
                return LookupState(place_id=key)
            entry = self._entries.get(key)
            inflight = key in self._inflight
        if entry is not None and entry.descriptor is not None:
            return LookupState(place_id=key, status=RESOLVED, descriptor=entry.descriptor)
        if inflight:
            return LookupState(place_id=key, status=LOADING)
        if entry is not None:
            return LookupState(place_id=key, status=FAILED, error=entry.error)
        return LookupState(place_id=key)

    # -------- internals --------

    def _needs_fetch(self, key: str, changed: bool) -> bool:
        # caller holds the lock
        if key in self._inflight:
            return False
        entry = self._entries.get(key)
        if entry is None:
            return True
        if entry.descriptor is None:
            return changed
        return (self._clock() - entry.fetched_at) >= self.stale_s

    def _run(self, key: str) -> None:
        try:
            entry = _Entry(descriptor=self._fetch(key), error=None, fetched_at=self._clock())
        except Exception as e:
            log.warning("Could not load game info for placeId %s: %s", key, e)
            entry = _Entry(descriptor=None, error=str(e) or e.__class__.__name__, fetched_at=self._clock())
        with self._lock:
            self._entries[key] = entry
            self._inflight.discard(key)
