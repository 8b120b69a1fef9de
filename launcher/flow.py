from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional

from common.utils import format_count, normalize_place_id
from launcher.dispatch import open_url
from launcher.link_builder import LaunchInputError, build_launch_url, make_launch_request
from launcher.metadata_cache import LookupState, MetadataCache

log = logging.getLogger(__name__)

DETAILS_UNAVAILABLE = "Could not load full game details"


class FlowState(str, Enum):
    IDLE = "idle"
    VALIDATING = "validating"
    CONFIRM_PENDING = "confirm_pending"
    LAUNCHED = "launched"
    ERROR = "error"


@dataclass(frozen=True)
class Notification:
    title: str
    description: str
    variant: str = "default"  # "default" | "destructive"


@dataclass(frozen=True)
class ConfirmDialog:
    """Everything the confirmation dialog renders; built once per submit."""
    place_id: str
    url: str
    display_name: str
    creator_name: Optional[str] = None
    playing: Optional[int] = None
    visits: Optional[int] = None
    icon_url: Optional[str] = None
    notice: Optional[str] = None
    title: str = "Confirm Game Join"
    prompt: str = "Are you sure you want to join this game?"

    @classmethod
    def build(cls, place_id: str, url: str, lookup: Optional[LookupState]) -> "ConfirmDialog":
        d = lookup.descriptor if lookup is not None else None
        if d is None:
            # raw place id stands in for the game name
            notice = DETAILS_UNAVAILABLE if (lookup is not None and lookup.failed) else None
            return cls(place_id=place_id, url=url, display_name=place_id, notice=notice)
        return cls(
            place_id=place_id,
            url=url,
            display_name=d.name or place_id,
            creator_name=d.creator.name or None,
            playing=d.concurrent_players,
            visits=d.total_visits,
            icon_url=d.icon_url,
        )

    @property
    def creator_line(self) -> Optional[str]:
        return f"by {self.creator_name}" if self.creator_name else None

    @property
    def stats(self) -> List[tuple]:
        out = []
        if self.playing is not None:
            out.append(("Playing", format_count(self.playing)))
        if self.visits is not None:
            out.append(("Visits", format_count(self.visits)))
        return out


class LaunchFlow:
    """
    Per-session form state, changed only through the transition methods.

        Idle --submit--> Validating --ok--> ConfirmPending --confirm--> Launched
                               \\--bad--> Error          \\--cancel--> Idle

    Any field edit clears a shown error. Confirm dispatches the pending URL at
    most once; the URL is dropped before the dispatcher runs.
    """

    def __init__(
        self,
        dispatcher: Callable[[str], bool] = open_url,
        notifier: Optional[Callable[[Notification], None]] = None,
        metadata: Optional[MetadataCache] = None,
        place_id: str = "",
        instance_id: str = "",
    ):
        self.dispatcher = dispatcher
        self.notifier = notifier
        self.metadata = metadata
        self.state = FlowState.IDLE
        self.place_id = ""
        self.instance_id = instance_id
        self.error: Optional[str] = None
        self.pending_url: Optional[str] = None
        self.dialog: Optional[ConfirmDialog] = None
        self.notifications: List[Notification] = []
        self.edit_place_id(place_id)

    # -------- editing --------

    def edit_place_id(self, value: str) -> None:
        self.place_id = value or ""
        self._back_to_idle()
        if self.metadata is not None:
            self.metadata.track(self.place_id)

    def edit_instance_id(self, value: str) -> None:
        self.instance_id = value or ""
        self._back_to_idle()

    def lookup(self) -> Optional[LookupState]:
        return self.metadata.current() if self.metadata is not None else None

    @property
    def can_submit(self) -> bool:
        """Submit button enabled: some place id typed and no lookup in flight."""
        if not normalize_place_id(self.place_id):
            return False
        lk = self.lookup()
        return not (lk is not None and lk.loading)

    # -------- transitions --------

    def submit(self) -> FlowState:
        self.state = FlowState.VALIDATING
        try:
            req = make_launch_request(self.place_id, self.instance_id)
        except LaunchInputError as e:
            self.state = FlowState.ERROR
            self.error = str(e)
            return self.state

        self.error = None
        self.pending_url = build_launch_url(req)
        self.dialog = ConfirmDialog.build(req.place_id, self.pending_url, self.lookup())
        self.state = FlowState.CONFIRM_PENDING
        return self.state

    def confirm(self) -> bool:
        """Dispatch the pending URL. Returns True only for the call that launched."""
        if self.state != FlowState.CONFIRM_PENDING or not self.pending_url:
            return False
        url = self.pending_url
        self.pending_url = None
        self.dialog = None

        try:
            ok = bool(self.dispatcher(url))
        except Exception:
            log.exception("URL dispatch raised")
            ok = False

        if not ok:
            # nothing launched; the message stays until the next edit
            self.state = FlowState.IDLE
            self.error = "Failed to join game. Please try again."
            self._notify(Notification("Error", self.error, variant="destructive"))
            return False

        self.state = FlowState.LAUNCHED
        lk = self.lookup()
        name = lk.descriptor.name if (lk is not None and lk.descriptor is not None) else ""
        log.info("Launched %s", url.split("&launchData=")[0])
        self._notify(Notification("Launching Roblox", f"Joining {name or 'game'}..."))
        return True

    def cancel(self) -> None:
        if self.state != FlowState.CONFIRM_PENDING:
            return
        self.pending_url = None
        self.dialog = None
        self.state = FlowState.IDLE

    def reset(self) -> None:
        """Back to Idle keeping the typed values."""
        self._back_to_idle()

    # -------- internals --------

    def _back_to_idle(self) -> None:
        self.error = None
        self.pending_url = None
        self.dialog = None
        self.state = FlowState.IDLE

    def _notify(self, n: Notification) -> None:
        self.notifications.append(n)
        if self.notifier is not None:
            self.notifier(n)
