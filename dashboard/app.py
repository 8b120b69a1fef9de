"""
Slugmoon Warp (Streamlit)

- Place ID / Game Instance ID form backed by launcher.flow.LaunchFlow
- Live "Game: <name>" hint from the game-info API, looked up in the background
  whenever the place id changes
- Confirmation dialog (icon, creator, playing/visits) before handing the
  roblox:// link to the OS

Run:
    uvicorn catalog.server:app --port 5000      # game info API
    streamlit run dashboard/app.py
"""

from __future__ import annotations

import os
import sys
import time

import streamlit as st

# Allow `streamlit run dashboard/app.py` from a plain checkout
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from common.config import load_params  # noqa: E402
from common.logging_setup import setup_logging  # noqa: E402
from launcher.api_client import GameInfoClient  # noqa: E402
from launcher.dispatch import open_url  # noqa: E402
from launcher.flow import FlowState, LaunchFlow  # noqa: E402
from launcher.metadata_cache import MetadataCache  # noqa: E402


# -------------------------
# Config
# -------------------------
DEFAULT_PLACE_ID = "130452706173960"
POLL_S = 0.5  # rerun cadence while a lookup is in flight


# -------------------------
# Session state
# -------------------------
def _session_flow() -> LaunchFlow:
    if "flow" not in st.session_state:
        setup_logging()
        P = load_params()
        client = GameInfoClient(P["client"]["api_url"], timeout=P["client"]["timeout_s"])
        cache = MetadataCache(client.get_game_info, stale_s=P["client"]["stale_s"])
        st.session_state.flow = LaunchFlow(dispatcher=open_url, metadata=cache, place_id=DEFAULT_PLACE_ID)
        st.session_state.place_id_input = DEFAULT_PLACE_ID
        st.session_state.instance_id_input = ""
    return st.session_state.flow


def _on_place_id_change() -> None:
    _session_flow().edit_place_id(st.session_state.place_id_input)


def _on_instance_id_change() -> None:
    _session_flow().edit_instance_id(st.session_state.instance_id_input)


@st.dialog("Confirm Game Join")
def _confirm_dialog(flow: LaunchFlow) -> None:
    d = flow.dialog
    if d is None:
        return
    st.caption(d.prompt)
    if d.icon_url:
        st.image(d.icon_url, width=80)
    st.subheader(d.display_name)
    if d.creator_line:
        st.caption(d.creator_line)
    if d.stats:
        cols = st.columns(len(d.stats))
        for col, (label, value) in zip(cols, d.stats):
            col.metric(label, value)
    if d.notice:
        st.warning(d.notice)

    left, right = st.columns(2)
    if left.button("Cancel", use_container_width=True):
        flow.cancel()
        st.rerun()
    if right.button("Join Game", type="primary", use_container_width=True):
        flow.confirm()
        st.rerun()


# -------------------------
# UI
# -------------------------
st.set_page_config(page_title="Slugmoon Warp", layout="centered")
flow = _session_flow()

st.title("Slugmoon Warp")
st.caption("Enter your game instance ID to join quickly")

# toasts queued by the last transition
while flow.notifications:
    n = flow.notifications.pop(0)
    st.toast(f"**{n.title}** · {n.description}")

st.text_input("Place ID", key="place_id_input", placeholder="Enter place ID...", on_change=_on_place_id_change)

lookup = flow.lookup()
if lookup is not None and lookup.loading:
    st.caption("Loading game info...")
elif lookup is not None and lookup.descriptor is not None and lookup.descriptor.name:
    st.caption(f"Game: {lookup.descriptor.name}")

st.text_input(
    "Game Instance ID",
    key="instance_id_input",
    placeholder="Enter game instance ID... (blank or N/A = any server)",
    on_change=_on_instance_id_change,
)

if flow.error:
    st.error(flow.error)

if st.button("Join Game", type="primary", use_container_width=True, disabled=not flow.can_submit):
    flow.submit()
    st.rerun()

if flow.state == FlowState.CONFIRM_PENDING:
    _confirm_dialog(flow)

st.caption("Slugmoon Warp ©. Slugmoon Warp is a part of Slugmoon Suite.")

if lookup is not None and lookup.loading:
    time.sleep(POLL_S)
    st.rerun()
