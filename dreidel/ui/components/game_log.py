"""Game log component — every ante and spin, grouped by turn."""

from __future__ import annotations

import streamlit as st

from dreidel.engine import Announcement, AnnouncementRecord


def group_by_turn(records: list[AnnouncementRecord]) -> list[list[AnnouncementRecord]]:
    """Split announcements into turns; each turn ends with its spin."""
    turns: list[list[AnnouncementRecord]] = []
    current: list[AnnouncementRecord] = []
    for record in records:
        current.append(record)
        if record.kind is not Announcement.ANTE:
            turns.append(current)
            current = []
    if current:
        turns.append(current)
    return turns


def render_game_log(records: list[AnnouncementRecord]) -> None:
    """Render the turn-by-turn log in collapsible sections."""
    st.subheader("Game Log")
    for number, turn in enumerate(group_by_turn(records), 1):
        spin = turn[-1]
        if spin.kind is Announcement.TURN:
            label = f"Turn {number}: {spin.player_name} spun {spin.data['outcome']}"
        else:
            label = str(spin)
        with st.expander(label):
            for record in turn:
                st.text(str(record))
