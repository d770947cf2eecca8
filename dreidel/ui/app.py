"""Dreidel — Streamlit Application Entrypoint."""

from __future__ import annotations

import random

import streamlit as st

from dreidel.config import configure_logging, get_settings
from dreidel.engine import Game, RecordingAnnouncer
from dreidel.ui.components import render_game_log, render_scoreboard, render_setup_form


_RULES = """\
**Goal:** End up holding every token!

**Each turn:**
- Everyone with tokens antes one into the pot
- The active player spins the dreidel

**Faces:**
| Face | Effect |
|---|---|
| נ Nun | Nothing happens |
| ג Gimel | Take the whole pot |
| ה Hay | Take half the pot, rounded up |
| ש Shin | Put one token in the pot |

Players with no tokens are skipped. When only one player has tokens left,
they win; if nobody does, the game is over with no winner.
"""


def main() -> None:
    """Application entrypoint. Must call ``st.set_page_config`` first."""
    st.set_page_config(
        page_title="Dreidel",
        page_icon="🕎",
        layout="centered",
    )

    settings = get_settings()
    configure_logging(settings.log_level, debug=settings.debug)

    from dreidel.ui.themes import load_css
    load_css()

    st.title("Dreidel")
    st.caption("Oh, dreidel, dreidel, dreidel, I made you out of clay")

    with st.sidebar:
        st.markdown("### Rules")
        st.markdown(_RULES)

    config = render_setup_form(settings.default_starting_stake)
    if config is not None:
        seed = st.session_state.get("seed")
        if seed is None:
            seed = settings.seed
        announcer = RecordingAnnouncer()
        game = Game.from_config(config, rng=random.Random(seed), announcer=announcer)
        st.session_state["result"] = game.play_game()
        st.session_state["records"] = announcer.records

    result = st.session_state.get("result")
    if result is not None:
        st.divider()
        render_scoreboard(result)
        render_game_log(st.session_state.get("records", []))


if __name__ == "__main__":
    main()
