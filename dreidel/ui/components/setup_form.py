"""Setup form component — player names and starting stake."""

from __future__ import annotations

import streamlit as st

from dreidel.engine import GameConfig
from dreidel.engine.validators import parse_player_names


def render_setup_form(default_stake: int) -> GameConfig | None:
    """Render the new-game form.

    Args:
        default_stake: Pre-filled starting stake.

    Returns:
        A validated configuration once the form is submitted with good
        input, otherwise None.
    """
    with st.form("setup_form"):
        names_text = st.text_area(
            "Players (one per line)",
            placeholder="Ethan\nMadigan\nMilo",
        )
        stake = st.number_input(
            "Starting stake",
            min_value=0,
            value=default_stake,
            step=1,
        )
        seed_text = st.text_input("Seed (optional)", placeholder="Leave blank for a random game")
        submitted = st.form_submit_button("Spin!", type="primary")

    if not submitted:
        return None

    try:
        names = parse_player_names(names_text)
        config = GameConfig(names, int(stake))
    except ValueError as e:
        st.error(str(e))
        return None

    seed_text = seed_text.strip()
    if seed_text:
        try:
            st.session_state["seed"] = int(seed_text)
        except ValueError:
            st.error("Seed must be a whole number.")
            return None
    else:
        st.session_state["seed"] = None

    return config
