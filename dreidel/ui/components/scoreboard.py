"""Scoreboard component — final stakes and the winner."""

from __future__ import annotations

from html import escape

import streamlit as st

from dreidel.engine import FinishReason, GameResult
from dreidel.ui.themes import render_victory_animation


def standings_html(result: GameResult) -> str:
    """Scoreboard markup, richest player first; broke players are struck out."""
    html = ['<div class="scoreboard">']
    html.append(f'<div class="scoreboard-title">Pot &mdash; {result.final_pot}</div>')

    standings = sorted(result.final_stakes, key=lambda item: item[1], reverse=True)
    for name, stake in standings:
        row_classes = ["player-row"]
        indicator = ""
        if name == result.winner:
            row_classes.append("active")
            indicator = "&#10017; "
        if stake == 0:
            row_classes.append("out")

        html.append(
            f'<div class="{" ".join(row_classes)}">'
            f'<span class="name">{indicator}{escape(name)}</span>'
            f'<span class="score">{stake}</span>'
            f"</div>"
        )

    html.append("</div>")
    return "".join(html)


def render_scoreboard(result: GameResult) -> None:
    """Render the final standings and the winner banner.

    Args:
        result: Summary of a finished game.
    """
    if result.reason is FinishReason.WON:
        render_victory_animation(result.winner, result.turns_played)
    else:
        st.warning(str(result))

    st.markdown(standings_html(result), unsafe_allow_html=True)
