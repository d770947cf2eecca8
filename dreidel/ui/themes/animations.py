"""Theme stylesheet and the end-of-game banner."""

from functools import lru_cache
from html import escape
from pathlib import Path

import streamlit as st

from dreidel.engine import Outcome

THEME_PATH = Path(__file__).parent / "theme.css"


@lru_cache(maxsize=1)
def _theme_css() -> str:
    return THEME_PATH.read_text(encoding="utf-8")


def load_css() -> None:
    """Inject the theme stylesheet; the file is read once per process."""
    st.markdown(f"<style>{_theme_css()}</style>", unsafe_allow_html=True)


def victory_html(name: str, turns_played: int) -> str:
    """Banner markup for a won game: the four faces spinning above the winner."""
    faces = "".join(
        f'<span class="face face-{outcome.name.lower()}">{outcome.letter}</span>'
        for outcome in Outcome
    )
    plural = "" if turns_played == 1 else "s"
    return (
        '<div class="victory-overlay">'
        f'<div class="faces">{faces}</div>'
        f"<h1>{escape(name)} takes the table!</h1>"
        f"<p>Every token is theirs after {turns_played} spin{plural}.</p>"
        "</div>"
    )


def render_victory_animation(name: str, turns_played: int) -> None:
    """Render the victory banner with the spinning faces."""
    st.markdown(victory_html(name, turns_played), unsafe_allow_html=True)
