"""UI components for Dreidel."""

from dreidel.ui.components.game_log import render_game_log
from dreidel.ui.components.scoreboard import render_scoreboard
from dreidel.ui.components.setup_form import render_setup_form

__all__ = [
    "render_game_log",
    "render_scoreboard",
    "render_setup_form",
]
