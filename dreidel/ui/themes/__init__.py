"""Theme for Dreidel."""

from dreidel.ui.themes.animations import load_css, render_victory_animation, victory_html

__all__ = ["load_css", "render_victory_animation", "victory_html"]
