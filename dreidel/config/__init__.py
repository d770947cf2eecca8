"""
Dreidel Configuration.

Environment variables, settings, and logging configuration.
"""

from dreidel.config.logging_config import configure_logging
from dreidel.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings", "configure_logging"]
