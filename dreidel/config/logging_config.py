"""Logging setup shared by the console and Streamlit front ends."""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | int = "INFO", debug: bool = False) -> None:
    """Configure the root logger; ``debug`` forces DEBUG level.

    Handlers are only installed once, the level is applied on every call.
    """
    if debug:
        level = logging.DEBUG
    elif isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    logging.basicConfig(format=LOG_FORMAT)
    logging.getLogger().setLevel(level)
