"""
Dreidel - Player Rotation

Decides whose turn is next and whether the game can go on. Players keep
their seats for the whole game; a player with no tokens is skipped rather
than removed.
"""

import logging
from typing import Sequence

from dreidel.engine.base import Active, Finished, FinishReason, GameStatus, Player

logger = logging.getLogger(__name__)


def qualified_players(players: Sequence[Player]) -> list[int]:
    """Indices of players holding at least one token, in seating order."""
    return [i for i, player in enumerate(players) if player.is_qualified]


def has_qualified_player(players: Sequence[Player]) -> bool:
    """Returns True if any player can still ante and spin."""
    return any(player.is_qualified for player in players)


def get_winner(players: Sequence[Player]) -> int | None:
    """Index of the only player with tokens, or None if zero or several have any."""
    qualified = qualified_players(players)
    if len(qualified) == 1:
        return qualified[0]
    return None


def advance(status: GameStatus, players: Sequence[Player]) -> GameStatus:
    """
    Move the turn to the next qualifying player.

    Scanning starts with the seat after the current one and wraps around
    the table, so the current player is examined last.

    Args:
        status: Current game status
        players: Players in seating order

    Returns:
        ``Active`` for the next player with tokens, ``Finished(STALLED)``
        if a full circle finds nobody, or ``status`` unchanged if the game
        is already over.
    """
    if not isinstance(status, Active):
        return status

    count = len(players)
    for step in range(1, count + 1):
        index = (status.index + step) % count
        if players[index].is_qualified:
            logger.debug("Turn passes from seat %d to seat %d", status.index, index)
            return Active(index)

    logger.debug("No qualified player found after seat %d", status.index)
    return Finished(FinishReason.STALLED)
