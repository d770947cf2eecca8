"""
Dreidel - Game Loop

A ``Game`` owns the players, the pot and the random source. Each step either
ends the game (one player left holding tokens, or nobody at all) or passes
the turn to the next qualifying player, collects the ante and lets that
player spin.
"""

import logging
import random
from typing import Any, Sequence

from dreidel.engine.announcer import Announcer, NullAnnouncer
from dreidel.engine.base import (
    Active,
    Finished,
    FinishReason,
    GameConfig,
    GameResult,
    GameStatus,
    Outcome,
    Player,
    SpinResult,
)
from dreidel.engine.dreidel import DreidelEngine
from dreidel.engine.rotation import advance, get_winner, has_qualified_player
from dreidel.engine.validators import validate_rng, validate_stake

logger = logging.getLogger(__name__)


class TurnLimitExceeded(RuntimeError):
    """Raised when ``play_game`` hits its ``max_turns`` cap with the game still running."""


class Game:
    """
    A single game of dreidel.

    Attributes:
        players: Players in seating order
        pot: Tokens in the middle
        status: ``Active(index)`` while running, ``Finished`` once over
        turns_played: Spins taken so far
    """

    def __init__(
        self,
        players: Sequence[Player],
        *,
        rng: Any = None,
        announcer: Announcer | None = None,
        pot: int = 0,
        status: GameStatus | None = None,
    ) -> None:
        if not players:
            raise ValueError("At least one player is required.")
        for player in players:
            validate_stake(player.stake)

        self.players: list[Player] = list(players)
        self.pot = validate_stake(pot)
        if isinstance(status, Active) and not 0 <= status.index < len(self.players):
            raise ValueError(
                f"Active seat {status.index} is out of range for {len(self.players)} players."
            )
        self.status: GameStatus = Active(0) if status is None else status
        self.rng = random.Random() if rng is None else validate_rng(rng)
        self.announcer: Announcer = NullAnnouncer() if announcer is None else announcer
        self.turns_played = 0

    @classmethod
    def new(
        cls,
        names: Sequence[str],
        starting_stake: int,
        *,
        rng: Any = None,
        announcer: Announcer | None = None,
    ) -> "Game":
        """Seat ``names`` in order, each holding ``starting_stake`` tokens."""
        return cls.from_config(GameConfig(tuple(names), starting_stake), rng=rng, announcer=announcer)

    @classmethod
    def from_config(
        cls,
        config: GameConfig,
        *,
        rng: Any = None,
        announcer: Announcer | None = None,
    ) -> "Game":
        """Create a fresh game from a validated configuration."""
        players = [Player(name, config.starting_stake) for name in config.player_names]
        return cls(players, rng=rng, announcer=announcer)

    @property
    def is_over(self) -> bool:
        """Returns True once the game has been won or has stalled."""
        return isinstance(self.status, Finished)

    @property
    def active_player(self) -> Player | None:
        """Player whose turn it is, or None if the game is over."""
        if isinstance(self.status, Active):
            return self.players[self.status.index]
        return None

    @property
    def total_tokens(self) -> int:
        """Every stake plus the pot; constant for the whole game."""
        return self.pot + sum(player.stake for player in self.players)

    def ante(self) -> None:
        """Every player holding tokens puts one in the pot, in seating order."""
        for player in self.players:
            if player.is_qualified:
                player.stake -= 1
                self.pot += 1
                logger.debug("%s antes (stake=%d, pot=%d)", player.name, player.stake, self.pot)
                self.announcer.announce_ante(player, self.pot)

    def play_turn(self, outcome: Outcome | None = None) -> SpinResult | None:
        """Collect the ante, then let the active player spin.

        Args:
            outcome: Optional pre-determined outcome (for testing)

        Returns:
            The spin result, or None if the game is already over
        """
        player = self.active_player
        if player is None:
            return None

        self.ante()
        player.stake, self.pot, outcome = DreidelEngine.process_spin(
            player.stake, self.pot, outcome=outcome, rng=self.rng
        )
        self.turns_played += 1

        logger.debug(
            "%s spun %s (stake=%d, pot=%d)", player.name, outcome, player.stake, self.pot
        )
        self.announcer.announce_turn(outcome, player, self.pot)
        return SpinResult(player.name, outcome, player.stake, self.pot)

    def _terminal_status(self) -> Finished | None:
        winner = get_winner(self.players)
        if winner is not None:
            return Finished(FinishReason.WON, self.players[winner].name)
        if not has_qualified_player(self.players):
            return Finished(FinishReason.STALLED)
        return None

    def _finish(self, status: Finished) -> None:
        self.status = status
        logger.info(
            "Game over after %d turns: %s (winner=%s)",
            self.turns_played, status.reason.name, status.winner,
        )
        if status.reason is FinishReason.WON:
            self.announcer.announce_winner(status.winner)
        else:
            self.announcer.announce_no_qualified_player()

    def step(self) -> GameStatus:
        """Run one iteration of the game loop.

        Checks for a winner first, then for a table with no tokens left;
        otherwise passes the turn on and plays it. Does nothing once the
        game is over.

        Returns:
            Status after the iteration
        """
        if self.is_over:
            return self.status

        terminal = self._terminal_status()
        if terminal is not None:
            self._finish(terminal)
            return self.status

        self.status = advance(self.status, self.players)
        if isinstance(self.status, Finished):
            # advance only stalls when nobody qualifies, which was ruled out above
            self._finish(self.status)
            return self.status

        self.play_turn()
        return self.status

    def play_game(self, max_turns: int | None = None) -> GameResult:
        """Play until the game is won or stalls.

        Args:
            max_turns: Optional cap on spins for simulations

        Returns:
            Summary of the finished game

        Raises:
            TurnLimitExceeded: If ``max_turns`` spins were taken and the
                game would still need another
        """
        logger.info(
            "Starting game: %d players, %d tokens on the table",
            len(self.players), self.total_tokens,
        )
        while not self.is_over:
            if (
                max_turns is not None
                and self.turns_played >= max_turns
                and self._terminal_status() is None
            ):
                raise TurnLimitExceeded(f"Game still running after {max_turns} turns.")
            self.step()
        return self.result()

    def result(self) -> GameResult:
        """Summary of the game; only meaningful once it is over."""
        if not isinstance(self.status, Finished):
            raise RuntimeError("Game is still running.")
        return GameResult(
            reason=self.status.reason,
            winner=self.status.winner,
            turns_played=self.turns_played,
            final_pot=self.pot,
            final_stakes=tuple((player.name, player.stake) for player in self.players),
        )
