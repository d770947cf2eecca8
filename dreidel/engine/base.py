"""
Dreidel - Game Engine Base Classes

This module defines the foundational data structures and enums used throughout
the game engine. Outcomes, configuration and results are immutable (frozen
dataclasses); players are the one mutable record, owned by a running game.
"""

from dataclasses import dataclass
from enum import Enum, auto

from dreidel.engine.validators import validate_player_names, validate_stake


class Outcome(Enum):
    """The four faces of the dreidel."""
    NUN = "נ"
    GIMEL = "ג"
    HAY = "ה"
    SHIN = "ש"

    @property
    def letter(self) -> str:
        """Hebrew letter printed on this face."""
        return self.value

    @property
    def description(self) -> str:
        """What the face does to the spinner's stake."""
        return _OUTCOME_DESCRIPTIONS[self]

    def __str__(self) -> str:
        return self.name.capitalize()


_OUTCOME_DESCRIPTIONS: dict[Outcome, str] = {
    Outcome.NUN: "Nothing happens",
    Outcome.GIMEL: "Take the whole pot",
    Outcome.HAY: "Take half the pot, rounded up",
    Outcome.SHIN: "Put one token in the pot",
}

# Draw order for spins; every outcome appears exactly once.
OUTCOMES: tuple[Outcome, ...] = (
    Outcome.NUN,
    Outcome.GIMEL,
    Outcome.HAY,
    Outcome.SHIN,
)


class FinishReason(Enum):
    """Why a game stopped."""
    WON = auto()      # exactly one player still holds tokens
    STALLED = auto()  # nobody holds tokens


@dataclass
class Player:
    """
    A seated player.

    Attributes:
        name: Display name, unique within a game
        stake: Tokens currently held (never negative)
    """
    name: str
    stake: int = 0

    @property
    def is_qualified(self) -> bool:
        """Returns True if the player can still ante and spin."""
        return self.stake > 0


@dataclass(frozen=True)
class Active:
    """Game in progress; ``index`` is the seat whose turn it is."""
    index: int


@dataclass(frozen=True)
class Finished:
    """
    Game over.

    Attributes:
        reason: Whether somebody won or the table ran dry
        winner: Winning player's name (None when stalled)
    """
    reason: FinishReason
    winner: str | None = None


GameStatus = Active | Finished


@dataclass(frozen=True)
class SpinResult:
    """
    Outcome of one player's spin, with the numbers after resolution.

    Attributes:
        player_name: Who spun
        outcome: Face the dreidel landed on
        stake: Spinner's stake after the outcome was applied
        pot: Pot after the outcome was applied
    """
    player_name: str
    outcome: Outcome
    stake: int
    pot: int

    def __str__(self) -> str:
        return (
            f"{self.player_name} rolled a {self.outcome}. "
            f"{self.player_name} now has {self.stake} and the pot has {self.pot}."
        )


@dataclass(frozen=True)
class GameResult:
    """
    Summary of a finished game.

    Attributes:
        reason: WON or STALLED
        winner: Winning player's name, if any
        turns_played: Number of spins taken
        final_pot: Tokens left in the pot
        final_stakes: Each player's stake at the end, in seating order
    """
    reason: FinishReason
    winner: str | None
    turns_played: int
    final_pot: int
    final_stakes: tuple[tuple[str, int], ...]

    @property
    def total_tokens(self) -> int:
        """Tokens on the table: every stake plus the pot."""
        return self.final_pot + sum(stake for _, stake in self.final_stakes)

    def __str__(self) -> str:
        if self.reason is FinishReason.STALLED:
            return "There are no players with money. Game over."
        return f"{self.winner} wins!"


@dataclass(frozen=True)
class GameConfig:
    """
    Configuration for a game session.

    Attributes:
        player_names: Seating order of the players
        starting_stake: Tokens each player starts with
    """
    player_names: tuple[str, ...]
    starting_stake: int

    def __post_init__(self) -> None:
        """Validate configuration."""
        object.__setattr__(self, "player_names", validate_player_names(self.player_names))
        validate_stake(self.starting_stake)
