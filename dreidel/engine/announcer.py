"""
Dreidel - Announcer Interface

The engine reports what happens at the table through an announcer and never
prints on its own. Front ends (console, Streamlit) supply their own.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Protocol

from dreidel.engine.base import Outcome, Player


class Announcer(Protocol):
    """Receives game lifecycle events."""

    def announce_ante(self, player: Player, pot: int) -> None:
        """Called once per player who antes, with the pot after their token."""

    def announce_turn(self, outcome: Outcome, player: Player, pot: int) -> None:
        """Called once per spin, after the outcome was applied."""

    def announce_winner(self, name: str) -> None:
        """Called once when a single player is left holding tokens."""

    def announce_no_qualified_player(self) -> None:
        """Called once when nobody holds tokens."""


class NullAnnouncer:
    """Announcer that ignores everything; used for silent simulations."""

    def announce_ante(self, player: Player, pot: int) -> None:
        pass

    def announce_turn(self, outcome: Outcome, player: Player, pot: int) -> None:
        pass

    def announce_winner(self, name: str) -> None:
        pass

    def announce_no_qualified_player(self) -> None:
        pass


class Announcement(Enum):
    """Kinds of announcement a game makes."""

    ANTE = auto()
    TURN = auto()
    WINNER = auto()
    NO_QUALIFIED_PLAYER = auto()


@dataclass
class AnnouncementRecord:
    """One announcement with a snapshot of the numbers at that moment."""

    kind: Announcement
    player_name: str | None = None
    stake: int | None = None
    pot: int | None = None
    data: dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        if self.kind is Announcement.ANTE:
            return (
                f"{self.player_name} antes. {self.player_name} now has "
                f"{self.stake} and the pot has {self.pot}."
            )
        if self.kind is Announcement.TURN:
            return (
                f"{self.player_name} rolled a {self.data['outcome']}. "
                f"{self.player_name} now has {self.stake} and the pot has {self.pot}."
            )
        if self.kind is Announcement.WINNER:
            return f"{self.player_name} wins!"
        return "There are no players with money. Game over."


class RecordingAnnouncer:
    """Announcer that keeps every announcement in order.

    Player stakes are copied when recorded, so later turns do not rewrite
    earlier entries.
    """

    def __init__(self) -> None:
        self.records: list[AnnouncementRecord] = []

    def announce_ante(self, player: Player, pot: int) -> None:
        self.records.append(
            AnnouncementRecord(Announcement.ANTE, player.name, player.stake, pot)
        )

    def announce_turn(self, outcome: Outcome, player: Player, pot: int) -> None:
        self.records.append(
            AnnouncementRecord(
                Announcement.TURN, player.name, player.stake, pot, {"outcome": outcome}
            )
        )

    def announce_winner(self, name: str) -> None:
        self.records.append(AnnouncementRecord(Announcement.WINNER, player_name=name))

    def announce_no_qualified_player(self) -> None:
        self.records.append(AnnouncementRecord(Announcement.NO_QUALIFIED_PLAYER))

    def of_kind(self, kind: Announcement) -> list[AnnouncementRecord]:
        """Records of a single kind, in order."""
        return [record for record in self.records if record.kind is kind]

    def lines(self) -> list[str]:
        """Every record rendered as console text."""
        return [str(record) for record in self.records]
