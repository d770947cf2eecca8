"""
Dreidel Game Engine.

Pure Python game logic with zero UI dependencies.
Handles spins, ante collection, turn rotation and end-of-game detection.
"""

from dreidel.engine.announcer import (
    Announcement,
    AnnouncementRecord,
    Announcer,
    NullAnnouncer,
    RecordingAnnouncer,
)
from dreidel.engine.base import (
    OUTCOMES,
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
from dreidel.engine.game import Game, TurnLimitExceeded

__all__ = [
    # Data Classes
    "Player",
    "GameConfig",
    "SpinResult",
    "GameResult",
    "Active",
    "Finished",
    "GameStatus",
    # Enums
    "Outcome",
    "OUTCOMES",
    "FinishReason",
    # Announcers
    "Announcer",
    "Announcement",
    "AnnouncementRecord",
    "NullAnnouncer",
    "RecordingAnnouncer",
    # Engines
    "DreidelEngine",
    "Game",
    "TurnLimitExceeded",
]
