"""
Dreidel - Test Configuration and Fixtures

Common fixtures and test doubles for all test modules.
"""

from typing import Callable, Sequence

import pytest

from dreidel.engine import Outcome, Player, RecordingAnnouncer


class FixedRng:
    """Random source that returns a scripted sequence of outcomes."""

    def __init__(self, outcomes: Sequence[Outcome]) -> None:
        self.outcomes = list(outcomes)
        self.calls = 0

    def choice(self, seq):
        outcome = self.outcomes[self.calls]
        self.calls += 1
        return outcome


# =============================================================================
# RANDOMNESS
# =============================================================================

@pytest.fixture
def fixed_rng() -> Callable[..., FixedRng]:
    """Factory for a stub random source: ``fixed_rng(Outcome.GIMEL, ...)``."""
    def _make(*outcomes: Outcome) -> FixedRng:
        return FixedRng(outcomes)
    return _make


# =============================================================================
# PLAYERS
# =============================================================================

@pytest.fixture
def make_players() -> Callable[..., list[Player]]:
    """Factory for seated players: ``make_players(10, 15)`` -> A:10, B:15."""
    def _make(*stakes: int) -> list[Player]:
        return [Player(chr(ord("A") + i), stake) for i, stake in enumerate(stakes)]
    return _make


@pytest.fixture
def recorder() -> RecordingAnnouncer:
    """Announcer that records every call."""
    return RecordingAnnouncer()


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    """Settings are cached per process; start every test from a clean slate."""
    from dreidel.config.settings import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
