"""
Dreidel - Outcome Resolver Tests

Tests for spinning the dreidel and applying each face to a stake and pot.
"""

import math
import random

import pytest
from dreidel.engine.base import OUTCOMES, Outcome
from dreidel.engine.dreidel import DreidelEngine


STAKES = [0, 1, 5, 9]
POTS = [0, 1, 2, 9, 32]


# === Spin ===


class TestSpin:
    """Tests for DreidelEngine.spin()."""

    def test_returns_outcome(self):
        assert isinstance(DreidelEngine.spin(), Outcome)

    def test_only_four_faces(self):
        """Spin 200 times; every result is one of the four faces."""
        rng = random.Random(7)
        for _ in range(200):
            assert DreidelEngine.spin(rng) in OUTCOMES

    def test_every_face_comes_up(self):
        rng = random.Random(11)
        seen = {DreidelEngine.spin(rng) for _ in range(200)}
        assert seen == set(Outcome)

    def test_seeded_spins_repeat(self):
        first = [DreidelEngine.spin(random.Random(3)) for _ in range(5)]
        second = [DreidelEngine.spin(random.Random(3)) for _ in range(5)]
        assert first == second

    def test_uses_stub_source(self, fixed_rng):
        rng = fixed_rng(Outcome.SHIN, Outcome.HAY)
        assert DreidelEngine.spin(rng) is Outcome.SHIN
        assert DreidelEngine.spin(rng) is Outcome.HAY

    def test_rejects_values_outside_faces(self):
        class BadRng:
            def choice(self, seq):
                return "dreidel"

        with pytest.raises(ValueError, match="not a dreidel face"):
            DreidelEngine.spin(BadRng())


# === Resolve ===


class TestResolveNun:
    """Nun leaves everything alone."""

    @pytest.mark.parametrize("stake", STAKES)
    @pytest.mark.parametrize("pot", POTS)
    def test_unchanged(self, stake, pot):
        assert DreidelEngine.resolve(Outcome.NUN, stake, pot) == (stake, pot)


class TestResolveGimel:
    """Gimel takes the whole pot."""

    @pytest.mark.parametrize("stake", STAKES)
    @pytest.mark.parametrize("pot", POTS)
    def test_takes_everything(self, stake, pot):
        assert DreidelEngine.resolve(Outcome.GIMEL, stake, pot) == (stake + pot, 0)

    def test_nine_and_nine(self):
        assert DreidelEngine.resolve(Outcome.GIMEL, 9, 9) == (18, 0)

    def test_empty_pot(self):
        assert DreidelEngine.resolve(Outcome.GIMEL, 5, 0) == (5, 0)


class TestResolveHay:
    """Hay takes half the pot, rounding in the spinner's favour."""

    @pytest.mark.parametrize("stake", STAKES)
    @pytest.mark.parametrize("pot", POTS)
    def test_takes_half_rounded_up(self, stake, pot):
        transfer = math.ceil(pot / 2)
        assert DreidelEngine.resolve(Outcome.HAY, stake, pot) == (stake + transfer, pot - transfer)

    def test_odd_pot(self):
        assert DreidelEngine.resolve(Outcome.HAY, 9, 9) == (14, 4)

    def test_pot_of_one(self):
        assert DreidelEngine.resolve(Outcome.HAY, 5, 1) == (6, 0)

    def test_empty_pot_is_noop(self):
        assert DreidelEngine.resolve(Outcome.HAY, 5, 0) == (5, 0)


class TestResolveShin:
    """Shin pays one token in, if there is one to pay."""

    @pytest.mark.parametrize("stake", [1, 5, 9])
    @pytest.mark.parametrize("pot", POTS)
    def test_pays_one(self, stake, pot):
        assert DreidelEngine.resolve(Outcome.SHIN, stake, pot) == (stake - 1, pot + 1)

    @pytest.mark.parametrize("pot", POTS)
    def test_broke_player_pays_nothing(self, pot):
        assert DreidelEngine.resolve(Outcome.SHIN, 0, pot) == (0, pot)


class TestResolveConservation:
    """No face creates or destroys tokens."""

    @pytest.mark.parametrize("outcome", list(Outcome))
    @pytest.mark.parametrize("stake", STAKES)
    @pytest.mark.parametrize("pot", POTS)
    def test_total_unchanged(self, outcome, stake, pot):
        new_stake, new_pot = DreidelEngine.resolve(outcome, stake, pot)
        assert new_stake + new_pot == stake + pot
        assert new_stake >= 0 and new_pot >= 0

    @pytest.mark.parametrize("stake,pot", [(-1, 0), (0, -1)])
    def test_negative_input_raises(self, stake, pot):
        with pytest.raises(ValueError, match="non-negative"):
            DreidelEngine.resolve(Outcome.NUN, stake, pot)


# === Process Spin ===


class TestProcessSpin:
    """Tests for DreidelEngine.process_spin()."""

    def test_returns_tuple_of_three(self):
        result = DreidelEngine.process_spin(5, 5)
        assert isinstance(result, tuple)
        assert len(result) == 3

    def test_uses_provided_outcome(self):
        assert DreidelEngine.process_spin(9, 32, outcome=Outcome.GIMEL) == (41, 0, Outcome.GIMEL)

    def test_draws_from_rng(self, fixed_rng):
        rng = fixed_rng(Outcome.SHIN)
        assert DreidelEngine.process_spin(3, 2, rng=rng) == (2, 3, Outcome.SHIN)
        assert rng.calls == 1

    def test_provided_outcome_skips_rng(self, fixed_rng):
        rng = fixed_rng()
        DreidelEngine.process_spin(3, 2, outcome=Outcome.NUN, rng=rng)
        assert rng.calls == 0
