"""
Dreidel - Outcome Resolver

Spin the top and apply the face it lands on to the spinner's stake and the
shared pot:

- Nun: nothing happens
- Gimel: spinner takes the whole pot
- Hay: spinner takes half the pot, rounded up
- Shin: spinner puts one token in the pot, if they have one

All methods are stateless class methods operating on plain integers.
"""

import random
from typing import Any

from dreidel.engine.base import OUTCOMES, Outcome


class DreidelEngine:
    """
    Stateless engine for dreidel spins.

    All methods are class methods operating on immutable data.
    State is passed in and returned, never stored.
    """

    FACES = OUTCOMES

    @classmethod
    def spin(cls, rng: Any = None) -> Outcome:
        """Spin the dreidel.

        Args:
            rng: Object with a ``choice`` method; defaults to the
                ``random`` module

        Returns:
            One of the four outcomes, drawn uniformly
        """
        source = random if rng is None else rng
        outcome = source.choice(cls.FACES)
        if outcome not in cls.FACES:
            raise ValueError(f"Random source produced {outcome!r}, not a dreidel face.")
        return outcome

    @classmethod
    def resolve(cls, outcome: Outcome, stake: int, pot: int) -> tuple[int, int]:
        """Apply an outcome to a stake and pot.

        Tokens are only moved, never created or destroyed, so
        ``stake + pot`` is the same before and after.

        Args:
            outcome: Face the dreidel landed on
            stake: Spinner's current stake
            pot: Current pot

        Returns:
            Tuple of (new_stake, new_pot)
        """
        if stake < 0 or pot < 0:
            raise ValueError(f"Stake and pot must be non-negative, got stake={stake}, pot={pot}.")

        if outcome is Outcome.GIMEL:
            return (stake + pot, 0)

        if outcome is Outcome.HAY:
            transfer = (pot + 1) // 2
            return (stake + transfer, pot - transfer)

        if outcome is Outcome.SHIN and stake > 0:
            return (stake - 1, pot + 1)

        # Nun, or Shin with nothing to pay
        return (stake, pot)

    @classmethod
    def process_spin(
        cls,
        stake: int,
        pot: int,
        outcome: Outcome | None = None,
        rng: Any = None,
    ) -> tuple[int, int, Outcome]:
        """Process a complete spin: spin the dreidel, then resolve it.

        Args:
            stake: Spinner's current stake
            pot: Current pot
            outcome: Optional pre-determined outcome (for testing)
            rng: Random source used when no outcome is given

        Returns:
            Tuple of (new_stake, new_pot, outcome)
        """
        if outcome is None:
            outcome = cls.spin(rng)

        new_stake, new_pot = cls.resolve(outcome, stake, pot)
        return (new_stake, new_pot, outcome)
