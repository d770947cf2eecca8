"""
Dreidel - Input Validation Utilities

Provides validation functions for setup input handed to the engine. All
validators either return validated data or raise descriptive ValueError
exceptions.
"""

from typing import Any, Sequence


def validate_player_names(names: Sequence[str]) -> tuple[str, ...]:
    """
    Validate and normalize the seating list.

    Args:
        names: Player names in seating order

    Returns:
        Validated names as a tuple

    Raises:
        ValueError: If the list is empty, or a name is blank or repeated
    """
    if not names:
        raise ValueError("At least one player is required.")

    names_tuple = tuple(names)
    seen: set[str] = set()
    for i, name in enumerate(names_tuple):
        if not isinstance(name, str):
            raise ValueError(f"Player name at index {i} must be a string, got {type(name).__name__}.")
        if not name.strip():
            raise ValueError(f"Player name at index {i} is blank.")
        if name in seen:
            raise ValueError(f"Duplicate player name {name!r}.")
        seen.add(name)

    return names_tuple


def validate_stake(stake: int) -> int:
    """
    Validate a token count.

    Args:
        stake: Stake to validate

    Returns:
        Validated stake

    Raises:
        ValueError: If stake is not a non-negative integer
    """
    if isinstance(stake, bool) or not isinstance(stake, int):
        raise ValueError(f"Stake must be an integer, got {type(stake).__name__}.")

    if stake < 0:
        raise ValueError(f"Stake cannot be negative, got {stake}.")

    return stake


def parse_stake(text: str) -> int:
    """
    Parse a stake typed by a user.

    Args:
        text: Raw input, surrounding whitespace allowed

    Returns:
        Validated stake

    Raises:
        ValueError: If the text is not a non-negative whole number
    """
    cleaned = text.strip()
    try:
        stake = int(cleaned)
    except ValueError:
        raise ValueError(f"Please type a number! Got {cleaned!r}.") from None
    return validate_stake(stake)


def validate_rng(rng: Any) -> Any:
    """
    Validate a random source.

    Any object exposing ``choice(sequence)`` is accepted, such as
    ``random.Random`` or a fixed-sequence stub.

    Raises:
        ValueError: If the object has no callable ``choice``
    """
    if not callable(getattr(rng, "choice", None)):
        raise ValueError(f"Random source must provide choice(), got {type(rng).__name__}.")
    return rng


def parse_player_names(text: str) -> tuple[str, ...]:
    """
    Split a block of text into player names, one per line.

    Blank lines and surrounding whitespace are dropped.

    Raises:
        ValueError: If no names remain or a name is repeated
    """
    names = [line.strip() for line in text.splitlines()]
    return validate_player_names([name for name in names if name])
