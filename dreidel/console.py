"""
Dreidel - Console Front End

Reads the players and the starting stake from the terminal, prints every
announcement, and provides the ``dreidel`` command.
"""

from __future__ import annotations

import argparse
import logging
import os
import random
import subprocess
import sys
from typing import Any, Sequence, TextIO

from dreidel.config import configure_logging, get_settings
from dreidel.engine import Game, GameConfig, Outcome, Player
from dreidel.engine.validators import parse_stake

logger = logging.getLogger(__name__)

SONG = (
    "Oh, dreidel, dreidel, dreidel\n"
    "I made you out of clay\n"
    "And when you're dry and ready\n"
    "Oh Dreidel we shall play"
)


class SetupError(ValueError):
    """Raised when the players or stake typed at the console are unusable."""


def clear_screen() -> None:
    """Clear the terminal using the platform's own command."""
    if os.name == "nt":
        subprocess.run("cls", shell=True, check=False)
    else:
        subprocess.run(["clear"], check=False)


class ConsoleIO:
    """Console setup and announcer.

    Args:
        stdin: Stream player names and the stake are read from
        stdout: Stream announcements are written to
        clear: Clear the screen before the game starts and before each turn
    """

    def __init__(
        self,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        clear: bool = False,
    ) -> None:
        self.stdin = sys.stdin if stdin is None else stdin
        self.stdout = sys.stdout if stdout is None else stdout
        self.clear = clear
        self._in_turn = False

    def _print(self, text: str = "") -> None:
        print(text, file=self.stdout)

    def read_names(self) -> list[str]:
        """Read one name per line until an empty line (or end of input)."""
        self._print(
            "Enter the name of each player separated by a new line;\n"
            "enter an empty line when you're done"
        )
        names: list[str] = []
        while True:
            name = self.stdin.readline().strip()
            if not name:
                return names
            names.append(name)

    def read_stake(self) -> int:
        """Read the starting stake from the next line."""
        self._print("Enter the starting stake (how much each player gets).")
        line = self.stdin.readline()
        try:
            return parse_stake(line)
        except ValueError as exc:
            raise SetupError(str(exc)) from exc

    def set_up_game(
        self,
        names: Sequence[str] | None = None,
        stake: int | None = None,
        rng: Any = None,
    ) -> Game:
        """Build a game, prompting for whatever was not supplied.

        Raises:
            SetupError: If no valid players or stake were given
        """
        if self.clear:
            clear_screen()
        self._print(f"{SONG}\n\n")

        if names is None:
            names = self.read_names()
        if stake is None:
            stake = self.read_stake()

        try:
            config = GameConfig(tuple(names), stake)
        except ValueError as exc:
            raise SetupError(str(exc)) from exc

        logger.debug("Seating %s with %d tokens each", ", ".join(config.player_names), stake)
        return Game.from_config(config, rng=rng, announcer=self)

    def _start_turn(self) -> None:
        """Open a new turn block, clearing the screen first if enabled."""
        if not self._in_turn:
            self._in_turn = True
            if self.clear:
                clear_screen()

    def announce_winner(self, name: str) -> None:
        self._print(f"{name} wins!")

    def announce_ante(self, player: Player, pot: int) -> None:
        self._start_turn()
        self._print(
            f"{player.name} antes. {player.name} now has {player.stake} "
            f"and the pot has {pot}."
        )

    def announce_no_qualified_player(self) -> None:
        self._print("There are no players with money. Game over.")

    def announce_turn(self, outcome: Outcome, player: Player, pot: int) -> None:
        self._start_turn()
        self._print(
            f"{player.name} rolled a {outcome}. {player.name} now has "
            f"{player.stake} and the pot has {pot}.\n"
        )
        self._in_turn = False


def build_parser() -> argparse.ArgumentParser:
    """Command-line options for ``dreidel``."""
    parser = argparse.ArgumentParser(
        prog="dreidel",
        description="Play a game of dreidel in the terminal.",
    )
    parser.add_argument(
        "--players", nargs="+", metavar="NAME",
        help="Player names in seating order (prompted for if omitted)",
    )
    parser.add_argument(
        "--stake", type=int,
        help="Starting stake for each player (prompted for if omitted)",
    )
    parser.add_argument("--seed", type=int, help="Seed for a reproducible game")
    parser.add_argument("--clear", action="store_true", help="Clear the screen before playing and before each turn")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for the ``dreidel`` command."""
    args = build_parser().parse_args(argv)
    settings = get_settings()
    configure_logging(settings.log_level, debug=args.verbose or settings.debug)

    seed = args.seed if args.seed is not None else settings.seed
    rng = random.Random(seed)
    io = ConsoleIO(clear=args.clear or settings.clear_screen)

    # With --players but no --stake, fall back to the configured default
    stake = args.stake
    if stake is None and args.players:
        stake = settings.default_starting_stake

    try:
        game = io.set_up_game(names=args.players, stake=stake, rng=rng)
    except SetupError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    result = game.play_game()
    logger.info("%s", result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
