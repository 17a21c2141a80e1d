"""Command-line interface for the Rock-Paper-Scissors game."""
from __future__ import annotations
import argparse
import logging
from typing import Callable, Optional

from . import config
from .game import Outcome
from .player import Player

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="rps", description="Play one round of Rock-Paper-Scissors against the computer.")
    return p.parse_args(argv)


def interactive_round(read: Callable[[], str], write: Callable[[str], None]) -> Outcome:
    write("Let's play rock, paper, scissors")
    player = Player.human()
    computer = Player.computer()

    player.request_choice(read, write)

    write(f"Your choice: {player.choice}")
    write(f"Computer's choice: {computer.choice}")

    outcome = player.play(computer)
    logger.debug("Round finished: %s", outcome)
    write(f"{outcome}!")
    return outcome


def main(argv: Optional[list[str]] = None) -> int:
    parse_args(argv)
    logging.basicConfig(level=config.log_level(), format="%(levelname)s: %(message)s")
    try:
        interactive_round(input, print)
    except EOFError:
        print("\nNo choice made.")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
