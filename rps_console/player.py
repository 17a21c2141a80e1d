"""Players: one human reading from the console, one computer."""
from __future__ import annotations
import logging
import random
from typing import Callable, Optional

from .game import Choice, Outcome, ParseError, parse_choice, random_choice

logger = logging.getLogger(__name__)

PROMPT = "Make a choice:"


class PlayError(RuntimeError):
    """Raised when a round is resolved before both players have chosen."""


class Player:
    def __init__(self, is_human: bool, rng: Optional[random.Random] = None):
        self.is_human = is_human
        self.choice: Optional[Choice] = None
        if not is_human:
            self.choice = random_choice(rng)
            logger.debug("Computer picked %s", self.choice)

    @classmethod
    def human(cls) -> "Player":
        return cls(True)

    @classmethod
    def computer(cls, rng: Optional[random.Random] = None) -> "Player":
        return cls(False, rng)

    def __repr__(self) -> str:
        kind = "human" if self.is_human else "computer"
        return f"Player({kind}, choice={self.choice})"

    def request_choice(
        self,
        read: Callable[[], str] = input,
        write: Callable[[str], None] = print,
    ) -> Optional[Choice]:
        """Prompt until a line parses to a choice, then keep it.

        Computer players already have a choice and are left alone. There is
        no retry limit. ``EOFError`` from ``read`` is not handled here.
        """
        if not self.is_human:
            return self.choice

        while True:
            write(PROMPT)
            line = read()
            try:
                self.choice = parse_choice(line)
            except ParseError as exc:
                logger.debug("Rejected input %r", exc.text)
                write(str(exc))
                continue
            return self.choice

    def play(self, opponent: "Player") -> Outcome:
        if self.choice is None or opponent.choice is None:
            raise PlayError("Both players must have made a choice")
        return self.choice.outcome_against(opponent.choice)
