"""Core game logic for Rock-Paper-Scissors."""
from __future__ import annotations
import enum
import logging
import random
import re
from typing import Optional

logger = logging.getLogger(__name__)


class Outcome(enum.Enum):
    WIN = "Win"
    LOSE = "Lose"
    DRAW = "Draw"

    def __str__(self) -> str:
        return self.value


class Choice(enum.Enum):
    ROCK = "rock"
    PAPER = "paper"
    SCISSORS = "scissors"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, text: str) -> "Choice":
        return parse_choice(text)

    def outcome_against(self, other: "Choice") -> Outcome:
        return outcome_against(self, other)


CHOICES = tuple(Choice)

# Alternation order matters: leftmost match wins, then declaration order.
# ASCII-only folding keeps "ſ" and "İ" from matching keyword letters.
_KEYWORD_RE = re.compile("|".join(c.value for c in CHOICES), re.IGNORECASE | re.ASCII)

# (loser, winner)
_LOSING_PAIRS = {
    (Choice.ROCK, Choice.PAPER),
    (Choice.PAPER, Choice.SCISSORS),
    (Choice.SCISSORS, Choice.ROCK),
}


class ParseError(ValueError):
    """Raised when a line of input names none of the three choices."""

    def __init__(self, text: str):
        super().__init__(f"Invalid choice: {text}!")
        self.text = text


def random_choice(rng: Optional[random.Random] = None) -> Choice:
    """Return a uniformly random choice for the computer.

    Args:
      rng: optional ``random.Random`` instance; the module-level source is
        used when omitted.
    """
    source = rng if rng is not None else random
    return source.choice(CHOICES)


def parse_choice(text: str) -> Choice:
    """Read a choice out of free text.

    Surrounding whitespace is ignored and matching is case-insensitive. The
    first keyword found wins, so ``"RockPaperScissors"`` is rock. Extra
    characters around the keyword are tolerated and only logged.

    Raises:
      ParseError: if no keyword is found.
    """
    trimmed = text.strip()
    match = _KEYWORD_RE.search(trimmed)
    if match is None:
        raise ParseError(trimmed)

    keyword = match.group(0).lower()
    if len(keyword) != len(trimmed):
        logger.info("Reading %r as %r", trimmed, keyword)
    return Choice(keyword)


def outcome_against(player: Choice, opponent: Choice) -> Outcome:
    """Decide a single round from ``player``'s side."""
    if player == opponent:
        return Outcome.DRAW
    if (player, opponent) in _LOSING_PAIRS:
        return Outcome.LOSE
    return Outcome.WIN
