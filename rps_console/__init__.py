"""Rock-Paper-Scissors on the console, one round against the computer."""

from .game import Choice, Outcome, ParseError, outcome_against, parse_choice, random_choice
from .player import Player, PlayError

__all__ = [
    "Choice",
    "Outcome",
    "ParseError",
    "PlayError",
    "Player",
    "outcome_against",
    "parse_choice",
    "random_choice",
]
