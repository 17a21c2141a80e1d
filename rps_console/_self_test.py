"""Lightweight self-test runner for environments without pytest."""
from __future__ import annotations
import random

from rps_console import game
from rps_console.game import Choice, Outcome
from rps_console.player import Player, PlayError


def run():
    print("Running lightweight self-tests for rps_console...")
    for c in game.CHOICES:
        assert game.outcome_against(c, c) is Outcome.DRAW
    assert game.outcome_against(Choice.ROCK, Choice.SCISSORS) is Outcome.WIN
    assert game.outcome_against(Choice.PAPER, Choice.ROCK) is Outcome.WIN
    assert game.outcome_against(Choice.SCISSORS, Choice.PAPER) is Outcome.WIN
    assert game.outcome_against(Choice.ROCK, Choice.PAPER) is Outcome.LOSE
    assert game.outcome_against(Choice.PAPER, Choice.SCISSORS) is Outcome.LOSE
    assert game.outcome_against(Choice.SCISSORS, Choice.ROCK) is Outcome.LOSE

    assert game.parse_choice("RoCk") is Choice.ROCK
    assert game.parse_choice("12341234scissorsacdkakd") is Choice.SCISSORS
    assert game.parse_choice("RockPaperScissors") is Choice.ROCK
    try:
        game.parse_choice("lizard")
        raise SystemExit("Expected ParseError for invalid choice but none raised")
    except game.ParseError:
        pass

    assert game.random_choice(random.Random(0)) in game.CHOICES
    assert Player(False).choice is not None
    try:
        Player(True).play(Player(False))
        raise SystemExit("Expected PlayError for unset choice but none raised")
    except PlayError:
        pass
    print("All self-tests passed.")


if __name__ == "__main__":
    run()
