"""
This package contains all the pieces of the Go Fish card game simulator.
"""

from .models import Card, Suit, Value, compare_by_value
from .deck import Deck
from .player import Player
from .rounds import Outcome, RoundResult, play_round, render_round
from .game import GameController, GameState

__all__ = [
    "Card",
    "Suit",
    "Value",
    "compare_by_value",
    "Deck",
    "Player",
    "Outcome",
    "RoundResult",
    "play_round",
    "render_round",
    "GameController",
    "GameState",
]
