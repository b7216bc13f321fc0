"""Game session layer for the word grid game."""

from .models import GameConfig, Submission, GameResult, Outcome
from .scoring import score_word
from .clock import GameClock
from .game import Game

__all__ = [
    "GameConfig",
    "Submission",
    "GameResult",
    "Outcome",
    "score_word",
    "GameClock",
    "Game",
]
