"""
Pydantic models for the game session layer.

Configuration, per-word submission results and the end-of-game summary.
The main logic classes (Game, GameClock) live in their own files.
"""

from typing import List, Literal, Optional, Tuple

from pydantic import BaseModel, Field, field_validator, model_validator

from ..engine.board import validate_frequency_table
from ..engine.dictionary import MAX_WORD_LENGTH, MIN_WORD_LENGTH


Outcome = Literal[
    "ACCEPTED",
    "ALREADY_FOUND",
    "NOT_IN_DICTIONARY",
    "NOT_ON_BOARD",
    "TOO_SHORT",
]


class GameConfig(BaseModel):
    """Configuration for a game session."""
    dictionary_path: str = "dictionary.txt"
    min_word_length: int = Field(default=MIN_WORD_LENGTH, ge=1)
    max_word_length: int = Field(default=MAX_WORD_LENGTH, ge=1)
    seconds_to_play: int = Field(default=60, ge=1)
    rows: int = Field(default=4, ge=1)
    cols: int = Field(default=4, ge=1)
    seed: Optional[int] = None
    letter_frequencies: Optional[List[float]] = None

    @field_validator("letter_frequencies")
    @classmethod
    def check_frequencies(cls, value: Optional[List[float]]) -> Optional[List[float]]:
        if value is not None:
            validate_frequency_table(value)
        return value

    @model_validator(mode="after")
    def check_length_range(self) -> "GameConfig":
        if self.max_word_length < self.min_word_length:
            raise ValueError(
                f"max_word_length ({self.max_word_length}) is less than "
                f"min_word_length ({self.min_word_length})"
            )
        return self


class Submission(BaseModel):
    """Result of submitting one word."""
    word: str
    outcome: Outcome
    points: int = 0
    index: Optional[int] = None  # Dictionary position, when the word is in it
    path: List[Tuple[int, int]] = Field(default_factory=list)
    score: int = 0  # Total score after this submission
    move: int = 0

    @property
    def accepted(self) -> bool:
        return self.outcome == "ACCEPTED"


class GameResult(BaseModel):
    """Summary of a complete game."""
    config: GameConfig
    board: str = ""
    letters: List[str] = Field(default_factory=list)
    score: int = 0
    words_found: List[str] = Field(default_factory=list)
    submissions: List[Submission] = Field(default_factory=list)
    end_reason: str = ""
    started_at: str = ""
    ended_at: str = ""
    duration_seconds: float = 0.0
