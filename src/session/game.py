import json
import logging
import random
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Sequence, Set

from pydantic import BaseModel, ConfigDict, Field

from ..engine.board import LETTER_FREQUENCIES, Board
from ..engine.dictionary import Dictionary
from ..engine.search import find_path
from ..engine.solver import solve
from .clock import GameClock
from .models import GameConfig, GameResult, Submission
from .scoring import score_word

logger = logging.getLogger(__name__)


class Game(BaseModel):
    """
    A single-player round against the clock.

    Owns the board, the dictionary, the set of words already credited and
    the running score. Each player action goes through one method call.

    Attributes:
        config: Game configuration
        dictionary: Words that count
        board: Current letter grid
        clock: Countdown for the round
        found: Dictionary indices of words already credited
        score: Points scored on the current board
        moves: Words submitted on the current board
        history: All submissions on the current board
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    config: GameConfig = Field(default_factory=GameConfig)
    dictionary: Dictionary = Field(default_factory=Dictionary)
    board: Board = Field(default_factory=Board)
    clock: GameClock = Field(default_factory=GameClock)
    found: Set[int] = Field(default_factory=set)
    score: int = 0
    moves: int = 0
    history: List[Submission] = Field(default_factory=list)
    end_reason: str = ""
    started_at: Optional[datetime] = None
    _rng: random.Random = None

    def model_post_init(self, __context) -> None:
        """Initialize the random generator after model creation."""
        self._rng = random.Random(self.config.seed)
        self.started_at = datetime.now()

    @classmethod
    def create(
        cls,
        config: Optional[GameConfig] = None,
        dictionary: Optional[Dictionary] = None,
        letters: Optional[Sequence[str]] = None,
        clock: Optional[GameClock] = None,
    ) -> "Game":
        """
        Factory method to create a game with a loaded dictionary and a fresh board.

        Args:
            config: Game configuration (defaults to GameConfig())
            dictionary: Preloaded dictionary; loaded from config.dictionary_path if omitted
            letters: Board letters in row-major order; random if omitted
            clock: Clock to use; a new one of config.seconds_to_play if omitted

        Returns:
            A new Game

        Raises:
            LoadError: If the dictionary file cannot be read
            PreconditionViolation: If letters has the wrong size or content
        """
        if config is None:
            config = GameConfig()
        if dictionary is None:
            dictionary = Dictionary.load(
                config.dictionary_path,
                min_length=config.min_word_length,
                max_length=config.max_word_length,
            )
        if clock is None:
            clock = GameClock(total_seconds=config.seconds_to_play)

        game = cls(
            config=config,
            dictionary=dictionary,
            board=Board(rows=config.rows, cols=config.cols),
            clock=clock,
        )
        if letters is None:
            game.board.fill_random(game.frequencies, game._rng.random)
        else:
            game.board.fill_from_input(letters)
        return game

    @property
    def frequencies(self) -> List[float]:
        return self.config.letter_frequencies or LETTER_FREQUENCIES

    def submit(self, word: str) -> Submission:
        """
        Check a word and credit it if it is new, in the dictionary and on the board.

        Args:
            word: The player's word (case-insensitive)

        Returns:
            Submission describing the outcome
        """
        word = word.strip().lower()
        self.moves += 1

        index = self.dictionary.lookup(word)
        path = []
        if len(word) < self.config.min_word_length:
            outcome = "TOO_SHORT"
        elif index is None:
            outcome = "NOT_IN_DICTIONARY"
        elif index in self.found:
            outcome = "ALREADY_FOUND"
        else:
            path = find_path(word, self.board)
            outcome = "ACCEPTED" if path is not None else "NOT_ON_BOARD"

        points = 0
        if outcome == "ACCEPTED":
            points = score_word(word)
            self.found.add(index)
            self.score += points

        submission = Submission(
            word=word,
            outcome=outcome,
            points=points,
            index=index,
            path=[tuple(pos) for pos in path or []],
            score=self.score,
            move=self.moves,
        )
        self.history.append(submission)
        logger.debug("Move %d: %s -> %s", self.moves, word, outcome)
        return submission

    def _reset_state(self) -> None:
        self.found = set()
        self.score = 0
        self.moves = 0
        self.history = []
        self.clock.restart()

    def reset_board(self, letters: Sequence[str]) -> None:
        """
        Replace the board with the given letters and start the round over.

        Raises:
            PreconditionViolation: If letters has the wrong size or content;
                the game is left unchanged
        """
        self.board.fill_from_input(letters)
        self._reset_state()
        logger.info("Board reset from input")

    def reset_random(self) -> None:
        """Replace the board with random letters and start the round over."""
        self.board.fill_random(self.frequencies, self._rng.random)
        self._reset_state()
        logger.info("Board reset randomly")

    def found_words(self) -> List[str]:
        """Words credited so far, by length then dictionary order."""
        return [self.dictionary[i] for i in sorted(self.found, key=lambda i: (len(self.dictionary[i]), i))]

    def solve(self, min_length: Optional[int] = None, max_length: Optional[int] = None) -> List[str]:
        """Every dictionary word on the board within the length range."""
        if min_length is None:
            min_length = self.config.min_word_length
        if max_length is None:
            max_length = self.config.max_word_length
        return solve(self.dictionary, self.board, min_length, max_length)

    def is_over(self) -> bool:
        return self.clock.expired()

    def get_state(self) -> dict:
        """
        Get the current game state as a dictionary.

        Returns:
            Dictionary containing game state
        """
        return {
            "board": self.board.render(),
            "score": self.score,
            "moves": self.moves,
            "words_found": len(self.found),
            "seconds_remaining": self.clock.remaining(),
            "timer_paused": self.clock.paused,
        }

    def get_result(self) -> GameResult:
        """Summarize the game so far."""
        ended_at = datetime.now()
        duration = (ended_at - self.started_at).total_seconds() if self.started_at else 0.0
        return GameResult(
            config=self.config,
            board=self.board.render(),
            letters=self.board.letters(),
            score=self.score,
            words_found=self.found_words(),
            submissions=self.history,
            end_reason=self.end_reason,
            started_at=self.started_at.isoformat() if self.started_at else "",
            ended_at=ended_at.isoformat(),
            duration_seconds=duration,
        )

    def save_result(self, path: str | Path) -> None:
        """
        Save the game result to a JSON file.

        Args:
            path: Path to save the result file
        """
        result = self.get_result()
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, 'w') as f:
            json.dump(result.model_dump(), f, indent=2, default=str)
