"""
Letter grid with a sentinel border.

Interior cells are addressed with zero-based (row, col) coordinates. The grid
is stored with a one-cell border of SENTINEL on every side, so neighbour
lookups never need explicit bounds checks: a neighbour on the border simply
never matches a letter.
"""

import logging
import random
import string
from typing import Callable, List, NamedTuple, Optional, Sequence

from pydantic import BaseModel, Field

from .errors import PreconditionViolation

logger = logging.getLogger(__name__)

SENTINEL = "*"  # Border cells
BLANK = " "  # Interior cell in use by an ongoing path search

ALPHABET = string.ascii_lowercase

# Cumulative letter frequencies observed in the reference dictionary ('a'..'z').
LETTER_FREQUENCIES: List[float] = [
    0.07680,  # a
    0.09485,  # b
    0.13527,  # c
    0.16824,  # d
    0.28129,  # e
    0.29299,  # f
    0.32033,  # g
    0.34499,  # h
    0.43625,  # i
    0.43783,  # j
    0.44627,  # k
    0.49865,  # l
    0.52743,  # m
    0.59567,  # n
    0.66222,  # o
    0.69246,  # p
    0.69246,  # q
    0.76380,  # r
    0.86042,  # s
    0.92666,  # t
    0.95963,  # u
    0.96892,  # v
    0.97616,  # w
    0.97892,  # x
    0.99510,  # y
    1.00000,  # z
]

# The 8 compass directions as (row, col) deltas
NEIGHBOR_OFFSETS = [
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
]


class Position(NamedTuple):
    """A cell coordinate on the board."""
    row: int
    col: int


def validate_frequency_table(table: Sequence[float]) -> None:
    """
    Check a cumulative frequency table.

    Raises:
        PreconditionViolation: If the table does not have one non-decreasing
            entry per letter in [0, 1] ending at 1.0
    """
    if len(table) != len(ALPHABET):
        raise PreconditionViolation(
            f"Frequency table needs {len(ALPHABET)} entries, got {len(table)}"
        )
    previous = 0.0
    for letter, threshold in zip(ALPHABET, table):
        if not 0.0 <= threshold <= 1.0:
            raise PreconditionViolation(f"Threshold for '{letter}' out of range: {threshold}")
        if threshold < previous:
            raise PreconditionViolation(f"Threshold for '{letter}' decreases: {threshold} < {previous}")
        previous = threshold
    if table[-1] != 1.0:
        raise PreconditionViolation(f"Frequency table must end at 1.0, got {table[-1]}")


def pick_letter(value: float, table: Sequence[float] = LETTER_FREQUENCIES) -> str:
    """Return the first letter whose cumulative threshold exceeds value."""
    for letter, threshold in zip(ALPHABET, table):
        if value < threshold:
            return letter
    raise PreconditionViolation(f"No letter for random value {value}")


class Board(BaseModel):
    """
    A rows x cols grid of lowercase letters surrounded by sentinel cells.

    Attributes:
        rows: Number of interior rows
        cols: Number of interior columns
    """

    rows: int = Field(default=4, ge=1)
    cols: int = Field(default=4, ge=1)
    _cells: List[List[str]] = None

    def model_post_init(self, __context) -> None:
        """Build the bordered buffer with a blank interior."""
        width = self.cols + 2
        self._cells = [[SENTINEL] * width for _ in range(self.rows + 2)]
        for row in range(self.rows):
            for col in range(self.cols):
                self._cells[row + 1][col + 1] = BLANK

    @classmethod
    def from_letters(cls, letters: Sequence[str], rows: int = 4, cols: int = 4) -> "Board":
        """Create a board filled row by row from the given letters."""
        board = cls(rows=rows, cols=cols)
        board.fill_from_input(letters)
        return board

    @classmethod
    def create_random(
        cls,
        rows: int = 4,
        cols: int = 4,
        frequencies: Sequence[float] = LETTER_FREQUENCIES,
        source: Optional[Callable[[], float]] = None,
    ) -> "Board":
        """Create a board filled with letters drawn from a frequency table."""
        board = cls(rows=rows, cols=cols)
        board.fill_random(frequencies, source)
        return board

    @property
    def cell_count(self) -> int:
        """Number of interior cells."""
        return self.rows * self.cols

    def fill_random(
        self,
        frequencies: Sequence[float] = LETTER_FREQUENCIES,
        source: Optional[Callable[[], float]] = None,
    ) -> None:
        """
        Fill every interior cell with a letter sampled from a cumulative table.

        Args:
            frequencies: 26 cumulative thresholds, one per letter
            source: Uniform random source in [0, 1) (defaults to random.random)
        """
        validate_frequency_table(frequencies)
        source = source or random.random
        for row, col in self.positions():
            self._cells[row + 1][col + 1] = pick_letter(source(), frequencies)
        logger.debug("Board filled randomly: %s", "".join(self.letters()))

    def fill_from_input(self, letters: Sequence[str]) -> None:
        """
        Fill interior cells in row-major order.

        Raises:
            PreconditionViolation: If the letter count does not match the board
                or a token is not a single letter
        """
        if len(letters) != self.cell_count:
            raise PreconditionViolation(
                f"Expected {self.cell_count} letters, got {len(letters)}"
            )
        for letter in letters:
            if len(letter) != 1 or not letter.isalpha():
                raise PreconditionViolation(f"Invalid board letter: '{letter}'")

        for (row, col), letter in zip(self.positions(), letters):
            self._cells[row + 1][col + 1] = letter.lower()
        logger.debug("Board filled from input: %s", "".join(self.letters()))

    def positions(self) -> List[Position]:
        """All interior positions in row-major order."""
        return [Position(row, col) for row in range(self.rows) for col in range(self.cols)]

    def is_interior(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def cell_at(self, row: int, col: int) -> str:
        """
        Read a cell. Border cells (row or col of -1, rows, cols) return SENTINEL.

        Raises:
            PreconditionViolation: If the coordinate is outside the bordered grid
        """
        if not (-1 <= row <= self.rows and -1 <= col <= self.cols):
            raise PreconditionViolation(f"Cell ({row}, {col}) is outside the board")
        return self._cells[row + 1][col + 1]

    def set_cell(self, row: int, col: int, value: str) -> None:
        """
        Write an interior cell.

        Raises:
            PreconditionViolation: If the cell is on the border or outside the board,
                or the value is the border sentinel
        """
        if not self.is_interior(row, col):
            raise PreconditionViolation(f"Cell ({row}, {col}) is not an interior cell")
        if value == SENTINEL:
            raise PreconditionViolation("Interior cells cannot hold the border sentinel")
        self._cells[row + 1][col + 1] = value

    def neighbors(self, row: int, col: int) -> List[Position]:
        """The 8 surrounding coordinates, border cells included."""
        return [Position(row + dr, col + dc) for dr, dc in NEIGHBOR_OFFSETS]

    def letters(self) -> List[str]:
        """Interior cell contents in row-major order."""
        return [self._cells[row + 1][col + 1] for row, col in self.positions()]

    def starts_for(self, letter: str) -> List[Position]:
        """Interior positions holding the given letter."""
        return [pos for pos in self.positions() if self.cell_at(*pos) == letter]

    def render(self) -> str:
        """Render interior letters, one board row per line."""
        lines = [
            " ".join(self._cells[row + 1][col + 1] for col in range(self.cols))
            for row in range(self.rows)
        ]
        return "\n".join(lines)
