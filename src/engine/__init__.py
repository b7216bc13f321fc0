"""Word validation and board solving engine."""

from .errors import WordGridError, LoadError, PreconditionViolation
from .dictionary import Dictionary, MIN_WORD_LENGTH, MAX_WORD_LENGTH
from .board import (
    Board,
    Position,
    SENTINEL,
    BLANK,
    LETTER_FREQUENCIES,
    validate_frequency_table,
)
from .search import exists, find_path, find_any_path
from .solver import all_words, solve, group_by_length

__all__ = [
    # Errors
    "WordGridError",
    "LoadError",
    "PreconditionViolation",
    # Dictionary
    "Dictionary",
    "MIN_WORD_LENGTH",
    "MAX_WORD_LENGTH",
    # Board
    "Board",
    "Position",
    "SENTINEL",
    "BLANK",
    "LETTER_FREQUENCIES",
    "validate_frequency_table",
    # Path search
    "exists",
    "find_path",
    "find_any_path",
    # Solver
    "all_words",
    "solve",
    "group_by_length",
]
