"""Enumerate every dictionary word that can be formed on a board."""

import logging
from typing import Dict, Iterator, List, Optional

from .board import Board
from .dictionary import Dictionary
from .errors import PreconditionViolation
from .search import find_any_path

logger = logging.getLogger(__name__)


def all_words(
    dictionary: Dictionary,
    board: Board,
    min_length: Optional[int] = None,
    max_length: Optional[int] = None,
) -> Iterator[str]:
    """
    Lazily yield the dictionary words that can be traced on the board.

    Words are grouped by ascending length and kept in dictionary order
    within each length. A word listed twice in the dictionary is yielded twice.
    Each call starts a fresh scan; the board is left unchanged.

    Args:
        dictionary: Words to try
        board: Board to search
        min_length: Shortest word length to report (defaults to the dictionary's)
        max_length: Longest word length to report (defaults to the dictionary's)

    Raises:
        PreconditionViolation: If min_length is greater than max_length
    """
    if min_length is None:
        min_length = dictionary.min_length
    if max_length is None:
        max_length = dictionary.max_length
    if min_length > max_length:
        raise PreconditionViolation(
            f"Minimum length {min_length} is greater than maximum length {max_length}"
        )

    logger.debug("Solving board for words of length %d-%d", min_length, max_length)
    for length in range(min_length, max_length + 1):
        for word in dictionary.words_of_length(length):
            if find_any_path(word, board):
                yield word


def solve(
    dictionary: Dictionary,
    board: Board,
    min_length: Optional[int] = None,
    max_length: Optional[int] = None,
) -> List[str]:
    """Collect all_words() into a list."""
    words = list(all_words(dictionary, board, min_length, max_length))
    logger.info("Found %d words on the board", len(words))
    return words


def group_by_length(words: List[str]) -> Dict[int, List[str]]:
    """Group words by length, keeping their relative order."""
    groups: Dict[int, List[str]] = {}
    for word in words:
        groups.setdefault(len(word), []).append(word)
    return groups
