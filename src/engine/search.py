"""
Path search: can a word be traced through adjacent cells of a board?

A path visits each board cell at most once. While a search is in progress the
cells on the current path are overwritten with BLANK so they can never match
again; every cell is restored before the search returns, on success, failure,
or an exception.
"""

from contextlib import contextmanager
from typing import Iterator, List, Optional

from .board import BLANK, Board, Position


@contextmanager
def blanked(board: Board, position: Position) -> Iterator[None]:
    """Mark a cell as used for the duration of the block, then restore it."""
    row, col = position
    original = board.cell_at(row, col)
    board.set_cell(row, col, BLANK)
    try:
        yield
    finally:
        board.set_cell(row, col, original)


def _walk(word: str, board: Board, current: Position, matched: int, path: List[Position]) -> bool:
    """Extend a path ending at `current` that already spells word[:matched]."""
    if matched == len(word):
        return True

    target = word[matched]
    for neighbor in board.neighbors(*current):
        if board.cell_at(*neighbor) != target:
            continue
        with blanked(board, current):
            path.append(neighbor)
            found = _walk(word, board, neighbor, matched + 1, path)
        if found:
            return True
        path.pop()
    return False


def exists(word: str, board: Board, start: Position, matched: int = 1) -> bool:
    """
    Check whether word[matched:] can be traced starting next to `start`.

    The first `matched` letters are taken to be spelled by a path ending at
    `start`. The caller is responsible for blanking any earlier path cells.

    Args:
        word: The word to trace
        board: Board to search (restored before returning)
        start: Position of the last matched letter
        matched: Number of letters already matched

    Returns:
        True if the rest of the word can be traced
    """
    return _walk(word, board, start, matched, [])


def find_path(word: str, board: Board) -> Optional[List[Position]]:
    """
    Find one path of distinct adjacent cells that spells the word.

    Returns:
        The cell positions in word order, or None if no path exists
    """
    if not word or not word.isalpha():
        return None

    for start in board.starts_for(word[0]):
        path = [start]
        with blanked(board, start):
            found = _walk(word, board, start, 1, path)
        if found:
            return path
    return None


def find_any_path(word: str, board: Board) -> bool:
    """Check whether the word can be formed on the board."""
    return find_path(word, board) is not None
