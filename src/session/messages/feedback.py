from typing import List, Optional

from ...engine.solver import group_by_length
from ..models import Submission


def format_submission(submission: Submission) -> str:
    """Describe the outcome of one submitted word."""
    word = submission.word
    if submission.outcome == "ACCEPTED":
        return f"Worth {submission.points} points."
    if submission.outcome == "ALREADY_FOUND":
        return "Sorry, that word was already previously found."
    if submission.outcome == "TOO_SHORT":
        return f"{word} is too short to count."
    if submission.outcome == "NOT_IN_DICTIONARY":
        return f"{word} was not found in the dictionary"
    return f"{word} cannot be formed on this board."


def format_word_list(words: List[str]) -> str:
    """Words separated by spaces, as shown after each move."""
    return " ".join(words)


def format_status(
    board: str,
    score: int,
    seconds_remaining: Optional[int] = None,
) -> str:
    """
    Build the status block shown before each prompt.

    Args:
        board: Rendered board
        score: Current score
        seconds_remaining: Time left, or None when the timer is off

    Returns:
        Formatted status text
    """
    lines = []
    if seconds_remaining is not None:
        lines.append(f"   {seconds_remaining} Seconds Remaining")
    lines.append(board)
    lines.append(f"     Score: {score}")
    return "\n".join(lines)


def format_solution(words: List[str]) -> str:
    """All solvable words, one line per word length."""
    if not words:
        return "No words can be formed on this board."

    lines = []
    for length, group in group_by_length(words).items():
        lines.append(f"{length} letters ({len(group)}): {' '.join(group)}")
    return "\n".join(lines)
