"""Console text for the word grid game."""

from .instructions import INSTRUCTIONS, get_instructions
from .feedback import format_submission, format_word_list, format_status, format_solution

__all__ = [
    "INSTRUCTIONS",
    "get_instructions",
    "format_submission",
    "format_word_list",
    "format_status",
    "format_solution",
]
