import pytest

from src.engine import Board, Dictionary

# Reference board:
#   a c r l
#   n e a p
#   p u s t
#   e o r y
BOARD_LETTERS = list("acrl" "neap" "pust" "eory")

WORDS = ["at", "cat", "cattle", "dog", "ease", "pest", "pus", "rust", "sap", "sour", "yes"]


@pytest.fixture
def board() -> Board:
    return Board.from_letters(BOARD_LETTERS)


@pytest.fixture
def dictionary() -> Dictionary:
    return Dictionary.from_words(WORDS)


@pytest.fixture
def word_file(tmp_path):
    path = tmp_path / "dictionary.txt"
    path.write_text("\n".join(WORDS) + "\n")
    return path
