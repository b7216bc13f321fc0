"""Point values for found words."""


def score_word(word: str) -> int:
    """
    Points for a word of the given length.

    3 and 4 letter words score length - 2, 5 letter words score 4 and
    longer words score their length. Anything shorter than 3 scores nothing.
    """
    length = len(word)
    if length < 3:
        return 0
    if length < 5:
        return length - 2
    if length == 5:
        return 4
    return length
