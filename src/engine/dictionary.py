"""
Dictionary store for word lookups.

Words are kept in the order the source supplies them. The source is expected
to be sorted already (one lowercase word per token); lookups use binary search
and are only correct for sorted input, so an unsorted source is reported in
the log but never re-sorted here.
"""

import logging
from bisect import bisect_left
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Optional, TextIO, Union

from pydantic import BaseModel, Field

from .errors import LoadError

logger = logging.getLogger(__name__)

MIN_WORD_LENGTH = 3
MAX_WORD_LENGTH = 16

WordSource = Union[str, Path, TextIO, Iterable[str]]


def _read_tokens(lines: Iterable[str]) -> Iterator[str]:
    """Yield whitespace separated tokens from an iterable of lines."""
    for line in lines:
        yield from line.split()


class Dictionary(BaseModel):
    """
    Sorted, immutable word list with exact-match lookup.

    Duplicate words in the source are kept as-is.

    Attributes:
        words: The retained words, in source order (assumed ascending)
        min_length: Shortest word length retained at load time
        max_length: Longest word length retained at load time
    """

    words: List[str] = Field(default_factory=list)
    min_length: int = Field(default=MIN_WORD_LENGTH, ge=1)
    max_length: int = Field(default=MAX_WORD_LENGTH, ge=1)
    _by_length: Dict[int, List[int]] = None

    def model_post_init(self, __context) -> None:
        """Index word positions by length for the solver."""
        by_length: Dict[int, List[int]] = {}
        for index, word in enumerate(self.words):
            by_length.setdefault(len(word), []).append(index)
        self._by_length = by_length

    @classmethod
    def from_words(
        cls,
        tokens: Iterable[str],
        min_length: int = MIN_WORD_LENGTH,
        max_length: int = MAX_WORD_LENGTH,
    ) -> "Dictionary":
        """
        Build a dictionary from word tokens, dropping any outside the length range.

        Args:
            tokens: Words in ascending order
            min_length: Minimum word length to keep
            max_length: Maximum word length to keep

        Returns:
            A new Dictionary
        """
        total = 0
        kept: List[str] = []
        for token in tokens:
            total += 1
            if min_length <= len(token) <= max_length:
                kept.append(token)

        logger.info("Dictionary total number of words is: %d", total)
        logger.info("Number of words of the right length is: %d", len(kept))

        dictionary = cls(words=kept, min_length=min_length, max_length=max_length)
        if not dictionary.is_sorted():
            logger.warning("Dictionary source is not sorted; lookups may miss words")
        return dictionary

    @classmethod
    def load(
        cls,
        source: WordSource,
        min_length: int = MIN_WORD_LENGTH,
        max_length: int = MAX_WORD_LENGTH,
    ) -> "Dictionary":
        """
        Load a dictionary from a file path or an open text source.

        Args:
            source: Path to a word list, or any iterable of text lines
            min_length: Minimum word length to keep
            max_length: Maximum word length to keep

        Returns:
            A new Dictionary

        Raises:
            LoadError: If the source file cannot be opened or read
        """
        if isinstance(source, (str, Path)):
            path = Path(source)
            try:
                with open(path, encoding="utf-8") as f:
                    return cls.from_words(_read_tokens(f), min_length, max_length)
            except (OSError, UnicodeDecodeError) as e:
                raise LoadError(f"Could not read dictionary '{path}': {e}") from e

        try:
            return cls.from_words(_read_tokens(source), min_length, max_length)
        except OSError as e:
            raise LoadError(f"Could not read dictionary source: {e}") from e

    def __len__(self) -> int:
        return len(self.words)

    def __getitem__(self, index: int) -> str:
        return self.words[index]

    def lookup(self, word: str) -> Optional[int]:
        """
        Binary search for an exact match.

        Returns:
            The index of the word, or None if it is not in the dictionary
        """
        index = bisect_left(self.words, word)
        if index < len(self.words) and self.words[index] == word:
            return index
        return None

    def is_sorted(self) -> bool:
        """Check that the word list is in ascending order."""
        return all(a <= b for a, b in zip(self.words, self.words[1:]))

    def words_of_length(self, length: int) -> Iterator[str]:
        """Iterate over the words of one length in dictionary order."""
        for index in self._by_length.get(length, []):
            yield self.words[index]
