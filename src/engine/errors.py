"""Exception hierarchy for the word grid engine."""


class WordGridError(Exception):
    """Base exception for engine failures."""


class LoadError(WordGridError):
    """Raised when the dictionary source cannot be opened or read."""


class PreconditionViolation(WordGridError, ValueError):
    """Raised when a caller passes input the engine cannot work with."""
