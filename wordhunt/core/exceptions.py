"""Custom exception hierarchy for the word hunt engine.

Placement and selection never raise: unplaceable words and incoherent drags
are ordinary return values. These exceptions cover the outer surfaces only.
"""


class WordHuntError(Exception):
    """Base exception for word hunt failures."""


class WordListLoadError(WordHuntError):
    """Raised when a word list file cannot be read or has no usable column."""


class ConfigurationError(WordHuntError):
    """Raised when generator settings are out of range."""


class ValidationError(WordHuntError):
    """Raised when the puzzle integrity checks fail."""
