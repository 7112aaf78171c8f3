"""Custom exception hierarchy for word search generation."""


class WordSearchError(Exception):
    """Base exception for generator failures."""


class InputValidationError(WordSearchError):
    """Raised when dimensions or words are rejected before generation."""


class GridSizeError(WordSearchError):
    """Raised when a grid is too small for the requested operation."""


class WordSourceError(WordSearchError):
    """Raised when a word source cannot supply any words."""


class ValidationError(WordSearchError):
    """Raised when the puzzle integrity checks fail."""
