"""Exceptions raised by the daily puzzle pipeline."""


class CrosswordError(Exception):
    """Base class; callers can catch this for any generator-side failure."""


class WordBankLoadError(CrosswordError):
    """Raised when a word bank file or URL cannot be read."""


class PlacementError(CrosswordError):
    """Raised when a word is written over a conflicting letter or off the grid."""


class ValidationError(CrosswordError):
    """Raised when a finished puzzle breaks one of its structural rules."""
