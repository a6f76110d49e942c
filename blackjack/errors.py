"""Exception types raised by the game core."""


class BlackjackError(Exception):
    """Base class for all game errors."""


class EmptyDeckError(BlackjackError, IndexError):
    """Raised when drawing from a deck with no cards left."""


class InvalidActionError(BlackjackError, ValueError):
    """Raised for malformed player input or an action the game cannot take now."""
