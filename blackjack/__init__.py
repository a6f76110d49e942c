"""Console blackjack against an automated dealer."""

from blackjack.cards import Card, Deck, Rank, Suit
from blackjack.errors import BlackjackError, EmptyDeckError, InvalidActionError
from blackjack.hand import Hand, HandSnapshot, Outcome, determine_winner
from blackjack.history import HistoryEntry, MatchHistory

__version__ = "1.0.0"

__all__ = [
    "Card",
    "Deck",
    "Rank",
    "Suit",
    "BlackjackError",
    "EmptyDeckError",
    "InvalidActionError",
    "Hand",
    "HandSnapshot",
    "Outcome",
    "determine_winner",
    "HistoryEntry",
    "MatchHistory",
]
