"""Pytest fixtures for blackjack tests."""

import pytest
from random import Random

from blackjack.cards import Card, Deck, Rank, Suit
from blackjack.hand import Hand
from blackjack.game import EventEmitter, GameSession
from blackjack.config import GameConfig


def cards_from(*codes: str) -> list[Card]:
    """Build cards from short codes like '10H' or 'AS'."""
    return [Card.from_string(code) for code in codes]


def hand_of(*codes: str) -> Hand:
    """Build a hand holding the given cards in order."""
    hand = Hand()
    for card in cards_from(*codes):
        hand.add_card(card)
    return hand


def stacked_deck(*codes: str, rng: Random | None = None) -> Deck:
    """Build a deck that deals the given cards in the order listed."""
    return Deck.from_cards(reversed(cards_from(*codes)), rng=rng)


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return Random(42)


@pytest.fixture
def deck(rng):
    """A shuffled deck."""
    d = Deck(rng=rng)
    d.shuffle()
    return d


@pytest.fixture
def empty_hand():
    """An empty hand."""
    return Hand()


@pytest.fixture
def soft_20_hand():
    """A soft 20 hand (A-9)."""
    hand = Hand()
    hand.add_card(Card(Rank.ACE, Suit.SPADES))
    hand.add_card(Card(Rank.NINE, Suit.HEARTS))
    return hand


@pytest.fixture
def bust_hand():
    """A busted hand (K-Q-5)."""
    return hand_of("KS", "QH", "5C")


@pytest.fixture
def events():
    """An event emitter that records everything."""
    return EventEmitter()


@pytest.fixture
def game_config():
    """Default rules, independent of the environment."""
    return GameConfig(dealer_stand_threshold=17, reset_deck_each_round=True, seed=None)


@pytest.fixture
def session(game_config, rng):
    """A new session with a seeded deck."""
    return GameSession(game_config=game_config, rng=rng)
