"""Hand evaluation and winner determination."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Iterator, Protocol

from blackjack.cards import Card

BUST_LIMIT = 21


def score_cards(cards: Iterable[Card]) -> int:
    """
    Score a collection of cards.

    Non-ace cards are summed first. Each ace then counts 11 if that keeps
    the total, with one point reserved for every ace still to come, at or
    under 21; otherwise it counts 1.

    Reserving those points means {A, A, 10} scores 12, where a plain
    one-ace-at-a-time greedy count would reach 22.
    """
    total = 0
    aces = 0

    for card in cards:
        if card.is_ace:
            aces += 1
        else:
            total += card.value

    for remaining in range(aces - 1, -1, -1):
        if total + 11 + remaining <= BUST_LIMIT:
            total += 11
        else:
            total += 1

    return total


def _describe(cards: Iterable[Card]) -> str:
    return ", ".join(str(card) for card in cards)


@dataclass
class Hand:
    """The cards held by one party, in the order they were dealt."""

    cards: list[Card] = field(default_factory=list)

    def add_card(self, card: Card) -> None:
        """Add a card to the hand."""
        self.cards.append(card)

    def clear(self) -> None:
        """Remove all cards from the hand."""
        self.cards.clear()

    @property
    def score(self) -> int:
        """Best total for the current cards, recomputed on every access."""
        return score_cards(self.cards)

    @property
    def is_busted(self) -> bool:
        """Check if the hand has busted (score > 21)."""
        return self.score > BUST_LIMIT

    @property
    def is_soft(self) -> bool:
        """
        Check if the hand is soft (has an ace counted as 11).
        """
        if not any(card.is_ace for card in self.cards):
            return False
        hard_total = sum(1 if card.is_ace else card.value for card in self.cards)
        return self.score != hard_total

    def describe(self) -> str:
        """List the cards as 'rank of suit' pairs in dealing order."""
        return _describe(self.cards)

    def snapshot(self) -> "HandSnapshot":
        """Return an immutable copy of the current cards."""
        return HandSnapshot(tuple(self.cards))

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __str__(self) -> str:
        return f"{self.describe()} ({self.score})"

    def __repr__(self) -> str:
        return f"Hand({self.cards!r}, score={self.score})"


@dataclass(frozen=True)
class HandSnapshot:
    """A frozen copy of a hand taken when a round completes."""

    cards: tuple[Card, ...] = ()

    @property
    def score(self) -> int:
        return score_cards(self.cards)

    @property
    def is_busted(self) -> bool:
        return self.score > BUST_LIMIT

    def describe(self) -> str:
        return _describe(self.cards)

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)


class ScoredHand(Protocol):
    """Anything that can take part in winner determination."""

    @property
    def score(self) -> int: ...

    @property
    def is_busted(self) -> bool: ...


class Outcome(Enum):
    """Result of a completed round."""

    PLAYER_WINS = "player_wins"
    DEALER_WINS = "dealer_wins"
    TIE = "tie"

    def __str__(self) -> str:
        return {
            Outcome.PLAYER_WINS: "Player wins!",
            Outcome.DEALER_WINS: "Dealer wins!",
            Outcome.TIE: "It's a tie!",
        }[self]


def determine_winner(player_hand: ScoredHand, dealer_hand: ScoredHand) -> Outcome:
    """
    Compare final player and dealer hands.

    A busted party can never win. When both hands are busted, or the
    scores are equal, the round is a tie.
    """
    player_score = player_hand.score
    dealer_score = dealer_hand.score
    player_busted = player_hand.is_busted
    dealer_busted = dealer_hand.is_busted

    if not player_busted and (player_score > dealer_score or dealer_busted):
        return Outcome.PLAYER_WINS
    if not dealer_busted and (dealer_score > player_score or player_busted):
        return Outcome.DEALER_WINS
    return Outcome.TIE
