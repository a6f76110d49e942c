"""A single round of blackjack driven by a state machine."""

from transitions import Machine

from blackjack.cards import Card, Deck
from blackjack.hand import Hand, Outcome, determine_winner
from blackjack.game.events import EventEmitter, EventType
from blackjack.game.state import PlayerAction, RoundState
from blackjack.logging_utils import get_logger

logger = get_logger(__name__)

DEFAULT_DEALER_STAND_THRESHOLD = 17


class Round:
    """
    One play of player-then-dealer turns.

    The round never reads input or prints. Callers feed it validated
    actions and observe progress through events and return values.
    A round is used once; start a new one for the next play.
    """

    # State machine states
    STATES = [s.name.lower() for s in RoundState]

    # State machine transitions
    TRANSITIONS = [
        {"trigger": "cards_dealt", "source": "dealing", "dest": "player_turn"},
        {"trigger": "player_drew", "source": "player_turn", "dest": "player_turn"},
        {"trigger": "player_busted", "source": "player_turn", "dest": "resolved"},
        {"trigger": "player_done", "source": "player_turn", "dest": "dealer_turn"},
        {"trigger": "dealer_done", "source": "dealer_turn", "dest": "resolved"},
    ]

    def __init__(
        self,
        deck: Deck,
        player_hand: Hand | None = None,
        dealer_hand: Hand | None = None,
        events: EventEmitter | None = None,
        dealer_stand_threshold: int = DEFAULT_DEALER_STAND_THRESHOLD,
    ) -> None:
        """
        Initialize a round in the dealing state.

        Args:
            deck: Deck to draw from (shuffled by the caller)
            player_hand: Player's hand, normally empty
            dealer_hand: Dealer's hand, normally empty
            events: Emitter to report progress to
            dealer_stand_threshold: Dealer draws while below this score
        """
        self.deck = deck
        self.player_hand = player_hand if player_hand is not None else Hand()
        self.dealer_hand = dealer_hand if dealer_hand is not None else Hand()
        self.events = events or EventEmitter()
        self.dealer_stand_threshold = dealer_stand_threshold

        self.machine = Machine(
            model=self,
            states=self.STATES,
            transitions=self.TRANSITIONS,
            initial="dealing",
            auto_transitions=False,
            model_attribute="_machine_state",
        )

    @property
    def state(self) -> RoundState:
        """Get current round state as enum."""
        return RoundState[self._machine_state.upper()]  # type: ignore

    @property
    def outcome(self) -> Outcome | None:
        """The round result, available once the round is resolved."""
        if self.state != RoundState.RESOLVED:
            return None
        return determine_winner(self.player_hand, self.dealer_hand)

    def start(self) -> bool:
        """Deal two cards each: player, dealer, player, dealer."""
        if self.state != RoundState.DEALING:
            return self._reject("Round has already been dealt")

        self._deal_card_to_hand(self.player_hand)
        self._deal_card_to_hand(self.dealer_hand)
        self._deal_card_to_hand(self.player_hand)
        self._deal_card_to_hand(self.dealer_hand)

        self.events.emit_new(
            EventType.ROUND_STARTED,
            player=self.player_hand.describe(),
            player_score=self.player_hand.score,
            dealer=self.dealer_hand.describe(),
            dealer_score=self.dealer_hand.score,
        )
        self.cards_dealt()
        return True

    def submit(self, action: PlayerAction) -> bool:
        """Apply a validated player action."""
        if action is PlayerAction.HIT:
            return self.hit()
        return self.stand()

    def hit(self) -> bool:
        """Player hits (takes another card)."""
        if self.state != RoundState.PLAYER_TURN:
            return self._reject("Cannot hit in current state")

        card = self._deal_card_to_hand(self.player_hand)
        self.events.emit_new(
            EventType.PLAYER_HIT,
            card=str(card),
            hand=self.player_hand.describe(),
            hand_value=self.player_hand.score,
        )

        if self.player_hand.is_busted:
            self.events.emit_new(EventType.PLAYER_BUSTS, hand_value=self.player_hand.score)
            self.player_busted()
            self._announce_result()
            return True

        self.player_drew()
        return True

    def stand(self) -> bool:
        """Player stands; the dealer then plays out their hand."""
        if self.state != RoundState.PLAYER_TURN:
            return self._reject("Cannot stand in current state")

        self.events.emit_new(EventType.PLAYER_STAND, hand_value=self.player_hand.score)
        self.player_done()
        self._play_dealer()
        return True

    def _play_dealer(self) -> None:
        """Dealer draws until reaching the stand threshold."""
        self.events.emit_new(
            EventType.DEALER_REVEALS,
            hand=self.dealer_hand.describe(),
            hand_value=self.dealer_hand.score,
        )

        while self.dealer_hand.score < self.dealer_stand_threshold:
            card = self._deal_card_to_hand(self.dealer_hand)
            self.events.emit_new(
                EventType.DEALER_HITS,
                card=str(card),
                hand=self.dealer_hand.describe(),
                hand_value=self.dealer_hand.score,
            )

        if self.dealer_hand.is_busted:
            self.events.emit_new(EventType.DEALER_BUSTS, hand_value=self.dealer_hand.score)
        else:
            self.events.emit_new(EventType.DEALER_STANDS, hand_value=self.dealer_hand.score)

        self.dealer_done()
        self._announce_result()

    def _deal_card_to_hand(self, hand: Hand) -> Card:
        """Deal a card to a hand."""
        card = self.deck.draw()
        hand.add_card(card)
        self.events.emit_new(
            EventType.CARD_DEALT,
            card=str(card),
            hand="dealer" if hand is self.dealer_hand else "player",
            hand_value=hand.score,
        )
        return card

    def _announce_result(self) -> None:
        outcome = self.outcome
        logger.info(
            "round resolved: %s (player %d, dealer %d)",
            outcome.name,
            self.player_hand.score,
            self.dealer_hand.score,
        )
        self.events.emit_new(
            EventType.ROUND_ENDED,
            outcome=outcome,
            player_score=self.player_hand.score,
            dealer_score=self.dealer_hand.score,
        )

    def _reject(self, message: str) -> bool:
        self.events.emit_new(EventType.INVALID_ACTION, message=message, state=self.state.name)
        return False
