"""Game session: repeated rounds plus the match history."""

from random import Random
from typing import Callable, Protocol

from blackjack.cards import Deck
from blackjack.config import GameConfig, config
from blackjack.errors import EmptyDeckError, InvalidActionError
from blackjack.hand import Hand, Outcome
from blackjack.history import HistoryEntry, MatchHistory
from blackjack.game.events import EventEmitter, EventHandler, EventType
from blackjack.game.round import Round
from blackjack.game.state import PlayerAction, RoundState
from blackjack.logging_utils import get_logger

logger = get_logger(__name__)


class PlayerIO(Protocol):
    """Input side of the console collaborator."""

    def choose_action(self) -> PlayerAction:
        """Return a validated hit/stand choice."""
        ...

    def play_again(self) -> bool:
        """Return True to play another round."""
        ...


class GameSession:
    """
    Owns all game state for the lifetime of the process.

    The session reuses one deck and one hand per party, builds a new
    Round for each play and is the only writer of the match history.
    """

    def __init__(
        self,
        game_config: GameConfig | None = None,
        rng: Random | None = None,
        deck: Deck | None = None,
    ) -> None:
        """
        Initialize a session.

        Args:
            game_config: Rule settings (uses the global config if not provided)
            rng: Random number generator for reproducible games
            deck: Deck to play with (a fresh one if not provided)
        """
        self.config = game_config or config.game
        if rng is None and self.config.seed is not None:
            rng = Random(self.config.seed)
        self.deck = deck if deck is not None else Deck(rng=rng)
        self.player_hand = Hand()
        self.dealer_hand = Hand()
        self.history = MatchHistory()
        self.events = EventEmitter()
        self.round: Round | None = None

    def subscribe(
        self,
        handler: EventHandler,
        event_type: EventType | None = None,
    ) -> None:
        """Subscribe to game events."""
        self.events.subscribe(handler, event_type)

    def start_round(self) -> Round:
        """Reset hands, shuffle and deal a new round."""
        if self.round is not None and self.round.state == RoundState.PLAYER_TURN:
            raise InvalidActionError("Current round is still in progress")

        self.events.clear_history()
        self.player_hand.clear()
        self.dealer_hand.clear()

        if self.config.reset_deck_each_round:
            self.deck.reset()
        self.deck.shuffle()
        self.events.emit_new(EventType.DECK_SHUFFLED, cards_remaining=self.deck.cards_remaining)

        self.round = Round(
            self.deck,
            self.player_hand,
            self.dealer_hand,
            events=self.events,
            dealer_stand_threshold=self.config.dealer_stand_threshold,
        )
        self._run_or_abandon(self.round.start)
        return self.round

    def submit_player_action(self, action: PlayerAction) -> bool:
        """Forward a validated action to the current round."""
        if self.round is None:
            raise InvalidActionError("No round in progress")
        return self._run_or_abandon(lambda: self.round.submit(action))

    def _run_or_abandon(self, step: Callable[[], bool]) -> bool:
        """Run a round step; a round that runs out of cards is dropped."""
        try:
            return step()
        except EmptyDeckError:
            logger.error("deck exhausted, abandoning round")
            self.round = None
            raise

    def get_round_outcome(self) -> Outcome | None:
        """Outcome of the current round, or None while it is being played."""
        if self.round is None:
            return None
        return self.round.outcome

    def record_and_reset(self) -> HistoryEntry:
        """Record the resolved round in the history and clear the hands."""
        if self.round is None or self.round.state != RoundState.RESOLVED:
            raise InvalidActionError("Only a resolved round can be recorded")

        entry = self.history.record(self.player_hand, self.dealer_hand)
        self.events.emit_new(
            EventType.ROUND_RECORDED,
            match_count=len(self.history),
            outcome=entry.outcome,
        )
        logger.info("recorded match %d: %s", len(self.history), entry.outcome.name)

        self.player_hand.clear()
        self.dealer_hand.clear()
        self.round = None
        return entry

    def get_history_summary(self) -> list[tuple[int, Outcome]]:
        """Return (match_number, outcome) pairs, most recent first."""
        return self.history.summary()

    def play(self, io: PlayerIO) -> None:
        """Play rounds until the collaborator declines a replay."""
        while True:
            current = self.start_round()
            while current.state == RoundState.PLAYER_TURN:
                self.submit_player_action(io.choose_action())
            self.record_and_reset()
            if not io.play_again():
                break
