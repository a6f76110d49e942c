"""Round state machine and session management."""

from blackjack.game.events import EventEmitter, EventType, GameEvent
from blackjack.game.state import PlayerAction, RoundState, parse_action, parse_replay
from blackjack.game.round import Round
from blackjack.game.session import GameSession, PlayerIO

__all__ = [
    "EventEmitter",
    "EventType",
    "GameEvent",
    "PlayerAction",
    "RoundState",
    "parse_action",
    "parse_replay",
    "Round",
    "GameSession",
    "PlayerIO",
]
