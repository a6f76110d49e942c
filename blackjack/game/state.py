"""Round state and player action enumerations."""

from enum import Enum, auto

from blackjack.errors import InvalidActionError


class RoundState(Enum):
    """
    Round state machine states.

    Flow: DEALING → PLAYER_TURN → DEALER_TURN → RESOLVED
    A player bust goes straight from PLAYER_TURN to RESOLVED.
    """

    # Initial cards being dealt
    DEALING = auto()

    # Player hits or stands
    PLAYER_TURN = auto()

    # Dealer draws to the stand threshold
    DEALER_TURN = auto()

    # Outcome fixed, terminal
    RESOLVED = auto()

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()


class PlayerAction(Enum):
    """Actions available to the player during their turn."""

    HIT = "h"
    STAND = "s"

    def __str__(self) -> str:
        return self.name.title()


def parse_action(text: str) -> PlayerAction:
    """
    Parse console input into a player action.

    Raises:
        InvalidActionError: if the input is neither 'h' nor 's'
    """
    choice = text.strip()
    for action in PlayerAction:
        if action.value == choice:
            return action
    raise InvalidActionError(f"Invalid choice {choice!r}. Please enter 'h' or 's'.")


def parse_replay(text: str) -> bool:
    """Only an explicit 'y' asks for another round."""
    return text.strip() == "y"
