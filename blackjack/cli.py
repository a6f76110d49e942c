"""Console front-end: menu, prompts and rendering of game events."""

from __future__ import annotations

import argparse
import sys
from random import Random
from typing import Callable, Sequence

from blackjack import __version__
from blackjack.config import config
from blackjack.errors import BlackjackError, EmptyDeckError, InvalidActionError
from blackjack.game.events import EventType, GameEvent
from blackjack.game.session import GameSession
from blackjack.game.state import PlayerAction, parse_action, parse_replay
from blackjack.logging_utils import get_logger, setup_logging

logger = get_logger(__name__)

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]

MENU = (
    "Menu:\n"
    "1. Start New Game\n"
    "2. View Match History\n"
    "Press any other keys if you want to exit"
)


class ConsoleIO:
    """Reads player choices and prints what the game reports."""

    def __init__(self, input_fn: InputFn | None = None, output: OutputFn | None = None) -> None:
        self._input = input_fn or input
        self._output = output or print

    def choose_action(self) -> PlayerAction:
        while True:
            try:
                return parse_action(self._input("Hit or Stand? (h/s): "))
            except InvalidActionError:
                self._output("Invalid choice. Please enter 'h' or 's'.")

    def play_again(self) -> bool:
        return parse_replay(self._input("Do you want to play again? (y/n): "))

    def choose_menu(self) -> str:
        self._output(MENU)
        return self._input("Enter your choice: ").strip()

    def say(self, text: str) -> None:
        self._output(text)

    def render(self, event: GameEvent) -> None:
        """Print a game event, ignoring the ones players don't need to see."""
        data = event.data
        kind = event.event_type
        if kind == EventType.ROUND_STARTED:
            self._output(f"Player's Hand: {data['player']} ({data['player_score']})")
            self._output(f"Dealer's Hand: {data['dealer']} ({data['dealer_score']})")
        elif kind == EventType.PLAYER_HIT:
            self._output(f"Player's Hand: {data['hand']} ({data['hand_value']})")
        elif kind == EventType.PLAYER_BUSTS:
            self._output("Player busted! Dealer wins.")
        elif kind == EventType.DEALER_REVEALS:
            self._output(f"Dealer's Hand: {data['hand']} ({data['hand_value']})")
        elif kind == EventType.DEALER_HITS:
            self._output(f"Dealer hits. Dealer's Hand: {data['hand']} ({data['hand_value']})")
        elif kind == EventType.DEALER_BUSTS:
            self._output("Dealer busted! Player wins.")
        elif kind == EventType.ROUND_ENDED:
            self._output(str(data["outcome"]))

    def show_history(self, session: GameSession) -> None:
        self._output("Match History:")
        for number, outcome in session.get_history_summary():
            self._output(f"Match {number}: {outcome}")


def run_menu(session: GameSession, io: ConsoleIO) -> None:
    """Show the main menu until the player picks something other than 1 or 2."""
    session.subscribe(io.render)
    while True:
        choice = io.choose_menu()
        if choice == "1":
            try:
                session.play(io)
            except EmptyDeckError:
                io.say("The deck ran out of cards. This round was abandoned.")
        elif choice == "2":
            io.show_history(session)
        else:
            io.say("Thank you for playing Blackjack.")
            return


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="blackjack", description="Play blackjack against the dealer")
    parser.add_argument("--seed", type=int, default=config.game.seed, help="Seed for reproducible shuffles")
    parser.add_argument("--log-level", default=config.logging.level, help="DEBUG, INFO, WARNING or ERROR")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    rng = Random(args.seed) if args.seed is not None else None
    session = GameSession(rng=rng)
    io = ConsoleIO()
    try:
        run_menu(session, io)
    except (EOFError, KeyboardInterrupt):
        print()
        return 0
    except BlackjackError:
        logger.exception("game aborted")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
