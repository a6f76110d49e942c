"""Match history ledger, most recent round first."""

from collections import deque
from dataclasses import dataclass
from typing import Callable, Iterator

from blackjack.hand import Hand, HandSnapshot, Outcome, determine_winner


@dataclass(frozen=True)
class HistoryEntry:
    """Final hands of one completed round."""

    player: HandSnapshot
    dealer: HandSnapshot

    @property
    def outcome(self) -> Outcome:
        """Re-derive the round result from the recorded hands."""
        return determine_winner(self.player, self.dealer)


# Visitor signature: (match_number, entry, outcome)
HistoryVisitor = Callable[[int, HistoryEntry, Outcome], None]


class MatchHistory:
    """
    Append-only log of completed rounds.

    Entries are prepended so that iteration always yields the most recent
    round first. Nothing is ever evicted.
    """

    def __init__(self) -> None:
        self._entries: deque[HistoryEntry] = deque()

    def record(self, player_hand: Hand, dealer_hand: Hand) -> HistoryEntry:
        """Snapshot both hands and prepend them as a new entry."""
        entry = HistoryEntry(player=player_hand.snapshot(), dealer=dealer_hand.snapshot())
        self._entries.appendleft(entry)
        return entry

    def for_each_entry(self, visitor: HistoryVisitor) -> None:
        """
        Visit every entry, most recent first.

        Match numbers start at 1 for the most recent round.
        """
        for number, entry in enumerate(self._entries, start=1):
            visitor(number, entry, entry.outcome)

    def summary(self) -> list[tuple[int, Outcome]]:
        """Return (match_number, outcome) pairs, most recent first."""
        results: list[tuple[int, Outcome]] = []
        self.for_each_entry(lambda number, _entry, outcome: results.append((number, outcome)))
        return results

    @property
    def latest(self) -> HistoryEntry | None:
        """Return the most recently recorded entry."""
        return self._entries[0] if self._entries else None

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[HistoryEntry]:
        return iter(self._entries)
