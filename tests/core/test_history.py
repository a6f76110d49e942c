"""Tests for the match history ledger."""

import pytest

from blackjack.hand import HandSnapshot, Outcome
from blackjack.history import HistoryEntry, MatchHistory

from conftest import hand_of


@pytest.fixture
def history():
    """A history with three rounds: player win, dealer win, tie."""
    h = MatchHistory()
    h.record(hand_of("KS", "QH"), hand_of("10C", "8D"))
    h.record(hand_of("KS", "QH", "5C"), hand_of("2C", "3D"))
    h.record(hand_of("9S", "8H"), hand_of("10D", "7C"))
    return h


class TestMatchHistory:
    """Tests for MatchHistory."""

    def test_empty_history(self):
        """A new history has no entries."""
        history = MatchHistory()
        assert len(history) == 0
        assert history.latest is None
        assert history.summary() == []

    def test_record_returns_entry(self):
        """Recording returns the snapshot that was stored."""
        history = MatchHistory()
        entry = history.record(hand_of("KS", "QH"), hand_of("10C", "8D"))
        assert isinstance(entry, HistoryEntry)
        assert isinstance(entry.player, HandSnapshot)
        assert history.latest is entry

    def test_most_recent_first(self, history):
        """Traversal yields rounds in reverse chronological order."""
        assert [entry.outcome for entry in history] == [
            Outcome.TIE,
            Outcome.DEALER_WINS,
            Outcome.PLAYER_WINS,
        ]

    def test_summary_numbers_from_most_recent(self, history):
        """Summary pairs match numbers with re-derived outcomes."""
        assert history.summary() == [
            (1, Outcome.TIE),
            (2, Outcome.DEALER_WINS),
            (3, Outcome.PLAYER_WINS),
        ]

    def test_for_each_entry_visits_all(self, history):
        """The visitor sees every entry with its derived outcome."""
        seen = []
        history.for_each_entry(lambda number, entry, outcome: seen.append((number, entry, outcome)))
        assert [number for number, _, _ in seen] == [1, 2, 3]
        for _, entry, outcome in seen:
            assert outcome == entry.outcome

    def test_entries_unaffected_by_later_hand_changes(self):
        """Recorded hands are snapshots, not references."""
        history = MatchHistory()
        player = hand_of("KS", "QH")
        dealer = hand_of("10C", "8D")
        history.record(player, dealer)

        player.clear()
        dealer.clear()

        entry = history.latest
        assert entry.player.score == 20
        assert entry.dealer.score == 18
        assert entry.outcome == Outcome.PLAYER_WINS

    def test_entries_are_immutable(self, history):
        """History entries cannot be modified."""
        with pytest.raises(AttributeError):
            history.latest.player = HandSnapshot()

    def test_traversal_does_not_mutate(self, history):
        """Walking the history twice gives the same result."""
        assert history.summary() == history.summary()
        assert len(history) == 3
