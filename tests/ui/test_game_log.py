"""Tests for dreidel/ui/components/game_log.py — grouping the log into turns."""

from dreidel.engine import Announcement, Game, Outcome, Player, RecordingAnnouncer
from dreidel.ui.components.game_log import group_by_turn


class TestGroupByTurn:
    def test_empty(self):
        assert group_by_turn([]) == []

    def test_turn_ends_with_spin(self):
        announcer = RecordingAnnouncer()
        player = Player("A", 2)
        announcer.announce_ante(player, 1)
        announcer.announce_ante(Player("B", 2), 2)
        announcer.announce_turn(Outcome.NUN, player, 2)
        announcer.announce_ante(player, 3)
        announcer.announce_turn(Outcome.GIMEL, player, 0)

        turns = group_by_turn(announcer.records)
        assert [len(turn) for turn in turns] == [3, 2]
        assert all(turn[-1].kind is Announcement.TURN for turn in turns)

    def test_game_end_is_its_own_group(self):
        announcer = RecordingAnnouncer()
        Game([Player("A", 3), Player("B", 0)], announcer=announcer).play_game()
        turns = group_by_turn(announcer.records)
        assert len(turns) == 1
        assert turns[0][0].kind is Announcement.WINNER
