import random

import pytest

from board import BLOCKED, Cell, Player
from errors import InvalidPlacement, Rejection
from game import TOTAL_MOVES, Game, finalize, initial_state, place, winner


class TestPlace:

    def test_first_move_is_blue_one(self, fresh_state):
        place(fresh_state, (2, 2))
        assert fresh_state.board[(2, 2)] == Cell.owned(Player.BLUE, 1)
        assert fresh_state.move_count == 1
        assert fresh_state.next_value == {Player.BLUE: 2, Player.RED: 1}
        assert fresh_state.current == Player.RED

    def test_values_increase_per_player(self, fresh_state):
        for pos in [(1, 1), (1, 2), (1, 3), (1, 4)]:
            place(fresh_state, pos)
        b = fresh_state.board
        assert [b[(1, c)] for c in range(1, 5)] == [
            Cell.owned(Player.BLUE, 1),
            Cell.owned(Player.RED, 1),
            Cell.owned(Player.BLUE, 2),
            Cell.owned(Player.RED, 2),
        ]

    @pytest.mark.parametrize("pos, reason", [
        ((0, 0), Rejection.OCCUPIED),
        ((5, 1), Rejection.OUT_OF_BOUNDS),
        ((-1, 1), Rejection.OUT_OF_BOUNDS),
    ])
    def test_rejections_leave_state_untouched(self, fresh_state, pos, reason):
        before = fresh_state.clone()
        with pytest.raises(InvalidPlacement) as exc:
            place(fresh_state, pos)
        assert exc.value.reason is reason
        assert fresh_state == before

    def test_cannot_place_on_owned_cell(self, fresh_state):
        place(fresh_state, (3, 3))
        before = fresh_state.clone()
        with pytest.raises(InvalidPlacement) as exc:
            place(fresh_state, (3, 3))
        assert exc.value.reason is Rejection.OCCUPIED
        assert fresh_state == before
        assert fresh_state.board[(0, 0)] == BLOCKED

    def test_no_pieces_left(self, fresh_state):
        fresh_state.next_value[Player.BLUE] = 13
        with pytest.raises(InvalidPlacement) as exc:
            place(fresh_state, (1, 1))
        assert exc.value.reason is Rejection.NO_PIECES_LEFT
        assert fresh_state.move_count == 0

    def test_move_count_and_game_over(self, fresh_state, checkerboard_moves):
        for i, pos in enumerate(checkerboard_moves, start=1):
            assert not fresh_state.game_over
            place(fresh_state, pos)
            assert fresh_state.move_count == i
            assert sum(v - 1 for v in fresh_state.next_value.values()) == i
        assert fresh_state.move_count == TOTAL_MOVES
        assert fresh_state.game_over
        assert fresh_state.next_value == {Player.BLUE: 13, Player.RED: 13}

    def test_rejects_after_game_over(self, fresh_state, checkerboard_moves):
        for pos in checkerboard_moves:
            place(fresh_state, pos)
        with pytest.raises(InvalidPlacement) as exc:
            place(fresh_state, (0, 1))
        assert exc.value.reason is Rejection.GAME_OVER


class TestFinalize:

    def test_checkerboard_is_a_draw(self, fresh_state, checkerboard_moves):
        for pos in checkerboard_moves:
            place(fresh_state, pos)
        # every piece is isolated, so each side's best is its 12
        assert fresh_state.score == {Player.BLUE: 12, Player.RED: 12}
        assert fresh_state.highlight[Player.BLUE] == {(4, 3)}
        assert fresh_state.highlight[Player.RED] == {(4, 4)}
        assert winner(fresh_state) is None

    def test_connected_red_beats_split_blue(self, red_wins_moves):
        st = initial_state((4, 4))
        for pos in red_wins_moves:
            place(st, pos)
        assert st.game_over
        assert st.score[Player.BLUE] == 66
        assert st.score[Player.RED] == 78
        assert (4, 0) not in st.highlight[Player.BLUE]
        assert len(st.highlight[Player.BLUE]) == 11
        assert len(st.highlight[Player.RED]) == 12
        assert winner(st) == Player.RED

    def test_scores_stable_under_repeated_reads(self, fresh_state, checkerboard_moves):
        for pos in checkerboard_moves:
            place(fresh_state, pos)
        first = (dict(fresh_state.score), dict(fresh_state.highlight))
        finalize(fresh_state)
        assert (fresh_state.score, fresh_state.highlight) == first

    def test_winner_is_none_while_running(self, fresh_state):
        fresh_state.score[Player.BLUE] = 10
        assert winner(fresh_state) is None


class TestGameSession:

    def test_place_returns_false_on_reject(self, game):
        assert not game.place((0, 0))
        assert game.state.move_count == 0
        assert len(game.history) == 1

    def test_place_records_history(self, game):
        assert game.place((1, 1))
        assert game.place((1, 2))
        assert len(game.history) == 3

    def test_undo_restores_previous_state(self, game):
        game.place((1, 1))
        before = game.state.clone()
        game.place((2, 2))
        assert game.undo()
        assert game.state == before

    def test_undo_on_initial_state_is_noop(self, game):
        before = game.state.clone()
        assert not game.undo()
        assert game.state == before

    def test_undo_after_game_over(self, finished_game):
        assert finished_game.state.game_over
        assert finished_game.undo()
        st = finished_game.state
        assert not st.game_over
        assert st.move_count == TOTAL_MOVES - 1
        assert st.score == {Player.BLUE: 0, Player.RED: 0}
        assert st.highlight == {Player.BLUE: frozenset(), Player.RED: frozenset()}
        assert finished_game.place((4, 4))
        assert finished_game.state.game_over

    def test_reset_same_block(self, game):
        game.place((3, 3))
        game.reset_same_block()
        assert game.state == initial_state((0, 0))
        assert len(game.history) == 1

    def test_new_game_uses_rng(self):
        a = Game(random.Random(7))
        b = Game(random.Random(7))
        assert a.state.blocked == b.state.blocked
        a.new_game()
        b.new_game()
        assert a.state.blocked == b.state.blocked
        assert a.state.board[a.state.blocked] == BLOCKED
        assert len(a.history) == 1

    def test_labels_during_play(self, game):
        assert game.turn_label() == "Turn: 1 / 24"
        assert game.player_label() == "Current: Blue"
        assert game.next_piece_label() == "Next piece — Blue: 1 · Red: 1"
        game.place((1, 1))
        assert game.player_label() == "Current: Red"
        assert game.next_piece(Player.BLUE) == "2"

    def test_labels_after_game_over(self, finished_game):
        assert finished_game.turn_label() == "Turn: 24 / 24"
        assert finished_game.next_piece(Player.RED) == "—"
        assert finished_game.result_label() == "Draw"
        assert finished_game.winner() is None
