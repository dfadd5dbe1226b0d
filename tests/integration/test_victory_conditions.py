"""
統合テスト: 勝利条件のテスト
ストア経由でゲーム終了判定とその条件を確認
"""

import pytest
from tak.engine import (
    Board, GameResult, GameStore, Player, Stone, StoneKind, WinCondition, get_initial_state,
)


W = Stone.of(Player.WHITE)
B = Stone.of(Player.BLACK)


def play(store, moves):
    for position, stone in moves:
        store.place_stone(position, stone)
    return store.state


class TestVictoryConditions:
    """勝利条件のテストクラス"""

    def test_road_win_by_placement(self, store):
        """左端の列を埋めた白が道で勝つことを確認"""
        state = play(store, [
            ((4, 4), B),  # 白の最初の手
            ((0, 0), W),  # 黒の最初の手
            ((0, 1), W),
            ((4, 3), B),
            ((0, 2), W),
            ((4, 2), B),
            ((0, 3), W),
            ((4, 1), B),
        ])
        assert state.winner is None, "道が完成する前に終了しています"

        state = store.place_stone((0, 4), W)

        assert state.is_game_over
        assert state.winner.player == GameResult.WHITE
        assert state.winner.condition == WinCondition.ROAD
        assert state.winner.territory.white == 5
        assert state.winner.territory.black == 4

    def test_road_win_by_stack_move(self, make_state):
        """スタック移動で道をつないでも勝つことを確認"""
        board = Board()
        for y in (0, 1, 3, 4):
            board.add_piece((2, y), W)
        board.add_piece((1, 2), W)
        store = GameStore(state=make_state(board))

        state = store.start_move((1, 2), (2, 2), 0)

        assert state.winner is not None
        assert state.winner.player == GameResult.WHITE
        assert state.winner.condition == WinCondition.ROAD

    def test_flat_win_when_pieces_run_out(self, make_state):
        """最後の持ち駒を置くと平石の数で決着することを確認"""
        board = Board()
        board.add_piece((0, 0), W)
        board.add_piece((2, 2), W)
        board.add_piece((4, 4), B)
        store = GameStore(state=make_state(board, white_stones=1, white_capstones=0))

        state = store.place_stone((1, 3), W)

        assert state.white_stones == 0
        assert state.winner.condition == WinCondition.FLAT
        assert state.winner.player == GameResult.WHITE
        assert state.winner.territory.white == 3
        assert state.winner.territory.black == 1

    def test_flat_draw(self, make_state):
        board = Board()
        board.add_piece((0, 0), W)
        board.add_piece((4, 4), B)
        state = make_state(
            board,
            current_player=Player.BLACK,
            black_stones=1,
            black_capstones=0,
        )
        store = GameStore(state=state)

        # 黒が立石を置いても平石の数は変わらない
        result = store.place_stone((2, 2), Stone.of(Player.BLACK, StoneKind.STANDING))

        assert result.winner.player == GameResult.DRAW
        assert result.winner.condition == WinCondition.FLAT

    def test_flat_win_on_full_board(self):
        """3x3 の盤面が埋まると平石の数で決着することを確認"""
        board = Board(3)
        # 道ができない市松模様（中央は空けておく）
        for position in board.positions():
            if position == (1, 1):
                continue
            x, y = position
            board.add_piece(position, W if (x + y) % 2 == 0 else B)
        state = get_initial_state().model_copy(update={
            "board": board,
            "white_first_move_done": True,
            "black_first_move_done": True,
        })
        store = GameStore(state=state)

        result = store.place_stone((1, 1), Stone.of(Player.WHITE, StoneKind.STANDING))

        assert result.board.is_full()
        assert result.winner.condition == WinCondition.FLAT
        assert result.winner.player == GameResult.DRAW
        assert result.winner.territory.white == 4
        assert result.winner.territory.black == 4


class TestGameOver:
    """終了後の状態"""

    @pytest.fixture
    def finished_store(self, store):
        play(store, [
            ((4, 4), B), ((0, 0), W),
            ((0, 1), W), ((4, 3), B),
            ((0, 2), W), ((4, 2), B),
            ((0, 3), W), ((4, 1), B),
            ((0, 4), W),
        ])
        assert store.state.is_game_over
        return store

    def test_commands_rejected_after_game_over(self, finished_store):
        state = finished_store.state

        assert finished_store.place_stone((2, 2), B) is state
        assert finished_store.select_stack((4, 4), 0) is state
        assert finished_store.start_move((4, 4), (3, 4), 0) is state
        assert finished_store.end_turn() is state

    def test_reset_after_game_over(self, finished_store):
        state = finished_store.reset()

        assert state.winner is None
        assert state.board.count_pieces() == 0
        assert finished_store.get_current_player() == Player.WHITE

    def test_winner_in_snapshot(self, finished_store):
        data = finished_store.state.to_dict()
        assert data["winner"]["player"] == "white"
        assert data["winner"]["condition"] == "road"
