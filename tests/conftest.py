"""
pytest共通設定とフィクスチャ
"""

import pytest
import sys
from pathlib import Path

# プロジェクトルートをパスに追加
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


@pytest.fixture
def empty_board():
    """空の5x5盤面を提供するフィクスチャ"""
    from tak.engine import Board
    return Board()


@pytest.fixture
def initial_state():
    """初期状態（白の手番、最初の手はまだ）を提供するフィクスチャ"""
    from tak.engine import get_initial_state
    return get_initial_state()


@pytest.fixture
def store():
    """初期状態のストアを提供するフィクスチャ"""
    from tak.engine import GameStore
    return GameStore()


@pytest.fixture
def make_state():
    """
    任意の盤面から、両者の最初の手が済んだ状態を作るフィクスチャ
    例: make_state(board, current_player=Player.BLACK, selected_cell=(1, 0))
    """
    from tak.engine import get_initial_state

    def _make_state(board, **overrides):
        state = get_initial_state()
        update = {
            "board": board,
            "white_first_move_done": True,
            "black_first_move_done": True,
        }
        update.update(overrides)
        return state.model_copy(update=update)

    return _make_state
