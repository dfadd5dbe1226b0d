"""
ゲーム状態（リデューサが扱う不変スナップショット）
"""

from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict

from .board import Board, Position
from .config import DEFAULT_CONFIG, GameConfig
from .move import MovingStack
from .piece import Player
from .win_condition import WinState


class GameState(BaseModel):
    """
    ゲームの状態を表すクラス

    盤面は書き換えずに、変更のたびにコピーした盤面を持つ新しい状態を作る。
    winner が設定された後はリセット以外のアクションを受け付けない。
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    board: Board
    current_player: Player = Player.WHITE
    selected_cell: Optional[Position] = None
    selected_stack_index: Optional[int] = None
    moving_stack: Optional[MovingStack] = None
    white_stones: int
    black_stones: int
    white_capstones: int
    black_capstones: int
    white_first_move_done: bool = False
    black_first_move_done: bool = False
    winner: Optional[WinState] = None
    config: GameConfig = DEFAULT_CONFIG

    @property
    def is_game_over(self) -> bool:
        return self.winner is not None

    @property
    def is_moving(self) -> bool:
        return self.moving_stack is not None

    def stones_for(self, player: Player) -> int:
        """残りの石の数"""
        return self.white_stones if player == Player.WHITE else self.black_stones

    def capstones_for(self, player: Player) -> int:
        """残りの冠石の数"""
        return self.white_capstones if player == Player.WHITE else self.black_capstones

    def first_move_done(self, player: Player) -> bool:
        return self.white_first_move_done if player == Player.WHITE else self.black_first_move_done

    def get_selected_stack(self) -> Optional[Tuple[Position, int]]:
        """選択中のスタック (位置, レベル)。未選択ならNone"""
        if self.selected_cell is None or self.selected_stack_index is None:
            return None
        return self.selected_cell, self.selected_stack_index

    def total_pieces(self) -> int:
        """盤上・手の中・持ち駒すべての石の数"""
        held = len(self.moving_stack.held_pieces) if self.moving_stack else 0
        inventory = self.white_stones + self.black_stones + self.white_capstones + self.black_capstones
        return self.board.count_pieces() + held + inventory

    def to_dict(self) -> dict:
        """ゲーム状態を辞書形式に変換（描画用）"""
        return {
            "board": self.board.to_dict()["board"],
            "boardSize": self.board.size,
            "currentPlayer": self.current_player.value,
            "selectedCell": list(self.selected_cell) if self.selected_cell else None,
            "selectedStackIndex": self.selected_stack_index,
            "movingStack": self.moving_stack.to_dict() if self.moving_stack else None,
            "whiteStones": self.white_stones,
            "blackStones": self.black_stones,
            "whiteCapstones": self.white_capstones,
            "blackCapstones": self.black_capstones,
            "whiteFirstMoveDone": self.white_first_move_done,
            "blackFirstMoveDone": self.black_first_move_done,
            "winner": self.winner.to_dict() if self.winner else None,
        }


def get_initial_state(config: GameConfig = DEFAULT_CONFIG) -> GameState:
    """空の盤面と満杯の持ち駒で始まる状態"""
    return GameState(
        board=Board(config.board_size),
        white_stones=config.stones,
        black_stones=config.stones,
        white_capstones=config.capstones,
        black_capstones=config.capstones,
        config=config,
    )
