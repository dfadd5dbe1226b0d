"""
スタック移動（複数マスにまたがる手）を表現するモジュール
"""

from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict

from .board import Board, Position
from .piece import Stone


class Direction(Enum):
    """移動方向（y は下向きが正）"""
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def delta(self) -> Tuple[int, int]:
        return self.value

    def step(self, position: Position) -> Position:
        """position からこの方向に1マス進んだ座標"""
        dx, dy = self.value
        x, y = position
        return (x + dx, y + dy)

    @staticmethod
    def between(from_pos: Position, to_pos: Position) -> Optional['Direction']:
        """
        隣接マスへの方向を返す
        直交する1マス移動でなければNone
        """
        delta = (to_pos[0] - from_pos[0], to_pos[1] - from_pos[1])
        for direction in Direction:
            if direction.value == delta:
                return direction
        return None


class MovingStack(BaseModel):
    """
    進行中のスタック移動

    direction: 移動開始時に固定される方向
    path: 通過したマス（移動元が先頭）
    held_pieces: まだ手に持っている石（先頭から順に落とす）
    initial_board: 移動開始前の盤面（キャンセル時に復元する）
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    direction: Direction
    path: Tuple[Position, ...]
    held_pieces: Tuple[Stone, ...]
    initial_board: Board

    @property
    def current_position(self) -> Position:
        """最後に石を落としたマス"""
        return self.path[-1]

    @property
    def next_position(self) -> Position:
        """移動方向の次のマス"""
        return self.direction.step(self.current_position)

    @property
    def next_piece(self) -> Stone:
        """次に落とす石"""
        return self.held_pieces[0]

    def to_dict(self) -> dict:
        return {
            "direction": self.direction.name.lower(),
            "path": [list(pos) for pos in self.path],
            "heldPieces": [piece.to_dict() for piece in self.held_pieces],
        }
