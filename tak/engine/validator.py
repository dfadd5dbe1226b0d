"""
Tak の手の合法性判定を行うモジュール
"""

from typing import TYPE_CHECKING, List, Optional

from .board import Board, Position
from .move import Direction
from .piece import Stone

if TYPE_CHECKING:
    from .state import GameState


class MoveValidator:
    """置き手とスタック移動の合法性を判定するクラス（副作用なし）"""

    @staticmethod
    def is_valid_placement_drop(position: Position, board: Board) -> bool:
        """
        石を置けるマスか確認
        空マス、または一番上が冠石でも立石でもないマスなら置ける
        """
        if not board.is_valid_position(position):
            return False

        top_piece = board.get_top_piece(position)
        if top_piece is None:
            return True

        return not (top_piece.is_capstone or top_piece.is_standing)

    @staticmethod
    def is_valid_stone_drop(position: Position, stone: Stone, board: Board) -> bool:
        """
        特定の石を落とせるマスか確認
        冠石の上には落とせない。立石の上には冠石だけが落とせる
        """
        if not board.is_valid_position(position):
            return False

        top_piece = board.get_top_piece(position)
        if top_piece is None:
            return True

        return not top_piece.blocks(stone)

    @staticmethod
    def is_valid_move(from_pos: Position, to_pos: Position, state: 'GameState') -> bool:
        """
        スタック移動の1ステップが合法か確認

        移動前: from_pos で選択中のスタックから隣接マスへ
        移動中: 現在地に落とす、または固定された方向の次のマスへ
        """
        board = state.board

        if not board.is_valid_position(to_pos):
            return False

        if state.moving_stack is None:
            if state.selected_cell != from_pos or state.selected_stack_index is None:
                return False
            return MoveValidator.is_valid_initial_step(
                from_pos, to_pos, board, state.selected_stack_index
            )

        moving_stack = state.moving_stack

        # 現在地に落とすのは常に合法
        if to_pos == moving_stack.current_position:
            return True

        # 方向は移動開始時に固定される
        if to_pos != moving_stack.next_position:
            return False

        return MoveValidator._can_land(to_pos, moving_stack.next_piece, board)

    @staticmethod
    def is_valid_initial_step(
        from_pos: Position,
        to_pos: Position,
        board: Board,
        stack_index: int
    ) -> bool:
        """移動開始の1マス目が合法か確認"""
        if not board.is_valid_position(from_pos) or not board.is_valid_position(to_pos):
            return False

        # 直交する隣接マスのみ（斜め不可）
        if Direction.between(from_pos, to_pos) is None:
            return False

        moving_piece = board.get_stack(from_pos).get_piece_at_level(stack_index)
        if moving_piece is None:
            return False

        return MoveValidator._can_land(to_pos, moving_piece, board)

    @staticmethod
    def get_valid_destinations(state: 'GameState') -> List[Position]:
        """
        現在の選択（または移動中のスタック）から落とせるマスの一覧
        描画側のハイライト用
        """
        origin = MoveValidator._current_origin(state)
        if origin is None:
            return []

        candidates = [origin] if state.moving_stack is not None else []
        candidates.extend(direction.step(origin) for direction in Direction)

        return [
            pos for pos in candidates
            if MoveValidator.is_valid_move(origin, pos, state)
        ]

    @staticmethod
    def _current_origin(state: 'GameState') -> Optional[Position]:
        if state.moving_stack is not None:
            return state.moving_stack.current_position
        if state.selected_cell is None or state.selected_stack_index is None:
            return None
        return state.selected_cell

    @staticmethod
    def _can_land(to_pos: Position, moving_piece: Stone, board: Board) -> bool:
        """立石・冠石によるブロック判定"""
        target_piece = board.get_top_piece(to_pos)
        if target_piece is None:
            return True
        return not target_piece.blocks(moving_piece)
