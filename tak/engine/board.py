"""
Tak の盤面を管理するモジュール
"""

from typing import Iterator, List, Optional, Tuple

from .config import BOARD_SIZE
from .piece import Player, Stone

# 盤上の座標 (x, y)。x は列、y は行（上が 0）
Position = Tuple[int, int]


class Stack:
    """一つのマスに積まれた石を管理するクラス"""

    def __init__(self, pieces: Optional[List[Stone]] = None):
        self.pieces: List[Stone] = list(pieces) if pieces else []  # 下から上への石のリスト

    def __len__(self):
        return len(self.pieces)

    def __eq__(self, other):
        if not isinstance(other, Stack):
            return NotImplemented
        return self.pieces == other.pieces

    def is_empty(self) -> bool:
        return len(self.pieces) == 0

    def add_piece(self, piece: Stone):
        """スタックの一番上に石を追加"""
        self.pieces.append(piece)

    def get_top_piece(self) -> Optional[Stone]:
        """一番上の石を取得（削除はしない）"""
        if self.is_empty():
            return None
        return self.pieces[-1]

    def get_piece_at_level(self, level: int) -> Optional[Stone]:
        """
        指定されたレベルの石を取得
        level: 0から始まるインデックス（0=最下層、len-1=最上層）
        """
        if level < 0 or level >= len(self.pieces):
            return None
        return self.pieces[level]

    def get_height(self) -> int:
        """スタックの高さを返す"""
        return len(self.pieces)

    def split_at(self, level: int) -> List[Stone]:
        """
        level から上の石を持ち上げて返す（下から上の順）
        level より下の石はスタックに残る
        """
        carried = self.pieces[level:]
        self.pieces = self.pieces[:level]
        return carried

    def flatten_top(self) -> bool:
        """一番上の立石を倒す。倒したらTrue"""
        top = self.get_top_piece()
        if top is None or not top.is_standing:
            return False
        self.pieces[-1] = top.flattened()
        return True

    def __str__(self):
        if self.is_empty():
            return "   "
        return "/".join(str(piece) for piece in self.pieces)

    def to_dict(self) -> List[dict]:
        """スタックを辞書形式に変換（描画用）"""
        return [piece.to_dict() for piece in self.pieces]


class Board:
    """Tak のゲームボードを表すクラス"""

    def __init__(self, size: int = BOARD_SIZE):
        self.size = size
        # size x size の盤面を初期化（stacks[y][x]）
        self.stacks: List[List[Stack]] = [
            [Stack() for _ in range(size)]
            for _ in range(size)
        ]

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return self.size == other.size and self.stacks == other.stacks

    def get_stack(self, position: Position) -> Stack:
        """指定位置のスタックを取得"""
        if not self.is_valid_position(position):
            raise ValueError(f"Invalid position: {position}")
        x, y = position
        return self.stacks[y][x]

    def is_valid_position(self, position: Position) -> bool:
        """位置が盤面内か確認"""
        x, y = position
        return 0 <= x < self.size and 0 <= y < self.size

    def is_occupied(self, position: Position) -> bool:
        """指定位置に石があるか確認"""
        return not self.get_stack(position).is_empty()

    def get_top_piece(self, position: Position) -> Optional[Stone]:
        """指定位置の一番上の石を取得"""
        return self.get_stack(position).get_top_piece()

    def get_top_piece_owner(self, position: Position) -> Optional[Player]:
        """指定位置の一番上の石の所有者を取得"""
        piece = self.get_top_piece(position)
        return piece.color if piece else None

    def get_stack_height(self, position: Position) -> int:
        """指定位置のスタック高さを取得"""
        return self.get_stack(position).get_height()

    def add_piece(self, position: Position, piece: Stone):
        """指定位置に石を積む（ルール判定は行わない）"""
        self.get_stack(position).add_piece(piece)

    def positions(self) -> Iterator[Position]:
        """全マスの座標を行優先で返す"""
        for y in range(self.size):
            for x in range(self.size):
                yield (x, y)

    def is_full(self) -> bool:
        """全マスに石があるか"""
        return all(not stack.is_empty() for row in self.stacks for stack in row)

    def count_pieces(self) -> int:
        """盤上の石の総数"""
        return sum(len(stack) for row in self.stacks for stack in row)

    def copy(self) -> 'Board':
        """盤面のコピーを作成（石は不変なので共有してよい）"""
        new_board = Board(self.size)
        new_board.stacks = [
            [Stack(stack.pieces) for stack in row]
            for row in self.stacks
        ]
        return new_board

    def __str__(self):
        """盤面の文字列表現を返す"""
        cell_width = 8
        separator_length = self.size * (cell_width + 1) + 1

        result = []

        # 列インデックスヘッダー
        header = "   "
        for i in range(self.size):
            header += f"{i:^{cell_width}}|"
        result.append(header)

        # 区切り線
        result.append("  " + "-" * separator_length)

        for y in range(self.size):
            row_str = f"{y} |"
            for x in range(self.size):
                stack = self.stacks[y][x]
                if stack.is_empty():
                    row_str += " " * cell_width + "|"
                else:
                    row_str += f"{str(stack):^{cell_width}}|"
            result.append(row_str)
            result.append("  " + "-" * separator_length)

        return "\n".join(result)

    def to_dict(self) -> dict:
        """盤面を辞書形式に変換（描画用）"""
        return {
            "size": self.size,
            "board": [
                [{"pieces": stack.to_dict()} for stack in row]
                for row in self.stacks
            ],
        }
