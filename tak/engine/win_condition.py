"""
Tak の勝利判定（道の勝利と平石数の勝利）
"""

from enum import Enum
from typing import List, Optional, Set

from pydantic import BaseModel, ConfigDict

from .board import Board, Position
from .piece import Player


class WinCondition(Enum):
    """勝利条件"""
    ROAD = "road"  # 道が対辺をつないだ
    FLAT = "flat"  # 盤面が埋まった／駒切れでの平石数判定


class GameResult(Enum):
    """勝者（引き分けを含む）"""
    WHITE = "white"
    BLACK = "black"
    DRAW = "draw"

    @staticmethod
    def from_player(player: Player) -> 'GameResult':
        return GameResult(player.value)


class TerritoryCount(BaseModel):
    """各色が支配しているマスの数"""

    model_config = ConfigDict(frozen=True)

    white: int = 0
    black: int = 0


class WinState(BaseModel):
    """ゲーム終了時の結果（不変）"""

    model_config = ConfigDict(frozen=True)

    player: GameResult
    condition: WinCondition
    territory: TerritoryCount

    def to_dict(self) -> dict:
        return {
            "player": self.player.value,
            "condition": self.condition.value,
            "territory": self.territory.model_dump(),
        }


class ConnectedGroup:
    """同じ色の道駒でつながったマスの集まり"""

    def __init__(self):
        self.cells: Set[Position] = set()
        self.top_edge = False
        self.bottom_edge = False
        self.left_edge = False
        self.right_edge = False

    def is_road(self) -> bool:
        """上下または左右の辺をつないでいるか"""
        return (self.top_edge and self.bottom_edge) or (self.left_edge and self.right_edge)


def _is_road_cell(board: Board, position: Position, color: Player) -> bool:
    top_piece = board.get_top_piece(position)
    return top_piece is not None and top_piece.color == color and top_piece.is_road_piece()


def find_connected_group(
    board: Board,
    start: Position,
    color: Player,
    visited: Set[Position]
) -> ConnectedGroup:
    """
    start から4方向につながる color の道駒を探索する
    visited は盤面全体の探索で共有し、探索済みのマスは再訪しない
    """
    group = ConnectedGroup()
    last = board.size - 1
    stack: List[Position] = [start]

    while stack:
        position = stack.pop()
        if position in visited or not _is_road_cell(board, position, color):
            continue

        visited.add(position)
        group.cells.add(position)

        x, y = position
        if x == 0:
            group.left_edge = True
        if x == last:
            group.right_edge = True
        if y == 0:
            group.top_edge = True
        if y == last:
            group.bottom_edge = True

        for dx, dy in ((-1, 0), (1, 0), (0, -1), (0, 1)):
            neighbor = (x + dx, y + dy)
            if board.is_valid_position(neighbor) and neighbor not in visited:
                stack.append(neighbor)

    return group


def check_road_win(board: Board) -> Optional[Player]:
    """道を完成させた色を返す（白を先に調べる）"""
    visited: Set[Position] = set()

    for color in (Player.WHITE, Player.BLACK):
        for position in board.positions():
            if position in visited or not _is_road_cell(board, position, color):
                continue
            if find_connected_group(board, position, color, visited).is_road():
                return color

    return None


def count_territory(board: Board) -> TerritoryCount:
    """一番上が道駒（平石・冠石）のマスを色ごとに数える。立石は数えない"""
    white = 0
    black = 0
    for position in board.positions():
        top_piece = board.get_top_piece(position)
        if top_piece is None or not top_piece.is_road_piece():
            continue
        if top_piece.color == Player.WHITE:
            white += 1
        else:
            black += 1
    return TerritoryCount(white=white, black=black)


def should_check_flat_win(
    board: Board,
    white_stones: int,
    black_stones: int,
    white_capstones: int,
    black_capstones: int
) -> bool:
    """盤面が埋まったか、どちらかの持ち駒が尽きたか"""
    white_exhausted = white_stones == 0 and white_capstones == 0
    black_exhausted = black_stones == 0 and black_capstones == 0
    return board.is_full() or white_exhausted or black_exhausted


def check_win_condition(
    board: Board,
    white_stones: int,
    black_stones: int,
    white_capstones: int,
    black_capstones: int
) -> Optional[WinState]:
    """
    ゲームが終了したか判定する
    返り値: 終了していれば WinState、継続中なら None
    """
    road_winner = check_road_win(board)
    if road_winner is not None:
        return WinState(
            player=GameResult.from_player(road_winner),
            condition=WinCondition.ROAD,
            territory=count_territory(board),
        )

    if not should_check_flat_win(board, white_stones, black_stones, white_capstones, black_capstones):
        return None

    territory = count_territory(board)
    if territory.white > territory.black:
        player = GameResult.WHITE
    elif territory.black > territory.white:
        player = GameResult.BLACK
    else:
        player = GameResult.DRAW

    return WinState(player=player, condition=WinCondition.FLAT, territory=territory)
