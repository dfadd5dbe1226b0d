"""
Tak のゲームエンジン - パッケージ初期化
"""

from .piece import Player, Stone, StoneKind
from .board import Board, Stack, Position
from .config import BOARD_SIZE, PIECE_COUNTS, GameConfig, DEFAULT_CONFIG
from .move import Direction, MovingStack
from .actions import (
    Action,
    PlaceStone,
    SelectStack,
    StartMove,
    ContinueMove,
    CancelMove,
    EndTurn,
    Reset,
    parse_action,
)
from .validator import MoveValidator
from .win_condition import (
    WinCondition,
    GameResult,
    TerritoryCount,
    WinState,
    check_win_condition,
)
from .state import GameState, get_initial_state
from .reducer import game_reducer
from .store import GameStore

__all__ = [
    'Player',
    'Stone',
    'StoneKind',
    'Board',
    'Stack',
    'Position',
    'BOARD_SIZE',
    'PIECE_COUNTS',
    'GameConfig',
    'DEFAULT_CONFIG',
    'Direction',
    'MovingStack',
    'Action',
    'PlaceStone',
    'SelectStack',
    'StartMove',
    'ContinueMove',
    'CancelMove',
    'EndTurn',
    'Reset',
    'parse_action',
    'MoveValidator',
    'WinCondition',
    'GameResult',
    'TerritoryCount',
    'WinState',
    'check_win_condition',
    'GameState',
    'get_initial_state',
    'game_reducer',
    'GameStore',
]
