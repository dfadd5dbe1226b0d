"""
ゲームストア

描画側がエンジンを呼び出すための窓口。
コマンドはリデューサにアクションを送り、新しい状態を返す。
クエリは現在の状態から計算するだけで状態を変えない。
"""

import logging
from typing import Callable, List, Optional, Tuple

from .actions import (
    Action,
    CancelMove,
    ContinueMove,
    EndTurn,
    PlaceStone,
    Reset,
    SelectStack,
    StartMove,
)
from .board import Position
from .config import DEFAULT_CONFIG, GameConfig
from .piece import Player, Stone
from .reducer import game_reducer
from .state import GameState, get_initial_state
from .validator import MoveValidator

logger = logging.getLogger(__name__)

Listener = Callable[[GameState], None]


class GameStore:
    """ゲーム状態を保持し、変化を購読者に通知するクラス"""

    def __init__(self, config: GameConfig = DEFAULT_CONFIG, state: Optional[GameState] = None):
        self._state = state if state is not None else get_initial_state(config)
        self._listeners: List[Listener] = []

    @property
    def state(self) -> GameState:
        return self._state

    def dispatch(self, action: Action) -> GameState:
        """アクションを適用し、状態が変わったら購読者に通知する"""
        new_state = game_reducer(self._state, action)
        if new_state is not self._state:
            self._state = new_state
            for listener in list(self._listeners):
                listener(new_state)
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        状態の変化を購読する
        返り値: 購読を解除する関数
        """
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # コマンド

    def place_stone(self, position: Position, stone: Stone) -> GameState:
        return self.dispatch(PlaceStone(position=position, stone=stone))

    def select_stack(self, position: Optional[Position], stack_index: Optional[int]) -> GameState:
        return self.dispatch(SelectStack(position=position, stack_index=stack_index))

    def start_move(self, from_pos: Position, to_pos: Position, stack_index: int) -> GameState:
        return self.dispatch(StartMove(from_pos=from_pos, to_pos=to_pos, stack_index=stack_index))

    def continue_move(self, to_pos: Position) -> GameState:
        return self.dispatch(ContinueMove(to_pos=to_pos))

    def cancel_move(self) -> GameState:
        return self.dispatch(CancelMove())

    def end_turn(self) -> GameState:
        return self.dispatch(EndTurn())

    def reset(self) -> GameState:
        logger.info("game reset")
        return self.dispatch(Reset())

    # クエリ

    def is_valid_move(self, from_pos: Position, to_pos: Position) -> bool:
        return MoveValidator.is_valid_move(from_pos, to_pos, self._state)

    def get_current_player(self) -> Player:
        return self._state.current_player

    def get_selected_stack(self) -> Optional[Tuple[Position, int]]:
        return self._state.get_selected_stack()

    def get_valid_destinations(self) -> List[Position]:
        return MoveValidator.get_valid_destinations(self._state)
