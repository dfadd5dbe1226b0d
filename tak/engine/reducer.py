"""
ゲーム状態のリデューサ

game_reducer(state, action) は常に GameState を返す。
不正なアクションは例外にせず、受け取った状態をそのまま返す。
"""

import logging

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
from .board import Board, Position
from .move import Direction, MovingStack
from .piece import Stone
from .state import GameState, get_initial_state
from .validator import MoveValidator
from .win_condition import check_win_condition

logger = logging.getLogger(__name__)


def game_reducer(state: GameState, action: Action) -> GameState:
    """アクションを適用して次の状態を返す"""
    logger.debug("action %s (player=%s)", action, state.current_player.name)

    if isinstance(action, Reset):
        return get_initial_state(state.config)

    if state.winner is not None:
        return _reject(state, action, "game is over")

    if isinstance(action, PlaceStone):
        return _place_stone(state, action)
    elif isinstance(action, SelectStack):
        return _select_stack(state, action)
    elif isinstance(action, StartMove):
        return _start_move(state, action)
    elif isinstance(action, ContinueMove):
        return _continue_move(state, action)
    elif isinstance(action, CancelMove):
        return _cancel_move(state, action)
    elif isinstance(action, EndTurn):
        return _end_turn(state, action)

    return _reject(state, action, "unknown action")


def _reject(state: GameState, action: Action, reason: str) -> GameState:
    logger.debug("rejected %s: %s", type(action).__name__, reason)
    return state


def _place_stone(state: GameState, action: PlaceStone) -> GameState:
    """
    持ち駒を置く

    各プレイヤーの最初の手は相手の平石を置く。
    それ以降は自分の色の石（平石・立石・冠石）だけを置ける。
    """
    position, stone = action.position, action.stone
    player = state.current_player

    if state.moving_stack is not None:
        return _reject(state, action, "move in progress")

    if not state.first_move_done(player):
        if stone.color != player.opponent or stone.is_capstone or stone.is_standing:
            return _reject(state, action, "first move must be an opponent flat")
    elif stone.color != player:
        return _reject(state, action, "stone is not the mover's color")

    if not state.board.is_valid_position(position) or state.board.is_occupied(position):
        return _reject(state, action, "target cell is not empty")

    if stone.is_capstone:
        if state.capstones_for(stone.color) <= 0:
            return _reject(state, action, "no capstones left")
    elif state.stones_for(stone.color) <= 0:
        return _reject(state, action, "no stones left")

    new_board = state.board.copy()
    new_board.add_piece(position, stone)

    update = {
        "board": new_board,
        "current_player": player.opponent,
        "selected_cell": None,
        "selected_stack_index": None,
        f"{player.value}_first_move_done": True,
    }
    if stone.is_capstone:
        field = f"{stone.color.value}_capstones"
        update[field] = state.capstones_for(stone.color) - 1
    else:
        field = f"{stone.color.value}_stones"
        update[field] = state.stones_for(stone.color) - 1

    return _with_win_check(state.model_copy(update=update))


def _select_stack(state: GameState, action: SelectStack) -> GameState:
    """動かすスタックを選ぶ（position が None なら選択解除）"""
    if state.moving_stack is not None:
        return _reject(state, action, "move in progress")

    if action.position is None:
        return state.model_copy(update={"selected_cell": None, "selected_stack_index": None})

    if not state.board.is_valid_position(action.position):
        return _reject(state, action, "position out of bounds")

    if not _controls(state, action.position):
        return _reject(state, action, "top piece is not the current player's")

    if action.stack_index is not None:
        if not 0 <= action.stack_index < state.board.get_stack_height(action.position):
            return _reject(state, action, "stack index out of range")

    return state.model_copy(update={
        "selected_cell": action.position,
        "selected_stack_index": action.stack_index,
    })


def _start_move(state: GameState, action: StartMove) -> GameState:
    """
    スタックを持ち上げて最初の1マスに一番下の石を落とす
    石が残っていれば MovingStack を作って移動を続ける
    """
    from_pos, to_pos, stack_index = action.from_pos, action.to_pos, action.stack_index

    if state.moving_stack is not None:
        return _reject(state, action, "move in progress")

    if not state.board.is_valid_position(from_pos) or not _controls(state, from_pos):
        return _reject(state, action, "source stack is not the current player's")

    if not MoveValidator.is_valid_initial_step(from_pos, to_pos, state.board, stack_index):
        return _reject(state, action, "illegal first step")

    direction = Direction.between(from_pos, to_pos)

    new_board = state.board.copy()
    carried = new_board.get_stack(from_pos).split_at(stack_index)
    _drop(new_board, to_pos, carried[0], flatten=True)
    held_pieces = carried[1:]

    if not held_pieces:
        return _finish_move(state, new_board)

    moving_stack = MovingStack(
        direction=direction,
        path=(from_pos, to_pos),
        held_pieces=tuple(held_pieces),
        initial_board=state.board.copy(),
    )
    return state.model_copy(update={
        "board": new_board,
        "moving_stack": moving_stack,
        "selected_cell": from_pos,
        "selected_stack_index": stack_index,
    })


def _continue_move(state: GameState, action: ContinueMove) -> GameState:
    """
    手に持っている先頭の石を落とす
    現在地に落とすときは経路を伸ばさない
    """
    moving_stack = state.moving_stack
    to_pos = action.to_pos

    if moving_stack is None:
        return _reject(state, action, "no move in progress")

    if not MoveValidator.is_valid_move(moving_stack.current_position, to_pos, state):
        return _reject(state, action, "illegal step")

    new_board = state.board.copy()
    stays = to_pos == moving_stack.current_position
    _drop(new_board, to_pos, moving_stack.next_piece, flatten=not stays)
    held_pieces = moving_stack.held_pieces[1:]

    if not held_pieces:
        return _finish_move(state, new_board)

    path = moving_stack.path if stays else moving_stack.path + (to_pos,)
    return state.model_copy(update={
        "board": new_board,
        "moving_stack": moving_stack.model_copy(update={
            "path": path,
            "held_pieces": held_pieces,
        }),
    })


def _cancel_move(state: GameState, action: CancelMove) -> GameState:
    """移動前の盤面に戻す"""
    if state.moving_stack is None:
        return _reject(state, action, "no move in progress")

    return state.model_copy(update={
        "board": state.moving_stack.initial_board.copy(),
        "moving_stack": None,
        "selected_cell": None,
        "selected_stack_index": None,
    })


def _end_turn(state: GameState, action: EndTurn) -> GameState:
    """盤面を変えずに手番を渡す"""
    # 移動中は手番を渡せない（CancelMove で戻す）
    if state.moving_stack is not None:
        return _reject(state, action, "move in progress")

    return state.model_copy(update={
        "current_player": state.current_player.opponent,
        "selected_cell": None,
        "selected_stack_index": None,
        "moving_stack": None,
    })


def _controls(state: GameState, position: Position) -> bool:
    """手番のプレイヤーがそのスタックを動かせるか"""
    if not state.first_move_done(state.current_player):
        return False
    return state.board.get_top_piece_owner(position) == state.current_player


def _drop(board: Board, position: Position, piece: Stone, flatten: bool):
    stack = board.get_stack(position)
    if flatten and piece.is_capstone:
        stack.flatten_top()
    stack.add_piece(piece)


def _finish_move(state: GameState, new_board: Board) -> GameState:
    """全ての石を落としたら手番交代して勝敗判定"""
    return _with_win_check(state.model_copy(update={
        "board": new_board,
        "moving_stack": None,
        "selected_cell": None,
        "selected_stack_index": None,
        "current_player": state.current_player.opponent,
    }))


def _with_win_check(state: GameState) -> GameState:
    winner = check_win_condition(
        state.board,
        state.white_stones,
        state.black_stones,
        state.white_capstones,
        state.black_capstones,
    )
    if winner is None:
        return state

    logger.info(
        "game over: %s wins by %s (white=%d, black=%d)",
        winner.player.value,
        winner.condition.value,
        winner.territory.white,
        winner.territory.black,
    )
    return state.model_copy(update={"winner": winner})
