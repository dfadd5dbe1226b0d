"""
ゲーム状態に対するアクション（リデューサへの入力）を定義するモジュール
"""

from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from .board import Position
from .piece import Stone


class _Action(BaseModel):
    model_config = ConfigDict(frozen=True)


class PlaceStone(_Action):
    """持ち駒から石を置く"""
    type: Literal["place_stone"] = "place_stone"
    position: Position
    stone: Stone


class SelectStack(_Action):
    """
    動かすスタックを選択する
    position が None なら選択解除
    stack_index: 持ち上げる最下段の石のレベル
    """
    type: Literal["select_stack"] = "select_stack"
    position: Optional[Position] = None
    stack_index: Optional[int] = None


class StartMove(_Action):
    """スタック移動を開始する（最初の1マス）"""
    type: Literal["start_move"] = "start_move"
    from_pos: Position = Field(alias="from")
    to_pos: Position = Field(alias="to")
    stack_index: int

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class ContinueMove(_Action):
    """進行中の移動で次の石を落とす"""
    type: Literal["continue_move"] = "continue_move"
    to_pos: Position = Field(alias="to")

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class CancelMove(_Action):
    """進行中の移動を取り消す"""
    type: Literal["cancel_move"] = "cancel_move"


class EndTurn(_Action):
    """盤面を変えずに手番を渡す"""
    type: Literal["end_turn"] = "end_turn"


class Reset(_Action):
    """ゲームを初期状態に戻す"""
    type: Literal["reset"] = "reset"


Action = Annotated[
    Union[PlaceStone, SelectStack, StartMove, ContinueMove, CancelMove, EndTurn, Reset],
    Field(discriminator="type"),
]

_action_adapter = TypeAdapter(Action)


def parse_action(data: dict) -> Action:
    """
    辞書からアクションを復元する
    例: {"type": "continue_move", "to": [2, 0]}
    不正な入力は pydantic.ValidationError を送出する
    """
    return _action_adapter.validate_python(data)
