"""
単体テスト: アクションの生成と辞書からの復元
"""

import pytest
from pydantic import ValidationError

from tak.engine import (
    CancelMove,
    ContinueMove,
    EndTurn,
    PlaceStone,
    Player,
    Reset,
    SelectStack,
    StartMove,
    StoneKind,
    parse_action,
)


class TestParseAction:
    """辞書からのアクション復元"""

    def test_place_stone(self):
        action = parse_action({
            "type": "place_stone",
            "position": [1, 2],
            "stone": {"color": "black", "is_standing": True},
        })

        assert isinstance(action, PlaceStone)
        assert action.position == (1, 2)
        assert action.stone.color == Player.BLACK
        assert action.stone.kind == StoneKind.STANDING

    def test_start_move_uses_from_and_to(self):
        action = parse_action({"type": "start_move", "from": [0, 0], "to": [1, 0], "stack_index": 2})

        assert isinstance(action, StartMove)
        assert action.from_pos == (0, 0)
        assert action.to_pos == (1, 0)
        assert action.stack_index == 2

    def test_continue_move(self):
        action = parse_action({"type": "continue_move", "to": [3, 4]})
        assert action == ContinueMove(to_pos=(3, 4))

    def test_select_stack_without_position(self):
        action = parse_action({"type": "select_stack"})
        assert action == SelectStack()

    @pytest.mark.parametrize("name, cls", [
        ("cancel_move", CancelMove),
        ("end_turn", EndTurn),
        ("reset", Reset),
    ])
    def test_simple_actions(self, name, cls):
        assert isinstance(parse_action({"type": name}), cls)

    def test_unknown_type(self):
        with pytest.raises(ValidationError):
            parse_action({"type": "undo"})

    def test_invalid_stone(self):
        """立てた冠石は復元できないことを確認"""
        with pytest.raises(ValidationError):
            parse_action({
                "type": "place_stone",
                "position": [0, 0],
                "stone": {"color": "white", "is_capstone": True, "is_standing": True},
            })

    def test_actions_are_immutable(self):
        action = ContinueMove(to_pos=(1, 1))
        with pytest.raises(ValidationError):
            action.to_pos = (2, 2)
