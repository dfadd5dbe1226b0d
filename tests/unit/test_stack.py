"""
単体テスト: スタック（1マスに積まれた石）のテスト
"""

import pytest
from tak.engine import Player, Stack, Stone, StoneKind


W = Stone.of(Player.WHITE)
B = Stone.of(Player.BLACK)


class TestStack:
    """スタックのテストクラス"""

    def test_empty_stack(self):
        """空のスタックの状態を確認"""
        stack = Stack()
        assert stack.is_empty()
        assert stack.get_height() == 0
        assert stack.get_top_piece() is None

    def test_top_piece_is_last_added(self):
        """一番上の石は最後に積んだ石であることを確認"""
        stack = Stack()
        stack.add_piece(W)
        stack.add_piece(B)

        assert stack.get_top_piece() == B
        assert stack.get_piece_at_level(0) == W
        assert stack.get_piece_at_level(2) is None
        assert stack.get_piece_at_level(-1) is None

    def test_split_at(self):
        """指定レベルから上を持ち上げると下から上の順で返ることを確認"""
        stack = Stack([B, W, B, W])
        carried = stack.split_at(1)

        assert carried == [W, B, W]
        assert stack.pieces == [B]

    def test_split_whole_stack(self):
        """レベル0で全ての石を持ち上げられることを確認"""
        stack = Stack([W, B])
        carried = stack.split_at(0)

        assert carried == [W, B]
        assert stack.is_empty()

    def test_flatten_top(self):
        """一番上の立石を倒せることを確認"""
        standing = Stone.of(Player.BLACK, StoneKind.STANDING)
        stack = Stack([W, standing])

        assert stack.flatten_top()
        assert stack.get_top_piece().kind == StoneKind.FLAT
        assert stack.get_top_piece().color == Player.BLACK

    def test_flatten_top_on_flat_does_nothing(self):
        """平石は倒す対象にならないことを確認"""
        stack = Stack([W])
        assert not stack.flatten_top()
        assert stack.pieces == [W]

    def test_constructor_copies_list(self):
        """コンストラクタに渡したリストを共有しないことを確認"""
        pieces = [W]
        stack = Stack(pieces)
        stack.add_piece(B)
        assert pieces == [W]

    def test_equality(self):
        """同じ石の並びのスタックは等しいことを確認"""
        assert Stack([W, B]) == Stack([W, B])
        assert Stack([W, B]) != Stack([B, W])
