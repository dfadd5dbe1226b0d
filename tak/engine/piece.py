"""
Tak の駒（石）とプレイヤーを定義するモジュール
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, model_validator


class Player(Enum):
    """プレイヤーの定義"""
    WHITE = "white"  # 先手（白）
    BLACK = "black"  # 後手（黒）

    @property
    def opponent(self):
        """相手プレイヤーを返す"""
        return Player.BLACK if self == Player.WHITE else Player.WHITE


class StoneKind(Enum):
    """石の置き方"""
    FLAT = "flat"          # 平石
    STANDING = "standing"  # 立石（壁）
    CAPSTONE = "capstone"  # 冠石


# 駒の表示名
STONE_SYMBOLS = {
    StoneKind.FLAT: "F",
    StoneKind.STANDING: "S",
    StoneKind.CAPSTONE: "C",
}


class Stone(BaseModel):
    """Tak の石を表すクラス（不変）"""

    model_config = ConfigDict(frozen=True)

    color: Player
    is_capstone: bool = False
    is_standing: bool = False

    @model_validator(mode="after")
    def _check_flags(self) -> "Stone":
        # 冠石は常に寝かせて置く
        if self.is_capstone and self.is_standing:
            raise ValueError("a capstone cannot be a standing stone")
        return self

    @classmethod
    def of(cls, color: Player, kind: StoneKind = StoneKind.FLAT) -> "Stone":
        """色と種類から石を作成"""
        return cls(
            color=color,
            is_capstone=kind == StoneKind.CAPSTONE,
            is_standing=kind == StoneKind.STANDING,
        )

    @property
    def kind(self) -> StoneKind:
        if self.is_capstone:
            return StoneKind.CAPSTONE
        if self.is_standing:
            return StoneKind.STANDING
        return StoneKind.FLAT

    def is_road_piece(self) -> bool:
        """道・陣地に数えられる駒か（平石と冠石）"""
        return not self.is_standing

    def blocks(self, moving: "Stone") -> bool:
        """
        moving をこの石の上に乗せられないならTrue
        冠石の上には何も乗れない。立石の上には冠石だけが乗れる（倒す）
        """
        if self.is_capstone:
            return True
        return self.is_standing and not moving.is_capstone

    def flattened(self) -> "Stone":
        """立石を倒した石を返す"""
        if not self.is_standing:
            return self
        return self.model_copy(update={"is_standing": False})

    def to_dict(self) -> dict:
        """石を辞書形式に変換（描画用）"""
        return {
            "color": self.color.value,
            "isCapstone": self.is_capstone,
            "isStanding": self.is_standing,
        }

    def __str__(self):
        """駒の文字列表現（例: 'wF', 'bS', 'wC'）"""
        prefix = 'w' if self.color == Player.WHITE else 'b'
        return f"{prefix}{STONE_SYMBOLS[self.kind]}"

    def __repr__(self):
        return f"Stone({self.kind.name}, {self.color.name})"
