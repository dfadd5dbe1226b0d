"""
ゲーム設定（盤面サイズと持ち駒数）
"""

from typing import Dict, Tuple

from pydantic import BaseModel, ConfigDict, Field

# 標準の盤面サイズ
BOARD_SIZE = 5

# 盤面サイズごとの各プレイヤーの持ち駒 (石, 冠石)
PIECE_COUNTS: Dict[int, Tuple[int, int]] = {
    3: (10, 0),
    4: (15, 0),
    5: (21, 1),
    6: (30, 1),
    7: (40, 2),
    8: (50, 2),
}


class GameConfig(BaseModel):
    """盤面サイズと初期持ち駒数"""

    model_config = ConfigDict(frozen=True)

    board_size: int = Field(default=BOARD_SIZE, ge=3, le=8)
    stones: int = Field(default=PIECE_COUNTS[BOARD_SIZE][0], ge=0)
    capstones: int = Field(default=PIECE_COUNTS[BOARD_SIZE][1], ge=0)

    @classmethod
    def for_size(cls, board_size: int) -> "GameConfig":
        """標準の持ち駒表から設定を作成"""
        if board_size not in PIECE_COUNTS:
            raise ValueError(f"Unsupported board size: {board_size}")
        stones, capstones = PIECE_COUNTS[board_size]
        return cls(board_size=board_size, stones=stones, capstones=capstones)


DEFAULT_CONFIG = GameConfig()
