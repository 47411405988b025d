"""Horseモデル定義"""

from dataclasses import dataclass, replace


@dataclass
class Horse:
    """出走馬モデル

    ロスターが所有する馬と、レースごとのコピーの両方を表す。
    position と finish_time はレース単位のフィールドで、
    レースはロスターとは独立したコピーを保持する。

    Attributes:
        id: 馬ID（ロスター内で一意）
        name: 馬名
        condition: 調子（1〜100、トーナメント中は固定）
        color: 表示色
        position: 進捗率（0〜100、レース単位）
        finish_time: ゴールタイム（ミリ秒、シミュレーション前はNone）
    """

    id: int
    name: str
    condition: int
    color: str
    position: float = 0.0
    finish_time: float | None = None

    def for_race(self) -> "Horse":
        """レース単位のフィールドを初期化したコピーを返す"""
        return replace(self, position=0.0, finish_time=None)

    def __repr__(self) -> str:
        return f"<Horse(id={self.id!r}, name={self.name!r})>"
